"""Low-level helpers for reading and writing provider XML with lxml."""

from typing import Any

from lxml import etree

from recurly_xml.core.errors import ParseError

NIL_VALUES = ("true", "nil")

# Provider payloads and webhooks are untrusted input
_PARSER = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
    remove_blank_text=True,
)


def parse_document(payload: bytes | str) -> etree._Element:
    """Parse a full XML document and return its root element.

    Raises:
        ParseError: If the payload is empty or not well-formed.
    """
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    if not payload or not payload.strip():
        raise ParseError("Empty XML document")
    try:
        return etree.fromstring(payload, parser=_PARSER)
    except etree.XMLSyntaxError as exc:
        raise ParseError(f"Malformed XML: {exc}") from exc


def local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def is_nil(element: etree._Element) -> bool:
    """True when the element carries the provider's explicit-null marker."""
    return element.get("nil") in NIL_VALUES


def child_text(parent: etree._Element, tag: str) -> str | None:
    """Text of the first ``tag`` child; None when missing, nil or empty."""
    element = parent.find(tag)
    if element is None or is_nil(element):
        return None
    return element.text or None


def child_int(parent: etree._Element, tag: str) -> int | None:
    text = child_text(parent, tag)
    if text is None or not text.strip():
        return None
    try:
        return int(text.strip())
    except ValueError as exc:
        raise ParseError(f"<{tag}> is not an integer: {text!r}") from exc


def child_float(parent: etree._Element, tag: str) -> float | None:
    text = child_text(parent, tag)
    if text is None or not text.strip():
        return None
    try:
        return float(text.strip())
    except ValueError as exc:
        raise ParseError(f"<{tag}> is not a number: {text!r}") from exc


def append_text(
    parent: etree._Element,
    tag: str,
    value: Any,
    omit_empty: bool = True,
) -> etree._Element | None:
    """Append ``<tag>value</tag>`` to ``parent``.

    With ``omit_empty`` a None or empty-string value appends nothing.
    """
    if omit_empty and (value is None or value == ""):
        return None
    element = etree.SubElement(parent, tag)
    if isinstance(value, bool):
        element.text = "true" if value else "false"
    elif value is not None:
        element.text = str(value)
    return element


def to_bytes(root: etree._Element) -> bytes:
    return etree.tostring(
        root,
        encoding="UTF-8",
        xml_declaration=True,
        pretty_print=False,
    )
