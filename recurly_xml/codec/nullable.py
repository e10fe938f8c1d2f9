"""Nullable boolean and timestamp codec.

The provider expresses an optional scalar three ways:

- element absent                               -> unset
- ``<taxable nil="true"></taxable>``           -> explicit null
- ``<taxable type="boolean">false</taxable>``  -> value

Absent and explicit null both decode to ``None``; a present value decodes to
``bool`` or a timezone-aware ``datetime``. ``False`` is never confused with
``None``. Encoding ``None`` omits the element entirely.
"""

from datetime import UTC, datetime

from lxml import etree

from recurly_xml.codec.elements import append_text, is_nil
from recurly_xml.core.errors import ParseError

_TRUE = frozenset({"true", "1"})
_FALSE = frozenset({"false", "0"})

TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _scalar_text(element: etree._Element) -> str | None:
    """Stripped text of a nullable element, or None when explicitly null."""
    if is_nil(element):
        return None
    text = (element.text or "").strip()
    if not text:
        raise ParseError(f"<{element.tag}> has no value and is not marked nil")
    return text


def decode_null_bool(element: etree._Element | None) -> bool | None:
    if element is None:
        return None
    text = _scalar_text(element)
    if text is None:
        return None
    lowered = text.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ParseError(f"<{element.tag}> is not a boolean: {text!r}")


def parse_time(text: str) -> datetime:
    """Parse an RFC 3339 timestamp; naive values are assumed to be UTC."""
    try:
        value = datetime.fromisoformat(text)
    except ValueError as exc:
        raise ParseError(f"Invalid timestamp: {text!r}") from exc
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value


def decode_null_time(element: etree._Element | None) -> datetime | None:
    if element is None:
        return None
    text = _scalar_text(element)
    if text is None:
        return None
    return parse_time(text)


def format_time(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime(TIME_FORMAT)


def append_null_bool(
    parent: etree._Element, tag: str, value: bool | None
) -> etree._Element | None:
    if value is None:
        return None
    return append_text(parent, tag, value)


def append_null_time(
    parent: etree._Element, tag: str, value: datetime | None
) -> etree._Element | None:
    if value is None:
        return None
    return append_text(parent, tag, format_time(value))
