"""Decode href-linked sub-resources into flat codes.

Read payloads express foreign keys as links, e.g.
``<account href="https://api.example.com/accounts/abc123"/>``. The code is
the trailing path segment of the link.
"""

from urllib.parse import unquote, urlsplit

from lxml import etree

from recurly_xml.core.errors import ParseError


def href_segment(href: str) -> str:
    """Return the last non-empty path segment of ``href``.

    Raises:
        ParseError: If the link has no path segments.
    """
    segments = [s for s in urlsplit(href).path.split("/") if s]
    if not segments:
        raise ParseError(f"href has no path segments: {href!r}")
    return unquote(segments[-1])


def _href(element: etree._Element) -> str:
    href = element.get("href")
    if href is None:
        raise ParseError(f"<{element.tag}> has no href attribute")
    return href


def decode_href_string(element: etree._Element | None) -> str | None:
    if element is None:
        return None
    return href_segment(_href(element))


def decode_href_int(element: etree._Element | None) -> int | None:
    if element is None:
        return None
    segment = href_segment(_href(element))
    try:
        return int(segment)
    except ValueError as exc:
        raise ParseError(f"<{element.tag}> href does not end in a number: {segment!r}") from exc
