"""Shared plumbing for resource services."""

from typing import TYPE_CHECKING
from urllib.parse import quote

from lxml import etree

from recurly_xml.codec.elements import local_name
from recurly_xml.core.errors import ParseError

if TYPE_CHECKING:
    from recurly_xml.core.client import Client


def build_path(*segments: str | int) -> str:
    """Join path segments, escaping each one (codes may contain ``/`` or spaces)."""
    return "/".join(quote(str(segment), safe="") for segment in segments)


class ResourceService:
    """Base class for services bound to a single :class:`Client`."""

    def __init__(self, client: "Client") -> None:
        self.client = client

    @staticmethod
    def expect_root(root: etree._Element | None, name: str) -> etree._Element:
        """Return ``root`` if it is a ``<name>`` element.

        Raises:
            ParseError: If the body was empty or has a different root.
        """
        if root is None:
            raise ParseError(f"Expected <{name}> but the response body was empty")
        if local_name(root) != name:
            raise ParseError(f"Expected <{name}> but got <{local_name(root)}>")
        return root
