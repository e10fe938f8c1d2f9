"""Typed exceptions raised by the client, codecs and webhook parser."""

from dataclasses import dataclass


class RecurlyError(Exception):
    """Base class for every error raised by this library."""


class ParseError(RecurlyError):
    """A payload, nullable scalar, href link or number could not be decoded."""


class TransportError(RecurlyError):
    """
    The request never produced an HTTP response.

    Wraps the underlying ``httpx.TransportError`` (connection refused,
    timeout, TLS failure, ...), available as ``__cause__``.
    """


class UnrecognizedWebhook(RecurlyError):
    """The webhook root element does not match any known notification."""

    def __init__(self, root_name: str):
        self.root_name = root_name
        super().__init__(f"Unrecognized webhook notification: {root_name!r}")


@dataclass(frozen=True)
class FieldError:
    """A single field-level message from a 422 response."""

    field: str | None
    symbol: str | None
    message: str


class RequestError(RecurlyError):
    """The API answered with a non-success status."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        symbol: str | None = None,
        description: str | None = None,
    ):
        self.status_code = status_code
        self.body = body
        self.symbol = symbol
        self.description = description
        detail = description or symbol or body[:200]
        super().__init__(f"Request failed with status {status_code}: {detail}")


class NotFound(RequestError):
    """The identifier in the request path does not resolve (404)."""


class ValidationError(RequestError):
    """The API rejected the request body (422)."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        errors: list[FieldError] | None = None,
        symbol: str | None = None,
        description: str | None = None,
    ):
        self.errors = errors or []
        if description is None and self.errors:
            description = "; ".join(
                f"{e.field}: {e.message}" if e.field else e.message for e in self.errors
            )
        super().__init__(status_code, body, symbol=symbol, description=description)


class RateLimited(RequestError):
    """Too many requests (429). Client should wait before retrying."""

    def __init__(
        self,
        status_code: int,
        body: str = "",
        retry_after: int | None = None,
        symbol: str | None = None,
        description: str | None = None,
    ):
        self.retry_after = retry_after
        super().__init__(status_code, body, symbol=symbol, description=description)
