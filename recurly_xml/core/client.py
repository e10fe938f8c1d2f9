"""HTTP client and shared request/response pipeline."""

import logging
from typing import Any

import httpx
from lxml import etree

from recurly_xml.codec.elements import local_name, parse_document
from recurly_xml.core.config import settings
from recurly_xml.core.errors import (
    FieldError,
    NotFound,
    ParseError,
    RateLimited,
    RequestError,
    TransportError,
    ValidationError,
)
from recurly_xml.services.account_service import AccountService
from recurly_xml.services.adjustment_service import AdjustmentService
from recurly_xml.services.invoice_service import InvoiceService
from recurly_xml.services.redemption_service import RedemptionService

logger = logging.getLogger(__name__)

XML_CONTENT_TYPE = "application/xml; charset=utf-8"


def _retry_after(response: httpx.Response) -> int | None:
    value = response.headers.get("Retry-After")
    if value is None or not value.strip().isdigit():
        return None
    return int(value.strip())


def _error_details(
    body: bytes,
) -> tuple[str | None, str | None, list[FieldError]]:
    """Extract (symbol, description, field errors) from an error body.

    Error pages that are not XML (proxies, load balancers) yield no details;
    the raw body stays available on the raised exception.
    """
    try:
        root = parse_document(body)
    except ParseError:
        return None, None, []

    name = local_name(root)
    if name == "errors":
        field_errors = [
            FieldError(
                field=e.get("field"),
                symbol=e.get("symbol"),
                message=(e.text or "").strip(),
            )
            for e in root.iterfind("error")
        ]
        return None, None, field_errors
    if name == "error":
        return root.findtext("symbol"), root.findtext("description"), []
    return None, None, []


def error_from_response(response: httpx.Response) -> RequestError:
    """Map a non-success response to the matching typed exception."""
    status = response.status_code
    symbol, description, field_errors = _error_details(response.content)
    body = response.text

    if status == 404:
        return NotFound(status, body, symbol=symbol, description=description)
    if status == 422:
        return ValidationError(
            status, body, errors=field_errors, symbol=symbol, description=description
        )
    if status == 429:
        return RateLimited(
            status,
            body,
            retry_after=_retry_after(response),
            symbol=symbol,
            description=description,
        )
    return RequestError(status, body, symbol=symbol, description=description)


class Client:
    """Synchronous client for the XML billing API.

    Each resource service is bound to this client at construction. The
    client owns its ``httpx.Client`` unless one is passed in, in which case
    the caller controls its lifecycle (and may use it to inject transports,
    proxies or timeouts).
    """

    def __init__(
        self,
        subdomain: str | None = None,
        api_key: str | None = None,
        base_url: str | None = None,
        http_client: httpx.Client | None = None,
        timeout: float | None = None,
    ):
        self.subdomain = subdomain or settings.subdomain
        self.api_key = api_key or settings.api_key
        if base_url:
            self.base_url = base_url.rstrip("/") + "/"
        elif subdomain:
            self.base_url = f"https://{subdomain}.recurly.com/v2/"
        else:
            self.base_url = settings.api_base_url
        self.timeout = timeout or settings.request_timeout

        self._owns_http = http_client is None
        if http_client is None:
            http_client = httpx.Client(timeout=self.timeout)
        self._http = http_client
        self._auth = httpx.BasicAuth(self.api_key, "")

        self.accounts = AccountService(self)
        self.adjustments = AdjustmentService(self)
        self.invoices = InvoiceService(self)
        self.redemptions = RedemptionService(self)

    def _headers(self, has_body: bool) -> dict[str, str]:
        headers = {
            "Accept": "application/xml",
            "X-Api-Version": settings.api_version,
            "User-Agent": settings.user_agent,
        }
        if has_body:
            headers["Content-Type"] = XML_CONTENT_TYPE
        return headers

    def request(
        self,
        method: str,
        action: str,
        params: dict[str, Any] | None = None,
        body: bytes | None = None,
    ) -> etree._Element | None:
        """Perform one round trip and return the parsed response root.

        Returns None when the response has no body (e.g. 204 on delete).

        Raises:
            TransportError: If no HTTP response was received.
            RequestError: Or one of its subclasses, on a non-2xx status.
            ParseError: If a success body is not well-formed XML.
        """
        url = f"{self.base_url}{action}"
        logger.debug("%s %s params=%s", method, action, params)

        try:
            response = self._http.request(
                method,
                url,
                params=params,
                content=body,
                headers=self._headers(body is not None),
                auth=self._auth,
            )
        except httpx.TransportError as exc:
            logger.warning("%s %s failed: %s", method, action, exc)
            raise TransportError(f"{method} {action} failed: {exc}") from exc

        logger.debug("%s %s -> %s", method, action, response.status_code)

        if not response.is_success:
            logger.warning(
                "%s %s returned status %s", method, action, response.status_code
            )
            raise error_from_response(response)

        if not response.content.strip():
            return None
        return parse_document(response.content)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
