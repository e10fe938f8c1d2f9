"""Shared test fixtures for all test modules."""

import httpx
import pytest

from recurly_xml.core.client import Client

BASE_URL = "https://test.recurly.com/v2/"
API_KEY = "test_api_key"


class FakeApi:
    """Records requests and replays queued responses through httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response | Exception] = []

    def respond(
        self,
        status_code: int = 200,
        body: str | bytes = b"",
        headers: dict[str, str] | None = None,
    ) -> None:
        content = body.encode("utf-8") if isinstance(body, str) else body
        self._responses.append(
            httpx.Response(status_code, content=content, headers=headers or {})
        )

    def fail(self, exc: Exception) -> None:
        self._responses.append(exc)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self._responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def api():
    """Create a fake API endpoint."""
    return FakeApi()


@pytest.fixture
def client(api):
    """Create a Client wired to the fake API."""
    http_client = httpx.Client(transport=httpx.MockTransport(api))
    client = Client(api_key=API_KEY, base_url=BASE_URL, http_client=http_client)
    try:
        yield client
    finally:
        http_client.close()
