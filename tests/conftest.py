"""Shared fixtures: a storage client wired to an in-memory transport."""

from typing import Callable, List

import httpx
import pytest

from r2gateway.r2.client import R2Client


class FakeStore:
    """Records requests and answers each one with a canned response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.content = b""

    def respond(self, status_code: int = 200, content: bytes = b"") -> None:
        self.status_code = status_code
        self.content = content

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def make_client(store: FakeStore) -> Callable[[], R2Client]:
    def _make() -> R2Client:
        http = httpx.AsyncClient(transport=httpx.MockTransport(store.handler))
        return R2Client(
            http, "https://r2-proxy.internal", "https://cdn.example.com", "s3cr3t", owns_client=True
        )

    return _make


@pytest.fixture
def full_record() -> dict:
    """A complete metadata body as the proxy returns it."""
    return {
        "key": "twitter/1/2.png",
        "version": "v1",
        "size": 2048,
        "etag": "abc",
        "httpEtag": "\"abc\"",
        "uploaded": "2024-01-01T00:00:00.000Z",
        "httpMetadata": {
            "contentType": "image/png",
            "contentLanguage": "en",
            "contentDisposition": "inline",
            "contentEncoding": "identity",
            "cacheControl": "max-age=60",
            "cacheExpiry": "2024-02-01T00:00:00.000Z",
        },
        "customMetadata": {"owner": "bot", "source": "tweet"},
        "range": {"offset": 0, "length": 2048},
    }
