"""Async client for the R2 storage proxy."""

import httpx

from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from r2gateway.config.logger import get_logger
from r2gateway.config.settings import R2Settings
from r2gateway.r2.schemas import R2Object

logger = get_logger(__name__)

SECRET_HEADER = "x-secret"
NOT_FOUND_BODY = "null"


@dataclass(frozen=True)
class R2Config:
    """Connection configuration, fixed for the lifetime of the client."""
    http: httpx.AsyncClient
    base: str
    public_base: str
    secret: str


class R2Client:
    """
    Key-based access to the storage proxy.

    Every privileged call is a single request to ``{base}/{key}`` carrying the
    shared secret in the ``x-secret`` header. Nothing is retried or cached,
    so one instance can be shared freely between concurrent callers.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base: str,
        public_base: str,
        secret: str,
        owns_client: bool = False,
    ):
        self.config = R2Config(http=client, base=base, public_base=public_base, secret=secret)
        self._owns_client = owns_client

    @classmethod
    def from_settings(
        cls, r2_settings: R2Settings, http_client: Optional[httpx.AsyncClient] = None
    ) -> "R2Client":
        """
        Build a client from settings.

        Args:
            r2_settings: Storage proxy settings
            http_client: Shared HTTP client. When omitted, a client with the
                configured timeout is created and closed by ``aclose``.
        """
        owns_client = http_client is None
        if owns_client:
            http_client = httpx.AsyncClient(timeout=r2_settings.timeout_seconds)
        logger.info(f"R2 client initialized for {r2_settings.base_url}")
        return cls(
            http_client,
            r2_settings.base_url,
            r2_settings.public_base_url,
            r2_settings.secret,
            owns_client=owns_client,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self.config.http.aclose()

    async def __aenter__(self) -> "R2Client":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def _url(self, key: str) -> str:
        return f"{self.config.base}/{key}"

    def _headers(self) -> dict:
        return {SECRET_HEADER: self.config.secret}

    async def head(self, key: str) -> Optional[R2Object]:
        """
        Fetch object metadata.

        Returns None both when the proxy answers with the ``null`` sentinel and
        when the body is not a valid metadata record. Values are not coerced:
        a size sent as a string or float makes the record invalid. The response
        status is not checked.
        """
        resp = await self.config.http.head(self._url(key), headers=self._headers())
        text = resp.text
        if text == NOT_FOUND_BODY:
            logger.debug(f"R2 object not found: {key}")
            return None
        try:
            return R2Object.model_validate_json(text, strict=True)
        except ValidationError as e:
            logger.debug(f"Unreadable metadata for {key} (status {resp.status_code}): {e}")
            return None

    async def get(self, key: str) -> bytes:
        """Download the object body. The response status is not checked."""
        resp = await self.config.http.get(self._url(key), headers=self._headers())
        logger.debug(f"Fetched {key}: status {resp.status_code}, {len(resp.content)} bytes")
        return resp.content

    async def put(self, key: str, value: bytes) -> None:
        """Upload ``value`` under ``key``. Raises httpx.HTTPStatusError on non-2xx."""
        logger.info(f"Uploading R2 object: {key}, size: {len(value)} bytes")
        resp = await self.config.http.put(self._url(key), headers=self._headers(), content=value)
        resp.raise_for_status()

    async def delete(self, key: str) -> None:
        """Delete ``key``. Raises httpx.HTTPStatusError on non-2xx."""
        logger.info(f"Deleting R2 object: {key}")
        resp = await self.config.http.delete(self._url(key), headers=self._headers())
        resp.raise_for_status()

    def public_url(self, key: str) -> str:
        return f"{self.config.public_base}/{key}"
