"""HTTP transport returning decoded JSON documents."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol

import httpx

from fflclient.config import ClientSettings
from fflclient.errors import NotFoundError, UpstreamError


logger = logging.getLogger(__name__)

QueryParams = Mapping[str, Any]


class JSONFetcher(Protocol):
    async def fetch_json(
        self,
        url: str,
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        ...


class HttpxFetcher:
    """GET requests over a shared ``httpx.AsyncClient``; no retries.

    404 becomes ``NotFoundError`` and any other non-2xx status ``UpstreamError``.
    Connection failures surface as the ``httpx`` exceptions that caused them.
    """

    def __init__(self, client: httpx.AsyncClient | None = None, *, settings: ClientSettings | None = None):
        settings = settings or ClientSettings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=settings.timeout)

    async def fetch_json(
        self,
        url: str,
        params: Optional[QueryParams] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        logger.debug("GET %s params=%s", url, params)
        response = await self._client.get(url, params=params, headers=headers)
        if response.status_code == 404:
            raise NotFoundError(str(response.url))
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise UpstreamError(response.status_code, str(response.url)) from exc
        return response.json()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxFetcher":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
