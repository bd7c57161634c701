"""
Remote access to the TRaSH Guides repository.

Documents are read from the raw content host; directory listings come from
the GitHub contents API. Both return JSON.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .config import TrashConfig
from .errors import NetworkError
from .utils.rate_limit import RateLimiter

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".json"


class TrashFetcher:
    """Fetches JSON documents and directory listings over HTTP."""

    def __init__(
        self,
        config: TrashConfig | None = None,
        client: httpx.AsyncClient | None = None,
        rate_limiter: RateLimiter | None = None,
    ) -> None:
        self._config = config or TrashConfig()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=self._config.timeout,
            follow_redirects=True,
            headers=self._headers(),
        )
        self._rate_limiter = rate_limiter or RateLimiter(
            requests_per_minute=self._config.rate_limit_rpm,
            burst=self._config.rate_limit_burst,
            enabled=self._config.rate_limit_enabled,
        )

    @property
    def rate_limiter(self) -> RateLimiter:
        return self._rate_limiter

    def document_url(self, path: str) -> str:
        """URL of a document, given its path relative to the docs root."""
        return f"{self._config.base_url}/{path}"

    async def fetch_json(self, url: str) -> Any:
        """
        GET ``url`` and decode the body as JSON.

        Raises:
            NetworkError: non-2xx status, undecodable body, or transport failure
        """
        await self._rate_limiter.acquire()
        try:
            resp = await self._client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NetworkError(url, reason=str(e) or type(e).__name__) from e

        if not resp.is_success:
            raise NetworkError(url, resp.status_code, resp.reason_phrase)

        try:
            return resp.json()
        except ValueError as e:
            raise NetworkError(url, resp.status_code, f"invalid JSON: {e}") from e

    async def list_directory(self, path: str) -> list[str]:
        """
        Names of the JSON documents directly under ``path``, suffix removed.

        Sub-directories and non-JSON files are skipped.
        """
        url = f"{self._config.api_url}/{path}"
        entries = await self.fetch_json(url)
        if not isinstance(entries, list):
            raise NetworkError(url, reason="directory listing is not a JSON array")

        names = [
            entry["name"][: -len(DOCUMENT_SUFFIX)]
            for entry in entries
            if isinstance(entry, dict)
            and entry.get("type") == "file"
            and str(entry.get("name", "")).endswith(DOCUMENT_SUFFIX)
        ]
        logger.debug(f"Listed {len(names)} documents under {path}")
        return names

    async def aclose(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client:
            await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        return {
            "User-Agent": self._config.user_agent,
            "Accept": "application/json",
        }
