"""
TRaSH Guides client.

Fetches and caches quality profiles, custom formats, naming schemes,
quality sizes and custom-format groups from the TRaSH Guides repository.

Usage::

    async with TrashClient() as trash:
        profiles = await trash.list_profiles("radarr")
        hdr = await trash.list_custom_formats("radarr", category="hdr")

Every lookup is cache-first. Single-document getters return None when the
fetch fails; list operations drop the documents that could not be fetched.
Directory listing failures are raised as NetworkError.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, TypeVar

import httpx

from .cache import TrashCache, TTLCache
from .categorizer import Categorizer
from .config import TrashConfig
from .errors import NetworkError
from .fetcher import TrashFetcher
from .types import (
    QUALITY_SIZE_TYPES,
    CFGroup,
    CustomFormat,
    CustomFormatSummary,
    Naming,
    ProfileSummary,
    QualityProfile,
    QualitySize,
    TrashService,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TrashClient:
    """Cache-first access to TRaSH Guides documents."""

    def __init__(
        self,
        config: TrashConfig | None = None,
        *,
        cache: TrashCache | None = None,
        fetcher: TrashFetcher | None = None,
        http_client: httpx.AsyncClient | None = None,
        categorizer: Categorizer | None = None,
    ) -> None:
        self._config = config or TrashConfig()
        self._cache = cache or TrashCache(ttl=self._config.cache_ttl)
        self._fetcher = fetcher or TrashFetcher(self._config, client=http_client)
        self._categorizer = categorizer or Categorizer()

    async def __aenter__(self) -> "TrashClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._fetcher.aclose()

    @property
    def config(self) -> TrashConfig:
        return self._config

    @property
    def cache(self) -> TrashCache:
        return self._cache

    # ------------------------------------------------------------------
    # Quality profiles
    # ------------------------------------------------------------------

    async def list_profiles(self, service: TrashService | str) -> list[ProfileSummary]:
        """Name and description of every profile that could be fetched."""
        svc = TrashService.parse(service)
        names = await self._cached_listing(self._cache.profile_lists, svc, "quality-profiles")

        profiles = await asyncio.gather(*[self.get_profile(svc, name) for name in names])
        return [
            ProfileSummary(name=p.name, description=p.description)
            for p in profiles
            if p is not None
        ]

    async def get_profile(self, service: TrashService | str, name: str) -> QualityProfile | None:
        svc = TrashService.parse(service)
        return await self._cached_document(
            self._cache.profiles,
            f"{svc.value}/{name}",
            f"{svc.value}/quality-profiles/{name}.json",
            QualityProfile.from_dict,
        )

    # ------------------------------------------------------------------
    # Custom formats
    # ------------------------------------------------------------------

    async def list_custom_formats(
        self,
        service: TrashService | str,
        category: str | None = None,
    ) -> list[CustomFormatSummary]:
        """
        Categorized summary of every custom format that could be fetched.

        Details are fetched in batches of ``concurrency_limit``; a batch
        starts only after the previous one has finished.

        Args:
            service: radarr or sonarr
            category: Keep only formats tagged with this category
        """
        svc = TrashService.parse(service)
        names = await self._cached_listing(self._cache.cf_lists, svc, "cf")

        formats: list[CustomFormatSummary] = []
        batch_size = self._config.concurrency_limit
        for start in range(0, len(names), batch_size):
            batch = names[start:start + batch_size]
            results = await asyncio.gather(*[self.get_custom_format(svc, name) for name in batch])
            formats.extend(
                CustomFormatSummary(
                    name=cf.name,
                    categories=self._categorizer.categorize(cf.name),
                    default_score=cf.default_score,
                )
                for cf in results
                if cf is not None
            )

        if category:
            wanted = category.lower()
            return [f for f in formats if wanted in f.categories]
        return formats

    async def get_custom_format(self, service: TrashService | str, name: str) -> CustomFormat | None:
        svc = TrashService.parse(service)
        return await self._cached_document(
            self._cache.custom_formats,
            f"{svc.value}/{name}",
            f"{svc.value}/cf/{name}.json",
            CustomFormat.from_dict,
        )

    # ------------------------------------------------------------------
    # Naming and quality sizes
    # ------------------------------------------------------------------

    async def get_naming(self, service: TrashService | str) -> Naming | None:
        svc = TrashService.parse(service)
        return await self._cached_document(
            self._cache.naming,
            svc.value,
            f"{svc.value}/naming/{svc.value}-naming.json",
            Naming.from_dict,
        )

    async def get_quality_sizes(
        self,
        service: TrashService | str,
        type: str | None = None,
    ) -> list[QualitySize]:
        """
        Quality size tables for the service's media types.

        Radarr publishes ``movie`` and ``anime`` tables, Sonarr ``series``
        and ``anime``. Tables that cannot be fetched are left out.
        """
        svc = TrashService.parse(service)
        sizes: list[QualitySize] = []
        for size_type in QUALITY_SIZE_TYPES[svc]:
            size = await self._cached_document(
                self._cache.quality_sizes,
                f"{svc.value}/{size_type}",
                f"{svc.value}/quality-size/{size_type}.json",
                QualitySize.from_dict,
            )
            if size is None:
                continue
            if not type or size.type == type:
                sizes.append(size)
        return sizes

    # ------------------------------------------------------------------
    # Custom format groups
    # ------------------------------------------------------------------

    async def list_cf_groups(self, service: TrashService | str) -> list[str]:
        """Group names, always read from a fresh directory listing."""
        svc = TrashService.parse(service)
        return await self._fetcher.list_directory(f"{svc.value}/cf-groups")

    async def get_cf_group(self, service: TrashService | str, name: str) -> CFGroup | None:
        svc = TrashService.parse(service)
        return await self._cached_document(
            self._cache.cf_groups,
            f"{svc.value}/{name}",
            f"{svc.value}/cf-groups/{name}.json",
            CFGroup.from_dict,
        )

    # ------------------------------------------------------------------
    # Cache control
    # ------------------------------------------------------------------

    def clear_cache(self) -> None:
        """Forget everything; the next call of any operation refetches."""
        self._cache.clear()
        logger.info("TRaSH Guides cache cleared")

    def get_cache_stats(self) -> dict[str, dict[str, int]]:
        return self._cache.get_stats()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _cached_listing(
        self,
        store: TTLCache[list[str]],
        service: TrashService,
        category: str,
    ) -> list[str]:
        names = store.get(service.value)
        if names is not None:
            logger.debug(f"Cache hit: {service.value}/{category} listing")
            return names

        names = await self._fetcher.list_directory(f"{service.value}/{category}")
        store.set(service.value, names)
        return names

    async def _cached_document(
        self,
        store: TTLCache[T],
        key: str,
        path: str,
        decode: Callable[[Any], T],
    ) -> T | None:
        cached = store.get(key)
        if cached is not None:
            logger.debug(f"Cache hit: {path}")
            return cached

        url = self._fetcher.document_url(path)
        try:
            payload = await self._fetcher.fetch_json(url)
            document = _decode(url, payload, decode)
        except NetworkError as e:
            logger.warning(f"Skipping {path}: {e}")
            return None

        store.set(key, document)
        return document


def _decode(url: str, payload: Any, decode: Callable[[Any], T]) -> T:
    if not isinstance(payload, dict):
        raise NetworkError(url, reason="document is not a JSON object")
    try:
        return decode(payload)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise NetworkError(url, reason=f"malformed document: {e!r}") from e
