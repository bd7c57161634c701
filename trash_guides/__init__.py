"""
Cached, categorized access to TRaSH Guides documents.

Basic Usage:
    import asyncio
    from trash_guides import TrashClient

    async def main():
        async with TrashClient() as trash:
            for profile in await trash.list_profiles("radarr"):
                print(profile.name, "-", profile.description)

            hdr = await trash.list_custom_formats("radarr", category="hdr")
            print([cf.name for cf in hdr])

    asyncio.run(main())
"""

__version__ = "1.0.0"

from .cache import CacheEntry, TrashCache, TTLCache
from .categorizer import Categorizer, categorize
from .client import TrashClient
from .config import TrashConfig
from .errors import NetworkError, TrashError
from .fetcher import TrashFetcher
from .types import (
    CFGroup,
    CFGroupMember,
    CustomFormat,
    CustomFormatSummary,
    Naming,
    ProfileSummary,
    QualityItem,
    QualityProfile,
    QualitySize,
    QualitySizeTier,
    Specification,
    TrashService,
)

__all__ = [
    "__version__",
    "TrashClient",
    "TrashConfig",
    "TrashFetcher",
    "TrashCache",
    "TTLCache",
    "CacheEntry",
    "Categorizer",
    "categorize",
    "TrashError",
    "NetworkError",
    "TrashService",
    "QualityProfile",
    "QualityItem",
    "CustomFormat",
    "Specification",
    "QualitySize",
    "QualitySizeTier",
    "Naming",
    "CFGroup",
    "CFGroupMember",
    "ProfileSummary",
    "CustomFormatSummary",
]
