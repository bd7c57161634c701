"""Shared fixtures: an in-process fake of the TRaSH Guides hosts."""

import asyncio
from typing import Any

import httpx
import pytest

from trash_guides.client import TrashClient
from trash_guides.config import TrashConfig

BASE_URL = "https://raw.test/docs/json"
API_URL = "https://api.test/contents/docs/json"


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTrashHost:
    """
    Serves documents and GitHub-style directory listings from a dict.

    Paths are relative to the docs root, e.g. ``radarr/cf/amzn.json``.
    """

    def __init__(self, delay: float = 0.0) -> None:
        self.documents: dict[str, Any] = {}
        self.statuses: dict[str, int] = {}
        self.requests: list[str] = []
        self.delay = delay
        self.delays: dict[str, float] = {}
        self.log: list[tuple[str, str]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    def add(self, path: str, payload: Any) -> None:
        self.documents[path] = payload

    def fail(self, path: str, status: int = 500) -> None:
        self.statuses[path] = status

    def calls(self, path: str) -> int:
        """Number of requests made for a document or listing path."""
        return sum(1 for url in self.requests if url in (f"{BASE_URL}/{path}", f"{API_URL}/{path}"))

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        self.log.append(("start", url))
        try:
            await asyncio.sleep(self.delays.get(self._path(url), self.delay))
            if url.startswith(API_URL + "/"):
                path = url[len(API_URL) + 1:]
                if path in self.statuses:
                    return httpx.Response(self.statuses[path])
                return httpx.Response(200, json=self._listing(path))

            path = url[len(BASE_URL) + 1:]
            if path in self.statuses:
                return httpx.Response(self.statuses[path])
            if path not in self.documents:
                return httpx.Response(404)
            payload = self.documents[path]
            if isinstance(payload, bytes):
                return httpx.Response(200, content=payload)
            return httpx.Response(200, json=payload)
        finally:
            self.in_flight -= 1
            self.log.append(("end", url))

    @staticmethod
    def _path(url: str) -> str:
        for root in (API_URL, BASE_URL):
            if url.startswith(root + "/"):
                return url[len(root) + 1:]
        return url

    def _listing(self, path: str) -> list[dict[str, str]]:
        prefix = path + "/"
        entries = [
            {"name": doc[len(prefix):], "type": "file"}
            for doc in self.documents
            if doc.startswith(prefix) and "/" not in doc[len(prefix):]
        ]
        # GitHub listings also contain folders and non-JSON files
        entries.append({"name": "README.md", "type": "file"})
        entries.append({"name": "archive", "type": "dir"})
        return entries


def profile_doc(name: str, description: str | None = None) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "trash_id": f"id-{name}",
        "name": name,
        "upgradeAllowed": True,
        "cutoff": "Bluray-1080p",
        "minFormatScore": 0,
        "cutoffFormatScore": 10000,
        "minUpgradeFormatScore": 1,
        "language": "Original",
        "items": [
            {"name": "Bluray-1080p", "allowed": True},
            {"name": "WEB 1080p", "allowed": True, "items": ["WEBDL-1080p", "WEBRip-1080p"]},
        ],
        "formatItems": {"DV HDR10+": "cf-dv"},
    }
    if description is not None:
        doc["trash_description"] = description
    return doc


def cf_doc(name: str, score: int | None = None) -> dict[str, Any]:
    doc: dict[str, Any] = {
        "trash_id": f"cf-{name}",
        "name": name,
        "includeCustomFormatWhenRenaming": False,
        "specifications": [
            {
                "name": name,
                "implementation": "ReleaseTitleSpecification",
                "negate": False,
                "required": True,
                "fields": {"value": name},
            }
        ],
    }
    if score is not None:
        doc["trash_scores"] = {"default": score}
    return doc


def size_doc(size_type: str) -> dict[str, Any]:
    return {
        "trash_id": f"size-{size_type}",
        "type": size_type,
        "qualities": [
            {"quality": "HDTV-720p", "min": 17.1, "preferred": 194.3, "max": 400},
            {"quality": "Bluray-1080p", "min": 50.4, "preferred": 194.3, "max": 400},
        ],
    }


def group_doc(name: str) -> dict[str, Any]:
    return {
        "trash_id": f"group-{name}",
        "name": name,
        "trash_description": f"{name} bundle",
        "default": "true",
        "custom_formats": [
            {"name": "DV HDR10+", "trash_id": "cf-dv", "required": True},
            {"name": "HDR10", "trash_id": "cf-hdr10"},
        ],
        "quality_profiles": {
            "exclude": {"SD": "id-sd"},
        },
    }


def populate(host: FakeTrashHost) -> None:
    """Small but complete radarr and sonarr document set."""
    host.add("radarr/quality-profiles/hd-bluray-web.json", profile_doc("HD Bluray + WEB", "High quality HD encodes"))
    host.add("radarr/quality-profiles/uhd-remux.json", profile_doc("UHD Remux", "Untouched 2160p remuxes"))

    host.add("radarr/cf/dv-hdr10plus.json", cf_doc("DV HDR10+", 1500))
    host.add("radarr/cf/truehd-atmos.json", cf_doc("TrueHD ATMOS", 5000))
    host.add("radarr/cf/amzn.json", cf_doc("AMZN"))
    host.add("radarr/cf/obfuscated.json", cf_doc("Obfuscated", -10000))

    host.add("radarr/quality-size/movie.json", size_doc("movie"))
    host.add("radarr/quality-size/anime.json", size_doc("anime"))
    host.add("radarr/naming/radarr-naming.json", {
        "folder": {"default": "{Movie CleanTitle} ({Release Year})"},
        "file": {"standard": "{Movie CleanTitle} {(Release Year)} {Quality Full}"},
    })
    host.add("radarr/cf-groups/hdr-formats.json", group_doc("HDR Formats"))
    host.add("radarr/cf-groups/audio-formats.json", group_doc("Audio Formats"))

    host.add("sonarr/quality-profiles/web-1080p.json", profile_doc("WEB-1080p"))
    host.add("sonarr/cf/dv-hdr10plus.json", cf_doc("DV HDR10+", 1500))
    host.add("sonarr/quality-size/series.json", size_doc("series"))
    host.add("sonarr/quality-size/anime.json", size_doc("anime"))
    host.add("sonarr/naming/sonarr-naming.json", {
        "folder": {"default": "{Series TitleYear}"},
        "file": {"standard": "{Series TitleYear} - S{season:00}E{episode:00}"},
        "season": {"default": "Season {season:00}"},
    })


@pytest.fixture
def host() -> FakeTrashHost:
    fake = FakeTrashHost()
    populate(fake)
    return fake


@pytest.fixture
def config() -> TrashConfig:
    return TrashConfig(base_url=BASE_URL, api_url=API_URL)


@pytest.fixture
def make_client(host, config):
    """Factory for TrashClients talking to the fake host."""

    def _make(**kwargs: Any) -> TrashClient:
        cfg = kwargs.pop("config", config)
        http_client = httpx.AsyncClient(transport=host.transport())
        return TrashClient(cfg, http_client=http_client, **kwargs)

    return _make
