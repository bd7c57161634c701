"""
TRaSH Guides document types.

Each remote JSON document is decoded into a frozen dataclass. Instances are
snapshots: a refetch produces a new object, nothing is mutated in place.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


def _text(data: dict[str, Any], key: str) -> str:
    """Required string field; anything else is a malformed document."""
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {type(value).__name__}")
    return value


class TrashService(Enum):
    """Media services the guides publish documents for."""
    RADARR = "radarr"
    SONARR = "sonarr"

    @classmethod
    def parse(cls, value: "TrashService | str") -> "TrashService":
        """Accept an enum member or its case-insensitive string value."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


# Quality-size sub-types published per service
QUALITY_SIZE_TYPES: dict[TrashService, tuple[str, ...]] = {
    TrashService.RADARR: ("movie", "anime"),
    TrashService.SONARR: ("series", "anime"),
}


@dataclass(frozen=True)
class QualityItem:
    """A quality tier (or group of tiers) inside a profile."""
    name: str
    allowed: bool = True
    items: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QualityItem":
        return cls(
            name=_text(data, "name"),
            allowed=data.get("allowed", True),
            items=list(data.get("items") or []),
        )


@dataclass(frozen=True)
class QualityProfile:
    """Recommended quality profile."""
    trash_id: str
    name: str
    description: str | None = None
    group: int | None = None
    upgrade_allowed: bool = False
    cutoff: str = ""
    min_format_score: int = 0
    cutoff_format_score: int = 0
    min_upgrade_format_score: int = 0
    language: str = ""
    items: list[QualityItem] = field(default_factory=list)
    format_items: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QualityProfile":
        return cls(
            trash_id=data.get("trash_id", ""),
            name=_text(data, "name"),
            description=data.get("trash_description"),
            group=data.get("group"),
            upgrade_allowed=data.get("upgradeAllowed", False),
            cutoff=data.get("cutoff", ""),
            min_format_score=data.get("minFormatScore", 0),
            cutoff_format_score=data.get("cutoffFormatScore", 0),
            min_upgrade_format_score=data.get("minUpgradeFormatScore", 0),
            language=data.get("language", ""),
            items=[QualityItem.from_dict(i) for i in data.get("items") or []],
            format_items=dict(data.get("formatItems") or {}),
        )


@dataclass(frozen=True)
class Specification:
    """One matching condition of a custom format."""
    name: str
    implementation: str
    negate: bool = False
    required: bool = False
    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Specification":
        return cls(
            name=data.get("name", ""),
            implementation=data.get("implementation", ""),
            negate=data.get("negate", False),
            required=data.get("required", False),
            fields=dict(data.get("fields") or {}),
        )


@dataclass(frozen=True)
class CustomFormat:
    """Custom format definition with its guide-recommended score."""
    trash_id: str
    name: str
    default_score: int | None = None
    include_when_renaming: bool = False
    specifications: list[Specification] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CustomFormat":
        scores = data.get("trash_scores") or {}
        return cls(
            trash_id=data.get("trash_id", ""),
            name=_text(data, "name"),
            default_score=scores.get("default"),
            include_when_renaming=data.get("includeCustomFormatWhenRenaming", False),
            specifications=[Specification.from_dict(s) for s in data.get("specifications") or []],
        )


@dataclass(frozen=True)
class QualitySizeTier:
    quality: str
    min: float
    preferred: float
    max: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QualitySizeTier":
        return cls(
            quality=_text(data, "quality"),
            min=data.get("min", 0),
            preferred=data.get("preferred", 0),
            max=data.get("max", 0),
        )


@dataclass(frozen=True)
class QualitySize:
    """Size recommendations (MB per minute) for one media type."""
    trash_id: str
    type: str
    qualities: list[QualitySizeTier] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QualitySize":
        return cls(
            trash_id=data.get("trash_id", ""),
            type=_text(data, "type"),
            qualities=[QualitySizeTier.from_dict(q) for q in data.get("qualities") or []],
        )


@dataclass(frozen=True)
class Naming:
    """Folder and file naming schemes keyed by variant name."""
    folder: dict[str, str] = field(default_factory=dict)
    file: dict[str, str] = field(default_factory=dict)
    season: dict[str, str] | None = None
    series: dict[str, str] | None = None
    specials: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Naming":
        return cls(
            folder=dict(data.get("folder") or {}),
            file=dict(data.get("file") or {}),
            season=data.get("season"),
            series=data.get("series"),
            specials=data.get("specials"),
        )


@dataclass(frozen=True)
class CFGroupMember:
    name: str
    trash_id: str
    required: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CFGroupMember":
        return cls(
            name=_text(data, "name"),
            trash_id=data.get("trash_id", ""),
            required=data.get("required", False),
        )


@dataclass(frozen=True)
class CFGroup:
    """Bundle of custom formats with profile inclusion guidance."""
    trash_id: str
    name: str
    description: str | None = None
    default: str | None = None
    custom_formats: list[CFGroupMember] = field(default_factory=list)
    include_profiles: dict[str, str] = field(default_factory=dict)
    exclude_profiles: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CFGroup":
        profiles = data.get("quality_profiles") or {}
        return cls(
            trash_id=data.get("trash_id", ""),
            name=_text(data, "name"),
            description=data.get("trash_description"),
            default=data.get("default"),
            custom_formats=[CFGroupMember.from_dict(c) for c in data.get("custom_formats") or []],
            include_profiles=dict(profiles.get("include") or {}),
            exclude_profiles=dict(profiles.get("exclude") or {}),
        )


@dataclass(frozen=True)
class ProfileSummary:
    """Entry returned by TrashClient.list_profiles()."""
    name: str
    description: str | None = None


@dataclass(frozen=True)
class CustomFormatSummary:
    """Entry returned by TrashClient.list_custom_formats()."""
    name: str
    categories: list[str] = field(default_factory=list)
    default_score: int | None = None
