"""
Custom format categorization.

A name is matched against an ordered list of (tag, patterns) rules. Every
rule with at least one matching pattern contributes its tag, so a format
can land in several categories. Names that match nothing get ``other``.
"""

from __future__ import annotations

import re
from typing import Iterable, Pattern

FALLBACK_TAG = "other"

# Order matters only for the order tags are reported in
DEFAULT_RULES: list[tuple[str, tuple[str, ...]]] = [
    ("hdr", (r"hdr", r"dv", r"dolby.*vision", r"hdr10")),
    ("audio", (
        r"atmos", r"dts", r"truehd", r"audio", r"surround",
        r"sound", r"stereo", r"mono", r"aac", r"flac",
    )),
    ("resolution", (r"1080p", r"2160p", r"720p", r"4k", r"480p")),
    ("source", (r"bluray", r"web", r"remux", r"hdtv", r"dvd", r"cam", r"telesync")),
    ("streaming", (
        r"amzn", r"nf\b", r"netflix", r"dsnp", r"disney", r"atvp",
        r"apple", r"hmax", r"hbo", r"hulu", r"pcok", r"peacock",
    )),
    ("anime", (r"anime",)),
    ("unwanted", (r"lq", r"x265.*hdtv", r"extras", r"3d", r"upscale", r"bad.*dual")),
    ("release", (r"repack", r"proper", r"scene", r"p2p")),
    ("language", (r"french", r"german", r"dutch", r"multi", r"language")),
]


class Categorizer:
    """Ordered rule set mapping names to category tags."""

    def __init__(
        self,
        rules: Iterable[tuple[str, Iterable[str]]] = DEFAULT_RULES,
        fallback: str = FALLBACK_TAG,
    ) -> None:
        self._rules: list[tuple[str, list[Pattern[str]]]] = []
        self._fallback = fallback
        for tag, patterns in rules:
            self.add_rule(tag, *patterns)

    @property
    def tags(self) -> list[str]:
        return [tag for tag, _ in self._rules]

    def add_rule(self, tag: str, *patterns: str) -> None:
        """Append a rule; it is evaluated after all existing rules."""
        compiled = [re.compile(p, re.IGNORECASE) for p in patterns]
        self._rules.append((tag.lower(), compiled))

    def categorize(self, name: str) -> list[str]:
        tags = [
            tag for tag, patterns in self._rules
            if any(p.search(name) for p in patterns)
        ]
        return tags or [self._fallback]


_default = Categorizer()


def categorize(name: str) -> list[str]:
    """Categorize a name with the default rule set."""
    return _default.categorize(name)
