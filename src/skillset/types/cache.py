"""Typed cache payload structures."""

from __future__ import annotations

from typing import NotRequired, TypedDict


class CacheSkillEntry(TypedDict):
    """Cached snapshot of one discovered skill document."""

    skillRef: str
    path: str
    name: str
    description: NotRequired[str | None]
    structure: NotRequired[str | None]
    lineCount: NotRequired[int | None]
    cachedAt: NotRequired[str | None]


class CacheSetEntry(TypedDict):
    """Cached snapshot of one skill set."""

    setRef: str
    name: str
    description: NotRequired[str | None]
    skillRefs: list[str]


class CachePayload(TypedDict):
    """Top-level cache payload written by the indexer."""

    version: int
    structureTTL: int
    skills: dict[str, CacheSkillEntry]
    sets: NotRequired[dict[str, CacheSetEntry]]
