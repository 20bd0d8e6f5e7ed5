"""Shared type aliases for Skillset."""

from .cache import CachePayload, CacheSetEntry, CacheSkillEntry
from .common import JsonObject, JsonScalar, JsonValue
from .config import GeneratedSettingsPayload, ProjectSettingsPayload

__all__ = [
    "CachePayload",
    "CacheSetEntry",
    "CacheSkillEntry",
    "GeneratedSettingsPayload",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "ProjectSettingsPayload",
]
