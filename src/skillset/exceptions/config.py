"""Configuration-related exceptions."""

from __future__ import annotations

from skillset.exceptions.base import SkillsetError


class ConfigError(SkillsetError, ValueError):
    """Raised when a configuration input cannot be used."""


class OverrideWriteError(SkillsetError, OSError):
    """Raised when the generated override file cannot be persisted."""


class LockTimeoutError(OverrideWriteError):
    """Raised when the override file lock cannot be acquired in time."""
