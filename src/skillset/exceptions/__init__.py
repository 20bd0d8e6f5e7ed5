"""Shared exception hierarchy for Skillset."""

from __future__ import annotations

from .base import SkillsetError
from .config import ConfigError, LockTimeoutError, OverrideWriteError

__all__ = ["ConfigError", "LockTimeoutError", "OverrideWriteError", "SkillsetError"]
