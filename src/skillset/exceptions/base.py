"""Root of the Skillset exception hierarchy."""

from __future__ import annotations


class SkillsetError(Exception):
    """Base class for all Skillset errors."""
