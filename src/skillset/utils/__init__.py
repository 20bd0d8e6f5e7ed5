"""Shared utility helpers."""

from __future__ import annotations

from .naming import normalize_ref, normalize_segment, strip_dashes

__all__ = ["normalize_ref", "normalize_segment", "strip_dashes"]
