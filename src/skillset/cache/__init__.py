"""Skill cache reading."""

from __future__ import annotations

from .loader import default_cache_paths, empty_cache, is_structure_fresh, load_cache, load_caches

__all__ = ["default_cache_paths", "empty_cache", "is_structure_fresh", "load_cache", "load_caches"]
