"""Alias resolution against a loaded config and skill cache."""

from __future__ import annotations

from .config_mapping import EntryResolution, find_skill_entry, resolve_by_alias, resolve_skill_entry
from .diagnostics import Diagnostic, evaluate_results, has_errors
from .matching import match_sets, match_skills
from .orchestrator import ResolutionContext, build_context, resolve_in_context, resolve_token, resolve_tokens
from .scope import (
    filter_by_namespace,
    filter_by_scope,
    filter_sets_by_config,
    filter_skills_by_config,
    pick_by_scope_priority,
    resolve_namespace,
    scope_of,
)

__all__ = [
    "Diagnostic",
    "EntryResolution",
    "ResolutionContext",
    "build_context",
    "evaluate_results",
    "filter_by_namespace",
    "filter_by_scope",
    "filter_sets_by_config",
    "filter_skills_by_config",
    "find_skill_entry",
    "has_errors",
    "match_sets",
    "match_skills",
    "pick_by_scope_priority",
    "resolve_by_alias",
    "resolve_in_context",
    "resolve_namespace",
    "resolve_skill_entry",
    "resolve_token",
    "resolve_tokens",
    "scope_of",
]
