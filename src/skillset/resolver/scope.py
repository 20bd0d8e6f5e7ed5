"""Scope and namespace filtering over skill and set candidates."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from skillset.config.model import SkillsetConfig
from skillset.constants.naming import PATH_SEPARATOR, REF_SEPARATOR
from skillset.constants.scopes import NAMESPACE_SHORTCUTS, VALID_SCOPES, Scope
from skillset.model import Skill, SkillSet
from skillset.utils import normalize_segment
from skillset.utils.paths import infer_tool_from_path


def resolve_namespace(value: str | None) -> str | None:
    """Map a namespace shorthand (``p``, ``g``, ...) to its scope.

    Unknown namespaces come back normalized so callers can filter on them literally.
    """
    if not value:
        return None
    normalized = normalize_segment(value)
    return NAMESPACE_SHORTCUTS.get(normalized, normalized)


def scope_of(ref: str) -> Scope | None:
    """Return the scope prefix of ``ref`` when it is one of the addressable scopes."""
    prefix = ref.split(REF_SEPARATOR, 1)[0]
    for scope in VALID_SCOPES:
        if prefix == scope:
            return scope
    return None


def filter_by_scope(skills: Iterable[Skill], scopes: Sequence[Scope] | None) -> list[Skill]:
    """Keep skills whose ref lives in one of ``scopes``; ``None`` keeps everything."""
    if not scopes:
        return list(skills)
    return [skill for skill in skills if scope_of(skill.skill_ref) in scopes]


def filter_by_namespace[T](items: Iterable[T], namespace: str, get_ref: Callable[[T], str]) -> list[T]:
    """Keep items whose ref equals ``namespace`` or sits beneath it."""
    prefixes = (namespace + REF_SEPARATOR, namespace + PATH_SEPARATOR)
    result: list[T] = []
    for item in items:
        ref = get_ref(item)
        if ref == namespace or ref.startswith(prefixes):
            result.append(item)
    return result


def pick_by_scope_priority(candidates: Sequence[Skill], priority: Sequence[Scope]) -> Skill | None:
    """Return the unique winner in the first scope that has any candidate.

    An earlier scope with two or more candidates makes the pick ambiguous even
    when a later scope would be unique.
    """
    if len(candidates) == 1:
        return candidates[0]
    for scope in priority:
        scoped = [skill for skill in candidates if scope_of(skill.skill_ref) == scope]
        if len(scoped) == 1:
            return scoped[0]
        if len(scoped) > 1:
            return None
    return None


def filter_skills_by_config(
    skills: Iterable[Skill],
    config: SkillsetConfig,
    *,
    project_root: Path,
    home: Path | None = None,
) -> list[Skill]:
    """Drop skills from ignored scopes and skills that belong to an unselected tool."""
    ignored = set(config.ignore_scopes)
    result: list[Skill] = []
    for skill in skills:
        scope = scope_of(skill.skill_ref)
        if scope is not None and scope in ignored:
            continue
        if config.tools:
            tool = infer_tool_from_path(skill.path, project_root, home)
            if tool is not None and tool not in config.tools:
                continue
        result.append(skill)
    return result


def filter_sets_by_config(sets: Iterable[SkillSet], config: SkillsetConfig) -> list[SkillSet]:
    """Drop sets from ignored scopes."""
    ignored = set(config.ignore_scopes)
    result: list[SkillSet] = []
    for skill_set in sets:
        scope = scope_of(skill_set.set_ref)
        if scope is not None and scope in ignored:
            continue
        result.append(skill_set)
    return result
