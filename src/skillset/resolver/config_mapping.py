"""Resolution of explicit ``skills:`` entries from config."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from skillset.config.model import ObjectEntry, SkillEntry, SkillsetConfig, StringEntry
from skillset.model import Skill
from skillset.resolver.matching import match_skills
from skillset.resolver.scope import filter_by_scope, pick_by_scope_priority
from skillset.utils import normalize_ref

type SkillReader = Callable[[str, str, Path], Skill | None]


@dataclass(frozen=True)
class EntryResolution:
    """What a config entry resolved to: one skill, several candidates, or nothing."""

    skill: Skill | None = None
    candidates: tuple[Skill, ...] = ()
    include_full: bool | None = None
    include_layout: bool | None = None


def find_skill_entry(
    skills: Mapping[str, SkillEntry],
    alias: str,
    normalized_alias: str,
) -> tuple[str, SkillEntry] | None:
    """Look ``alias`` up by exact key, normalized key, then a case-insensitive scan."""
    if alias in skills:
        return alias, skills[alias]
    if normalized_alias and normalized_alias in skills:
        return normalized_alias, skills[normalized_alias]
    lowered = alias.lower()
    for key, entry in skills.items():
        if key.lower() == lowered or normalize_ref(key) == normalized_alias:
            return key, entry
    return None


def entry_target(entry: SkillEntry, alias_key: str) -> str | None:
    """Return the alias/ref an entry points at, or ``None`` for path entries."""
    match entry:
        case StringEntry() if entry.looks_like_path:
            return None
        case StringEntry(value=value):
            return value
        case ObjectEntry(path=str()):
            return None
        case ObjectEntry(skill=skill):
            return skill or alias_key


def resolve_skill_entry(
    entry: SkillEntry,
    alias_key: str,
    *,
    config: SkillsetConfig,
    pool: Sequence[Skill],
    project_root: Path,
    read_skill: SkillReader,
) -> EntryResolution:
    """Resolve a config entry to a skill, reading path entries from disk."""
    match entry:
        case StringEntry(value=value) if entry.looks_like_path:
            return EntryResolution(skill=read_skill(value, alias_key, project_root))
        case StringEntry(value=value):
            return resolve_by_alias(value, pool, config)
        case ObjectEntry(path=str() as path):
            skill = read_skill(path, alias_key, project_root)
            if skill is None:
                return EntryResolution()
            return EntryResolution(
                skill=skill,
                include_full=entry.include_full,
                include_layout=entry.include_layout,
            )
        case ObjectEntry():
            resolved = resolve_by_alias(entry.skill or alias_key, filter_by_scope(pool, entry.scope), config)
            return EntryResolution(
                skill=resolved.skill,
                candidates=resolved.candidates,
                include_full=entry.include_full,
                include_layout=entry.include_layout,
            )


def resolve_by_alias(target: str, pool: Sequence[Skill], config: SkillsetConfig) -> EntryResolution:
    """Find ``target`` by direct ref lookup, then by matching with scope priority."""
    normalized = normalize_ref(target)
    by_ref = {skill.skill_ref: skill for skill in pool}
    direct = by_ref.get(target) or by_ref.get(normalized)
    if direct is not None:
        return EntryResolution(skill=direct)

    candidates = match_skills(pool, normalized, config.resolution.fuzzy_matching)
    selected = pick_by_scope_priority(candidates, config.resolution.default_scope_priority)
    if selected is not None:
        return EntryResolution(skill=selected)
    return EntryResolution(candidates=tuple(candidates))
