"""Typed view of the merged configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from skillset.constants.config import CONFIG_VERSION
from skillset.constants.resolution import PATH_HINT_SUFFIX, RuleSeverity
from skillset.constants.scopes import DEFAULT_SCOPE_PRIORITY, Scope
from skillset.types import JsonObject


@dataclass(frozen=True)
class StringEntry:
    """``alias: target`` shorthand; the target is a path or another alias/ref."""

    value: str

    @property
    def looks_like_path(self) -> bool:
        return "/" in self.value or "\\" in self.value or self.value.endswith(PATH_HINT_SUFFIX)


@dataclass(frozen=True)
class ObjectEntry:
    """Expanded skill entry; ``skill`` and ``path`` are mutually exclusive."""

    skill: str | None = None
    path: str | None = None
    scope: tuple[Scope, ...] | None = None
    include_full: bool | None = None
    include_layout: bool | None = None


type SkillEntry = StringEntry | ObjectEntry


@dataclass(frozen=True)
class SetDefinition:
    """Named bundle of skill references declared in config."""

    name: str
    skills: tuple[str, ...]
    description: str | None = None


@dataclass(frozen=True)
class RulesConfig:
    """Severity of each kind of resolution problem."""

    unresolved: RuleSeverity = "warn"
    ambiguous: RuleSeverity = "warn"
    missing_set_members: RuleSeverity | None = None


@dataclass(frozen=True)
class ResolutionConfig:
    fuzzy_matching: bool = True
    default_scope_priority: tuple[Scope, ...] = DEFAULT_SCOPE_PRIORITY


@dataclass(frozen=True)
class OutputConfig:
    max_lines: int = 500
    include_layout: bool = False


@dataclass(frozen=True)
class SkillsetConfig:
    """Resolved configuration after merging every layer."""

    version: int = CONFIG_VERSION
    rules: RulesConfig = RulesConfig()
    resolution: ResolutionConfig = ResolutionConfig()
    output: OutputConfig = OutputConfig()
    ignore_scopes: tuple[Scope, ...] = ()
    tools: tuple[str, ...] = ()
    skills: dict[str, SkillEntry] = field(default_factory=dict)
    sets: dict[str, SetDefinition] = field(default_factory=dict)
    raw: JsonObject = field(default_factory=dict, compare=False, repr=False)


def parse_skill_entry(raw: Any) -> SkillEntry | None:
    """Convert a schema-valid raw entry into its tagged form."""
    if isinstance(raw, str):
        return StringEntry(raw)
    if not isinstance(raw, dict):
        return None
    scope = raw.get("scope")
    if isinstance(scope, str):
        scope = (scope,)
    elif isinstance(scope, list):
        scope = tuple(scope)
    else:
        scope = None
    return ObjectEntry(
        skill=raw.get("skill"),
        path=raw.get("path"),
        scope=scope,
        include_full=raw.get("include_full"),
        include_layout=raw.get("include_layout"),
    )


def build_config(merged: dict[str, Any]) -> SkillsetConfig:
    """Build the typed config from a merged, schema-valid mapping."""
    rules = merged.get("rules") or {}
    resolution = merged.get("resolution") or {}
    output = merged.get("output") or {}

    skills: dict[str, SkillEntry] = {}
    for alias, raw_entry in (merged.get("skills") or {}).items():
        entry = parse_skill_entry(raw_entry)
        if entry is not None:
            skills[str(alias)] = entry

    sets: dict[str, SetDefinition] = {}
    for key, raw_set in (merged.get("sets") or {}).items():
        if not isinstance(raw_set, dict):
            continue
        sets[str(key)] = SetDefinition(
            name=raw_set.get("name") or str(key),
            skills=tuple(raw_set.get("skills") or ()),
            description=raw_set.get("description"),
        )

    defaults = RulesConfig()
    return SkillsetConfig(
        version=merged.get("version", CONFIG_VERSION),
        rules=RulesConfig(
            unresolved=rules.get("unresolved", defaults.unresolved),
            ambiguous=rules.get("ambiguous", defaults.ambiguous),
            missing_set_members=rules.get("missing_set_members"),
        ),
        resolution=ResolutionConfig(
            fuzzy_matching=resolution.get("fuzzy_matching", True),
            default_scope_priority=tuple(resolution.get("default_scope_priority") or DEFAULT_SCOPE_PRIORITY),
        ),
        output=OutputConfig(
            max_lines=output.get("max_lines", OutputConfig.max_lines),
            include_layout=output.get("include_layout", OutputConfig.include_layout),
        ),
        ignore_scopes=tuple(merged.get("ignore_scopes") or ()),
        tools=tuple(merged.get("tools") or ()),
        skills=skills,
        sets=sets,
        raw=merged,
    )
