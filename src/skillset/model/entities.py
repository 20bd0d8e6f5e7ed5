"""Immutable domain entities shared by tokenizer, resolver and callers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from skillset.types import CacheSetEntry, CacheSkillEntry, JsonObject

type InvocationKind = Literal["skill", "set"]


@dataclass(frozen=True)
class Skill:
    """Snapshot of one discovered skill document."""

    skill_ref: str
    path: str
    name: str
    description: str | None = None
    structure: str | None = None
    line_count: int | None = None
    cached_at: str | None = None

    @classmethod
    def from_cache_entry(cls, entry: CacheSkillEntry) -> Skill:
        """Build a skill from its cache payload shape."""
        return cls(
            skill_ref=entry["skillRef"],
            path=entry["path"],
            name=entry["name"],
            description=entry.get("description"),
            structure=entry.get("structure"),
            line_count=entry.get("lineCount"),
            cached_at=entry.get("cachedAt"),
        )

    def to_dict(self) -> JsonObject:
        return {
            "skillRef": self.skill_ref,
            "path": self.path,
            "name": self.name,
            "description": self.description,
            "lineCount": self.line_count,
            "cachedAt": self.cached_at,
        }


@dataclass(frozen=True)
class SkillSet:
    """Named bundle of skill references; members may not exist."""

    set_ref: str
    name: str
    description: str | None = None
    skill_refs: tuple[str, ...] = ()

    @classmethod
    def from_cache_entry(cls, entry: CacheSetEntry) -> SkillSet:
        """Build a set from its cache payload shape."""
        return cls(
            set_ref=entry["setRef"],
            name=entry["name"],
            description=entry.get("description"),
            skill_refs=tuple(entry["skillRefs"]),
        )

    def to_dict(self) -> JsonObject:
        return {
            "setRef": self.set_ref,
            "name": self.name,
            "description": self.description,
            "skillRefs": list(self.skill_refs),
        }


@dataclass(frozen=True)
class InvocationToken:
    """One ``$alias`` reference found in text or built from a CLI argument.

    ``alias`` and ``namespace`` hold input text; the resolver canonicalizes them.
    """

    raw: str
    alias: str
    namespace: str | None = None
    kind: InvocationKind | None = None

    def to_dict(self) -> JsonObject:
        return {
            "raw": self.raw,
            "alias": self.alias,
            "namespace": self.namespace,
            "kind": self.kind,
        }


@dataclass(frozen=True)
class SkillCache:
    """Read-only snapshot of indexed skills and sets keyed by reference."""

    skills: dict[str, Skill]
    sets: dict[str, SkillSet]
    version: int = 1
    structure_ttl: int = 3600


@dataclass(frozen=True)
class ResolveResult:
    """Outcome of resolving one invocation token.

    Exactly one of ``skill``, ``skill_set`` or ``reason`` is meaningful.
    """

    invocation: InvocationToken
    skill: Skill | None = None
    skill_set: SkillSet | None = None
    set_skills: tuple[Skill, ...] = ()
    include_full: bool | None = None
    include_layout: bool | None = None
    missing_skill_refs: tuple[str, ...] = ()
    reason: str | None = None
    candidates: tuple[Skill, ...] = ()
    set_candidates: tuple[SkillSet, ...] = ()

    @property
    def resolved(self) -> bool:
        return self.reason is None and (self.skill is not None or self.skill_set is not None)

    def to_dict(self) -> JsonObject:
        """Serialize to a JSON-friendly mapping, omitting empty fields."""
        payload: JsonObject = {"invocation": self.invocation.to_dict()}
        if self.skill is not None:
            payload["skill"] = self.skill.to_dict()
        if self.skill_set is not None:
            payload["set"] = self.skill_set.to_dict()
            payload["setSkills"] = [skill.to_dict() for skill in self.set_skills]
            payload["missingSkillRefs"] = list(self.missing_skill_refs)
        if self.include_full is not None:
            payload["include_full"] = self.include_full
        if self.include_layout is not None:
            payload["include_layout"] = self.include_layout
        if self.reason is not None:
            payload["reason"] = self.reason
        if self.candidates:
            payload["candidates"] = [skill.to_dict() for skill in self.candidates]
        if self.set_candidates:
            payload["setCandidates"] = [skill_set.to_dict() for skill_set in self.set_candidates]
        return payload
