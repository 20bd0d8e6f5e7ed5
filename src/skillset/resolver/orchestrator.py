"""Token resolution: config mappings, kind-constrained and open search, set expansion.

The resolver works on an already-loaded config and cache. The only I/O it
performs is reading markdown files named by path entries, through the
injected ``read_skill`` callable.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from skillset.config.model import SkillsetConfig
from skillset.constants.resolution import (
    REASON_AMBIGUOUS,
    REASON_AMBIGUOUS_SET,
    REASON_MISSING_MAPPING_PREFIX,
    REASON_SKILL_SET_COLLISION,
    REASON_UNMATCHED,
)
from skillset.model import InvocationToken, ResolveResult, Skill, SkillCache, SkillSet
from skillset.parsers import read_skill_from_path
from skillset.resolver.config_mapping import (
    SkillReader,
    entry_target,
    find_skill_entry,
    resolve_by_alias,
    resolve_skill_entry,
)
from skillset.resolver.matching import match_sets, match_skills
from skillset.resolver.scope import (
    filter_by_namespace,
    filter_sets_by_config,
    filter_skills_by_config,
    pick_by_scope_priority,
    resolve_namespace,
)
from skillset.utils import normalize_ref

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionContext:
    """Candidate pools shared by every token of one resolution call."""

    config: SkillsetConfig
    skills: tuple[Skill, ...]
    sets: tuple[SkillSet, ...]
    project_root: Path
    read_skill: SkillReader

    def find_set(self, ref: str) -> SkillSet | None:
        normalized = normalize_ref(ref)
        for skill_set in self.sets:
            if skill_set.set_ref in (ref, normalized):
                return skill_set
        return None


def build_context(
    config: SkillsetConfig,
    cache: SkillCache,
    *,
    project_root: Path,
    read_skill: SkillReader = read_skill_from_path,
    home: Path | None = None,
) -> ResolutionContext:
    """Build the filtered skill and set pools for ``config`` over ``cache``."""
    skills = filter_skills_by_config(cache.skills.values(), config, project_root=project_root, home=home)
    sets: dict[str, SkillSet] = dict(cache.sets)
    for key, definition in config.sets.items():
        sets[key] = SkillSet(
            set_ref=key,
            name=definition.name,
            description=definition.description,
            skill_refs=definition.skills,
        )
    return ResolutionContext(
        config=config,
        skills=tuple(skills),
        sets=tuple(filter_sets_by_config(sets.values(), config)),
        project_root=project_root,
        read_skill=read_skill,
    )


def resolve_token(
    token: InvocationToken,
    config: SkillsetConfig,
    cache: SkillCache,
    *,
    project_root: Path,
    read_skill: SkillReader = read_skill_from_path,
) -> ResolveResult:
    """Resolve one token to a skill, a set, or a reason it could not be resolved."""
    context = build_context(config, cache, project_root=project_root, read_skill=read_skill)
    return resolve_in_context(token, context)


def resolve_tokens(
    tokens: Iterable[InvocationToken],
    config: SkillsetConfig,
    cache: SkillCache,
    *,
    project_root: Path,
    read_skill: SkillReader = read_skill_from_path,
) -> list[ResolveResult]:
    """Resolve each token independently against the same config and cache."""
    context = build_context(config, cache, project_root=project_root, read_skill=read_skill)
    return [resolve_in_context(token, context) for token in tokens]


def resolve_in_context(token: InvocationToken, context: ResolutionContext) -> ResolveResult:
    alias = normalize_ref(token.alias)
    if not alias:
        return ResolveResult(invocation=token, reason=REASON_UNMATCHED)

    if token.kind != "set":
        mapped = _resolve_from_mapping(token, alias, context)
        if mapped is not None:
            return mapped

    fuzzy = context.config.resolution.fuzzy_matching
    namespace = resolve_namespace(token.namespace)
    skill_candidates = match_skills(context.skills, alias, fuzzy)
    set_candidates = match_sets(context.sets, alias, fuzzy)
    if namespace:
        skill_candidates = filter_by_namespace(skill_candidates, namespace, lambda skill: skill.skill_ref)
        set_candidates = filter_by_namespace(set_candidates, namespace, lambda skill_set: skill_set.set_ref)

    if token.kind == "skill":
        return _pick_skill(token, skill_candidates, context)
    if token.kind == "set":
        return _pick_set(token, set_candidates, context)

    if skill_candidates and set_candidates:
        return ResolveResult(
            invocation=token,
            reason=REASON_SKILL_SET_COLLISION,
            candidates=tuple(skill_candidates),
            set_candidates=tuple(set_candidates),
        )
    if set_candidates:
        return _pick_set(token, set_candidates, context)
    return _pick_skill(token, skill_candidates, context)


def _resolve_from_mapping(token: InvocationToken, alias: str, context: ResolutionContext) -> ResolveResult | None:
    found = find_skill_entry(context.config.skills, token.alias, alias)
    if found is None:
        return None
    key, entry = found
    resolution = resolve_skill_entry(
        entry,
        key,
        config=context.config,
        pool=context.skills,
        project_root=context.project_root,
        read_skill=context.read_skill,
    )
    if resolution.skill is not None:
        return ResolveResult(
            invocation=token,
            skill=resolution.skill,
            include_full=resolution.include_full,
            include_layout=resolution.include_layout,
        )
    if resolution.candidates:
        return ResolveResult(invocation=token, reason=REASON_AMBIGUOUS, candidates=resolution.candidates)

    target = entry_target(entry, key)
    if target:
        skill_set = context.find_set(target)
        if skill_set is not None:
            return _expand_set(token, skill_set, context)

    logger.debug("Config entry %s does not resolve to any skill", key)
    return ResolveResult(invocation=token, reason=f"{REASON_MISSING_MAPPING_PREFIX} {key}")


def _pick_skill(token: InvocationToken, candidates: Sequence[Skill], context: ResolutionContext) -> ResolveResult:
    if not candidates:
        return ResolveResult(invocation=token, reason=REASON_UNMATCHED)
    winner = pick_by_scope_priority(candidates, context.config.resolution.default_scope_priority)
    if winner is None:
        return ResolveResult(invocation=token, reason=REASON_AMBIGUOUS, candidates=tuple(candidates))
    return ResolveResult(invocation=token, skill=winner)


def _pick_set(token: InvocationToken, candidates: Sequence[SkillSet], context: ResolutionContext) -> ResolveResult:
    if not candidates:
        return ResolveResult(invocation=token, reason=REASON_UNMATCHED)
    if len(candidates) > 1:
        return ResolveResult(invocation=token, reason=REASON_AMBIGUOUS_SET, set_candidates=tuple(candidates))
    return _expand_set(token, candidates[0], context)


def _expand_set(token: InvocationToken, skill_set: SkillSet, context: ResolutionContext) -> ResolveResult:
    resolved: list[Skill] = []
    missing: list[str] = []
    for ref in skill_set.skill_refs:
        skill = _resolve_member(ref, context)
        if skill is None:
            missing.append(ref)
        else:
            resolved.append(skill)
    if missing:
        logger.debug("Set %s has unresolved members: %s", skill_set.set_ref, ", ".join(missing))
    return ResolveResult(
        invocation=token,
        skill_set=skill_set,
        set_skills=tuple(resolved),
        missing_skill_refs=tuple(missing),
    )


def _resolve_member(ref: str, context: ResolutionContext) -> Skill | None:
    """Resolve a set member: direct ref, then config entry, then matching with priority."""
    normalized = normalize_ref(ref)
    for skill in context.skills:
        if skill.skill_ref in (ref, normalized):
            return skill

    found = find_skill_entry(context.config.skills, ref, normalized)
    if found is not None:
        key, entry = found
        resolution = resolve_skill_entry(
            entry,
            key,
            config=context.config,
            pool=context.skills,
            project_root=context.project_root,
            read_skill=context.read_skill,
        )
        if resolution.skill is not None:
            return resolution.skill

    return resolve_by_alias(ref, context.skills, context.config).skill
