"""Alias matching against skill and set candidates.

Comparisons run on normalized text, both with and without hyphens, so
``frontend-design``, ``frontendDesign`` and ``frontenddesign`` are equivalent.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from skillset.constants.naming import PATH_SEPARATOR, REF_SEPARATOR
from skillset.model import Skill, SkillSet
from skillset.utils import normalize_ref, normalize_segment, strip_dashes


def match_skills(skills: Iterable[Skill], alias: str, fuzzy: bool) -> list[Skill]:
    """Return skills matching ``alias`` by ref or name (and, fuzzily, by path)."""
    return _match(
        skills,
        alias,
        fuzzy,
        get_ref=lambda skill: skill.skill_ref,
        get_name=lambda skill: skill.name,
        get_path=lambda skill: skill.path,
    )


def match_sets(sets: Iterable[SkillSet], alias: str, fuzzy: bool) -> list[SkillSet]:
    """Return sets matching ``alias`` by ref or name."""
    return _match(
        sets,
        alias,
        fuzzy,
        get_ref=lambda skill_set: skill_set.set_ref,
        get_name=lambda skill_set: skill_set.name,
    )


def ref_matches(ref: str, target: str) -> bool:
    """Return True when normalized ``ref`` equals ``target`` or ends on a segment boundary with it."""
    return ref == target or ref.endswith(REF_SEPARATOR + target) or ref.endswith(PATH_SEPARATOR + target)


def _match[T](
    items: Iterable[T],
    alias: str,
    fuzzy: bool,
    *,
    get_ref: Callable[[T], str],
    get_name: Callable[[T], str],
    get_path: Callable[[T], str] | None = None,
) -> list[T]:
    target = normalize_ref(alias)
    if not target:
        return []
    target_loose = strip_dashes(target)

    matches: list[T] = []
    for item in items:
        ref = normalize_ref(get_ref(item))
        name = normalize_segment(get_name(item))
        name_loose = strip_dashes(name)

        ref_exact = ref_matches(ref, target) or ref_matches(strip_dashes(ref), target_loose)
        name_exact = name == target or name_loose == target_loose
        if ref_exact or name_exact:
            matches.append(item)
            continue
        if not fuzzy:
            continue

        if target in name or target_loose in name_loose:
            matches.append(item)
            continue
        if get_path is not None:
            path = get_path(item).lower()
            if target in path or target_loose in path:
                matches.append(item)
    return matches
