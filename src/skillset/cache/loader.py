"""Read-only access to the indexer's skill cache files."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import UTC, datetime
from pathlib import Path

from skillset.constants.cache import CACHE_FILENAME, CACHE_VERSION, DEFAULT_STRUCTURE_TTL
from skillset.constants.config import PROJECT_CONFIG_DIR
from skillset.io import load_json_file
from skillset.model import Skill, SkillCache, SkillSet
from skillset.utils.paths import get_cache_dir

logger = logging.getLogger(__name__)


def empty_cache() -> SkillCache:
    return SkillCache(skills={}, sets={}, version=CACHE_VERSION, structure_ttl=DEFAULT_STRUCTURE_TTL)


def default_cache_paths(project_root: Path) -> tuple[Path, Path]:
    """Return ``(user_cache, project_cache)`` in merge order."""
    return get_cache_dir() / CACHE_FILENAME, project_root / PROJECT_CONFIG_DIR / CACHE_FILENAME


def load_cache(path: Path) -> SkillCache:
    """Load one cache file; malformed entries are dropped, an unreadable file reads as empty."""
    if not path.exists():
        return empty_cache()
    try:
        payload = load_json_file(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Failed to read cache %s: %s", path, exc)
        return empty_cache()
    if not isinstance(payload, dict):
        logger.warning("Ignored cache %s: expected a JSON object", path)
        return empty_cache()

    skills: dict[str, Skill] = {}
    raw_skills = payload.get("skills")
    for ref, entry in (raw_skills.items() if isinstance(raw_skills, dict) else ()):
        if _is_skill_entry(entry):
            skills[ref] = Skill.from_cache_entry(entry)
        else:
            logger.debug("Dropping malformed cache skill %s in %s", ref, path)

    sets: dict[str, SkillSet] = {}
    raw_sets = payload.get("sets")
    for ref, entry in (raw_sets.items() if isinstance(raw_sets, dict) else ()):
        if _is_set_entry(entry):
            sets[ref] = SkillSet.from_cache_entry(entry)
        else:
            logger.debug("Dropping malformed cache set %s in %s", ref, path)

    ttl = payload.get("structureTTL")
    version = payload.get("version")
    return SkillCache(
        skills=skills,
        sets=sets,
        version=version if isinstance(version, int) else CACHE_VERSION,
        structure_ttl=ttl if isinstance(ttl, int) and not isinstance(ttl, bool) else DEFAULT_STRUCTURE_TTL,
    )


def load_caches(paths: Iterable[Path]) -> SkillCache:
    """Merge caches in order; entries from later paths (the project cache) win."""
    skills: dict[str, Skill] = {}
    sets: dict[str, SkillSet] = {}
    structure_ttl = DEFAULT_STRUCTURE_TTL
    for path in paths:
        cache = load_cache(path)
        skills.update(cache.skills)
        sets.update(cache.sets)
        if path.exists():
            structure_ttl = cache.structure_ttl
    return SkillCache(skills=skills, sets=sets, version=CACHE_VERSION, structure_ttl=structure_ttl)


def is_structure_fresh(skill: Skill, ttl_seconds: int, *, now: datetime | None = None) -> bool:
    """Return True when the skill's cached structure is younger than ``ttl_seconds``."""
    if not skill.cached_at:
        return False
    try:
        cached_at = datetime.fromisoformat(skill.cached_at)
    except ValueError:
        return False
    if cached_at.tzinfo is None:
        cached_at = cached_at.replace(tzinfo=UTC)
    age = ((now or datetime.now(UTC)) - cached_at).total_seconds()
    return age < ttl_seconds


def _is_skill_entry(entry: object) -> bool:
    if not isinstance(entry, dict):
        return False
    return all(isinstance(entry.get(key), str) for key in ("skillRef", "path", "name"))


def _is_set_entry(entry: object) -> bool:
    if not isinstance(entry, dict):
        return False
    refs = entry.get("skillRefs")
    return (
        isinstance(entry.get("setRef"), str)
        and isinstance(entry.get("name"), str)
        and isinstance(refs, list)
        and all(isinstance(ref, str) for ref in refs)
    )
