"""Read a markdown file named directly in config into a path-scoped skill."""

from __future__ import annotations

import logging
from pathlib import Path

from skillset.constants.scopes import PATH_REF_PREFIX
from skillset.model import Skill
from skillset.utils import normalize_segment

logger = logging.getLogger(__name__)

HEADING_MARKER: str = "#"


def read_skill_from_path(path: str, alias_key: str, project_root: Path) -> Skill | None:
    """Return a skill for ``path`` (relative paths resolve against ``project_root``).

    Returns ``None`` when the file cannot be read.
    """
    candidate = Path(path).expanduser()
    resolved = candidate if candidate.is_absolute() else project_root / candidate
    try:
        content = resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read skill file %s: %s", resolved, exc)
        return None

    lines = content.lstrip("\ufeff").splitlines()
    heading = next((line for line in lines if line.startswith(HEADING_MARKER)), None)
    if heading is not None:
        name = heading.lstrip(HEADING_MARKER).strip()
    else:
        name = normalize_segment(alias_key) or alias_key
    description = next(
        (line.strip() for line in lines if line.strip() and not line.startswith(HEADING_MARKER)),
        None,
    )
    return Skill(
        skill_ref=f"{PATH_REF_PREFIX}:{resolved}",
        path=str(resolved),
        name=name,
        description=description,
        line_count=len(lines),
    )
