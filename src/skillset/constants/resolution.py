"""Resolution outcome reasons and rule severities."""

from __future__ import annotations

from typing import Literal

type RuleSeverity = Literal["ignore", "warn", "error"]

REASON_UNMATCHED: str = "unmatched"
REASON_AMBIGUOUS: str = "ambiguous"
REASON_AMBIGUOUS_SET: str = "ambiguous-set"
REASON_SKILL_SET_COLLISION: str = "skill-set-collision"
REASON_MISSING_MAPPING_PREFIX: str = "mapping points to missing ref"
REASON_MISSING_SET_MEMBERS: str = "missing-set-members"

SEVERITY_IGNORE: RuleSeverity = "ignore"
SEVERITY_WARN: RuleSeverity = "warn"
SEVERITY_ERROR: RuleSeverity = "error"
VALID_SEVERITIES: tuple[RuleSeverity, ...] = (SEVERITY_IGNORE, SEVERITY_WARN, SEVERITY_ERROR)

PATH_HINT_SUFFIX: str = ".md"
