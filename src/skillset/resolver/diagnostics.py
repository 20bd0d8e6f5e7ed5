"""Rule evaluation over resolution results."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from skillset.config.model import SkillsetConfig
from skillset.constants.resolution import (
    REASON_AMBIGUOUS,
    REASON_AMBIGUOUS_SET,
    REASON_MISSING_SET_MEMBERS,
    REASON_SKILL_SET_COLLISION,
    SEVERITY_ERROR,
    SEVERITY_IGNORE,
    RuleSeverity,
)
from skillset.model import ResolveResult
from skillset.types import JsonObject

_AMBIGUITY_REASONS: frozenset[str] = frozenset({REASON_AMBIGUOUS, REASON_AMBIGUOUS_SET, REASON_SKILL_SET_COLLISION})


@dataclass(frozen=True)
class Diagnostic:
    """One rule-governed problem found while resolving a token."""

    severity: RuleSeverity
    reason: str
    raw: str
    message: str

    def to_dict(self) -> JsonObject:
        return {"severity": self.severity, "reason": self.reason, "raw": self.raw, "message": self.message}


def evaluate_results(results: Iterable[ResolveResult], config: SkillsetConfig) -> list[Diagnostic]:
    """Return diagnostics for unresolved tokens and incomplete sets, honouring ``rules``.

    Ambiguity reasons follow ``rules.ambiguous``; every other failure follows
    ``rules.unresolved``. Missing set members use ``rules.missing_set_members``
    and fall back to ``rules.unresolved``.
    """
    rules = config.rules
    diagnostics: list[Diagnostic] = []
    for result in results:
        raw = result.invocation.raw
        if result.reason is not None:
            if result.reason in _AMBIGUITY_REASONS:
                severity = rules.ambiguous
                refs = [skill.skill_ref for skill in result.candidates]
                refs.extend(skill_set.set_ref for skill_set in result.set_candidates)
                message = f"{raw} is {result.reason}: {', '.join(refs)}"
            else:
                severity = rules.unresolved
                message = f"{raw}: {result.reason}"
            diagnostic = Diagnostic(severity=severity, reason=result.reason, raw=raw, message=message)
        elif result.missing_skill_refs:
            missing = ", ".join(result.missing_skill_refs)
            diagnostic = Diagnostic(
                severity=rules.missing_set_members or rules.unresolved,
                reason=REASON_MISSING_SET_MEMBERS,
                raw=raw,
                message=f"{raw} is missing set members: {missing}",
            )
        else:
            continue
        if diagnostic.severity != SEVERITY_IGNORE:
            diagnostics.append(diagnostic)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(diagnostic.severity == SEVERITY_ERROR for diagnostic in diagnostics)
