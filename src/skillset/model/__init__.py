"""Core data models for Skillset."""

from .entities import InvocationKind, InvocationToken, ResolveResult, Skill, SkillCache, SkillSet

__all__ = [
    "InvocationKind",
    "InvocationToken",
    "ResolveResult",
    "Skill",
    "SkillCache",
    "SkillSet",
]
