"""Scope names, namespace shorthands and tool skill directories."""

from __future__ import annotations

from typing import Literal

type Scope = Literal["project", "user", "plugin"]

SCOPE_PROJECT: Scope = "project"
SCOPE_USER: Scope = "user"
SCOPE_PLUGIN: Scope = "plugin"

VALID_SCOPES: tuple[Scope, ...] = (SCOPE_PROJECT, SCOPE_USER, SCOPE_PLUGIN)
DEFAULT_SCOPE_PRIORITY: tuple[Scope, ...] = (SCOPE_PROJECT, SCOPE_USER, SCOPE_PLUGIN)

NAMESPACE_SHORTCUTS: dict[str, Scope] = {
    "p": SCOPE_PROJECT,
    "proj": SCOPE_PROJECT,
    "project": SCOPE_PROJECT,
    "u": SCOPE_USER,
    "g": SCOPE_USER,
    "user": SCOPE_USER,
    "global": SCOPE_USER,
    "plugin": SCOPE_PLUGIN,
}

# Pseudo-scope used for skills synthesized from explicit file paths.
PATH_REF_PREFIX: str = "path"

VALID_TOOLS: tuple[str, ...] = ("claude", "codex", "copilot", "cursor", "amp", "goose")

# Skill directories relative to the project root and the home directory, per tool.
TOOL_SKILL_DIRS: dict[str, str] = {
    "claude": ".claude/skills",
    "codex": ".codex/skills",
    "copilot": ".github/skills",
    "cursor": ".cursor/skills",
    "amp": ".amp/skills",
    "goose": ".goose/skills",
}
