"""CLI naming and help text."""

from __future__ import annotations

CLI_PROG: str = "skillset"
CLI_DESCRIPTION: str = (
    "Resolve $alias skill references in prompts against your skill cache\n"
    "and layered skillset configuration."
)
