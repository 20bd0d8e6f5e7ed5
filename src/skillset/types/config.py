"""Typed payloads for hand-edited and generated configuration files."""

from __future__ import annotations

from typing import NotRequired, TypedDict

from skillset.types.common import JsonObject, JsonValue


class ProjectSettingsPayload(TypedDict):
    """Per-project CLI overrides inside the generated file."""

    _yaml_hashes: dict[str, str]
    skills: NotRequired[dict[str, JsonValue]]
    output: NotRequired[JsonObject]
    rules: NotRequired[JsonObject]
    ignore_scopes: NotRequired[list[str]]
    tools: NotRequired[list[str]]


class GeneratedSettingsPayload(TypedDict):
    """Machine-written override file shared by all projects of one user."""

    _yaml_hashes: dict[str, str]
    skills: NotRequired[dict[str, JsonValue]]
    output: NotRequired[JsonObject]
    rules: NotRequired[JsonObject]
    project_id_strategy: NotRequired[str]
    projects: dict[str, ProjectSettingsPayload]
