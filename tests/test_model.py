"""Tests for the typed config model."""

from __future__ import annotations

import copy

import pytest

from skillset.config import ObjectEntry, SetDefinition, StringEntry, build_config
from skillset.config.model import parse_skill_entry
from skillset.constants.config import CONFIG_DEFAULTS


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        pytest.param("docs/guide.md", True, id="relative-path"),
        pytest.param("C:\\skills\\x", True, id="windows-path"),
        pytest.param("guide.md", True, id="md-suffix"),
        pytest.param("project:frontend-design", False, id="ref"),
        pytest.param("frontend", False, id="alias"),
    ],
)
def test_string_entry_path_detection(value: str, expected: bool) -> None:
    assert StringEntry(value).looks_like_path is expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        pytest.param("fe", StringEntry("fe"), id="string"),
        pytest.param({"skill": "fe", "scope": "user"}, ObjectEntry(skill="fe", scope=("user",)), id="scalar-scope"),
        pytest.param(
            {"path": "a.md", "scope": ["project", "user"], "include_full": True},
            ObjectEntry(path="a.md", scope=("project", "user"), include_full=True),
            id="list-scope",
        ),
        pytest.param(7, None, id="invalid"),
    ],
)
def test_parse_skill_entry(raw: object, expected: object) -> None:
    assert parse_skill_entry(raw) == expected


def test_build_config_from_defaults() -> None:
    config = build_config(copy.deepcopy(CONFIG_DEFAULTS))
    assert config.rules.unresolved == "warn"
    assert config.rules.missing_set_members is None
    assert config.resolution.fuzzy_matching is True
    assert config.resolution.default_scope_priority == ("project", "user", "plugin")
    assert config.output.max_lines == 500
    assert config.skills == {}
    assert config.ignore_scopes == ()


def test_build_config_sets_and_partial_sections() -> None:
    config = build_config(
        {
            "resolution": {"fuzzy_matching": False},
            "output": {"max_lines": 10},
            "tools": ["claude"],
            "sets": {"starter": {"skills": ["a", "b"]}, "named": {"name": "Named", "skills": [], "description": "d"}},
        }
    )
    assert config.resolution.default_scope_priority == ("project", "user", "plugin")
    assert config.output.include_layout is False
    assert config.tools == ("claude",)
    assert config.sets["starter"] == SetDefinition(name="starter", skills=("a", "b"))
    assert config.sets["named"].description == "d"
