"""Tests for layered config loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from skillset.config import (
    ConfigPaths,
    ObjectEntry,
    StringEntry,
    get_config_value,
    load_config,
    load_generated_config,
    load_yaml_config,
    load_yaml_config_by_scope,
    set_override,
)
from skillset.config.loader import sanitize_by_schema
from skillset.config.schema import CONFIG_SCHEMA


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults_when_no_files(config_paths: ConfigPaths) -> None:
    config = load_config(paths=config_paths)
    assert config.version == 1
    assert config.rules.unresolved == "warn"
    assert config.rules.ambiguous == "warn"
    assert config.output.max_lines == 500
    assert config.output.include_layout is False
    assert config.resolution.fuzzy_matching is True
    assert config.resolution.default_scope_priority == ("project", "user", "plugin")
    assert config.skills == {}
    assert config.sets == {}


def test_project_layer_merges_over_user_layer(config_paths: ConfigPaths) -> None:
    _write(config_paths.user_config, "skills:\n  a: user:a\n  b: user:b\noutput:\n  max_lines: 100\n")
    _write(config_paths.project_config, "skills:\n  b: project:b\noutput:\n  include_layout: true\n")

    config = load_config(paths=config_paths)

    assert config.skills == {"a": StringEntry("user:a"), "b": StringEntry("project:b")}
    assert config.output.max_lines == 100
    assert config.output.include_layout is True


def test_list_fields_replace_across_layers(config_paths: ConfigPaths) -> None:
    _write(config_paths.user_config, "ignore_scopes: [plugin]\ntools: [claude, codex]\n")
    _write(config_paths.project_config, "ignore_scopes: [user]\n")

    config = load_config(paths=config_paths)

    assert config.ignore_scopes == ("user",)
    assert config.tools == ("claude", "codex")


def test_schema_comment_header_is_ignored(config_paths: ConfigPaths) -> None:
    _write(
        config_paths.project_config,
        "# yaml-language-server: $schema=https://example.invalid/schema.json\noutput:\n  max_lines: 12\n",
    )
    assert load_config(paths=config_paths).output.max_lines == 12


def test_object_entries_are_parsed(config_paths: ConfigPaths) -> None:
    _write(
        config_paths.project_config,
        "skills:\n  fe:\n    skill: frontend-design\n    scope: [project, user]\n    include_full: true\n",
    )
    entry = load_config(paths=config_paths).skills["fe"]
    assert entry == ObjectEntry(skill="frontend-design", scope=("project", "user"), include_full=True)


def test_invalid_section_is_dropped_and_others_kept(
    config_paths: ConfigPaths, caplog: pytest.LogCaptureFixture
) -> None:
    _write(config_paths.project_config, "skills:\n  fe: project:frontend-design\nsets: 5\n")

    with caplog.at_level(logging.WARNING):
        config = load_config(paths=config_paths)

    assert config.skills == {"fe": StringEntry("project:frontend-design")}
    assert config.sets == {}
    assert "sets" in caplog.text


def test_one_bad_set_drops_sets_section_only(config_paths: ConfigPaths) -> None:
    _write(
        config_paths.project_config,
        "skills:\n  fe: project:frontend-design\nsets:\n  good:\n    skills: [a]\n  bad:\n    name: no skills\n",
    )
    config = load_config(paths=config_paths)
    assert "fe" in config.skills
    assert config.sets == {}


def test_invalid_project_section_falls_back_to_user_value(config_paths: ConfigPaths) -> None:
    _write(config_paths.user_config, "output:\n  max_lines: 80\n")
    _write(config_paths.project_config, "output:\n  max_lines: -3\n")
    assert load_config(paths=config_paths).output.max_lines == 80


def test_unparsable_yaml_is_treated_as_empty(config_paths: ConfigPaths, caplog: pytest.LogCaptureFixture) -> None:
    _write(config_paths.user_config, "output:\n  max_lines: 80\n")
    _write(config_paths.project_config, "skills: [unclosed\n")

    with caplog.at_level(logging.WARNING):
        config = load_config(paths=config_paths)

    assert config.output.max_lines == 80
    assert "unparsable" in caplog.text


def test_non_mapping_yaml_is_treated_as_empty(tmp_path: Path) -> None:
    assert load_yaml_config(_write(tmp_path / "config.yaml", "- a\n- b\n")) == {}


def test_empty_yaml_is_empty_mapping(tmp_path: Path) -> None:
    assert load_yaml_config(_write(tmp_path / "config.yaml", "")) == {}


def test_sanitize_by_schema_keeps_valid_sections() -> None:
    payload = {"output": {"max_lines": "many"}, "tools": ["claude"]}
    assert sanitize_by_schema(CONFIG_SCHEMA, payload, label="config", source="test") == {"tools": ["claude"]}


def test_generated_override_wins_until_hand_edit(config_paths: ConfigPaths) -> None:
    _write(config_paths.user_config, "output:\n  max_lines: 300\n")
    set_override("output.max_lines", 42, paths=config_paths)
    assert load_config(paths=config_paths).output.max_lines == 42

    _write(config_paths.user_config, "output:\n  max_lines: 250\n")
    assert load_config(paths=config_paths).output.max_lines == 250


def test_project_override_applies_only_to_its_project(config_paths: ConfigPaths, tmp_path: Path) -> None:
    set_override("skills.fe", "project:frontend-design", scope="project", paths=config_paths)
    assert load_config(paths=config_paths).skills == {"fe": StringEntry("project:frontend-design")}

    other_root = tmp_path / "other"
    (other_root / ".git").mkdir(parents=True)
    other_paths = ConfigPaths.for_project(other_root)
    assert load_config(paths=other_paths).skills == {}


def test_project_override_is_checked_against_project_yaml(config_paths: ConfigPaths) -> None:
    set_override("output.max_lines", 10, scope="project", paths=config_paths)
    _write(config_paths.user_config, "output:\n  max_lines: 99\n")
    assert load_config(paths=config_paths).output.max_lines == 10

    _write(config_paths.project_config, "output:\n  max_lines: 20\n")
    assert load_config(paths=config_paths).output.max_lines == 20


def test_project_override_beats_user_override(config_paths: ConfigPaths) -> None:
    set_override("output.max_lines", 111, paths=config_paths)
    set_override("output.max_lines", 222, scope="project", paths=config_paths)
    assert load_config(paths=config_paths).output.max_lines == 222


def test_override_with_invalid_shape_is_ignored(config_paths: ConfigPaths) -> None:
    _write(config_paths.user_config, "output:\n  max_lines: 300\n")
    set_override("output.max_lines", "lots", paths=config_paths)
    assert load_config(paths=config_paths).output.max_lines == 300


def test_invalid_override_keeps_hand_edited_siblings(config_paths: ConfigPaths) -> None:
    _write(config_paths.user_config, "resolution:\n  default_scope_priority: [user, project, plugin]\n")
    set_override("resolution.fuzzy_matching", "no", paths=config_paths)

    config = load_config(paths=config_paths)
    assert config.resolution.default_scope_priority == ("user", "project", "plugin")
    assert config.resolution.fuzzy_matching is True


def test_invalid_list_override_keeps_hand_edited_list(config_paths: ConfigPaths) -> None:
    _write(config_paths.user_config, "ignore_scopes: [plugin]\n")
    set_override("ignore_scopes", "project", paths=config_paths)
    assert load_config(paths=config_paths).ignore_scopes == ("plugin",)


def test_invalid_override_keeps_valid_sibling_override(config_paths: ConfigPaths) -> None:
    set_override("output.include_layout", True, paths=config_paths)
    set_override("output.max_lines", "lots", paths=config_paths)
    set_override("output.max_lines", 120, scope="project", paths=config_paths)

    config = load_config(paths=config_paths)
    assert config.output.include_layout is True
    assert config.output.max_lines == 120


def test_load_generated_config_defaults(tmp_path: Path) -> None:
    assert load_generated_config(tmp_path / "missing.json") == {"_yaml_hashes": {}, "projects": {}}


def test_load_generated_config_tolerates_corrupt_json(tmp_path: Path) -> None:
    path = _write(tmp_path / "config.generated.json", "{not json")
    assert load_generated_config(path) == {"_yaml_hashes": {}, "projects": {}}


def test_load_generated_config_drops_bad_hashes_per_project(tmp_path: Path) -> None:
    payload = {
        "_yaml_hashes": {},
        "projects": {
            "good": {"_yaml_hashes": {"tools": "abc"}, "tools": ["claude"]},
            "bad": {"_yaml_hashes": ["tools"], "tools": ["claude"]},
        },
    }
    path = _write(tmp_path / "config.generated.json", json.dumps(payload))
    projects = load_generated_config(path)["projects"]
    assert projects["good"] == {"_yaml_hashes": {"tools": "abc"}, "tools": ["claude"]}
    assert projects["bad"] == {"tools": ["claude"]}


def test_get_config_value(config_paths: ConfigPaths) -> None:
    _write(config_paths.project_config, "output:\n  max_lines: 64\n")
    assert get_config_value("output.max_lines", paths=config_paths) == 64
    assert get_config_value("resolution.fuzzy_matching", paths=config_paths) is True
    assert get_config_value("output.nope", paths=config_paths, default="x") == "x"


def test_load_yaml_config_by_scope(config_paths: ConfigPaths) -> None:
    _write(config_paths.user_config, "tools: [claude]\n")
    _write(config_paths.project_config, "tools: [codex]\n")
    assert load_yaml_config_by_scope("user", config_paths) == {"tools": ["claude"]}
    assert load_yaml_config_by_scope("project", config_paths) == {"tools": ["codex"]}
