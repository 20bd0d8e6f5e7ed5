"""Tests for generated override writes and config file helpers."""

from __future__ import annotations

import datetime
import json
import os
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
import yaml

from skillset.config import (
    ConfigPaths,
    cleanup_generated_config,
    ensure_config_files,
    get_project_id,
    hash_value,
    reset_override,
    set_override,
    write_yaml_config,
)
from skillset.constants.config import SCHEMA_HEADER
from skillset.exceptions import ConfigError, LockTimeoutError, OverrideWriteError
from skillset.io import lock_path_for


def _read_generated(paths: ConfigPaths) -> dict:
    return json.loads(paths.generated_config.read_text(encoding="utf-8"))


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_set_override_records_value_and_hash_of_current_yaml(config_paths: ConfigPaths) -> None:
    _write(config_paths.user_config, "output:\n  max_lines: 300\n")

    set_override("output.max_lines", 42, paths=config_paths)

    generated = _read_generated(config_paths)
    assert generated["output"] == {"max_lines": 42}
    assert generated["_yaml_hashes"] == {"output.max_lines": hash_value(300)}


def test_set_override_hashes_absent_value(config_paths: ConfigPaths) -> None:
    set_override("skills.fe", "project:frontend-design", paths=config_paths)
    assert _read_generated(config_paths)["_yaml_hashes"] == {"skills.fe": hash_value()}


def test_set_override_stores_yaml_dates_as_iso_strings(config_paths: ConfigPaths) -> None:
    _write(config_paths.user_config, "notes:\n  released: 2024-01-01\n  1: first\n")

    set_override("notes.released", datetime.date(2024, 2, 1), paths=config_paths)
    set_override("notes.labels", {1: "one"}, paths=config_paths)

    generated = _read_generated(config_paths)
    assert generated["notes"] == {"released": "2024-02-01", "labels": {"1": "one"}}
    assert generated["_yaml_hashes"]["notes.released"] == hash_value("2024-01-01")


def test_set_override_for_project_creates_project_entry(config_paths: ConfigPaths) -> None:
    _write(config_paths.project_config, "tools: [claude]\n")

    set_override("tools", ["codex"], scope="project", paths=config_paths)

    generated = _read_generated(config_paths)
    project_id = get_project_id(config_paths.project_root)
    assert generated["projects"][project_id] == {
        "_yaml_hashes": {"tools": hash_value(["claude"])},
        "tools": ["codex"],
    }
    assert generated["_yaml_hashes"] == {}


def test_set_override_keeps_other_keys(config_paths: ConfigPaths) -> None:
    set_override("output.max_lines", 10, paths=config_paths)
    set_override("output.include_layout", True, paths=config_paths)

    generated = _read_generated(config_paths)
    assert generated["output"] == {"max_lines": 10, "include_layout": True}
    assert set(generated["_yaml_hashes"]) == {"output.max_lines", "output.include_layout"}


def test_reset_override_removes_value_and_hash(config_paths: ConfigPaths) -> None:
    set_override("output.max_lines", 10, paths=config_paths)
    set_override("skills.fe", "x", paths=config_paths)

    reset_override("output.max_lines", paths=config_paths)

    generated = _read_generated(config_paths)
    assert generated["_yaml_hashes"] == {"skills.fe": hash_value()}
    assert generated["output"] == {}
    assert generated["skills"] == {"fe": "x"}


def test_reset_project_override(config_paths: ConfigPaths) -> None:
    set_override("skills.fe", "x", scope="project", paths=config_paths)
    reset_override("skills.fe", scope="project", paths=config_paths)

    project = _read_generated(config_paths)["projects"][get_project_id(config_paths.project_root)]
    assert project == {"_yaml_hashes": {}, "skills": {}}


@pytest.mark.parametrize(
    ("key", "scope"),
    [
        pytest.param("", "user", id="empty-key"),
        pytest.param("...", "user", id="only-separators"),
        pytest.param("_yaml_hashes.x", "user", id="reserved-hashes"),
        pytest.param("projects.abc", "user", id="reserved-projects"),
        pytest.param("output.max_lines", "team", id="unknown-scope"),
    ],
)
def test_set_override_rejects_bad_input(config_paths: ConfigPaths, key: str, scope: str) -> None:
    with pytest.raises(ConfigError):
        set_override(key, 1, scope=scope, paths=config_paths)  # type: ignore[arg-type]
    assert not config_paths.generated_config.exists()


def test_write_failure_raises_override_write_error(
    config_paths: ConfigPaths, monkeypatch: pytest.MonkeyPatch
) -> None:
    def fail(**_: object) -> None:
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr("skillset.config.writer.write_json_atomic", fail)

    with pytest.raises(OverrideWriteError, match="read-only"):
        set_override("output.max_lines", 1, paths=config_paths)
    assert not lock_path_for(config_paths.generated_config).exists()


def test_held_lock_raises_lock_timeout(config_paths: ConfigPaths) -> None:
    lock_path = lock_path_for(config_paths.generated_config)
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    lock_path.write_text("999999", encoding="utf-8")

    with pytest.raises(LockTimeoutError):
        set_override("output.max_lines", 1, paths=config_paths)
    assert lock_path.exists()


def test_stale_lock_is_reclaimed(config_paths: ConfigPaths) -> None:
    lock_path = lock_path_for(config_paths.generated_config)
    lock_path.parent.mkdir(parents=True, exist_ok=True)
    lock_path.write_text("999999", encoding="utf-8")
    old = time.time() - 3600
    os.utime(lock_path, (old, old))

    set_override("output.max_lines", 1, paths=config_paths)

    assert _read_generated(config_paths)["output"] == {"max_lines": 1}
    assert not lock_path.exists()


def test_concurrent_writers_keep_every_key(config_paths: ConfigPaths) -> None:
    keys = [f"skills.alias-{index}" for index in range(4)]

    with ThreadPoolExecutor(max_workers=len(keys)) as pool:
        list(pool.map(lambda key: set_override(key, key, paths=config_paths), keys))

    generated = _read_generated(config_paths)
    assert set(generated["_yaml_hashes"]) == set(keys)
    assert set(generated["skills"]) == {key.split(".")[1] for key in keys}


def test_no_temp_files_left_behind(config_paths: ConfigPaths) -> None:
    set_override("output.max_lines", 1, paths=config_paths)
    leftovers = [item.name for item in config_paths.generated_config.parent.iterdir() if item.name.endswith(".tmp")]
    assert leftovers == []


def test_cleanup_generated_config_removes_stale_entries(config_paths: ConfigPaths) -> None:
    _write(config_paths.user_config, "output:\n  max_lines: 300\n")
    set_override("output.max_lines", 42, paths=config_paths)
    set_override("skills.fe", "x", paths=config_paths)
    set_override("tools", ["codex"], scope="project", paths=config_paths)
    _write(config_paths.user_config, "output:\n  max_lines: 250\n")
    _write(config_paths.project_config, "tools: [claude]\n")

    removed = cleanup_generated_config(config_paths)

    assert removed == {"user": ["output.max_lines"], "project": ["tools"]}
    generated = _read_generated(config_paths)
    assert generated["_yaml_hashes"] == {"skills.fe": hash_value()}
    project = generated["projects"][get_project_id(config_paths.project_root)]
    assert project == {"_yaml_hashes": {}}


def test_write_yaml_config_adds_schema_header(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.yaml"
    write_yaml_config(path, {"skills": {"fe": "project:frontend-design"}})

    text = path.read_text(encoding="utf-8")
    assert text.startswith(SCHEMA_HEADER)
    assert yaml.safe_load(text) == {"skills": {"fe": "project:frontend-design"}}


def test_write_yaml_config_without_header(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    write_yaml_config(path, {"version": 1}, include_schema_comment=False)
    assert path.read_text(encoding="utf-8") == "version: 1\n"


def test_ensure_config_files_creates_missing_files_once(config_paths: ConfigPaths) -> None:
    created = ensure_config_files(config_paths)
    assert created == [config_paths.user_config, config_paths.project_config]
    assert yaml.safe_load(config_paths.project_config.read_text(encoding="utf-8"))["output"]["max_lines"] == 500

    assert ensure_config_files(config_paths) == []
