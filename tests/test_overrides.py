"""Tests for hash-validated generated overrides."""

from __future__ import annotations

from skillset.config import apply_generated_overrides, cleanup_stale_hashes, hash_value
from skillset.config.overrides import find_stale_overrides


def test_override_applies_while_hash_matches() -> None:
    yaml_config = {"output": {"max_lines": 300}}
    generated = {"_yaml_hashes": {"output.max_lines": hash_value(300)}, "output": {"max_lines": 42}}
    merged = apply_generated_overrides({"output": {"max_lines": 300, "include_layout": False}}, yaml_config, generated)
    assert merged["output"] == {"max_lines": 42, "include_layout": False}


def test_stale_override_is_ignored() -> None:
    yaml_config = {"output": {"max_lines": 250}}
    generated = {"_yaml_hashes": {"output.max_lines": hash_value(300)}, "output": {"max_lines": 42}}
    base = {"output": {"max_lines": 250}}
    assert apply_generated_overrides(base, yaml_config, generated) == base


def test_override_for_absent_key_is_dropped_once_key_is_added() -> None:
    generated = {"_yaml_hashes": {"skills.fe": hash_value()}, "skills": {"fe": "project:frontend-design"}}
    assert apply_generated_overrides({"skills": {}}, {}, generated)["skills"] == {"fe": "project:frontend-design"}

    edited = {"skills": {"fe": "user:fe"}}
    assert apply_generated_overrides({"skills": {"fe": "user:fe"}}, edited, generated)["skills"] == {"fe": "user:fe"}


def test_values_without_hash_are_not_applied() -> None:
    generated = {"_yaml_hashes": {}, "output": {"max_lines": 42}}
    assert apply_generated_overrides({"output": {"max_lines": 1}}, {}, generated) == {"output": {"max_lines": 1}}


def test_override_breaking_its_section_is_skipped() -> None:
    base = {"resolution": {"fuzzy_matching": True, "default_scope_priority": ["user", "plugin"]}}
    generated = {
        "_yaml_hashes": {"resolution.fuzzy_matching": hash_value(), "output.max_lines": hash_value()},
        "resolution": {"fuzzy_matching": "no"},
        "output": {"max_lines": 42},
    }
    merged = apply_generated_overrides(base, {}, generated)
    assert merged["resolution"] == base["resolution"]
    assert merged["output"] == {"max_lines": 42}


def test_metadata_keys_are_never_applied() -> None:
    generated = {"_yaml_hashes": {"skills.fe": hash_value()}, "skills": {"fe": "x"}, "projects": {"abc": {}}}
    merged = apply_generated_overrides({}, {}, generated)
    assert "projects" not in merged
    assert "_yaml_hashes" not in merged


def test_escaped_key_paths_apply_to_dotted_keys() -> None:
    generated = {"_yaml_hashes": {"skills.guide\\.md": hash_value()}, "skills": {"guide.md": "docs/guide.md"}}
    assert apply_generated_overrides({}, {}, generated) == {"skills": {"guide.md": "docs/guide.md"}}


def test_cleanup_stale_hashes_drops_value_and_hash() -> None:
    target = {
        "_yaml_hashes": {"output.max_lines": hash_value(300), "skills.fe": hash_value()},
        "output": {"max_lines": 42},
        "skills": {"fe": "x"},
    }
    yaml_config = {"output": {"max_lines": 250}}
    assert find_stale_overrides(target, yaml_config) == ["output.max_lines"]

    cleaned = cleanup_stale_hashes(target, yaml_config)
    assert cleaned["_yaml_hashes"] == {"skills.fe": hash_value()}
    assert cleaned["output"] == {}
    assert cleaned["skills"] == {"fe": "x"}
    assert "output.max_lines" in target["_yaml_hashes"]
