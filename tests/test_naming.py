"""Tests for alias and reference normalization."""

from __future__ import annotations

import pytest

from skillset.utils import normalize_ref, normalize_segment, strip_dashes


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        pytest.param("FrontendDesign", "frontend-design", id="pascal-case"),
        pytest.param("frontEndDesign", "front-end-design", id="camel-case"),
        pytest.param("frontend_design", "frontend-design", id="snake-case"),
        pytest.param("HTTPServer", "http-server", id="acronym"),
        pytest.param("  Foo  Bar ", "foo-bar", id="whitespace"),
        pytest.param("--a--b--", "a-b", id="dash-runs"),
        pytest.param("api.v2!", "api-v2", id="punctuation"),
        pytest.param("", "", id="empty"),
    ],
)
def test_normalize_segment(raw: str, expected: str) -> None:
    assert normalize_segment(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        pytest.param("Project:FrontendDesign", "project:frontend-design", id="scoped"),
        pytest.param("plugin:super_powers/Brainstorm", "plugin:super-powers/brainstorm", id="path-segments"),
        pytest.param("a::b", "a:b", id="empty-group-dropped"),
        pytest.param("a//b", "a/b", id="empty-path-part-dropped"),
        pytest.param("::", "", id="only-separators"),
    ],
)
def test_normalize_ref(raw: str, expected: str) -> None:
    assert normalize_ref(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["FrontendDesign", "p:API_Client", "plugin:Super Powers/brain_Storm", "--x--", "$weird::Ref//", "ÀBC"],
)
def test_normalize_ref_is_idempotent(raw: str) -> None:
    once = normalize_ref(raw)
    assert normalize_ref(once) == once


def test_strip_dashes() -> None:
    assert strip_dashes("frontend-design") == "frontenddesign"
