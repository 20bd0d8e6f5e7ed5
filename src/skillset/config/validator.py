"""Collect-all validation of a hand-edited config file."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError as SchemaError

from skillset.config.schema import CONFIG_SCHEMA
from skillset.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    SCHEMA_KEYWORD_CODES,
)
from skillset.exceptions.validation import ValidationError

_BRANCH_KEYWORDS: frozenset[str] = frozenset({"anyOf", "oneOf"})


def validate_config_file(path: Path, *, explicit: bool = False) -> list[ValidationError]:
    """Validate one config file and return every problem found.

    Never raises. A missing file is only an error when ``explicit`` is set.
    """
    path_str = str(path)
    if not path.exists():
        if explicit:
            return [ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}")]
        return []

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        return [ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}")]
    except (OSError, UnicodeDecodeError) as exc:
        return [ValidationError(code=CFG002, path=path_str, field="", message=f"cannot read file: {exc}")]

    if raw is None:
        return []
    if not isinstance(raw, dict):
        return [
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        ]

    errors: list[ValidationError] = []
    for key in sorted(str(key) for key in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    known = {key: value for key, value in raw.items() if key in ALLOWED_CONFIG_KEYS}
    validator = Draft202012Validator(CONFIG_SCHEMA)
    for error in sorted(validator.iter_errors(known), key=lambda err: [str(part) for part in err.absolute_path]):
        errors.append(_from_schema_error(error, path_str))
    return errors


def _from_schema_error(error: SchemaError, path_str: str) -> ValidationError:
    field = ".".join(str(part) for part in error.absolute_path)
    code = _code_for(error)
    if code == CFG008:
        return ValidationError(
            code=code,
            path=path_str,
            field=field,
            message=f"`{field}` sets both `skill` and `path`",
            hint="keep only one of `skill` or `path`",
        )
    if code == CFG006:
        allowed = ", ".join(str(option) for option in error.validator_value)
        return ValidationError(
            code=code,
            path=path_str,
            field=field,
            message=f"invalid value for `{field}`",
            hint=f"expected one of: {allowed}; got: {error.instance!r}",
        )
    if code == CFG007:
        return ValidationError(code=code, path=path_str, field=field, message=f"`{field}` is out of range: {error.message}")
    if code == CFG005:
        return ValidationError(
            code=code,
            path=path_str,
            field=field,
            message=f"invalid type for `{field}`",
            hint=_type_hint(error),
        )
    return ValidationError(code=code, path=path_str, field=field, message=f"invalid entry `{field}`: {error.message}")


def _code_for(error: SchemaError) -> str:
    if error.validator in _BRANCH_KEYWORDS and isinstance(error.instance, dict):
        if any(sub.validator == "not" for sub in error.context or ()):
            return CFG008
    return SCHEMA_KEYWORD_CODES.get(str(error.validator), CFG005)


def _type_hint(error: SchemaError) -> str:
    expected: Any = error.validator_value
    if error.validator == "type":
        return f"expected {expected}"
    return "expected a string or a skill entry mapping"


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
