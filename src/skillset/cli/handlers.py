"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable

import yaml

from skillset.cache import default_cache_paths, load_caches
from skillset.config import ConfigPaths, load_config, reset_override, set_override, validate_config_file
from skillset.config.paths import ConfigScope
from skillset.exceptions import ConfigError, OverrideWriteError
from skillset.exceptions.validation import ValidationError, format_errors
from skillset.parsers import parse_invocation, tokenize_prompt
from skillset.resolver import evaluate_results, has_errors, resolve_tokens


def handle_resolve(args: argparse.Namespace) -> int:
    """Resolve the prompt's references and print results and diagnostics as JSON."""
    paths = ConfigPaths.for_project(args.root)
    config = load_config(paths=paths)
    cache = load_caches(default_cache_paths(paths.project_root))

    tokens = [parse_invocation(args.prompt)] if args.ref else tokenize_prompt(args.prompt)
    results = resolve_tokens(tokens, config, cache, project_root=paths.project_root)
    diagnostics = evaluate_results(results, config)

    payload = {
        "results": [result.to_dict() for result in results],
        "diagnostics": [diagnostic.to_dict() for diagnostic in diagnostics],
    }
    print(json.dumps(payload, indent=2))
    for diagnostic in diagnostics:
        print(f"{diagnostic.severity}: {diagnostic.message}", file=sys.stderr)
    return 1 if has_errors(diagnostics) else 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Validate the selected config files and report every problem."""
    paths = ConfigPaths.for_project(args.root)
    scopes: tuple[ConfigScope, ...] = (args.scope,) if args.scope else ("user", "project")
    errors: list[ValidationError] = []
    for scope in scopes:
        errors.extend(validate_config_file(paths.yaml_path(scope), explicit=args.scope is not None))
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def handle_set(args: argparse.Namespace) -> int:
    """Parse the value as YAML and store it as a generated override."""
    try:
        value = yaml.safe_load(args.value)
    except yaml.YAMLError as exc:
        print(f"Configuration error: value is not valid YAML: {exc}", file=sys.stderr)
        return 2
    return _run_override(args, lambda paths, scope: set_override(args.key, value, scope=scope, paths=paths))


def handle_reset(args: argparse.Namespace) -> int:
    return _run_override(args, lambda paths, scope: reset_override(args.key, scope=scope, paths=paths))


def _run_override(args: argparse.Namespace, action: Callable[[ConfigPaths, ConfigScope], None]) -> int:
    paths = ConfigPaths.for_project(args.root)
    scope: ConfigScope = "project" if args.project else "user"
    try:
        action(paths, scope)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except OverrideWriteError as exc:
        print(f"Write error: {exc}", file=sys.stderr)
        return 1
    print(f"Updated {scope} override for {args.key}.")
    return 0
