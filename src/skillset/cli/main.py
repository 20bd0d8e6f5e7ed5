"""CLI entrypoint for skillset."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from skillset import __version__
from skillset.cli.handlers import handle_reset, handle_resolve, handle_set, handle_validate_config
from skillset.constants.branding import CLI_DESCRIPTION, CLI_PROG


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=CLI_PROG,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=None,
        help="Project root (default: $SKILLSET_PROJECT_ROOT or the current directory)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve = subparsers.add_parser("resolve", help="Resolve every $alias reference in a prompt")
    resolve.add_argument("prompt", help="Prompt text, or a single reference with --ref")
    resolve.add_argument(
        "--ref",
        action="store_true",
        help="Treat the argument as one reference (foo, p:foo, set:foo) instead of prompt text",
    )

    validate = subparsers.add_parser("validate-config", help="Validate hand-edited config files")
    validate.add_argument(
        "--scope",
        choices=["user", "project"],
        default=None,
        help="Validate only this scope's file (default: both)",
    )

    set_cmd = subparsers.add_parser("set", help="Record a generated override for a config key")
    set_cmd.add_argument("key", help="Dotted key path, e.g. output.max_lines or skills.fe")
    set_cmd.add_argument("value", help="Value parsed as YAML, e.g. 200, true or project:frontend-design")
    set_cmd.add_argument("--project", action="store_true", help="Store the override for this project only")

    reset = subparsers.add_parser("reset", help="Remove a generated override")
    reset.add_argument("key", help="Dotted key path to reset")
    reset.add_argument("--project", action="store_true", help="Reset this project's override")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "resolve":
        return handle_resolve(args)
    if args.command == "validate-config":
        return handle_validate_config(args)
    if args.command == "set":
        return handle_set(args)
    if args.command == "reset":
        return handle_reset(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
