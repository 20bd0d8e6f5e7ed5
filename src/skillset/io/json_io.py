"""Atomic text and JSON persistence for config and override files."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path


def load_json_file(path: Path) -> object:
    """Parse JSON from ``path``; a leading BOM is tolerated."""
    return json.loads(path.read_text(encoding="utf-8-sig"))


def write_json_atomic(
    *,
    path: Path,
    payload: object,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Persist ``payload`` as indented, key-sorted JSON with a trailing newline."""
    write_text_atomic(
        path=path,
        text=json.dumps(payload, indent=2, sort_keys=True) + "\n",
        temp_prefix=temp_prefix,
        temp_suffix=temp_suffix,
    )


def write_text_atomic(
    *,
    path: Path,
    text: str,
    temp_prefix: str,
    temp_suffix: str,
) -> None:
    """Write ``text`` to a sibling temp file, fsync it, then rename it over ``path``.

    Readers see either the old content or the new content, never a partial file.
    The temp file is removed when writing or renaming fails.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=temp_prefix, suffix=temp_suffix)
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
