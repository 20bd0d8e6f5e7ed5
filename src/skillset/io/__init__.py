"""Shared file I/O helpers."""

from .json_io import load_json_file, write_json_atomic, write_text_atomic
from .locking import file_lock, lock_path_for

__all__ = ["file_lock", "load_json_file", "lock_path_for", "write_json_atomic", "write_text_atomic"]
