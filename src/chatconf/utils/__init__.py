"""Common utility functions and helpers for the chatconf package."""

from chatconf.utils.file import (
    atomic_write_text,
    ensure_directory_exists,
    fsync_directory,
    remove_file,
)

__all__ = [
    "atomic_write_text",
    "ensure_directory_exists",
    "fsync_directory",
    "remove_file",
]
