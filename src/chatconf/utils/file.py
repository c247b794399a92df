"""File utility functions."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Final

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path, mode: int = 0o700) -> bool:
    """Create directory if it doesn't exist.

    An existing directory is left alone, including its permissions.

    Args:
        directory: Path to create
        mode: Permission bits applied to a newly created directory

    Returns:
        True if the directory was created by this call
    """
    if directory.is_dir():
        return False
    directory.mkdir(mode=mode, parents=True, exist_ok=True)
    # mkdir honours the umask, so set the bits explicitly
    os.chmod(directory, mode)
    logger.debug("Created directory: %s", directory)
    return True


def atomic_write_text(path: Path, content: str, mode: int = 0o600) -> None:
    """Replace ``path`` with ``content`` without ever exposing a partial file.

    The content goes to a temporary sibling first, is flushed to disk, and is
    then renamed over ``path``. Readers see either the old file or the new
    one. If anything fails the temporary file is removed and the error is
    re-raised; ``path`` is untouched.

    Args:
        path: Destination file
        content: Text to write (UTF-8)
        mode: Permission bits for the written file

    Raises:
        OSError: If the write, flush, rename or directory sync fails
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            os.fchmod(handle.fileno(), mode)
            handle.write(content)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    fsync_directory(path.parent)
    logger.debug("Wrote %s", path)


def fsync_directory(directory: Path) -> None:
    """Flush a directory entry so a rename inside it survives power loss.

    Args:
        directory: Directory whose entries should be made durable
    """
    fd = os.open(directory, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def remove_file(path: Path) -> bool:
    """Delete a file if present.

    Args:
        path: File to remove

    Returns:
        True if a file was removed
    """
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    logger.debug("Removed file: %s", path)
    return True
