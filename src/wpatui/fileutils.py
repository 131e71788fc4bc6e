"""File utilities for safe config rewrites."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

DEFAULT_MODE = 0o600


def replace_file_atomic(
    path: Path,
    content: str,
    encoding: str = "utf-8",
    errors: str = "strict",
) -> None:
    """Replace a file's content so readers never see a partial write.

    Writes to a temp file in the same directory, fsyncs it and renames it
    over the target. The target's permission bits are carried over (new
    files get 0600). A symlinked path is resolved first, so the link itself
    is kept and its target is replaced.

    Args:
        path: File to replace
        content: New file content, written without newline translation
        encoding: Text encoding
        errors: Encoding error handler

    Raises:
        OSError: If the temp file cannot be written or renamed. The target
            is left untouched in that case.
    """
    path = Path(os.path.realpath(path))
    try:
        mode = stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        mode = DEFAULT_MODE

    fd, tmp_name = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding=encoding, errors=errors, newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise

    _fsync_dir(path.parent)


def _fsync_dir(directory: Path) -> None:
    """Flush a directory entry so the rename survives a crash."""
    try:
        fd = os.open(str(directory), os.O_RDONLY)
    except OSError:
        return
    try:
        os.fsync(fd)
    except OSError:
        pass
    finally:
        os.close(fd)
