"""Target directory validation.

The target must either not exist yet (it is then created) or be an empty,
writable directory.  Version-control bookkeeping entries do not count as
content.
"""

from __future__ import annotations

import errno
import os
from collections.abc import Iterable
from pathlib import Path

from zero.errors import TargetDirectoryError, TargetPermissionError

DEFAULT_ALLOWED_ENTRIES = frozenset({".git", ".gitignore", ".gitkeep"})

_PERMISSION_ERRNOS = {errno.EACCES, errno.EPERM}

NOT_WRITABLE = "Target directory is not writable. Check your permissions and try again."
CANNOT_CREATE = "Cannot create target directory. Check your permissions and try again."


def normalize_directory(directory: str) -> str:
    """Blank input means the current directory."""
    return directory.strip() or "."


def resolve_target(directory: str, cwd: str | Path | None = None) -> Path:
    base = Path(cwd) if cwd is not None else Path.cwd()
    return (base / normalize_directory(directory)).resolve()


def assert_writable(path: Path) -> None:
    if not os.access(path, os.W_OK):
        raise TargetPermissionError(NOT_WRITABLE)


def prepare_target_directory(
    target: Path, allowed_entries: Iterable[str] = DEFAULT_ALLOWED_ENTRIES
) -> Path:
    """Validate (or create) *target* for scaffolding.

    Raises:
        TargetDirectoryError: If the path is a file or a non-empty directory.
        TargetPermissionError: If the directory cannot be created or is not
            writable.
    """
    allowed = set(allowed_entries)
    try:
        if target.exists():
            if not target.is_dir():
                raise TargetDirectoryError(
                    f"Target path exists and is not a directory: {target}"
                )
            assert_writable(target)
            remaining = sorted(entry.name for entry in target.iterdir() if entry.name not in allowed)
            if remaining:
                raise TargetDirectoryError(
                    f"Target directory is not empty: {target} "
                    f"(found {', '.join(remaining[:5])}"
                    f"{', ...' if len(remaining) > 5 else ''})"
                )
            return target
    except PermissionError as exc:
        raise TargetPermissionError(NOT_WRITABLE) from exc

    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        if isinstance(exc, PermissionError) or exc.errno in _PERMISSION_ERRNOS:
            raise TargetPermissionError(CANNOT_CREATE) from exc
        raise
    assert_writable(target)
    return target
