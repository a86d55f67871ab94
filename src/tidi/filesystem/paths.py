# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for maintaining application directories and paths."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path

_Pathish = str | PathLike[str]


def expand_path(path: _Pathish) -> Path:
    """Return ``path`` with ``~`` expanded and made absolute.

    Symbolic links are left unresolved.

    Args:
        path: Filesystem path supplied by the caller.

    Returns:
        Path: Absolute, user-expanded path.

    Raises:
        ValueError: If ``path`` is ``None``.

    """

    if path is None:
        raise ValueError("path must not be None")
    return Path(os.path.abspath(Path(path).expanduser()))


def prepare_directory(path: _Pathish) -> str | None:
    """Create the directory at ``path`` silently and report whether it exists.

    Only the last path component is created; missing parents make the call
    fail quietly.

    Args:
        path: Directory path, expanded before creation.

    Returns:
        str | None: The expanded directory path when it exists after the
        attempt, otherwise ``None``.

    """

    expanded = expand_path(path)
    try:
        expanded.mkdir()
    except OSError:
        pass
    return str(expanded) if expanded.is_dir() else None


def join_path(*segments: _Pathish) -> str:
    """Join ``segments`` with the platform path separator.

    Args:
        *segments: Path components; at least one is required.

    Returns:
        str: Joined path, without expansion or resolution.

    Raises:
        TypeError: If no segment is given or a segment is not path-like.

    """

    if not segments:
        raise TypeError("join_path() requires at least one segment")
    for segment in segments:
        if not isinstance(segment, (str, PathLike)):
            raise TypeError(f"expected str or os.PathLike segment, got {type(segment).__name__}")
    return os.path.join(*(os.fspath(segment) for segment in segments))


__all__ = (
    "expand_path",
    "join_path",
    "prepare_directory",
)
