# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Interfaces for persistence codecs."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Codec(Protocol):
    """Load and dump arbitrary values to and from a file."""

    @property
    def suffix(self) -> str:
        """Return the preferred file suffix, including the leading dot."""

        raise NotImplementedError

    def load(self, path: Path) -> Any:
        """Return the value decoded from ``path``."""

        raise NotImplementedError

    def dump(self, value: Any, path: Path) -> None:
        """Write ``value`` to ``path``."""

        raise NotImplementedError


__all__ = ["Codec"]
