# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Small conveniences for service initializers."""

from __future__ import annotations

import importlib

from .logging import get_logger

LOGGER = get_logger(__name__)


def require_all(item: str, *other: str) -> None:
    """Import every module named in ``item`` and ``other``.

    Useful inside initializers that pull in optional libraries on demand.

    Args:
        item: Dotted module name to import.
        *other: Further dotted module names, imported in order.

    Raises:
        ImportError: If any module cannot be imported.
    """

    for name in (item, *other):
        importlib.import_module(name)
        LOGGER.debug("imported %s", name)


__all__ = ["require_all"]
