# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the container runtime."""

from __future__ import annotations


class TidiError(Exception):
    """Base class for errors raised by tidi."""


class ServiceContextError(TidiError, RuntimeError):
    """Raise when a service declaration is made outside a service context."""


class SerializationError(TidiError):
    """Raise when a codec cannot encode or decode a persisted value."""


__all__ = [
    "SerializationError",
    "ServiceContextError",
    "TidiError",
]
