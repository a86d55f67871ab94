# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Protocol definitions shared across tidi."""

from __future__ import annotations

from .runtime import Initializer, InterfaceFunction, ServiceObserver, SupportsCapabilities
from .serialization import Codec

__all__ = [
    "Codec",
    "Initializer",
    "InterfaceFunction",
    "ServiceObserver",
    "SupportsCapabilities",
]
