# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""tidi: a tiny dependency injection container."""

from __future__ import annotations

from .config import AssetOptions, CodecName, ContainerSettings
from .core import (
    ALL,
    CONTAINERS,
    AccessMode,
    Container,
    Proxy,
    Registry,
    ServiceBuilder,
    ServiceDefinition,
    ServiceField,
    define,
    di,
    lookup,
)
from .errors import SerializationError, ServiceContextError, TidiError
from .filesystem import expand_path, join_path, prepare_directory
from .helpers import require_all

FULL_NAME = "tidi"
VERSION = "0.1.0"
__version__ = VERSION

__all__ = [
    "ALL",
    "CONTAINERS",
    "AccessMode",
    "AssetOptions",
    "CodecName",
    "Container",
    "ContainerSettings",
    "Proxy",
    "Registry",
    "SerializationError",
    "ServiceBuilder",
    "ServiceContextError",
    "ServiceDefinition",
    "ServiceField",
    "TidiError",
    "__version__",
    "define",
    "di",
    "expand_path",
    "join_path",
    "lookup",
    "prepare_directory",
    "require_all",
]
