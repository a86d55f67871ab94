# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Container, service definition, proxy and registry."""

from .container import ALL, AccessMode, Container, ServiceBuilder, UpdateTarget, service_key
from .proxy import Proxy, unwrap
from .registry import CONTAINERS, Registry, define, di, lookup
from .service import ServiceDefinition, ServiceField

__all__ = [
    "ALL",
    "CONTAINERS",
    "AccessMode",
    "Container",
    "Proxy",
    "Registry",
    "ServiceBuilder",
    "ServiceDefinition",
    "ServiceField",
    "UpdateTarget",
    "define",
    "di",
    "lookup",
    "service_key",
    "unwrap",
]
