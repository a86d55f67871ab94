# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Process-wide registry of named containers and the ``di`` entry point."""

from __future__ import annotations

import threading
from collections.abc import Hashable, Iterator, MutableMapping
from typing import overload

from ..interfaces.serialization import Codec
from ..logging import get_logger
from .container import Container, ContainerBody

LOGGER = get_logger(__name__)


class Registry(MutableMapping[Hashable, Container]):
    """Map container names to containers behind a re-entrant lock."""

    def __init__(self) -> None:
        """Initialise an empty registry."""

        self._containers: dict[Hashable, Container] = {}
        self._lock = threading.RLock()

    def __getitem__(self, name: Hashable) -> Container:
        with self._lock:
            return self._containers[name]

    def __setitem__(self, name: Hashable, container: Container) -> None:
        with self._lock:
            self._containers[name] = container

    def __delitem__(self, name: Hashable) -> None:
        with self._lock:
            del self._containers[name]

    def __iter__(self) -> Iterator[Hashable]:
        with self._lock:
            return iter(list(self._containers))

    def __len__(self) -> int:
        with self._lock:
            return len(self._containers)

    def clear(self) -> None:
        """Remove every container; the containers themselves stay usable."""

        with self._lock:
            self._containers.clear()

    def __repr__(self) -> str:
        with self._lock:
            names = ", ".join(repr(name) for name in self._containers)
        return f"Registry([{names}])"


CONTAINERS = Registry()


def define(
    name: Hashable | None = None,
    body: ContainerBody | None = None,
    *,
    codec: Codec | None = None,
    registry: Registry = CONTAINERS,
) -> Container:
    """Create a container from ``body`` and register it under ``name``.

    Args:
        name: Registry key. Anonymous containers are returned but not stored.
        body: Callable receiving the new container.
        codec: Persistence codec forwarded to :class:`Container`.
        registry: Registry receiving the container.

    Returns:
        Container: The newly created container.
    """

    container = Container(body, name=name, codec=codec)
    if name is not None:
        registry[name] = container
        LOGGER.debug("registered container %r", name)
    return container


@overload
def lookup(name: None = None, *, registry: Registry = CONTAINERS) -> Registry: ...


@overload
def lookup(name: Hashable, *, registry: Registry = CONTAINERS) -> Container | None: ...


def lookup(name: Hashable | None = None, *, registry: Registry = CONTAINERS) -> Registry | Container | None:
    """Return the container registered as ``name``, or the registry itself.

    Args:
        name: Registry key; when omitted the whole registry is returned.
        registry: Registry to consult.

    Returns:
        Registry | Container | None: The registry, the matching container, or
        ``None`` when no container is registered under ``name``.
    """

    if name is None:
        return registry
    return registry.get(name)


def di(name: Hashable | None = None, body: ContainerBody | None = None) -> Registry | Container | None:
    """Define a container when ``body`` is given, otherwise look one up.

    Examples:
        >>> def app_services(c):
        ...     c.asset({"welcome_message": "Hello, world!"})
        >>> di("en_US", app_services)["welcome_message"] == "Hello, world!"
        True
    """

    if body is not None:
        return define(name, body)
    return lookup(name)


__all__ = [
    "CONTAINERS",
    "Registry",
    "define",
    "di",
    "lookup",
]
