# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Interfaces describing service definitions, observers and dispatch."""

# pylint: disable=too-few-public-methods -- Protocol definitions intentionally expose minimal method surfaces.

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..core.service import ServiceDefinition


@runtime_checkable
class Initializer(Protocol):
    """Zero-argument callable producing the value of a service."""

    @abstractmethod
    def __call__(self) -> Any:
        """Return the freshly constructed service value."""

        raise NotImplementedError


@runtime_checkable
class InterfaceFunction(Protocol):
    """Callable overriding a method of a wrapped service instance."""

    @abstractmethod
    def __call__(self, instance: Any, /, *args: Any, **kwargs: Any) -> Any:
        """Return the result of the interface applied to ``instance``.

        Args:
            instance: The object wrapped by the proxy.
            *args: Positional arguments supplied by the caller.
            **kwargs: Keyword arguments supplied by the caller.
        """

        raise NotImplementedError


@runtime_checkable
class ServiceObserver(Protocol):
    """Receive notifications when a service definition changes."""

    @abstractmethod
    def __call__(self, definition: ServiceDefinition) -> None:
        """Handle a change to ``definition``.

        Args:
            definition: The definition whose fields were just modified.
        """

        raise NotImplementedError


@runtime_checkable
class SupportsCapabilities(Protocol):
    """Describe objects that answer capability checks and dispatch by name."""

    @abstractmethod
    def supports(self, name: str, include_private: bool = False) -> bool:
        """Return whether ``name`` can be dispatched."""

        raise NotImplementedError

    @abstractmethod
    def call(self, name: str, /, *args: Any, **kwargs: Any) -> Any:
        """Dispatch ``name`` with the supplied arguments."""

        raise NotImplementedError


__all__ = [
    "Initializer",
    "InterfaceFunction",
    "ServiceObserver",
    "SupportsCapabilities",
]
