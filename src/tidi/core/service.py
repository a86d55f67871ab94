# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Observable service definitions held by containers."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from ..interfaces.runtime import Initializer, InterfaceFunction, ServiceObserver
from .proxy import Proxy


class ServiceField(str, Enum):
    """Enumerate the keys of a service definition bag."""

    INITIALIZER = "initializer"
    INSTANCE = "instance"
    INTERFACES = "interfaces"
    PERSISTENCE_PATH = "persistence_path"


class ServiceDefinition:
    """Store how a service is built, its cached value and where it persists.

    Every effective write through :meth:`set` notifies the attached observers
    synchronously, in the order they were attached. Writes that leave the
    value unchanged are silent.
    """

    __slots__ = ("_definition", "_observers")

    def __init__(self) -> None:
        """Initialise an empty definition without observers."""

        self._definition: dict[ServiceField, Any] = {
            ServiceField.INITIALIZER: None,
            ServiceField.INSTANCE: None,
            ServiceField.INTERFACES: {},
            ServiceField.PERSISTENCE_PATH: None,
        }
        self._observers: list[ServiceObserver] = []

    def get(self, key: ServiceField | str) -> Any:
        """Return the value stored under ``key``.

        Args:
            key: Field identifier, either a :class:`ServiceField` or its value.

        Returns:
            Any: Stored value.
        """

        return self._definition[ServiceField(key)]

    def set(self, key: ServiceField | str, value: Any) -> Any:
        """Store ``value`` under ``key`` and notify observers when it changed.

        Args:
            key: Field identifier, either a :class:`ServiceField` or its value.
            value: New field value.

        Returns:
            Any: ``value``, for chaining.
        """

        field = ServiceField(key)
        previous = self._definition[field]
        self._definition[field] = value
        if value is not previous and previous != value:
            self._notify()
        return value

    __getitem__ = get
    __setitem__ = set

    def add_observer(self, observer: ServiceObserver) -> None:
        """Attach ``observer``; it is called with this definition on change."""

        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: ServiceObserver) -> None:
        """Detach ``observer`` if it is attached."""

        if observer in self._observers:
            self._observers.remove(observer)

    def add_interface(self, name: str, function: InterfaceFunction) -> None:
        """Register ``function`` as the interface ``name``.

        The interface map is updated in place so proxies created earlier see
        the new entry. This does not notify observers.
        """

        self.interfaces[name] = function

    @property
    def initializer(self) -> Initializer | None:
        return self._definition[ServiceField.INITIALIZER]

    @property
    def instance(self) -> Any:
        return self._definition[ServiceField.INSTANCE]

    @property
    def interfaces(self) -> MutableMapping[str, InterfaceFunction]:
        return self._definition[ServiceField.INTERFACES]

    @property
    def persistence_path(self) -> Any:
        return self._definition[ServiceField.PERSISTENCE_PATH]

    @property
    def initialized(self) -> bool:
        """Return whether a proxied instance is cached."""

        return isinstance(self.instance, Proxy)

    @property
    def raw_instance(self) -> Any:
        """Return the cached instance with any proxy unwrapped."""

        instance = self.instance
        return instance.delegate if isinstance(instance, Proxy) else instance

    @property
    def definition(self) -> Mapping[str, Any]:
        """Return a read-only snapshot of the definition bag keyed by field name."""

        return MappingProxyType({field.value: value for field, value in self._definition.items()})

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{field.value}={value!r}" for field, value in self._definition.items() if field is not ServiceField.INSTANCE
        )
        return f"ServiceDefinition({fields}, initialized={self.initialized})"


__all__ = [
    "ServiceDefinition",
    "ServiceField",
]
