# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tiny dependency injection container with lazy, persistable services."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final, TypeAlias

from ..config import AssetOptions, ContainerSettings
from ..errors import SerializationError, ServiceContextError
from ..filesystem import expand_path
from ..interfaces.runtime import Initializer, InterfaceFunction
from ..interfaces.serialization import Codec
from ..logging import get_logger, print_traceback, warn
from ..serialization import codec_for, get_codec
from .proxy import Proxy, unwrap
from .service import ServiceDefinition, ServiceField

LOGGER = get_logger(__name__)

ServiceName: TypeAlias = str | Enum
ContainerBody: TypeAlias = Callable[["Container"], object]
PathArg: TypeAlias = str | PathLike[str]


class AccessMode(str, Enum):
    """Enumerate the ways a service can be retrieved from a container."""

    NORMAL = "normal"
    INIT = "init"
    RAW = "raw"


class UpdateTarget(Enum):
    """Sentinel values accepted by :meth:`Container.update`."""

    ALL = "all"


ALL: Final[UpdateTarget] = UpdateTarget.ALL


def _require_initializer(initializer: object) -> None:
    if not isinstance(initializer, Initializer):
        raise TypeError(f"initializer must be a zero-argument callable, not {type(initializer).__name__}")


def service_key(name: Hashable) -> str:
    """Return the canonical string key for a service or interface name."""

    if isinstance(name, Enum):
        return str(name.value)
    return str(name)


@dataclass(frozen=True, slots=True)
class ServiceBuilder:
    """Declare initializers and interfaces for one named service."""

    container: Container
    name: str

    def on_creation(self, initializer: Initializer) -> Initializer:
        """Set the initializer of the service; usable as a decorator."""

        return self.container.on_creation(initializer, service_name=self.name)

    def interface(
        self,
        names: ServiceName | Iterable[ServiceName],
        function: InterfaceFunction | None = None,
    ) -> Any:
        """Register ``function`` under ``names``; returns a decorator when omitted."""

        return self.container.interface(names, function, service_name=self.name)

    def get(self, mode: AccessMode | str = AccessMode.NORMAL) -> Any:
        """Return the service from the owning container."""

        return self.container.get(self.name, mode)


class Container:
    """Hold named service definitions and hand them out lazily behind proxies.

    Definitions are declared with :meth:`service` and :meth:`asset` and read
    back with :meth:`get` (or ``container[name]``). The first read runs the
    initializer and caches the wrapped result; later reads return the cached
    proxy until a re-initialization is requested with :attr:`AccessMode.INIT`.

    Definitions that carry a persistence path are written to disk whenever
    one of their fields changes and whenever :meth:`update` is called.
    """

    def __init__(
        self,
        body: ContainerBody | None = None,
        *,
        name: Hashable | None = None,
        codec: Codec | None = None,
        settings: ContainerSettings | None = None,
    ) -> None:
        """Create a container and run ``body`` against it.

        Args:
            body: Callable receiving the new container, used to declare
                services and assets.
            name: Identifier used when the container is stored in a registry.
            codec: Codec used for every persisted definition. Defaults to
                ``settings.codec`` or, when unset, a codec picked from each
                file suffix.
            settings: Container-wide settings.
        """

        self.name = name
        self._settings = settings or ContainerSettings()
        if codec is None and self._settings.codec is not None:
            codec = get_codec(self._settings.codec)
        self._codec = codec
        self._services: dict[str, ServiceDefinition] = {}
        self._current_service: str | None = None

        if body is not None:
            body(self)

    @property
    def services(self) -> Mapping[str, ServiceDefinition]:
        """Return a read-only view of the definitions keyed by name."""

        return MappingProxyType(self._services)

    def service(self, name: ServiceName, body: ContainerBody | None = None) -> ServiceBuilder:
        """Declare the service ``name``.

        While ``body`` runs, :meth:`on_creation` and :meth:`interface` apply
        to ``name`` unless given an explicit ``service_name``.

        Args:
            name: Service name.
            body: Callable receiving this container.

        Returns:
            ServiceBuilder: Builder bound to ``name`` for further declarations.
        """

        key = service_key(name)
        previous, self._current_service = self._current_service, key
        try:
            if body is not None:
                body(self)
        finally:
            self._current_service = previous
        return ServiceBuilder(self, key)

    def on_creation(
        self,
        initializer: Initializer,
        *,
        service_name: ServiceName | None = None,
    ) -> Initializer:
        """Set the initializer of the current service.

        The persistence path and any cached instance are left untouched.

        Args:
            initializer: Zero-argument callable producing the service value.
            service_name: Target service; defaults to the current context.

        Returns:
            Initializer: ``initializer`` unchanged.

        Raises:
            ServiceContextError: If no service is targeted.
            TypeError: If ``initializer`` is not callable.
        """

        _require_initializer(initializer)
        definition = self._find_service(self._context_name(service_name, "on_creation"))
        definition.set(ServiceField.INITIALIZER, initializer)
        return initializer

    def interface(
        self,
        names: ServiceName | Iterable[ServiceName],
        function: InterfaceFunction | None = None,
        *,
        service_name: ServiceName | None = None,
    ) -> Any:
        """Register ``function`` as one or more interfaces of the current service.

        Args:
            names: Interface name or iterable of names.
            function: Callable invoked as ``function(instance, *args)``. When
                omitted a decorator is returned.
            service_name: Target service; defaults to the current context.

        Returns:
            Any: ``function``, or a decorator registering its argument.

        Raises:
            ServiceContextError: If no service is targeted.
        """

        target = self._context_name(service_name, "interface")
        if function is None:

            def _decorator(func: InterfaceFunction) -> InterfaceFunction:
                return self.interface(names, func, service_name=target)

            return _decorator

        if isinstance(names, (str, Enum)):
            names = [names]
        definition = self._find_service(target)
        for interface_name in names:
            definition.add_interface(service_key(interface_name), function)
        return function

    def asset(
        self,
        arg: ServiceName | Mapping[ServiceName, Any],
        body: Initializer | None = None,
        *,
        file: PathArg | None = None,
        options: AssetOptions | Mapping[str, Any] | None = None,
    ) -> ServiceDefinition | None:
        """Declare an asset from a literal instance or a lazy initializer.

        An asset is a service without interfaces. When a persistence file is
        given and can be read, its content replaces the literal instance and
        is used instead of running ``body`` on first access.

        Args:
            arg: Either ``{name: instance}`` or a bare name.
            body: Zero-argument callable producing the value on first access.
            file: Persistence path; overrides ``options.file``.
            options: :class:`AssetOptions` or a mapping of its fields.

        Returns:
            ServiceDefinition | None: The declared definition, or ``None`` when
            there was nothing to declare.

        Raises:
            ValueError: If ``arg`` is an empty mapping.
            TypeError: If ``body`` is not callable.
        """

        if isinstance(arg, Mapping):
            if not arg:
                raise ValueError("asset mapping must contain one name")
            name, instance = next(iter(arg.items()))
        else:
            name, instance = arg, None

        path = AssetOptions.coerce(options, file=file).file
        if path is not None:
            loaded = self._load(path)
            if loaded is not None:
                instance = loaded

        if instance is None and body is None:
            return None
        if body is not None:
            _require_initializer(body)

        definition = self._find_service(service_key(name))
        definition.set(ServiceField.INITIALIZER, body)
        definition.set(ServiceField.INSTANCE, instance)
        definition.set(ServiceField.PERSISTENCE_PATH, path)
        LOGGER.debug("declared asset %s (file=%s)", service_key(name), path)
        return definition

    def get(self, name: ServiceName, mode: AccessMode | str = AccessMode.NORMAL) -> Any:
        """Return the service ``name``, initialising it when needed.

        Args:
            name: Service name.
            mode: ``NORMAL`` returns the cached proxy, ``INIT`` forces the
                initializer to run again and ``RAW`` returns the wrapped
                object instead of the proxy. ``RAW`` initialises on first
                access but never re-initialises.

        Returns:
            Any: The proxied (or raw) service, or ``None`` when the service is
            unknown or its initializer produced nothing.
        """

        mode = AccessMode(mode)
        definition = self._services.get(service_key(name))
        if definition is None:
            return None

        if not definition.initialized or mode is AccessMode.INIT:
            result = self._initialize(definition, reinit=mode is AccessMode.INIT)
        else:
            result = definition.instance

        return unwrap(result) if mode is AccessMode.RAW else result

    def __getitem__(self, key: ServiceName | tuple[ServiceName, AccessMode | str]) -> Any:
        if isinstance(key, tuple):
            return self.get(*key)
        return self.get(key)

    def update(
        self,
        target: UpdateTarget | ServiceName | ServiceDefinition | Iterable[ServiceName | ServiceDefinition],
        file: PathArg | None = None,
    ) -> None:
        """Persist definitions explicitly.

        Args:
            target: :data:`ALL` to write every definition to its own path, a
                name or definition, or an iterable of either.
            file: Destination overriding each stored path; ignored for
                :data:`ALL`.
        """

        definitions: list[ServiceDefinition]
        if target is ALL:
            definitions, file = list(self._services.values()), None
        elif isinstance(target, ServiceDefinition):
            definitions = [target]
        elif isinstance(target, (str, Enum)):
            definitions = [self._find_service(service_key(target))]
        else:
            definitions = [
                item if isinstance(item, ServiceDefinition) else self._find_service(service_key(item))
                for item in target
            ]

        for definition in definitions:
            self._serialize(definition, file)

    def _initialize(self, definition: ServiceDefinition, *, reinit: bool) -> Proxy | None:
        initializer = definition.initializer
        if initializer is not None and (reinit or definition.raw_instance is None):
            value = initializer()
        else:
            value = definition.raw_instance
        if value is None:
            return None

        proxy = Proxy(value, definition.interfaces)
        definition.set(ServiceField.INSTANCE, proxy)
        return proxy

    def _context_name(self, service_name: ServiceName | None, operation: str) -> str:
        if service_name is not None:
            return service_key(service_name)
        if self._current_service is None:
            raise ServiceContextError(f"{operation}() called outside of a service definition")
        return self._current_service

    def _find_service(self, name: str) -> ServiceDefinition:
        definition = self._services.get(name)
        if definition is None:
            definition = ServiceDefinition()
            definition.add_observer(self._on_service_changed)
            self._services[name] = definition
        return definition

    def _on_service_changed(self, definition: ServiceDefinition) -> None:
        self._serialize(definition)

    def _codec_for(self, path: Path) -> Codec:
        return self._codec if self._codec is not None else codec_for(path)

    def _load(self, path: PathArg) -> Any:
        target = expand_path(path)
        try:
            value = self._codec_for(target).load(target)
        except (OSError, SerializationError) as exc:
            LOGGER.debug("ignoring persisted value at %s: %s", target, exc)
            return None
        LOGGER.debug("loaded persisted value from %s", target)
        return value

    def _serialize(self, definition: ServiceDefinition, file: PathArg | None = None) -> None:
        path = file if file is not None else definition.persistence_path
        instance = definition.raw_instance
        if path is None or instance is None:
            return

        target = expand_path(path)
        try:
            self._codec_for(target).dump(instance, target)
        except (OSError, SerializationError) as exc:
            LOGGER.warning("failed to serialize service to %s: %s", target, exc)
            warn(f"DI container failed to serialize service to {target}")
            warn(str(exc))
            print_traceback()
            return
        LOGGER.debug("serialized service to %s", target)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, (str, Enum)) and service_key(name) in self._services

    def __iter__(self) -> Iterator[str]:
        return iter(self._services)

    def __len__(self) -> int:
        return len(self._services)

    def __repr__(self) -> str:
        keys = ", ".join(sorted(self._services))
        return f"Container(name={self.name!r}, services=[{keys}])"


__all__ = [
    "ALL",
    "AccessMode",
    "Container",
    "ContainerBody",
    "ServiceBuilder",
    "ServiceName",
    "UpdateTarget",
    "service_key",
]
