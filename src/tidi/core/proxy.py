# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Proxy wrapper routing calls to interfaces before the wrapped object.

A :class:`Proxy` imitates the object it wraps as closely as it can. Attribute
lookups and method calls are resolved in this order:

1. interfaces registered for the service, called with the wrapped object as
   their first argument;
2. attributes of the wrapped object itself.

The proxy keeps its own surface down to :attr:`Proxy.delegate`,
:attr:`Proxy.interfaces`, :meth:`Proxy.supports` and :meth:`Proxy.call` so
that everything else reads as if it came from the wrapped object.
"""

from __future__ import annotations

import operator
import os
from collections.abc import Callable, Iterator, Mapping
from functools import partial
from types import MappingProxyType
from typing import Any, Final

from ..interfaces.runtime import InterfaceFunction

_SLOTS: Final[frozenset[str]] = frozenset({"_delegate", "_interfaces"})


def unwrap(value: Any) -> Any:
    """Return the object wrapped by ``value`` when it is a proxy."""

    return value.delegate if isinstance(value, Proxy) else value


def _binary(name: str, function: Callable[[Any, Any], Any]) -> Callable[[Proxy, Any], Any]:
    def method(self: Proxy, other: Any) -> Any:
        return self._special(name, function, unwrap(other))

    method.__name__ = method.__qualname__ = name
    return method


def _reflected(name: str, function: Callable[[Any, Any], Any]) -> Callable[[Proxy, Any], Any]:
    def swapped(delegate: Any, other: Any) -> Any:
        return function(other, delegate)

    return _binary(name, swapped)


def _unary(name: str, function: Callable[[Any], Any]) -> Callable[[Proxy], Any]:
    def method(self: Proxy) -> Any:
        return self._special(name, function)

    method.__name__ = method.__qualname__ = name
    return method


class Proxy:
    """Wrap ``delegate`` and overlay the callables in ``interfaces`` on it."""

    __slots__ = ("_delegate", "_interfaces")

    def __init__(self, delegate: Any, interfaces: Mapping[str, InterfaceFunction] | None = None) -> None:
        """Initialise the proxy.

        Args:
            delegate: Object wrapped by the proxy.
            interfaces: Interface callables keyed by name. The mapping is
                viewed, not copied, so later additions are visible.
        """

        object.__setattr__(self, "_delegate", delegate)
        object.__setattr__(self, "_interfaces", MappingProxyType(interfaces if interfaces is not None else {}))

    @property
    def delegate(self) -> Any:
        """Return the wrapped object."""

        return self._delegate

    @property
    def interfaces(self) -> Mapping[str, InterfaceFunction]:
        """Return a read-only view of the interfaces defined for the wrapped object."""

        return self._interfaces

    def supports(self, name: str, include_private: bool = False) -> bool:
        """Return whether ``name`` resolves to an interface or a delegate attribute.

        Args:
            name: Interface or attribute name.
            include_private: When ``True`` underscore-prefixed attributes of
                the wrapped object are considered as well.

        Returns:
            bool: ``True`` when a call to ``name`` can be dispatched.
        """

        if name in self._interfaces:
            return True
        if name.startswith("_") and not include_private:
            return False
        return hasattr(self._delegate, name)

    def call(self, name: str, /, *args: Any, **kwargs: Any) -> Any:
        """Dispatch ``name`` to an interface or to the wrapped object.

        Raises:
            AttributeError: If neither an interface nor the wrapped object
                provides ``name``.
        """

        interface = self._interfaces.get(name)
        if interface is not None:
            return interface(self._delegate, *args, **kwargs)
        return getattr(self._delegate, name)(*args, **kwargs)

    def _special(self, name: str, fallback: Callable[..., Any], *args: Any) -> Any:
        interface = self._interfaces.get(name)
        if interface is not None:
            return interface(self._delegate, *args)
        return fallback(self._delegate, *args)

    def __getattr__(self, name: str) -> Any:
        if name in _SLOTS:
            raise AttributeError(name)
        interface = self._interfaces.get(name)
        if interface is not None:
            return partial(interface, self._delegate)
        return getattr(self._delegate, name)

    def __setattr__(self, name: str, value: Any) -> None:
        setattr(self._delegate, name, value)

    def __delattr__(self, name: str) -> None:
        delattr(self._delegate, name)

    def __dir__(self) -> list[str]:
        return sorted({*dir(self._delegate), *self._interfaces})

    @property  # type: ignore[misc]
    def __class__(self) -> type:  # noqa: D105
        return type(self._delegate)

    def __str__(self) -> str:
        return self._special("__str__", str)

    def __repr__(self) -> str:
        return self._special("__repr__", repr)

    def __eq__(self, other: object) -> bool:
        return self._special("__eq__", operator.eq, unwrap(other))

    def __ne__(self, other: object) -> bool:
        return self._special("__ne__", operator.ne, unwrap(other))

    def __hash__(self) -> int:
        return self._special("__hash__", hash)

    def __bool__(self) -> bool:
        return self._special("__bool__", bool)

    def __len__(self) -> int:
        return self._special("__len__", len)

    def __iter__(self) -> Iterator[Any]:
        return self._special("__iter__", iter)

    def __contains__(self, item: object) -> bool:
        return self._special("__contains__", operator.contains, item)

    def __getitem__(self, key: Any) -> Any:
        return self._special("__getitem__", operator.getitem, key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self._special("__setitem__", operator.setitem, key, value)

    def __delitem__(self, key: Any) -> None:
        self._special("__delitem__", operator.delitem, key)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        interface = self._interfaces.get("__call__")
        if interface is not None:
            return interface(self._delegate, *args, **kwargs)
        return self._delegate(*args, **kwargs)

    def __fspath__(self) -> str | bytes:
        return self._special("__fspath__", os.fspath)

    def __format__(self, format_spec: str) -> str:
        return self._special("__format__", format, format_spec)

    def __next__(self) -> Any:
        return self._special("__next__", next)

    def __reversed__(self) -> Iterator[Any]:
        return self._special("__reversed__", reversed)

    def __enter__(self) -> Any:
        return self._special("__enter__", lambda delegate: delegate.__enter__())

    def __exit__(self, *exc_info: Any) -> Any:
        return self._special("__exit__", lambda delegate, *args: delegate.__exit__(*args), *exc_info)

    __lt__ = _binary("__lt__", operator.lt)
    __le__ = _binary("__le__", operator.le)
    __gt__ = _binary("__gt__", operator.gt)
    __ge__ = _binary("__ge__", operator.ge)

    __add__ = _binary("__add__", operator.add)
    __sub__ = _binary("__sub__", operator.sub)
    __mul__ = _binary("__mul__", operator.mul)
    __matmul__ = _binary("__matmul__", operator.matmul)
    __truediv__ = _binary("__truediv__", operator.truediv)
    __floordiv__ = _binary("__floordiv__", operator.floordiv)
    __mod__ = _binary("__mod__", operator.mod)
    __divmod__ = _binary("__divmod__", divmod)
    __pow__ = _binary("__pow__", operator.pow)
    __lshift__ = _binary("__lshift__", operator.lshift)
    __rshift__ = _binary("__rshift__", operator.rshift)
    __and__ = _binary("__and__", operator.and_)
    __or__ = _binary("__or__", operator.or_)
    __xor__ = _binary("__xor__", operator.xor)

    __radd__ = _reflected("__radd__", operator.add)
    __rsub__ = _reflected("__rsub__", operator.sub)
    __rmul__ = _reflected("__rmul__", operator.mul)
    __rmatmul__ = _reflected("__rmatmul__", operator.matmul)
    __rtruediv__ = _reflected("__rtruediv__", operator.truediv)
    __rfloordiv__ = _reflected("__rfloordiv__", operator.floordiv)
    __rmod__ = _reflected("__rmod__", operator.mod)
    __rdivmod__ = _reflected("__rdivmod__", divmod)
    __rpow__ = _reflected("__rpow__", operator.pow)
    __rlshift__ = _reflected("__rlshift__", operator.lshift)
    __rrshift__ = _reflected("__rrshift__", operator.rshift)
    __rand__ = _reflected("__rand__", operator.and_)
    __ror__ = _reflected("__ror__", operator.or_)
    __rxor__ = _reflected("__rxor__", operator.xor)

    __neg__ = _unary("__neg__", operator.neg)
    __pos__ = _unary("__pos__", operator.pos)
    __abs__ = _unary("__abs__", abs)
    __invert__ = _unary("__invert__", operator.invert)
    __int__ = _unary("__int__", int)
    __float__ = _unary("__float__", float)
    __index__ = _unary("__index__", operator.index)


__all__ = [
    "Proxy",
    "unwrap",
]
