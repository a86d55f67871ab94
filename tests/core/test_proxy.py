# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

import os
from pathlib import Path

import pytest

from tidi import Proxy
from tidi.core import unwrap


class _Speaker:
    def __init__(self) -> None:
        self.volume = 1

    def foo(self, value: int) -> str:
        return f"own:{value}"

    def say(self, word: str, *, loud: bool = False) -> str:
        return word.upper() if loud else word

    def _whisper(self) -> str:
        return "psst"


def test_interface_wins_over_own_method() -> None:
    speaker = _Speaker()
    calls: list[tuple[object, int]] = []

    def foo(instance: _Speaker, value: int) -> str:
        calls.append((instance, value))
        return f"interface:{value}"

    proxy = Proxy(speaker, {"foo": foo})

    assert proxy.foo(3) == "interface:3"
    assert proxy.call("foo", 4) == "interface:4"
    assert calls == [(speaker, 3), (speaker, 4)]


def test_calls_fall_through_to_delegate() -> None:
    proxy = Proxy(_Speaker())

    assert proxy.say("hi") == "hi"
    assert proxy.call("say", "hi", loud=True) == "HI"
    assert proxy.volume == 1


def test_missing_member_raises_attribute_error() -> None:
    proxy = Proxy(_Speaker())

    with pytest.raises(AttributeError):
        proxy.sing()
    with pytest.raises(AttributeError):
        proxy.call("sing")


def test_supports_checks_interfaces_and_delegate() -> None:
    proxy = Proxy(_Speaker(), {"greet": lambda instance: "hello"})

    assert proxy.supports("greet")
    assert proxy.supports("say")
    assert not proxy.supports("sing")
    assert not proxy.supports("_whisper")
    assert proxy.supports("_whisper", include_private=True)


def test_accessors_expose_delegate_and_read_only_interfaces() -> None:
    speaker = _Speaker()
    interfaces = {"greet": lambda instance: "hello"}
    proxy = Proxy(speaker, interfaces)

    assert proxy.delegate is speaker
    assert dict(proxy.interfaces) == interfaces
    with pytest.raises(TypeError):
        proxy.interfaces["other"] = lambda instance: None  # type: ignore[index]
    assert Proxy(speaker).interfaces == {}


def test_proxy_imitates_wrapped_class() -> None:
    proxy = Proxy(_Speaker())

    assert isinstance(proxy, _Speaker)
    assert isinstance(proxy, Proxy)
    assert type(proxy) is Proxy
    assert "say" in dir(proxy)


def test_attribute_writes_reach_delegate() -> None:
    speaker = _Speaker()
    proxy = Proxy(speaker)

    proxy.volume = 11
    del proxy.volume
    proxy.channel = "left"

    assert not hasattr(speaker, "volume")
    assert speaker.channel == "left"


def test_special_methods_forward_to_delegate() -> None:
    items = ["a", "b"]
    proxy = Proxy(items)

    assert proxy == ["a", "b"]
    assert proxy != ["c"]
    assert len(proxy) == 2
    assert list(proxy) == ["a", "b"]
    assert "a" in proxy
    assert proxy[0] == "a"
    proxy[1] = "z"
    del proxy[0]
    assert items == ["z"]
    assert str(proxy) == str(items)
    assert repr(proxy) == repr(items)
    assert bool(Proxy([])) is False


def test_special_methods_honour_interfaces() -> None:
    proxy = Proxy("abc", {"__len__": lambda instance: 42, "__str__": lambda instance: "custom"})

    assert len(proxy) == 42
    assert str(proxy) == "custom"


def test_hash_and_call_forward() -> None:
    assert hash(Proxy("key")) == hash("key")
    assert Proxy(lambda value: value * 2)(21) == 42
    with pytest.raises(TypeError):
        hash(Proxy({}))


def test_fspath_forwarding(tmp_path: Path) -> None:
    proxy = Proxy(tmp_path)

    assert os.fspath(proxy) == str(tmp_path)
    assert Path(proxy) / "child" == tmp_path / "child"


def test_proxies_compare_by_delegate() -> None:
    assert Proxy("same") == Proxy("same")
    assert unwrap(Proxy("inner")) == "inner"
    assert unwrap("plain") == "plain"


class _Resource:
    def __init__(self) -> None:
        self.exited_with: type[BaseException] | None = None

    def __enter__(self) -> str:
        return "entered"

    def __exit__(self, exc_type: type[BaseException] | None, exc: BaseException | None, tb: object) -> bool:
        self.exited_with = exc_type
        return False


def test_arithmetic_operators_forward() -> None:
    port = Proxy(8080)

    assert port + 1 == 8081
    assert 1 + port == 8081
    assert Proxy(10) - Proxy(3) == 7
    assert Proxy(7) // 2 == 3
    assert Proxy(7) % 4 == 3
    assert divmod(Proxy(7), 2) == (3, 1)
    assert 2 ** Proxy(3) == 8
    assert Proxy(6) & 3 == 2
    assert Proxy(1) << 4 == 16
    assert -Proxy(5) == -5
    assert abs(Proxy(-2)) == 2
    assert ~Proxy(0) == -1


def test_sequence_and_path_operators_forward(tmp_path: Path) -> None:
    assert Proxy("name") + "rc" == "namerc"
    assert "~/" + Proxy(".apprc") == "~/.apprc"
    assert Proxy("ab") * 2 == "abab"
    assert Proxy(tmp_path) / "child" == tmp_path / "child"
    assert "base" / Proxy(Path("leaf")) == Path("base") / "leaf"
    with pytest.raises(TypeError):
        Proxy("name") + 1


def test_numeric_conversions_forward() -> None:
    assert int(Proxy(3.7)) == 3
    assert float(Proxy(2)) == 2.0
    assert [10, 20][Proxy(1)] == 20


def test_ordering_operators_forward() -> None:
    assert Proxy(1) < 2
    assert Proxy(2) <= Proxy(2)
    assert Proxy(3) > 2
    assert 3 > Proxy(1)
    assert sorted([Proxy(3), Proxy(1), Proxy(2)]) == [1, 2, 3]


def test_format_iteration_and_context_management_forward() -> None:
    assert f"{Proxy(8080):>6}" == "  8080"
    assert format(Proxy(3.14159), ".2f") == "3.14"
    assert list(reversed(Proxy([1, 2]))) == [2, 1]

    numbers = Proxy(iter([1, 2]))
    assert next(numbers) == 1
    assert next(numbers) == 2
    with pytest.raises(StopIteration):
        next(numbers)

    resource = _Resource()
    with Proxy(resource) as value:
        assert value == "entered"
    assert resource.exited_with is None
    with pytest.raises(KeyError):
        with Proxy(resource):
            raise KeyError("missing")
    assert resource.exited_with is KeyError


def test_operator_interfaces_override_delegate() -> None:
    items: list[str] = []

    def append(instance: list[str], item: str) -> list[str]:
        instance.append(item)
        return instance

    proxy = Proxy(items, {"__lshift__": append, "__lt__": lambda instance, other: True})

    assert proxy << "x" is items
    proxy << "y"
    assert items == ["x", "y"]
    assert proxy < []
