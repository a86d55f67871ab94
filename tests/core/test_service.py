# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

from tidi import Proxy, ServiceDefinition, ServiceField


def test_new_definition_is_empty() -> None:
    definition = ServiceDefinition()

    assert definition.initializer is None
    assert definition.instance is None
    assert definition.interfaces == {}
    assert definition.persistence_path is None
    assert not definition.initialized


def test_set_notifies_observers_only_on_change() -> None:
    definition = ServiceDefinition()
    seen: list[ServiceDefinition] = []
    definition.add_observer(seen.append)

    definition.set(ServiceField.INSTANCE, "value")
    definition.set(ServiceField.INSTANCE, "value")
    definition[ServiceField.PERSISTENCE_PATH] = "/tmp/value.yaml"

    assert seen == [definition, definition]


def test_string_keys_address_fields() -> None:
    definition = ServiceDefinition()

    definition.set("instance", 3)

    assert definition.get("instance") == 3
    assert definition[ServiceField.INSTANCE] == 3
    assert definition.definition["instance"] == 3


def test_observers_run_in_attach_order_and_can_be_removed() -> None:
    definition = ServiceDefinition()
    calls: list[str] = []

    def first(_: ServiceDefinition) -> None:
        calls.append("first")

    def second(_: ServiceDefinition) -> None:
        calls.append("second")

    definition.add_observer(first)
    definition.add_observer(second)
    definition.add_observer(first)
    definition.set(ServiceField.INSTANCE, 1)
    definition.remove_observer(first)
    definition.set(ServiceField.INSTANCE, 2)

    assert calls == ["first", "second", "second"]


def test_add_interface_does_not_notify_and_reaches_live_proxies() -> None:
    definition = ServiceDefinition()
    seen: list[ServiceDefinition] = []
    definition.add_observer(seen.append)
    proxy = Proxy("text", definition.interfaces)

    definition.add_interface("shout", lambda instance: instance.upper())

    assert seen == []
    assert proxy.shout() == "TEXT"


def test_raw_instance_unwraps_cached_proxy() -> None:
    definition = ServiceDefinition()
    payload = {"key": "value"}
    definition.set(ServiceField.INSTANCE, Proxy(payload))

    assert definition.initialized
    assert definition.raw_instance is payload
