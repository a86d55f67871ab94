# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

from tidi import Proxy, ServiceDefinition
from tidi.interfaces import Codec, Initializer, InterfaceFunction, ServiceObserver, SupportsCapabilities
from tidi.serialization import JsonCodec, YamlCodec


class _Recorder:
    def __init__(self) -> None:
        self.seen: list[ServiceDefinition] = []

    def __call__(self, definition: ServiceDefinition) -> None:
        self.seen.append(definition)


def test_proxy_satisfies_capability_protocol() -> None:
    assert isinstance(Proxy(object()), SupportsCapabilities)


def test_bundled_codecs_satisfy_codec_protocol() -> None:
    assert isinstance(YamlCodec(), Codec)
    assert isinstance(JsonCodec(), Codec)


def test_callables_satisfy_runtime_protocols() -> None:
    recorder = _Recorder()

    assert isinstance(recorder, ServiceObserver)
    assert isinstance(dict, Initializer)
    assert isinstance(lambda instance: instance, InterfaceFunction)


def test_observer_object_receives_changes() -> None:
    recorder = _Recorder()
    definition = ServiceDefinition()
    definition.add_observer(recorder)

    definition.set("instance", "value")

    assert recorder.seen == [definition]
