# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Structured-data codecs used to persist service instances."""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any, Final

import yaml

from ..config import CodecName
from ..errors import SerializationError
from ..interfaces.serialization import Codec

_ENCODING: Final[str] = "utf-8"


class YamlCodec:
    """Persist values as human-readable YAML documents."""

    @property
    def suffix(self) -> str:
        """Return the file suffix conventionally used for YAML payloads.

        Returns:
            str: ``".yaml"``.
        """

        return ".yaml"

    def __repr__(self) -> str:
        return "YamlCodec()"

    def load(self, path: Path) -> Any:
        """Deserialize the YAML document stored at ``path``.

        Args:
            path: File to read.

        Returns:
            Any: Decoded value.

        Raises:
            OSError: If the file cannot be read.
            SerializationError: If the payload is not valid UTF-8 YAML.
        """

        with path.open(encoding=_ENCODING) as handle:
            try:
                return yaml.safe_load(handle)
            except UnicodeDecodeError as exc:
                raise SerializationError(f"{path} is not {_ENCODING} text: {exc}") from exc
            except yaml.YAMLError as exc:
                raise SerializationError(f"invalid YAML in {path}: {exc}") from exc

    def dump(self, value: Any, path: Path) -> None:
        """Serialise ``value`` to ``path`` as YAML.

        Args:
            value: Value to encode.
            path: Destination file, truncated before writing.

        Raises:
            OSError: If the file cannot be written.
            SerializationError: If ``value`` cannot be represented in YAML.
        """

        try:
            payload = yaml.safe_dump(value, default_flow_style=False, sort_keys=False, allow_unicode=True)
        except yaml.YAMLError as exc:
            raise SerializationError(f"cannot encode {type(value).__name__} as YAML: {exc}") from exc
        path.write_text(payload, encoding=_ENCODING)


class JsonCodec:
    """Persist values as indented JSON documents."""

    @property
    def suffix(self) -> str:
        """Return the file suffix conventionally used for JSON payloads.

        Returns:
            str: ``".json"``.
        """

        return ".json"

    def __repr__(self) -> str:
        return "JsonCodec()"

    def load(self, path: Path) -> Any:
        """Deserialize the JSON document stored at ``path``.

        Raises:
            OSError: If the file cannot be read.
            SerializationError: If the payload is not valid UTF-8 JSON.
        """

        try:
            return json.loads(path.read_text(encoding=_ENCODING))
        except UnicodeDecodeError as exc:
            raise SerializationError(f"{path} is not {_ENCODING} text: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise SerializationError(f"invalid JSON in {path}: {exc}") from exc

    def dump(self, value: Any, path: Path) -> None:
        """Serialise ``value`` to ``path`` as JSON.

        Raises:
            OSError: If the file cannot be written.
            SerializationError: If ``value`` is not JSON serialisable.
        """

        try:
            payload = json.dumps(value, indent=2, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"cannot encode {type(value).__name__} as JSON: {exc}") from exc
        path.write_text(payload + "\n", encoding=_ENCODING)


_CODECS: Final[dict[CodecName, Codec]] = {
    CodecName.YAML: YamlCodec(),
    CodecName.JSON: JsonCodec(),
}


def get_codec(name: CodecName | str) -> Codec:
    """Return the bundled codec registered under ``name``.

    Args:
        name: Codec identifier, either a :class:`CodecName` or its value.

    Returns:
        Codec: Shared codec instance.

    Raises:
        ValueError: If ``name`` does not identify a bundled codec.
    """

    return _CODECS[CodecName(name)]


def codec_for(path: str | PathLike[str]) -> Codec:
    """Return the codec matching the suffix of ``path``.

    JSON is selected for ``.json`` files and YAML for everything else.
    """

    if Path(path).suffix.lower() == _CODECS[CodecName.JSON].suffix:
        return _CODECS[CodecName.JSON]
    return _CODECS[CodecName.YAML]


__all__ = [
    "JsonCodec",
    "YamlCodec",
    "codec_for",
    "get_codec",
]
