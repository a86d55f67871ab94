# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for assets and containers."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class CodecName(str, Enum):
    """Enumerate the persistence codecs bundled with tidi."""

    YAML = "yaml"
    JSON = "json"


class AssetOptions(BaseModel):
    """Options accepted by :meth:`tidi.core.container.Container.asset`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    file: Path | None = None

    @field_validator("file", mode="after")
    @classmethod
    def expand_user(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None

    @classmethod
    def coerce(cls, options: AssetOptions | Mapping[str, Any] | None, **overrides: Any) -> AssetOptions:
        """Return ``options`` as an :class:`AssetOptions` instance.

        Args:
            options: Existing options, a raw mapping, or ``None``.
            **overrides: Keyword values that take precedence when not ``None``.

        Returns:
            AssetOptions: Validated options.
        """

        if isinstance(options, AssetOptions):
            payload = options.model_dump()
        else:
            payload = dict(options or {})
        payload.update({key: value for key, value in overrides.items() if value is not None})
        return cls.model_validate(payload)


class ContainerSettings(BaseModel):
    """Settings shared by every definition of a container."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    codec: CodecName | None = None


__all__ = [
    "AssetOptions",
    "CodecName",
    "ContainerSettings",
]
