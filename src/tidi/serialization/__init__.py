# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Persistence codecs for service instances."""

from __future__ import annotations

from .codecs import JsonCodec, YamlCodec, codec_for, get_codec

__all__ = [
    "JsonCodec",
    "YamlCodec",
    "codec_for",
    "get_codec",
]
