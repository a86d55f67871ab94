# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem utilities for directory assets."""

from __future__ import annotations

from .paths import expand_path, join_path, prepare_directory

__all__ = [
    "expand_path",
    "join_path",
    "prepare_directory",
]
