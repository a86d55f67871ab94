# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from tidi import CONTAINERS


@pytest.fixture(autouse=True)
def clean_registry() -> Iterator[None]:
    """Start and finish every test with an empty container registry."""
    CONTAINERS.clear()
    yield
    CONTAINERS.clear()
