"""Pytest configuration and fixtures."""

from collections.abc import Sequence
from typing import Any

import pytest


class StubRandom:
    """Random source returning a fixed draw and a fixed choice index."""

    def __init__(self, value: float, index: int = 0) -> None:
        self.value = value
        self.index = index
        self.choices: list[Sequence[Any]] = []

    def random(self) -> float:
        return self.value

    def getrandbits(self, k: int) -> int:
        return 0

    def choice(self, seq: Sequence[Any]) -> Any:
        self.choices.append(seq)
        return seq[self.index]


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def stub_random():
    """Factory for deterministic random sources."""
    return StubRandom
