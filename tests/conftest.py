"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from idkit.generate import GeneratorStates, reset_generator_state  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_default_state() -> Iterator[None]:
    """Start every test with fresh process-wide generator state."""
    reset_generator_state()
    yield
    reset_generator_state()


@pytest.fixture
def states() -> GeneratorStates:
    """Isolated generator state bundle."""
    return GeneratorStates()


class FrozenClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: int) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1) -> None:
        self.now += ms


@pytest.fixture
def frozen_clock() -> Callable[[int], FrozenClock]:
    """Factory for frozen clocks starting at a given millisecond."""
    return FrozenClock
