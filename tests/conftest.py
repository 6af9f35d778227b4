"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from objreflect import ReflectionSettings


@dataclass
class FixtureRecord:
    name: str
    size: int


class FixtureSlotted:
    __slots__ = ("x", "y")

    def __init__(self, x: int) -> None:
        self.x = x


@pytest.fixture
def settings():
    """Explicit default settings, independent of the environment."""
    return ReflectionSettings(_env_file=None)


@pytest.fixture
def nested():
    """Mixed nested mapping used across accessor tests."""
    return {
        "a": "a",
        "b": {"a": "b.a", "b": "b.b"},
        "c": {"a": {"a": "c.a.a"}},
    }


@pytest.fixture
def record_cls():
    return FixtureRecord


@pytest.fixture
def slotted_cls():
    return FixtureSlotted
