"""Shared pytest fixtures and markers for all tests."""

import random

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


class ScriptedRandom:
    """Uniform source that replays a fixed sequence of samples, cycling."""

    def __init__(self, values):
        self._values = list(values)
        self._index = 0
        self.calls = 0

    def random(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        self.calls += 1
        return value


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom


@pytest.fixture
def seeded_rng():
    """A seeded random.Random for repeatable statistical tests."""
    return random.Random(20250328)


@pytest.fixture
def sample_profile():
    """Provide a default profile for testing."""
    from pokercareer.models.profile import StatProfile
    return StatProfile()


@pytest.fixture
def rich_profile():
    """Profile with enough bankroll and energy for many entries."""
    from pokercareer.models.profile import StatProfile
    return StatProfile(resources={"bankroll": 1_000_000, "energy": 100})
