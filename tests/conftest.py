"""Shared pytest fixtures for randomizer tests.

Provides reusable configuration objects, seeded sources and a fresh
registry for each test.
"""

from __future__ import annotations

import pytest

from randomizer.config import RandomizerConfig
from randomizer.generators.registry import GeneratorRegistry
from randomizer.sources.subtractive import SubtractiveSource


@pytest.fixture
def default_config() -> RandomizerConfig:
    """Return a RandomizerConfig with all default values."""
    return RandomizerConfig()


@pytest.fixture
def seeded_config() -> RandomizerConfig:
    """Return a config with a fixed seed for reproducible draws."""
    return RandomizerConfig(seed=12345)


@pytest.fixture
def diagnostic_config() -> RandomizerConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return RandomizerConfig(seed=12345, log_level="full", diagnostic_mode=True)


@pytest.fixture
def subtractive_source() -> SubtractiveSource:
    """Return a SubtractiveSource with a fixed seed."""
    return SubtractiveSource(seed=42)


@pytest.fixture
def registry(seeded_config: RandomizerConfig) -> GeneratorRegistry:
    """Return a fresh registry over the seeded config."""
    return GeneratorRegistry(seeded_config)
