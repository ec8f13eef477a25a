"""
Pytest configuration and shared fixtures for gen-kit tests.

Registers test markers, isolates every test from GEN_KIT_* environment
variables, and provides common random states and generators.
"""

import os
from collections.abc import Generator

import pytest

from gen_kit.config import reset_config
from gen_kit.core import choose, integers
from gen_kit.core.gen import Gen
from gen_kit.core.random import Rnd


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, isolated)")
    config.addinivalue_line("markers", "property: mark test as property-based test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test location."""
    for item in items:
        path = str(item.fspath)
        if "unit" in path:
            item.add_marker(pytest.mark.unit)
        elif "property" in path:
            item.add_marker(pytest.mark.property)
        elif "integration" in path:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def clean_config() -> Generator[None, None, None]:
    """Run every test without GEN_KIT_* variables and with fresh configuration."""
    saved = {key: value for key, value in os.environ.items() if key.startswith("GEN_KIT_")}
    for key in saved:
        os.environ.pop(key)
    reset_config()

    yield

    for key in [key for key in os.environ if key.startswith("GEN_KIT_")]:
        os.environ.pop(key)
    os.environ.update(saved)
    reset_config()


@pytest.fixture
def rnd() -> Rnd:
    """Fixed random state."""
    return Rnd.from_seed(42)


@pytest.fixture
def many_rnds() -> list[Rnd]:
    """Two hundred independent random states."""
    return Rnd.from_seed(2024).split_n(200)


@pytest.fixture
def digit_gen() -> Gen[int]:
    """Generator of digits 0-9."""
    return choose(0, 9)


@pytest.fixture
def int_gen() -> Gen[int]:
    """Generator of integers in [-size, size]."""
    return integers()
