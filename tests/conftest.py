"""Shared pytest configuration for preordertree tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from preordertree import reset_process_cache
from preordertree.testing import sample_tree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: large trees, excluded by run_tests.py by default")


@pytest.fixture(autouse=True)
def fresh_process_cache():
    """Every test starts with the process-wide cache Empty."""
    reset_process_cache()
    yield
    reset_process_cache()


@pytest.fixture
def tree():
    return sample_tree()
