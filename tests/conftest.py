"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add the source directory to the Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / "src"))


@pytest.fixture
def rng():
    """A seeded random source, fresh for every test."""
    return np.random.default_rng(42)


@pytest.fixture
def small_config():
    """A configuration small enough for whole generations to run quickly."""
    from evoforage.run.config import Config

    config = Config()
    config.num_animals = 4
    config.num_foods = 12
    config.generation_length = 20
    config.max_number_generations = 3
    return config
