"""
Shared fixtures for integration tests.
"""

import pytest

from evoforage.run.config import Config


@pytest.fixture
def foraging_config():
    """A world crowded with food, so that animals eat from the first generation."""
    config = Config()
    config.num_animals = 8
    config.num_foods = 80
    config.generation_length = 300
    config.fov_range = 0.3
    config.mutation_chance = 0.05
    config.max_number_generations = 4
    return config
