"""
Food Module

Classes:
    Food: A food item the animals collect
"""

import numpy as np

from evoforage.simulation.geometry import random_position

class Food:
    """
    A food item: a point in the world. Eaten food is relocated, never destroyed.
    """

    def __init__(self, position: np.ndarray):
        self.position: np.ndarray = np.asarray(position, dtype=np.float64)

    @classmethod
    def random(cls, rng: np.random.Generator) -> 'Food':
        return cls(random_position(rng))

    def relocate(self, rng: np.random.Generator):
        self.position = random_position(rng)

    def __repr__(self):
        return f"Food(x={self.position[0]:.4f}, y={self.position[1]:.4f})"
