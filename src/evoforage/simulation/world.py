"""
World Module

Classes:
    World: The animals and food items sharing the unit torus
"""

import numpy as np
from typing import TYPE_CHECKING

from evoforage.simulation.animal import Animal
from evoforage.simulation.food   import Food

if TYPE_CHECKING:
    from evoforage.run.config import Config

class World:
    """
    The animals and food of the current generation.

    The number of animals and of food items never changes during a simulation.
    Animals and food may overlap. The collections are read-only; only the
    Simulation replaces the animals, through 'repopulate', when it evolves them.

    Public Properties:
        animals: The living animals
        foods:   The food items
    """

    def __init__(self, animals: list[Animal], foods: list[Food]):
        self._animals: tuple[Animal, ...] = tuple(animals)
        self._foods  : tuple[Food, ...]   = tuple(foods)

    @classmethod
    def random(cls, rng: np.random.Generator, config: 'Config') -> 'World':
        animals = [Animal.random(rng, config) for _ in range(config.num_animals)]
        foods   = [Food.random(rng) for _ in range(config.num_foods)]
        return cls(animals, foods)

    @property
    def animals(self) -> tuple[Animal, ...]:
        return self._animals

    @property
    def foods(self) -> tuple[Food, ...]:
        return self._foods

    def repopulate(self, animals: list[Animal]):
        """Replace every animal with the next generation, which must be as large."""
        if len(animals) != len(self._animals):
            raise ValueError(f"a world of {len(self._animals)} animals cannot be "
                             f"repopulated with {len(animals)}")
        self._animals = tuple(animals)

    def food_positions(self) -> np.ndarray:
        """(N, 2) array with the position of every food item."""
        return np.array([food.position for food in self._foods], dtype=np.float64).reshape(-1, 2)

    def __repr__(self):
        return f"World(animals={len(self._animals)}, foods={len(self._foods)})"
