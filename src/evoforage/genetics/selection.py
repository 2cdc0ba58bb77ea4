"""
Selection Module

Classes:
    SelectionMethod:        Abstract base class for parent selection strategies
    RouletteWheelSelection: Fitness-proportionate selection
"""

import numpy as np
from abc    import ABC, abstractmethod
from typing import Sequence

from evoforage.genetics.individual import Individual

class SelectionMethod(ABC):
    """
    A strategy choosing one parent out of a population.
    """

    @abstractmethod
    def select(self, rng: np.random.Generator, population: Sequence[Individual]) -> Individual:
        """
        Choose one individual from the population.

        Parameters:
            rng:        Source of randomness
            population: The individuals to choose from

        Returns:
            The chosen individual (an element of 'population', not a copy)
        """
        pass

class RouletteWheelSelection(SelectionMethod):
    """
    Fitness-proportionate ("roulette wheel") selection.

    The probability of choosing individual i is fitness[i] / sum(fitness).
    A single uniform draw per selection is mapped onto the cumulative
    fitness. When every individual has zero fitness the choice is uniform.
    """

    def select(self, rng: np.random.Generator, population: Sequence[Individual]) -> Individual:
        if len(population) == 0:
            raise ValueError("cannot select from an empty population")

        fitness = np.array([individual.fitness() for individual in population], dtype=np.float64)
        if np.any(fitness < 0.0):
            raise ValueError("roulette wheel selection requires non-negative fitness")

        total = fitness.sum()
        if total == 0.0:
            return population[int(rng.integers(len(population)))]

        cumulative = np.cumsum(fitness)
        draw = rng.random() * total
        index = int(np.searchsorted(cumulative, draw, side='right'))

        # guards against rounding in the cumulative sum
        index = min(index, len(population) - 1)
        return population[index]

    def __repr__(self):
        return "RouletteWheelSelection()"
