"""
Statistics Module

Classes:
    Statistics: Summary of one generation's fitness distribution
"""

from dataclasses import dataclass
from typing      import Sequence

from evoforage.genetics.individual import Individual

@dataclass(frozen=True)
class Statistics:
    """
    Minimum, maximum and average fitness of a population.
    Produced once per call to GeneticAlgorithm.evolve().
    """
    min_fitness: float
    max_fitness: float
    avg_fitness: float

    @classmethod
    def from_population(cls, population: Sequence[Individual]) -> 'Statistics':
        """
        Summarize the fitness of a non-empty population.
        """
        if len(population) == 0:
            raise ValueError("cannot compute statistics of an empty population")

        fitness = [individual.fitness() for individual in population]
        return cls(min_fitness=float(min(fitness)),
                   max_fitness=float(max(fitness)),
                   avg_fitness=float(sum(fitness) / len(fitness)))

    def __str__(self):
        return f"min={self.min_fitness:.2f}, max={self.max_fitness:.2f}, avg={self.avg_fitness:.2f}"
