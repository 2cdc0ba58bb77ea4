"""
Genetic Algorithm Module

This module implements the generic evolutionary loop. It knows nothing about
animals or networks: it evolves anything implementing the Individual
capability, using whatever selection, crossover and mutation strategies it
was constructed with.

Classes:
    GeneticAlgorithm: Pluggable selection / crossover / mutation engine
"""

import logging
import numpy as np
from typing import Sequence

from evoforage.genetics.crossover  import CrossoverMethod
from evoforage.genetics.individual import Individual
from evoforage.genetics.mutation   import MutationMethod
from evoforage.genetics.selection  import SelectionMethod
from evoforage.genetics.statistics import Statistics

logger = logging.getLogger(__name__)

class GeneticAlgorithm:
    """
    A genetic algorithm parameterized by three strategies.

    The strategies are chosen once, at construction, and reused for every
    generation.

    Public Methods:
        evolve(rng, population): Breed the next generation and summarize the current one
    """

    def __init__(self,
                 selection_method: SelectionMethod,
                 crossover_method: CrossoverMethod,
                 mutation_method : MutationMethod):
        self.selection_method: SelectionMethod = selection_method
        self.crossover_method: CrossoverMethod = crossover_method
        self.mutation_method : MutationMethod  = mutation_method

    def evolve(self, rng: np.random.Generator,
               population: Sequence[Individual]) -> tuple[list[Individual], Statistics]:
        """
        Create the next generation.

        Each of the N offspring is produced by selecting two parents
        independently (with replacement, so an individual may mate with
        itself), crossing their chromosomes, mutating the child in place and
        turning it into a new individual of the population's class.

        Parameters:
            rng:        Source of randomness
            population: The current generation, N >= 1 individuals

        Returns:
            The N new individuals, and the fitness statistics of the input population
        """
        if len(population) == 0:
            raise ValueError("cannot evolve an empty population")

        individual_class = type(population[0])

        offspring = []
        for _ in range(len(population)):
            parent_a = self.selection_method.select(rng, population)
            parent_b = self.selection_method.select(rng, population)

            child = self.crossover_method.crossover(rng, parent_a.chromosome(), parent_b.chromosome())
            self.mutation_method.mutate(rng, child)

            offspring.append(individual_class.create(child))

        statistics = Statistics.from_population(population)
        logger.debug("evolved %d individuals (%s)", len(offspring), statistics)

        return offspring, statistics

    def __repr__(self):
        return (f"GeneticAlgorithm({self.selection_method!r}, "
                f"{self.crossover_method!r}, {self.mutation_method!r})")
