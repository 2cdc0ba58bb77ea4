"""
Crossover Module

Classes:
    CrossoverMethod:  Abstract base class for crossover strategies
    UniformCrossover: Gene-by-gene coin-flip crossover
"""

import numpy as np
from abc import ABC, abstractmethod

from evoforage.genetics.chromosome import Chromosome

class CrossoverMethod(ABC):
    """
    A strategy combining two parent chromosomes into one child chromosome.
    """

    @abstractmethod
    def crossover(self, rng: np.random.Generator,
                  parent_a: Chromosome, parent_b: Chromosome) -> Chromosome:
        pass

class UniformCrossover(CrossoverMethod):
    """
    Uniform crossover: every gene of the child is copied from parent A or
    from parent B with equal probability, one draw per gene.
    """

    def crossover(self, rng: np.random.Generator,
                  parent_a: Chromosome, parent_b: Chromosome) -> Chromosome:
        if len(parent_a) != len(parent_b):
            raise ValueError(f"cannot cross chromosomes of different lengths "
                             f"({len(parent_a)} and {len(parent_b)})")

        from_a = rng.random(len(parent_a)) < 0.5
        return Chromosome(np.where(from_a, parent_a.genes, parent_b.genes))

    def __repr__(self):
        return "UniformCrossover()"
