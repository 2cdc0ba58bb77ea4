"""
Mutation Module

Classes:
    MutationMethod:   Abstract base class for mutation strategies
    GaussianMutation: Random, bounded perturbation of individual genes
"""

import numpy as np
from abc import ABC, abstractmethod

from evoforage.genetics.chromosome import Chromosome

class MutationMethod(ABC):
    """
    A strategy perturbing a chromosome in place.
    """

    @abstractmethod
    def mutate(self, rng: np.random.Generator, child: Chromosome):
        pass

class GaussianMutation(MutationMethod):
    """
    Perturb each gene independently with probability 'chance'.

    A perturbed gene is displaced by sign * coeff * U(0, 1), where the sign
    comes from a separate fair coin flip.

    Public Attributes:
        chance: Probability that a gene is perturbed
                0.0 = no gene is touched, 1.0 = every gene is touched
        coeff:  Magnitude of the perturbation
                0.0 = touched genes keep their value
    """

    def __init__(self, chance: float, coeff: float):
        """
        Parameters:
            chance: Probability of perturbing each gene, in [0, 1]
            coeff:  Maximum absolute displacement of a perturbed gene
        """
        if not 0.0 <= chance <= 1.0:
            raise ValueError(f"mutation chance must lie in [0, 1], got {chance}")

        self.chance: float = chance
        self.coeff : float = coeff

    def mutate(self, rng: np.random.Generator, child: Chromosome):
        size = len(child)

        sign      = np.where(rng.random(size) < 0.5, -1.0, 1.0)
        mutated   = rng.random(size) < self.chance
        magnitude = rng.random(size)

        delta = np.where(mutated, sign * self.coeff * magnitude, 0.0)
        child.genes += delta.astype(np.float32)

    def __repr__(self):
        return f"GaussianMutation(chance={self.chance}, coeff={self.coeff})"
