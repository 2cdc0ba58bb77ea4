"""
Animal Individual Module

Classes:
    AnimalIndividual: Adapter exposing an Animal to the genetic algorithm
"""

import numpy as np
from typing import TYPE_CHECKING

from evoforage.genetics          import Chromosome, Individual
from evoforage.simulation.animal import Animal

if TYPE_CHECKING:
    from evoforage.run.config import Config

class AnimalIndividual(Individual):
    """
    The evolutionary view of an animal.

    Going into evolution, it captures an animal's fitness (the food it ate)
    and chromosome (its brain's parameters). Coming out of evolution, it holds
    an offspring chromosome and is turned back into a brand-new animal.
    Fitness is local to a generation: offspring start with zero.
    """

    def __init__(self, fitness: float, chromosome: Chromosome):
        self._fitness   : float      = fitness
        self._chromosome: Chromosome = chromosome

    @classmethod
    def from_animal(cls, animal: Animal) -> 'AnimalIndividual':
        return cls(float(animal.satiation), animal.as_chromosome())

    @classmethod
    def create(cls, chromosome: Chromosome) -> 'AnimalIndividual':
        return cls(0.0, chromosome)

    def into_animal(self, rng: np.random.Generator, config: 'Config') -> Animal:
        """
        Create a new animal, at a random place, whose brain is built from this chromosome.
        """
        return Animal.from_chromosome(self._chromosome, rng, config)

    def fitness(self) -> float:
        return self._fitness

    def chromosome(self) -> Chromosome:
        return self._chromosome

    def __repr__(self):
        return f"AnimalIndividual(fitness={self._fitness}, genes={len(self._chromosome)})"
