"""
Individual Module

This module defines the capability the genetic algorithm requires from the
things it evolves.

Classes:
    Individual: Abstract base class exposing fitness and chromosome
"""

from abc import ABC, abstractmethod

from evoforage.genetics.chromosome import Chromosome

class Individual(ABC):
    """
    Abstract base class for anything the GeneticAlgorithm can evolve.

    The genetic algorithm never looks inside an individual: it reads the
    fitness to drive selection, reads the chromosome to breed offspring,
    and calls 'create' to turn an offspring chromosome back into an
    individual of the same concrete class.

    Public Methods (must be implemented by subclasses):
        create(chromosome): Build a new individual from a chromosome (class method)
        fitness():          Non-negative score, higher is better
        chromosome():       The genetic encoding of this individual
    """

    @classmethod
    @abstractmethod
    def create(cls, chromosome: Chromosome) -> 'Individual':
        pass

    @abstractmethod
    def fitness(self) -> float:
        pass

    @abstractmethod
    def chromosome(self) -> Chromosome:
        pass
