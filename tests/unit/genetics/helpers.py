"""Individuals used to exercise the genetic algorithm in isolation."""

from evoforage.genetics import Chromosome, Individual


class FitnessIndividual(Individual):
    """Only has a fitness; breeding it is not supported."""

    def __init__(self, fitness):
        self._fitness = fitness

    @classmethod
    def create(cls, chromosome):
        raise NotImplementedError

    def fitness(self):
        return self._fitness

    def chromosome(self):
        raise NotImplementedError


class GenesIndividual(Individual):
    """Fitness is the sum of the genes (never negative)."""

    def __init__(self, chromosome):
        self._chromosome = chromosome

    @classmethod
    def create(cls, chromosome):
        return cls(chromosome)

    def fitness(self):
        return max(0.0, float(sum(self._chromosome)))

    def chromosome(self):
        return self._chromosome


def genes_individual(genes):
    return GenesIndividual(Chromosome(genes))
