"""
Genetics Package

This package implements a generic genetic algorithm. It evolves any object
implementing the Individual capability and is parameterized by pluggable
selection, crossover and mutation strategies.

Modules:
    chromosome:        Chromosome class
    individual:        Individual abstract base class
    selection:         SelectionMethod, RouletteWheelSelection
    crossover:         CrossoverMethod, UniformCrossover
    mutation:          MutationMethod, GaussianMutation
    statistics:        Statistics class
    genetic_algorithm: GeneticAlgorithm class
"""

from evoforage.genetics.chromosome        import Chromosome
from evoforage.genetics.crossover         import CrossoverMethod, UniformCrossover
from evoforage.genetics.genetic_algorithm import GeneticAlgorithm
from evoforage.genetics.individual        import Individual
from evoforage.genetics.mutation          import MutationMethod, GaussianMutation
from evoforage.genetics.selection         import SelectionMethod, RouletteWheelSelection
from evoforage.genetics.statistics        import Statistics

__all__ = ['Chromosome',
           'CrossoverMethod',
           'UniformCrossover',
           'GeneticAlgorithm',
           'Individual',
           'MutationMethod',
           'GaussianMutation',
           'SelectionMethod',
           'RouletteWheelSelection',
           'Statistics']
