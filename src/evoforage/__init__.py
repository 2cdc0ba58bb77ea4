"""
evoforage - animals learning to forage through neuroevolution.

A population of animals wanders a toroidal world dotted with food. Each animal
sees through an eye that encodes nearby food into a fixed-length vector, and
decides how to steer with a small feed-forward neural network. At the end of
every generation a genetic algorithm breeds the next population from the
networks of the animals that ate the most.

Main components:
- genetics:   Generic genetic algorithm (selection, crossover, mutation, statistics)
- network:    Fixed-topology feed-forward neural network
- simulation: Eye, animals, food, world and the tick-by-tick Simulation
- run:        Configuration, trials and multi-trial experiments
- host:       The boundary used by renderers and other hosts

Example:
    >>> import numpy as np
    >>> from evoforage import Config, Simulation
    >>> rng = np.random.default_rng(42)
    >>> simulation = Simulation.random(rng, Config())
    >>> statistics = simulation.train(rng)
    >>> print(statistics)
"""

__version__ = "0.1.0"

from evoforage.genetics   import GeneticAlgorithm, Statistics
from evoforage.host       import SimulationHost
from evoforage.network    import Network
from evoforage.run        import Config, Experiment, Trial
from evoforage.simulation import Simulation

__all__ = [
    "Config",
    "Experiment",
    "GeneticAlgorithm",
    "Network",
    "Simulation",
    "SimulationHost",
    "Statistics",
    "Trial",
]
