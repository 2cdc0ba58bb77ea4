"""
Brain Module

Classes:
    Brain: An animal's neural network, sized after its eye
"""

import numpy as np

from evoforage.genetics            import Chromosome
from evoforage.network             import LayerTopology, Network
from evoforage.simulation.eye      import Eye

NUM_OUTPUTS = 2   # speed delta, rotation delta

class Brain:
    """
    Thin wrapper around the Network that drives an animal.

    The topology is fixed by the eye: one input per eye cell, one hidden
    layer, and two outputs (speed change and rotation change).

    Public Attributes:
        network: The underlying Network
    """

    def __init__(self, network: Network):
        self.network: Network = network

    @staticmethod
    def topology(eye: Eye, hidden_neurons: int | None = None) -> list[LayerTopology]:
        """
        Parameters:
            eye:            The eye feeding the brain
            hidden_neurons: Size of the hidden layer (default: twice the number of eye cells)
        """
        if hidden_neurons is None:
            hidden_neurons = 2 * eye.cells
        return [LayerTopology(eye.cells), LayerTopology(hidden_neurons), LayerTopology(NUM_OUTPUTS)]

    @classmethod
    def random(cls, rng: np.random.Generator, eye: Eye,
               hidden_neurons: int | None = None, activation: str = 'relu') -> 'Brain':
        return cls(Network.random(rng, cls.topology(eye, hidden_neurons), activation))

    @classmethod
    def from_chromosome(cls, chromosome: Chromosome, eye: Eye,
                        hidden_neurons: int | None = None, activation: str = 'relu') -> 'Brain':
        return cls(Network.from_weights(cls.topology(eye, hidden_neurons), chromosome, activation))

    def as_chromosome(self) -> Chromosome:
        return Chromosome(self.network.weights())

    def propagate(self, vision: np.ndarray) -> np.ndarray:
        return self.network.propagate(vision)
