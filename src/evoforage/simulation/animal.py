"""
Animal Module

Classes:
    Animal: A creature moving around the world, driven by its brain
"""

import numpy as np
from typing import TYPE_CHECKING

from evoforage.genetics            import Chromosome
from evoforage.simulation.brain    import Brain
from evoforage.simulation.eye      import Eye
from evoforage.simulation.geometry import random_position, random_rotation

if TYPE_CHECKING:
    from evoforage.run.config import Config

class Animal:
    """
    An animal in the world.

    Its position, rotation, speed and satiation change every tick; its brain
    is only replaced (together with the whole animal) when the population
    evolves.

    Public Attributes:
        position:  (x, y) in the unit torus
        rotation:  Angle the animal faces, in radians
        speed:     Distance travelled per tick
        eye:       The animal's Eye
        brain:     The animal's Brain
        satiation: Number of food items eaten in the current generation
    """

    def __init__(self, position: np.ndarray, rotation: float, speed: float, eye: Eye, brain: Brain):
        self.position : np.ndarray = np.asarray(position, dtype=np.float64)
        self.rotation : float      = float(rotation)
        self.speed    : float      = float(speed)
        self.eye      : Eye        = eye
        self.brain    : Brain      = brain
        self.satiation: int        = 0

    @staticmethod
    def _eye(config: 'Config') -> Eye:
        return Eye(config.fov_range, config.fov_angle, config.cells)

    @classmethod
    def random(cls, rng: np.random.Generator, config: 'Config') -> 'Animal':
        """
        Create an animal with a random brain, placed and oriented at random.
        """
        eye   = cls._eye(config)
        brain = Brain.random(rng, eye, config.brain_hidden_neurons, config.activation)
        return cls._born(rng, config, eye, brain)

    @classmethod
    def from_chromosome(cls, chromosome: Chromosome, rng: np.random.Generator, config: 'Config') -> 'Animal':
        """
        Create an animal whose brain is rebuilt from an evolved chromosome,
        placed and oriented at random.
        """
        eye   = cls._eye(config)
        brain = Brain.from_chromosome(chromosome, eye, config.brain_hidden_neurons, config.activation)
        return cls._born(rng, config, eye, brain)

    @classmethod
    def _born(cls, rng: np.random.Generator, config: 'Config', eye: Eye, brain: Brain) -> 'Animal':
        position = random_position(rng)
        rotation = random_rotation(rng)
        return cls(position, rotation, config.speed_initial, eye, brain)

    def as_chromosome(self) -> Chromosome:
        return self.brain.as_chromosome()

    def __repr__(self):
        return (f"Animal(x={self.position[0]:.4f}, y={self.position[1]:.4f}, "
                f"rotation={self.rotation:.4f}, speed={self.speed:.5f}, satiation={self.satiation})")
