"""
Host Module

The boundary through which a renderer or UI drives a simulation. It owns the
random source, so the host only ever deals with four operations:

    construct()             create a simulation with a random world
    world_snapshot()        read-only positions for drawing
    tick()                  advance one step
    train_one_generation()  fast-forward one generation, returning a summary

Classes:
    AnimalSnapshot: Position and rotation of one animal
    FoodSnapshot:   Position of one food item
    WorldSnapshot:  Everything needed to draw one frame
    SimulationHost: The boundary object
"""

import numpy as np
from dataclasses import dataclass

from evoforage.genetics            import Statistics
from evoforage.run.config          import Config
from evoforage.simulation          import Simulation
from evoforage.simulation.geometry import wrap

@dataclass(frozen=True)
class AnimalSnapshot:
    x: float
    y: float
    rotation: float

@dataclass(frozen=True)
class FoodSnapshot:
    x: float
    y: float

@dataclass(frozen=True)
class WorldSnapshot:
    animals: tuple[AnimalSnapshot, ...]
    foods  : tuple[FoodSnapshot, ...]

class SimulationHost:
    """
    A Simulation bundled with its own random source.
    """

    def __init__(self, simulation: Simulation, rng: np.random.Generator):
        self._simulation = simulation
        self._rng        = rng

    @classmethod
    def construct(cls, seed: int | None = None, config: Config | None = None,
                  rng: np.random.Generator | None = None) -> 'SimulationHost':
        """
        Create a simulation with a freshly randomized world.

        Parameters:
            seed:   Seed for the random source (ignored if 'rng' is given)
            config: Configuration parameters (defaults if None)
            rng:    An externally supplied random source
        """
        if rng is None:
            rng = np.random.default_rng(seed)
        return cls(Simulation.random(rng, config), rng)

    @property
    def simulation(self) -> Simulation:
        return self._simulation

    def world_snapshot(self) -> WorldSnapshot:
        world = self._simulation.world
        # rotations accumulate without bound during a generation
        animals = tuple(AnimalSnapshot(float(a.position[0]), float(a.position[1]), wrap(a.rotation, -np.pi, np.pi))
                        for a in world.animals)
        foods = tuple(FoodSnapshot(float(f.position[0]), float(f.position[1])) for f in world.foods)
        return WorldSnapshot(animals, foods)

    def tick(self) -> Statistics | None:
        return self._simulation.step(self._rng)

    def train_one_generation(self) -> str:
        """
        Run until the current generation ends.

        Returns:
            Summary such as "min=0.00, max=4.00, avg=1.50"
        """
        return str(self._simulation.train(self._rng))
