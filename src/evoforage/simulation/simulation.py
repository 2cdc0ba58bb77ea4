"""
Simulation Module

This module implements the Simulation class, the top-level state machine
tying together perception (eyes), decision (brains), physics (movement and
eating) and evolution (the genetic algorithm).

Classes:
    Simulation: Advances the world one tick at a time and evolves it periodically
"""

import logging
import numpy as np
from typing import TYPE_CHECKING

from evoforage.genetics import (GeneticAlgorithm, GaussianMutation,
                                RouletteWheelSelection, Statistics, UniformCrossover)
from evoforage.simulation.animal_individual import AnimalIndividual
from evoforage.simulation.geometry          import heading
from evoforage.simulation.world             import World

if TYPE_CHECKING:
    from evoforage.run.config import Config

logger = logging.getLogger(__name__)

class Simulation:
    """
    A world of animals evolving to collect food.

    Each call to 'step' advances the world by one tick:
        1. collisions: animals eat the food within reach (the food is relocated)
        2. brains:     each animal looks around and adjusts its speed and rotation
        3. movement:   each animal moves forward, wrapping around the world's edges
        4. age:        once the generation has lasted long enough, the population evolves

    Public Attributes:
        world:      The current World
        age:        Ticks elapsed since the last evolution
        generation: Number of evolutions performed so far
        history:    Statistics of every evolved generation, oldest first

    Public Methods:
        random(rng, config): Create a simulation with a random world
        step(rng):           Advance one tick
        train(rng):          Advance until the next evolution
    """

    def __init__(self, world: World, config: 'Config',
                 genetic_algorithm: GeneticAlgorithm | None = None):
        """
        Parameters:
            world:             The initial World
            config:            Configuration parameters
            genetic_algorithm: The algorithm evolving the animals; by default roulette wheel
                               selection, uniform crossover and gaussian mutation configured
                               from 'config'
        """
        if genetic_algorithm is None:
            genetic_algorithm = GeneticAlgorithm(RouletteWheelSelection(),
                                                 UniformCrossover(),
                                                 GaussianMutation(config.mutation_chance, config.mutation_coeff))

        self._config   : 'Config'         = config
        self._ga       : GeneticAlgorithm = genetic_algorithm
        self.world     : World            = world
        self.age       : int              = 0
        self.generation: int              = 0
        self.history   : list[Statistics] = []

    @classmethod
    def random(cls, rng: np.random.Generator, config: 'Config | None' = None) -> 'Simulation':
        """
        Create a simulation with a randomly populated world.

        Parameters:
            rng:    Source of randomness
            config: Configuration parameters (defaults if None)
        """
        if config is None:
            # Import here to avoid circular import
            from evoforage.run.config import Config
            config = Config()

        return cls(World.random(rng, config), config)

    @property
    def config(self) -> 'Config':
        return self._config

    def step(self, rng: np.random.Generator) -> Statistics | None:
        """
        Advance the simulation by one tick.

        Returns:
            The statistics of the generation that just ended if this tick
            triggered an evolution, None otherwise
        """
        self._process_collisions(rng)
        self._process_brains()
        self._process_movements()

        self.age += 1
        if self.age > self._config.generation_length:
            return self._evolve(rng)
        return None

    def train(self, rng: np.random.Generator) -> Statistics:
        """
        Fast-forward to the end of the current generation.

        Returns:
            The statistics of the generation that just ended
        """
        while True:
            statistics = self.step(rng)
            if statistics is not None:
                return statistics

    def _process_collisions(self, rng: np.random.Generator):
        foods = self.world.foods
        if not foods:
            return

        radius = self._config.collision_radius
        food_positions = self.world.food_positions()

        for animal in self.world.animals:
            offsets   = food_positions - animal.position
            distances = np.hypot(offsets[:, 0], offsets[:, 1])

            for index in np.flatnonzero(distances <= radius):
                animal.satiation += 1
                foods[index].relocate(rng)
                food_positions[index] = foods[index].position

    def _process_brains(self):
        config = self._config
        food_positions = self.world.food_positions()

        for animal in self.world.animals:
            vision   = animal.eye.process_vision(animal.position, animal.rotation, food_positions)
            response = animal.brain.propagate(vision)

            # the brain steers relative to the current motion, as it cannot sense it
            speed_delta    = float(np.clip(response[0], -config.speed_accel, config.speed_accel))
            rotation_delta = float(np.clip(response[1], -config.rotation_accel, config.rotation_accel))

            animal.speed     = float(np.clip(animal.speed + speed_delta, config.speed_min, config.speed_max))
            animal.rotation += rotation_delta

    def _process_movements(self):
        for animal in self.world.animals:
            animal.position = np.mod(animal.position + heading(animal.rotation) * animal.speed, 1.0)

    def _evolve(self, rng: np.random.Generator) -> Statistics:
        self.age = 0

        current_population = [AnimalIndividual.from_animal(animal) for animal in self.world.animals]
        evolved_population, statistics = self._ga.evolve(rng, current_population)

        self.world.repopulate([individual.into_animal(rng, self._config) for individual in evolved_population])
        for food in self.world.foods:
            food.relocate(rng)

        self.generation += 1
        self.history.append(statistics)
        logger.debug("generation %d evolved: %s", self.generation, statistics)

        return statistics

    def __repr__(self):
        return f"Simulation(generation={self.generation}, age={self.age}, world={self.world!r})"
