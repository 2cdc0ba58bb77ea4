"""
Simulation Package

This package implements the world the animals live in: their eyes and brains,
the food they compete for, and the Simulation stepping everything forward and
handing the population to the genetic algorithm at the end of each generation.

Modules:
    geometry:          Angle wrapping and other helpers for the toroidal world
    eye:               Eye class (vision encoder)
    brain:             Brain class (the network driving an animal)
    animal:            Animal class
    food:              Food class
    world:             World class
    animal_individual: AnimalIndividual class (adapter to the genetic algorithm)
    simulation:        Simulation class
"""

from evoforage.simulation.animal            import Animal
from evoforage.simulation.animal_individual import AnimalIndividual
from evoforage.simulation.brain             import Brain
from evoforage.simulation.eye               import Eye
from evoforage.simulation.food              import Food
from evoforage.simulation.simulation        import Simulation
from evoforage.simulation.world             import World

__all__ = ['Animal',
           'AnimalIndividual',
           'Brain',
           'Eye',
           'Food',
           'Simulation',
           'World']
