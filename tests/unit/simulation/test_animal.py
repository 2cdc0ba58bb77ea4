"""
Unit tests for the Brain, Animal, Food, World and AnimalIndividual classes.
"""

import numpy as np
import pytest

from evoforage.genetics import Chromosome, Individual
from evoforage.network import LayerTopology
from evoforage.run.config import Config
from evoforage.simulation import Animal, AnimalIndividual, Brain, Eye, Food, World
from evoforage.simulation.geometry import heading, wrap


# ============================================================================
# Test geometry helpers
# ============================================================================

class TestGeometry:

    @pytest.mark.parametrize("value, expected", [
        (0.0, 0.0),
        (np.pi, np.pi),
        (-np.pi, -np.pi),
        (1.5 * np.pi, -0.5 * np.pi),
        (-1.5 * np.pi, 0.5 * np.pi),
        (5.0 * np.pi / 2, 0.5 * np.pi),
    ])
    def test_wrap_angles(self, value, expected):
        assert wrap(value, -np.pi, np.pi) == pytest.approx(expected)

    def test_wrap_array(self):
        np.testing.assert_allclose(wrap(np.array([-3.0, 0.5, 4.0]), -1.0, 1.0), [-1.0, 0.5, 0.0])

    def test_heading(self):
        np.testing.assert_allclose(heading(0.0), [0.0, 1.0], atol=1e-12)
        np.testing.assert_allclose(heading(np.pi / 2), [-1.0, 0.0], atol=1e-12)


# ============================================================================
# Test Brain
# ============================================================================

class TestBrain:

    def test_topology_follows_eye(self):
        assert Brain.topology(Eye()) == [LayerTopology(9), LayerTopology(18), LayerTopology(2)]

    def test_topology_with_explicit_hidden_layer(self):
        assert Brain.topology(Eye(cells=3), 5) == [LayerTopology(3), LayerTopology(5), LayerTopology(2)]

    def test_chromosome_round_trip(self, rng):
        brain = Brain.random(rng, Eye())
        chromosome = brain.as_chromosome()
        assert len(chromosome) == 18 * 10 + 2 * 19
        assert Brain.from_chromosome(chromosome, Eye()).as_chromosome() == chromosome

    def test_propagate_gives_two_outputs(self, rng):
        brain = Brain.random(rng, Eye())
        assert brain.propagate(np.zeros(9, dtype=np.float32)).shape == (2,)


# ============================================================================
# Test Animal and Food
# ============================================================================

class TestAnimal:

    def test_random(self, rng):
        config = Config()
        animal = Animal.random(rng, config)
        assert np.all((animal.position >= 0.0) & (animal.position < 1.0))
        assert -np.pi <= animal.rotation <= np.pi
        assert animal.speed == config.speed_initial
        assert animal.satiation == 0
        assert animal.eye == Eye(config.fov_range, config.fov_angle, config.cells)

    def test_from_chromosome(self, rng):
        config = Config()
        parent = Animal.random(rng, config)
        child = Animal.from_chromosome(parent.as_chromosome(), rng, config)
        assert child.as_chromosome() == parent.as_chromosome()
        assert child.satiation == 0

    def test_wrong_chromosome_length_raises(self, rng):
        with pytest.raises(ValueError, match="not enough weights"):
            Animal.from_chromosome(Chromosome([0.0] * 10), rng, Config())


class TestFood:

    def test_random_position_in_world(self, rng):
        food = Food.random(rng)
        assert np.all((food.position >= 0.0) & (food.position < 1.0))

    def test_relocate(self, rng):
        food = Food(np.array([0.5, 0.5]))
        food.relocate(rng)
        assert not np.array_equal(food.position, [0.5, 0.5])


class TestWorld:

    def test_random_uses_config_sizes(self, rng, small_config):
        world = World.random(rng, small_config)
        assert len(world.animals) == 4
        assert len(world.foods) == 12

    def test_food_positions(self):
        world = World([], [Food(np.array([0.1, 0.2])), Food(np.array([0.3, 0.4]))])
        np.testing.assert_array_equal(world.food_positions(), [[0.1, 0.2], [0.3, 0.4]])

    def test_food_positions_without_food(self):
        assert World([], []).food_positions().shape == (0, 2)

    def test_collections_are_read_only(self, rng, small_config):
        world = World.random(rng, small_config)
        with pytest.raises(AttributeError):
            world.animals = []
        with pytest.raises(AttributeError):
            world.foods = []
        with pytest.raises(TypeError):
            world.animals[0] = Animal.random(rng, small_config)

    def test_repopulate(self, rng, small_config):
        world = World.random(rng, small_config)
        newborns = [Animal.random(rng, small_config) for _ in range(small_config.num_animals)]
        world.repopulate(newborns)
        assert list(world.animals) == newborns

    def test_repopulate_keeps_the_population_size(self, rng, small_config):
        world = World.random(rng, small_config)
        with pytest.raises(ValueError, match="cannot be repopulated"):
            world.repopulate([Animal.random(rng, small_config)])


# ============================================================================
# Test AnimalIndividual
# ============================================================================

class TestAnimalIndividual:

    def test_is_an_individual(self):
        assert issubclass(AnimalIndividual, Individual)

    def test_from_animal(self, rng):
        animal = Animal.random(rng, Config())
        animal.satiation = 7
        individual = AnimalIndividual.from_animal(animal)
        assert individual.fitness() == 7.0
        assert isinstance(individual.fitness(), float)
        assert individual.chromosome() == animal.brain.as_chromosome()

    def test_create_starts_with_zero_fitness(self):
        assert AnimalIndividual.create(Chromosome([1.0, 2.0])).fitness() == 0.0

    def test_into_animal(self, rng):
        config = Config()
        parent = Animal.random(rng, config)
        parent.satiation = 3
        child = AnimalIndividual.create(parent.as_chromosome()).into_animal(rng, config)
        assert child is not parent
        assert child.satiation == 0
        assert child.as_chromosome() == parent.as_chromosome()
        assert child.speed == config.speed_initial
