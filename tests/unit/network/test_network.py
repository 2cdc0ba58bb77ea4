"""
Unit tests for evoforage.network.network module.
"""

import graphviz
import numpy as np
import pytest

from evoforage.genetics import Chromosome
from evoforage.network import Layer, LayerTopology, Network


# ============================================================================
# Fixtures
# ============================================================================

def topology(*sizes):
    return [LayerTopology(size) for size in sizes]


@pytest.fixture
def single_neuron_network():
    """One output neuron: bias 0.5, weights -0.3 and 0.8."""
    return Network([Layer([0.5], [[-0.3, 0.8]])])


@pytest.fixture
def two_layer_network():
    """2 inputs -> 2 hidden -> 1 output, with hand-picked parameters."""
    hidden = Layer([0.1, 0.2], [[1.0, 2.0],
                                [3.0, 4.0]])
    output = Layer([0.3], [[5.0, 6.0]])
    return Network([hidden, output])


# ============================================================================
# Test Layer
# ============================================================================

class TestLayer:

    def test_random_shapes(self, rng):
        layer = Layer.random(rng, 3, 2)
        assert layer.biases.shape == (2,)
        assert layer.weights.shape == (2, 3)
        assert layer.num_inputs == 3
        assert layer.num_neurons == 2

    def test_random_values_in_range(self, rng):
        layer = Layer.random(rng, 20, 20)
        assert np.all(np.abs(layer.weights) <= 1.0)
        assert np.all(np.abs(layer.biases) <= 1.0)

    def test_mismatched_shapes_raise(self):
        with pytest.raises(ValueError):
            Layer([0.1, 0.2], [[1.0, 2.0]])

    def test_parameters_order(self):
        layer = Layer([0.1, 0.2], [[1.0, 2.0], [3.0, 4.0]])
        np.testing.assert_allclose(layer.parameters(), [0.1, 1.0, 2.0, 0.2, 3.0, 4.0], rtol=1e-6)


# ============================================================================
# Test Network construction
# ============================================================================

class TestNetworkRandom:

    def test_topology_with_one_layer_raises(self, rng):
        with pytest.raises(ValueError, match="at least an input and an output"):
            Network.random(rng, topology(3))

    def test_empty_topology_raises(self, rng):
        with pytest.raises(ValueError):
            Network.random(rng, [])

    def test_topology_is_kept(self, rng):
        network = Network.random(rng, topology(3, 4, 2))
        assert network.topology == topology(3, 4, 2)
        assert network.number_neurons == 6
        assert network.number_weights == 4 * (3 + 1) + 2 * (4 + 1)

    def test_same_seed_same_network(self):
        first  = Network.random(np.random.default_rng(1), topology(3, 4, 2))
        second = Network.random(np.random.default_rng(1), topology(3, 4, 2))
        assert first == second

    def test_different_seed_different_network(self):
        first  = Network.random(np.random.default_rng(1), topology(3, 4, 2))
        second = Network.random(np.random.default_rng(2), topology(3, 4, 2))
        assert first != second

    def test_layers_must_chain(self):
        with pytest.raises(ValueError, match="cannot feed"):
            Network([Layer([0.0, 0.0], [[1.0], [1.0]]), Layer([0.0], [[1.0, 1.0, 1.0]])])


# ============================================================================
# Test propagate
# ============================================================================

class TestPropagate:

    def test_negative_sum_is_clipped_to_zero(self, single_neuron_network):
        np.testing.assert_allclose(single_neuron_network.propagate([-10.0, -10.0]), [0.0])

    def test_positive_sum(self, single_neuron_network):
        output = single_neuron_network.propagate([0.5, 1.0])
        np.testing.assert_allclose(output, [(-0.3 * 0.5) + (0.8 * 1.0) + 0.5], rtol=1e-6)

    def test_layers_are_chained(self, two_layer_network):
        # hidden = [0.1 + 1 + 2, 0.2 + 3 + 4] = [3.1, 7.2]
        # output = 0.3 + 5 * 3.1 + 6 * 7.2 = 59.0
        output = two_layer_network.propagate([1.0, 1.0])
        np.testing.assert_allclose(output, [59.0], rtol=1e-5)

    def test_output_is_float32(self, rng):
        network = Network.random(rng, topology(3, 2))
        assert network.propagate([0.1, 0.2, 0.3]).dtype == np.float32

    def test_output_size(self, rng):
        network = Network.random(rng, topology(9, 18, 2))
        assert network.propagate(np.zeros(9)).shape == (2,)

    def test_output_is_non_negative(self, rng):
        network = Network.random(rng, topology(5, 5, 5))
        assert np.all(network.propagate(rng.uniform(-5, 5, size=5)) >= 0.0)

    def test_wrong_number_of_inputs_raises(self, single_neuron_network):
        with pytest.raises(ValueError, match="expects 2 inputs"):
            single_neuron_network.propagate([1.0, 2.0, 3.0])

    def test_other_activation(self):
        network = Network([Layer([0.0], [[1.0]], activation='identity')])
        np.testing.assert_allclose(network.propagate([-2.0]), [-2.0])


# ============================================================================
# Test weights / from_weights
# ============================================================================

class TestWeights:

    def test_canonical_order(self, two_layer_network):
        expected = [0.1, 1.0, 2.0, 0.2, 3.0, 4.0, 0.3, 5.0, 6.0]
        np.testing.assert_allclose(two_layer_network.weights(), expected, rtol=1e-6)

    def test_length_matches_number_of_parameters(self, rng):
        network = Network.random(rng, topology(3, 4, 2))
        assert len(network.weights()) == network.number_weights

    def test_can_be_read_again(self, rng):
        network = Network.random(rng, topology(3, 4, 2))
        expected = network.weights().copy()
        first = network.weights()
        first[:] = 0.0
        np.testing.assert_array_equal(network.weights(), expected)

    def test_from_weights(self):
        network = Network.from_weights(topology(2, 2, 1), [0.1, 1.0, 2.0, 0.2, 3.0, 4.0, 0.3, 5.0, 6.0])
        np.testing.assert_allclose(network.propagate([1.0, 1.0]), [59.0], rtol=1e-5)

    def test_round_trip(self, rng):
        original = Network.random(rng, topology(9, 18, 2))
        rebuilt  = Network.from_weights(topology(9, 18, 2), original.weights())
        np.testing.assert_array_equal(rebuilt.weights(), original.weights())
        assert rebuilt == original

    def test_round_trip_from_chromosome(self):
        chromosome = Chromosome(np.linspace(-1.0, 1.0, 4 * 4 + 2 * 5))
        network = Network.from_weights(topology(3, 4, 2), chromosome)
        assert Chromosome(network.weights()) == chromosome

    def test_accepts_iterator(self):
        network = Network.from_weights(topology(1, 1), iter([0.5, 2.0]))
        np.testing.assert_allclose(network.propagate([1.0]), [2.5])

    def test_not_enough_weights_raises(self):
        with pytest.raises(ValueError, match="not enough weights"):
            Network.from_weights(topology(2, 1), [0.1, 0.2])

    def test_too_many_weights_raises(self):
        with pytest.raises(ValueError, match="too many weights"):
            Network.from_weights(topology(2, 1), [0.1, 0.2, 0.3, 0.4])

    def test_short_topology_raises(self):
        with pytest.raises(ValueError):
            Network.from_weights(topology(2), [])


# ============================================================================
# Test visualize
# ============================================================================

class TestVisualize:

    def test_returns_digraph(self, two_layer_network):
        dot = two_layer_network.visualize(view=False)
        assert isinstance(dot, graphviz.Digraph)

    def test_contains_every_connection(self, two_layer_network):
        source = two_layer_network.visualize(view=False).source
        assert source.count("->") == 2 * 2 + 2 * 1
        assert "bias=0.30" in source
