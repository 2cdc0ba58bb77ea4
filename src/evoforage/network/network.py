"""
Feed-Forward Network Module

This module implements the fixed-topology, fully-connected network that serves
as an animal's brain. Each layer is stored as a bias vector and a weight matrix
(one row per neuron) so that a forward pass is a handful of vectorized numpy
operations.

The network doubles as the chromosome representation: 'weights()' flattens it
into a canonical sequence of floats and 'from_weights()' rebuilds it.

Canonical order:
    layer by layer; within a layer neuron by neuron; for each neuron its bias
    followed by its weights.

Classes:
    LayerTopology: Size of one layer in a topology description
    Layer:         One fully-connected layer followed by an activation
    Network:       An ordered stack of layers
"""

import numpy as np
from dataclasses import dataclass
from typing      import Iterable, Sequence
import graphviz  # type: ignore

from evoforage.activations import activations

@dataclass(frozen=True)
class LayerTopology:
    """
    Number of neurons in one layer of a topology description.
    """
    neurons: int

class Layer:
    """
    A fully-connected layer.

    Public Attributes:
        biases:  float32 array of shape (num_neurons,)
        weights: float32 array of shape (num_neurons, num_inputs)
    """

    def __init__(self, biases: np.ndarray, weights: np.ndarray, activation: str = 'relu'):
        biases  = np.asarray(biases,  dtype=np.float32).reshape(-1)
        weights = np.asarray(weights, dtype=np.float32)
        if weights.ndim != 2 or weights.shape[0] != biases.shape[0]:
            raise ValueError(f"layer with {biases.shape[0]} biases needs a weight matrix "
                             f"with {biases.shape[0]} rows, got shape {weights.shape}")

        self.biases : np.ndarray = biases
        self.weights: np.ndarray = weights
        self._activation_name    = activation
        self._activation         = activations[activation]

    @classmethod
    def random(cls, rng: np.random.Generator, num_inputs: int, num_neurons: int,
               activation: str = 'relu') -> 'Layer':
        """
        Create a layer whose biases and weights are drawn uniformly from [-1, 1].
        Values are drawn in canonical order (bias, then weights, neuron by neuron).
        """
        params = rng.uniform(-1.0, 1.0, size=(num_neurons, num_inputs + 1)).astype(np.float32)
        return cls(params[:, 0], params[:, 1:], activation)

    @property
    def num_inputs(self) -> int:
        return self.weights.shape[1]

    @property
    def num_neurons(self) -> int:
        return self.weights.shape[0]

    def propagate(self, inputs: np.ndarray) -> np.ndarray:
        if inputs.shape != (self.num_inputs,):
            raise ValueError(f"layer expects {self.num_inputs} inputs, got {inputs.shape[0]}")
        return self._activation(self.biases + self.weights @ inputs).astype(np.float32)

    def parameters(self) -> np.ndarray:
        """Biases and weights of this layer, flattened in canonical order."""
        return np.hstack([self.biases[:, np.newaxis], self.weights]).reshape(-1)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Layer):
            return NotImplemented
        return (self._activation_name == other._activation_name and
                np.array_equal(self.biases,  other.biases) and
                np.array_equal(self.weights, other.weights))

    __hash__ = None

class Network:
    """
    A feed-forward neural network made of fully-connected layers.

    Immutable after construction: it is only ever evaluated ('propagate') or
    flattened ('weights').

    Public Properties:
        topology:       Layer sizes, input layer first
        number_neurons: Number of computing neurons (input layer excluded)
        number_weights: Number of parameters (biases and weights)

    Public Methods:
        random(rng, topology):        Create a network with random parameters
        from_weights(topology, ws):   Rebuild a network from its flattened parameters
        propagate(inputs):            Forward pass
        weights():                    Flattened parameters, in canonical order
        visualize(view):              Draw the network with Graphviz
    """

    def __init__(self, layers: Sequence[Layer]):
        if len(layers) == 0:
            raise ValueError("a network needs at least one layer")
        for previous, layer in zip(layers[:-1], layers[1:]):
            if previous.num_neurons != layer.num_inputs:
                raise ValueError(f"layer with {previous.num_neurons} neurons cannot feed "
                                 f"a layer expecting {layer.num_inputs} inputs")
        self._layers: list[Layer] = list(layers)

    @staticmethod
    def _check_topology(topology: Sequence[LayerTopology]):
        if len(topology) < 2:
            raise ValueError("a topology needs at least an input and an output layer")
        if any(layer.neurons <= 0 for layer in topology):
            raise ValueError("every layer needs at least one neuron")

    @classmethod
    def random(cls, rng: np.random.Generator, topology: Sequence[LayerTopology],
               activation: str = 'relu') -> 'Network':
        """
        Create a network with the given topology, drawing every bias
        and weight uniformly from [-1, 1].

        Parameters:
            rng:        Source of randomness
            topology:   Layer sizes, input layer first (at least 2 entries)
            activation: Name of the activation applied by every layer
        """
        cls._check_topology(topology)
        layers = [Layer.random(rng, inputs.neurons, outputs.neurons, activation)
                  for inputs, outputs in zip(topology[:-1], topology[1:])]
        return cls(layers)

    @classmethod
    def from_weights(cls, topology: Sequence[LayerTopology], weights: Iterable[float],
                     activation: str = 'relu') -> 'Network':
        """
        Rebuild a network from a sequence of floats in canonical order.
        The sequence must hold exactly the number of parameters the topology needs.

        Parameters:
            topology:   Layer sizes, input layer first (at least 2 entries)
            weights:    The flattened parameters (e.g. a Chromosome)
            activation: Name of the activation applied by every layer
        """
        cls._check_topology(topology)
        values = np.fromiter(weights, dtype=np.float32)

        offset = 0
        layers = []
        for inputs, outputs in zip(topology[:-1], topology[1:]):
            size = outputs.neurons * (inputs.neurons + 1)
            if offset + size > len(values):
                raise ValueError("not enough weights")
            params = values[offset:offset + size].reshape(outputs.neurons, inputs.neurons + 1)
            layers.append(Layer(params[:, 0], params[:, 1:], activation))
            offset += size

        if offset != len(values):
            raise ValueError("too many weights")

        return cls(layers)

    @property
    def topology(self) -> list[LayerTopology]:
        return ([LayerTopology(self._layers[0].num_inputs)] +
                [LayerTopology(layer.num_neurons) for layer in self._layers])

    @property
    def number_neurons(self) -> int:
        return sum(layer.num_neurons for layer in self._layers)

    @property
    def number_weights(self) -> int:
        return sum(layer.weights.size + layer.biases.size for layer in self._layers)

    def propagate(self, inputs: Iterable[float]) -> np.ndarray:
        """
        Perform a forward pass, each layer feeding the next.

        Parameters:
            inputs: One value per input neuron

        Returns:
            float32 array with one value per output neuron
        """
        values = np.asarray(inputs, dtype=np.float32).reshape(-1)
        for layer in self._layers:
            values = layer.propagate(values)
        return values

    def weights(self) -> np.ndarray:
        """
        Every bias and weight of the network, in canonical order.
        Each call returns a fresh array, so the sequence can be re-read freely.
        """
        return np.concatenate([layer.parameters() for layer in self._layers])

    def visualize(self, view: bool = True) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout

        node_attrs = {'style': 'filled', 'shape': 'circle', 'penwidth': '0.5', 'fontsize': '5',
                      'width': '0.5', 'height': '0.5', 'fixedsize': 'true', 'color': 'black'}

        with dot.subgraph(name='cluster_0') as cluster:
            cluster.attr(rank='source', label='Inputs', style='invisible')
            for i in range(self._layers[0].num_inputs):
                cluster.node(f"0_{i}", label=f"in {i}", fillcolor='lightgrey', **node_attrs)

        for depth, layer in enumerate(self._layers, start=1):
            last = depth == len(self._layers)
            with dot.subgraph(name=f'cluster_{depth}') as cluster:
                cluster.attr(rank='sink' if last else 'same',
                             label='Outputs' if last else f'Hidden {depth}', style='invisible')
                for n in range(layer.num_neurons):
                    cluster.node(f"{depth}_{n}", label=f"bias={layer.biases[n]:.2f}",
                                 fillcolor='white' if last else 'lightblue', **node_attrs)

            for n in range(layer.num_neurons):
                for i in range(layer.num_inputs):
                    weight = layer.weights[n, i]
                    dot.edge(f"{depth - 1}_{i}", f"{depth}_{n}",
                             label=f"w={weight:.2f}", fontsize='5', penwidth='0.5', arrowsize='0.5',
                             color='black' if weight >= 0 else 'red')

        if view:
            dot.view(cleanup=True)

        return dot

    def __eq__(self, other) -> bool:
        if not isinstance(other, Network):
            return NotImplemented
        return self._layers == other._layers

    __hash__ = None

    def __repr__(self):
        sizes = ', '.join(str(layer.neurons) for layer in self.topology)
        return f"Network(topology=[{sizes}])"
