"""
Network Package

This package implements the fixed-topology feed-forward neural network used as
each animal's decision function, and the canonical flattening of its parameters
into a chromosome.

Exported Classes:
    LayerTopology: Size of one layer in a topology description
    Layer:         Fully-connected layer followed by an activation
    Network:       Feed-forward neural network
"""

from evoforage.network.network import Layer, LayerTopology, Network

__all__ = ['Layer',
           'LayerTopology',
           'Network']
