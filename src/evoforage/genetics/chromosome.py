"""
Chromosome Module

This module implements the Chromosome class, the unit of genetic material
on which the genetic algorithm operates.

Classes:
    Chromosome: Fixed-length sequence of real-valued (float32) genes
"""

import numpy as np
from typing import Iterable

class Chromosome:
    """
    An ordered, fixed-length sequence of real-valued genes.

    The genes are stored as a float32 numpy array. A chromosome is created by
    flattening a neural network and consumed to rebuild one; the only operation
    that changes it after construction is mutation, which works gene by gene
    on the 'genes' array.

    Public Attributes:
        genes: The float32 array holding the genes
    """

    def __init__(self, genes: Iterable[float]):
        """
        Parameters:
            genes: The gene values, in order
        """
        self.genes: np.ndarray = np.array(list(genes) if not isinstance(genes, np.ndarray) else genes,
                                          dtype=np.float32).reshape(-1)

    def __len__(self) -> int:
        return len(self.genes)

    def __iter__(self):
        return iter(self.genes)

    def __getitem__(self, index):
        return self.genes[index]

    def __setitem__(self, index, value):
        self.genes[index] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        return np.array_equal(self.genes, other.genes)

    __hash__ = None

    def copy(self) -> 'Chromosome':
        """Return an independent copy of this chromosome."""
        return Chromosome(self.genes.copy())

    def __repr__(self):
        return f"Chromosome({self.genes.tolist()})"
