"""
Eye Module

Classes:
    Eye: Vision encoder turning nearby food into a fixed-length sensory vector
"""

import math
import numpy as np
from typing import Sequence, TYPE_CHECKING

from evoforage.simulation.geometry import wrap

if TYPE_CHECKING:
    from evoforage.simulation.food import Food

FOV_RANGE = 0.25
FOV_ANGLE = math.pi / 4
CELLS     = 9

class Eye:
    """
    An animal's eye.

    The field of view is a circular sector of radius 'fov_range' and angle
    'fov_angle', centred on the direction the animal faces, split into 'cells'
    equal angular slices. Every food item inside the sector adds energy to the
    slice it falls in; closer food adds more energy.

    Public Attributes:
        fov_range: Radius of the field of view
        fov_angle: Angle of the field of view, in radians
        cells:     Number of slices (length of the vision vector)

    Public Methods:
        process_vision(position, rotation, foods): Compute the vision vector
    """

    def __init__(self, fov_range: float = FOV_RANGE, fov_angle: float = FOV_ANGLE, cells: int = CELLS):
        if fov_range <= 0.0:
            raise ValueError(f"field of view range must be positive, got {fov_range}")
        if fov_angle <= 0.0:
            raise ValueError(f"field of view angle must be positive, got {fov_angle}")
        if cells <= 0:
            raise ValueError(f"number of cells must be positive, got {cells}")

        self.fov_range: float = fov_range
        self.fov_angle: float = fov_angle
        self.cells    : int   = cells

    def process_vision(self, position: np.ndarray, rotation: float,
                       foods: 'Sequence[Food] | np.ndarray') -> np.ndarray:
        """
        Compute how much food the eye sees in each of its cells.

        Parameters:
            position: (x, y) of the observer
            rotation: Angle the observer is facing
            foods:    The food items, or an (N, 2) array of their positions

        Returns:
            float32 array of 'cells' non-negative energies
        """
        vision = np.zeros(self.cells, dtype=np.float64)

        if isinstance(foods, np.ndarray):
            food_positions = foods.reshape(-1, 2)
        else:
            food_positions = np.array([food.position for food in foods], dtype=np.float64).reshape(-1, 2)

        offsets   = food_positions - np.asarray(position, dtype=np.float64)
        distances = np.hypot(offsets[:, 0], offsets[:, 1])

        # strictly inside the range only
        near      = distances < self.fov_range
        offsets   = offsets[near]
        distances = distances[near]

        # angle between the +y axis and the offset, relative to the observer
        angles = np.arctan2(-offsets[:, 0], offsets[:, 1]) - rotation
        angles = np.atleast_1d(wrap(angles, -np.pi, np.pi))

        half_fov = self.fov_angle / 2
        visible  = (angles >= -half_fov) & (angles <= half_fov)

        angles    = angles[visible]
        distances = distances[visible]

        # an angle on the right edge of the field of view maps to
        # index 'cells', which belongs to the last cell
        cell_idx = ((angles + half_fov) / self.fov_angle * self.cells).astype(np.int64)
        cell_idx = np.minimum(cell_idx, self.cells - 1)

        energy = (self.fov_range - distances) / self.fov_range
        np.add.at(vision, cell_idx, energy)

        return vision.astype(np.float32)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Eye):
            return NotImplemented
        return (self.fov_range, self.fov_angle, self.cells) == (other.fov_range, other.fov_angle, other.cells)

    __hash__ = None

    def __repr__(self):
        return f"Eye(fov_range={self.fov_range}, fov_angle={self.fov_angle}, cells={self.cells})"
