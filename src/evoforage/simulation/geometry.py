"""
Geometry helpers for the toroidal world.

Positions are (x, y) float64 arrays in [0, 1) x [0, 1); rotations are angles
in radians. A rotation of 0 faces the +y axis and positive angles turn
counter-clockwise.
"""

import numpy as np

def wrap(value, low: float, high: float):
    """
    Bring 'value' into [low, high] by adding or subtracting whole periods.
    Values already inside the interval (both ends included) are left untouched.
    Works on scalars and arrays.
    """
    width = high - low
    value = np.asarray(value, dtype=np.float64)
    below = value < low
    above = value > high
    value = np.where(below, value + width * np.ceil((low - value) / width), value)
    value = np.where(above, value - width * np.ceil((value - high) / width), value)
    return value if value.ndim else float(value)

def heading(rotation: float) -> np.ndarray:
    """Unit vector an animal with the given rotation is facing."""
    return np.array([-np.sin(rotation), np.cos(rotation)])

def random_position(rng: np.random.Generator) -> np.ndarray:
    return rng.random(2)

def random_rotation(rng: np.random.Generator) -> float:
    return float(rng.uniform(-np.pi, np.pi))
