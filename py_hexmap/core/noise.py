"""
Deterministic value noise and fractal Brownian motion.

This module implements:
- A sine-based lattice hash returning values in [0, 1)
- Smoothstep-interpolated value noise over the integer lattice
- Multi-octave fBm normalised by total amplitude

Scalar functions take plain floats; the *_field variants take NumPy
arrays of coordinates and evaluate the same formulas element-wise so a
whole map can be sampled in a single call.
"""

import math
from typing import Union

import numpy as np

# Lattice hash constants
HASH_X = 12.9898
HASH_Y = 78.233
HASH_SCALE = 43758.5453

ArrayLike = Union[float, np.ndarray]


def hash_2d(x: float, y: float, seed: float) -> float:
    """
    Hash two lattice coordinates and a seed to a float in [0, 1).

    Pure function of its three inputs.
    """
    value = math.sin(x * HASH_X + y * HASH_Y + seed) * HASH_SCALE
    frac = value - math.floor(value)
    # tiny negative products round up to exactly 1.0
    return frac if frac < 1.0 else 0.0


def smooth(t: ArrayLike) -> ArrayLike:
    """Cubic ease curve 3t^2 - 2t^3 with zero slope at both ends."""
    return t * t * (3.0 - 2.0 * t)


def value_noise(x: float, y: float, seed: float) -> float:
    """Bilinear, smoothstep-weighted interpolation of the four lattice corners."""
    xi = math.floor(x)
    yi = math.floor(y)
    u = smooth(x - xi)
    v = smooth(y - yi)

    n00 = hash_2d(xi, yi, seed)
    n10 = hash_2d(xi + 1, yi, seed)
    n01 = hash_2d(xi, yi + 1, seed)
    n11 = hash_2d(xi + 1, yi + 1, seed)

    nx0 = n00 * (1.0 - u) + n10 * u
    nx1 = n01 * (1.0 - u) + n11 * u
    return nx0 * (1.0 - v) + nx1 * v


def fbm(x: float, y: float, seed: float, octaves: int = 4) -> float:
    """Fractal Brownian motion: octaves of value noise, normalised to [0, 1)."""
    value = 0.0
    amplitude = 1.0
    frequency = 1.0
    max_value = 0.0

    for _ in range(octaves):
        value += amplitude * value_noise(x * frequency, y * frequency, seed)
        max_value += amplitude
        amplitude *= 0.5
        frequency *= 2.0

    return value / max_value


def hash_field(x: np.ndarray, y: np.ndarray, seed: float) -> np.ndarray:
    """Vectorised hash_2d."""
    value = np.sin(x * HASH_X + y * HASH_Y + seed) * HASH_SCALE
    frac = value - np.floor(value)
    return np.where(frac < 1.0, frac, 0.0)


def value_noise_field(x: np.ndarray, y: np.ndarray, seed: float) -> np.ndarray:
    """Vectorised value_noise."""
    xi = np.floor(x)
    yi = np.floor(y)
    u = smooth(x - xi)
    v = smooth(y - yi)

    n00 = hash_field(xi, yi, seed)
    n10 = hash_field(xi + 1, yi, seed)
    n01 = hash_field(xi, yi + 1, seed)
    n11 = hash_field(xi + 1, yi + 1, seed)

    nx0 = n00 * (1.0 - u) + n10 * u
    nx1 = n01 * (1.0 - u) + n11 * u
    return nx0 * (1.0 - v) + nx1 * v


def fbm_field(x: np.ndarray, y: np.ndarray, seed: float, octaves: int = 4) -> np.ndarray:
    """Vectorised fbm."""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    value = np.zeros(np.broadcast(x, y).shape, dtype=np.float64)
    amplitude = 1.0
    frequency = 1.0
    max_value = 0.0

    for _ in range(octaves):
        value += amplitude * value_noise_field(x * frequency, y * frequency, seed)
        max_value += amplitude
        amplitude *= 0.5
        frequency *= 2.0

    return value / max_value


class NoiseField:
    """
    Noise source bound to a single seed.

    The seed is fixed for the lifetime of the field; a different seed
    yields an unrelated field.
    """

    def __init__(self, seed: float):
        self.seed = float(seed)

    def hash_2d(self, x: float, y: float) -> float:
        return hash_2d(x, y, self.seed)

    def value_noise(self, x: float, y: float) -> float:
        return value_noise(x, y, self.seed)

    def fbm(self, x: float, y: float, octaves: int = 4) -> float:
        return fbm(x, y, self.seed, octaves)

    def hash_field(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        return hash_field(x, y, self.seed)

    def fbm_field(self, x: np.ndarray, y: np.ndarray, octaves: int = 4) -> np.ndarray:
        return fbm_field(x, y, self.seed, octaves)

    def __repr__(self) -> str:
        return f"NoiseField(seed={self.seed!r})"
