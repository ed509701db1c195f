"""
Random triangles with independent, normally distributed vertices.

Each vertex is a standard bivariate normal sample, generated from two
uniform draws by the Box-Muller transform. The distribution is invariant
under rotation and scaling about the origin.
"""

import math

import numpy as np

from geometry_utils import TAU


def box_muller_pair(rng):
    # 1 - random() lies in (0, 1], so the log stays finite
    u = 1.0 - rng.random()
    v = rng.random()
    theta = TAU * v
    R = math.sqrt(-2 * math.log(u))
    return R * math.cos(theta), R * math.sin(theta)


def random_triangle(rng=None):
    if rng is None:
        rng = np.random.default_rng()
    return box_muller_pair(rng), box_muller_pair(rng), box_muller_pair(rng)


def random_triangles(n: int, rng=None) -> np.ndarray:
    """n triangles as an (n, 3, 2) array, same distribution as random_triangle."""
    if n < 0:
        raise ValueError(f"sample count must be non-negative, got {n}")
    if rng is None:
        rng = np.random.default_rng()
    u = 1.0 - rng.random((n, 3))
    v = rng.random((n, 3))
    theta = TAU * v
    R = np.sqrt(-2 * np.log(u))
    return np.stack([R * np.cos(theta), R * np.sin(theta)], axis=-1)
