"""Shared test fixtures."""

from __future__ import annotations

import math

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest


EQUILATERAL = ((0.0, 0.0), (1.0, 0.0), (0.5, math.sqrt(3) / 2))
RIGHT_ISOSCELES = ((0.0, 0.0), (1.0, 0.0), (0.0, 1.0))
# Obtuse at vertex 0: the long side is opposite it
OBTUSE_AT_0 = ((0.0, 0.2), (-2.0, 0.0), (2.0, 0.0))
DEGENERATE = ((0.0, 0.0), (0.0, 0.0), (0.0, 0.0))

# Points strictly inside the disc of radius 1/2
INTERIOR_POINTS = [
    (0.0, 0.0),
    (0.1, 0.0),
    (-0.2, 0.15),
    (0.3, -0.2),
    (0.0, 0.45),
    (-0.4, -0.1),
    (0.24, 0.24),
]


@pytest.fixture
def rng():
    return np.random.default_rng(20240517)
