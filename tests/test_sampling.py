"""Tests for the normal-vertex triangle sampler."""

import math

import numpy as np
import pytest

from sampling import box_muller_pair, random_triangle, random_triangles


class ScriptedUniform:
    """Stands in for a numpy Generator, returning fixed uniform draws."""

    def __init__(self, values):
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


def test_box_muller_pair_formula():
    # u = 1 - 0.5, v = 0.25: R = sqrt(2 ln 2), theta = pi / 2
    x, y = box_muller_pair(ScriptedUniform([0.5, 0.25]))
    assert x == pytest.approx(0.0, abs=1e-12)
    assert y == pytest.approx(math.sqrt(2 * math.log(2)))


def test_box_muller_pair_zero_draw_is_finite():
    # a uniform draw of 0 gives u = 1, R = 0
    assert box_muller_pair(ScriptedUniform([0.0, 0.3])) == pytest.approx((0.0, 0.0))


def test_random_triangle_shape():
    triangle = random_triangle(np.random.default_rng(1))
    assert len(triangle) == 3
    assert all(len(p) == 2 for p in triangle)
    assert all(math.isfinite(c) for p in triangle for c in p)


def test_random_triangle_without_rng():
    assert len(random_triangle()) == 3


def test_seed_reproduces_triangles():
    first = random_triangle(np.random.default_rng(42))
    second = random_triangle(np.random.default_rng(42))
    assert first == second


def test_calls_are_independent(rng):
    assert random_triangle(rng) != random_triangle(rng)


def test_random_triangles_are_standard_normal(rng):
    coords = random_triangles(20000, rng).reshape(-1, 2)
    assert coords.mean(axis=0) == pytest.approx((0.0, 0.0), abs=0.03)
    assert coords.std(axis=0) == pytest.approx((1.0, 1.0), abs=0.03)
    # uncorrelated axes
    assert np.corrcoef(coords.T)[0, 1] == pytest.approx(0.0, abs=0.03)


def test_scalar_sampler_is_standard_normal(rng):
    coords = np.array([random_triangle(rng) for _ in range(5000)]).reshape(-1, 2)
    assert coords.mean(axis=0) == pytest.approx((0.0, 0.0), abs=0.05)
    assert coords.std(axis=0) == pytest.approx((1.0, 1.0), abs=0.05)


def test_random_triangles_shape(rng):
    assert random_triangles(7, rng).shape == (7, 3, 2)
    assert random_triangles(0, rng).shape == (0, 3, 2)


def test_random_triangles_rejects_negative_count(rng):
    with pytest.raises(ValueError):
        random_triangles(-1, rng)
