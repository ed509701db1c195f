"""
Mapping between triangles and points of the triangle shape space.

A triangle's normalized squared side lengths (a², b², c², summing to 1)
are projected onto the plane with

    x = a² - (b² + c²) / 2
    y = sqrt(3)/2 * (b² - c²)

Similar triangles land on the same point. Relabelling the vertices
cyclically rotates the point by 120 degrees about the origin. Triangles
that satisfy the triangle inequality fill the disc of radius 1/2.
The inverse solves this linear system back to squared side lengths,
recovers the angles by the law of cosines, and builds a triangle with
those angles.
"""

import logging
import math

import numpy as np

from geometry_utils import (
    ALPHA, BETA, GAMMA, NONE, R3, R3_HALF,
    angles_from_squared_sides, centroid, dist_sq, normalized_squared_sides,
    obtuse_angle, scale_triangle, squared_side_lengths, translate_triangle,
)

logger = logging.getLogger(__name__)


def map_triangle(triangle):
    """
    Shape-space point and obtuse-angle label of a triangle.

    Returns {"point": (x, y), "obtuse": AngleName}, or None if all three
    vertices coincide.
    """
    normalized = normalized_squared_sides(triangle)
    if normalized is None:
        return None
    aa, bb, cc = normalized

    return {
        "point": (aa - (bb + cc) * 0.5, (bb - cc) * R3_HALF),
        "obtuse": obtuse_angle(*squared_side_lengths(triangle)),
    }


def map_triangles(triangles):
    """
    Vectorized map_triangle over an (n, 3, 2) array.

    Returns (points, obtuse): an (m, 2) float array and an (m,) array of
    angle names, with degenerate triangles left out (m <= n).
    """
    tri = np.asarray(triangles, dtype=float)
    A, B, C = tri[:, 0], tri[:, 1], tri[:, 2]
    a_sq = np.sum((B - C) ** 2, axis=1)
    b_sq = np.sum((A - C) ** 2, axis=1)
    c_sq = np.sum((A - B) ** 2, axis=1)

    sq_sum = a_sq + b_sq + c_sq
    keep = sq_sum > 0
    a_sq, b_sq, c_sq, sq_sum = a_sq[keep], b_sq[keep], c_sq[keep], sq_sum[keep]
    scale = 1 / sq_sum

    points = np.column_stack([
        scale * (a_sq - (b_sq + c_sq) * 0.5),
        scale * ((b_sq - c_sq) * R3_HALF),
    ])
    obtuse = np.select(
        [a_sq > b_sq + c_sq, b_sq > a_sq + c_sq, c_sq > a_sq + b_sq],
        [ALPHA, BETA, GAMMA],
        default=NONE,
    )
    return points, obtuse


def map_point(point):
    """
    Representative triangle for a shape-space point.

    Returns {"triangle": ((x, y),) * 3, "angles": (alpha, beta, gamma)} with
    angles in radians. The triangle is centered at the origin and its
    squared side lengths sum to 1. Returns None when no triangle maps to
    the point.
    """
    x, y = point
    logger.debug(f"xy: {x} {y}")

    # Solve the projection for the squared side lengths under aa + bb + cc = 1
    p = (1 - x) / 3
    q = y / R3
    aa = p + x
    bb = p + q
    cc = p - q
    logger.debug(f"side-length squares: {aa + bb + cc} {aa} {bb} {cc}")
    if aa < 0 or bb < 0 or cc < 0:
        logger.debug("negative side-length square")
        return None

    angles = angles_from_squared_sides(aa, bb, cc)
    if angles is None:
        logger.debug("cosine out of range")
        return None
    alpha, beta, gamma = angles
    logger.debug(f"angles: {alpha + beta + gamma} {alpha} {beta} {gamma}")

    # Vertices on the unit circle, separated by the doubled angles. By the
    # inscribed-angle theorem the interior angles are alpha, beta, gamma.
    A = (1.0, 0.0)
    B = (math.cos(2 * gamma), -math.sin(2 * gamma))
    C = (math.cos(2 * beta), math.sin(2 * beta))
    triangle = (A, B, C)

    sq_sum = dist_sq(B, C) + dist_sq(A, C) + dist_sq(A, B)
    if not sq_sum:
        logger.debug("vertices coincide")
        return None
    scale = 1 / math.sqrt(sq_sum)
    logger.debug(f"scale: {scale}")
    triangle = scale_triangle(triangle, scale)

    cx, cy = centroid(triangle)
    triangle = translate_triangle(triangle, -cx, -cy)
    logger.debug(f"coords: {triangle}")

    return {"triangle": triangle, "angles": angles}
