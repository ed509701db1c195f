#!/usr/bin/env python3
"""
Density image of random triangles in shape space.

Every sampled triangle becomes one dot on a SIZE x SIZE canvas, coloured
by its obtuse angle: red = alpha, green = beta, blue = gamma, black = acute
or right. The PNG includes the PADDING frame, so a pixel position in the
written file converts back to shape-space coordinates with
canvas_to_domain().
"""

import argparse
import os

import numpy as np
from PIL import Image

from config import BACKGROUND, COLORS, DOT_SIZE, N_SAMPLES, OUTPUT_DIR, PADDING, SIZE
from geometry_utils import ANGLE_NAMES
from shape_space_stats import format_summary, obtuse_counts, obtuse_summary, sample_shape_space


def domain_to_canvas(x, y, size=SIZE):
    """Drawing position of a shape-space point inside the (unpadded) canvas."""
    return size * (x + 0.5), size * (y + 0.5)


def canvas_to_domain(px, py, size=SIZE, padding=PADDING, dot_size=DOT_SIZE):
    """Shape-space point under a pointer at (px, py) from the canvas's outer corner."""
    x = (px - padding - dot_size / 2) / size - 0.5
    y = (py - padding - dot_size / 2) / size - 0.5
    return x, y


def rasterize(points, obtuse, size=SIZE, dot_size=DOT_SIZE, padding=0):
    """
    RGB image (uint8) with one dot_size square per shape-space point.

    points: (n, 2) array of shape-space coordinates
    obtuse: n angle names, one per point
    """
    side = size + dot_size
    img = np.empty((side, side, 3), dtype=np.uint8)
    img[:] = BACKGROUND

    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    px, py = domain_to_canvas(pts[:, 0], pts[:, 1], size)
    px = np.floor(px).astype(int)
    py = np.floor(py).astype(int)

    palette = np.array([COLORS[name] for name in ANGLE_NAMES], dtype=np.uint8)
    codes = np.array([ANGLE_NAMES.index(name) for name in obtuse], dtype=int)

    inside = (px >= 0) & (py >= 0) & (px + dot_size <= side) & (py + dot_size <= side)
    px, py, codes = px[inside], py[inside], codes[inside]
    for dy in range(dot_size):
        for dx in range(dot_size):
            img[py + dy, px + dx] = palette[codes]

    if padding:
        framed = np.empty((side + 2 * padding, side + 2 * padding, 3), dtype=np.uint8)
        framed[:] = BACKGROUND
        framed[padding:padding + side, padding:padding + side] = img
        img = framed
    return img


def main():
    parser = argparse.ArgumentParser(description="Render the shape-space density image.")
    parser.add_argument("--n", type=int, default=N_SAMPLES, help="number of random triangles")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--out",
        default=os.path.join(OUTPUT_DIR, "shape_space_density.png"),
        help="PNG path",
    )
    args = parser.parse_args()

    if args.n <= 0:
        raise ValueError(f"--n must be positive, got {args.n}")

    df = sample_shape_space(args.n, np.random.default_rng(args.seed))
    img = rasterize(df[["x", "y"]].to_numpy(), df["obtuse"].to_numpy(), padding=PADDING)

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    Image.fromarray(img).save(args.out)
    print("wrote image:", args.out)

    print(format_summary(obtuse_summary(obtuse_counts(df["obtuse"]), args.n)))


if __name__ == "__main__":
    main()
