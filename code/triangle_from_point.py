"""
Representative triangle for one point of shape space.

What it does:
- Takes a shape-space point (x, y), or with --pixel a pointer position on
  the density canvas, which is converted first.
- Maps it back to a triangle centred at the origin whose squared side
  lengths sum to 1.
- Prints JSON with the vertices and the angles alpha, beta, gamma in degrees.
- Optionally draws the triangle with OpenCV and saves it (--overlay):
    vertex 0 = RED (alpha), vertex 1 = GREEN (beta), vertex 2 = BLUE (gamma)

Points outside the disc have no triangle; the JSON fields are then null.
"""

import os
import json
import math
import logging
import argparse

import cv2
import numpy as np

from config import BACKGROUND, COLORS, DOT_SIZE, SIZE
from density_image import canvas_to_domain
from geometry_utils import ANGLE_NAMES
from logging_config import setup_logging
from shape_space import map_point


def fmt4(x):
    """Round to 4 decimals."""
    return round(float(x), 4)


def bgr(name):
    r, g, b = COLORS[name]
    return b, g, r


def draw_label(img, pt, text, color_bgr):
    # black outline for readability
    cv2.putText(
        img, text, (pt[0] + 6, pt[1] - 6),
        cv2.FONT_HERSHEY_SIMPLEX, 0.5, (0, 0, 0), 3, cv2.LINE_AA
    )
    cv2.putText(
        img, text, (pt[0] + 6, pt[1] - 6),
        cv2.FONT_HERSHEY_SIMPLEX, 0.5, color_bgr, 1, cv2.LINE_AA
    )


def render_triangle(triangle, angles, size=SIZE):
    """
    Draw a normalized triangle into a BGR image covering [-0.5, 0.5]^2.

    Vertex i gets a dot in the colour of ANGLE_NAMES[i] and a label with its
    angle in degrees.
    """
    side = size + DOT_SIZE
    img = np.empty((side, side, 3), dtype=np.uint8)
    img[:] = BACKGROUND[::-1]

    pts = np.round((np.asarray(triangle, dtype=float) + 0.5) * side).astype(np.int32)
    thickness = max(1, round(0.005 * side))
    radius = max(2, round(0.01 * side))

    cv2.polylines(img, [pts.reshape(-1, 1, 2)], True, (0, 0, 0), thickness, cv2.LINE_AA)
    for p, name, angle in zip(pts, ANGLE_NAMES, angles):
        p = (int(p[0]), int(p[1]))
        cv2.circle(img, p, radius, bgr(name), -1, cv2.LINE_AA)
        draw_label(img, p, f"{math.degrees(angle):.2f}", bgr(name))
    return img


def result_to_json(result):
    if result is None:
        return {"triangle": None, "angles": None}
    return {
        "triangle": [[fmt4(x), fmt4(y)] for x, y in result["triangle"]],
        "angles": {
            name: fmt4(math.degrees(a))
            for name, a in zip(ANGLE_NAMES, result["angles"])
        },
    }


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("x", type=float)
    parser.add_argument("y", type=float)
    parser.add_argument("--pixel", action="store_true",
                        help="x, y are a pointer position on the padded density canvas")
    parser.add_argument("--overlay", default=None, help="save a drawing of the triangle here")
    parser.add_argument("--verbose", action="store_true", help="trace every mapping stage")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    x, y = (args.x, args.y)
    if args.pixel:
        x, y = canvas_to_domain(x, y)

    result = map_point((x, y))
    out = result_to_json(result)
    out["point"] = [fmt4(x), fmt4(y)]

    if result is not None and args.overlay:
        out_dir = os.path.dirname(args.overlay)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        cv2.imwrite(args.overlay, render_triangle(result["triangle"], result["angles"]))
        print(f"[OK] overlay: {args.overlay}")

    print(json.dumps(out, ensure_ascii=False, separators=(",", ":")))


if __name__ == "__main__":
    main()
