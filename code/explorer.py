#!/usr/bin/env python3
"""
explorer.py

Interactive view of triangle shape space. The left panel shows N random
triangles as dots, coloured by which angle is obtuse. Moving the mouse over
it draws, in the right panel, a triangle corresponding to the pointer
position, with its three angles.

"""

import argparse
import math

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Polygon

from config import DOT_SIZE, N_SAMPLES, SIZE, hex_color
from density_image import rasterize
from geometry_utils import ANGLE_NAMES
from shape_space import map_point
from shape_space_stats import format_summary, obtuse_counts, obtuse_summary, sample_shape_space


class TriangleExplorer:
    def __init__(self, points, obtuse, n):
        self.fig, (self.ax_density, self.ax_triangle) = plt.subplots(1, 2, figsize=(12, 6.5))
        self.fig.suptitle("Acute and Obtuse Triangles")

        # Image pixel i covers shape-space [i/SIZE - 0.5, (i+1)/SIZE - 0.5]
        img = rasterize(points, obtuse)
        far = -0.5 + (SIZE + DOT_SIZE) / SIZE
        self.ax_density.imshow(img, extent=(-0.5, far, far, -0.5), interpolation="nearest")
        self.ax_density.set_title(f"{n} random triangles")
        summary = obtuse_summary(obtuse_counts(obtuse), n)
        self.ax_density.set_xlabel(format_summary(summary), fontsize=9)
        self.ax_density.set_xticks([])
        self.ax_density.set_yticks([])

        self.ax_triangle.set_xlim(-0.5, 0.5)
        self.ax_triangle.set_ylim(0.5, -0.5)
        self.ax_triangle.set_aspect("equal")
        self.ax_triangle.set_facecolor("#eeeeee")
        self.ax_triangle.set_xticks([])
        self.ax_triangle.set_yticks([])
        self.ax_triangle.set_title("Move the mouse pointer into the circle")

        self.outline = Polygon(np.zeros((3, 2)), closed=True, fill=False,
                               edgecolor="black", linewidth=1.5, visible=False)
        self.ax_triangle.add_patch(self.outline)
        self.vertices = self.ax_triangle.scatter(
            np.zeros(3), np.zeros(3), s=40, zorder=3,
            c=[hex_color(name) for name in ANGLE_NAMES[:3]],
        )
        self.vertices.set_visible(False)
        self.angle_text = self.ax_triangle.set_xlabel("")

        self.fig.canvas.mpl_connect("motion_notify_event", self.on_motion)
        self.fig.canvas.mpl_connect("axes_leave_event", self.on_leave)

    def update_pointer(self, x, y):
        """Show the triangle for shape-space point (x, y). False if there is none."""
        result = map_point((x, y))
        if result is None:
            self.clear_triangle()
            return False

        triangle = np.asarray(result["triangle"])
        self.outline.set_xy(triangle)
        self.outline.set_visible(True)
        self.vertices.set_offsets(triangle)
        self.vertices.set_visible(True)
        self.angle_text.set_text("; ".join(
            f"{name} = {math.degrees(a):.2f}°"
            for name, a in zip(ANGLE_NAMES, result["angles"])
        ))
        self.fig.canvas.draw_idle()
        return True

    def clear_triangle(self):
        self.outline.set_visible(False)
        self.vertices.set_visible(False)
        self.angle_text.set_text("")
        self.fig.canvas.draw_idle()

    def on_motion(self, event):
        if event.inaxes is not self.ax_density or event.xdata is None:
            self.clear_triangle()
            return
        self.update_pointer(event.xdata, event.ydata)

    def on_leave(self, event):
        if event.inaxes is self.ax_density:
            self.clear_triangle()


def main():
    parser = argparse.ArgumentParser(description="Explore triangle shape space interactively.")
    parser.add_argument("--n", type=int, default=N_SAMPLES, help="number of random triangles")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    if args.n <= 0:
        raise ValueError(f"--n must be positive, got {args.n}")

    df = sample_shape_space(args.n, np.random.default_rng(args.seed))
    # matplotlib holds the event callbacks weakly
    explorer = TriangleExplorer(df[["x", "y"]].to_numpy(), df["obtuse"].to_numpy(), args.n)
    plt.show()


if __name__ == "__main__":
    main()
