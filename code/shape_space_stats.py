#!/usr/bin/env python3
"""
Obtuse-angle statistics of random triangles.

- Samples N triangles with normally distributed vertices
- Maps each one into shape space
- Counts which angle (alpha / beta / gamma) is obtuse, or none for acute
  and right triangles, as a share of all N samples
"""

import argparse
import logging
import os

import numpy as np
import pandas as pd
from tqdm.auto import tqdm

from config import N_SAMPLES
from geometry_utils import ANGLE_NAMES
from logging_config import setup_logging
from sampling import random_triangle, random_triangles
from shape_space import map_triangle, map_triangles

logger = logging.getLogger(__name__)


def count_obtuse(triangles):
    """Fold triangles into {angle name: count}; degenerate triangles are skipped."""
    counts = dict.fromkeys(ANGLE_NAMES, 0)
    for triangle in triangles:
        data = map_triangle(triangle)
        if data is None:
            continue
        counts[data["obtuse"]] += 1
    return counts


def sample_shape_space(n: int, rng=None) -> pd.DataFrame:
    """One row (x, y, obtuse) per non-degenerate sampled triangle."""
    points, obtuse = map_triangles(random_triangles(n, rng))
    return pd.DataFrame({"x": points[:, 0], "y": points[:, 1], "obtuse": obtuse})


def obtuse_counts(obtuse):
    """{angle name: count} from a sequence of angle names."""
    counts = pd.Series(obtuse).value_counts().reindex(list(ANGLE_NAMES), fill_value=0)
    return {name: int(counts[name]) for name in ANGLE_NAMES}


def obtuse_summary(counts, n: int) -> pd.DataFrame:
    """Counts and percentages per angle name, relative to n requested samples."""
    rows = []
    for name in ANGLE_NAMES:
        count = counts.get(name, 0)
        rows.append({
            "obtuse": name,
            "count": count,
            "percent": 100.0 * count / n if n else 0.0,
        })
    return pd.DataFrame(rows, columns=["obtuse", "count", "percent"])


def format_summary(summary: pd.DataFrame) -> str:
    return "; ".join(
        f"{row.obtuse} obtuse: {row.percent:.1f}%" for row in summary.itertuples()
    )


def main():
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--n", type=int, default=N_SAMPLES, help="number of random triangles")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--scalar", action="store_true",
                        help="sample one triangle at a time instead of in one batch")
    parser.add_argument("--csv", default=None, help="write the summary table here")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    if args.n <= 0:
        raise ValueError(f"--n must be positive, got {args.n}")

    rng = np.random.default_rng(args.seed)
    if args.scalar:
        triangles = (random_triangle(rng) for _ in range(args.n))
        counts = count_obtuse(tqdm(triangles, total=args.n, desc="sampling"))
    else:
        df = sample_shape_space(args.n, rng)
        logger.info(f"mapped {len(df)} of {args.n} triangles")
        counts = obtuse_counts(df["obtuse"])

    summary = obtuse_summary(counts, args.n)

    print(f"=== Obtuse angles over {args.n} random triangles ===")
    print(summary.to_string(index=False, float_format=lambda v: f"{v:.2f}"))
    print()
    print(format_summary(summary))

    if args.csv:
        out_dir = os.path.dirname(args.csv)
        if out_dir:
            os.makedirs(out_dir, exist_ok=True)
        summary.to_csv(args.csv, index=False)
        print("wrote:", args.csv)


if __name__ == "__main__":
    main()
