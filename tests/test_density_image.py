"""Tests for the shape-space density canvas."""

import sys

import numpy as np
import pytest
from PIL import Image

import density_image
from config import BACKGROUND, COLORS, DOT_SIZE, PADDING, SIZE
from density_image import canvas_to_domain, domain_to_canvas, rasterize
from geometry_utils import ALPHA, BETA, GAMMA, NONE


def test_domain_to_canvas_centre_and_corners():
    assert domain_to_canvas(0.0, 0.0) == (SIZE / 2, SIZE / 2)
    assert domain_to_canvas(-0.5, -0.5) == (0.0, 0.0)
    assert domain_to_canvas(0.5, 0.5) == (SIZE, SIZE)


@pytest.mark.parametrize("point", [(0.0, 0.0), (0.2, -0.35), (-0.5, 0.5)])
def test_pointer_position_converts_back(point):
    cx, cy = domain_to_canvas(*point)
    pointer = (cx + PADDING + DOT_SIZE / 2, cy + PADDING + DOT_SIZE / 2)
    assert canvas_to_domain(*pointer) == pytest.approx(point)


def test_rasterize_paints_dots_by_obtuse_angle():
    # offsets keep every dot a third of a pixel away from pixel edges
    points = np.array([[0.0, 0.0], [0.3, 0.0], [-0.2, 0.1], [0.0, -0.4]]) + 0.0005
    img = rasterize(points, [NONE, ALPHA, BETA, GAMMA])

    assert img.shape == (SIZE + DOT_SIZE, SIZE + DOT_SIZE, 3)
    assert img.dtype == np.uint8
    assert tuple(img[300, 300]) == COLORS[NONE]
    assert tuple(img[300, 480]) == COLORS[ALPHA]
    assert tuple(img[360, 180]) == COLORS[BETA]
    assert tuple(img[60, 300]) == COLORS[GAMMA]
    assert tuple(img[0, 0]) == BACKGROUND


def test_rasterize_ignores_points_off_canvas():
    img = rasterize(np.array([[2.0, 2.0], [-3.0, 0.0]]), [ALPHA, BETA])
    assert (img == np.array(BACKGROUND, dtype=np.uint8)).all()


def test_rasterize_empty():
    img = rasterize(np.empty((0, 2)), [])
    assert (img == np.array(BACKGROUND, dtype=np.uint8)).all()


def test_rasterize_dot_size():
    img = rasterize(np.array([[0.0, 0.0]]), [ALPHA], size=100, dot_size=3)
    assert img.shape == (103, 103, 3)
    assert (img[50:53, 50:53] == np.array(COLORS[ALPHA], dtype=np.uint8)).all()
    assert tuple(img[53, 53]) == BACKGROUND


def test_rasterize_padding_frames_the_canvas():
    img = rasterize(np.array([[0.0, 0.0]]), [GAMMA], padding=PADDING)
    side = SIZE + DOT_SIZE + 2 * PADDING
    assert img.shape == (side, side, 3)
    assert tuple(img[300 + PADDING, 300 + PADDING]) == COLORS[GAMMA]
    assert tuple(img[0, 0]) == BACKGROUND
    # the dot's pixel in the file converts back to the sampled point
    x, y = canvas_to_domain(300 + PADDING + 0.5, 300 + PADDING + 0.5)
    assert (x, y) == pytest.approx((0.0, 0.0))


def test_main_writes_png(tmp_path, monkeypatch, capsys):
    out = tmp_path / "img" / "density.png"
    monkeypatch.setattr(sys, "argv", [
        "density_image.py", "--n", "2000", "--seed", "5", "--out", str(out),
    ])
    density_image.main()

    with Image.open(out) as im:
        assert im.size == (SIZE + DOT_SIZE + 2 * PADDING,) * 2
        assert im.mode == "RGB"
    printed = capsys.readouterr().out
    assert "wrote image:" in printed
    assert "α obtuse:" in printed
