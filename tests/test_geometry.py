import math

import pytest

from handgesture.geometry import (
    NEAR_THRESHOLD,
    bbox_from_points,
    center_from_points,
    distance,
    is_near,
    to_pixels,
)
from handgesture.types import Point2D


def test_distance_is_euclidean():
    assert distance(Point2D(0.0, 0.0), Point2D(3.0, 4.0)) == pytest.approx(5.0)
    assert distance(Point2D(0.2, 0.7), Point2D(0.2, 0.7)) == 0.0


def test_distance_is_symmetric():
    a, b = Point2D(0.1, 0.9), Point2D(0.6, 0.3)
    assert distance(a, b) == distance(b, a)


def test_is_near_threshold_is_strict():
    assert NEAR_THRESHOLD == 0.1
    assert not is_near(Point2D(0.0, 0.0), Point2D(0.1, 0.0))
    assert not is_near(Point2D(0.0, 0.0), Point2D(0.0, 0.1))
    assert is_near(Point2D(0.0, 0.0), Point2D(0.099999, 0.0))


def test_is_near_thumb_and_index_pinch():
    thumb_tip, index_tip = Point2D(0.50, 0.50), Point2D(0.52, 0.51)
    assert distance(thumb_tip, index_tip) == pytest.approx(math.sqrt(0.0005))
    assert is_near(thumb_tip, index_tip)


def test_to_pixels_clamps_to_frame():
    assert to_pixels(Point2D(0.5, 0.5), 640, 480) == (320, 240)
    assert to_pixels(Point2D(-0.2, 1.3), 640, 480) == (0, 479)


def test_bbox_and_center():
    pts = [(10, 20), (30, 5), (20, 40)]
    assert bbox_from_points(pts) == (10, 5, 30, 40)
    assert center_from_points(pts) == (20, 21)
    assert bbox_from_points([]) == (0, 0, 0, 0)
    assert center_from_points([]) == (0, 0)
