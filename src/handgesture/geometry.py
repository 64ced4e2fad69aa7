from __future__ import annotations

import math
from typing import Iterable, Tuple

from .types import Point2D


# Fingertips closer than this (in normalized frame units) count as touching.
NEAR_THRESHOLD = 0.1


def distance(a: Point2D, b: Point2D) -> float:
    """Euclidean distance between two points in the image plane."""
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def is_near(a: Point2D, b: Point2D) -> bool:
    return distance(a, b) < NEAR_THRESHOLD


def clamp_int(v: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, v))


def to_pixels(p: Point2D, w: int, h: int) -> Tuple[int, int]:
    """Map a normalized point into a w x h frame, clamped to the frame."""
    x_px = clamp_int(int(round(p.x * w)), 0, w - 1)
    y_px = clamp_int(int(round(p.y * h)), 0, h - 1)
    return (x_px, y_px)


def bbox_from_points(points: Iterable[Tuple[int, int]]) -> Tuple[int, int, int, int]:
    pts = list(points)
    if not pts:
        return (0, 0, 0, 0)
    xs = [x for x, _ in pts]
    ys = [y for _, y in pts]
    return (min(xs), min(ys), max(xs), max(ys))


def center_from_points(points: Iterable[Tuple[int, int]]) -> Tuple[int, int]:
    pts = list(points)
    if not pts:
        return (0, 0)
    return (int(sum(x for x, _ in pts) / len(pts)), int(sum(y for _, y in pts) / len(pts)))
