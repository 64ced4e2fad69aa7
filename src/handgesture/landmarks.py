from __future__ import annotations

from typing import Any, List

import numpy as np

from .errors import EmptyInputError, InvalidLandmarksError
from .types import LandmarkList, Point2D


NUM_LANDMARKS = 21


def _point_from(item: Any, idx: int) -> Point2D:
    if isinstance(item, Point2D):
        return item
    try:
        if hasattr(item, "x") and hasattr(item, "y"):
            # MediaPipe NormalizedLandmark (z, visibility ignored)
            return Point2D(float(item.x), float(item.y))
        return Point2D(float(item[0]), float(item[1]))
    except (TypeError, ValueError, IndexError, KeyError) as e:
        raise InvalidLandmarksError(f"Landmark {idx} is not a point: {item!r}") from e


def as_landmark_list(raw: Any) -> LandmarkList:
    """
    Validate and normalize one hand's landmarks into 21 `Point2D`s.

    Accepts a sequence of points (tuples, `Point2D`, or objects with `.x`/`.y`),
    a MediaPipe `NormalizedLandmarkList` (anything with a `.landmark` field), or
    a numpy array shaped (N, 2) or (N, 3). Coordinates are used as-is, without
    clamping to [0, 1].

    Raises `EmptyInputError` for zero landmarks and `InvalidLandmarksError` for
    any other count than 21.
    """

    if raw is None:
        raise EmptyInputError("Input landmark vector is empty.")

    if hasattr(raw, "landmark"):
        raw = list(raw.landmark)

    if isinstance(raw, np.ndarray):
        arr = raw
        if arr.size == 0:
            raise EmptyInputError("Input landmark vector is empty.")
        if arr.ndim != 2 or arr.shape[1] not in (2, 3):
            raise InvalidLandmarksError(f"Expected an (N, 2) or (N, 3) array, got shape {arr.shape}")
        if arr.shape[0] != NUM_LANDMARKS:
            raise InvalidLandmarksError(f"Expected {NUM_LANDMARKS} landmarks, got {arr.shape[0]}")
        try:
            coords = arr[:, :2].astype(float)
        except (TypeError, ValueError) as e:
            raise InvalidLandmarksError(f"Landmark array is not numeric: {e}") from e
        return tuple(Point2D(float(x), float(y)) for x, y in coords)

    items: List[Any] = list(raw)
    if not items:
        raise EmptyInputError("Input landmark vector is empty.")
    if len(items) != NUM_LANDMARKS:
        raise InvalidLandmarksError(f"Expected {NUM_LANDMARKS} landmarks, got {len(items)}")
    return tuple(_point_from(item, i) for i, item in enumerate(items))
