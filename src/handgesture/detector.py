from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import cv2

from .geometry import bbox_from_points, center_from_points, to_pixels
from .model_assets import ensure_hand_landmarker_task
from .types import HandPosition, Point2D


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _SolutionsBackend:
    hands: object


@dataclass(frozen=True)
class _TasksBackend:
    mp: object
    landmarker: object


def _try_create_solutions_backend(
    static_image_mode: bool,
    max_num_hands: int,
    min_detection_confidence: float,
    min_tracking_confidence: float,
) -> Optional[_SolutionsBackend]:
    import mediapipe as mp  # type: ignore

    if not hasattr(mp, "solutions"):
        return None
    hands = mp.solutions.hands.Hands(
        static_image_mode=static_image_mode,
        max_num_hands=max_num_hands,
        min_detection_confidence=min_detection_confidence,
        min_tracking_confidence=min_tracking_confidence,
    )
    return _SolutionsBackend(hands=hands)


def _create_tasks_backend(
    model_path: str,
    max_num_hands: int,
    min_detection_confidence: float,
    min_tracking_confidence: float,
) -> _TasksBackend:
    """
    Backend for MediaPipe builds that ship without `mp.solutions`.

    Uses the Tasks HandLandmarker, which needs a `.task` model file on disk.
    """

    import mediapipe as mp  # type: ignore
    from mediapipe.tasks.python import BaseOptions  # type: ignore
    from mediapipe.tasks.python.vision import HandLandmarker, HandLandmarkerOptions, RunningMode  # type: ignore

    options = HandLandmarkerOptions(
        base_options=BaseOptions(model_asset_path=ensure_hand_landmarker_task(model_path)),
        running_mode=RunningMode.VIDEO,
        num_hands=max_num_hands,
        min_hand_detection_confidence=min_detection_confidence,
        min_tracking_confidence=min_tracking_confidence,
    )
    return _TasksBackend(mp=mp, landmarker=HandLandmarker.create_from_options(options))


class HandLandmarkDetector:
    """
    Finds hands in BGR frames (OpenCV default) using MediaPipe Hands.

    Each detected hand comes back as a `HandPosition` whose normalized
    landmarks feed `HandGestureRecognitionCalculator` via `to_frame()`.
    """

    def __init__(
        self,
        static_image_mode: bool = False,
        max_num_hands: int = 1,
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
        tasks_model_path: str = "models/hand_landmarker.task",
    ) -> None:
        self._solutions = _try_create_solutions_backend(
            static_image_mode=static_image_mode,
            max_num_hands=max_num_hands,
            min_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )
        self._tasks: Optional[_TasksBackend] = None
        self._tasks_timestamp_ms = 0

        if self._solutions is None:
            logger.info("mediapipe has no `solutions` module, using the Tasks HandLandmarker")
            try:
                self._tasks = _create_tasks_backend(
                    model_path=tasks_model_path,
                    max_num_hands=max_num_hands,
                    min_detection_confidence=min_detection_confidence,
                    min_tracking_confidence=min_tracking_confidence,
                )
            except (ImportError, OSError) as e:
                raise RuntimeError(
                    "Could not initialize MediaPipe Hands.\n"
                    "The installed `mediapipe` package does not expose `mp.solutions`, and the Tasks\n"
                    f"HandLandmarker could not be created from {tasks_model_path}."
                ) from e

    def close(self) -> None:
        if self._solutions is not None:
            self._solutions.hands.close()
        if self._tasks is not None:
            self._tasks.landmarker.close()

    def __enter__(self) -> "HandLandmarkDetector":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def detect(self, frame_bgr) -> List[HandPosition]:
        h, w = frame_bgr.shape[:2]
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)

        if self._solutions is not None:
            results = self._solutions.hands.process(frame_rgb)
            handedness_list = results.multi_handedness or []
            positions: List[HandPosition] = []
            for i, hand_landmarks in enumerate(results.multi_hand_landmarks or []):
                label: Optional[str] = None
                score: Optional[float] = None
                if i < len(handedness_list) and handedness_list[i].classification:
                    c = handedness_list[i].classification[0]
                    label = c.label
                    score = float(c.score)
                positions.append(self._build_hand_position(hand_landmarks.landmark, label, score, w, h))
            return positions

        mp = self._tasks.mp
        mp_image = mp.Image(image_format=mp.ImageFormat.SRGB, data=frame_rgb)

        # VIDEO mode requires strictly increasing timestamps.
        self._tasks_timestamp_ms += 33
        result = self._tasks.landmarker.detect_for_video(mp_image, self._tasks_timestamp_ms)

        handedness_list = result.handedness or []
        positions = []
        for i, landmarks in enumerate(result.hand_landmarks or []):
            label = None
            score = None
            if i < len(handedness_list) and handedness_list[i]:
                cat0 = handedness_list[i][0]
                label = cat0.category_name or cat0.display_name
                score = float(cat0.score)
            positions.append(self._build_hand_position(landmarks, label, score, w, h))
        return positions

    @staticmethod
    def _build_hand_position(landmarks, label: Optional[str], score: Optional[float], w: int, h: int) -> HandPosition:
        points = tuple(Point2D(float(lm.x), float(lm.y)) for lm in landmarks)
        pts_px = [to_pixels(p, w, h) for p in points]
        return HandPosition(
            handedness_label=label,
            handedness_score=score,
            landmarks=points,
            bbox_px=bbox_from_points(pts_px),
            center_px=center_from_points(pts_px),
        )
