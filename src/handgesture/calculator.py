from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from .classifier import classify
from .config import GESTURE_TAG, HANDEDNESS_TAG, LANDMARKS_TAG, NodeConfig
from .errors import ConfigurationError, GestureRecognitionError
from .fingers import finger_states
from .landmarks import as_landmark_list
from .types import GestureResult, Handedness, LandmarkFrame


logger = logging.getLogger(__name__)

ON_ERROR_POLICIES = ("raise", "skip")


class HandGestureRecognitionCalculator:
    """
    Per-frame gesture recognition node.

    Takes one hand's landmarks and handedness per frame and emits one gesture
    label carrying the same timestamp. Holds no per-frame state, so a single
    instance can be shared by any number of worker threads.
    """

    def __init__(self, config: Optional[NodeConfig] = None) -> None:
        self.config = config or NodeConfig.default()
        self._check_contract(self.config)

    @staticmethod
    def _check_contract(config: NodeConfig) -> None:
        missing = []
        for tag in (LANDMARKS_TAG, HANDEDNESS_TAG):
            if config.input_stream(tag) is None:
                missing.append(f"input {tag}")
        if config.output_stream(GESTURE_TAG) is None:
            missing.append(f"output {GESTURE_TAG}")
        if missing:
            raise ConfigurationError(f"{config.calculator} is missing required streams: {', '.join(missing)}")

    @property
    def output_stream_name(self) -> str:
        return self.config.output_stream(GESTURE_TAG).name

    def process(self, frame: LandmarkFrame) -> GestureResult:
        try:
            landmarks = as_landmark_list(frame.landmarks)
            handedness = Handedness.parse(frame.handedness)
        except GestureRecognitionError as e:
            logger.warning("Rejected frame at %s: %s", frame.timestamp, e)
            raise

        states = finger_states(landmarks, handedness)
        gesture = classify(states, landmarks)
        logger.debug("ts=%s fingers=%s gesture=%s", frame.timestamp, states, gesture.value)
        return GestureResult(gesture=gesture, timestamp=frame.timestamp)

    def process_many(self, frames: Iterable[LandmarkFrame], on_error: str = "raise") -> Iterator[GestureResult]:
        """
        Process frames in the order given.

        Args:
            frames: Frames to classify
            on_error: "raise" stops the batch at the first rejected frame and
                propagates its error; "skip" drops rejected frames (each is
                logged by `process`) and carries on with the rest

        Returns:
            An iterator with one result per accepted frame, in input order
        """
        if on_error not in ON_ERROR_POLICIES:
            raise ValueError(f"Unknown on_error policy '{on_error}'. Available: {list(ON_ERROR_POLICIES)}")
        return self._iter_results(frames, skip_rejected=(on_error == "skip"))

    def _iter_results(self, frames: Iterable[LandmarkFrame], skip_rejected: bool) -> Iterator[GestureResult]:
        for frame in frames:
            try:
                result = self.process(frame)
            except GestureRecognitionError:
                if not skip_rejected:
                    raise
                continue
            yield result
