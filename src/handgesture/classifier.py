from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple

from .fingers import finger_states
from .geometry import is_near
from .landmarks import as_landmark_list
from .types import FingerStates, Gesture, Handedness, Landmark, LandmarkList


Rule = Callable[[FingerStates, LandmarkList], bool]


def _pattern(thumb: Optional[bool], index: bool, middle: bool, ring: bool, pinky: bool) -> Rule:
    """Exact open/closed match; a `None` thumb matches either state."""

    def rule(s: FingerStates, _landmarks: LandmarkList) -> bool:
        if thumb is not None and s.thumb != thumb:
            return False
        return (s.index, s.middle, s.ring, s.pinky) == (index, middle, ring, pinky)

    return rule


def _any_of(*rules: Rule) -> Rule:
    def rule(s: FingerStates, landmarks: LandmarkList) -> bool:
        return any(r(s, landmarks) for r in rules)

    return rule


def _ok_sign(s: FingerStates, landmarks: LandmarkList) -> bool:
    # Distance is only computed once the finger pattern already matches.
    return (
        not s.index
        and s.middle
        and s.ring
        and s.pinky
        and is_near(landmarks[Landmark.THUMB_TIP], landmarks[Landmark.INDEX_TIP])
    )


# Checked top to bottom, first match wins. Order matters: the OK and BIRD rows
# leave the thumb unconstrained and must stay below the thumb-specific rows.
GESTURE_RULES: List[Tuple[Rule, Gesture]] = [
    (_pattern(True, True, True, True, True), Gesture.FIVE),
    (_pattern(False, True, True, True, True), Gesture.FOUR),
    (
        _any_of(
            _pattern(True, True, True, False, False),
            _pattern(False, True, True, True, False),
        ),
        Gesture.THREE,
    ),
    (_pattern(True, True, False, False, False), Gesture.TWO),
    (_pattern(False, True, False, False, False), Gesture.ONE),
    (_pattern(False, True, True, False, False), Gesture.YEAH),
    (_pattern(False, True, False, False, True), Gesture.ROCK),
    (_pattern(True, True, False, False, True), Gesture.SPIDERMAN),
    (_pattern(False, False, False, False, False), Gesture.FIST),
    (_ok_sign, Gesture.OK),
    (_pattern(None, False, True, False, False), Gesture.BIRD),
    (_pattern(True, False, False, False, True), Gesture.SHAKA),
]


def classify(states: FingerStates, landmarks: LandmarkList) -> Gesture:
    """
    Map finger states to a gesture using `GESTURE_RULES`.

    `landmarks` is only consulted by the OK rule (thumb/index tip proximity).
    Never raises; a state matching no rule yields `Gesture.NONE`.
    """

    for rule, gesture in GESTURE_RULES:
        if rule(states, landmarks):
            return gesture
    return Gesture.NONE


def recognize(landmarks: Any, handedness: Any = Handedness.RIGHT) -> Gesture:
    """Validate one hand's landmarks and return its gesture."""
    points = as_landmark_list(landmarks)
    return classify(finger_states(points, Handedness.parse(handedness)), points)
