from __future__ import annotations

from typing import Optional

from .types import FingerStates, Handedness, Landmark, LandmarkList


# (tip, base) pairs for the four fingers judged vertically.
FINGER_JOINTS = {
    "index": (Landmark.INDEX_TIP, Landmark.INDEX_PIP),
    "middle": (Landmark.MIDDLE_TIP, Landmark.MIDDLE_PIP),
    "ring": (Landmark.RING_TIP, Landmark.RING_PIP),
    "pinky": (Landmark.PINKY_TIP, Landmark.PINKY_PIP),
}


def thumb_side(landmarks: LandmarkList) -> Handedness:
    """
    Which side of the hand the thumb sits on, as seen in the image.

    Inferred from the index and ring base joints: if the index joint is left of
    the ring joint, the thumb is on the left.
    """

    if landmarks[Landmark.INDEX_PIP].x < landmarks[Landmark.RING_PIP].x:
        return Handedness.LEFT
    return Handedness.RIGHT


def _finger_is_open(landmarks: LandmarkList, tip: Landmark, base: Landmark) -> bool:
    # y grows downward: an extended finger has its tip above the base joint
    return landmarks[tip].y < landmarks[base].y


def finger_states(landmarks: LandmarkList, handedness: Optional[Handedness] = None) -> FingerStates:
    """
    Compute the openness of each finger from a validated 21-point landmark list.

    NOTE: `handedness` is accepted to match the node's input contract but is not
    read. The thumb direction comes from `thumb_side()` instead, so a hand whose
    reported handedness disagrees with its geometry is still judged by geometry.
    Switching the thumb rule to the reported handedness would change results
    for mirrored input and is left to a separate change.
    """

    side = thumb_side(landmarks)
    tip_x = landmarks[Landmark.THUMB_TIP].x
    base_x = landmarks[Landmark.THUMB_MCP].x
    thumb = (side is Handedness.LEFT and tip_x < base_x) or (side is Handedness.RIGHT and tip_x > base_x)

    return FingerStates(
        thumb=thumb,
        **{name: _finger_is_open(landmarks, tip, base) for name, (tip, base) in FINGER_JOINTS.items()},
    )
