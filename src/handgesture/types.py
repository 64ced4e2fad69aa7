from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

from .errors import InvalidHandednessError


Point2 = Tuple[int, int]
Box2 = Tuple[int, int, int, int]  # (x_min, y_min, x_max, y_max)


@dataclass(frozen=True)
class Point2D:
    """A landmark position normalized to the frame's width/height."""

    x: float
    y: float


class Landmark(IntEnum):
    """
    Index of each of the 21 MediaPipe hand landmarks.

    The gesture rules only read a handful of these; the rest are named so that
    landmark lists can be inspected without magic numbers.
    """

    WRIST = 0
    THUMB_CMC = 1
    THUMB_MCP = 2
    THUMB_IP = 3
    THUMB_TIP = 4
    INDEX_MCP = 5
    INDEX_PIP = 6
    INDEX_DIP = 7
    INDEX_TIP = 8
    MIDDLE_MCP = 9
    MIDDLE_PIP = 10
    MIDDLE_DIP = 11
    MIDDLE_TIP = 12
    RING_MCP = 13
    RING_PIP = 14
    RING_DIP = 15
    RING_TIP = 16
    PINKY_MCP = 17
    PINKY_PIP = 18
    PINKY_DIP = 19
    PINKY_TIP = 20


LandmarkList = Tuple[Point2D, ...]  # always length 21 once validated


class Handedness(Enum):
    LEFT = "Left"
    RIGHT = "Right"

    @classmethod
    def parse(cls, value) -> "Handedness":
        """Accept a Handedness or a case-insensitive "left"/"right" label."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        raise InvalidHandednessError(f"Unknown handedness label: {value!r} (expected 'Left' or 'Right')")


class Gesture(str, Enum):
    """Closed vocabulary of recognized hand poses."""

    FIVE = "FIVE"
    FOUR = "FOUR"
    THREE = "THREE"
    TWO = "TWO"
    ONE = "ONE"
    YEAH = "YEAH"
    ROCK = "ROCK"
    SPIDERMAN = "SPIDERMAN"
    FIST = "FIST"
    OK = "OK"
    BIRD = "BIRD"
    SHAKA = "SHAKA"
    NONE = "NONE"


@dataclass(frozen=True)
class FingerStates:
    """Which fingers are extended ("open") in a single frame."""

    thumb: bool
    index: bool
    middle: bool
    ring: bool
    pinky: bool

    def as_tuple(self) -> Tuple[bool, bool, bool, bool, bool]:
        return (self.thumb, self.index, self.middle, self.ring, self.pinky)

    def __str__(self) -> str:
        # thumb..pinky as 1/0, e.g. "01100"
        return "".join("1" if v else "0" for v in self.as_tuple())


@dataclass(frozen=True)
class LandmarkFrame:
    """One hand observed in one frame, as delivered by the landmark stage."""

    landmarks: LandmarkList
    handedness: Handedness
    timestamp: int = 0  # pass-through only, never interpreted


@dataclass(frozen=True)
class GestureResult:
    """Recognized gesture, stamped with its input frame's timestamp."""

    gesture: Gesture
    timestamp: int

    @property
    def label(self) -> str:
        return self.gesture.value


@dataclass(frozen=True)
class HandPosition:
    """A hand found by the landmark detector, in normalized and pixel space."""

    handedness_label: Optional[str]  # "Left" / "Right" (may be None)
    handedness_score: Optional[float]
    landmarks: LandmarkList
    bbox_px: Box2
    center_px: Point2

    def to_frame(self, timestamp: int = 0, default_handedness: Handedness = Handedness.RIGHT) -> LandmarkFrame:
        """Package this hand for the gesture calculator."""
        if self.handedness_label is None:
            handedness = default_handedness
        else:
            handedness = Handedness.parse(self.handedness_label)
        return LandmarkFrame(landmarks=self.landmarks, handedness=handedness, timestamp=timestamp)
