from __future__ import annotations

from typing import List, Optional, Tuple

import cv2

from .geometry import to_pixels
from .types import HandPosition


HAND_CONNECTIONS: List[Tuple[int, int]] = [
    # thumb
    (0, 1), (1, 2), (2, 3), (3, 4),
    # index
    (0, 5), (5, 6), (6, 7), (7, 8),
    # middle
    (5, 9), (9, 10), (10, 11), (11, 12),
    # ring
    (9, 13), (13, 14), (14, 15), (15, 16),
    # pinky
    (13, 17), (17, 18), (18, 19), (19, 20),
    # palm base
    (0, 17),
]


def draw_text(frame, text: str, org: Tuple[int, int], color=(255, 255, 255), scale=0.6, thickness=2):
    # dark outline keeps the label readable on bright backgrounds
    cv2.putText(frame, text, org, cv2.FONT_HERSHEY_SIMPLEX, scale, (0, 0, 0), thickness + 2, cv2.LINE_AA)
    cv2.putText(frame, text, org, cv2.FONT_HERSHEY_SIMPLEX, scale, color, thickness, cv2.LINE_AA)
    return frame


def draw_hand(frame, hand: HandPosition, gesture: Optional[str] = None):
    """Draw one hand's skeleton, box and (optionally) its gesture label."""
    h, w = frame.shape[:2]
    pts = [to_pixels(p, w, h) for p in hand.landmarks]

    for a, b in HAND_CONNECTIONS:
        if a < len(pts) and b < len(pts):
            cv2.line(frame, pts[a], pts[b], (0, 255, 255), 2, cv2.LINE_AA)
    for pt in pts:
        cv2.circle(frame, pt, 3, (40, 255, 120), -1, lineType=cv2.LINE_AA)

    x0, y0, x1, y1 = hand.bbox_px
    cv2.rectangle(frame, (x0, y0), (x1, y1), (0, 255, 0), 2)

    label = hand.handedness_label or "Hand"
    if gesture is not None:
        label = f"{label}: {gesture}"
    draw_text(frame, label, (x0, max(0, y0 - 8)))
    return frame
