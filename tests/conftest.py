from typing import List, Optional, Tuple

import pytest


def build_hand(
    thumb: bool = False,
    index: bool = False,
    middle: bool = False,
    ring: bool = False,
    pinky: bool = False,
    side: str = "Left",
    thumb_tip: Optional[Tuple[float, float]] = None,
    index_tip: Optional[Tuple[float, float]] = None,
) -> List[Tuple[float, float]]:
    """
    Synthetic 21-point hand with the requested fingers extended.

    side="Left" puts the index base left of the ring base (thumb on the left);
    side="Right" mirrors that. Thumb and index tips default to ~0.14 apart, so
    they are not "near" unless overridden.
    """
    pts = [(0.5, 0.5) for _ in range(21)]

    if side == "Left":
        pts[6], pts[14] = (0.40, 0.5), (0.60, 0.5)
        pts[2] = (0.45, 0.5)
        pts[4] = (0.30, 0.5) if thumb else (0.50, 0.5)
        finger_x = {8: 0.40, 12: 0.47, 16: 0.60, 20: 0.67}
    else:
        pts[6], pts[14] = (0.60, 0.5), (0.40, 0.5)
        pts[2] = (0.55, 0.5)
        pts[4] = (0.70, 0.5) if thumb else (0.50, 0.5)
        finger_x = {8: 0.60, 12: 0.53, 16: 0.40, 20: 0.33}

    # bases (PIP joints) at y=0.5; tips 0.1 above when open, 0.1 below when closed
    for base in (10, 18):
        pts[base] = (finger_x[base + 2], 0.5)
    for tip, is_open in ((8, index), (12, middle), (16, ring), (20, pinky)):
        pts[tip] = (finger_x[tip], 0.4 if is_open else 0.6)

    if thumb_tip is not None:
        pts[4] = thumb_tip
    if index_tip is not None:
        pts[8] = index_tip
    return pts


@pytest.fixture
def make_hand():
    return build_hand
