from __future__ import annotations

import argparse
import logging
import os
import sys

import cv2

# Allow running without installing the package (repo-local usage).
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_ROOT = os.path.join(REPO_ROOT, "src")
if SRC_ROOT not in sys.path:
    sys.path.insert(0, SRC_ROOT)

from handgesture.calculator import HandGestureRecognitionCalculator  # noqa: E402
from handgesture.detector import HandLandmarkDetector  # noqa: E402
from handgesture.drawing import draw_hand  # noqa: E402


def main() -> int:
    ap = argparse.ArgumentParser(description="Recognize hand gestures in a still image.")
    ap.add_argument("--image", required=True, help="Path to input image")
    ap.add_argument("--out", required=True, help="Path to output image (annotated)")
    ap.add_argument("--max-hands", type=int, default=2, help="Maximum number of hands to detect")
    ap.add_argument("--log-level", default="WARNING", help="Logging level")
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper())

    frame = cv2.imread(args.image)
    if frame is None:
        raise RuntimeError(f"Could not read image: {args.image}")

    calculator = HandGestureRecognitionCalculator()
    with HandLandmarkDetector(static_image_mode=True, max_num_hands=args.max_hands) as detector:
        hands = detector.detect(frame)

    print(f"hands: {len(hands)}")
    for i, hand in enumerate(hands):
        result = calculator.process(hand.to_frame())
        draw_hand(frame, hand, result.label)
        print(f"[{i}] {hand.handedness_label} score={hand.handedness_score} gesture={result.label}")

    if not cv2.imwrite(args.out, frame):
        raise RuntimeError(f"Could not write output image: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
