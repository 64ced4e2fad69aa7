from __future__ import annotations

import argparse
import logging
import os
import platform
import sys
import time

import cv2

# Allow running without installing the package (repo-local usage).
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_ROOT = os.path.join(REPO_ROOT, "src")
if SRC_ROOT not in sys.path:
    sys.path.insert(0, SRC_ROOT)

from handgesture.calculator import HandGestureRecognitionCalculator  # noqa: E402
from handgesture.config import NodeConfig, load_node_config  # noqa: E402
from handgesture.detector import HandLandmarkDetector  # noqa: E402
from handgesture.drawing import draw_hand, draw_text  # noqa: E402


def main() -> int:
    ap = argparse.ArgumentParser(description="Webcam hand gesture recognition demo.")
    ap.add_argument("--camera", type=int, default=0, help="Camera index (default: 0)")
    ap.add_argument("--width", type=int, default=1280, help="Capture width (best effort)")
    ap.add_argument("--height", type=int, default=720, help="Capture height (best effort)")
    ap.add_argument("--max-hands", type=int, default=1, help="Maximum number of hands to detect")
    ap.add_argument("--config", default=None, help="YAML node config (default: built-in wiring)")
    ap.add_argument("--log-level", default="INFO", help="Logging level, e.g. DEBUG to print finger states")
    ap.add_argument(
        "--no-mirror",
        action="store_true",
        help="Disable horizontal mirroring (default is mirrored/selfie mode)",
    )
    args = ap.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = load_node_config(args.config) if args.config else NodeConfig.default()
    calculator = HandGestureRecognitionCalculator(config)

    if platform.system() == "Darwin":
        cap = cv2.VideoCapture(args.camera, cv2.CAP_AVFOUNDATION)
    else:
        cap = cv2.VideoCapture(args.camera)
    if not cap.isOpened():
        raise RuntimeError(
            f"Could not open camera index {args.camera}. "
            "On macOS: System Settings -> Privacy & Security -> Camera -> allow your terminal."
        )

    cap.set(cv2.CAP_PROP_FRAME_WIDTH, args.width)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, args.height)

    with HandLandmarkDetector(max_num_hands=args.max_hands) as detector:
        while True:
            ok, frame = cap.read()
            if not ok:
                break

            if not args.no_mirror:
                frame = cv2.flip(frame, 1)

            timestamp_us = int(time.monotonic() * 1e6)
            hands = detector.detect(frame)
            for hand in hands:
                result = calculator.process(hand.to_frame(timestamp=timestamp_us))
                draw_hand(frame, hand, result.label)

            draw_text(frame, f"hands: {len(hands)} | press q to quit", (12, 28), scale=0.8)

            cv2.imshow("handgesture - webcam", frame)
            key = cv2.waitKey(1) & 0xFF
            if key in (ord("q"), 27):
                break

    cap.release()
    cv2.destroyAllWindows()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
