import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from handgesture.calculator import HandGestureRecognitionCalculator
from handgesture.config import NodeConfig, StreamSpec, parse_node_config
from handgesture.errors import ConfigurationError, EmptyInputError, InvalidHandednessError, InvalidLandmarksError
from handgesture.types import Gesture, GestureResult, Handedness, LandmarkFrame


@pytest.fixture
def calculator():
    return HandGestureRecognitionCalculator()


def frame(landmarks, timestamp=0, handedness=Handedness.RIGHT):
    return LandmarkFrame(landmarks=landmarks, handedness=handedness, timestamp=timestamp)


def test_default_wiring_is_valid(calculator):
    assert calculator.output_stream_name == "hand_gesture"


@pytest.mark.parametrize(
    "inputs, outputs, missing",
    [
        (["HANDEDNESS:h"], ["RECOGNIZED_HAND_GESTURE:g"], "input NORM_LANDMARKS"),
        (["NORM_LANDMARKS:lm"], ["RECOGNIZED_HAND_GESTURE:g"], "input HANDEDNESS"),
        (["NORM_LANDMARKS:lm", "HANDEDNESS:h"], [], "output RECOGNIZED_HAND_GESTURE"),
    ],
)
def test_missing_stream_fails_at_construction(inputs, outputs, missing):
    config = parse_node_config({"input_stream": inputs, "output_stream": outputs})
    with pytest.raises(ConfigurationError, match=missing):
        HandGestureRecognitionCalculator(config)


def test_custom_stream_names_are_accepted():
    config = NodeConfig(
        input_streams=(StreamSpec("NORM_LANDMARKS", "scaled_landmarks"), StreamSpec("HANDEDNESS", "hand")),
        output_streams=(StreamSpec("RECOGNIZED_HAND_GESTURE", "recognized"),),
    )
    assert HandGestureRecognitionCalculator(config).output_stream_name == "recognized"


def test_process_returns_label_with_input_timestamp(calculator, make_hand):
    result = calculator.process(frame(make_hand(True, True, True, True, True), timestamp=1_234_567))
    assert result == GestureResult(gesture=Gesture.FIVE, timestamp=1_234_567)
    assert result.label == "FIVE"


def test_handedness_label_strings_are_accepted(calculator, make_hand):
    result = calculator.process(frame(make_hand(), handedness="Left"))
    assert result.gesture is Gesture.FIST


def test_empty_frame_is_rejected(calculator, caplog):
    with caplog.at_level(logging.WARNING, logger="handgesture.calculator"):
        with pytest.raises(EmptyInputError):
            calculator.process(frame([], timestamp=42))
    assert "Rejected frame at 42" in caplog.text


def test_malformed_frames_are_rejected(calculator, make_hand):
    with pytest.raises(InvalidLandmarksError):
        calculator.process(frame(make_hand()[:5]))
    with pytest.raises(InvalidHandednessError):
        calculator.process(frame(make_hand(), handedness="Unknown"))


def test_debug_log_has_finger_states(calculator, make_hand, caplog):
    with caplog.at_level(logging.DEBUG, logger="handgesture.calculator"):
        calculator.process(frame(make_hand(False, True, True, False, False), timestamp=7))
    assert "ts=7 fingers=01100 gesture=YEAH" in caplog.text


def test_process_many_keeps_input_order(calculator, make_hand):
    frames = [
        frame(make_hand(False, True), timestamp=30),
        frame(make_hand(), timestamp=10),
        frame(make_hand(thumb=True, pinky=True), timestamp=20),
    ]
    results = list(calculator.process_many(frames))
    assert [(r.timestamp, r.gesture) for r in results] == [
        (30, Gesture.ONE),
        (10, Gesture.FIST),
        (20, Gesture.SHAKA),
    ]


def test_shared_instance_is_thread_safe(calculator, make_hand):
    hands = [
        make_hand(True, True, True, True, True),
        make_hand(False, True, True, True, True),
        make_hand(False, True, False, False, True),
        make_hand(),
        make_hand(middle=True, ring=True, pinky=True, thumb_tip=(0.50, 0.50), index_tip=(0.52, 0.51)),
    ]
    frames = [frame(hands[i % len(hands)], timestamp=i) for i in range(200)]
    expected = [calculator.process(f) for f in frames]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(calculator.process, frames))

    assert results == expected
    assert {r.gesture for r in results} == {Gesture.FIVE, Gesture.FOUR, Gesture.ROCK, Gesture.FIST, Gesture.OK}


def empty_frame_in_batch(make_hand):
    return [
        frame(make_hand(False, True), timestamp=1),
        frame([], timestamp=2),
        frame(make_hand(), timestamp=3),
    ]


def test_process_many_skip_drops_rejected_frames(calculator, make_hand, caplog):
    with caplog.at_level(logging.WARNING, logger="handgesture.calculator"):
        results = list(calculator.process_many(empty_frame_in_batch(make_hand), on_error="skip"))
    assert [(r.timestamp, r.gesture) for r in results] == [(1, Gesture.ONE), (3, Gesture.FIST)]
    assert "Rejected frame at 2" in caplog.text


def test_process_many_raise_stops_at_rejected_frame(calculator, make_hand):
    results = calculator.process_many(empty_frame_in_batch(make_hand))
    assert next(results).timestamp == 1
    with pytest.raises(EmptyInputError):
        next(results)


def test_process_many_rejects_unknown_policy(calculator):
    with pytest.raises(ValueError, match="on_error"):
        calculator.process_many([], on_error="ignore")


def test_malformed_points_are_logged_and_rejected(calculator, caplog):
    with caplog.at_level(logging.WARNING, logger="handgesture.calculator"):
        with pytest.raises(InvalidLandmarksError):
            calculator.process(frame([{"x": 0.5, "y": 0.5}] * 21, timestamp=9))
    assert "Rejected frame at 9" in caplog.text
