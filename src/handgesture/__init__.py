from .calculator import HandGestureRecognitionCalculator
from .classifier import classify, recognize
from .config import NodeConfig, load_node_config
from .errors import (
    ConfigurationError,
    EmptyInputError,
    GestureRecognitionError,
    InvalidHandednessError,
    InvalidLandmarksError,
)
from .fingers import finger_states
from .types import FingerStates, Gesture, GestureResult, Handedness, Landmark, LandmarkFrame, Point2D

__all__ = [
    "HandGestureRecognitionCalculator",
    "classify",
    "recognize",
    "finger_states",
    "NodeConfig",
    "load_node_config",
    "GestureRecognitionError",
    "ConfigurationError",
    "InvalidLandmarksError",
    "EmptyInputError",
    "InvalidHandednessError",
    "FingerStates",
    "Gesture",
    "GestureResult",
    "Handedness",
    "Landmark",
    "LandmarkFrame",
    "Point2D",
]
