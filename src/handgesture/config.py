"""
Node wiring for the gesture recognition calculator.

Mirrors a MediaPipe graph node entry:

    calculator: HandGestureRecognitionCalculator
    input_stream:
      - NORM_LANDMARKS:landmarks
      - HANDEDNESS:handedness
    output_stream:
      - RECOGNIZED_HAND_GESTURE:hand_gesture
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from .errors import ConfigurationError


LANDMARKS_TAG = "NORM_LANDMARKS"
HANDEDNESS_TAG = "HANDEDNESS"
GESTURE_TAG = "RECOGNIZED_HAND_GESTURE"

CALCULATOR_NAME = "HandGestureRecognitionCalculator"


@dataclass(frozen=True)
class StreamSpec:
    """A tagged stream connection, written as "TAG:name"."""

    tag: str
    name: str

    @classmethod
    def parse(cls, text: str) -> "StreamSpec":
        if not isinstance(text, str):
            raise ConfigurationError(f"Stream must be a 'TAG:name' string, got {text!r}")
        tag, sep, name = text.partition(":")
        tag, name = tag.strip(), name.strip()
        if not sep or not tag or not name:
            raise ConfigurationError(f"Malformed stream {text!r}, expected 'TAG:name'")
        return cls(tag=tag, name=name)

    def __str__(self) -> str:
        return f"{self.tag}:{self.name}"


@dataclass(frozen=True)
class NodeConfig:
    """Input and output connections of one calculator node."""

    calculator: str = CALCULATOR_NAME
    input_streams: Tuple[StreamSpec, ...] = ()
    output_streams: Tuple[StreamSpec, ...] = ()

    @classmethod
    def default(cls) -> "NodeConfig":
        return cls(
            input_streams=(StreamSpec(LANDMARKS_TAG, "landmarks"), StreamSpec(HANDEDNESS_TAG, "handedness")),
            output_streams=(StreamSpec(GESTURE_TAG, "hand_gesture"),),
        )

    def input_stream(self, tag: str) -> Optional[StreamSpec]:
        return next((s for s in self.input_streams if s.tag == tag), None)

    def output_stream(self, tag: str) -> Optional[StreamSpec]:
        return next((s for s in self.output_streams if s.tag == tag), None)


def _stream_list(data: Dict[str, Any], key: str) -> Tuple[StreamSpec, ...]:
    value = data.get(key) or []
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise ConfigurationError(f"'{key}' must be a list of 'TAG:name' strings")
    return tuple(StreamSpec.parse(v) for v in value)


def parse_node_config(data: Dict[str, Any]) -> NodeConfig:
    """Build a NodeConfig from a graph-style mapping."""
    if not isinstance(data, dict):
        raise ConfigurationError(f"Node config must be a mapping, got {type(data).__name__}")
    return NodeConfig(
        calculator=data.get("calculator", CALCULATOR_NAME),
        input_streams=_stream_list(data, "input_stream"),
        output_streams=_stream_list(data, "output_stream"),
    )


def load_node_config(path: Union[str, Path]) -> NodeConfig:
    """
    Load a node config from a YAML file.

    Args:
        path: Path to a YAML document holding one node mapping

    Returns:
        The parsed NodeConfig
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Could not parse {config_path}: {e}") from e

    return parse_node_config(data)
