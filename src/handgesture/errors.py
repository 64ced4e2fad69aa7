from __future__ import annotations


class GestureRecognitionError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(GestureRecognitionError):
    """The recognition node is wired without a required input or output stream."""


class InvalidLandmarksError(GestureRecognitionError, ValueError):
    """A frame's landmark list cannot be classified (wrong length or shape)."""


class EmptyInputError(InvalidLandmarksError):
    """A frame arrived with no landmarks at all."""


class InvalidHandednessError(GestureRecognitionError, ValueError):
    """A handedness label that is neither Left nor Right."""
