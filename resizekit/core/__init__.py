"""
Core module - Interfaces, protocols, errors and data types for resizekit.
"""
from .interfaces import (
    # Enums
    OrientationMode,
    ResizeMode,
    AnchorPosition,
    Resampler,

    # Data classes
    Size,
    Rectangle,
    ResizeOptions,
    TransformOutcome,

    # Abstract interfaces
    ICommandConverter,
    IResampler,
    IImageWebProcessor,
)
from .errors import (
    ResizeKitException,
    CommandError,
    FormatError,
    UnsupportedTypeError,
)

__all__ = [
    # Enums
    "OrientationMode",
    "ResizeMode",
    "AnchorPosition",
    "Resampler",

    # Data classes
    "Size",
    "Rectangle",
    "ResizeOptions",
    "TransformOutcome",

    # Abstract interfaces
    "ICommandConverter",
    "IResampler",
    "IImageWebProcessor",

    # Errors
    "ResizeKitException",
    "CommandError",
    "FormatError",
    "UnsupportedTypeError",
]
