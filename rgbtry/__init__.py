"""Range-checked conversion of integer triples into 8-bit RGB colors."""

from __future__ import annotations

from .color import CHANNEL_MAX, CHANNEL_MIN, CHANNEL_NAMES, Color
from .convert import (
    ConversionResult,
    convert,
    from_array,
    from_sequence,
    from_slice,
    from_tuple,
    try_from,
)
from .errors import ColorConversionError, ComponentTypeError, LengthError, RangeError

__all__ = [
    "CHANNEL_MAX",
    "CHANNEL_MIN",
    "CHANNEL_NAMES",
    "Color",
    "ColorConversionError",
    "ComponentTypeError",
    "ConversionResult",
    "LengthError",
    "RangeError",
    "convert",
    "from_array",
    "from_sequence",
    "from_slice",
    "from_tuple",
    "try_from",
]
