"""Fallible conversions from wide integer triples into ``Color``.

Three entry points accept the three input shapes:
  - ``from_tuple``: a tuple ``(r, g, b)``
  - ``from_array``: a numpy array of shape ``(3,)``
  - ``from_sequence``: any sequence, whose length is checked at runtime

Each returns a fully valid ``Color`` or raises a ``ColorConversionError``.
Components map positionally: index 0 is red, 1 is green, 2 is blue.
``convert`` wraps ``try_from`` and returns a ``ConversionResult`` instead of
raising.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence

import numpy as np

from .color import CHANNEL_COUNT, Color, narrow_channel
from .errors import ColorConversionError, ComponentTypeError, LengthError

logger = logging.getLogger(__name__)


def _narrow(values: Sequence) -> Color:
    """Narrow three positional values into a ``Color``, red first."""
    try:
        red, green, blue = (
            narrow_channel(values[i], i) for i in range(CHANNEL_COUNT)
        )
    except ColorConversionError as e:
        logger.debug(f"Narrowing {tuple(values)!r} failed: {e}")
        raise
    return Color(red=red, green=green, blue=blue)


def _check_length(actual: int) -> None:
    if actual != CHANNEL_COUNT:
        logger.debug(f"Rejected input with {actual} components")
        raise LengthError(actual, CHANNEL_COUNT)


def from_tuple(triple: tuple[int, int, int]) -> Color:
    """Convert an ``(r, g, b)`` tuple of ints into a ``Color``.

    :raises TypeError: If *triple* is not a tuple.
    :raises LengthError: If the tuple does not have exactly 3 elements.
    :raises RangeError: If any element is outside ``0-255``.
    """
    if not isinstance(triple, tuple):
        raise TypeError(f"triple must be a tuple, got {type(triple).__name__}")
    _check_length(len(triple))
    return _narrow(triple)


def from_array(arr: np.ndarray) -> Color:
    """Convert an integer numpy array of shape ``(3,)`` into a ``Color``.

    Non-array input goes through ``np.asarray`` first.

    :raises LengthError: If the array shape is not ``(3,)``.
    :raises ComponentTypeError: If the dtype is not an integer dtype.
    :raises RangeError: If any element is outside ``0-255``.
    """
    try:
        arr = np.asarray(arr)
    except ValueError as e:
        # Ragged nesting such as [1, [2, 3], 4] has no array shape.
        logger.debug(f"Rejected ragged array input {arr!r}")
        raise LengthError(
            len(arr) if hasattr(arr, "__len__") else 0,
            CHANNEL_COUNT,
            f"expected an array of shape ({CHANNEL_COUNT},), got ragged input",
        ) from e
    if arr.shape != (CHANNEL_COUNT,):
        logger.debug(f"Rejected array with shape {arr.shape}")
        raise LengthError(
            arr.size,
            CHANNEL_COUNT,
            f"expected an array of shape ({CHANNEL_COUNT},), got shape {arr.shape}",
        )
    if not np.issubdtype(arr.dtype, np.integer):
        raise ComponentTypeError(
            None,
            None,
            arr.dtype,
            f"array dtype {arr.dtype} is not an integer dtype",
        )
    return _narrow(arr.tolist())


def from_sequence(seq: Sequence[int]) -> Color:
    """Convert a sequence of ints into a ``Color``.

    The length is checked before any element is inspected, so
    ``[0, 0, 0, 0]`` fails with ``LengthError`` even though every value
    would fit.

    :raises TypeError: If *seq* is not a sequence, or is a str/bytes.
    :raises LengthError: If the sequence does not have exactly 3 elements.
    :raises RangeError: If any element is outside ``0-255``.
    """
    if isinstance(seq, (str, bytes)) or not isinstance(seq, Sequence):
        raise TypeError(f"seq must be a sequence of ints, got {type(seq).__name__}")
    _check_length(len(seq))
    return _narrow(seq)


from_slice = from_sequence


def try_from(value: object) -> Color:
    """Dispatch *value* to the converter matching its shape.

    :raises TypeError: If *value* is not a tuple, array, sequence or Color.
    """
    if isinstance(value, Color):
        return value
    if isinstance(value, np.ndarray):
        return from_array(value)
    if isinstance(value, tuple):
        return from_tuple(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return from_sequence(value)
    raise TypeError(
        f"Cannot convert {type(value).__name__} to Color; "
        "expected a tuple, numpy array or sequence"
    )


@dataclasses.dataclass(frozen=True)
class ConversionResult:
    """Outcome of :func:`convert`: exactly one of ``color`` or ``error`` is set."""

    color: Color | None = None
    error: ColorConversionError | None = None

    def __post_init__(self) -> None:
        if (self.color is None) == (self.error is None):
            raise ValueError(
                "ConversionResult requires exactly one of color or error, "
                f"got color={self.color!r}, error={self.error!r}"
            )

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Color:
        """Return the color, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.color


def convert(value: object) -> ConversionResult:
    """Like :func:`try_from`, but returns conversion failures instead of raising.

    A ``TypeError`` for an unsupported container still propagates.
    """
    try:
        return ConversionResult(color=try_from(value))
    except ColorConversionError as e:
        return ConversionResult(error=e)
