"""The bounded ``Color`` value type.

A ``Color`` holds three channels, each an int in ``0-255``.  Instances are
frozen and validated on construction, so an out-of-range ``Color`` cannot
exist.  Build one directly or through the converters in ``rgbtry.convert``.
"""

from __future__ import annotations

import dataclasses
import numbers
from typing import Iterator

from .errors import ComponentTypeError, RangeError

CHANNEL_MIN = 0
CHANNEL_MAX = 255
CHANNEL_COUNT = 3
CHANNEL_NAMES: tuple[str, str, str] = ("red", "green", "blue")


def narrow_channel(value: object, index: int) -> int:
    """Narrow a single wide integer into an 8-bit channel value.

    :param value: Input component; a Python int or numpy integer scalar.
    :param index: Position of the component (0 red, 1 green, 2 blue).
    :returns: The value as a plain Python ``int``.
    :raises ComponentTypeError: If *value* is not an integer.
    :raises RangeError: If *value* is outside ``0-255``.
    """
    channel = CHANNEL_NAMES[index]
    # bool is an int subclass but never a meaningful channel value.
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ComponentTypeError(channel, index, value)
    value = int(value)
    if not CHANNEL_MIN <= value <= CHANNEL_MAX:
        raise RangeError(channel, index, value)
    return value


@dataclasses.dataclass(frozen=True)
class Color:
    """An RGB color with every channel in ``0-255``.

    :param red: Red channel.
    :param green: Green channel.
    :param blue: Blue channel.
    :raises RangeError: If any channel is out of range.
    """

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        # frozen dataclass prevents direct assignment; use object.__setattr__
        # to store the narrowed plain-int value.
        for index, name in enumerate(CHANNEL_NAMES):
            object.__setattr__(
                self, name, narrow_channel(getattr(self, name), index)
            )

    @classmethod
    def try_from(cls, value: object) -> Color:
        """Convert a tuple, numpy array or sequence into a ``Color``.

        See :func:`rgbtry.convert.try_from`.
        """
        from .convert import try_from

        return try_from(value)

    def __iter__(self) -> Iterator[int]:
        yield self.red
        yield self.green
        yield self.blue

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """Return the color as a lowercase ``#rrggbb`` string."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
