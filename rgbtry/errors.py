"""Exceptions raised when a triple cannot be narrowed into a ``Color``."""

from __future__ import annotations


class ColorConversionError(ValueError):
    """Base class for every conversion failure."""


class RangeError(ColorConversionError):
    """A component does not fit in an unsigned 8-bit channel.

    :param channel: Channel name, one of ``"red"``, ``"green"``, ``"blue"``.
    :param index: Position of the component in the input.
    :param value: The offending input value.
    """

    def __init__(self, channel: str, index: int, value: object) -> None:
        self.channel = channel
        self.index = index
        self.value = value
        super().__init__(
            f"{channel} value {value} out of range for u8 (expected 0-255)"
        )


class LengthError(ColorConversionError):
    """The input does not hold exactly ``expected`` components."""

    def __init__(
        self, actual: int, expected: int = 3, message: str | None = None
    ) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(
            message or f"expected exactly {expected} components, got {actual}"
        )


class ComponentTypeError(ColorConversionError, TypeError):
    """A component is not an integer (floats and bools are rejected).

    ``channel`` and ``index`` are ``None`` when a whole array is rejected for
    its dtype; ``value`` then holds the dtype.
    """

    def __init__(
        self,
        channel: str | None,
        index: int | None,
        value: object,
        message: str | None = None,
    ) -> None:
        self.channel = channel
        self.index = index
        self.value = value
        super().__init__(
            message
            or f"{channel} component must be an int, got {type(value).__name__}"
        )
