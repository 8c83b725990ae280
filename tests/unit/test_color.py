"""Unit tests for the rgbtry.color.Color value type."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from rgbtry import CHANNEL_NAMES, Color, ComponentTypeError, RangeError
from rgbtry.color import narrow_channel


class TestColor:
    """Color is frozen, ordered red/green/blue, and never out of range."""

    def test_fields(self) -> None:
        c = Color(red=183, green=65, blue=14)
        assert (c.red, c.green, c.blue) == (183, 65, 14)

    def test_direct_construction_validates(self) -> None:
        with pytest.raises(RangeError, match="blue value 256"):
            Color(0, 0, 256)

    def test_direct_construction_rejects_negative(self) -> None:
        with pytest.raises(RangeError, match="red value -1"):
            Color(-1, 0, 0)

    def test_direct_construction_rejects_float(self) -> None:
        with pytest.raises(ComponentTypeError):
            Color(0, 0.5, 0)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        c = Color(1, 2, 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.red = 4  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        assert Color(1, 2, 3) == Color(1, 2, 3)
        assert Color(1, 2, 3) != Color(3, 2, 1)
        assert len({Color(1, 2, 3), Color(1, 2, 3)}) == 1

    def test_numpy_scalar_narrowed(self) -> None:
        c = Color(np.int16(10), 20, 30)
        assert type(c.red) is int
        assert c == Color(10, 20, 30)

    def test_iter_and_as_tuple(self) -> None:
        c = Color(7, 8, 9)
        assert tuple(c) == (7, 8, 9)
        assert c.as_tuple() == (7, 8, 9)
        r, g, b = c
        assert (r, g, b) == (7, 8, 9)

    @pytest.mark.parametrize(
        "rgb,expected",
        [
            ((255, 0, 0), "#ff0000"),
            ((0, 0, 0), "#000000"),
            ((183, 65, 14), "#b7410e"),
            ((255, 255, 255), "#ffffff"),
        ],
    )
    def test_to_hex(self, rgb, expected) -> None:
        assert Color(*rgb).to_hex() == expected


class TestNarrowChannel:
    """narrow_channel() is the single range check every converter uses."""

    @pytest.mark.parametrize("value", [0, 1, 127, 254, 255])
    def test_in_range(self, value) -> None:
        assert narrow_channel(value, 0) == value

    @pytest.mark.parametrize("value", [-1, 256, -32768, 32767, 10**20])
    def test_out_of_range(self, value) -> None:
        with pytest.raises(RangeError, match="expected 0-255"):
            narrow_channel(value, 2)

    def test_channel_names(self) -> None:
        assert CHANNEL_NAMES == ("red", "green", "blue")
        for index, name in enumerate(CHANNEL_NAMES):
            with pytest.raises(RangeError) as exc_info:
                narrow_channel(999, index)
            assert exc_info.value.channel == name

    @pytest.mark.parametrize("value", [1.0, "1", None, True])
    def test_non_integer(self, value) -> None:
        with pytest.raises(ComponentTypeError, match="must be an int"):
            narrow_channel(value, 0)
