"""Demonstrate every conversion on a fixed sample.

Usage:
    python -m rgbtry
    python -m rgbtry --verbose
"""

from __future__ import annotations

import argparse
import logging

import numpy as np

from .convert import convert, from_array, from_sequence, from_tuple, try_from
from .errors import ColorConversionError

SAMPLE = (183, 65, 14)


def run_demo() -> list[str]:
    """Convert ``SAMPLE`` through each entry point and return one line per result."""
    attempts = [
        ("from_tuple", from_tuple, SAMPLE),
        ("from_array", from_array, np.array(SAMPLE, dtype=np.int16)),
        ("from_sequence", from_sequence, list(SAMPLE)),
        ("try_from", try_from, list(SAMPLE)),
    ]

    lines = []
    for label, fn, value in attempts:
        try:
            outcome = fn(value)
        except ColorConversionError as e:
            outcome = e
        lines.append(f"{label}: {outcome!r}")
    lines.append(f"convert: {convert(SAMPLE)!r}")
    return lines


def main(argv: list[str] | None = None) -> None:
    """Parse *argv* and print the outcome of each sample conversion."""
    parser = argparse.ArgumentParser(
        description="Convert a sample RGB triple with every rgbtry entry point"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    for line in run_demo():
        print(line)


if __name__ == "__main__":
    main()
