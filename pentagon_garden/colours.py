"""Colour helpers for orbit circles and generator overlays.

All colours are RGBA tuples of floats in ``[0, 1]``.
"""

from __future__ import annotations

import hashlib
from typing import Tuple

import numpy as np

Colour = Tuple[float, float, float, float]

NEUTRAL_GREY: Colour = (0.5, 0.5, 0.5, 1.0)
GOLD: Colour = (1.0, 215 / 255, 0.0, 1.0)

# ColorBrewer Set1
_SET1_HEX = (
    "e41a1c",
    "377eb8",
    "4daf4a",
    "984ea3",
    "ff7f00",
    "ffff33",
    "a65628",
    "f781bf",
    "999999",
)


def _hex_to_colour(value: str) -> Colour:
    r, g, b = (int(value[i : i + 2], 16) / 255 for i in (0, 2, 4))
    return (r, g, b, 1.0)


SET1: Tuple[Colour, ...] = tuple(_hex_to_colour(value) for value in _SET1_HEX)

_SINEBOW_PHASES = np.array([0.0, 1.0 / 3.0, 2.0 / 3.0])


def sinebow(t: float) -> Colour:
    """Evaluate the cyclic sinebow colour map at ``t`` (period 1)."""

    channels = np.sin(np.pi * (0.5 - float(t) + _SINEBOW_PHASES)) ** 2
    # quantise to 8 bits per channel like a regular colour table
    r, g, b = (np.round(channels * 255.0) / 255.0).tolist()
    return (r, g, b, 1.0)


def generator_colour(index: int) -> Colour:
    if 0 <= index < len(SET1):
        return SET1[index]
    return GOLD


def count_hash(count: int) -> int:
    """Stable 32-bit digest of an orbit size."""

    digest = hashlib.sha256(str(int(count)).encode("utf8")).digest()
    return int.from_bytes(digest[:4], "little")


def orbit_colour(count: int, truncated: bool) -> Colour:
    """Colour shared by every circle of one orbit.

    Closed orbits get a rainbow colour keyed by their size so equal-sized
    orbits match; truncated orbits are drawn grey.
    """

    if truncated:
        return NEUTRAL_GREY
    return sinebow(count_hash(count + 1) / 2**32)


__all__ = [
    "Colour",
    "GOLD",
    "NEUTRAL_GREY",
    "SET1",
    "count_hash",
    "generator_colour",
    "orbit_colour",
    "sinebow",
]
