"""Symmetric generator layouts."""

from __future__ import annotations

import logging
import math
from typing import List

from .geom import Curvature, Point, RotCircle
from .geom.types import unknown_curvature

logger = logging.getLogger(__name__)

DEFAULT_RADIUS = 0.5
DEFAULT_STEP = 5


def ring_offset(distance: float, curvature: Curvature) -> float:
    """Model coordinate of a centre half of ``distance`` away from the origin.

    ``distance`` is measured in the curvature's own metric, so two generators on
    opposite sides of the ring sit ``distance`` apart.
    """

    if curvature is Curvature.SPHERICAL:
        return math.tan(distance / 4.0)
    if curvature is Curvature.EUCLIDEAN:
        return distance / 2.0
    if curvature is Curvature.HYPERBOLIC:
        return math.tanh(distance / 4.0)
    raise unknown_curvature(curvature)


def generate_generators(
    count: int,
    distance: float,
    curvature: Curvature,
    *,
    radius: float = DEFAULT_RADIUS,
    step: int = DEFAULT_STEP,
    inverted: bool = False,
) -> List[RotCircle]:
    """Place ``count`` identical generators evenly around the origin.

    Generator ``k`` sits at angle ``k * 2*pi/count`` measured clockwise from the
    negative x axis, so a pair lies on the x axis with generator 0 on the left.
    """

    if count < 1:
        raise ValueError(f"generator count must be at least 1, got {count}")
    offset = ring_offset(distance, curvature)
    turn = 2.0 * math.pi / count
    generators = []
    for k in range(count):
        angle = k * turn
        centre = offset * Point(-math.cos(angle), math.sin(angle))
        generators.append(RotCircle.new(centre, radius, step, curvature, inverted))
    logger.info(
        "Generated %d generator(s) at distance %.6g (%s, radius=%.6g, step=%d)",
        count,
        distance,
        curvature,
        radius,
        step,
    )
    return generators


__all__ = ["DEFAULT_RADIUS", "DEFAULT_STEP", "generate_generators", "ring_offset"]
