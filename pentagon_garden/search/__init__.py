"""Search façade running the point-orbit and grip expansions."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..approx import FloatHasher
from ..geom import Curvature, Point, RotCircle
from .model import (
    EmptyGeneratorSetError,
    ExpansionOptions,
    Exploration,
    Grip,
    GripSet,
    OrbitPoint,
    OrbitResult,
    RenderCircle,
)
from .grips import expand_grips
from .orbit import expand_seed, orbit_points, point_packing_radius

logger = logging.getLogger(__name__)


def explore(
    seed: Point,
    generators: Sequence[RotCircle],
    curvature: Curvature,
    options: Optional[ExpansionOptions] = None,
    *,
    orbit: bool = True,
    grips: bool = True,
) -> Exploration:
    """Run the requested expansions at ``seed`` with one shared budget."""

    from ..config import get_default_options

    options = options or get_default_options()
    hasher = FloatHasher(options.tolerance)
    logger.info(
        "Exploring seed %s with %d generator(s), curvature=%s, depth=%d",
        seed,
        len(generators),
        curvature,
        options.depth,
    )

    result = Exploration(seed=seed, curvature=curvature)
    if orbit:
        result.orbit = expand_seed(seed, generators, curvature, options.depth, hasher=hasher)
        logger.info(
            "Point orbit: %d point(s), packing radius=%.6g, truncated=%s",
            len(result.orbit),
            result.orbit.packing_radius,
            result.orbit.truncated,
        )
    if grips:
        result.grips = expand_grips(seed, generators, curvature, options.depth, hasher=hasher)
        logger.info("Grips: %d found", len(result.grips))
    return result


__all__ = [
    "EmptyGeneratorSetError",
    "ExpansionOptions",
    "Exploration",
    "Grip",
    "GripSet",
    "OrbitPoint",
    "OrbitResult",
    "RenderCircle",
    "expand_grips",
    "expand_seed",
    "explore",
    "orbit_points",
    "point_packing_radius",
]
