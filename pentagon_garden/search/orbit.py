"""Breadth-first point orbit of a seed under the generators."""

from __future__ import annotations

import logging
import math
from typing import Callable, List, Optional, Sequence

from ..approx import ApproxHashSet, FloatHash
from ..colours import orbit_colour
from ..config import get_float_hasher
from ..geom import Curvature, Point, RotCircle, euclidean_centre_radius
from ..logging_utils import apply_debug_logging
from .model import EmptyGeneratorSetError, OrbitPoint, OrbitResult, RenderCircle
from .utils import check_depth, warn_mixed_curvature

logger = logging.getLogger(__name__)


def point_packing_radius(
    point: Point, generators: Sequence[RotCircle], curvature: Curvature
) -> float:
    """Largest radius about ``point`` whose circle crosses no generator boundary."""

    if not generators:
        raise EmptyGeneratorSetError("packing radius needs at least one generator")
    return min(
        abs(point.dist_in_space(gen.centre, curvature) - gen.radius) for gen in generators
    )


def orbit_points(
    seed: Point,
    generators: Sequence[RotCircle],
    depth: int,
    *,
    hasher: Optional[Callable[[float], FloatHash]] = None,
) -> List[OrbitPoint]:
    """Return the orbit of ``seed`` in breadth-first order.

    At most ``depth`` entries are expanded. The list holds more than ``depth``
    entries exactly when the orbit did not close within the budget.
    """

    depth = check_depth(depth)
    visited: ApproxHashSet[Point] = ApproxHashSet(hasher or get_float_hasher())
    visited.add(seed)
    points = [OrbitPoint(seed, 0, 0)]

    index = 0
    while index < depth and index < len(points):
        current = points[index]
        for generator in generators:
            if not generator.contains(current.point):
                continue
            image = generator.rotate_point(current.point)
            if visited.add(image):
                points.append(OrbitPoint(image, index, current.generation + 1))
        index += 1

    logger.debug(
        "orbit_points: expanded %d of %d point(s) with budget %d", index, len(points), depth
    )
    return points


def expand_seed(
    seed: Point,
    generators: Sequence[RotCircle],
    curvature: Curvature,
    depth: int,
    *,
    hasher: Optional[Callable[[float], FloatHash]] = None,
) -> OrbitResult:
    """Expand ``seed`` into its orbit and the packing circles drawn at each point."""

    if not generators:
        raise EmptyGeneratorSetError("point orbit expansion needs at least one generator")
    warn_mixed_curvature(generators, curvature)

    points = orbit_points(seed, generators, depth, hasher=hasher)
    truncated = len(points) > depth
    packing_radius = min(
        point_packing_radius(entry.point, generators, curvature) for entry in points
    )
    colour = orbit_colour(len(points), truncated)

    circles: List[RenderCircle] = []
    # the horizon cap carries over to every later point in BFS order
    radius = packing_radius
    for entry in points:
        radius = min(radius, entry.point.dist_to_inf(curvature))
        centre, screen_radius = euclidean_centre_radius(entry.point, radius, curvature)
        circles.append(RenderCircle(centre, screen_radius, colour))

    if truncated:
        logger.debug("expand_seed: orbit of %s truncated at %d point(s)", seed, len(points))
    elif not math.isfinite(packing_radius):
        logger.debug("expand_seed: unbounded packing radius at %s", seed)

    return OrbitResult(
        points=points,
        packing_radius=packing_radius,
        truncated=truncated,
        colour=colour,
        circles=circles,
    )


apply_debug_logging(globals(), logger=logger)


__all__ = ["expand_seed", "orbit_points", "point_packing_radius"]
