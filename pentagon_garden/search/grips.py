"""Grips: generator images, under the generated group, that contain a seed.

The search walks group elements rather than points. A group element is kept
as a :class:`GripSet`, the image of the whole ordered generator list, so the
member at index ``i`` of any set is always the image of generator ``i``.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from ..approx import ApproxHashSet, FloatHash
from ..config import get_float_hasher
from ..geom import Curvature, Point, RotCircle
from ..logging_utils import apply_debug_logging
from .model import Grip, GripSet
from .utils import check_depth, warn_mixed_curvature

logger = logging.getLogger(__name__)


def expand_grips(
    seed: Point,
    generators: Sequence[RotCircle],
    curvature: Curvature,
    depth: int,
    *,
    hasher: Optional[Callable[[float], FloatHash]] = None,
) -> List[Grip]:
    """Return every distinct generator image containing ``seed``.

    Grips come out in discovery order: the original generators first, then
    the members of each newly reached grip set in index order. At most
    ``depth`` grip sets are expanded; running out of budget truncates the
    list without notice.
    """

    depth = check_depth(depth)
    if not generators:
        return []
    warn_mixed_curvature(generators, curvature)

    hasher = hasher or get_float_hasher()
    seen_grips: ApproxHashSet[RotCircle] = ApproxHashSet(hasher)
    seen_sets: ApproxHashSet[GripSet] = ApproxHashSet(hasher)

    base = GripSet.identity(generators)
    seen_sets.add(base)
    frontier = [base]

    grips: List[Grip] = []
    for idx in base.containing(seed):
        circle = base.circles[idx]
        seen_grips.add(circle)
        grips.append(Grip(circle.centre, idx))

    index = 0
    while index < depth and index < len(frontier):
        current = frontier[index]
        for pivot in current.containing(seed):
            rotated = current.rotate_by(pivot)
            if not seen_sets.add(rotated):
                continue
            for member_idx, circle in enumerate(rotated.circles):
                if circle.contains(seed) and seen_grips.add(circle):
                    grips.append(Grip(circle.centre, member_idx))
            frontier.append(rotated)
        index += 1

    logger.debug(
        "expand_grips: %d grip(s) from %d grip set(s), %d expanded, truncated=%s",
        len(grips),
        len(frontier),
        index,
        index < len(frontier),
    )
    return grips


apply_debug_logging(globals(), logger=logger)


__all__ = ["expand_grips"]
