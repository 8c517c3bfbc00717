"""Helpers shared by the search modules."""

from __future__ import annotations

import logging
from typing import Sequence

from ..geom import Curvature, RotCircle

logger = logging.getLogger(__name__)


def check_depth(depth: int) -> int:
    if isinstance(depth, bool) or int(depth) != depth:
        raise ValueError(f"depth must be an integer, got {depth!r}")
    if depth < 1:
        raise ValueError(f"depth must be at least 1, got {depth}")
    return int(depth)


def warn_mixed_curvature(generators: Sequence[RotCircle], curvature: Curvature) -> None:
    """Log generators built for a different model than the search uses."""

    mismatched = [idx for idx, gen in enumerate(generators) if gen.curvature is not curvature]
    if mismatched:
        logger.warning(
            "Generators %s were built for a different curvature than %s; "
            "they rotate in their own model",
            mismatched,
            curvature,
        )
