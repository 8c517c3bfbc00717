"""Screen-space circles for generator outlines and grip markers.

Everything here is Euclidean: centres and radii are already projected out of
the curvature model and can be handed to any 2D drawing backend.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .colours import NEUTRAL_GREY, generator_colour
from .geom import Circle, Curvature, Point, RotCircle
from .search.model import Grip, RenderCircle

HORIZON_COLOUR = (0.83, 0.83, 0.83, 1.0)


def generator_outlines(generators: Sequence[RotCircle]) -> List[RenderCircle]:
    """One outline per generator, coloured by its index."""

    outlines = []
    for idx, generator in enumerate(generators):
        centre, radius = generator.euclidean_centre_radius()
        outlines.append(RenderCircle(centre, radius, generator_colour(idx)))
    return outlines


def _cut_circle(grip: Grip, generators: Sequence[RotCircle], curvature: Curvature) -> RenderCircle:
    cut = Circle(grip.point, generators[grip.index].radius, curvature)
    centre, radius = cut.euclidean_centre_radius()
    return RenderCircle(centre, radius, NEUTRAL_GREY)


def grip_markers(
    grips: Sequence[Grip], curvature: Curvature, grip_radius: float
) -> List[RenderCircle]:
    """Marker discs for ``grips``, coloured by generator index."""

    markers = []
    for grip in grips:
        centre, radius = Circle(grip.point, grip_radius, curvature).euclidean_centre_radius()
        markers.append(RenderCircle(centre, radius, generator_colour(grip.index)))
    return markers


def grip_cut_circles(
    grips: Sequence[Grip], generators: Sequence[RotCircle], curvature: Curvature
) -> List[RenderCircle]:
    """The boundary each grip would cut: its generator's circle moved to the grip."""

    return [_cut_circle(grip, generators, curvature) for grip in grips]


def horizon_outline(curvature: Curvature) -> Optional[RenderCircle]:
    """The boundary of the Poincaré disk, the only model with a visible horizon."""

    if curvature is Curvature.HYPERBOLIC:
        return RenderCircle(Point.ORIGIN, 1.0, HORIZON_COLOUR)
    return None


__all__ = ["HORIZON_COLOUR", "generator_outlines", "grip_cut_circles", "grip_markers", "horizon_outline"]
