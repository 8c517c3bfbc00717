"""Curvature-parametrised plane geometry: points, Möbius maps, circles."""

from .circles import Circle, RotCircle
from .mobius import MobiusTransform, euclidean_centre_radius
from .points import SPHERICAL_HORIZON_SCALE, Point
from .types import DEFAULT_CURVATURE, Curvature, GeometryDomainError

__all__ = [
    "Circle",
    "Curvature",
    "DEFAULT_CURVATURE",
    "GeometryDomainError",
    "MobiusTransform",
    "Point",
    "RotCircle",
    "SPHERICAL_HORIZON_SCALE",
    "euclidean_centre_radius",
]
