"""Points of the model plane and curvature-aware distances."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Callable, ClassVar, Hashable, Iterator, Tuple, Union

from .types import Curvature, GeometryDomainError, unknown_curvature

Scalar = Union[int, float]

# Spherical packing circles are capped at this fraction of the distance to the
# point at infinity.
SPHERICAL_HORIZON_SCALE = 0.8


def _atan_distance(ratio: float) -> float:
    return 2.0 * math.atan(ratio)


def _atanh_distance(ratio: float) -> float:
    # ratio >= 1 means one of the points sits on or beyond the ideal boundary
    if ratio >= 1.0:
        return math.inf
    return 2.0 * math.atanh(ratio)


@dataclass(frozen=True)
class Point:
    """A point ``(x, y)`` that doubles as the complex number ``x + iy``."""

    x: float
    y: float

    ORIGIN: ClassVar["Point"]

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_complex(cls, value: complex) -> "Point":
        return cls(value.real, value.imag)

    def to_complex(self) -> complex:
        return complex(self.x, self.y)

    def __complex__(self) -> complex:
        return self.to_complex()

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, other: Union["Point", Scalar]) -> "Point":
        if isinstance(other, Point):
            return Point(
                self.x * other.x - self.y * other.y,
                self.x * other.y + self.y * other.x,
            )
        if isinstance(other, numbers.Real):
            return Point(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other: Scalar) -> "Point":
        if isinstance(other, numbers.Real):
            return Point(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other: Union["Point", Scalar]) -> "Point":
        if isinstance(other, Point):
            denom = other.norm_sq()
            if denom == 0.0:
                raise GeometryDomainError(f"cannot divide {self!r} by the zero vector")
            num = self * other.conjugate()
            return Point(num.x / denom, num.y / denom)
        if isinstance(other, numbers.Real):
            if other == 0:
                raise GeometryDomainError(f"cannot divide {self!r} by zero")
            return Point(self.x / other, self.y / other)
        return NotImplemented

    def conjugate(self) -> "Point":
        return Point(self.x, -self.y)

    def norm_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def dist_sq(self, other: "Point") -> float:
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2

    def dist(self, other: "Point") -> float:
        return math.sqrt(self.dist_sq(other))

    def dist_in_space(self, other: "Point", curvature: Curvature) -> float:
        """Return the distance to ``other`` measured in ``curvature``'s metric.

        Spherical and hyperbolic distances first move ``self`` to the origin
        with the model isometry, then read the distance off the image of
        ``other``. A vanishing denominator (antipodal spherical points) yields
        ``inf``.
        """

        if curvature is Curvature.EUCLIDEAN:
            return self.dist(other)
        if curvature is Curvature.SPHERICAL:
            denom = Point(1.0, 0.0) + self.conjugate() * other
            if denom.norm_sq() == 0.0:
                return math.inf
            return _atan_distance(((other - self) / denom).norm())
        if curvature is Curvature.HYPERBOLIC:
            denom = Point(1.0, 0.0) - self.conjugate() * other
            if denom.norm_sq() == 0.0:
                return math.inf
            return _atanh_distance(((other - self) / denom).norm())
        raise unknown_curvature(curvature)

    def dist_to_inf(self, curvature: Curvature) -> float:
        """Cap on circle radii about this point; ``inf`` means uncapped.

        Only the spherical model has a finite cap: a circle reaching the point
        at infinity has no bounded Euclidean image.
        """

        if curvature is Curvature.SPHERICAL:
            modulus = self.norm()
            if modulus == 0.0:
                return SPHERICAL_HORIZON_SCALE * math.pi
            return SPHERICAL_HORIZON_SCALE * _atan_distance(1.0 / modulus)
        if curvature in (Curvature.EUCLIDEAN, Curvature.HYPERBOLIC):
            return math.inf
        raise unknown_curvature(curvature)

    def approx_hash(self, float_hash: Callable[[float], Hashable]) -> Tuple[Hashable, Hashable]:
        return (float_hash(self.x), float_hash(self.y))

    def __repr__(self) -> str:
        return f"Point({self.x!r}, {self.y!r})"


Point.ORIGIN = Point(0.0, 0.0)


__all__ = ["Point", "SPHERICAL_HORIZON_SCALE"]
