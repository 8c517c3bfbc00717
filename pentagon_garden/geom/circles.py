"""Circles of the model plane and the rotation generators built on them."""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass, replace
from typing import Callable, Hashable, Tuple

from .mobius import MobiusTransform, euclidean_centre_radius
from .points import Point
from .types import Curvature, unknown_curvature


@dataclass(frozen=True)
class Circle:
    """A circle whose radius is measured in its own curvature's metric."""

    centre: Point
    radius: float
    curvature: Curvature = Curvature.EUCLIDEAN

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", float(self.radius))
        if self.radius < 0.0 or math.isnan(self.radius):
            raise ValueError(f"circle radius must be non-negative, got {self.radius}")

    def contains(self, point: Point) -> bool:
        return self.centre.dist_in_space(point, self.curvature) < self.radius

    def euclidean_centre_radius(
        self, transform: MobiusTransform = MobiusTransform.IDENT
    ) -> Tuple[Point, float]:
        return euclidean_centre_radius(self.centre, self.radius, self.curvature, transform)


@dataclass(frozen=True)
class RotCircle:
    """A generator: rotation by ``2*pi/step`` about the centre of ``circle``.

    ``inverted`` flips which side of the circle the generator acts on.
    """

    circle: Circle
    step: int
    inverted: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.step, bool) or int(self.step) != self.step:
            raise ValueError(f"rotation step must be an integer, got {self.step!r}")
        object.__setattr__(self, "step", int(self.step))
        if self.step < 2:
            raise ValueError(f"rotation step must be at least 2, got {self.step}")
        object.__setattr__(self, "inverted", bool(self.inverted))

    @classmethod
    def new(
        cls,
        centre: Point,
        radius: float,
        step: int,
        curvature: Curvature = Curvature.EUCLIDEAN,
        inverted: bool = False,
    ) -> "RotCircle":
        return cls(Circle(centre, radius, curvature), step, inverted)

    @property
    def centre(self) -> Point:
        return self.circle.centre

    @property
    def radius(self) -> float:
        return self.circle.radius

    @property
    def curvature(self) -> Curvature:
        return self.circle.curvature

    @property
    def angle(self) -> float:
        return 2.0 * math.pi / self.step

    def contains(self, point: Point) -> bool:
        return self.circle.contains(point) != self.inverted

    def rotation_transform(self) -> MobiusTransform:
        """Return the rotation as a Möbius matrix in this generator's model.

        With ``phi = exp(i*angle/2)`` and centre ``p`` this is the conjugate
        of ``z -> phi**2 z`` by the model isometry taking the origin to ``p``.
        """

        phi = cmath.exp(0.5j * self.angle)
        p = self.centre.to_complex()
        modulus_sq = abs(p) ** 2
        twist = 2j * phi.imag * p.conjugate()
        curvature = self.curvature
        if curvature is Curvature.EUCLIDEAN:
            turn = phi * phi
            return MobiusTransform([[turn, p * (1.0 - turn)], [0.0, 1.0]])
        if curvature is Curvature.SPHERICAL:
            a = phi + phi.conjugate() * modulus_sq
            b = -twist
            return MobiusTransform([[a, -b.conjugate()], [b, a.conjugate()]])
        if curvature is Curvature.HYPERBOLIC:
            a = phi - phi.conjugate() * modulus_sq
            b = twist
            return MobiusTransform([[a, b.conjugate()], [b, a.conjugate()]])
        raise unknown_curvature(curvature)

    def rotate_point(self, point: Point) -> Point:
        curvature = self.curvature
        if curvature is Curvature.EUCLIDEAN:
            cos_t = math.cos(self.angle)
            sin_t = math.sin(self.angle)
            dx = point.x - self.centre.x
            dy = point.y - self.centre.y
            return Point(
                self.centre.x + cos_t * dx - sin_t * dy,
                self.centre.y + sin_t * dx + cos_t * dy,
            )
        if curvature in (Curvature.SPHERICAL, Curvature.HYPERBOLIC):
            return self.rotation_transform().apply_to(point)
        raise unknown_curvature(curvature)

    def rotate_circle(self, other: "RotCircle") -> "RotCircle":
        """Return ``other`` carried through this generator's rotation."""

        moved = replace(other.circle, centre=self.rotate_point(other.centre))
        return replace(other, circle=moved)

    def packing_gap(self, point: Point) -> float:
        """Distance from ``point`` to this generator's boundary."""

        return abs(point.dist_in_space(self.centre, self.curvature) - self.radius)

    def euclidean_centre_radius(
        self, transform: MobiusTransform = MobiusTransform.IDENT
    ) -> Tuple[Point, float]:
        return self.circle.euclidean_centre_radius(transform)

    def approx_hash(self, float_hash: Callable[[float], Hashable]) -> Tuple[Hashable, ...]:
        return (
            self.centre.approx_hash(float_hash),
            float_hash(self.radius),
            self.step,
            self.inverted,
        )


__all__ = ["Circle", "RotCircle"]
