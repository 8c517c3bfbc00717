"""Fractional-linear transforms of the model plane."""

from __future__ import annotations

import logging
import math
from typing import ClassVar, Sequence, Tuple, Union

import numpy as np

from .points import Point
from .types import Curvature, GeometryDomainError, unknown_curvature

logger = logging.getLogger(__name__)

Entry = Union[Point, complex, float]


def _as_complex(value: Entry) -> complex:
    if isinstance(value, Point):
        return value.to_complex()
    return complex(value)


class MobiusTransform:
    """The map ``z -> (a z + b) / (c z + d)`` stored as a 2x2 complex matrix.

    Instances are immutable. Composition follows matrix multiplication, so
    ``(s * t).apply_to(z) == s.apply_to(t.apply_to(z))``.
    """

    IDENT: ClassVar["MobiusTransform"]

    __slots__ = ("_matrix",)

    def __init__(self, transform: Union[Sequence[Sequence[Entry]], np.ndarray]):
        matrix = np.array(
            [[_as_complex(entry) for entry in row] for row in transform],
            dtype=np.complex128,
        )
        if matrix.shape != (2, 2):
            raise ValueError(f"Möbius transform needs a 2x2 matrix, got shape {matrix.shape}")
        matrix.setflags(write=False)
        self._matrix = matrix

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    def entries(self) -> Tuple[Tuple[Point, Point], Tuple[Point, Point]]:
        (a, b), (c, d) = self._matrix
        return (
            (Point.from_complex(complex(a)), Point.from_complex(complex(b))),
            (Point.from_complex(complex(c)), Point.from_complex(complex(d))),
        )

    def apply_to(self, point: Point) -> Point:
        (a, b), (c, d) = self._matrix
        z = point.to_complex()
        denom = complex(c * z + d)
        if denom == 0:
            raise GeometryDomainError(f"{point!r} is the pole of {self!r}")
        return Point.from_complex(complex(a * z + b) / denom)

    def inverse(self) -> "MobiusTransform":
        """Inverse up to scale, ``[[d, -b], [-c, a]]``."""

        (a, b), (c, d) = self._matrix
        return MobiusTransform([[d, -b], [-c, a]])

    def compose(self, other: "MobiusTransform") -> "MobiusTransform":
        """Return the transform applying ``other`` first, then ``self``."""

        return MobiusTransform(self._matrix @ other._matrix)

    def __mul__(self, other: "MobiusTransform") -> "MobiusTransform":
        if not isinstance(other, MobiusTransform):
            return NotImplemented
        return self.compose(other)

    def normalise(self, curvature: Curvature) -> "MobiusTransform":
        """Rescale the matrix into the isometry form for ``curvature``.

        Zero-magnitude divisors leave the affected entries untouched.
        """

        a, b, c, d = (complex(v) for v in self._matrix.ravel())
        if curvature is Curvature.EUCLIDEAN:
            c = 0j
            if abs(a) != 0.0:
                a = a / abs(a)
            if abs(d) != 0.0:
                d = d / abs(d)
            return MobiusTransform([[a, b], [c, d]])
        if curvature in (Curvature.SPHERICAL, Curvature.HYPERBOLIC):
            top = abs(a) ** 2 + abs(b) ** 2
            if top == 0.0:
                logger.debug("normalise: degenerate top row, leaving %r unchanged", self)
                return self
            a = a / top
            b = b / top
            if abs(d) != 0.0:
                d = d * (abs(a) / abs(d))
            if abs(a) != 0.0:
                cross = d * b.conjugate() / a.conjugate()
                c = -cross if curvature is Curvature.SPHERICAL else cross
            return MobiusTransform([[a, b], [c, d]])
        raise unknown_curvature(curvature)

    def allclose(self, other: "MobiusTransform", *, tol: float = 1e-9) -> bool:
        return bool(np.allclose(self._matrix, other._matrix, atol=tol, rtol=0.0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MobiusTransform):
            return NotImplemented
        return bool(np.array_equal(self._matrix, other._matrix))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        (a, b), (c, d) = self._matrix
        return f"MobiusTransform([[{a!r}, {b!r}], [{c!r}, {d!r}]])"


MobiusTransform.IDENT = MobiusTransform([[1.0, 0.0], [0.0, 1.0]])


def _signed_extent(distance: float, curvature: Curvature) -> float:
    # model-space distance from the origin -> signed Euclidean position on a ray
    if curvature is Curvature.EUCLIDEAN:
        return distance
    if curvature is Curvature.SPHERICAL:
        return math.tan(distance / 2.0)
    if curvature is Curvature.HYPERBOLIC:
        return math.tanh(distance / 2.0)
    raise unknown_curvature(curvature)


def _origin_distance(modulus: float, curvature: Curvature) -> float:
    if curvature is Curvature.EUCLIDEAN:
        return modulus
    if curvature is Curvature.SPHERICAL:
        return 2.0 * math.atan(modulus)
    if curvature is Curvature.HYPERBOLIC:
        return 2.0 * math.atanh(modulus)
    raise unknown_curvature(curvature)


def euclidean_centre_radius(
    centre: Point,
    radius: float,
    curvature: Curvature,
    transform: MobiusTransform = MobiusTransform.IDENT,
) -> Tuple[Point, float]:
    """Return the on-screen (Euclidean) centre and radius of a model circle.

    The circle is symmetric about the line through the origin and its
    (transformed) centre, so its image diameter lies on that line between the
    points at model distance ``rho + radius`` and ``rho - radius`` from the
    origin.
    """

    moved = transform.apply_to(centre)
    modulus = moved.norm()
    if curvature is Curvature.HYPERBOLIC and modulus >= 1.0:
        return moved, 0.0
    direction = Point(1.0, 0.0) if modulus == 0.0 else moved / modulus
    rho = _origin_distance(modulus, curvature)
    qp = _signed_extent(rho + radius, curvature)
    qm = _signed_extent(rho - radius, curvature)
    return ((qp + qm) / 2.0) * direction, (qp - qm) / 2.0


__all__ = ["MobiusTransform", "euclidean_centre_radius"]
