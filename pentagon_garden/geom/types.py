from __future__ import annotations

from enum import Enum


class GeometryDomainError(ZeroDivisionError, ValueError):
    """Raised when a point operation divides by a zero-length vector."""


class Curvature(Enum):
    """Constant-curvature model the kernel computes in.

    Spherical points live in the stereographic disk model (the unit circle is
    the equator), hyperbolic points in the Poincaré disk.
    """

    SPHERICAL = "spherical"
    EUCLIDEAN = "euclidean"
    HYPERBOLIC = "hyperbolic"

    @classmethod
    def parse(cls, value: object) -> "Curvature":
        if isinstance(value, Curvature):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key or member.name.lower() == key:
                    return member
        raise ValueError(f"unknown curvature {value!r} (expected spherical|euclidean|hyperbolic)")

    def __str__(self) -> str:
        return self.value


DEFAULT_CURVATURE = Curvature.EUCLIDEAN


def unknown_curvature(curvature: object) -> ValueError:
    return ValueError(f"unsupported curvature {curvature!r}")


__all__ = [
    "Curvature",
    "DEFAULT_CURVATURE",
    "GeometryDomainError",
    "unknown_curvature",
]
