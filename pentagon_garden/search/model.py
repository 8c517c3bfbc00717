"""Records shared by the orbit searches and their consumers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Hashable, List, NamedTuple, Optional, Sequence, Tuple

from ..colours import Colour
from ..geom import Curvature, Point, RotCircle


class EmptyGeneratorSetError(ValueError):
    """Raised when a search needs at least one generator and got none."""


@dataclass
class ExpansionOptions:
    """Knobs shared by both expansions."""

    depth: int = 500
    tolerance: float = 1e-6
    grip_radius: float = 0.05
    grip_cuts: bool = False


@dataclass(frozen=True)
class RenderCircle:
    """A circle in Euclidean screen space, ready to be drawn."""

    centre: Point
    radius: float
    colour: Colour


@dataclass(frozen=True)
class OrbitPoint:
    point: Point
    parent: int
    generation: int = 0


@dataclass
class OrbitResult:
    points: List[OrbitPoint]
    packing_radius: float
    truncated: bool
    colour: Colour
    circles: List[RenderCircle] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    @property
    def coords(self) -> List[Point]:
        return [entry.point for entry in self.points]


@dataclass
class Exploration:
    """Outcome of one exploration at a seed point."""

    seed: Point
    curvature: Curvature
    orbit: Optional[OrbitResult] = None
    grips: List["Grip"] = field(default_factory=list)


class Grip(NamedTuple):
    """A generator image containing the seed, tagged with its original index."""

    point: Point
    index: int


@dataclass(frozen=True)
class GripSet:
    """Images of the whole generator list under one group element.

    Member ``i`` is always the image of original generator ``i``.
    """

    circles: Tuple[RotCircle, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "circles", tuple(self.circles))

    @classmethod
    def identity(cls, generators: Sequence[RotCircle]) -> "GripSet":
        return cls(tuple(generators))

    def __len__(self) -> int:
        return len(self.circles)

    def rotate_by(self, index: int) -> "GripSet":
        pivot = self.circles[index]
        return GripSet(tuple(pivot.rotate_circle(circle) for circle in self.circles))

    def containing(self, seed: Point) -> List[int]:
        return [idx for idx, circle in enumerate(self.circles) if circle.contains(seed)]

    def approx_hash(self, float_hash: Callable[[float], Hashable]) -> Tuple[Hashable, ...]:
        # step, radius and curvature are invariant under the action
        return tuple(circle.centre.approx_hash(float_hash) for circle in self.circles)


__all__ = [
    "Colour",
    "EmptyGeneratorSetError",
    "ExpansionOptions",
    "Exploration",
    "Grip",
    "GripSet",
    "OrbitPoint",
    "OrbitResult",
    "RenderCircle",
]
