"""Hash maps keyed by floating-point states compared up to a tolerance.

Every numeric component of a key is quantised by a :class:`FloatHasher`
before hashing, so two states whose components fall into the same buckets are
the same entry. Keys describe themselves through an ``approx_hash`` method
taking the quantiser; plain floats and (nested) tuples of floats work too.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Hashable, Iterator, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")

FloatHash = Hashable


@dataclass(frozen=True)
class FloatHasher:
    """Quantise a float to the index of its ``tolerance``-wide bucket."""

    tolerance: float = 1e-6

    def __post_init__(self) -> None:
        if not (self.tolerance > 0.0 and math.isfinite(self.tolerance)):
            raise ValueError(f"tolerance must be a positive finite number, got {self.tolerance!r}")

    def __call__(self, value: float) -> FloatHash:
        value = float(value)
        if not math.isfinite(value):
            return repr(value)
        scaled = value / self.tolerance
        if not math.isfinite(scaled):
            return repr(value)
        # int buckets also merge -0.0 with 0.0
        return round(scaled)


def approx_key(key: Any, float_hash: Callable[[float], FloatHash]) -> Hashable:
    """Return the bucketed form of ``key`` used for hashing and equality."""

    hasher = getattr(key, "approx_hash", None)
    if hasher is not None:
        return hasher(float_hash)
    if isinstance(key, numbers.Real) and not isinstance(key, bool):
        return float_hash(float(key))
    if isinstance(key, (tuple, list)):
        return tuple(approx_key(item, float_hash) for item in key)
    if isinstance(key, Hashable):
        return key
    raise TypeError(f"cannot build an approximate hash for {type(key).__name__}")


class ApproxHashMap(Generic[K, V]):
    """Insertion-ordered map whose keys are compared after quantisation.

    The first key inserted into a bucket is the one kept; later inserts into an
    occupied bucket return the stored value and change nothing.
    """

    def __init__(self, hasher: Optional[Callable[[float], FloatHash]] = None):
        self._hasher: Callable[[float], FloatHash] = hasher or FloatHasher()
        self._entries: Dict[Hashable, Tuple[K, V]] = {}

    @property
    def hasher(self) -> Callable[[float], FloatHash]:
        return self._hasher

    def _key(self, key: K) -> Hashable:
        return approx_key(key, self._hasher)

    def insert(self, key: K, value: V) -> Optional[V]:
        """Store ``value`` under ``key``; return the existing value, or ``None`` if new.

        ``None`` is not a storable value, so a ``None`` return always means the
        key was new.
        """

        if value is None:
            raise ValueError("ApproxHashMap values must not be None")
        bucket = self._key(key)
        existing = self._entries.get(bucket)
        if existing is not None:
            return existing[1]
        self._entries[bucket] = (key, value)
        return None

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        existing = self._entries.get(self._key(key))
        if existing is None:
            return default
        return existing[1]

    def __contains__(self, key: object) -> bool:
        return self._key(key) in self._entries  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        return (stored for stored, _ in self._entries.values())

    def items(self) -> Iterator[Tuple[K, V]]:
        return iter(list(self._entries.values()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={len(self)}, hasher={self._hasher!r})"


class ApproxHashSet(Generic[K]):
    """Set counterpart of :class:`ApproxHashMap`."""

    def __init__(self, hasher: Optional[Callable[[float], FloatHash]] = None):
        self._map: ApproxHashMap[K, bool] = ApproxHashMap(hasher)

    def add(self, key: K) -> bool:
        """Add ``key``; return ``True`` when no equivalent key was present."""

        return self._map.insert(key, True) is None

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[K]:
        return iter(self._map)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(len={len(self)}, hasher={self._map.hasher!r})"


__all__ = [
    "ApproxHashMap",
    "ApproxHashSet",
    "FloatHash",
    "FloatHasher",
    "approx_key",
]
