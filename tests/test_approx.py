import math

import pytest

from pentagon_garden import ApproxHashMap, ApproxHashSet, FloatHasher, GripSet, Point, RotCircle
from pentagon_garden.approx import approx_key


def test_float_hasher_buckets_by_tolerance():
    hasher = FloatHasher(1e-6)
    assert hasher(0.1) == hasher(0.1 + 1e-9)
    assert hasher(0.1) != hasher(0.1 + 1e-3)
    assert hasher(-0.0) == hasher(0.0)
    assert hasher(1e-7) == hasher(0.0)


def test_float_hasher_keeps_non_finite_values_apart():
    hasher = FloatHasher()
    assert hasher(math.inf) != hasher(-math.inf)
    assert hasher(math.nan) == hasher(math.nan)
    assert hasher(math.inf) != hasher(1e300)


@pytest.mark.parametrize("tolerance", [0.0, -1e-6, math.nan, math.inf])
def test_float_hasher_rejects_bad_tolerance(tolerance):
    with pytest.raises(ValueError):
        FloatHasher(tolerance)


def test_set_deduplicates_nearby_points():
    visited = ApproxHashSet()
    assert visited.add(Point(0.1, 0.2))
    assert not visited.add(Point(0.1 + 1e-9, 0.2 - 1e-9))
    assert visited.add(Point(0.1 + 1e-3, 0.2))

    assert len(visited) == 2
    assert Point(0.1, 0.2 + 1e-10) in visited
    assert Point(5.0, 5.0) not in visited


def test_map_keeps_the_first_insert():
    table = ApproxHashMap()
    first = Point(0.3, -0.4)
    assert table.insert(first, "a") is None
    assert table.insert(Point(0.3 + 1e-9, -0.4), "b") == "a"

    assert table.get(Point(0.3, -0.4 + 1e-10)) == "a"
    assert table.get(Point(1.0, 1.0), "missing") == "missing"
    assert list(table) == [first]
    assert list(table.items()) == [(first, "a")]


def test_map_rejects_none_values():
    table = ApproxHashMap()
    with pytest.raises(ValueError):
        table.insert(Point(0.0, 0.0), None)
    assert len(table) == 0
    assert table.insert(Point(0.0, 0.0), 0) is None
    assert table.insert(Point(0.0, 0.0), 1) == 0


def test_iteration_follows_insertion_order():
    visited = ApproxHashSet()
    points = [Point(float(k), -float(k)) for k in (3, 1, 2)]
    for point in points:
        visited.add(point)
    assert list(visited) == points


def test_generators_with_different_steps_are_distinct():
    visited = ApproxHashSet()
    assert visited.add(RotCircle.new(Point(0.5, 0.0), 0.5, 3))
    assert visited.add(RotCircle.new(Point(0.5, 0.0), 0.5, 5))
    assert visited.add(RotCircle.new(Point(0.5, 0.0), 0.5, 5, inverted=True))
    assert not visited.add(RotCircle.new(Point(0.5 + 1e-9, 0.0), 0.5, 5))


def test_grip_sets_are_keyed_by_member_centres():
    seen = ApproxHashSet()
    assert seen.add(GripSet((RotCircle.new(Point.ORIGIN, 0.5, 5),)))
    assert not seen.add(GripSet((RotCircle.new(Point.ORIGIN, 0.7, 3),)))
    assert seen.add(GripSet((RotCircle.new(Point(0.1, 0.0), 0.5, 5),)))


def test_plain_tuples_are_quantised():
    hasher = FloatHasher()
    assert approx_key((0.1, (0.2, "tag")), hasher) == approx_key((0.1 + 1e-9, (0.2, "tag")), hasher)


def test_unhashable_keys_are_rejected():
    with pytest.raises(TypeError):
        ApproxHashSet().add({"x": 1.0})
