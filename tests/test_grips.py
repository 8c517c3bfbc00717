import pytest

from pentagon_garden import Curvature, Grip, Point, RotCircle, expand_grips, generate_generators


def _overlapping_pair(curvature=Curvature.EUCLIDEAN):
    return [
        RotCircle.new(Point(-0.25, 0.0), 0.5, 5, curvature),
        RotCircle.new(Point(0.25, 0.0), 0.5, 5, curvature),
    ]


def test_seed_outside_every_generator_has_no_grips():
    generators = generate_generators(2, 1.0, Curvature.EUCLIDEAN)
    assert expand_grips(Point.ORIGIN, generators, Curvature.EUCLIDEAN, 100) == []


def test_single_generator_grips_only_itself():
    generator = RotCircle.new(Point(0.5, 0.0), 0.5, 5)
    grips = expand_grips(Point(0.1, 0.0), [generator], Curvature.EUCLIDEAN, 100)
    assert grips == [Grip(Point(0.5, 0.0), 0)]


def test_pentagon_pair_grips_the_right_generator():
    generators = generate_generators(2, 1.0, Curvature.EUCLIDEAN)
    grips = expand_grips(Point(0.1, 0.0), generators, Curvature.EUCLIDEAN, 100)

    assert len(grips) == 1
    assert grips[0].index == 1
    assert grips[0].point.dist(Point(0.5, 0.0)) < 1e-12


def test_overlapping_generators_list_originals_first():
    generators = _overlapping_pair()
    seed = Point(0.0, 0.05)
    grips = expand_grips(seed, generators, Curvature.EUCLIDEAN, 30)

    assert grips[0] == Grip(generators[0].centre, 0)
    assert grips[1] == Grip(generators[1].centre, 1)
    assert len(grips) > 2

    for grip in grips:
        assert grip.index in (0, 1)
        image = RotCircle.new(grip.point, generators[grip.index].radius, 5)
        assert image.contains(seed)

    for i, first in enumerate(grips):
        for second in grips[i + 1 :]:
            assert first.point.dist(second.point) > 1e-7


def test_hyperbolic_grips_contain_the_seed():
    generators = _overlapping_pair(Curvature.HYPERBOLIC)
    seed = Point(0.0, 0.05)
    grips = expand_grips(seed, generators, Curvature.HYPERBOLIC, 30)

    assert [grip.index for grip in grips[:2]] == [0, 1]
    for grip in grips:
        assert grip.point.dist_in_space(seed, Curvature.HYPERBOLIC) < 0.5


def test_smaller_budget_gives_a_prefix():
    generators = _overlapping_pair()
    seed = Point(0.0, 0.05)
    short = expand_grips(seed, generators, Curvature.EUCLIDEAN, 1)
    long = expand_grips(seed, generators, Curvature.EUCLIDEAN, 20)

    assert len(short) <= len(long)
    assert long[: len(short)] == short


def test_grips_are_deterministic():
    generators = _overlapping_pair()
    seed = Point(0.0, 0.05)
    assert expand_grips(seed, generators, Curvature.EUCLIDEAN, 25) == expand_grips(
        seed, generators, Curvature.EUCLIDEAN, 25
    )


def test_no_generators_no_grips():
    assert expand_grips(Point.ORIGIN, [], Curvature.EUCLIDEAN, 10) == []


def test_bad_depth_is_rejected():
    with pytest.raises(ValueError):
        expand_grips(Point.ORIGIN, _overlapping_pair(), Curvature.EUCLIDEAN, 0)
