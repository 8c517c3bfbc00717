import math

import pytest

from pentagon_garden import (
    Curvature,
    EmptyGeneratorSetError,
    Point,
    RotCircle,
    euclidean_centre_radius,
    expand_seed,
    generate_generators,
    orbit_colour,
    point_packing_radius,
)
from pentagon_garden.colours import NEUTRAL_GREY
from pentagon_garden.search import orbit_points


def _close(p: Point, q: Point, tol: float = 1e-9) -> bool:
    return p.dist(q) <= tol


@pytest.mark.parametrize("step", [2, 3, 5, 8])
def test_single_generator_orbit_has_step_points(step):
    generator = RotCircle.new(Point(0.5, 0.0), 0.5, step)
    result = expand_seed(Point(0.1, 0.0), [generator], Curvature.EUCLIDEAN, 500)

    assert len(result) == step
    assert not result.truncated


def test_seed_outside_every_generator_is_a_fixed_point():
    generators = generate_generators(2, 1.0, Curvature.EUCLIDEAN)
    result = expand_seed(Point.ORIGIN, generators, Curvature.EUCLIDEAN, 500)

    assert result.coords == [Point.ORIGIN]
    assert result.points[0].parent == 0
    assert result.packing_radius == pytest.approx(0.0, abs=1e-12)
    assert not result.truncated


def test_pentagon_orbit_about_the_right_generator():
    generators = generate_generators(2, 1.0, Curvature.EUCLIDEAN)
    result = expand_seed(Point(0.1, 0.0), generators, Curvature.EUCLIDEAN, 500)

    assert len(result) == 5
    assert not result.truncated
    assert result.points[0].point == Point(0.1, 0.0)

    first = result.points[1]
    angle = 2.0 * math.pi / 5
    assert first.parent == 0
    assert first.generation == 1
    assert _close(first.point, Point(0.5 - 0.4 * math.cos(angle), -0.4 * math.sin(angle)))

    assert math.isclose(result.packing_radius, 0.1, rel_tol=1e-9)
    assert result.colour == orbit_colour(5, False)
    assert result.colour != NEUTRAL_GREY
    assert len(result.circles) == 5
    for entry, circle in zip(result.points, result.circles):
        assert _close(circle.centre, entry.point)
        assert math.isclose(circle.radius, 0.1, rel_tol=1e-9)
        assert circle.colour == result.colour


def test_running_out_of_budget_marks_the_orbit_truncated():
    generators = [
        RotCircle.new(Point(-0.25, 0.0), 0.5, 5),
        RotCircle.new(Point(0.25, 0.0), 0.5, 5),
    ]
    result = expand_seed(Point(0.0, 0.05), generators, Curvature.EUCLIDEAN, 2)

    assert len(result) > 2
    assert result.truncated
    assert result.colour == NEUTRAL_GREY
    assert all(circle.colour == NEUTRAL_GREY for circle in result.circles)


def test_exact_budget_is_not_truncated():
    generator = RotCircle.new(Point(0.5, 0.0), 0.5, 5)
    assert not expand_seed(Point(0.1, 0.0), [generator], Curvature.EUCLIDEAN, 5).truncated
    assert expand_seed(Point(0.1, 0.0), [generator], Curvature.EUCLIDEAN, 4).truncated


def test_orbit_is_breadth_first():
    generators = [
        RotCircle.new(Point(-0.25, 0.0), 0.5, 5),
        RotCircle.new(Point(0.25, 0.0), 0.5, 5),
    ]
    points = orbit_points(Point(0.0, 0.05), generators, 40)

    parents = [entry.parent for entry in points]
    assert parents == sorted(parents)
    assert all(entry.parent < idx for idx, entry in enumerate(points) if idx)
    generations = [entry.generation for entry in points]
    assert generations == sorted(generations)


def test_orbit_is_deterministic():
    generators = generate_generators(3, 0.9, Curvature.HYPERBOLIC, radius=0.6, step=4)
    first = expand_seed(Point(0.05, 0.1), generators, Curvature.HYPERBOLIC, 60)
    second = expand_seed(Point(0.05, 0.1), generators, Curvature.HYPERBOLIC, 60)

    assert first.coords == second.coords
    assert first.packing_radius == second.packing_radius


@pytest.mark.parametrize("curvature", [Curvature.SPHERICAL, Curvature.HYPERBOLIC])
def test_curved_orbit_stays_on_the_model_circle(curvature):
    generator = RotCircle.new(Point(0.3, 0.0), 0.5, 4, curvature)
    seed = Point(0.3, 0.1)
    result = expand_seed(seed, [generator], curvature, 100)

    assert len(result) == 4
    expected = generator.centre.dist_in_space(seed, curvature)
    for point in result.coords:
        assert math.isclose(generator.centre.dist_in_space(point, curvature), expected, rel_tol=1e-9)


def test_spherical_circles_are_capped_near_infinity():
    generator = RotCircle.new(Point.ORIGIN, 0.3, 3, Curvature.SPHERICAL)
    seed = Point(5.0, 0.0)
    result = expand_seed(seed, [generator], Curvature.SPHERICAL, 10)

    assert len(result) == 1
    gap = 2.0 * math.atan(5.0) - 0.3
    assert math.isclose(result.packing_radius, gap, rel_tol=1e-9)

    cap = seed.dist_to_inf(Curvature.SPHERICAL)
    assert cap < gap
    centre, radius = euclidean_centre_radius(seed, cap, Curvature.SPHERICAL)
    assert _close(result.circles[0].centre, centre)
    assert math.isclose(result.circles[0].radius, radius, rel_tol=1e-9)


def test_spherical_cap_carries_over_to_later_points():
    generator = RotCircle.new(Point(0.5, 0.0), 2.0, 4, Curvature.SPHERICAL)
    result = expand_seed(Point.ORIGIN, [generator], Curvature.SPHERICAL, 10)

    assert len(result) == 4
    caps = [point.dist_to_inf(Curvature.SPHERICAL) for point in result.coords]
    shrunk_later = False
    running = result.packing_radius
    for idx, (point, cap) in enumerate(zip(result.coords, caps)):
        running = min(running, cap)
        if running < min(result.packing_radius, cap):
            shrunk_later = True
        centre, radius = euclidean_centre_radius(point, running, Curvature.SPHERICAL)
        assert _close(result.circles[idx].centre, centre)
        assert math.isclose(result.circles[idx].radius, radius, rel_tol=1e-9)
    assert shrunk_later


def test_point_packing_radius_takes_the_nearest_boundary():
    generators = [
        RotCircle.new(Point(0.0, 0.0), 1.0, 3),
        RotCircle.new(Point(3.0, 0.0), 0.5, 3),
    ]
    assert math.isclose(point_packing_radius(Point(2.0, 0.0), generators, Curvature.EUCLIDEAN), 0.5)
    assert math.isclose(point_packing_radius(Point(0.2, 0.0), generators, Curvature.EUCLIDEAN), 0.8)


def test_empty_generator_list_is_an_error():
    with pytest.raises(EmptyGeneratorSetError):
        expand_seed(Point.ORIGIN, [], Curvature.EUCLIDEAN, 10)
    with pytest.raises(ValueError):
        point_packing_radius(Point.ORIGIN, [], Curvature.EUCLIDEAN)


@pytest.mark.parametrize("depth", [0, -1, 2.5])
def test_bad_depth_is_rejected(depth):
    generator = RotCircle.new(Point(0.5, 0.0), 0.5, 5)
    with pytest.raises(ValueError):
        expand_seed(Point(0.1, 0.0), [generator], Curvature.EUCLIDEAN, depth)
