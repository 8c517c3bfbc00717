from pentagon_garden import Curvature, ExpansionOptions, Point, explore, generate_generators
from pentagon_garden.demo import run


def test_explore_runs_both_searches():
    generators = generate_generators(2, 1.0, Curvature.EUCLIDEAN)
    result = explore(Point(0.1, 0.0), generators, Curvature.EUCLIDEAN, ExpansionOptions(depth=50))

    assert result.seed == Point(0.1, 0.0)
    assert result.curvature is Curvature.EUCLIDEAN
    assert result.orbit is not None and len(result.orbit) == 5
    assert [grip.index for grip in result.grips] == [1]


def test_explore_can_skip_a_search():
    generators = generate_generators(2, 1.0, Curvature.HYPERBOLIC)
    result = explore(Point(0.1, 0.0), generators, Curvature.HYPERBOLIC, orbit=False)

    assert result.orbit is None
    assert result.grips


def test_demo_covers_every_curvature(capsys):
    run()
    out = capsys.readouterr().out
    for curvature in Curvature:
        assert f"== {curvature} ==" in out
