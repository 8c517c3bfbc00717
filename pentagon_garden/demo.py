from . import Curvature, Point, explore, generate_generators

DEMO_SEEDS = (Point(0.1, 0.0), Point(-0.2, 0.15), Point(0.0, 0.0))


def run():
    for curvature in Curvature:
        generators = generate_generators(2, 1.0, curvature)
        print(f"== {curvature} ==")
        for seed in DEMO_SEEDS:
            result = explore(seed, generators, curvature)
            orbit = result.orbit
            print(
                f"seed ({seed.x:+.2f}, {seed.y:+.2f}): "
                f"{len(orbit)} point(s), truncated={orbit.truncated}, "
                f"packing radius={orbit.packing_radius:.4f}, grips={len(result.grips)}"
            )
        print()


if __name__ == "__main__":
    run()
