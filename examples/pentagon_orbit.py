"""Example: point orbit of a seed under two order-5 Euclidean generators."""

from pentagon_garden import Curvature, Point, expand_seed, generate_generators


def main() -> None:
    generators = generate_generators(2, 1.0, Curvature.EUCLIDEAN)
    for idx, generator in enumerate(generators):
        print(f"Generator {idx}: centre={generator.centre} radius={generator.radius}")

    result = expand_seed(Point(0.1, 0.0), generators, Curvature.EUCLIDEAN, depth=500)
    print(f"\nOrbit of {len(result)} point(s), truncated={result.truncated}")
    print(f"Packing radius: {result.packing_radius:.6f}")
    for entry, circle in zip(result.points, result.circles):
        x, y = entry.point
        print(f"  ({x:.6f}, {y:.6f}) <- #{entry.parent}  screen radius={circle.radius:.6f}")


if __name__ == "__main__":
    main()
