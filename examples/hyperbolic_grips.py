"""Example: grips of three hyperbolic generators, written out as TikZ."""

from pathlib import Path

from pentagon_garden import (
    Curvature,
    ExpansionOptions,
    Point,
    explore,
    generate_generators,
    generate_tikz_document,
)


def main() -> None:
    curvature = Curvature.HYPERBOLIC
    generators = generate_generators(3, 1.2, curvature, radius=0.6, step=4)
    options = ExpansionOptions(depth=200, grip_cuts=True)

    result = explore(Point(-0.1, 0.05), generators, curvature, options)
    print(f"Orbit: {len(result.orbit)} point(s), truncated={result.orbit.truncated}")
    print(f"Grips ({len(result.grips)}):")
    for grip in result.grips:
        print(f"  generator {grip.index} at ({grip.point.x:.6f}, {grip.point.y:.6f})")

    output = Path("hyperbolic_grips.tex")
    output.write_text(
        generate_tikz_document(
            generators,
            orbit=result.orbit,
            grips=result.grips,
            grip_radius=options.grip_radius,
            grip_cuts=options.grip_cuts,
            title="Hyperbolic grips",
        ),
        encoding="utf-8",
    )
    print(f"TikZ document written to {output}")


if __name__ == "__main__":
    main()
