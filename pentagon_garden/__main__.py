import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pentagon_garden import (
    Curvature,
    ExpansionOptions,
    Point,
    explore,
    generate_generators,
    generate_tikz_document,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_seed(value: str) -> Point:
    parts = [part.strip() for part in value.split(",") if part.strip()]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"seed must look like X,Y (got {value!r})")
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"seed coordinates must be numbers (got {value!r})") from exc


def _parse_curvature(value: str) -> Curvature:
    try:
        return Curvature.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Explore orbits of rotation generators")
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=Point(0.1, 0.0),
        help="Seed point as X,Y (default: 0.1,0)",
    )
    parser.add_argument(
        "--curvature",
        type=_parse_curvature,
        default=Curvature.EUCLIDEAN,
        help="spherical, euclidean or hyperbolic (default: euclidean)",
    )
    parser.add_argument("--count", type=int, default=2, help="Number of generators (default: 2)")
    parser.add_argument(
        "--distance",
        type=float,
        default=1.0,
        help="Distance between opposite generator centres (default: 1.0)",
    )
    parser.add_argument("--radius", type=float, default=0.5, help="Generator radius (default: 0.5)")
    parser.add_argument("--step", type=int, default=5, help="Rotation order of each generator (default: 5)")
    parser.add_argument("--invert", action="store_true", help="Invert every generator")
    parser.add_argument("--depth", type=int, default=500, help="Node budget per search (default: 500)")
    parser.add_argument(
        "--tolerance",
        type=float,
        default=1e-6,
        help="Bucket width for approximate deduplication (default: 1e-6)",
    )
    parser.add_argument(
        "--mode",
        choices=["orbit", "grips", "both"],
        default="both",
        help="Which expansion to run (default: both)",
    )
    parser.add_argument("--grip-radius", type=float, default=0.05, help="Grip marker radius")
    parser.add_argument("--grip-cuts", action="store_true", help="Draw generator-sized cuts at grips")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--tikz-output-path",
        help="Write a standalone TikZ document of the result to the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    generators = generate_generators(
        args.count,
        args.distance,
        args.curvature,
        radius=args.radius,
        step=args.step,
        inverted=args.invert,
    )
    options = ExpansionOptions(
        depth=args.depth,
        tolerance=args.tolerance,
        grip_radius=args.grip_radius,
        grip_cuts=args.grip_cuts,
    )
    result = explore(
        args.seed,
        generators,
        args.curvature,
        options,
        orbit=args.mode in ("orbit", "both"),
        grips=args.mode in ("grips", "both"),
    )

    print(f"Curvature: {args.curvature}")
    print(f"Seed: ({args.seed.x:.6f}, {args.seed.y:.6f})")
    print("Generators:")
    for idx, generator in enumerate(generators):
        centre = generator.centre
        print(
            f"  [{idx}] centre=({centre.x:.6f}, {centre.y:.6f}) radius={generator.radius:.6f} "
            f"step={generator.step} inverted={generator.inverted}"
        )

    if result.orbit is not None:
        orbit = result.orbit
        print("Orbit:")
        print(f"  points: {len(orbit)}")
        print(f"  truncated: {orbit.truncated}")
        print(f"  packing radius: {orbit.packing_radius:.6f}")
        for idx, entry in enumerate(orbit.points):
            print(f"  [{idx}] ({entry.point.x:.6f}, {entry.point.y:.6f}) parent={entry.parent}")

    if args.mode in ("grips", "both"):
        print("Grips:")
        if result.grips:
            for grip in result.grips:
                print(f"  generator {grip.index}: ({grip.point.x:.6f}, {grip.point.y:.6f})")
        else:
            print("  (none)")

    if args.tikz_output_path:
        output_path = Path(args.tikz_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing TikZ document to %s", output_path)
        document = generate_tikz_document(
            generators,
            orbit=result.orbit,
            grips=result.grips,
            curvature=args.curvature,
            grip_radius=options.grip_radius,
            grip_cuts=options.grip_cuts,
        )
        output_path.write_text(document, encoding="utf-8")
        print(f"TikZ document written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
