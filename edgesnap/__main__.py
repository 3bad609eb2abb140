import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from edgesnap import (
    ResolveOptions,
    ShapeFormatError,
    apply_outcome,
    current_spacing,
    detect_axis,
    dump_shapes,
    format_spacing,
    load_shapes,
    resolve,
    round_spacing,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Snap two vector shapes edge to edge")
    parser.add_argument("path", help="JSON file holding the two shapes")
    parser.add_argument(
        "--axis",
        choices=["horizontal", "vertical"],
        help="Alignment axis (default: detected from the bounding boxes)",
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=0.5,
        help="Probe offset used when an exact probe misses (default: 0.5)",
    )
    parser.add_argument(
        "--no-retry",
        action="store_true",
        help="Disable the near-miss probe fallback",
    )
    parser.add_argument(
        "--output",
        help="Write the shapes with the translation applied to the given path",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        shape_a, shape_b = load_shapes(args.path)
        options = ResolveOptions(probe_epsilon=args.epsilon, retry=not args.no_retry)
    except (OSError, ShapeFormatError, ValueError) as exc:
        logger.error("Could not read shapes: %s", exc)
        raise SystemExit(2)

    axis = args.axis
    if axis is None:
        axis = detect_axis(shape_a, shape_b)
        if axis is None:
            print("Select two shapes that sit side by side or stacked")
            raise SystemExit(1)
        logger.info("Detected %s layout", axis)

    spacing = current_spacing(shape_a, shape_b, axis)
    print(f"Axis: {axis}")
    if spacing is not None:
        print(f"Current spacing: {round_spacing(spacing)}")

    outcome = resolve(shape_a, shape_b, axis, options)
    if outcome is None:
        print("No Alignable Point Found")
        raise SystemExit(1)

    moved = (shape_a, shape_b)[outcome.mover_index]
    print(f"Move: {moved.name or outcome.mover} by {format_spacing(outcome.translation)}")
    print(f"Final spacing: {format_spacing(outcome.final_gap)}")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing aligned shapes to %s", output_path)
        dump_shapes(apply_outcome(shape_a, shape_b, outcome), output_path)
        print(f"Aligned shapes written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
