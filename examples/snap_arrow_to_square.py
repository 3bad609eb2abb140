import logging

from edgesnap import (
    BoundingBox,
    Polygon,
    Shape,
    apply_outcome,
    detect_axis,
    format_spacing,
    preview,
    resolve,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    square = Shape.rectangle(0, 0, 10, 10, name="square")
    arrow = Shape(
        bounding_box=BoundingBox(20, 0, 10, 10),
        polygon=Polygon.from_points([(10, 0), (10, 10), (0, 5)], origin=(20, 0)),
        name="arrow",
    )

    spacing = preview(square, arrow)
    logger.info("Selection preview: %s", spacing)

    axis = detect_axis(square, arrow)
    if axis is None:
        logger.error("Shapes are not side by side or stacked")
        return

    outcome = resolve(square, arrow, axis)
    if outcome is None:
        logger.error("No alignable point found")
        return

    moved = apply_outcome(square, arrow, outcome)
    print(f"Axis: {axis}")
    print(f"Move {moved[outcome.mover_index].name} by {format_spacing(outcome.translation)}")
    print(f"Final spacing: {format_spacing(outcome.final_gap)}")
    for shape in moved:
        print(f"  {shape.summary()}")


if __name__ == "__main__":
    main()
