"""Axis detection and live spacing for a pair of shapes."""

from __future__ import annotations

import logging
from typing import Optional

from .logging_utils import debug_log_call
from .types import Axis, BoundingBox, Shape, SpacingPreview

logger = logging.getLogger(__name__)


def _overlaps(a: BoundingBox, b: BoundingBox, axis: Axis) -> bool:
    # Touching boxes count as separated on that projection.
    return not (a.end(axis) <= b.start(axis) or b.end(axis) <= a.start(axis))


@debug_log_call(logger)
def detect_axis(a: Shape, b: Shape) -> Optional[Axis]:
    """Classify the layout of ``a`` and ``b`` from their bounding boxes.

    Returns ``"horizontal"`` when the boxes share a vertical band only
    (side-by-side), ``"vertical"`` when they share a horizontal band only
    (stacked) and ``None`` when they overlap on both projections, on neither,
    or when a bounding box is missing.
    """

    if a.bounding_box is None or b.bounding_box is None:
        return None

    overlap_x = _overlaps(a.bounding_box, b.bounding_box, "horizontal")
    overlap_y = _overlaps(a.bounding_box, b.bounding_box, "vertical")

    if overlap_x == overlap_y:
        logger.debug(
            "ambiguous layout: overlap_x=%s overlap_y=%s", overlap_x, overlap_y
        )
        return None
    return "vertical" if overlap_x else "horizontal"


def current_spacing(a: Shape, b: Shape, axis: Axis) -> Optional[float]:
    """Gap between the two bounding boxes along ``axis``.

    Negative values mean the boxes overlap along that axis.
    """

    if a.bounding_box is None or b.bounding_box is None:
        return None
    box_a, box_b = a.bounding_box, b.bounding_box
    if box_a.start(axis) < box_b.start(axis):
        first, second = box_a, box_b
    else:
        first, second = box_b, box_a
    return second.start(axis) - first.end(axis)


def preview(a: Shape, b: Shape) -> Optional[SpacingPreview]:
    """Detect the axis and report the spacing a selection currently has."""

    axis = detect_axis(a, b)
    if axis is None:
        return None
    spacing = current_spacing(a, b, axis)
    if spacing is None:
        return None
    return SpacingPreview(axis=axis, spacing=spacing)


__all__ = ["detect_axis", "current_spacing", "preview"]
