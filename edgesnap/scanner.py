"""Extreme-vertex search and axis-aligned probe casting over polygon edges."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .config import DEFAULT_PROBE_EPSILON
from .types import Axis, Direction, Point2D, Shape, axis_column, other_axis

logger = logging.getLogger(__name__)


def find_extreme_vertex(shape: Shape, axis: Axis, direction: Direction) -> Optional[Point2D]:
    """Return the absolute vertex with the largest (``"max"``) or smallest
    (``"min"``) coordinate along ``axis``.

    Ties go to the vertex that comes first in the polygon's vertex order.
    """

    polygon = shape.polygon
    if polygon is None or polygon.is_empty:
        return None

    points = polygon.absolute_vertices()
    column = points[:, axis_column(axis)]
    # argmax/argmin return the first occurrence of the extreme value.
    index = int(np.argmax(column) if direction == "max" else np.argmin(column))
    return Point2D(points[index, 0], points[index, 1])


def _edge_hits(
    starts: np.ndarray, ends: np.ndarray, axis: Axis, coordinate: float, direction: Direction
) -> np.ndarray:
    along = axis_column(axis)
    across = 1 - along

    a0, a1 = starts[:, along], ends[:, along]
    c0, c1 = starts[:, across], ends[:, across]

    crosses = (np.minimum(c0, c1) <= coordinate) & (coordinate <= np.maximum(c0, c1))
    a0, a1, c0, c1 = a0[crosses], a1[crosses], c0[crosses], c1[crosses]
    if a0.size == 0:
        return a0

    near = np.minimum(a0, a1) if direction == "min" else np.maximum(a0, a1)
    with np.errstate(divide="ignore", invalid="ignore"):
        interpolated = a0 + (coordinate - c0) * (a1 - a0) / (c1 - c0)

    return np.where(a0 == a1, a0, np.where(c0 == c1, near, interpolated))


def cast_probe(shape: Shape, axis: Axis, coordinate: float, direction: Direction) -> Optional[float]:
    """Cast a line perpendicular to ``axis`` at ``coordinate`` through ``shape``.

    For the horizontal axis the probe is the line ``y = coordinate`` and the
    result is the smallest (``"min"``) or largest (``"max"``) x at which it
    meets an edge; the vertical axis is symmetric. Span checks are inclusive,
    so an edge lying on the probe counts and contributes its near endpoint.

    Returns ``None`` when no edge is crossed.
    """

    polygon = shape.polygon
    if polygon is None or polygon.is_empty or not polygon.edges:
        return None

    points = polygon.absolute_vertices()
    edges = polygon.edge_array()
    hits = _edge_hits(points[edges[:, 0]], points[edges[:, 1]], axis, float(coordinate), direction)
    if hits.size == 0:
        return None
    return float(hits.min() if direction == "min" else hits.max())


def probe_with_retry(
    target: Shape,
    axis: Axis,
    coordinate: float,
    direction: Direction,
    *,
    epsilon: float = DEFAULT_PROBE_EPSILON,
) -> Optional[float]:
    """:func:`cast_probe` with a bounded fallback for near misses.

    When the exact probe meets nothing, the probe is moved onto the target's
    bounding box span: clamped to the near side when ``coordinate`` lies
    outside it, otherwise nudged by ``+epsilon`` and then ``-epsilon``. This
    recovers intersections lost to rounding at shared extremes; it is not an
    exact-arithmetic guarantee.
    """

    hit = cast_probe(target, axis, coordinate, direction)
    if hit is not None:
        return hit

    bbox = target.bounding_box
    if bbox is None:
        return None

    cross_axis = other_axis(axis)
    low, high = bbox.start(cross_axis), bbox.end(cross_axis)

    if coordinate < low:
        retries = [low]
    elif coordinate > high:
        retries = [high]
    else:
        retries = [coordinate + epsilon, coordinate - epsilon]

    for retry in retries:
        hit = cast_probe(target, axis, retry, direction)
        if hit is not None:
            logger.debug(
                "probe at %.6g missed %s; recovered at %.6g -> %.6g",
                coordinate,
                target.name or "target",
                retry,
                hit,
            )
            return hit

    logger.debug("probe at %.6g found no edge of %s", coordinate, target.name or "target")
    return None


__all__ = ["find_extreme_vertex", "cast_probe", "probe_with_retry"]
