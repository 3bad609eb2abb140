"""Resolve the smallest single-axis move that makes two shapes touch."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import ResolveOptions, get_default_options
from .logging_utils import debug_log_call
from .scanner import cast_probe, find_extreme_vertex, probe_with_retry
from .types import AlignmentOutcome, Axis, Direction, Shape, Side

logger = logging.getLogger(__name__)

_SIDES = {
    "horizontal": ("left", "right"),
    "vertical": ("top", "bottom"),
}


@dataclass(frozen=True)
class _Candidate:
    translation: float
    moves_first: bool


def _facing_distance(
    source: Shape,
    target: Shape,
    axis: Axis,
    source_direction: Direction,
    target_direction: Direction,
    options: ResolveOptions,
) -> Optional[float]:
    extreme = find_extreme_vertex(source, axis, source_direction)
    if extreme is None:
        return None
    coordinate = extreme.cross_coord(axis)
    if options.retry:
        hit = probe_with_retry(
            target, axis, coordinate, target_direction, epsilon=options.probe_epsilon
        )
    else:
        hit = cast_probe(target, axis, coordinate, target_direction)
    if hit is None:
        return None
    return extreme.coord(axis) - hit


def _order(a: Shape, b: Shape, axis: Axis) -> Tuple[Shape, Shape, bool]:
    # Equal starts keep the argument order.
    if b.bounding_box.start(axis) < a.bounding_box.start(axis):
        return b, a, True
    return a, b, False


def _pick(forward: Optional[float], inverse: Optional[float]) -> Optional[_Candidate]:
    if forward is None and inverse is None:
        return None
    if forward is not None and (inverse is None or abs(forward) <= abs(inverse)):
        return _Candidate(forward, moves_first=False)
    return _Candidate(inverse, moves_first=True)


@debug_log_call(logger)
def resolve(
    a: Shape,
    b: Shape,
    axis: Axis,
    options: Optional[ResolveOptions] = None,
) -> Optional[AlignmentOutcome]:
    """Compute the translation that brings ``a`` and ``b`` into contact along ``axis``.

    The shape starting first along the axis is ``first`` (left or top), the
    other is ``second``. Two candidates are measured:

    * forward: ``first``'s far-most vertex probed into ``second``; ``second``
      moves,
    * inverse: ``second``'s near-most vertex probed into ``first``; ``first``
      moves.

    The candidate with the smaller absolute translation wins and ties go to
    the forward one. ``final_gap`` is the bounding-box spacing after the
    move. Returns ``None`` when a bounding box is missing or neither probe
    meets an edge.
    """

    if a.bounding_box is None or b.bounding_box is None:
        logger.debug("resolve skipped: missing bounding box")
        return None

    options = options or get_default_options()
    first, second, swapped = _order(a, b, axis)

    forward = _facing_distance(first, second, axis, "max", "min", options)
    inverse = _facing_distance(second, first, axis, "min", "max", options)
    logger.debug("%s candidates: forward=%s inverse=%s", axis, forward, inverse)

    chosen = _pick(forward, inverse)
    if chosen is None:
        return None

    first_box, second_box = first.bounding_box, second.bounding_box
    delta = chosen.translation
    if chosen.moves_first:
        final_gap = second_box.start(axis) - (first_box.start(axis) + delta + first_box.extent(axis))
    else:
        final_gap = second_box.start(axis) + delta - (first_box.start(axis) + first_box.extent(axis))

    first_side, second_side = _SIDES[axis]
    mover: Side = first_side if chosen.moves_first else second_side
    # Index into the (a, b) arguments; first is b when the pair was swapped.
    mover_index = int(chosen.moves_first == swapped)

    return AlignmentOutcome(
        axis=axis,
        translation=delta,
        mover=mover,
        mover_index=mover_index,
        final_gap=final_gap,
    )


__all__ = ["resolve"]
