"""Conversion between host vector-network payloads and :class:`Shape` values.

Hosts describe a vector layer roughly as::

    {
        "name": "Arrow",
        "absoluteBoundingBox": {"x": 0, "y": 0, "width": 10, "height": 10},
        "absoluteRenderBounds": {"x": 0, "y": 0, "width": 10, "height": 10},
        "vectorNetwork": {
            "vertices": [{"x": 0, "y": 0}, ...],
            "segments": [{"start": 0, "end": 1}, ...],
        },
    }

Vertex coordinates are local to the render bounds corner, which becomes the
polygon origin. The bounding box is kept as given and is never used as
the anchor: without render bounds the polygon is left out and every
alignment query on the shape reports no result.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .types import AlignmentOutcome, BoundingBox, Point2D, Polygon, Shape

logger = logging.getLogger(__name__)


class ShapeFormatError(ValueError):
    """Raised when a host payload cannot be read as a shape."""


def _number(data: Mapping[str, Any], key: str, where: str) -> float:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ShapeFormatError(f"{where}: '{key}' must be a number (got {value!r})")
    return float(value)


def _read_box(data: Any, where: str) -> Optional[BoundingBox]:
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise ShapeFormatError(f"{where} must be an object")
    try:
        return BoundingBox(
            _number(data, "x", where),
            _number(data, "y", where),
            _number(data, "width", where),
            _number(data, "height", where),
        )
    except ShapeFormatError:
        raise
    except ValueError as exc:
        raise ShapeFormatError(f"{where}: {exc}") from exc


def _read_origin(data: Any, where: str) -> Optional[Point2D]:
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise ShapeFormatError(f"{where} must be an object")
    return Point2D(_number(data, "x", where), _number(data, "y", where))


def _read_network(network: Any, origin: Point2D, where: str) -> Polygon:
    if not isinstance(network, Mapping):
        raise ShapeFormatError(f"{where}.vectorNetwork must be an object")
    vertices: List[Point2D] = []
    for idx, raw in enumerate(network.get("vertices") or []):
        if not isinstance(raw, Mapping):
            raise ShapeFormatError(f"{where}.vertices[{idx}] must be an object")
        label = f"{where}.vertices[{idx}]"
        vertices.append(Point2D(_number(raw, "x", label), _number(raw, "y", label)))
    edges: List[Tuple[int, int]] = []
    for idx, raw in enumerate(network.get("segments") or []):
        if not isinstance(raw, Mapping):
            raise ShapeFormatError(f"{where}.segments[{idx}] must be an object")
        label = f"{where}.segments[{idx}]"
        start, end = _number(raw, "start", label), _number(raw, "end", label)
        if not (start.is_integer() and end.is_integer()):
            raise ShapeFormatError(f"{label}: vertex indices must be integers")
        edges.append((int(start), int(end)))
    try:
        return Polygon(vertices=tuple(vertices), edges=tuple(edges), origin=origin)
    except ValueError as exc:
        raise ShapeFormatError(f"{where}: {exc}") from exc


def shape_from_mapping(data: Mapping[str, Any], *, where: str = "shape") -> Shape:
    """Build a :class:`Shape` from a host vector-network mapping.

    Missing geometry is preserved as ``None`` so the pipeline can report "no
    result"; structurally malformed payloads raise :class:`ShapeFormatError`.
    """

    if not isinstance(data, Mapping):
        raise ShapeFormatError(f"{where} must be an object")
    name = data.get("name")
    if name is not None and not isinstance(name, str):
        raise ShapeFormatError(f"{where}.name must be a string")

    bbox = _read_box(data.get("absoluteBoundingBox"), f"{where}.absoluteBoundingBox")
    origin = _read_origin(data.get("absoluteRenderBounds"), f"{where}.absoluteRenderBounds")
    network = data.get("vectorNetwork")
    polygon: Optional[Polygon] = None
    if network is not None and origin is not None:
        polygon = _read_network(network, origin, where)
    elif network is not None:
        logger.warning("%s has no render bounds to anchor its vector network", name or where)

    return Shape(bounding_box=bbox, polygon=polygon, name=name)


def shape_to_mapping(shape: Shape) -> Dict[str, Any]:
    """Inverse of :func:`shape_from_mapping` for shapes built by this package."""

    payload: Dict[str, Any] = {}
    if shape.name is not None:
        payload["name"] = shape.name
    bbox = shape.bounding_box
    if bbox is not None:
        payload["absoluteBoundingBox"] = {
            "x": bbox.x,
            "y": bbox.y,
            "width": bbox.width,
            "height": bbox.height,
        }
    polygon = shape.polygon
    if polygon is not None:
        payload["absoluteRenderBounds"] = {"x": polygon.origin.x, "y": polygon.origin.y}
        payload["vectorNetwork"] = {
            "vertices": [{"x": v.x, "y": v.y} for v in polygon.vertices],
            "segments": [{"start": s, "end": e} for s, e in polygon.edges],
        }
    return payload


def load_shapes(path: Union[str, Path]) -> Tuple[Shape, Shape]:
    """Read exactly two shapes from a JSON file.

    The document is either a list of shape mappings or ``{"shapes": [...]}``.
    """

    text = Path(path).read_text(encoding="utf-8")
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ShapeFormatError(f"{path}: invalid JSON ({exc})") from exc
    entries = document.get("shapes") if isinstance(document, Mapping) else document
    if not isinstance(entries, list) or len(entries) != 2:
        raise ShapeFormatError(f"{path}: expected exactly two shapes")
    first, second = (
        shape_from_mapping(entry, where=f"shapes[{idx}]") for idx, entry in enumerate(entries)
    )
    return first, second


def dump_shapes(shapes: Tuple[Shape, Shape], path: Union[str, Path]) -> None:
    document = {"shapes": [shape_to_mapping(shape) for shape in shapes]}
    Path(path).write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")


def apply_outcome(a: Shape, b: Shape, outcome: AlignmentOutcome) -> Tuple[Shape, Shape]:
    """Return ``(a, b)`` with the outcome's mover translated along its axis."""

    if outcome.mover_index == 0:
        return a.translated(outcome.axis, outcome.translation), b
    return a, b.translated(outcome.axis, outcome.translation)


__all__ = [
    "ShapeFormatError",
    "shape_from_mapping",
    "shape_to_mapping",
    "load_shapes",
    "dump_shapes",
    "apply_outcome",
]
