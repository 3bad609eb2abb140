"""Immutable value types shared by the alignment pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Literal, Optional, Sequence, Tuple

import numpy as np

Axis = Literal["horizontal", "vertical"]
Direction = Literal["min", "max"]
Side = Literal["left", "right", "top", "bottom"]
Edge = Tuple[int, int]


def other_axis(axis: Axis) -> Axis:
    return "vertical" if axis == "horizontal" else "horizontal"


def axis_column(axis: Axis) -> int:
    """Return the coordinate column that moves along ``axis`` (0 for x, 1 for y)."""

    return 0 if axis == "horizontal" else 1


@dataclass(frozen=True)
class Point2D:
    """Absolute document-space point."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def coord(self, axis: Axis) -> float:
        return self.x if axis == "horizontal" else self.y

    def cross_coord(self, axis: Axis) -> float:
        return self.y if axis == "horizontal" else self.x

    def translated(self, dx: float = 0.0, dy: float = 0.0) -> "Point2D":
        return Point2D(self.x + dx, self.y + dy)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box; ``x, y`` is the top-left corner in y-down space."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("x", "y", "width", "height"):
            object.__setattr__(self, name, float(getattr(self, name)))
        if self.width < 0.0 or self.height < 0.0:
            raise ValueError(
                f"bounding box size must be non-negative (got {self.width}x{self.height})"
            )

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def start(self, axis: Axis) -> float:
        return self.x if axis == "horizontal" else self.y

    def extent(self, axis: Axis) -> float:
        return self.width if axis == "horizontal" else self.height

    def end(self, axis: Axis) -> float:
        return self.start(axis) + self.extent(axis)

    def translated(self, axis: Axis, delta: float) -> "BoundingBox":
        if axis == "horizontal":
            return replace(self, x=self.x + delta)
        return replace(self, y=self.y + delta)


@dataclass(frozen=True)
class Polygon:
    """Polyline network: local vertices, index-pair edges and an origin offset.

    Edges do not have to close a loop. Absolute coordinates are
    ``vertex + origin``; the origin is the host's render-space anchor and is
    independent of the bounding box.
    """

    vertices: Tuple[Point2D, ...] = ()
    edges: Tuple[Edge, ...] = ()
    origin: Point2D = field(default_factory=lambda: Point2D(0.0, 0.0))

    def __post_init__(self) -> None:
        vertices = tuple(
            vertex if isinstance(vertex, Point2D) else Point2D(*vertex)
            for vertex in self.vertices
        )
        edges = tuple((int(start), int(end)) for start, end in self.edges)
        count = len(vertices)
        for start, end in edges:
            if not (0 <= start < count and 0 <= end < count):
                raise ValueError(
                    f"edge ({start}, {end}) references a vertex outside 0..{count - 1}"
                )
        origin = self.origin if isinstance(self.origin, Point2D) else Point2D(*self.origin)
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "edges", edges)
        object.__setattr__(self, "origin", origin)

    @classmethod
    def from_points(
        cls,
        points: Sequence[Tuple[float, float]],
        *,
        closed: bool = True,
        origin: Tuple[float, float] = (0.0, 0.0),
    ) -> "Polygon":
        """Build a chain ``0-1-...-n`` (closed back to ``0`` when ``closed``)."""

        count = len(points)
        edges = [(i, i + 1) for i in range(count - 1)]
        if closed and count > 2:
            edges.append((count - 1, 0))
        return cls(
            vertices=tuple(Point2D(x, y) for x, y in points),
            edges=tuple(edges),
            origin=Point2D(*origin),
        )

    @property
    def is_empty(self) -> bool:
        return not self.vertices

    def absolute_vertices(self) -> np.ndarray:
        if not self.vertices:
            return np.zeros((0, 2), dtype=float)
        local = np.array([vertex.as_tuple() for vertex in self.vertices], dtype=float)
        return local + np.array(self.origin.as_tuple(), dtype=float)

    def edge_array(self) -> np.ndarray:
        if not self.edges:
            return np.zeros((0, 2), dtype=int)
        return np.array(self.edges, dtype=int)

    def translated(self, axis: Axis, delta: float) -> "Polygon":
        if axis == "horizontal":
            return replace(self, origin=self.origin.translated(dx=delta))
        return replace(self, origin=self.origin.translated(dy=delta))


@dataclass(frozen=True)
class Shape:
    """Unit of input: a trusted bounding box plus polygon geometry."""

    bounding_box: Optional[BoundingBox]
    polygon: Optional[Polygon]
    name: Optional[str] = None

    @classmethod
    def rectangle(
        cls, x: float, y: float, width: float, height: float, *, name: Optional[str] = None
    ) -> "Shape":
        """Full four-edge rectangle whose polygon is anchored at its top-left corner."""

        polygon = Polygon.from_points(
            [(0.0, 0.0), (width, 0.0), (width, height), (0.0, height)],
            origin=(x, y),
        )
        return cls(BoundingBox(x, y, width, height), polygon, name)

    def translated(self, axis: Axis, delta: float) -> "Shape":
        bbox = self.bounding_box.translated(axis, delta) if self.bounding_box else None
        polygon = self.polygon.translated(axis, delta) if self.polygon else None
        return replace(self, bounding_box=bbox, polygon=polygon)

    def summary(self) -> str:
        label = self.name or "shape"
        bbox = self.bounding_box
        box_text = (
            f"({bbox.x:g}, {bbox.y:g}, {bbox.width:g}, {bbox.height:g})" if bbox else "no-bbox"
        )
        if self.polygon is None:
            return f"{label}{box_text} no-polygon"
        return (
            f"{label}{box_text} v={len(self.polygon.vertices)} e={len(self.polygon.edges)}"
        )


@dataclass(frozen=True)
class AlignmentOutcome:
    """Signed move along ``axis`` for one of the two input shapes."""

    axis: Axis
    translation: float
    mover: Side
    mover_index: int
    final_gap: float


@dataclass(frozen=True)
class SpacingPreview:
    """Detected axis with the current bounding-box spacing along it."""

    axis: Axis
    spacing: float


__all__ = [
    "Axis",
    "Direction",
    "Side",
    "Edge",
    "other_axis",
    "axis_column",
    "Point2D",
    "BoundingBox",
    "Polygon",
    "Shape",
    "AlignmentOutcome",
    "SpacingPreview",
]
