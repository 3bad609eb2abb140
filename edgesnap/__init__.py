from .types import (
    AlignmentOutcome,
    Axis,
    BoundingBox,
    Direction,
    Point2D,
    Polygon,
    Shape,
    Side,
    SpacingPreview,
)
from .config import ResolveOptions, get_default_options, set_default_options
from .orientation import current_spacing, detect_axis, preview
from .scanner import cast_probe, find_extreme_vertex, probe_with_retry
from .resolver import resolve
from .display import format_spacing, round_spacing
from .adapter import (
    ShapeFormatError,
    apply_outcome,
    dump_shapes,
    load_shapes,
    shape_from_mapping,
    shape_to_mapping,
)

__all__ = [
    'AlignmentOutcome',
    'Axis',
    'BoundingBox',
    'Direction',
    'Point2D',
    'Polygon',
    'Shape',
    'Side',
    'SpacingPreview',
    'ResolveOptions',
    'get_default_options',
    'set_default_options',
    'detect_axis',
    'current_spacing',
    'preview',
    'find_extreme_vertex',
    'cast_probe',
    'probe_with_retry',
    'resolve',
    'format_spacing',
    'round_spacing',
    'ShapeFormatError',
    'shape_from_mapping',
    'shape_to_mapping',
    'load_shapes',
    'dump_shapes',
    'apply_outcome',
]
