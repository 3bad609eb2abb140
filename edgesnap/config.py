"""Default options for the alignment resolver."""

from __future__ import annotations

import copy
from dataclasses import dataclass

DEFAULT_PROBE_EPSILON = 0.5


@dataclass
class ResolveOptions:
    """Knobs for :func:`edgesnap.resolver.resolve`.

    ``probe_epsilon`` is the offset used when an exact probe misses every edge
    of a shape that it should cross; ``retry=False`` disables that fallback.
    """

    probe_epsilon: float = DEFAULT_PROBE_EPSILON
    retry: bool = True

    def __post_init__(self) -> None:
        if self.probe_epsilon < 0.0:
            raise ValueError(f"probe_epsilon must be non-negative (got {self.probe_epsilon})")


_DEFAULT_OPTIONS = ResolveOptions()


def get_default_options() -> ResolveOptions:
    return copy.deepcopy(_DEFAULT_OPTIONS)


def set_default_options(options: ResolveOptions) -> None:
    global _DEFAULT_OPTIONS
    _DEFAULT_OPTIONS = copy.deepcopy(options)


__all__ = [
    "DEFAULT_PROBE_EPSILON",
    "ResolveOptions",
    "get_default_options",
    "set_default_options",
]
