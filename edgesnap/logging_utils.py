from __future__ import annotations

import logging
import reprlib
from functools import wraps
from typing import Any, Callable, MutableMapping, Optional, Sequence, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 8
_repr.maxtuple = 8


def _summarize_array(value: np.ndarray, max_items: int) -> str:
    parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"]
    if value.size == 0:
        return parts[0]
    if value.size <= max_items:
        parts.append(f"values={_repr.repr(value.tolist())}")
    elif np.issubdtype(value.dtype, np.number):
        parts.append(f"min={float(value.min()):.6g}")
        parts.append(f"max={float(value.max()):.6g}")
    return ", ".join(parts)


def _safe_repr(value: Any, *, max_items: int = 6, max_length: int = 400) -> str:
    if isinstance(value, np.ndarray):
        return _summarize_array(value, max_items)

    summary = getattr(value, "summary", None)
    if callable(summary):
        rendered = summary()
    elif isinstance(value, (list, tuple)):
        items = [_safe_repr(item) for item in value[:max_items]]
        if len(value) > max_items:
            items.append("...")
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        rendered = f"{open_br}{', '.join(items)}{close_br}"
    else:
        rendered = _repr.repr(value)

    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append(
            "kwargs={" + ", ".join(f"{key}={_safe_repr(val)}" for key, val in kwargs.items()) + "}"
        )
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that traces calls at DEBUG level.

    Arguments and results are rendered through :func:`_safe_repr`, so shapes
    show up as one-line summaries and numpy arrays as shape/range digests.
    Nothing is formatted unless the logger is enabled for DEBUG.
    """

    def decorator(func: F) -> F:
        qualname = name or getattr(func, "__qualname__", func.__name__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            result = func(*args, **kwargs)
            if logger.isEnabledFor(logging.DEBUG):
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        return cast(F, wrapper)

    return decorator


__all__ = ["debug_log_call"]
