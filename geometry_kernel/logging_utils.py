from __future__ import annotations

import inspect
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


def _safe_repr(value: Any, *, max_items: int = 4, max_length: int = 300) -> str:
    if isinstance(value, np.ndarray):
        parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"]
        if 0 < value.size <= max_items:
            parts.append(f"values={_repr.repr(value.tolist())}")
        elif value.size:
            parts.append(f"min={float(value.min()):.6g}")
            parts.append(f"max={float(value.max()):.6g}")
        return ", ".join(parts)

    if isinstance(value, (list, tuple)):
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        items = []
        for idx, item in enumerate(value):
            if idx >= max_items:
                items.append(f"... {len(value) - max_items} more")
                break
            items.append(_safe_repr(item))
        return f"{open_br}{', '.join(items)}{close_br}"

    # shapes render their own compact repr; polygons may be long
    rendered = repr(value) if hasattr(value, "bounding_box") else _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append(
            "kwargs={" + ", ".join(f"{key}={_safe_repr(value)}" for key, value in kwargs.items()) + "}"
        )
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(logger: logging.Logger, *, name: Optional[str] = None) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG lines around each predicate call."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                logger.debug("%s raised %s: %s", qualname, type(exc).__name__, exc)
                raise
            logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Wrap the public functions defined in ``namespace`` with DEBUG logging.

    Names with a leading underscore and functions imported from other modules
    are left unwrapped.
    """

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name or __name__)
    for name, value in list(namespace.items()):
        if name.startswith("_"):
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)


__all__ = ["debug_log_call", "apply_debug_logging"]
