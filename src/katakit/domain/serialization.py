"""JSON encode/decode pair backed by orjson.

``serialize`` keeps the key order of its input. ``deserialize`` rebuilds an
instance by passing the decoded values positionally to the target type, so
the constructor's parameter order must match the key order of the JSON
object. That contract cannot be checked here: a mismatch yields swapped
fields or a ``TypeError`` from the constructor.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import orjson

T = TypeVar("T")

_DUMP_OPTIONS = orjson.OPT_NON_STR_KEYS


def _fallback(value: Any) -> Any:
    """Convert objects orjson does not know into plain data."""
    model_dump = getattr(value, "model_dump", None)
    if callable(model_dump):
        return model_dump()
    if hasattr(value, "__dict__"):
        return vars(value)
    if isinstance(value, (set, frozenset)):
        return list(value)
    raise TypeError(f"Type is not JSON serializable: {type(value).__name__}")


def serialize(value: Any) -> str:
    """Return compact JSON text for ``value``.

    Dataclasses, pydantic models and plain objects are written with their
    fields in declaration order.

    Example:
        >>> serialize([1, 2, 3])
        '[1,2,3]'
        >>> serialize({"width": 10, "height": 20})
        '{"width":10,"height":20}'
    """
    return orjson.dumps(value, default=_fallback, option=_DUMP_OPTIONS).decode("utf-8")


def deserialize(target: Callable[..., T], json_text: str | bytes) -> T:
    """Decode ``json_text`` and call ``target`` with the values positionally.

    An object contributes its values in key order, an array its elements,
    and a scalar nothing.

    Raises:
        orjson.JSONDecodeError: If ``json_text`` is not valid JSON.

    Example:
        >>> from katakit.domain.shapes import Rectangle
        >>> deserialize(Rectangle, '{"width": 10, "height": 20}')
        Rectangle(width=10, height=20)
    """
    decoded = orjson.loads(json_text)
    if isinstance(decoded, dict):
        values = list(decoded.values())
    elif isinstance(decoded, list):
        values = decoded
    else:
        values = []
    return target(*values)


__all__ = ["deserialize", "serialize"]
