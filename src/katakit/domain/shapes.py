"""Rectangle value with a computed area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Rectangle:
    """Mutable width/height pair.

    Example:
        >>> r = make_rectangle(10, 20)
        >>> r.area()
        200
        >>> r.width = 3
        >>> r.area()
        60
    """

    width: float
    height: float

    def area(self) -> float:
        """Return ``width * height`` from the current attribute values."""
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    """Build a :class:`Rectangle` from its two sides."""
    return Rectangle(width=width, height=height)


__all__ = ["Rectangle", "make_rectangle"]
