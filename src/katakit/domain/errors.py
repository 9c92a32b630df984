"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

DUPLICATE_MESSAGE = "Element, id and pseudo-element should not occur more then one time inside the selector"
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base class for rejected selector derivations.

    Inherits from ValueError so CLI boundaries can treat every invalid
    selector the same way as any other invalid argument.
    """


class DuplicateViolation(SelectorError):
    """A singleton fragment (element, id, pseudo-element) was set twice.

    Example:
        >>> from katakit.domain.errors import DuplicateViolation
        >>> err = DuplicateViolation()
        >>> str(err).startswith("Element, id and pseudo-element")
        True
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, message: str = DUPLICATE_MESSAGE) -> None:
        super().__init__(message)


class OrderViolation(SelectorError):
    """A fragment kind was added after a kind that must follow it.

    Example:
        >>> from katakit.domain.errors import OrderViolation
        >>> str(OrderViolation()).startswith("Selector parts should be arranged")
        True
    """

    def __init__(self, message: str = ORDER_MESSAGE) -> None:
        super().__init__(message)


__all__ = [
    "DUPLICATE_MESSAGE",
    "ORDER_MESSAGE",
    "DuplicateViolation",
    "OrderViolation",
    "SelectorError",
]
