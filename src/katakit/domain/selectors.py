"""Immutable CSS selector builder.

A compound selector is assembled from up to six fragment kinds that must
appear in a fixed order::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/      \\-----------/
              repeatable   repeatable

Every builder call returns a new :class:`CompoundSelector`; the receiver is
left untouched, so a partially built selector can serve as the starting
point of several independent ones. Two rendered selectors are joined by a
combinator with :func:`combine`.

Contents:
    * :class:`CompoundSelector` - fragment set with ordering validation.
    * :class:`CombinedSelector` - two rendered selectors and a combinator.
    * :class:`SelectorBuilder` - stateless facade starting new derivations.
    * :data:`css_selector_builder` - shared facade instance.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from .enums import SINGLETON_KINDS, FragmentKind
from .errors import DuplicateViolation, OrderViolation

logger = logging.getLogger(__name__)


class Renderable(Protocol):
    """Anything that renders itself to selector text."""

    def stringify(self) -> str: ...


@dataclass(frozen=True, slots=True)
class CompoundSelector:
    """Fragments of one compound selector.

    Attributes:
        element_name: Type selector, e.g. ``div``.
        id_name: Identifier without the leading ``#``.
        classes: Class names in insertion order.
        attribute: Raw attribute selector without brackets. A second
            ``attr`` call replaces the first.
        pseudo_classes: Pseudo-class names in insertion order.
        pseudo_element_name: Pseudo-element name without the leading ``::``.

    Field names carry a suffix where the plain name is taken by the builder
    method that sets it.

    Example:
        >>> CompoundSelector().id("main").class_("container").class_("editable").stringify()
        '#main.container.editable'
        >>> CompoundSelector().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        'a[href$=".png"]:focus'
    """

    element_name: str = ""
    id_name: str = ""
    classes: tuple[str, ...] = ()
    attribute: str = ""
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element_name: str = ""

    def present_kinds(self) -> frozenset[FragmentKind]:
        """Return the fragment kinds that currently hold a value."""
        slots = (
            (FragmentKind.ELEMENT, self.element_name),
            (FragmentKind.ID, self.id_name),
            (FragmentKind.CLASS, self.classes),
            (FragmentKind.ATTRIBUTE, self.attribute),
            (FragmentKind.PSEUDO_CLASS, self.pseudo_classes),
            (FragmentKind.PSEUDO_ELEMENT, self.pseudo_element_name),
        )
        return frozenset(kind for kind, value in slots if value)

    def _guard(self, kind: FragmentKind) -> None:
        """Reject adding ``kind`` when it is a repeated singleton or out of order."""
        present = self.present_kinds()
        if kind in SINGLETON_KINDS and kind in present:
            logger.debug("Rejected duplicate %s fragment", kind.label)
            raise DuplicateViolation()
        if any(other > kind for other in present):
            logger.debug("Rejected %s fragment after %s", kind.label, max(present).label)
            raise OrderViolation()

    def element(self, value: str) -> CompoundSelector:
        """Return a copy with the type selector set."""
        self._guard(FragmentKind.ELEMENT)
        return replace(self, element_name=value)

    def id(self, value: str) -> CompoundSelector:
        """Return a copy with the id set."""
        self._guard(FragmentKind.ID)
        return replace(self, id_name=value)

    def class_(self, value: str) -> CompoundSelector:
        """Return a copy with ``value`` appended to the class list."""
        self._guard(FragmentKind.CLASS)
        return replace(self, classes=(*self.classes, value))

    def attr(self, value: str) -> CompoundSelector:
        """Return a copy whose attribute selector is ``value``."""
        self._guard(FragmentKind.ATTRIBUTE)
        return replace(self, attribute=value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        """Return a copy with ``value`` appended to the pseudo-classes."""
        self._guard(FragmentKind.PSEUDO_CLASS)
        return replace(self, pseudo_classes=(*self.pseudo_classes, value))

    def pseudo_element(self, value: str) -> CompoundSelector:
        """Return a copy with the pseudo-element set."""
        self._guard(FragmentKind.PSEUDO_ELEMENT)
        return replace(self, pseudo_element_name=value)

    def add(self, kind: FragmentKind, value: str) -> CompoundSelector:
        """Dispatch to the builder method for ``kind``.

        Example:
            >>> CompoundSelector().add(FragmentKind.ELEMENT, "p").add(FragmentKind.PSEUDO_ELEMENT, "before").stringify()
            'p::before'
        """
        method = {
            FragmentKind.ELEMENT: self.element,
            FragmentKind.ID: self.id,
            FragmentKind.CLASS: self.class_,
            FragmentKind.ATTRIBUTE: self.attr,
            FragmentKind.PSEUDO_CLASS: self.pseudo_class,
            FragmentKind.PSEUDO_ELEMENT: self.pseudo_element,
        }[kind]
        return method(value)

    def stringify(self) -> str:
        """Render the fragments in their fixed order without separators."""
        parts = [self.element_name]
        if self.id_name:
            parts.append(f"#{self.id_name}")
        parts.extend(f".{name}" for name in self.classes)
        if self.attribute:
            parts.append(f"[{self.attribute}]")
        parts.extend(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element_name:
            parts.append(f"::{self.pseudo_element_name}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True, slots=True)
class CombinedSelector:
    """Two rendered selectors joined by a combinator.

    The combinator is kept verbatim; it is not checked against the CSS
    combinator set.
    """

    left: str
    combinator: str
    right: str

    def stringify(self) -> str:
        return f"{self.left} {self.combinator} {self.right}"

    def __str__(self) -> str:
        return self.stringify()


def combine(left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
    """Join two selectors with ``combinator``.

    Both sides are rendered immediately, so later derivations from ``left``
    or ``right`` do not affect the result.

    Example:
        >>> a = CompoundSelector().element("div").id("main")
        >>> b = CompoundSelector().element("td").pseudo_class("nth-of-type(even)")
        >>> combine(a, ">", b).stringify()
        'div#main > td:nth-of-type(even)'
    """
    return CombinedSelector(left=left.stringify(), combinator=combinator, right=right.stringify())


class SelectorBuilder:
    """Stateless entry point; each method starts from an empty selector.

    Example:
        >>> builder = SelectorBuilder()
        >>> builder.combine(
        ...     builder.element("div").id("main").class_("container").class_("draggable"),
        ...     "+",
        ...     builder.combine(
        ...         builder.element("table").id("data"),
        ...         "~",
        ...         builder.combine(
        ...             builder.element("tr").pseudo_class("nth-of-type(even)"),
        ...             " ",
        ...             builder.element("td").pseudo_class("nth-of-type(even)"),
        ...         ),
        ...     ),
        ... ).stringify()
        'div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)'
    """

    __slots__ = ()

    def element(self, value: str) -> CompoundSelector:
        return CompoundSelector().element(value)

    def id(self, value: str) -> CompoundSelector:
        return CompoundSelector().id(value)

    def class_(self, value: str) -> CompoundSelector:
        return CompoundSelector().class_(value)

    def attr(self, value: str) -> CompoundSelector:
        return CompoundSelector().attr(value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_element(value)

    def combine(self, left: Renderable, combinator: str, right: Renderable) -> CombinedSelector:
        return combine(left, combinator, right)


css_selector_builder = SelectorBuilder()


__all__ = [
    "CombinedSelector",
    "CompoundSelector",
    "Renderable",
    "SelectorBuilder",
    "combine",
    "css_selector_builder",
]
