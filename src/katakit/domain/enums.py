"""Type-safe domain enums for selector fragments, combinators and output options."""

from __future__ import annotations

from enum import Enum, IntEnum


class FragmentKind(IntEnum):
    """Kinds of a compound CSS selector, valued by their required position.

    A fragment may only be added while no fragment of a higher-valued kind
    is present.

    Example:
        >>> FragmentKind.ELEMENT < FragmentKind.PSEUDO_ELEMENT
        True
        >>> FragmentKind.from_label("pseudo-class")
        <FragmentKind.PSEUDO_CLASS: 5>
    """

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        """Hyphenated lower-case name as used on the command line."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_label(cls, label: str) -> FragmentKind:
        """Look up a kind by its label; ``attr`` is accepted for ``attribute``."""
        normalized = label.strip().lower().replace("_", "-")
        if normalized == "attr":
            return cls.ATTRIBUTE
        for kind in cls:
            if kind.label == normalized:
                return kind
        raise ValueError(f"Unknown selector fragment kind: {label!r}")


#: Kinds that may be set at most once per compound selector.
SINGLETON_KINDS: frozenset[FragmentKind] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


class Combinator(str, Enum):
    """Conventional CSS combinators.

    ``combine`` passes any token through verbatim; this enum only names the
    usual ones. The CLI logs tokens outside this set before using them.

    Example:
        >>> Combinator.CHILD.value
        '>'
        >>> Combinator.DESCENDANT == " "
        True
    """

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"


class AngleUnit(str, Enum):
    """Unit in which the CLI reports clock-hand angles."""

    RADIANS = "radians"
    DEGREES = "degrees"


class DateFormat(str, Enum):
    """Textual date formats understood by the parsing helpers."""

    RFC2822 = "rfc2822"
    ISO8601 = "iso8601"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "SINGLETON_KINDS",
    "AngleUnit",
    "Combinator",
    "DateFormat",
    "FragmentKind",
    "OutputFormat",
]
