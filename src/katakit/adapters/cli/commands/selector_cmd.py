"""Build a CSS selector from command-line fragments.

Fragments are ``kind=value`` tokens applied in the order given. Any token
without ``=`` is a combinator that joins everything before it with
everything after it, so ``a + b ~ c`` renders as ``combine(a, '+',
combine(b, '~', c))``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import lib_log_rich.runtime
import rich_click as click

from katakit.domain.enums import Combinator, FragmentKind
from katakit.domain.errors import SelectorError
from katakit.domain.selectors import CompoundSelector, Renderable, combine

from ..constants import CLICK_CONTEXT_SETTINGS
from ._shared import fail

logger = logging.getLogger(__name__)

_KNOWN_COMBINATORS = frozenset(c.value for c in Combinator)


def _split_groups(tokens: Sequence[str]) -> tuple[list[list[tuple[FragmentKind, str]]], list[str]]:
    """Split tokens into fragment groups and the combinators between them.

    Raises:
        click.UsageError: On an unknown kind or a combinator without a
            selector on both sides.
    """
    groups: list[list[tuple[FragmentKind, str]]] = [[]]
    combinators: list[str] = []
    for token in tokens:
        label, sep, value = token.partition("=")
        if not sep:
            if not groups[-1]:
                raise click.UsageError(f"Combinator {token!r} must follow a selector")
            if token not in _KNOWN_COMBINATORS:
                logger.info("Passing unconventional combinator through", extra={"combinator": token})
            combinators.append(token)
            groups.append([])
            continue
        try:
            groups[-1].append((FragmentKind.from_label(label), value))
        except ValueError as exc:
            raise click.UsageError(str(exc)) from exc
    if not groups[-1]:
        raise click.UsageError("Expected a selector after the last combinator")
    return groups, combinators


def build_selector(tokens: Sequence[str]) -> Renderable:
    """Build the selector described by ``tokens``.

    Raises:
        click.UsageError: If the tokens are malformed.
        SelectorError: If a fragment violates ordering or uniqueness.

    Example:
        >>> build_selector(["element=div", "id=main", ">", "class=item"]).stringify()
        'div#main > .item'
    """
    groups, combinators = _split_groups(tokens)
    compounds: list[CompoundSelector] = []
    for fragments in groups:
        selector = CompoundSelector()
        for kind, value in fragments:
            selector = selector.add(kind, value)
        compounds.append(selector)

    result: Renderable = compounds[-1]
    for left, combinator in zip(reversed(compounds[:-1]), reversed(combinators), strict=True):
        result = combine(left, combinator, result)
    return result


@click.command("selector", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("fragments", nargs=-1, required=True)
def cli_selector(fragments: tuple[str, ...]) -> None:
    """Render a CSS selector from KIND=VALUE fragments and combinators.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.

    \b
    Example:
        katakit selector element=a 'attr=href$=".png"' pseudo-class=focus
        katakit selector element=div id=main + element=table id=data
    """
    with lib_log_rich.runtime.bind(job_id="cli-selector", extra={"command": "selector"}):
        try:
            selector = build_selector(fragments)
        except SelectorError as exc:
            logger.warning("Rejected selector fragments", extra={"fragments": list(fragments)})
            fail(str(exc))
        click.echo(selector.stringify())


__all__ = ["build_selector", "cli_selector"]
