"""Rectangle command printing the shape and its area as JSON."""

from __future__ import annotations

from dataclasses import asdict

import rich_click as click

from katakit.domain.serialization import serialize
from katakit.domain.shapes import make_rectangle

from ..constants import CLICK_CONTEXT_SETTINGS


@click.command("rectangle", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("width", type=click.FLOAT)
@click.argument("height", type=click.FLOAT)
def cli_rectangle(width: float, height: float) -> None:
    """Print a WIDTH x HEIGHT rectangle with its area as JSON."""
    rectangle = make_rectangle(width, height)
    click.echo(serialize({**asdict(rectangle), "area": rectangle.area()}))


__all__ = ["cli_rectangle"]
