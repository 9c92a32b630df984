"""Date exercise commands: parse-date, leap-year, timespan, clock-angle."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime

import lib_log_rich.runtime
import rich_click as click

from katakit.domain.dates import (
    clock_angle,
    format_timespan,
    is_leap_year,
    parse_iso8601,
    parse_rfc2822,
)
from katakit.domain.enums import AngleUnit, DateFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import DATETIME, fail, resolve_settings

logger = logging.getLogger(__name__)

_PARSERS = {
    DateFormat.RFC2822: parse_rfc2822,
    DateFormat.ISO8601: parse_iso8601,
}


@click.command("parse-date", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@click.option(
    "--format",
    "date_format",
    type=click.Choice([f.value for f in DateFormat], case_sensitive=False),
    default=None,
    help="Parser to use; defaults to katakit.date_format from configuration",
)
@click.pass_context
def cli_parse_date(ctx: click.Context, text: str, date_format: str | None) -> None:
    """Print TEXT as milliseconds since the Unix epoch, or NaN."""
    settings = resolve_settings(get_cli_context(ctx))
    fmt = DateFormat(date_format.lower()) if date_format else settings.date_format

    with lib_log_rich.runtime.bind(job_id="cli-parse-date", extra={"command": "parse-date", "format": fmt.value}):
        timestamp = _PARSERS[fmt](text)
        if math.isnan(timestamp):
            click.echo("NaN")
            fail(f"{text!r} is not a valid {fmt.value} date")
        click.echo(str(int(timestamp)) if timestamp.is_integer() else str(timestamp))


def _year_or_date(value: str) -> date:
    if value.strip().isdigit():
        try:
            return date(int(value), 1, 1)
        except ValueError as exc:
            raise click.BadParameter(str(exc)) from exc
    return DATETIME.convert(value, None, None)


@click.command("leap-year", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("value", metavar="YEAR_OR_DATE")
def cli_leap_year(value: str) -> None:
    """Print true when the year of YEAR_OR_DATE is a leap year."""
    try:
        moment = _year_or_date(value)
    except click.BadParameter as exc:
        raise click.BadParameter(exc.message, param_hint="YEAR_OR_DATE") from exc
    click.echo("true" if is_leap_year(moment) else "false")


@click.command("timespan", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("start", type=DATETIME)
@click.argument("end", type=DATETIME)
def cli_timespan(start: datetime, end: datetime) -> None:
    """Print the field-wise difference END - START as HH:mm:ss.sss."""
    click.echo(format_timespan(start, end))


@click.command("clock-angle", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("moment", metavar="DATETIME", type=DATETIME)
@click.option(
    "--unit",
    type=click.Choice([u.value for u in AngleUnit], case_sensitive=False),
    default=None,
    help="Angle unit; defaults to katakit.angle_unit from configuration",
)
@click.pass_context
def cli_clock_angle(ctx: click.Context, moment: datetime, unit: str | None) -> None:
    """Print the angle between the hands of a clock showing DATETIME."""
    settings = resolve_settings(get_cli_context(ctx))
    angle_unit = AngleUnit(unit.lower()) if unit else settings.angle_unit
    radians = clock_angle(moment)
    logger.debug("Clock angle computed", extra={"radians": radians, "unit": angle_unit.value})
    click.echo(str(math.degrees(radians) if angle_unit is AngleUnit.DEGREES else radians))


__all__ = ["cli_clock_angle", "cli_leap_year", "cli_parse_date", "cli_timespan"]
