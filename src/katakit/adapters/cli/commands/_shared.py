"""Shared helpers for CLI command modules.

Contents:
    * :class:`DateTimeParam` - Click parameter type for ISO 8601 instants.
    * :func:`fail` - Report an error on stderr and exit with a given code.
    * :func:`resolve_settings` - Validated ``[katakit]`` settings or exit.
"""

from __future__ import annotations

from datetime import datetime
from typing import NoReturn

import rich_click as click
from dateutil import parser as date_parser
from pydantic import ValidationError

from katakit.adapters.config.settings import KatakitSettings

from ..context import CLIContext
from ..exit_codes import ExitCode


class DateTimeParam(click.ParamType):
    """Accept an ISO 8601 date or datetime and convert it to ``datetime``."""

    name = "datetime"

    def convert(self, value: object, param: click.Parameter | None, ctx: click.Context | None) -> datetime:
        if isinstance(value, datetime):
            return value
        try:
            return date_parser.isoparse(str(value))
        except (ValueError, OverflowError):
            self.fail(f"{value!r} is not an ISO 8601 date or datetime", param, ctx)


DATETIME = DateTimeParam()


def fail(message: str, code: ExitCode = ExitCode.INVALID_ARGUMENT) -> NoReturn:
    """Print ``Error: message`` to stderr and raise SystemExit with ``code``."""
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(code)


def resolve_settings(cli_ctx: CLIContext) -> KatakitSettings:
    """Load the ``[katakit]`` settings, exiting with CONFIG_ERROR when invalid."""
    try:
        return cli_ctx.services.load_settings(cli_ctx.config)
    except ValidationError as exc:
        fail(f"invalid [katakit] configuration: {exc}", ExitCode.CONFIG_ERROR)


__all__ = ["DATETIME", "DateTimeParam", "fail", "resolve_settings"]
