"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Selector command from :mod:`.selector_cmd`
    * Date commands from :mod:`.dates_cmd`
    * Rectangle command from :mod:`.rectangle_cmd`
"""

from __future__ import annotations

from .config import cli_config
from .dates_cmd import cli_clock_angle, cli_leap_year, cli_parse_date, cli_timespan
from .info import cli_info
from .rectangle_cmd import cli_rectangle
from .selector_cmd import cli_selector

__all__ = [
    "cli_clock_angle",
    "cli_config",
    "cli_info",
    "cli_leap_year",
    "cli_parse_date",
    "cli_rectangle",
    "cli_selector",
    "cli_timespan",
]
