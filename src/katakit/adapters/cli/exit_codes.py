"""POSIX-conventional exit codes for CLI error paths.

Signal codes are informational only; ``lib_cli_exit_tools`` performs the
signal-to-exit-code translation itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised via ``SystemExit`` by CLI commands.

    * 0–1: generic success / failure
    * 22: EINVAL, rejected selector fragments or unparseable dates
    * 78: EX_CONFIG (sysexits.h), invalid configuration values
    * 128+N: signal N (informational only)

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
