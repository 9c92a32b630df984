"""Static package metadata surfaced to CLI commands and documentation.

The ``version`` line is kept in sync with ``pyproject.toml`` by the release
tooling; the remaining values identify the package and its configuration
directories.

Contents:
    * Metadata constants (``name``, ``title``, ``version`` ...).
    * :func:`print_info` - Render the metadata block for ``katakit info``.
"""

from __future__ import annotations

name = "katakit"
title = "Selector builder, JSON and date exercises with a small CLI"
version = "1.0.0"
homepage = "https://github.com/katakit/katakit"
author = "katakit contributors"
author_email = "katakit@users.noreply.github.com"
shell_command = "katakit"

#: Identifiers handed to lib_layered_config for platform specific paths.
LAYEREDCONF_VENDOR = "katakit"
LAYEREDCONF_APP = "katakit"
LAYEREDCONF_SLUG = "katakit"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for katakit:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
