"""Parse and apply ``--set SECTION.KEY=VALUE`` overrides to a Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` assignment split into section, key path and value."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue

    def as_nested(self) -> dict[str, object]:
        """Return the assignment as nested dicts below the section.

        Example:
            >>> ConfigOverride("katakit", ("a", "b"), 1).as_nested()
            {'a': {'b': 1}}
        """
        node: object = self.value
        for part in reversed(self.key_path):
            node = {part: node}
        return cast("dict[str, object]", node)


def coerce_value(raw: str) -> CoercedValue:
    """Read ``raw`` as JSON, keeping it as a plain string when that fails.

    Examples:
        >>> coerce_value("42"), coerce_value("true"), coerce_value("degrees")
        (42, True, 'degrees')
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    The first ``=`` ends the dotted path; the first dot ends the section.

    Raises:
        ValueError: If ``=`` is missing, the path has no dot, or a path
            component is empty.

    Examples:
        >>> parse_override("katakit.angle_unit=degrees")
        ConfigOverride(section='katakit', key_path=('angle_unit',), value='degrees')
        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    path, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    section, dot, rest = path.partition(".")
    if not dot:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    key_path = tuple(rest.split("."))
    if not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def _merge(target: dict[str, object], update: dict[str, object]) -> None:
    for key, value in update.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            _merge(cast("dict[str, object]", existing), cast("dict[str, object]", value))
        elif key in target and isinstance(value, dict):
            raise ValueError(f"Conflicting overrides: {key!r} is both a value and a table")
        else:
            target[key] = value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge the parsed overrides into ``config``.

    Returns ``config`` itself when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed.

    Example:
        >>> cfg = Config({"katakit": {"angle_unit": "radians"}}, {})
        >>> apply_overrides(cfg, ("katakit.angle_unit=degrees",))["katakit"]["angle_unit"]
        'degrees'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    merged: dict[str, object] = {}
    for raw in raw_overrides:
        override = parse_override(raw)
        _merge(merged, {override.section: override.as_nested()})
    return config.with_overrides(cast("dict[str, dict[str, object]]", merged))


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
