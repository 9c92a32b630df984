"""Settings model for the ``[katakit]`` configuration section."""

from __future__ import annotations

from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, field_validator

from katakit.domain.enums import AngleUnit, DateFormat

SECTION = "katakit"


class KatakitSettings(BaseModel):
    """Validated, immutable defaults for the exercise commands.

    Example:
        >>> KatakitSettings().angle_unit
        <AngleUnit.RADIANS: 'radians'>
        >>> KatakitSettings(date_format="ISO8601").date_format
        <DateFormat.ISO8601: 'iso8601'>
    """

    model_config = ConfigDict(frozen=True)

    angle_unit: AngleUnit = AngleUnit.RADIANS
    date_format: DateFormat = DateFormat.RFC2822

    @field_validator("angle_unit", "date_format", mode="before")
    @classmethod
    def _normalize_case(cls, v: Any) -> Any:
        """Accept values regardless of case and surrounding whitespace."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


def load_settings(config: Config) -> KatakitSettings:
    """Parse the ``[katakit]`` section, falling back to defaults when absent.

    Raises:
        pydantic.ValidationError: If the section holds unknown values.

    Example:
        >>> load_settings(Config({"katakit": {"angle_unit": "degrees"}}, {})).angle_unit
        <AngleUnit.DEGREES: 'degrees'>
        >>> load_settings(Config({}, {})) == KatakitSettings()
        True
    """
    raw: object = config.get(SECTION, default={})
    return KatakitSettings.model_validate(cast("dict[str, object]", raw) if raw else {})


__all__ = ["SECTION", "KatakitSettings", "load_settings"]
