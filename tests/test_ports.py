"""Port behavioral contract tests for the in-memory adapters and the wiring.

Production adapters are exercised through the CLI tests. Static type
conformance is enforced by pyright.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from lib_layered_config import Config

from katakit.adapters.config.settings import KatakitSettings
from katakit.adapters.memory import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    init_logging_in_memory,
)

if TYPE_CHECKING:
    from katakit.application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
    )


# ======================== In-Memory Adapter Contract Tests ========================


@pytest.fixture
def get_config_impl() -> GetConfig:
    return get_config_in_memory


@pytest.fixture
def get_default_config_path_impl() -> GetDefaultConfigPath:
    return get_default_config_path_in_memory


@pytest.fixture
def display_config_impl() -> DisplayConfig:
    return display_config_in_memory


@pytest.fixture
def init_logging_impl() -> InitLogging:
    return init_logging_in_memory


@pytest.mark.os_agnostic
def test_get_config_returns_config_with_dict(get_config_impl: GetConfig) -> None:
    """GetConfig must return a Config whose as_dict() yields a dict."""
    config = get_config_impl(profile="test")

    assert isinstance(config, Config)
    assert isinstance(config.as_dict(), dict)


@pytest.mark.os_agnostic
def test_get_default_config_path_returns_toml_path(get_default_config_path_impl: GetDefaultConfigPath) -> None:
    path = get_default_config_path_impl()

    assert isinstance(path, Path)
    assert path.suffix == ".toml"


@pytest.mark.os_agnostic
def test_display_config_accepts_any_section(display_config_impl: DisplayConfig) -> None:
    display_config_impl(Config({}, {}), section="missing")


@pytest.mark.os_agnostic
def test_init_logging_does_not_raise(init_logging_impl: InitLogging) -> None:
    init_logging_impl(Config({}, {}))


# ======================== Composition Wiring Tests ========================


@pytest.mark.os_agnostic
def test_build_production_returns_fully_populated_app_services() -> None:
    from katakit.composition import AppServices, build_production

    services = build_production()
    assert isinstance(services, AppServices)
    for field_name in services.__dataclass_fields__:
        assert callable(getattr(services, field_name))


@pytest.mark.os_agnostic
def test_build_testing_returns_fully_populated_app_services() -> None:
    from katakit.composition import AppServices, build_testing

    services = build_testing()
    assert isinstance(services, AppServices)
    for field_name in services.__dataclass_fields__:
        assert callable(getattr(services, field_name))


@pytest.mark.os_agnostic
def test_testing_services_yield_default_settings() -> None:
    """Empty in-memory config plus the real settings loader gives defaults."""
    from katakit.composition import build_testing

    services = build_testing()

    assert services.load_settings(services.get_config()) == KatakitSettings()
