"""Layered configuration loading and the bundled defaults."""

from __future__ import annotations

import pytest
import rtoml

from callable_demo.adapters.config.loader import get_config, get_default_config_path


@pytest.mark.os_agnostic
def test_bundled_defaults_hold_only_the_logging_section() -> None:
    defaults = rtoml.load(get_default_config_path())

    assert set(defaults) == {"lib_log_rich"}
    assert defaults["lib_log_rich"]["service"] == "callable_demo"
    assert defaults["lib_log_rich"]["console_level"] == "WARNING"


@pytest.mark.os_agnostic
def test_get_config_includes_the_bundled_logging_section(clear_config_cache: None) -> None:
    config = get_config()

    assert "lib_log_rich" in config.as_dict()


@pytest.mark.os_agnostic
def test_get_config_reads_the_layers_once(clear_config_cache: None) -> None:
    assert get_config() is get_config()


@pytest.mark.os_agnostic
def test_cache_clear_forces_a_fresh_read(clear_config_cache: None) -> None:
    first = get_config()

    get_config.cache_clear()

    assert get_config() is not first

