"""Logging configuration model and runtime-config mapping."""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from callable_demo import __init__conf__
from callable_demo.adapters.logging.setup import LoggingConfigModel, _build_runtime_config


@pytest.mark.os_agnostic
def test_logging_config_model_keeps_unknown_keys() -> None:
    """Unknown keys survive validation so they reach RuntimeConfig."""
    parsed = LoggingConfigModel.model_validate({"service": "demo", "environment": "dev", "console_level": "DEBUG"})

    assert parsed.service == "demo"
    assert parsed.environment == "dev"
    assert parsed.model_dump(exclude={"service", "environment"}, exclude_none=True) == {"console_level": "DEBUG"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_falls_back_to_the_package_name() -> None:
    runtime_config = _build_runtime_config(Config({}, {}))

    assert runtime_config.service == __init__conf__.name
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_reads_the_lib_log_rich_section() -> None:
    runtime_config = _build_runtime_config(
        Config({"lib_log_rich": {"service": "demo", "environment": "test", "console_level": "ERROR"}}, {})
    )

    assert runtime_config.service == "demo"
    assert runtime_config.environment == "test"
