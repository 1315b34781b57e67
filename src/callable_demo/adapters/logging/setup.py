"""Centralized lib_log_rich initialization for every entry point.

The module entry (``python -m callable_demo``), the console script and the
test suite all reach logging through :func:`init_logging`, which starts the
runtime at most once per process and bridges stdlib ``logging`` into it.

Contents:
    * :class:`LoggingConfigModel` - validates the ``[lib_log_rich]`` section.
    * :func:`init_logging` - idempotent runtime initialization.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from callable_demo import __init__conf__


class LoggingConfigModel(BaseModel):
    """Typed view of the ``[lib_log_rich]`` configuration section.

    Unknown keys are kept and forwarded to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> model = LoggingConfigModel(environment="dev", console_level="DEBUG")
        >>> model.environment
        'dev'
        >>> model.model_dump(exclude={"service", "environment"}, exclude_none=True)
        {'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    A missing ``service`` falls back to the package name.
    """
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime unless it is already running.

    On the first call, ``.env`` files are loaded so ``LOG_*`` variables take
    effect, the runtime is initialised from *config*, and stdlib logging is
    attached. Later calls return immediately.

    Args:
        config: Loaded layered configuration holding the ``[lib_log_rich]`` section.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
