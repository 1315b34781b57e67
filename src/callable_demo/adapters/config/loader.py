"""Load the layered configuration that drives logging.

The bundled ``defaultconfig.toml`` is the lowest layer; app, host and user
files, a ``.env`` file and ``CALLABLE_DEMO___*`` environment variables are
stacked on top by ``lib_layered_config``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import Config, read_config

from callable_demo import __init__conf__


def get_default_config_path() -> Path:
    """Return the path of ``defaultconfig.toml`` shipped beside this module.

    Example:
        >>> get_default_config_path().is_file()
        True
    """
    return Path(__file__).parent / "defaultconfig.toml"


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Read every configuration layer once per process.

    Call ``get_config.cache_clear()`` to force the layers to be read again.

    Example:
        >>> get_config()["lib_log_rich"]["service"]
        'callable_demo'
    """
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        default_file=get_default_config_path(),
    )


__all__ = [
    "get_config",
    "get_default_config_path",
]
