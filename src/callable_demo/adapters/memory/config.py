"""In-memory configuration adapter for testing.

Returns the same ``[lib_log_rich]`` section the bundled defaults carry,
without touching the filesystem or the environment.
"""

from __future__ import annotations

from lib_layered_config import Config

from callable_demo import __init__conf__


def get_config_in_memory() -> Config:
    """Return a fixed Config with a quiet test logging section.

    Example:
        >>> get_config_in_memory()["lib_log_rich"]["environment"]
        'test'
    """
    return Config(
        {
            "lib_log_rich": {
                "service": __init__conf__.name,
                "environment": "test",
                "console_level": "WARNING",
            }
        },
        {},
    )


__all__ = ["get_config_in_memory"]
