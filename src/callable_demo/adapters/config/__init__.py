"""Configuration adapter backed by lib_layered_config.

Contents:
    * :mod:`.loader` - Cached loading of the layered configuration
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path

__all__ = [
    "get_config",
    "get_default_config_path",
]
