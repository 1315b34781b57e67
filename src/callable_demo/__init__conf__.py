"""Static package metadata surfaced to the CLI and the configuration loader.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

name = "callable_demo"
title = "Demonstrates blocks, stored callables and strict callables"
version = "1.0.0"
shell_command = "callable-demo"

#: Identifiers lib_layered_config uses to build platform-specific paths.
LAYEREDCONF_VENDOR = "callable-demo"
LAYEREDCONF_APP = "callable-demo"
LAYEREDCONF_SLUG = "callable-demo"
