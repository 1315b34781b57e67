"""Console script entry point with production wiring.

Lives at package level, outside the adapters layer, so that wiring the
composition root into the CLI does not break the layer contracts.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``callable-demo`` console script with production services.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
