"""Entry point behind the installed ``whatif`` console script.

Lives outside :mod:`whatif.adapters` because it is the one place allowed to
import both the CLI adapter and the composition root.
"""

from __future__ import annotations

from collections.abc import Sequence

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI with production adapters and return its exit code.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
    """
    return cli_main(argv, services_factory=build_production)


__all__ = ["main"]
