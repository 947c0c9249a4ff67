"""Sub-commands exposed by :mod:`epp2json.cli`."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..errors import EPPError
from ..logging import configure_logging


def add_logging_arguments(parser) -> None:
    parser.add_argument(
        "--log-file", type=Path, default=None, help="Zapisuj log do pliku (rotowany)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Szczegółowe logowanie"
    )


def setup_logging(args) -> None:
    level = logging.DEBUG if args.verbose else logging.WARNING
    configure_logging(args.log_file, level=level)


def fail(exc: EPPError) -> int:
    """Print a fatal diagnostic for *exc* and return the exit status."""

    print(f"Błąd ({exc.phase}): {exc}", file=sys.stderr)
    return 1
