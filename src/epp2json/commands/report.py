"""Generate Excel reports with totals extracted from EPP files."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from ..config import ParseOptions
from ..errors import EPPError
from ..parser import parse_epp_file
from ..reporting import (
    aggregate_document,
    default_report_destination,
    write_excel_report,
)
from . import add_logging_arguments, fail, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="epp2json report",
        description=(
            "Tworzy raport Excel z sumami faktur według typu dokumentu "
            "i miesiąca wystawienia."
        ),
    )
    parser.add_argument("epp", type=Path, help="Ścieżka do pliku EPP")
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Plik raportu (domyślnie <nazwa>_raport.xlsx obok pliku EPP)",
    )
    add_logging_arguments(parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args)

    try:
        document = parse_epp_file(args.epp, ParseOptions.from_env())
    except EPPError as exc:
        return fail(exc)

    data = aggregate_document(document)
    destination = args.output or default_report_destination(args.epp)
    write_excel_report(data, destination)
    print(f"Raport sum zapisano w: {destination}")

    return 0


if __name__ == "__main__":  # pragma: no cover - direct execution
    raise SystemExit(main())
