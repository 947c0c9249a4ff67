"""Check parsed EPP invoices for missing or suspicious data."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from ..config import ParseOptions
from ..errors import EPPError
from ..parser import parse_epp_file
from ..validator import export_report, validate_document
from . import add_logging_arguments, fail, setup_logging

EXIT_ISSUES_FOUND = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="epp2json validate",
        description="Sprawdza kompletność danych faktur w pliku EPP.",
    )
    parser.add_argument("epp", type=Path, help="Ścieżka do pliku EPP")
    parser.add_argument(
        "--log",
        type=Path,
        default=None,
        help="Zapisz znalezione problemy do pliku Excel",
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

    issues = validate_document(document)
    if args.log is not None:
        destination = export_report(issues, destination=args.log)
        print(f"Log zapisano w: {destination}")

    if not issues:
        print("Wszystkie faktury są prawidłowe!")
        return 0

    print(f"Znaleziono {len(issues)} problemów:")
    for issue in issues:
        print(f"- {issue.message}")
    return EXIT_ISSUES_FOUND


if __name__ == "__main__":  # pragma: no cover - direct execution
    raise SystemExit(main())
