"""Convert an EPP (EDI++) export into JSON."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from ..config import ParseOptions
from ..errors import EPPError
from ..export import convert_to_json, write_json_file
from ..parser import parse_epp_file
from ..queries import invoice_stats
from . import add_logging_arguments, fail, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="epp2json convert",
        description="Konwertuje plik EPP (EDI++) z fakturami do formatu JSON.",
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=Path("eksport.epp"),
        help="Ścieżka do pliku wejściowego (domyślnie: eksport.epp)",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path("faktury.json"),
        help="Ścieżka do pliku wyjściowego (domyślnie: faktury.json)",
    )
    parser.add_argument(
        "--fz-only",
        action="store_true",
        help="Parsuj tylko faktury zakupowe (FZ)",
    )
    parser.add_argument(
        "--fs-only",
        action="store_true",
        help="Parsuj tylko faktury sprzedażowe (FS)",
    )
    parser.add_argument(
        "--simple",
        action="store_true",
        help="Zapisz uproszczoną listę faktur (typ, numer, kontrahent, kwota, data)",
    )
    add_logging_arguments(parser)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args)

    options = ParseOptions.from_env().restricted(
        fz_only=args.fz_only, fs_only=args.fs_only
    )

    try:
        document = parse_epp_file(args.input, options)
        write_json_file(convert_to_json(document, simple=args.simple), args.output)
    except EPPError as exc:
        return fail(exc)

    fz_count, fs_count = invoice_stats(document)
    print("Konwersja zakończona pomyślnie!")
    print(f"Przetworzono {len(document.invoices)} faktur")
    print(f"Wynik zapisano do pliku: {args.output}")
    print(f"Faktury zakupowe (FZ): {fz_count}")
    print(f"Faktury sprzedażowe (FS): {fs_count}")

    return 0


if __name__ == "__main__":  # pragma: no cover - direct execution
    raise SystemExit(main())
