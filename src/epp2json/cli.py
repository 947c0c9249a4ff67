"""Command line entry point for the EPP converter.

``epp2json`` behaves like the plain converter when the first argument is not
a command name, so ``epp2json -i eksport.epp -o faktury.json`` and
``epp2json convert -i eksport.epp -o faktury.json`` are equivalent.
"""

from __future__ import annotations

import sys
from typing import Callable, Sequence

from .commands import convert, report, validate

CommandCallable = Callable[[list[str]], int | None]

DEFAULT_COMMAND = "convert"

COMMANDS: dict[str, tuple[str, CommandCallable]] = {
    "convert": ("Konwersja pliku EPP do JSON (domyślne polecenie).", convert.main),
    "report": ("Raport Excel z sumami według typu i miesiąca.", report.main),
    "validate": ("Kontrola kompletności danych faktur.", validate.main),
}


def usage() -> str:
    lines = [
        "użycie: epp2json [polecenie] [opcje]",
        "",
        "polecenia:",
    ]
    for name, (summary, _handler) in COMMANDS.items():
        lines.append(f"  {name:<10}{summary}")
    lines.append("")
    lines.append(f"Bez nazwy polecenia wykonywane jest '{DEFAULT_COMMAND}'.")
    return "\n".join(lines)


def split_command(argv: Sequence[str]) -> tuple[str, list[str]]:
    """Return the command name and the arguments forwarded to it."""

    args = list(argv)
    if args and args[0] in COMMANDS:
        return args[0], args[1:]
    return DEFAULT_COMMAND, args


def _exit_code(handler: CommandCallable, argv: list[str]) -> int:
    try:
        result = handler(argv)
    except SystemExit as exc:  # argparse exits on --help and usage errors
        code = exc.code
        if code is None:
            return 0
        if isinstance(code, int):
            return code
        print(str(code), file=sys.stderr)
        return 1
    return 0 if result is None else int(result)


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the command line interface."""

    args = list(sys.argv[1:] if argv is None else argv)
    if args[:1] in (["-h"], ["--help"]):
        print(usage())
        return 0

    command, forwarded = split_command(args)
    _summary, handler = COMMANDS[command]
    return _exit_code(handler, forwarded)


if __name__ == "__main__":  # pragma: no cover - direct execution
    raise SystemExit(main())
