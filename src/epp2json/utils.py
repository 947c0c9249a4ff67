"""Field-level helpers shared across the EPP parser."""

from __future__ import annotations

import csv
import io
import math
from datetime import datetime

from .errors import MalformedLineError

ZERO_TIME = datetime.min
DATE_LENGTH = 14


def is_unset(value: datetime) -> bool:
    """Return ``True`` when *value* is the zero timestamp."""

    return value == ZERO_TIME


def parse_date(value: str | None) -> datetime:
    """Convert a ``YYYYMMDDHHMMSS`` string to :class:`~datetime.datetime`.

    Anything that is not exactly fourteen ASCII digits forming a valid
    calendar timestamp yields :data:`ZERO_TIME`.
    """

    if value is None or len(value) != DATE_LENGTH:
        return ZERO_TIME
    if not (value.isascii() and value.isdigit()):
        return ZERO_TIME

    try:
        return datetime(
            int(value[0:4]),
            int(value[4:6]),
            int(value[6:8]),
            int(value[8:10]),
            int(value[10:12]),
            int(value[12:14]),
        )
    except ValueError:
        return ZERO_TIME


_INFINITY_LITERALS = {"inf", "infinity"}


def parse_float(value: str | None, *, default: float = 0.0) -> float:
    """Convert *value* to ``float``, returning ``default`` when it is invalid.

    Only the dot is accepted as decimal separator: ``"12,50"`` is not a
    number here. Values too large for a double (``"1e400"``) are invalid too;
    only a literal ``inf``/``infinity`` yields an infinite result.
    """

    if not value:
        return default
    # float() is more lenient than the export format on these two points
    if value != value.strip() or "_" in value:
        return default

    try:
        result = float(value)
    except ValueError:
        return default

    if math.isinf(result) and value.lstrip("+-").lower() not in _INFINITY_LITERALS:
        return default
    return result


def _has_bare_quote(text: str) -> bool:
    """Return ``True`` when the first record has a quote inside an unquoted field."""

    in_quotes = False
    field_start = True
    seen = False
    index = 0
    while index < len(text):
        char = text[index]
        if in_quotes:
            if char == '"':
                if text[index + 1:index + 2] == '"':
                    index += 2
                    continue
                in_quotes = False
        elif char == '"':
            if not field_start:
                return True
            in_quotes = True
            field_start = False
            seen = True
        elif char == ",":
            field_start = True
            seen = True
        elif char in "\r\n":
            if seen:
                return False
        else:
            field_start = False
            seen = True
        index += 1
    return False


def split_csv_line(line: str) -> list[str]:
    """Split the first CSV record of *line* into its fields.

    Fields are comma separated and may be wrapped in double quotes; a quoted
    field can contain commas, doubled quotes and line breaks. Unbalanced
    quoting, including a quote inside an unquoted field such as ``ab"c``,
    raises :class:`~epp2json.errors.MalformedLineError`.
    """

    if _has_bare_quote(line):
        raise MalformedLineError('błąd czytania CSV: niedozwolony znak " w polu', line=line)

    reader = csv.reader(io.StringIO(line), strict=True)
    try:
        for record in reader:
            # csv yields [] for blank lines, skip to the first real record
            if record:
                return record
    except csv.Error as exc:
        raise MalformedLineError("błąd czytania CSV", line=line) from exc
    # Empty input gives no fields rather than an end-of-data error, so a
    # missing [INFO] line or empty [ZAWARTOSC] block does not abort parsing.
    return []


__all__ = [
    "DATE_LENGTH",
    "ZERO_TIME",
    "is_unset",
    "parse_date",
    "parse_float",
    "split_csv_line",
]
