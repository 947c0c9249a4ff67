"""Positional mapping of tokenized EPP lines onto invoice records.

Each EPP header line is a flat CSV record whose columns have a fixed
meaning. The tables below list the columns read by the converter; a column
missing from a short record leaves the attribute at its default value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from .invoices import Invoice, InvoiceItem
from .utils import parse_date, parse_float


def _text(value: str) -> str:
    return value


@dataclass(frozen=True)
class FieldSpec:
    """Column ``index`` converted with ``convert`` into ``attribute``.

    ``guard`` is the index whose presence enables the lookup; it equals
    ``index`` except for the category column.
    """

    attribute: str
    index: int
    convert: Callable[[str], Any] = _text
    guard: int | None = None

    def read(self, fields: Sequence[str]) -> tuple[bool, Any]:
        guard = self.index if self.guard is None else self.guard
        if len(fields) > guard and len(fields) > self.index:
            return True, self.convert(fields[self.index])
        return False, None


HEADER_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("type", 0),
    FieldSpec("number", 4),
    FieldSpec("internal_number", 6),
    FieldSpec("contractor_code", 11),
    FieldSpec("contractor_name", 12),
    FieldSpec("contractor_full_name", 13),
    FieldSpec("city", 14),
    FieldSpec("postal_code", 15),
    FieldSpec("address", 16),
    FieldSpec("nip", 17),
    # Category is only filled once the record reaches twenty columns.
    FieldSpec("category", 19, guard=18),
    FieldSpec("date", 21, parse_date),
    FieldSpec("issue_date", 22, parse_date),
    FieldSpec("sale_date", 23, parse_date),
    FieldSpec("net_amount", 27, parse_float),
    FieldSpec("vat_amount", 28, parse_float),
    FieldSpec("gross_amount", 29, parse_float),
    FieldSpec("payment_date", 34, parse_date),
    FieldSpec("registrar", 41),
    FieldSpec("currency", 46),
)

ITEM_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("vat_rate", 0),
    FieldSpec("quantity", 1, parse_float),
    FieldSpec("net_price", 2, parse_float),
    FieldSpec("vat_amount", 3, parse_float),
    FieldSpec("gross_price", 4, parse_float),
    FieldSpec("net_total", 5, parse_float),
    FieldSpec("vat_total", 6, parse_float),
    FieldSpec("gross_total", 7, parse_float),
)


def _collect(specs: Sequence[FieldSpec], fields: Sequence[str]) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for spec in specs:
        present, value = spec.read(fields)
        if present:
            values[spec.attribute] = value
    return values


def map_header(fields: Sequence[str]) -> Invoice:
    """Build an :class:`Invoice` without items from a header record."""

    return Invoice(**_collect(HEADER_FIELDS, fields))


def map_item(fields: Sequence[str]) -> InvoiceItem:
    """Build an :class:`InvoiceItem` from a content record."""

    return InvoiceItem(**_collect(ITEM_FIELDS, fields))


__all__ = ["FieldSpec", "HEADER_FIELDS", "ITEM_FIELDS", "map_header", "map_item"]
