"""Read-only helpers to filter and aggregate parsed invoices."""

from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Iterable, NamedTuple

from .invoices import EPPDocument, Invoice
from .parser import PURCHASE_TYPE, SALE_TYPE
from .utils import is_unset


class AmountTotals(NamedTuple):
    net: float
    vat: float
    gross: float


def invoice_stats(document: EPPDocument) -> tuple[int, int]:
    """Return the number of ``FZ`` and ``FS`` invoices in *document*."""

    counts = count_by_type(document.invoices)
    return counts.get(PURCHASE_TYPE, 0), counts.get(SALE_TYPE, 0)


def count_by_type(invoices: Iterable[Invoice]) -> dict[str, int]:
    """Count invoices per type code, in order of first appearance."""

    return dict(Counter(invoice.type for invoice in invoices))


def filter_by_type(invoices: Iterable[Invoice], invoice_type: str) -> list[Invoice]:
    return [invoice for invoice in invoices if invoice.type == invoice_type]


def filter_by_contractor(
    invoices: Iterable[Invoice], contractor_code: str
) -> list[Invoice]:
    """Invoices whose contractor code contains *contractor_code* (case-sensitive)."""

    return [
        invoice for invoice in invoices if contractor_code in invoice.contractor_code
    ]


def filter_by_date_range(
    invoices: Iterable[Invoice], start: datetime, end: datetime
) -> list[Invoice]:
    """Invoices issued strictly after *start* and strictly before *end*."""

    return [
        invoice
        for invoice in invoices
        if not is_unset(invoice.issue_date) and start < invoice.issue_date < end
    ]


def calculate_total_amount(invoices: Iterable[Invoice]) -> AmountTotals:
    net = vat = gross = 0.0
    for invoice in invoices:
        net += invoice.net_amount
        vat += invoice.vat_amount
        gross += invoice.gross_amount
    return AmountTotals(net, vat, gross)


def month_key(invoice: Invoice) -> str | None:
    """Return the ``YYYY-MM`` bucket of *invoice*, ``None`` without issue date."""

    if is_unset(invoice.issue_date):
        return None
    return f"{invoice.issue_date.year:04d}-{invoice.issue_date.month:02d}"


def group_by_month(invoices: Iterable[Invoice]) -> dict[str, list[Invoice]]:
    grouped: dict[str, list[Invoice]] = {}
    for invoice in invoices:
        key = month_key(invoice)
        if key is None:
            continue
        grouped.setdefault(key, []).append(invoice)
    return grouped


__all__ = [
    "AmountTotals",
    "calculate_total_amount",
    "count_by_type",
    "filter_by_contractor",
    "filter_by_date_range",
    "filter_by_type",
    "group_by_month",
    "invoice_stats",
    "month_key",
]
