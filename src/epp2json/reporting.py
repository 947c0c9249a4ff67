"""Aggregate parsed invoices and build Excel reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from openpyxl import Workbook

from .invoices import EPPDocument, Invoice
from .queries import month_key


@dataclass
class Totals:
    """Aggregate of monetary values for a set of invoices."""

    count: int = 0
    net_total: float = 0.0
    vat_total: float = 0.0
    gross_total: float = 0.0

    def add(self, invoice: Invoice) -> None:
        """Add the amounts of *invoice* to the totals."""

        self.count += 1
        self.net_total += invoice.net_amount
        self.vat_total += invoice.vat_amount
        self.gross_total += invoice.gross_amount


@dataclass
class ReportData:
    """Container for the aggregated data extracted from an EPP file."""

    totals_by_type: dict[str, Totals] = field(default_factory=dict)
    totals_by_month: dict[str, Totals] = field(default_factory=dict)
    overall_totals: Totals = field(default_factory=Totals)


def aggregate_document(document: EPPDocument) -> ReportData:
    """Aggregate the invoices of *document* per type and per issue month."""

    data = ReportData()
    for invoice in document.invoices:
        data.totals_by_type.setdefault(invoice.type, Totals()).add(invoice)
        month = month_key(invoice)
        if month is not None:
            data.totals_by_month.setdefault(month, Totals()).add(invoice)
        data.overall_totals.add(invoice)
    return data


def default_report_destination(source: Path) -> Path:
    """Return the default report path placed next to *source*."""

    return source.with_name(f"{source.stem}_raport.xlsx")


def write_excel_report(data: ReportData, destination: Path) -> None:
    """Generate a workbook with totals per invoice type and per month."""

    destination.parent.mkdir(parents=True, exist_ok=True)

    workbook = Workbook()
    summary_ws = workbook.active
    summary_ws.title = "Podsumowanie"
    summary_ws.append(["Typ", "Liczba", "Netto", "VAT", "Brutto"])

    for invoice_type in sorted(data.totals_by_type):
        totals = data.totals_by_type[invoice_type]
        summary_ws.append(
            [
                invoice_type,
                totals.count,
                totals.net_total,
                totals.vat_total,
                totals.gross_total,
            ]
        )

    summary_ws.append([])
    summary_ws.append(
        [
            "Razem",
            data.overall_totals.count,
            data.overall_totals.net_total,
            data.overall_totals.vat_total,
            data.overall_totals.gross_total,
        ]
    )

    months_ws = workbook.create_sheet(title="Miesiące")
    months_ws.append(["Miesiąc", "Liczba", "Netto", "VAT", "Brutto"])
    for month in sorted(data.totals_by_month):
        totals = data.totals_by_month[month]
        months_ws.append(
            [month, totals.count, totals.net_total, totals.vat_total, totals.gross_total]
        )

    workbook.save(destination)


__all__ = [
    "ReportData",
    "Totals",
    "aggregate_document",
    "default_report_destination",
    "write_excel_report",
]
