"""Data quality checks for parsed EPP invoices."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from openpyxl import Workbook

from .invoices import EPPDocument, Invoice


class ValidationIssue:
    """Representation of a problem detected in an invoice."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, str] | None = None,
    ) -> None:
        self.message = message
        self.code = code or "GENERIC"
        self.details = details or {}

    def as_cells(self) -> list[str]:
        """Serialise the issue for tabular export."""

        return [self.code, self.details.get("invoice", ""), self.message]

    def __repr__(self) -> str:
        return f"ValidationIssue(code={self.code!r}, message={self.message!r})"


def _check_invoice(invoice: Invoice) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    details = {"invoice": invoice.number, "type": invoice.type}

    if not invoice.number:
        issues.append(
            ValidationIssue(
                f"Brak numeru faktury (typ: {invoice.type})",
                code="INVOICE_NUMBER_MISSING",
                details=details,
            )
        )
    if invoice.gross_amount < 0:
        issues.append(
            ValidationIssue(
                f"Ujemna kwota w fakturze {invoice.number}",
                code="INVOICE_GROSS_NEGATIVE",
                details=details,
            )
        )
    if not invoice.contractor_name:
        issues.append(
            ValidationIssue(
                f"Brak nazwy kontrahenta w fakturze {invoice.number}",
                code="CONTRACTOR_NAME_MISSING",
                details=details,
            )
        )
    return issues


def validate_document(document: EPPDocument) -> list[ValidationIssue]:
    """Run every invoice check and return the issues in document order."""

    issues: list[ValidationIssue] = []
    for invoice in document.invoices:
        issues.extend(_check_invoice(invoice))
    return issues


ISSUE_COLUMNS = ("Kod", "Faktura", "Opis")


def export_report(issues: Iterable[ValidationIssue], *, destination: Path) -> Path:
    """Write *issues* to an Excel log at *destination* and return its path."""

    destination.parent.mkdir(parents=True, exist_ok=True)

    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = "Problemy"
    worksheet.append(list(ISSUE_COLUMNS))
    for issue in issues:
        worksheet.append(issue.as_cells())

    workbook.save(destination)
    return destination


__all__ = ["ISSUE_COLUMNS", "ValidationIssue", "export_report", "validate_document"]
