from __future__ import annotations

from openpyxl import load_workbook

from epp2json.invoices import EPPDocument, Invoice
from epp2json.validator import export_report, validate_document


def test_valid_document_has_no_issues():
    document = EPPDocument(
        invoices=(Invoice(type="FS", number="FS 1", contractor_name="ACME", gross_amount=1.0),)
    )

    assert validate_document(document) == []


def test_detects_missing_and_negative_values():
    document = EPPDocument(
        invoices=(
            Invoice(type="FZ", number="", contractor_name="ACME"),
            Invoice(type="KFZ", number="K 1", contractor_name="", gross_amount=-12.3),
        )
    )

    issues = validate_document(document)

    assert [issue.code for issue in issues] == [
        "INVOICE_NUMBER_MISSING",
        "INVOICE_GROSS_NEGATIVE",
        "CONTRACTOR_NAME_MISSING",
    ]
    assert issues[0].message == "Brak numeru faktury (typ: FZ)"
    assert issues[1].details["invoice"] == "K 1"


def test_export_report_writes_workbook(tmp_path):
    document = EPPDocument(invoices=(Invoice(type="FS", number="FS 9"),))
    destination = tmp_path / "logs" / "problemy.xlsx"

    path = export_report(validate_document(document), destination=destination)

    rows = list(load_workbook(path)["Problemy"].iter_rows(values_only=True))
    assert rows[0] == ("Kod", "Faktura", "Opis")
    assert rows[1] == (
        "CONTRACTOR_NAME_MISSING",
        "FS 9",
        "Brak nazwy kontrahenta w fakturze FS 9",
    )
