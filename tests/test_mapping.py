from __future__ import annotations

from datetime import datetime

import pytest

from epp2json.invoices import Invoice, InvoiceItem
from epp2json.mapping import HEADER_FIELDS, map_header, map_item
from epp2json.utils import ZERO_TIME


def _header_fields(length: int = 47) -> list[str]:
    fields = [f"col{index}" for index in range(length)]
    values = {
        0: "FZ",
        21: "20230101000000",
        22: "20230102000000",
        23: "20230103000000",
        27: "100.50",
        28: "23.12",
        29: "123.62",
        34: "20230131000000",
    }
    for index, value in values.items():
        if index < length:
            fields[index] = value
    return fields


def test_header_mapping_reads_documented_offsets():
    invoice = map_header(_header_fields())

    assert invoice.type == "FZ"
    assert invoice.number == "col4"
    assert invoice.internal_number == "col6"
    assert invoice.contractor_code == "col11"
    assert invoice.contractor_name == "col12"
    assert invoice.contractor_full_name == "col13"
    assert invoice.city == "col14"
    assert invoice.postal_code == "col15"
    assert invoice.address == "col16"
    assert invoice.nip == "col17"
    assert invoice.category == "col19"
    assert invoice.date == datetime(2023, 1, 1)
    assert invoice.issue_date == datetime(2023, 1, 2)
    assert invoice.sale_date == datetime(2023, 1, 3)
    assert invoice.net_amount == 100.50
    assert invoice.vat_amount == 23.12
    assert invoice.gross_amount == 123.62
    assert invoice.payment_date == datetime(2023, 1, 31)
    assert invoice.registrar == "col41"
    assert invoice.currency == "col46"
    assert invoice.items == ()
    assert invoice.document_number == ""


@pytest.mark.parametrize("length", [0, 1, 5, 12, 18, 22, 28, 30, 40, 46])
def test_short_header_leaves_missing_columns_at_defaults(length):
    invoice = map_header(_header_fields(length))
    defaults = Invoice()

    for spec in HEADER_FIELDS:
        if spec.index >= length:
            assert getattr(invoice, spec.attribute) == getattr(defaults, spec.attribute)
        else:
            assert getattr(invoice, spec.attribute) != getattr(defaults, spec.attribute)


def test_category_needs_twenty_columns():
    assert map_header(_header_fields(19)).category == ""
    assert map_header(_header_fields(20)).category == "col19"


def test_header_with_malformed_values_degrades():
    fields = _header_fields()
    fields[22] = "2023"
    fields[29] = "12,50"

    invoice = map_header(fields)

    assert invoice.issue_date == ZERO_TIME
    assert invoice.gross_amount == 0.0


def test_item_mapping():
    item = map_item(["23", "2", "50.00", "11.50", "61.50", "100.00", "23.00", "123.00"])

    assert item == InvoiceItem(
        vat_rate="23",
        quantity=2.0,
        net_price=50.0,
        vat_amount=11.5,
        gross_price=61.5,
        net_total=100.0,
        vat_total=23.0,
        gross_total=123.0,
    )


def test_short_item_uses_defaults():
    item = map_item(["8", "3"])

    assert item.vat_rate == "8"
    assert item.quantity == 3.0
    assert item.net_price == 0.0
    assert item.gross_total == 0.0
