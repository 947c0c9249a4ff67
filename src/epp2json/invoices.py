"""Invoice records produced from EPP exports."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .utils import ZERO_TIME


def _json(name: str) -> dict[str, str]:
    return {"json": name}


@dataclass(frozen=True)
class InvoiceItem:
    """A single invoice line taken from a ``[ZAWARTOSC]`` block."""

    vat_rate: str = field(default="", metadata=_json("stawka_vat"))
    quantity: float = field(default=0.0, metadata=_json("ilosc"))
    net_price: float = field(default=0.0, metadata=_json("cena_netto"))
    vat_amount: float = field(default=0.0, metadata=_json("kwota_vat"))
    gross_price: float = field(default=0.0, metadata=_json("cena_brutto"))
    net_total: float = field(default=0.0, metadata=_json("wartosc_netto"))
    vat_total: float = field(default=0.0, metadata=_json("wartosc_vat"))
    gross_total: float = field(default=0.0, metadata=_json("wartosc_brutto"))


@dataclass(frozen=True)
class Invoice:
    """Purchase (``FZ``/``KFZ``) or sale (``FS``/``KFS``) document.

    ``document_number`` is part of the JSON layout but no header column
    feeds it, so it stays empty for parsed invoices.
    """

    type: str = field(default="", metadata=_json("typ"))
    number: str = field(default="", metadata=_json("numer"))
    internal_number: str = field(default="", metadata=_json("numer_wewnetrzny"))
    document_number: str = field(default="", metadata=_json("numer_dokumentu"))
    date: datetime = field(default=ZERO_TIME, metadata=_json("data"))
    issue_date: datetime = field(default=ZERO_TIME, metadata=_json("data_wystawienia"))
    sale_date: datetime = field(default=ZERO_TIME, metadata=_json("data_sprzedazy"))
    contractor_code: str = field(default="", metadata=_json("kod_kontrahenta"))
    contractor_name: str = field(default="", metadata=_json("nazwa_kontrahenta"))
    contractor_full_name: str = field(
        default="", metadata=_json("pelna_nazwa_kontrahenta")
    )
    city: str = field(default="", metadata=_json("miasto"))
    postal_code: str = field(default="", metadata=_json("kod_pocztowy"))
    address: str = field(default="", metadata=_json("adres"))
    nip: str = field(default="", metadata=_json("nip"))
    category: str = field(default="", metadata=_json("category"))
    net_amount: float = field(default=0.0, metadata=_json("kwota_netto"))
    vat_amount: float = field(default=0.0, metadata=_json("kwota_vat"))
    gross_amount: float = field(default=0.0, metadata=_json("kwota_brutto"))
    currency: str = field(default="", metadata=_json("waluta"))
    payment_date: datetime = field(default=ZERO_TIME, metadata=_json("termin_platnosci"))
    registrar: str = field(default="", metadata=_json("rejestrator"))
    items: tuple[InvoiceItem, ...] = field(default_factory=tuple, metadata=_json("pozycje"))


@dataclass(frozen=True)
class EPPDocument:
    """Everything extracted from one EPP file."""

    info: dict[str, str] = field(default_factory=dict, metadata=_json("info"))
    invoices: tuple[Invoice, ...] = field(default_factory=tuple, metadata=_json("faktury"))


__all__ = ["EPPDocument", "Invoice", "InvoiceItem"]
