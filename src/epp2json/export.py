"""JSON serialisation of parsed EPP documents."""

from __future__ import annotations

import json
import logging
from dataclasses import fields, is_dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from .config import ParseOptions
from .errors import EPPExportError
from .invoices import EPPDocument, Invoice
from .parser import parse_epp_file

LOGGER = logging.getLogger("epp2json.export")

JSON_INDENT = 2


def format_timestamp(value: datetime) -> str:
    """Render *value* as ``YYYY-MM-DDTHH:MM:SSZ``."""

    return value.replace(microsecond=0).isoformat() + "Z"


def _to_plain(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return {
            item.metadata.get("json", item.name): _to_plain(getattr(value, item.name))
            for item in fields(value)
        }
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, (list, tuple)):
        return [_to_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_plain(item) for key, item in value.items()}
    return value


def document_to_dict(document: EPPDocument) -> dict[str, Any]:
    """Return the JSON-ready mapping for *document*."""

    return _to_plain(document)


def simplify_invoice(invoice: Invoice) -> dict[str, Any]:
    """Return the short summary of *invoice* used by ``--simple`` exports."""

    return {
        "typ": invoice.type,
        "numer": invoice.number,
        "kontrahent": invoice.contractor_name,
        "kwota": invoice.gross_amount,
        "data": format_timestamp(invoice.issue_date),
        "liczba_pozycji": len(invoice.items),
    }


def _dumps(payload: Any) -> str:
    try:
        return json.dumps(
            payload,
            indent=JSON_INDENT,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as exc:
        raise EPPExportError(
            "błąd podczas konwersji do JSON", phase="JSON conversion"
        ) from exc


def convert_to_json(document: EPPDocument, *, simple: bool = False) -> str:
    """Serialise *document* to indented JSON text.

    With ``simple`` the output is a flat list of invoice summaries instead of
    the full ``info``/``faktury`` object. Non-finite amounts (``NaN``,
    ``Inf``) cannot be represented and raise
    :class:`~epp2json.errors.EPPExportError`.
    """

    if simple:
        return _dumps([simplify_invoice(invoice) for invoice in document.invoices])
    return _dumps(document_to_dict(document))


def write_json_file(data: str, destination: Path | str) -> Path:
    target = Path(destination)
    try:
        target.write_text(data, encoding="utf-8")
    except OSError as exc:
        raise EPPExportError("błąd podczas zapisu pliku", phase="file write") from exc
    LOGGER.info("Zapisano %s", target)
    return target


def convert_epp_to_json(path: Path | str, options: ParseOptions | None = None) -> str:
    """Parse the EPP file at *path* and return its JSON text."""

    return convert_to_json(parse_epp_file(path, options))


__all__ = [
    "convert_epp_to_json",
    "convert_to_json",
    "document_to_dict",
    "format_timestamp",
    "simplify_invoice",
    "write_json_file",
]
