"""Assemble an :class:`~epp2json.invoices.EPPDocument` from EPP text."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import reduce
from pathlib import Path

from .config import ParseOptions, default_parse_options
from .encoding import read_epp_text
from .errors import EPPParseError, MalformedLineError
from .invoices import EPPDocument, Invoice
from .mapping import map_header, map_item
from .sections import Section, split_sections
from .utils import split_csv_line

LOGGER = logging.getLogger("epp2json.parser")

PURCHASE_TYPE = "FZ"
PURCHASE_CORRECTION_TYPE = "KFZ"
SALE_TYPE = "FS"
SALE_CORRECTION_TYPE = "KFS"


def _tokenize(line: str, phase: str, message: str) -> list[str]:
    try:
        return split_csv_line(line)
    except MalformedLineError as exc:
        raise EPPParseError(message, phase=phase) from exc


def parse_info(info: str) -> dict[str, str]:
    """Extract ``version``, ``system`` and ``company`` from the info line."""

    fields = _tokenize(info, "info parse", "błąd podczas parsowania info")

    result: dict[str, str] = {}
    if len(fields) >= 2:
        result["version"] = fields[0]
        if len(fields) > 3:
            result["system"] = fields[3]
        if len(fields) > 5:
            result["company"] = fields[5]
    return result


def should_include(invoice_type: str, options: ParseOptions) -> bool:
    """Return whether a section of *invoice_type* is kept.

    The option flags only gate the correction documents; ``FZ`` and ``FS``
    pass whatever the options say.
    """

    return (
        invoice_type == PURCHASE_TYPE
        or (invoice_type == PURCHASE_CORRECTION_TYPE and options.include_fz)
        or invoice_type == SALE_TYPE
        or (invoice_type == SALE_CORRECTION_TYPE and options.include_fs)
    )


@dataclass(frozen=True)
class _Accumulator:
    pending: Invoice | None = None
    completed: tuple[Invoice, ...] = ()

    def flushed(self) -> tuple[Invoice, ...]:
        if self.pending is not None and self.pending.type:
            return self.completed + (self.pending,)
        return self.completed


def _make_step(options: ParseOptions):
    def step(acc: _Accumulator, section: Section) -> _Accumulator:
        if not section.header.strip():
            return acc

        fields = _tokenize(
            section.header.strip(), "header parse", "błąd podczas parsowania nagłówka"
        )
        if not fields:
            return acc

        invoice_type = fields[0]
        if not should_include(invoice_type, options):
            LOGGER.debug("Pominięto sekcję typu %r", invoice_type)
            return acc

        invoice = map_header(fields)
        content = _tokenize(
            section.content, "item parse", "błąd podczas parsowania pozycji"
        )
        if invoice.type:
            # one [ZAWARTOSC] record per section becomes the only item
            invoice = replace(invoice, items=(map_item(content),))

        return _Accumulator(pending=invoice, completed=acc.flushed())

    return step


def parse_epp_string(
    content: str, options: ParseOptions | None = None
) -> EPPDocument:
    """Parse decoded EPP *content* into a document."""

    options = options or default_parse_options()
    parts = split_sections(content)
    info = parse_info(parts.info)

    final = reduce(_make_step(options), parts.sections, _Accumulator())
    invoices = final.flushed()

    LOGGER.info(
        "Sparsowano %d faktur z %d sekcji", len(invoices), len(parts.sections)
    )
    return EPPDocument(info=info, invoices=invoices)


def parse_epp_file(
    path: Path | str, options: ParseOptions | None = None
) -> EPPDocument:
    """Read a Windows-1250 EPP file and parse it."""

    LOGGER.info("Parsowanie pliku %s", path)
    return parse_epp_string(read_epp_text(path), options)


__all__ = [
    "PURCHASE_CORRECTION_TYPE",
    "PURCHASE_TYPE",
    "SALE_CORRECTION_TYPE",
    "SALE_TYPE",
    "parse_epp_file",
    "parse_epp_string",
    "parse_info",
    "should_include",
]
