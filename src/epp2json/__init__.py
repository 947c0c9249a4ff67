"""Convert EPP (EDI++) accounting exports into JSON.

The most common entry points are re-exported here::

    from epp2json import parse_epp_file, convert_to_json

    document = parse_epp_file("eksport.epp")
    print(convert_to_json(document))
"""

from .config import ParseOptions, default_parse_options
from .errors import EPPError, EPPExportError, EPPParseError, EPPReadError, MalformedLineError
from .export import convert_epp_to_json, convert_to_json, document_to_dict, write_json_file
from .invoices import EPPDocument, Invoice, InvoiceItem
from .parser import parse_epp_file, parse_epp_string

__version__ = "1.0.0"

__all__ = [
    "EPPDocument",
    "EPPError",
    "EPPExportError",
    "EPPParseError",
    "EPPReadError",
    "Invoice",
    "InvoiceItem",
    "MalformedLineError",
    "ParseOptions",
    "convert_epp_to_json",
    "convert_to_json",
    "default_parse_options",
    "document_to_dict",
    "parse_epp_file",
    "parse_epp_string",
    "write_json_file",
]
