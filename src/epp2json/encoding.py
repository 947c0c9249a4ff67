"""Decode Windows-1250 EPP exports into text."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import EPPReadError

LOGGER = logging.getLogger("epp2json.encoding")

SOURCE_ENCODING = "cp1250"


def decode_epp_bytes(data: bytes) -> str:
    """Decode *data* using the Windows-1250 code page.

    The five byte values left undefined by the code page become U+FFFD.
    """

    return data.decode(SOURCE_ENCODING, errors="replace")


def read_epp_text(path: Path | str) -> str:
    """Read the whole file at *path* and return its decoded text."""

    source = Path(path)
    try:
        handle = source.open("rb")
    except OSError as exc:
        raise EPPReadError(
            f"nie można otworzyć pliku {source}", phase="file open"
        ) from exc

    with handle:
        try:
            data = handle.read()
        except OSError as exc:
            raise EPPReadError("błąd podczas odczytu pliku", phase="read") from exc

    LOGGER.debug("Odczytano %d bajtów z %s", len(data), source)
    return decode_epp_bytes(data)


__all__ = ["SOURCE_ENCODING", "decode_epp_bytes", "read_epp_text"]
