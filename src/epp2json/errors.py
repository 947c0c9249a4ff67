"""Exception hierarchy for EPP conversion."""

from __future__ import annotations


class EPPError(Exception):
    """Base error raised while converting an EPP file.

    ``phase`` names the step that failed so the command line can report it
    without inspecting the exception type.
    """

    phase = "epp"

    def __init__(self, message: str, *, phase: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if phase is not None:
            self.phase = phase

    def __str__(self) -> str:
        cause = self.__cause__
        if cause is not None:
            return f"{self.message}: {cause}"
        return self.message


class EPPReadError(EPPError):
    """The source file could not be opened or read."""

    phase = "read"


class MalformedLineError(EPPError):
    """A line could not be split into CSV fields."""

    phase = "tokenize"

    def __init__(self, message: str, *, line: str = "") -> None:
        super().__init__(message)
        self.line = line


class EPPParseError(EPPError):
    """A tokenization failure surfaced while assembling the document."""

    phase = "parse"


class EPPExportError(EPPError):
    """Conversion to JSON or writing the output file failed."""

    phase = "JSON conversion"


__all__ = [
    "EPPError",
    "EPPReadError",
    "EPPParseError",
    "EPPExportError",
    "MalformedLineError",
]
