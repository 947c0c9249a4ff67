"""Split raw EPP text into its info block and header/content sections."""

from __future__ import annotations

from dataclasses import dataclass, field

HEADER_TAG = "[NAGLOWEK]"
CONTENT_TAG = "[ZAWARTOSC]"
INFO_TAG = "[INFO]"


@dataclass(frozen=True)
class Section:
    """One ``[NAGLOWEK]`` block with the text following ``[ZAWARTOSC]``."""

    header: str
    content: str


@dataclass(frozen=True)
class EPPSections:
    """The info line and every complete section, in document order."""

    info: str = ""
    sections: tuple[Section, ...] = field(default_factory=tuple)


def split_sections(text: str) -> EPPSections:
    """Split *text* on the EPP section markers.

    Blocks lacking a ``[ZAWARTOSC]`` marker are dropped.
    """

    blocks = text.split(HEADER_TAG)

    info = ""
    preamble = blocks[0]
    idx = preamble.find(INFO_TAG)
    if idx >= 0:
        info = preamble[idx + len(INFO_TAG):].strip()

    sections: list[Section] = []
    for block in blocks[1:]:
        idx = block.find(CONTENT_TAG)
        if idx < 0:
            continue
        sections.append(
            Section(
                header=block[:idx].strip(),
                content=block[idx + len(CONTENT_TAG):].strip(),
            )
        )

    return EPPSections(info=info, sections=tuple(sections))


__all__ = ["CONTENT_TAG", "HEADER_TAG", "INFO_TAG", "EPPSections", "Section", "split_sections"]
