from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Flag

from .document import TextBuffer
from .spans import Offsets, Position
from .utf16 import code_point_length, utf8_length


class Track(Flag):
    """Which offsets :func:`line_starts` computes.

    An untracked offset keeps its starting value and must not be compared.
    """

    BYTE = 1
    CHAR = 2
    BOTH = BYTE | CHAR


@dataclass(frozen=True, slots=True)
class LineInfo:
    pos: Position
    text: str
    byte_offset: int
    char_offset: int

    @property
    def offsets(self) -> Offsets:
        return Offsets(byte=self.byte_offset, char=self.char_offset)


def line_starts(doc: TextBuffer, *, track: Track = Track.BOTH) -> Iterator[LineInfo]:
    """Yield the start of every line with its absolute offsets."""
    eol_bytes = doc.eol.byte_length
    byte_offset = 0
    char_offset = 0
    for line in range(doc.line_count):
        text = doc.line_at(line)
        yield LineInfo(pos=Position(line, 0), text=text, byte_offset=byte_offset, char_offset=char_offset)
        if Track.BYTE in track:
            byte_offset += utf8_length(text) + eol_bytes
        if Track.CHAR in track:
            char_offset += code_point_length(text) + 1


def offsets_at(doc: TextBuffer, pos: Position) -> Offsets:
    """Absolute offsets of ``pos``.

    Positions past the end of a line count as the line end; positions past
    the last line count as the document end.
    """
    last: LineInfo | None = None
    for info in line_starts(doc):
        if info.pos.line == pos.line:
            prefix = info.text[: max(0, pos.column)]
            return Offsets(
                byte=info.byte_offset + utf8_length(prefix),
                char=info.char_offset + code_point_length(prefix),
            )
        if info.pos.line > pos.line:
            return info.offsets
        last = info
    if last is None:
        return Offsets(byte=0, char=0)
    return Offsets(
        byte=last.byte_offset + utf8_length(last.text),
        char=last.char_offset + code_point_length(last.text),
    )
