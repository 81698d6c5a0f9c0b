from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

from .document import EndOfLine, TextBuffer
from .errors import LineEndingError
from .lines import LineInfo
from .spans import Offsets, Position
from .utf16 import code_unit_values, from_code_units, is_high_surrogate, utf8_bytes, utf8_length


_BROKEN_CRLF_RE = re.compile(r"\r(?!\n)|(?<!\r)\n")


def advance(pos: Position, doc: TextBuffer, count: int = 1) -> Position | None:
    """Return the position ``count`` logical characters after ``pos``.

    A surrogate pair is one character and so is a line terminator. Returns
    ``None`` when the walk runs off the end of the document.
    """
    line_num, col = pos.line, pos.column
    if line_num >= doc.line_count:
        return None
    line = doc.line_at(line_num)
    for _ in range(count):
        if col >= len(line):
            line_num += 1
            col = 0
            if line_num >= doc.line_count:
                return None
            line = doc.line_at(line_num)
        elif is_high_surrogate(line[col]):
            col += 2
        else:
            col += 1
    return Position(line_num, col)


@dataclass(frozen=True, slots=True)
class CharInfo:
    """One step of a buffer walk.

    ``char`` is the buffer text covered by the step, so a CRLF terminator is
    ``"\\r\\n"``. The last record of a walk has ``char == ""``.
    """

    char: str
    pos: Position
    byte_offset: int
    char_offset: int

    @property
    def code_point(self) -> int | None:
        return ord(self.char[0]) if self.char else None

    @property
    def at_end(self) -> bool:
        return self.char == ""


def char_positions(doc: TextBuffer, start: LineInfo | None = None) -> Iterator[CharInfo]:
    if start is None:
        pos, byte_offset, char_offset = Position(0, 0), 0, 0
    else:
        pos, byte_offset, char_offset = start.pos, start.byte_offset, start.char_offset
    while True:
        next_pos = advance(pos, doc)
        if next_pos is None:
            yield CharInfo(char="", pos=pos, byte_offset=byte_offset, char_offset=char_offset)
            return
        char = from_code_units(doc.get_text(pos, next_pos))
        yield CharInfo(char=char, pos=pos, byte_offset=byte_offset, char_offset=char_offset)
        byte_offset += utf8_length(char)
        char_offset += 1
        pos = next_pos


def document_text(doc: TextBuffer, start: Position, end: Position, max_length: int | None = None) -> str:
    """Text between two positions with every terminator normalized to ``"\\n"``.

    Surrogate pairs are joined, so the result indexes by code point.
    ``max_length`` truncates the normalized text.
    """
    text = doc.get_text(start, end)
    if doc.eol is EndOfLine.CRLF:
        m = _BROKEN_CRLF_RE.search(text)
        if m is not None:
            line = min(start.line, end.line) + text.count("\n", 0, m.start())
            raise LineEndingError("document contains broken CRLF pairs", line=line)
        text = text.replace("\r\n", "\n")
    return from_code_units(text)[:max_length]


@dataclass(frozen=True, slots=True)
class CharDetails:
    char: str
    code_point: int
    utf8: bytes
    code_units: tuple[int, ...]
    byte_offset: int
    char_offset: int


def char_details(text: str, eol: EndOfLine, start: Offsets) -> Iterator[CharDetails]:
    """Describe each logical character of normalized ``text``.

    Under CRLF a ``"\\n"`` is reported with the bytes and code units of
    ``"\\r\\n"``; ``char`` stays ``"\\n"``. Offsets count from ``start``.
    """
    byte_offset, char_offset = start.byte, start.char
    for ch in from_code_units(text):
        if ch == "\r":
            raise LineEndingError(f"unnormalized carriage return at char offset {char_offset}")
        physical = eol.value if ch == "\n" else ch
        utf8 = utf8_bytes(physical)
        yield CharDetails(
            char=ch,
            code_point=ord(ch),
            utf8=utf8,
            code_units=code_unit_values(physical),
            byte_offset=byte_offset,
            char_offset=char_offset,
        )
        byte_offset += len(utf8)
        char_offset += 1
