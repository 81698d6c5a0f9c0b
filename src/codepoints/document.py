from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from .spans import Position
from .utf16 import to_code_units


logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class EndOfLine(str, Enum):
    LF = "\n"
    CRLF = "\r\n"

    @property
    def byte_length(self) -> int:
        return len(self.value)


class TextBuffer(Protocol):
    """The host text buffer the engine reads from.

    ``line_at`` returns a line's text without its terminator, as a code-unit
    string (see :mod:`codepoints.utf16`).
    """

    @property
    def line_count(self) -> int: ...

    @property
    def eol(self) -> EndOfLine: ...

    def line_at(self, line: int) -> str: ...

    def get_text(self, start: Position, end: Position) -> str: ...


@dataclass(frozen=True, slots=True)
class TextDocument:
    """An immutable in-memory buffer with a single line-ending style."""

    lines: tuple[str, ...]
    eol: EndOfLine = EndOfLine.LF
    name: str = "<memory>"

    @classmethod
    def from_text(cls, text: str, *, name: str = "<memory>", eol: EndOfLine | None = None) -> TextDocument:
        """Split ``text`` into lines.

        Every terminator ends a line, but the document has one line-ending style,
        taken from the first terminator unless ``eol`` is given. Mixed endings are
        normalized to that style, as an editor does on load, so byte offsets can
        differ from the original text.
        """
        if eol is None:
            m = _LINE_BREAK_RE.search(text)
            eol = EndOfLine.CRLF if m is not None and m.group(0) == "\r\n" else EndOfLine.LF
        if len(set(_LINE_BREAK_RE.findall(text))) > 1:
            logger.debug("%s: mixed line endings, normalizing to %s", name, eol.name)
        lines = tuple(to_code_units(line) for line in _LINE_BREAK_RE.split(text))
        return cls(lines=lines, eol=eol, name=name)

    @classmethod
    def from_path(cls, path: str | Path) -> TextDocument:
        p = Path(path).expanduser().resolve()
        text = p.read_bytes().decode("utf-8")
        return cls.from_text(text, name=str(p))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, line: int) -> str:
        if not 0 <= line < len(self.lines):
            raise IndexError(f"line {line} out of range (document has {len(self.lines)} lines)")
        return self.lines[line]

    def validate_position(self, pos: Position) -> Position:
        """Clamp ``pos`` into the document, the way an editor validates ranges."""
        if pos.line < 0:
            return Position(0, 0)
        if pos.line >= len(self.lines):
            return self.end_position()
        return Position(pos.line, max(0, min(pos.column, len(self.lines[pos.line]))))

    def end_position(self) -> Position:
        last = len(self.lines) - 1
        return Position(last, len(self.lines[last]))

    def get_text(self, start: Position, end: Position) -> str:
        start = self.validate_position(start)
        end = self.validate_position(end)
        if end < start:
            start, end = end, start
        if start.line == end.line:
            return self.lines[start.line][start.column : end.column]
        parts = [self.lines[start.line][start.column :]]
        parts.extend(self.lines[start.line + 1 : end.line])
        parts.append(self.lines[end.line][: end.column])
        return self.eol.value.join(parts)
