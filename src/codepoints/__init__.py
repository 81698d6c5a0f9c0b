from __future__ import annotations

from .chars import CharDetails, CharInfo, advance, char_details, char_positions, document_text
from .document import EndOfLine, TextBuffer, TextDocument
from .errors import CodepointsError, InputError, LineEndingError
from .lines import LineInfo, Track, line_starts, offsets_at
from .navigate import goto_byte, goto_char, resolve_byte, resolve_char
from .parsing import ParsedOffset, parse_code_point, parse_offset
from .report import ReportStore, format_char_details, show_char_info
from .spans import Offsets, Position, Selection

__all__ = [
    "CharDetails",
    "CharInfo",
    "CodepointsError",
    "EndOfLine",
    "InputError",
    "LineEndingError",
    "LineInfo",
    "Offsets",
    "ParsedOffset",
    "Position",
    "ReportStore",
    "Selection",
    "TextBuffer",
    "TextDocument",
    "Track",
    "advance",
    "char_details",
    "char_positions",
    "document_text",
    "format_char_details",
    "goto_byte",
    "goto_char",
    "line_starts",
    "offsets_at",
    "parse_code_point",
    "parse_offset",
    "resolve_byte",
    "resolve_char",
    "show_char_info",
]
