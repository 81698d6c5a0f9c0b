from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .chars import CharDetails, advance, char_details, document_text
from .document import TextBuffer
from .lines import offsets_at
from .spans import Selection


MAX_REPORT_CHARS = 1000


def hex_digits(n: int, min_width: int = 0) -> str:
    """Lowercase hex, zero-padded to ``min_width`` and to an even digit count below four."""
    out = format(n, "x")
    while len(out) < min_width or (len(out) < 4 and len(out) % 2 != 0):
        out = "0" + out
    return out


def _quote(char: str) -> str:
    # Lone surrogates cannot be printed; escape them as JSON.stringify does.
    ascii_only = any(0xD800 <= ord(c) < 0xE000 for c in char)
    return json.dumps(char, ensure_ascii=ascii_only)


def format_char_details(details: Iterable[CharDetails], *, title_lines: Sequence[str] = ()) -> list[str]:
    out = list(title_lines)
    for d in details:
        units = "".join("\\u" + hex_digits(u, 4) for u in d.code_units)
        out.extend(
            [
                f"Character:  {_quote(d.char)}",
                f"Byte offset: {d.byte_offset}",
                f"Char offset: {d.char_offset}",
                f"Code point:  U+{hex_digits(d.code_point)}",
                f"UTF-8:       {' '.join(hex_digits(b) for b in d.utf8)}",
                f'UTF-16:     "{units}"',
                "",
            ]
        )
    return out


@dataclass(slots=True)
class ReportStore:
    """Generated reports, keyed by sequential names.

    Names are never reused within one store, even after ``discard``.
    """

    prefix: str = "Char Details"
    _counter: int = 0
    _reports: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def add(self, lines: Iterable[str]) -> str:
        self._counter += 1
        name = f"{self.prefix} {self._counter}"
        self._reports[name] = tuple(lines)
        return name

    def get(self, name: str) -> str:
        return "\n".join(self._reports[name])

    def discard(self, name: str) -> None:
        self._reports.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return name in self._reports

    def __len__(self) -> int:
        return len(self._reports)


def show_char_info(doc: TextBuffer, selection: Selection, store: ReportStore, *, name: str = "<memory>") -> str:
    """Build the character report for ``selection`` and return its name in ``store``.

    An empty selection reports the single character after the cursor.
    """
    start, end = selection.start, selection.end
    if selection.is_empty:
        end = advance(start, doc) or start
    text = document_text(doc, start, end, max_length=MAX_REPORT_CHARS)
    title = [f"Name: {name}", f"Range: {start.format()}-{end.format()}", ""]
    lines = format_char_details(char_details(text, doc.eol, offsets_at(doc, start)), title_lines=title)
    return store.add(lines)
