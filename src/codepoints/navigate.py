from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from .chars import char_positions
from .document import TextBuffer
from .lines import Track, line_starts, offsets_at
from .parsing import ParsedOffset
from .spans import Position, Selection


logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(slots=True)
class Peeked(Generic[T]):
    current: T
    next: T | None = None


def peeking(items: Iterable[T]) -> Iterator[Peeked[T]]:
    """Pair every item with its successor; the last item has ``next=None``."""
    pending: Peeked[T] | None = None
    for item in items:
        if pending is not None:
            pending.next = item
            yield pending
        pending = Peeked(current=item)
    if pending is not None:
        yield pending


def resolve_byte(doc: TextBuffer, target: int) -> Selection:
    """Select the character at UTF-8 byte offset ``target``.

    An offset on a character boundary gives a cursor. An offset inside a
    multi-byte character (or inside a CRLF) selects that whole character.
    Offsets past the end give a cursor at the end of the document.
    """
    last: Position | None = None
    for item in peeking(line_starts(doc, track=Track.BYTE)):
        if item.next is not None and item.next.byte_offset <= target:
            continue
        prev: Position | None = None
        for info in char_positions(doc, item.current):
            if info.byte_offset == target:
                logger.debug("byte %d: boundary at %s", target, info.pos.format())
                return Selection.cursor(info.pos)
            if info.byte_offset > target:
                anchor = prev if prev is not None else info.pos
                logger.debug("byte %d: inside char %s-%s", target, anchor.format(), info.pos.format())
                return Selection(anchor=anchor, active=info.pos)
            prev = info.pos
        last = prev
        break
    if last is None:
        last = Position(0, 0)
    logger.debug("byte %d: past end of document", target)
    return Selection.cursor(last)


def resolve_char(doc: TextBuffer, target: int) -> Selection:
    """Place a cursor at character offset ``target``, clamped to the document."""
    last: Position | None = None
    for item in peeking(line_starts(doc, track=Track.CHAR)):
        if item.next is not None and item.next.char_offset <= target:
            continue
        for info in char_positions(doc, item.current):
            if info.char_offset >= target:
                logger.debug("char %d: at %s", target, info.pos.format())
                return Selection.cursor(info.pos)
            last = info.pos
        break
    return Selection.cursor(last if last is not None else Position(0, 0))


def goto_byte(doc: TextBuffer, offset: ParsedOffset | int, cursor: Position | None = None) -> Selection:
    """Resolve an absolute or cursor-relative byte offset."""
    if isinstance(offset, int):
        offset = ParsedOffset(is_relative=False, value=offset)
    anchor = offsets_at(doc, cursor).byte if cursor is not None else 0
    return resolve_byte(doc, offset.resolve(anchor))


def goto_char(doc: TextBuffer, offset: ParsedOffset | int, cursor: Position | None = None) -> Selection:
    """Resolve an absolute or cursor-relative character offset."""
    if isinstance(offset, int):
        offset = ParsedOffset(is_relative=False, value=offset)
    anchor = offsets_at(doc, cursor).char if cursor is not None else 0
    return resolve_char(doc, offset.resolve(anchor))
