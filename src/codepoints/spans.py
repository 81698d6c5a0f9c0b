from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A position in a text buffer.

    Both fields are 0-based; the column counts UTF-16 code units.
    """

    line: int
    column: int

    def format(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Selection:
    """Anchor/active pair; empty when both ends coincide."""

    anchor: Position
    active: Position

    @classmethod
    def cursor(cls, pos: Position) -> Selection:
        return cls(anchor=pos, active=pos)

    @property
    def is_empty(self) -> bool:
        return self.anchor == self.active

    @property
    def start(self) -> Position:
        return min(self.anchor, self.active)

    @property
    def end(self) -> Position:
        return max(self.anchor, self.active)

    def format(self) -> str:
        if self.is_empty:
            return self.anchor.format()
        return f"{self.anchor.format()}-{self.active.format()}"


@dataclass(frozen=True, slots=True)
class Offsets:
    """Absolute UTF-8 byte and character offsets from document start."""

    byte: int
    char: int
