from __future__ import annotations

from dataclasses import dataclass


class CodepointsError(Exception):
    pass


@dataclass(slots=True)
class InputError(CodepointsError):
    text: str
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.text!r}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


@dataclass(slots=True)
class LineEndingError(CodepointsError):
    """Text reached a stage that requires normalized line endings without them."""

    message: str
    line: int | None = None

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"
