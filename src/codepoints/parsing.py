from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import InputError


_OFFSET_RE = re.compile(r"([+-])?(?:0x([0-9a-f]+)|([0-9]+))", re.IGNORECASE)
_CODE_POINT_RE = re.compile(r"(?:(?:0x|\\x|\\u|u\+)([0-9a-f]+)|([0-9]+))", re.IGNORECASE)

MAX_CODE_POINT = 0x10FFFF


@dataclass(frozen=True, slots=True)
class ParsedOffset:
    """An offset typed by the user; relative offsets apply to an anchor."""

    is_relative: bool
    value: int

    def resolve(self, anchor: int) -> int:
        return anchor + self.value if self.is_relative else self.value


def parse_offset(text: str) -> ParsedOffset:
    m = _OFFSET_RE.fullmatch(text.strip())
    if m is None:
        raise InputError(
            text=text,
            message="invalid offset",
            hint="use a decimal or 0x-prefixed hex number, optionally signed for a relative move",
        )
    sign, hex_digits, dec_digits = m.groups()
    value = int(hex_digits, 16) if hex_digits is not None else int(dec_digits)
    if sign == "-":
        value = -value
    return ParsedOffset(is_relative=sign is not None, value=value)


def parse_code_point(text: str) -> int:
    m = _CODE_POINT_RE.fullmatch(text.strip())
    if m is None:
        raise InputError(
            text=text,
            message="invalid code point",
            hint=r"accepted forms: 65, 0x41, \x41, \u0041, U+0041",
        )
    hex_digits, dec_digits = m.groups()
    value = int(hex_digits, 16) if hex_digits is not None else int(dec_digits)
    if value > MAX_CODE_POINT:
        raise InputError(text=text, message=f"code point out of range (max U+{MAX_CODE_POINT:X})")
    return value
