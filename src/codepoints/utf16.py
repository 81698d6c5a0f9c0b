"""Conversions between Python strings and UTF-16 code-unit strings.

Editor buffers index columns in UTF-16 code units. Buffer text is held as a
"code-unit string": a ``str`` in which every character is a single code unit,
so astral characters appear as two surrogate characters and ``len()`` and
slicing agree with editor columns.
"""

from __future__ import annotations


HIGH_SURROGATES = range(0xD800, 0xDC00)


def is_high_surrogate(unit: str) -> bool:
    return ord(unit) in HIGH_SURROGATES


def to_code_units(text: str) -> str:
    out: list[str] = []
    for ch in text:
        cp = ord(ch)
        if cp > 0xFFFF:
            cp -= 0x10000
            out.append(chr(0xD800 + (cp >> 10)))
            out.append(chr(0xDC00 + (cp & 0x3FF)))
        else:
            out.append(ch)
    return "".join(out)


def from_code_units(units: str) -> str:
    # Paired surrogates combine; unpaired ones pass through unchanged.
    return units.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def code_unit_values(text: str) -> tuple[int, ...]:
    return tuple(ord(u) for u in to_code_units(text))


def utf8_bytes(text: str) -> bytes:
    """UTF-8 encoding of ``text``; accepts both plain and code-unit strings.

    A lone surrogate encodes as three bytes, the same width as the U+FFFD an
    editor would write in its place.
    """
    return from_code_units(text).encode("utf-8", "surrogatepass")


def utf8_length(text: str) -> int:
    return len(utf8_bytes(text))


def code_point_length(text: str) -> int:
    return len(from_code_units(text))
