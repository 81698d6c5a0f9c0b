from __future__ import annotations

import pytest

from codepoints import (
    CharDetails,
    EndOfLine,
    LineEndingError,
    Offsets,
    Position,
    TextDocument,
    advance,
    char_details,
    char_positions,
    document_text,
    line_starts,
)


SAMPLE = "a\nb\x1bæΩ😀x\nc"


def _doc(eol: EndOfLine) -> TextDocument:
    return TextDocument.from_text(SAMPLE.replace("\n", eol.value))


def test_advance_steps_over_surrogate_pairs() -> None:
    doc = _doc(EndOfLine.LF)
    assert advance(Position(1, 3), doc) == Position(1, 4)
    assert advance(Position(1, 4), doc) == Position(1, 6)
    assert advance(Position(1, 6), doc) == Position(1, 7)


def test_advance_crosses_line_ends() -> None:
    doc = _doc(EndOfLine.CRLF)
    assert advance(Position(0, 1), doc) == Position(1, 0)
    assert advance(Position(0, 0), doc, 2) == Position(1, 0)
    assert advance(Position(0, 0), doc, 9) == Position(2, 0)
    assert advance(Position(0, 0), doc, 0) == Position(0, 0)


def test_advance_past_end_is_none() -> None:
    doc = _doc(EndOfLine.LF)
    assert advance(Position(2, 0), doc) == Position(2, 1)
    assert advance(Position(2, 1), doc) is None
    assert advance(Position(0, 0), doc, 11) is None
    assert advance(Position(5, 0), doc) is None


@pytest.mark.parametrize(
    "eol, expected",
    [
        (
            EndOfLine.CRLF,
            [
                (0, 0, "a", 0, 0, 0x61),
                (0, 1, "\r\n", 1, 1, 0x0D),
                (1, 0, "b", 3, 2, 0x62),
                (1, 1, "\x1b", 4, 3, 0x1B),
                (1, 2, "æ", 5, 4, 0xE6),
                (1, 3, "Ω", 7, 5, 0x3A9),
                (1, 4, "😀", 9, 6, 0x1F600),
                (1, 6, "x", 13, 7, 0x78),
                (1, 7, "\r\n", 14, 8, 0x0D),
                (2, 0, "c", 16, 9, 0x63),
                (2, 1, "", 17, 10, None),
            ],
        ),
        (
            EndOfLine.LF,
            [
                (0, 0, "a", 0, 0, 0x61),
                (0, 1, "\n", 1, 1, 0x0A),
                (1, 0, "b", 2, 2, 0x62),
                (1, 1, "\x1b", 3, 3, 0x1B),
                (1, 2, "æ", 4, 4, 0xE6),
                (1, 3, "Ω", 6, 5, 0x3A9),
                (1, 4, "😀", 8, 6, 0x1F600),
                (1, 6, "x", 12, 7, 0x78),
                (1, 7, "\n", 13, 8, 0x0A),
                (2, 0, "c", 14, 9, 0x63),
                (2, 1, "", 15, 10, None),
            ],
        ),
    ],
)
def test_char_positions(eol: EndOfLine, expected: list[tuple]) -> None:
    actual = [
        (i.pos.line, i.pos.column, i.char, i.byte_offset, i.char_offset, i.code_point)
        for i in char_positions(_doc(eol))
    ]
    assert actual == expected


def test_char_positions_from_line_start() -> None:
    doc = _doc(EndOfLine.CRLF)
    second = list(line_starts(doc))[1]
    infos = list(char_positions(doc, second))
    assert infos[0].pos == Position(1, 0)
    assert (infos[0].byte_offset, infos[0].char_offset) == (3, 2)
    assert infos[-1].at_end
    assert infos[-1].byte_offset == 17


def _details(eol: EndOfLine) -> list[CharDetails]:
    return list(char_details("a\nb\x1bæΩ😀x\nc", eol, Offsets(byte=0, char=0)))


def test_char_details_crlf() -> None:
    details = _details(EndOfLine.CRLF)
    assert [d.byte_offset for d in details] == [0, 1, 3, 4, 5, 7, 9, 13, 14, 16]
    assert [d.char_offset for d in details] == list(range(10))
    assert details[1] == CharDetails(
        char="\n", code_point=0x0A, utf8=b"\r\n", code_units=(0x0D, 0x0A), byte_offset=1, char_offset=1
    )
    assert details[6] == CharDetails(
        char="😀",
        code_point=0x1F600,
        utf8=bytes([0xF0, 0x9F, 0x98, 0x80]),
        code_units=(0xD83D, 0xDE00),
        byte_offset=9,
        char_offset=6,
    )
    assert details[4].utf8 == bytes([0xC3, 0xA6])
    assert details[5].code_units == (0x3A9,)


def test_char_details_lf() -> None:
    details = _details(EndOfLine.LF)
    assert [d.byte_offset for d in details] == [0, 1, 2, 3, 4, 6, 8, 12, 13, 14]
    assert details[8].utf8 == b"\n"
    assert details[8].code_units == (0x0A,)
    assert [d.code_point for d in details] == [0x61, 0x0A, 0x62, 0x1B, 0xE6, 0x3A9, 0x1F600, 0x78, 0x0A, 0x63]


def test_char_details_counts_from_start_offsets() -> None:
    details = list(char_details("xy", EndOfLine.LF, Offsets(byte=40, char=30)))
    assert [(d.byte_offset, d.char_offset) for d in details] == [(40, 30), (41, 31)]


def test_char_details_rejects_carriage_return() -> None:
    it = char_details("a\r\nb", EndOfLine.CRLF, Offsets(byte=0, char=0))
    assert next(it).char == "a"
    with pytest.raises(LineEndingError) as e:
        next(it)
    assert "carriage return" in str(e.value)


def test_document_text_normalizes_crlf() -> None:
    doc = _doc(EndOfLine.CRLF)
    assert document_text(doc, Position(0, 0), Position(2, 1)) == SAMPLE
    assert document_text(doc, Position(1, 4), Position(1, 6)) == "😀"
    assert document_text(doc, Position(0, 0), Position(2, 1), max_length=3) == "a\nb"


def test_document_text_rejects_broken_crlf_pairs() -> None:
    doc = TextDocument(lines=("ok", "a\rb"), eol=EndOfLine.CRLF)
    with pytest.raises(LineEndingError) as e:
        document_text(doc, Position(0, 0), Position(1, 3))
    assert "broken CRLF" in str(e.value)
    assert e.value.line == 1
