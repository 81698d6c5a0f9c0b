from __future__ import annotations

import argparse
import logging
import sys

from .chars import char_details
from .document import EndOfLine, TextDocument
from .errors import CodepointsError
from .lines import line_starts, offsets_at
from .navigate import goto_byte, goto_char
from .parsing import parse_code_point, parse_offset
from .report import ReportStore, format_char_details, show_char_info
from .spans import Offsets, Position, Selection


def _position(text: str) -> Position:
    line, sep, col = text.partition(":")
    try:
        pos = Position(int(line), int(col) if sep else 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LINE:COLUMN, got {text!r}") from None
    if pos.line < 0 or pos.column < 0:
        raise argparse.ArgumentTypeError(f"negative position {text!r}")
    return pos


def _print_selection(doc: TextDocument, sel: Selection) -> None:
    off = offsets_at(doc, sel.start)
    print(f"{sel.format()} byte={off.byte} char={off.char}")


def _cmd_info(args: argparse.Namespace) -> int:
    doc = TextDocument.from_path(args.file)
    start = args.start
    end = args.end if args.end is not None else start
    store = ReportStore()
    name = show_char_info(doc, Selection(anchor=start, active=end), store, name=doc.name)
    print(store.get(name))
    return 0


def _cmd_goto(args: argparse.Namespace) -> int:
    doc = TextDocument.from_path(args.file)
    offset = parse_offset(args.offset)
    goto = goto_byte if args.command == "goto-byte" else goto_char
    _print_selection(doc, goto(doc, offset, cursor=args.cursor))
    return 0


def _cmd_lines(args: argparse.Namespace) -> int:
    doc = TextDocument.from_path(args.file)
    print(f"eol={doc.eol.name} lines={doc.line_count}")
    for info in line_starts(doc):
        print(f"{info.pos.line}\tbyte={info.byte_offset}\tchar={info.char_offset}")
    return 0


def _cmd_codepoint(args: argparse.Namespace) -> int:
    cp = parse_code_point(args.value)
    for line in format_char_details(char_details(chr(cp), EndOfLine.LF, Offsets(byte=0, char=0))):
        print(line)
    return 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="codepoints", description="Inspect and navigate text by byte and character offsets")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log resolution steps to stderr")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("info", help="Show character details for a range")
    p.add_argument("file")
    p.add_argument("--start", type=_position, default=Position(0, 0), help="LINE:COLUMN (0-based, UTF-16 columns)")
    p.add_argument("--end", type=_position, default=None, help="LINE:COLUMN; defaults to one character")
    p.set_defaults(func=_cmd_info)

    for name, unit in (("goto-byte", "UTF-8 byte"), ("goto-char", "character")):
        p = sub.add_parser(name, help=f"Resolve a {unit} offset to a position")
        p.add_argument("file")
        p.add_argument("offset", help="Decimal or 0x hex; a leading +/- is relative to --from")
        p.add_argument("--from", dest="cursor", type=_position, default=None, help="Cursor for relative offsets")
        p.set_defaults(func=_cmd_goto)

    p = sub.add_parser("lines", help="Print the offsets at which each line starts")
    p.add_argument("file")
    p.set_defaults(func=_cmd_lines)

    p = sub.add_parser("codepoint", help="Describe a code point given as 65, 0x41, \\u41 or U+41")
    p.add_argument("value")
    p.set_defaults(func=_cmd_codepoint)

    args = ap.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        return args.func(args)
    except CodepointsError as e:
        print(f"codepoints: {e}", file=sys.stderr)
        return 2
