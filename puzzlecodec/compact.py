# compact.py — CtC compact grammar: parse/encode + compressed payload helpers
"""
The compact grammar is what CtC-style partner links carry inside their
lz-string payload. It looks like JSON with the quotes and padding
stripped out:

    value   := object | array | string | hexcolor | bool | number
    object  := '{' (key ':' value (',' key ':' value)*)? '}'
    key     := any run of characters up to the next ':'
    array   := '[' elements? ']'
    string  := "'" chars "'"        (\\' quote, \\n newline, \\X -> X)
    hexcolor:= '#0' | '#F'          (#000000 / #FFFFFF)
    bool    := 't' | 'f'
    number  := digits ('.' digits)?

No whitespace is allowed between tokens. Arrays are sparse: a slot
holding an empty object is written as nothing at all, so ``[{}, 5, {}]``
becomes ``[,5,]``. Decoding can never tell an elided slot from a real
empty object, and a lone elided slot (``[{}]`` -> ``[]``) is lost.

Known one-way gaps on encode: ``None`` is written as an empty token and
cannot be read back, backslashes and object keys are not escaped, and
negative numbers are written with a ``-`` the grammar does not accept.
Floats are written as their shortest decimal text and read back as
``Decimal``, so ``0.1`` returns as ``Decimal("0.1")``, which does not
compare equal to the float.
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Any, List

from .codec import compress_text, decompress_text
from .config import HEX_SHORTHANDS
from .laws import (
    NestingTooDeep, NumberFormatError, UnexpectedCharacter, UnexpectedEndOfInput,
)

logger = logging.getLogger(__name__)

_NUMBER_CHARS = "0123456789."
_NUMBER_RE = re.compile(r"[0-9]+(\.[0-9]+)?")
_HEX_CODES = {full: short for short, full in HEX_SHORTHANDS.items()}


def _empty_object(value) -> bool:
    return isinstance(value, dict) and not value


# ---------- Parse ----------
class _Reader:
    """Cursor over decompressed grammar text."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self):
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def next(self) -> str:
        ch = self.peek()
        if ch is None:
            raise UnexpectedEndOfInput(self.pos)
        self.pos += 1
        return ch

    def expect(self, want: str) -> None:
        ch = self.next()
        if ch != want:
            raise UnexpectedCharacter(ch, self.pos - 1)

    # --- values ---
    def value(self) -> Any:
        ch = self.peek()
        if ch is None:
            raise UnexpectedEndOfInput(self.pos)
        if ch == "{":
            return self.object()
        if ch == "[":
            return self.array()
        if ch == "'":
            return self.string()
        if ch == "#":
            return self.hexcolor()
        if ch == "t":
            self.pos += 1
            return True
        if ch == "f":
            self.pos += 1
            return False
        if ch in "0123456789":
            return self.number()
        raise UnexpectedCharacter(ch, self.pos)

    def key(self) -> str:
        start = self.pos
        end = self.text.find(":", start)
        if end < 0:
            self.pos = len(self.text)
            raise UnexpectedEndOfInput(self.pos)
        self.pos = end + 1
        return self.text[start:end]

    def object(self) -> dict:
        self.expect("{")
        out = {}
        if self.peek() == "}":
            self.pos += 1
            return out
        while True:
            k = self.key()
            out[k] = self.value()
            ch = self.next()
            if ch == "}":
                return out
            if ch != ",":
                raise UnexpectedCharacter(ch, self.pos - 1)

    def array(self) -> List[Any]:
        self.expect("[")
        out = []
        if self.peek() == "]":
            self.pos += 1
            return out
        while True:
            # n slots, n-1 commas; a slot with no token is an elided {}
            if self.peek() in (",", "]"):
                out.append({})
            else:
                out.append(self.value())
            ch = self.next()
            if ch == "]":
                return out
            if ch != ",":
                raise UnexpectedCharacter(ch, self.pos - 1)

    def string(self) -> str:
        self.expect("'")
        chars = []
        while True:
            ch = self.next()
            if ch == "'":
                return "".join(chars)
            if ch == "\\":
                esc = self.next()
                chars.append("\n" if esc == "n" else esc)
            else:
                chars.append(ch)

    def hexcolor(self) -> str:
        self.expect("#")
        ch = self.next()
        if ch not in HEX_SHORTHANDS:
            raise UnexpectedCharacter(ch, self.pos - 1)
        return HEX_SHORTHANDS[ch]

    def number(self):
        start = self.pos
        while self.peek() is not None and self.peek() in _NUMBER_CHARS:
            self.pos += 1
        literal = self.text[start:self.pos]
        if not _NUMBER_RE.fullmatch(literal):
            raise NumberFormatError(literal, start)
        if "." not in literal:
            return int(literal)
        try:
            return Decimal(literal)
        except InvalidOperation as e:
            raise NumberFormatError(literal, start) from e


def parse_compact(text: str) -> Any:
    """Parse compact grammar text (already decompressed) into a Value.

    Raises a ParseError subclass; there are no partial results.
    """
    reader = _Reader(text)
    try:
        value = reader.value()
    except RecursionError:
        raise NestingTooDeep(reader.pos) from None
    if reader.peek() is not None:
        raise UnexpectedCharacter(reader.peek(), reader.pos)
    return value


def decode_compact(payload: str) -> Any:
    """Decompress a CtC payload and parse it.

    Compression problems raise CompressionError, grammar problems ParseError.
    """
    text = decompress_text(payload)
    logger.debug(f"Parsing {len(text)} chars of compact grammar")
    return parse_compact(text)


# ---------- Encode ----------
def _encode_number(value) -> str:
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        value = Decimal(repr(value))
    return format(value, "f")


def _encode_string(s: str) -> str:
    if s in _HEX_CODES:
        return "#" + _HEX_CODES[s]
    return "'" + s.replace("'", "\\'").replace("\n", "\\n") + "'"


def _encode_into(out: List[str], value: Any) -> None:
    if value is None:
        # Written as nothing; parse_compact cannot produce None back.
        return
    if isinstance(value, bool):
        out.append("t" if value else "f")
    elif isinstance(value, (int, float, Decimal)):
        out.append(_encode_number(value))
    elif isinstance(value, str):
        out.append(_encode_string(value))
    elif isinstance(value, (list, tuple)):
        out.append("[")
        for i, item in enumerate(value):
            if i:
                out.append(",")
            if not _empty_object(item):
                _encode_into(out, item)
        out.append("]")
    elif isinstance(value, dict):
        out.append("{")
        for i, (k, v) in enumerate(value.items()):
            if i:
                out.append(",")
            out.append(str(k))
            out.append(":")
            _encode_into(out, v)
        out.append("}")
    else:
        raise TypeError(f"Cannot encode {type(value).__name__} in compact grammar")


def encode_compact(value: Any) -> str:
    out: List[str] = []
    _encode_into(out, value)
    return "".join(out)


def encode_compact_payload(value: Any) -> str:
    """Encode a Value as a compressed CtC payload."""
    return compress_text(encode_compact(value))
