"""
Literal decoders shared by the lexer and the value builder.

The lexer only checks that string and number tokens are well formed; turning
their raw text into Python values happens here, once per token.
"""

import math
import re
from typing import Final

from ._errors import InvalidEscapeError
from ._errors import InvalidUnicodeEscapeError
from ._errors import NumberFormatError
from ._errors import UnterminatedStringError
from ._profile import profiled
from ._tokens import HEX_DIGITS
from ._tokens import Position

SIMPLE_ESCAPES: Final = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# Letters the lexer accepts after a backslash
ESCAPE_LETTERS: Final = frozenset(SIMPLE_ESCAPES) | {"u"}

_NUMBER_GRAMMAR = re.compile(
    r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?"
)
_LEADING_ZERO = re.compile(r"-?0[0-9]")


def _raw_length(raw: str, *args: object, **kwargs: object) -> int:
    return len(raw)


def is_hex_quad(digits: str) -> bool:
    """True when `digits` is exactly four ASCII hexadecimal digits."""
    return len(digits) == 4 and all(d in HEX_DIGITS for d in digits)


@profiled("decode_string", size=_raw_length)
def decode_string(
    raw: str, doc: str | None = None, start: Position = 0
) -> str:
    """
    Decodes the raw text of a string token, quotes included.

    Each `\\uXXXX` escape decodes to one code point on its own; surrogate
    halves are not combined. Error positions are offsets into `doc`, where
    the token begins at `start`. Without a `doc` they are offsets into `raw`.
    """
    if doc is None:
        doc, start = raw, 0

    if len(raw) < 2 or raw[0] != '"' or raw[-1] != '"':
        raise UnterminatedStringError(
            "Unterminated string starting at", doc, start
        )

    # Fast path: nothing to unescape
    if "\\" not in raw:
        return raw[1:-1]

    end = len(raw) - 1
    chunks: list[str] = []
    i = 1
    while i < end:
        char = raw[i]
        if char != "\\":
            chunks.append(char)
            i += 1
            continue

        letter = raw[i + 1] if i + 1 < end else ""
        if letter == "u":
            digits = raw[i + 2 : min(i + 6, end)]
            if not is_hex_quad(digits):
                raise InvalidUnicodeEscapeError(
                    f"\\u{digits}", doc, start + i
                )
            chunks.append(chr(int(digits, 16)))
            i += 6
        elif letter in SIMPLE_ESCAPES:
            chunks.append(SIMPLE_ESCAPES[letter])
            i += 2
        else:
            raise InvalidEscapeError(f"\\{letter}", doc, start + i)

    return "".join(chunks)


@profiled("decode_number", size=_raw_length)
def decode_number(
    raw: str, doc: str | None = None, start: Position = 0
) -> float:
    """
    Decodes the raw text of a number token into a 64-bit float.

    The text must match the JSON number grammar exactly. Digits beyond double
    precision are rounded by `float`; a literal too large to be finite is
    rejected.
    """
    if doc is None:
        doc, start = raw, 0

    if _NUMBER_GRAMMAR.fullmatch(raw) is None:
        if _LEADING_ZERO.match(raw):
            reason = "Leading zeros not allowed"
        else:
            reason = "Invalid number"
        raise NumberFormatError(reason, raw, doc, start)

    number = float(raw)
    if math.isinf(number):
        raise NumberFormatError("Number out of range", raw, doc, start)
    return number
