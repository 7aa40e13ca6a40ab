"""Token kinds, the token record and the character tables shared by scanners."""

from dataclasses import dataclass
from enum import Enum
from typing import Final

type Position = int


class TokenKind(Enum):
    """
    Classification of a lexical unit.

    WHITESPACE is produced as a token of its own so the lexer stays a pure
    tokenizer; the parser decides where whitespace is skipped.
    """

    OBJECT_OPEN = "object_open"
    OBJECT_CLOSE = "object_close"
    ARRAY_OPEN = "array_open"
    ARRAY_CLOSE = "array_close"
    STRING = "string"
    NUMBER = "number"
    COMMA = "comma"
    COLON = "colon"
    NULL = "null"
    TRUE = "true"
    FALSE = "false"
    WHITESPACE = "whitespace"
    EOF = "eof"
    ILLEGAL = "illegal"


@dataclass(frozen=True, slots=True)
class JsonToken:
    """
    A classified token and the exact slice of input it was scanned from.

    `text` is always `input[start:end]`.
    """

    kind: TokenKind
    text: str
    start: Position
    end: Position

    @property
    def length(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        if self.kind is TokenKind.EOF:
            return "EOF"
        return f"{self.kind.name} {self.text!r}"


WHITESPACE: Final = frozenset(" \t\n\r")
DIGITS: Final = frozenset("0123456789")
HEX_DIGITS: Final = frozenset("0123456789abcdefABCDEF")
LOWERCASE_LETTERS: Final = frozenset("abcdefghijklmnopqrstuvwxyz")
EXPONENT_MARKERS: Final = frozenset("eE")
SIGNS: Final = frozenset("+-")

DELIMITERS: Final = {
    "{": TokenKind.OBJECT_OPEN,
    "}": TokenKind.OBJECT_CLOSE,
    "[": TokenKind.ARRAY_OPEN,
    "]": TokenKind.ARRAY_CLOSE,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
}

KEYWORDS: Final = {
    "null": TokenKind.NULL,
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}

# Token kinds that may begin an array member
VALUE_START_KINDS: Final = frozenset(
    {
        TokenKind.STRING,
        TokenKind.NUMBER,
        TokenKind.OBJECT_OPEN,
        TokenKind.ARRAY_OPEN,
        TokenKind.TRUE,
        TokenKind.FALSE,
        TokenKind.NULL,
    }
)
