"""
Lexer: turns a document into a forward-only stream of classified tokens.

Owns the character-level grammar: whitespace runs, the number state machine,
string quoting and escapes, barewords and single-character delimiters.
"""

import unicodedata
from collections.abc import Iterator
from enum import Enum

from ._decode import ESCAPE_LETTERS
from ._decode import is_hex_quad
from ._errors import InvalidEscapeError
from ._errors import InvalidUnicodeEscapeError
from ._errors import UnterminatedStringError
from ._profile import profiled
from ._tokens import DELIMITERS
from ._tokens import DIGITS
from ._tokens import EXPONENT_MARKERS
from ._tokens import KEYWORDS
from ._tokens import LOWERCASE_LETTERS
from ._tokens import SIGNS
from ._tokens import WHITESPACE
from ._tokens import JsonToken
from ._tokens import TokenKind


class NumberState(Enum):
    """States of the number scanner."""

    SIGN = "sign"
    LEADING_ZERO = "leading_zero"
    INTEGER = "integer"
    FRACTION = "fraction"
    EXPONENT_SIGN = "exponent_sign"
    EXPONENT = "exponent"


def _next_number_state(state: NumberState, char: str) -> NumberState | None:
    """Returns the state after `char`, or None if `char` ends the number."""
    if state is NumberState.SIGN:
        if char == "0":
            return NumberState.LEADING_ZERO
        if char in DIGITS:
            return NumberState.INTEGER
    elif state in (NumberState.LEADING_ZERO, NumberState.INTEGER):
        # A digit after a leading zero is kept so the decoder sees all of "01"
        if char in DIGITS:
            return NumberState.INTEGER
        if char == ".":
            return NumberState.FRACTION
        if char in EXPONENT_MARKERS:
            return NumberState.EXPONENT_SIGN
    elif state is NumberState.FRACTION:
        if char in DIGITS:
            return NumberState.FRACTION
        if char in EXPONENT_MARKERS:
            return NumberState.EXPONENT_SIGN
    elif state is NumberState.EXPONENT_SIGN:
        if char in SIGNS or char in DIGITS:
            return NumberState.EXPONENT
    elif state is NumberState.EXPONENT:
        if char in DIGITS:
            return NumberState.EXPONENT
    return None


def _is_control(char: str) -> bool:
    return unicodedata.category(char) == "Cc"


class JsonLexer:
    """
    Tokenizes a JSON document one token at a time.

    The cursor is `pos`; `pos + remaining` always equals the document length.
    Every read is bounds-checked and the empty string stands for end of input,
    so malformed documents surface as ILLEGAL tokens or typed errors.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.length = len(text)

    @property
    def remaining(self) -> int:
        return self.length - self.pos

    def peek(self) -> str:
        """Returns current character without advancing, "" at end of input."""
        return self.text[self.pos] if self.pos < self.length else ""

    def advance(self) -> str:
        """Returns current character and advances position."""
        char = self.peek()
        if self.pos < self.length:
            self.pos += 1
        return char

    def _token(self, kind: TokenKind, start: int) -> JsonToken:
        return JsonToken(kind, self.text[start : self.pos], start, self.pos)

    def next_token(self) -> JsonToken:
        """Scans the token at the cursor; EOF once input is exhausted."""
        start = self.pos
        char = self.peek()

        if not char:
            return JsonToken(TokenKind.EOF, "", start, start)
        elif char in WHITESPACE:
            return self.scan_whitespace()
        elif char in LOWERCASE_LETTERS:
            return self.scan_bareword()
        elif char == '"':
            return self.scan_string()
        elif char in DIGITS or char == "-":
            return self.scan_number()

        self.advance()
        return self._token(DELIMITERS.get(char, TokenKind.ILLEGAL), start)

    def scan_whitespace(self) -> JsonToken:
        """Scans a maximal run of JSON whitespace."""
        start = self.pos
        while self.peek() in WHITESPACE:
            self.pos += 1
        return self._token(TokenKind.WHITESPACE, start)

    @profiled("scan_bareword")
    def scan_bareword(self) -> JsonToken:
        """
        Scans a run of lowercase letters.

        Only null, true and false are words in JSON; anything else comes back
        as a single ILLEGAL token holding the whole word.
        """
        start = self.pos
        while self.peek() in LOWERCASE_LETTERS:
            self.pos += 1
        word = self.text[start : self.pos]
        return self._token(KEYWORDS.get(word, TokenKind.ILLEGAL), start)

    @profiled("scan_number")
    def scan_number(self) -> JsonToken:
        """
        Scans the longest run accepted by the number state machine.

        Only the shape is tracked here; whether the run is a complete literal
        (no dangling "-", "1." or "1e+") is checked when it is decoded.
        """
        start = self.pos
        char = self.advance()
        if char == "-":
            state = NumberState.SIGN
        elif char == "0":
            state = NumberState.LEADING_ZERO
        else:
            state = NumberState.INTEGER

        while True:
            following = _next_number_state(state, self.peek())
            if following is None:
                break
            state = following
            self.pos += 1

        return self._token(TokenKind.NUMBER, start)

    @profiled("scan_string")
    def scan_string(self) -> JsonToken:
        """
        Scans a string token, quotes and escape sequences kept verbatim.

        The cursor must be on the opening quote.
        """
        start = self.pos
        self.advance()  # opening quote, checked by next_token

        while self.pos < self.length:
            char = self.text[self.pos]
            if char == '"':
                self.pos += 1
                return self._token(TokenKind.STRING, start)
            elif char == "\\":
                self._scan_escape(start)
            elif _is_control(char):
                raise UnterminatedStringError(
                    f"Invalid control character {char!r} in string",
                    self.text,
                    self.pos,
                )
            else:
                self.pos += 1

        raise UnterminatedStringError(
            "Unterminated string starting at", self.text, start
        )

    def _scan_escape(self, string_start: int) -> None:
        """Validates the escape sequence at the cursor and moves past it."""
        escape_pos = self.pos
        self.pos += 1

        letter = self.peek()
        if not letter:
            raise UnterminatedStringError(
                "Unterminated string starting at", self.text, string_start
            )
        if letter not in ESCAPE_LETTERS:
            raise InvalidEscapeError(f"\\{letter}", self.text, escape_pos)
        self.pos += 1

        if letter == "u":
            digits = self.text[self.pos : self.pos + 4]
            if not is_hex_quad(digits):
                raise InvalidUnicodeEscapeError(
                    f"\\u{digits}", self.text, escape_pos
                )
            self.pos += 4


def tokenize(text: str) -> Iterator[JsonToken]:
    """Yields every token of `text`, whitespace included, ending with EOF."""
    lexer = JsonLexer(text)
    while True:
        token = lexer.next_token()
        yield token
        if token.kind is TokenKind.EOF:
            return
