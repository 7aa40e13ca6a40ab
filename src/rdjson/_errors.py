"""
Exception hierarchy for decode failures.

Every failure aborts the parse; the exception is the only diagnostic channel
and carries the offending position plus a found-vs-expected description.
"""

from ._tokens import JsonToken
from ._tokens import Position
from ._utf8_mapper import UTF8PositionMapper


class ParseError(ValueError):
    """
    Handles JSON parsing failures with precise position and context information.

    Error state containing the code point offset, line/column numbers and the
    document, so users can locate and fix JSON syntax issues.
    """

    def __init__(self, msg: str, doc: str = "", pos: Position = 0) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos

        # Compute line and column numbers from position
        self.lineno = doc.count("\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind("\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    @property
    def byte_offset(self) -> int:
        """UTF-8 byte offset of `pos` within `doc`."""
        return UTF8PositionMapper(self.doc).char_to_byte(self.pos)


class _TokenMismatchError(ParseError):
    """Base for errors that report the found token against what was expected."""

    def __init__(self, expected: str, found: JsonToken, doc: str = "") -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Expecting {expected}, found {found}", doc, found.start
        )


class StructuralError(_TokenMismatchError):
    """Wrong delimiter, missing separator or trailing data."""


class ExpectedColonError(StructuralError):
    """An object key is not followed by ':'."""

    def __init__(self, found: JsonToken, doc: str = "") -> None:
        super().__init__("':' delimiter", found, doc)


class UnexpectedTokenError(_TokenMismatchError):
    """A token appears where no value or member is valid."""


class IllegalLiteralError(ParseError):
    """A bareword other than null, true or false."""

    def __init__(self, literal: str, doc: str = "", pos: Position = 0) -> None:
        self.literal = literal
        super().__init__(f"Illegal literal {literal!r}", doc, pos)


class InvalidEscapeError(ParseError):
    """A backslash is followed by a letter JSON does not define."""

    description = "Invalid escape sequence"

    def __init__(self, sequence: str, doc: str = "", pos: Position = 0) -> None:
        self.sequence = sequence
        super().__init__(f"{self.description} {sequence!r}", doc, pos)


class InvalidUnicodeEscapeError(InvalidEscapeError):
    """`\\u` is not followed by exactly four hexadecimal digits."""

    description = "Invalid unicode escape sequence"


class NumberFormatError(ParseError):
    """Number text that is not a valid JSON number literal."""

    def __init__(
        self, reason: str, literal: str, doc: str = "", pos: Position = 0
    ) -> None:
        self.literal = literal
        super().__init__(f"{reason}: {literal!r}", doc, pos)


class UnterminatedStringError(ParseError):
    """Input ends, or a control character appears, before the closing quote."""


class NestingTooDeepError(ParseError):
    """Objects and arrays are nested deeper than the configured limit."""

    def __init__(
        self, max_depth: int, doc: str = "", pos: Position = 0
    ) -> None:
        self.max_depth = max_depth
        super().__init__(
            f"Maximum nesting depth of {max_depth} exceeded", doc, pos
        )
