"""
Value builder: recursive descent over the lexer's token stream.
"""

from ._config import ParseConfig
from ._decode import decode_number
from ._decode import decode_string
from ._errors import ExpectedColonError
from ._errors import IllegalLiteralError
from ._errors import NestingTooDeepError
from ._errors import StructuralError
from ._errors import UnexpectedTokenError
from ._lexer import JsonLexer
from ._profile import profiled
from ._tokens import LOWERCASE_LETTERS
from ._tokens import VALUE_START_KINDS
from ._tokens import JsonToken
from ._tokens import TokenKind

# Recursive definition of a decoded document
type JsonValue = (
    None | bool | float | str | list[JsonValue] | dict[str, JsonValue]
)

_CONSTANTS: dict[TokenKind, JsonValue] = {
    TokenKind.NULL: None,
    TokenKind.TRUE: True,
    TokenKind.FALSE: False,
}


class JsonParser:
    """
    Recursive descent parser building a value tree from a JsonLexer.

    The parser, not the lexer, owns the single token of pushback. Containers
    thread a depth counter so nesting is bounded by `config.max_depth`.
    """

    def __init__(self, lexer: JsonLexer, config: ParseConfig):
        self.lexer = lexer
        self.config = config
        self._pushed_back: JsonToken | None = None
        self._key_cache: dict[str, str] = {}
        self._innermost: JsonToken | None = None

    @property
    def doc(self) -> str:
        return self.lexer.text

    def next_token(self) -> JsonToken:
        """Returns the pushed back token if any, else scans a new one."""
        if self._pushed_back is not None:
            token, self._pushed_back = self._pushed_back, None
            return token
        return self.lexer.next_token()

    def unread(self, token: JsonToken) -> None:
        """Pushes one token back; only one slot of lookahead exists."""
        if self._pushed_back is not None:
            raise RuntimeError("only one token can be pushed back")
        self._pushed_back = token

    def next_significant(self) -> JsonToken:
        """Returns the next token that is not whitespace."""
        token = self.next_token()
        while token.kind is TokenKind.WHITESPACE:
            token = self.next_token()
        return token

    @profiled("parse", size=lambda parser: parser.lexer.length)
    def parse(self) -> JsonValue:
        """Parses a whole document; only whitespace may follow the value."""
        if self.config.container_root:
            first = self.next_significant()
            if first.kind not in (
                TokenKind.OBJECT_OPEN,
                TokenKind.ARRAY_OPEN,
            ):
                raise StructuralError("'{' or '['", first, self.doc)
            self.unread(first)

        try:
            result = self.parse_value(0)
        except RecursionError as exc:
            # max_depth may exceed what the interpreter stack can hold
            pos = 0 if self._innermost is None else self._innermost.start
            raise NestingTooDeepError(
                self.config.max_depth, self.doc, pos
            ) from exc

        trailing = self.next_significant()
        if trailing.kind is not TokenKind.EOF:
            raise StructuralError("end of input", trailing, self.doc)

        return result

    def parse_value(self, depth: int) -> JsonValue:
        """Parses any JSON value based on the next significant token."""
        token = self.next_significant()
        kind = token.kind

        if kind is TokenKind.OBJECT_OPEN:
            return self.parse_object(token, depth + 1)
        elif kind is TokenKind.ARRAY_OPEN:
            return self.parse_array(token, depth + 1)
        elif kind is TokenKind.STRING:
            return decode_string(token.text, self.doc, token.start)
        elif kind is TokenKind.NUMBER:
            return decode_number(token.text, self.doc, token.start)
        elif kind in _CONSTANTS:
            return _CONSTANTS[kind]
        elif kind is TokenKind.ILLEGAL and token.text[0] in LOWERCASE_LETTERS:
            raise IllegalLiteralError(token.text, self.doc, token.start)
        else:
            raise UnexpectedTokenError("value", token, self.doc)

    def _check_depth(self, depth: int, token: JsonToken) -> None:
        self._innermost = token
        if depth > self.config.max_depth:
            raise NestingTooDeepError(
                self.config.max_depth, self.doc, token.start
            )

    def _intern_key(self, token: JsonToken) -> str:
        """
        Decodes an object key, reusing the string for repeated raw keys.

        Documents made of many similar objects then share one key object per
        distinct name.
        """
        key = self._key_cache.get(token.text)
        if key is None:
            key = decode_string(token.text, self.doc, token.start)
            self._key_cache[token.text] = key
        return key

    def _skip_comma(self, comma: JsonToken, expecting_member: bool) -> None:
        """Rejects a comma that is not directly after a member, unless lax."""
        if expecting_member and not self.config.allow_extra_commas:
            raise StructuralError("value", comma, self.doc)

    def _check_close(self, close: JsonToken, after_comma: bool) -> None:
        """Rejects a trailing comma before a closing delimiter, unless lax."""
        if after_comma and not self.config.allow_extra_commas:
            raise StructuralError("value", close, self.doc)

    def parse_object(
        self, open_token: JsonToken, depth: int
    ) -> dict[str, JsonValue]:
        """
        Parses the members of an object whose '{' was already consumed.

        A repeated key keeps its first position and takes the last value.
        """
        self._check_depth(depth, open_token)

        obj: dict[str, JsonValue] = {}
        expecting_member = True
        after_comma = False

        while True:
            token = self.next_significant()

            if token.kind is TokenKind.OBJECT_CLOSE:
                self._check_close(token, after_comma)
                return obj

            if token.kind is TokenKind.COMMA:
                self._skip_comma(token, expecting_member)
                expecting_member = after_comma = True
                continue

            if not expecting_member:
                raise StructuralError("',' or '}' delimiter", token, self.doc)
            if token.kind is not TokenKind.STRING:
                raise UnexpectedTokenError(
                    "property name enclosed in double quotes", token, self.doc
                )

            key = self._intern_key(token)
            colon = self.next_significant()
            if colon.kind is not TokenKind.COLON:
                raise ExpectedColonError(colon, self.doc)

            obj[key] = self.parse_value(depth)
            expecting_member = after_comma = False

    def parse_array(
        self, open_token: JsonToken, depth: int
    ) -> list[JsonValue]:
        """Parses the members of an array whose '[' was already consumed."""
        self._check_depth(depth, open_token)

        values: list[JsonValue] = []
        expecting_member = True
        after_comma = False

        while True:
            token = self.next_significant()

            if token.kind is TokenKind.ARRAY_CLOSE:
                self._check_close(token, after_comma)
                return values

            if token.kind is TokenKind.COMMA:
                self._skip_comma(token, expecting_member)
                expecting_member = after_comma = True
                continue

            # ILLEGAL goes through parse_value for a precise error
            starts_value = (
                token.kind in VALUE_START_KINDS
                or token.kind is TokenKind.ILLEGAL
            )
            if not expecting_member:
                raise StructuralError("',' or ']' delimiter", token, self.doc)
            if not starts_value:
                raise StructuralError("value or ']'", token, self.doc)

            self.unread(token)
            values.append(self.parse_value(depth))
            expecting_member = after_comma = False
