"""
Recursive descent JSON decoder.

Turns a JSON document into plain Python values: None, bool, float, str, list
and insertion-ordered dict. Numbers always decode to 64-bit floats. Every
failure raises a ParseError subclass that names what was found, what was
expected and where.
"""

from typing import IO
from typing import Any

from ._config import DEFAULT_MAX_DEPTH
from ._config import ParseConfig
from ._decode import decode_number
from ._decode import decode_string
from ._errors import ExpectedColonError
from ._errors import IllegalLiteralError
from ._errors import InvalidEscapeError
from ._errors import InvalidUnicodeEscapeError
from ._errors import NestingTooDeepError
from ._errors import NumberFormatError
from ._errors import ParseError
from ._errors import StructuralError
from ._errors import UnexpectedTokenError
from ._errors import UnterminatedStringError
from ._lexer import JsonLexer
from ._lexer import NumberState
from ._lexer import tokenize
from ._parser import JsonParser
from ._parser import JsonValue
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._tokens import JsonToken
from ._tokens import TokenKind

__version__ = "0.1.0"


def parse(text: str, **kwargs: Any) -> JsonValue:
    """
    Parses a JSON document into Python values.

    Keyword arguments build a ParseConfig. The whole value is returned or a
    ParseError is raised; there is no partial result.
    """
    if not isinstance(text, str):
        raise TypeError(
            f"the JSON document must be str, not {type(text).__name__}"
        )

    config = ParseConfig(**kwargs)
    return JsonParser(JsonLexer(text), config).parse()


def load(fp: IO[str], **kwargs: Any) -> JsonValue:
    """
    Parses JSON read in full from a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return parse(fp.read(), **kwargs)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ExpectedColonError",
    "HotPathStats",
    "IllegalLiteralError",
    "InvalidEscapeError",
    "InvalidUnicodeEscapeError",
    "JsonLexer",
    "JsonParser",
    "JsonToken",
    "JsonValue",
    "NestingTooDeepError",
    "NumberFormatError",
    "NumberState",
    "ParseConfig",
    "ParseError",
    "StructuralError",
    "TokenKind",
    "UnexpectedTokenError",
    "UnterminatedStringError",
    "clear_hot_path_stats",
    "decode_number",
    "decode_string",
    "get_hot_path_stats",
    "load",
    "parse",
    "tokenize",
]
