"""
In this module, a tokenizer is an iterator that takes a cursor over wsv
source text and generates tokens. If the source is malformed, the
tokenizer raises WsvError and is exhausted afterwards.

A cursor gives one character of lookahead over the source. The wsv format
is simple enough that one character of lookahead, and at most two
consumed characters of context, is sufficient to decide every token, so
there is no backtracking.

For source text held in memory use BufferCursor, which also tracks the
offset of every location. For character streams that should not be read
into memory at once, use StreamCursor.
"""

from .buffer_cursor import BufferCursor
from .errors import ErrorKind, WsvError
from .location import Location
from .stream_cursor import StreamCursor
from .token import Token
from .token_kind import TokenKind
from .wsv_tokenizer import WsvTokenizer

__all__ = [
    "BufferCursor",
    "ErrorKind",
    "Location",
    "StreamCursor",
    "Token",
    "TokenKind",
    "WsvError",
    "WsvTokenizer",
]
