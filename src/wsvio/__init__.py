import wsvio.version
from _wsvio.reading import parse_all, parse_stream, tokenize, tokenize_stream
from _wsvio.tokenizer import ErrorKind, Location, Token, TokenKind, WsvError
from _wsvio.writing import Alignment, WsvWriteError, lazy_write, write

__author__ = """WsvIO developers"""

__version__ = wsvio.version.version

__all__ = [
    "Alignment",
    "ErrorKind",
    "Location",
    "Token",
    "TokenKind",
    "WsvError",
    "WsvWriteError",
    "lazy_write",
    "parse_all",
    "parse_stream",
    "tokenize",
    "tokenize_stream",
    "write",
]
