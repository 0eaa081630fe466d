import pytest

from _wsvio.reading import tokenize_stream
from _wsvio.row_assembler import RowAssembler
from _wsvio.tokenizer import ErrorKind, Location, Token, TokenKind, WsvError

LF = Token(TokenKind.LINE_BREAK)
NULL = Token(TokenKind.NULL)
ERROR = WsvError(ErrorKind.STRING_NOT_CLOSED, Location(1, 5, None))


def value(text):
    return Token(TokenKind.VALUE, text)


def failing(*tokens):
    yield from tokens
    raise ERROR


@pytest.mark.parametrize(
    "tokens, expected",
    [
        ([], []),
        ([value("a"), NULL], [["a", None]]),
        ([value("a"), LF], [["a"]]),
        ([value("a"), LF, value("b")], [["a"], ["b"]]),
        ([LF, LF], [[], []]),
        ([value("a"), Token(TokenKind.COMMENT, "c"), LF], [["a"]]),
        ([Token(TokenKind.COMMENT, "c"), LF, value("b")], [[], ["b"]]),
        ([value("1"), value("2"), LF, value("3"), LF], [["1", "2"], ["3"]]),
    ],
)
def test_assemble_rows(tokens, expected):
    assert list(RowAssembler(tokens)) == expected


def test_partial_row_before_error():
    rows = iter(RowAssembler(failing(value("a"), LF, value("b"), NULL)))
    assert next(rows) == ["a"]
    assert next(rows) == ["b", None]
    with pytest.raises(WsvError) as err:
        next(rows)
    assert err.value == ERROR
    with pytest.raises(StopIteration):
        next(rows)


def test_error_on_empty_row():
    rows = iter(RowAssembler(failing(value("a"), LF)))
    assert next(rows) == ["a"]
    with pytest.raises(WsvError):
        next(rows)
    with pytest.raises(StopIteration):
        next(rows)


def test_assemble_tokenized_stream():
    tokens = tokenize_stream("a -\n# comment\nb")
    assert list(RowAssembler(tokens)) == [["a", None], [], ["b"]]
