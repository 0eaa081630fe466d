import io

import pytest

import wsvio


def test_version():
    assert isinstance(wsvio.__version__, str)


def test_readme_example():
    rows = wsvio.parse_all('a "b c" -\n# a comment\nd\n')
    assert rows == [["a", "b c", None], ["d"]]
    assert wsvio.write([[None, "x y"]]) == '- "x y"'
    assert wsvio.write(rows, alignment=wsvio.Alignment.LEFT) == 'a "b c" -\nd'


def test_lazy_pipeline():
    source = io.StringIO("1 2 -\n3 4\n")
    sink = io.StringIO()
    sums = (
        [str(sum(int(cell) for cell in row if cell is not None))]
        for row in wsvio.parse_stream(source)
    )
    for char in wsvio.lazy_write(sums):
        sink.write(char)
    assert sink.getvalue() == "3\n7"


def test_tokens_keep_comments():
    tokens = list(wsvio.tokenize("a # note"))
    assert tokens == [
        wsvio.Token(wsvio.TokenKind.VALUE, "a"),
        wsvio.Token(wsvio.TokenKind.COMMENT, " note"),
    ]
    assert list(wsvio.tokenize_stream("a # note")) == tokens


def test_error_is_exported():
    with pytest.raises(wsvio.WsvError) as err:
        wsvio.parse_all('"unterminated')
    assert err.value.kind == wsvio.ErrorKind.STRING_NOT_CLOSED
    assert err.value.location == wsvio.Location(line=1, column=14, offset=13)
    with pytest.raises(wsvio.WsvWriteError):
        wsvio.write([[3]])
