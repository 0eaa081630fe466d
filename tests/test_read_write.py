import hypothesis.strategies as st
import pytest
from hypothesis import given

from _wsvio.reading import parse_all, parse_stream
from _wsvio.tokenizer.abstract_cursor import is_whitespace
from _wsvio.writing import Alignment, lazy_write, render_cell, write

from .generators.wsv_contents import documents, unquoted_values


@pytest.mark.parametrize("alignment", list(Alignment))
@given(documents)
def test_read_write_is_identity(alignment, document):
    assert parse_all(write(document, alignment=alignment)) == document


@pytest.mark.parametrize("alignment", list(Alignment))
@given(documents)
def test_write_is_idempotent(alignment, document):
    written = write(document, alignment=alignment)
    assert write(parse_all(written), alignment=alignment) == written


@given(documents)
def test_lazy_read_write_is_identity(document):
    assert list(parse_stream(lazy_write(document))) == document


@given(st.text())
def test_special_values_are_quoted(value):
    rendered = render_cell(value)
    if any(c in '\n"#' or is_whitespace(c) for c in value):
        assert len(rendered) >= 2
        assert rendered[0] == rendered[-1] == '"'


@given(unquoted_values)
def test_plain_values_are_not_quoted(value):
    assert render_cell(value) == value
    assert write([[value]]) == value


def test_null_and_hyphen_round_trip():
    assert parse_all("-") == [[None]]
    assert parse_all('"-"') == [["-"]]
    assert write([[None, "-"]]) == '- "-"'
    assert parse_all(write([[None, "-"]])) == [[None, "-"]]
