"""
A row assembler consumes from an iterator of tokens (see _wsvio.tokenizer)
and generates the rows of the document, each a list of optional strings.
"""

from _wsvio.tokenizer.errors import WsvError
from _wsvio.tokenizer.token_kind import TokenKind


class RowAssembler:
    """
    A lazy assembler of wsv rows, ie. consumes the output of a
    WsvTokenizer and is an iterable of rows.

    >>> from _wsvio.reading import tokenize_stream
    >>> tokens = tokenize_stream("a -\\n# comment\\nb")
    >>> list(RowAssembler(tokens))
    [['a', None], [], ['b']]

    Every line feed ends a row, so a line holding only a comment is an
    empty row. A final row without a line feed is only generated if it
    has any cells.

    If the tokenizer raises an error partway through a row, the cells
    of that row are generated first and the error is raised on the
    following pull.
    """

    def __init__(self, tokens):
        """
        :param tokens: iterator of tokens, ie. WsvTokenizer.
        """
        self.tokens = tokens

    def __iter__(self):
        row = []
        tokens = iter(self.tokens)
        while True:
            try:
                token = next(tokens)
            except StopIteration:
                break
            except WsvError as err:
                if row:
                    yield row
                raise err

            if token.kind == TokenKind.LINE_BREAK:
                yield row
                row = []
            elif token.kind in TokenKind.cell_kinds():
                row.append(token.as_cell())

        if row:
            yield row
