from _wsvio.row_assembler import RowAssembler
from _wsvio.tokenizer import BufferCursor, StreamCursor, TokenKind, WsvTokenizer


def tokenize(text):
    """
    Tokenize wsv source text held in memory.

    :param text: The wsv source as a string.
    :returns: WsvTokenizer generating the tokens of text.
    """
    return WsvTokenizer(BufferCursor(text))


def tokenize_stream(chars):
    """
    Tokenize a wsv character stream lazily.

    :param chars: Iterable of strings, ie. an open text file, a generator
        of characters or simply a string.
    :returns: WsvTokenizer generating the tokens of the stream.
    """
    return WsvTokenizer(StreamCursor(chars))


def parse_all(text):
    """
    Parses wsv source text and returns the rows of the document,
    ie. rows = parse_all('1 -\\n3 "four"')

    Each row is a list where null cells ('-') are None, and all other
    cells are strings with quotes and escape sequences resolved, so
    the rows above are [['1', None], ['3', 'four']].

    Lines that only contain a comment do not give a row, blank lines
    give an empty row. Raises WsvError for malformed text, in which case
    no rows are returned.
    """
    rows = []
    row = []
    commented = False
    for token in tokenize(text):
        if token.kind == TokenKind.LINE_BREAK:
            if row or not commented:
                rows.append(row)
            row = []
            commented = False
        elif token.kind == TokenKind.COMMENT:
            commented = True
        else:
            row.append(token.as_cell())

    if row:
        rows.append(row)

    return rows


def parse_stream(chars):
    """
    Parses a wsv character stream lazily, one row at a time. Use this
    for documents that are too large to be read into memory, ie.

    >>> with open("large.wsv") as f:
    ...     for row in parse_stream(f):
    ...         process(row)

    If the stream is malformed, any cells read on the line of the error
    are generated as a row before WsvError is raised.

    :param chars: Iterable of strings, see tokenize_stream.
    :returns: Iterator of rows, each a list of optional strings.
    """
    return iter(RowAssembler(tokenize_stream(chars)))
