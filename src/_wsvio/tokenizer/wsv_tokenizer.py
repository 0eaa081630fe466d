from _wsvio.tokenizer.abstract_cursor import is_newline, is_whitespace
from _wsvio.tokenizer.errors import ErrorKind, WsvError
from _wsvio.tokenizer.token import Token
from _wsvio.tokenizer.token_kind import TokenKind

QUOTE = '"'
SLASH = "/"
HASH = "#"


def is_string_char(char):
    """
    Characters that are taken verbatim inside a quoted value.
    """
    return char != QUOTE and not is_newline(char)


def is_value_char(char):
    """
    Characters that can make up an unquoted value.
    """
    return (
        char != QUOTE and char != HASH and not is_newline(char) and not is_whitespace(char)
    )


def may_follow_string(char):
    return char is None or char == HASH or is_newline(char) or is_whitespace(char)


class WsvTokenizer:
    """
    The wsv tokenizer is an iterator of tokens for a given cursor over wsv
    source text. Which cursor is given decides whether the whole source is
    held in memory (BufferCursor) or read lazily (StreamCursor); the
    tokens are the same.

    Some errors are found while the token before them is still valid, ie.
    for 'abc"' the value 'abc' is complete when the quote is seen. In that
    case the token is returned and the error is raised on the following
    call to next. After an error has been raised the tokenizer is
    exhausted.

    >>> tokens = WsvTokenizer(BufferCursor('a "b c" -'))
    >>> [t.value for t in tokens]
    ['a', 'b c', None]

    """

    def __init__(self, cursor):
        """
        :param cursor: The cursor over the source text, see
            BufferCursor and StreamCursor.
        """
        self.cursor = cursor
        self.pending_error = None
        self.errored = False

    def __iter__(self):
        return self

    def __next__(self):
        if self.errored:
            raise StopIteration
        if self.pending_error is not None:
            error, self.pending_error = self.pending_error, None
            self.errored = True
            raise error

        self.cursor.consume_while(is_whitespace)
        start = self.cursor.location()

        result = self.tokenize_quoted_value(start)
        if result is None:
            result = self.tokenize_comment(start)
        if result is None:
            result = self.tokenize_line_break(start)
        if result is None:
            result = self.tokenize_value(start)

        if result is None:
            raise StopIteration
        if isinstance(result, WsvError):
            self.errored = True
            raise result
        return result

    def defer_error(self, kind):
        self.pending_error = WsvError(kind, self.cursor.location())

    def tokenize_quoted_value(self, start):
        """
        Tokenize a quoted value, returns
        Token(TokenKind.VALUE, 'a "quoted" text\\nvalue') for a cursor at
        '"a ""quoted"" text"/"value"'.

        Escape-free values are the single span consumed by the cursor,
        values with escapes are joined from their pieces.

        :returns: The value token, a WsvError if the value is
            malformed or None if the cursor is not at a quote.
        """
        if self.cursor.consume_char(QUOTE) is None:
            return None

        chunks = []
        while True:
            literal = self.cursor.consume_while(is_string_char)
            if literal is not None:
                chunks.append(literal)

            if self.cursor.consume_char(QUOTE) is None:
                # Either at a line feed or at end of input
                return WsvError(ErrorKind.STRING_NOT_CLOSED, self.cursor.location())

            if self.cursor.consume_char(QUOTE) is not None:
                chunks.append(QUOTE)
            elif self.cursor.consume_char(SLASH) is not None:
                if self.cursor.consume_char(QUOTE) is None:
                    return WsvError(
                        ErrorKind.INVALID_STRING_LINE_BREAK, self.cursor.location()
                    )
                chunks.append("\n")
            else:
                break

        if len(chunks) == 1:
            value = chunks[0]
        else:
            value = "".join(chunks)

        if not may_follow_string(self.cursor.peek()):
            self.defer_error(ErrorKind.INVALID_CHARACTER_AFTER_STRING)
        return Token(TokenKind.VALUE, value, start)

    def tokenize_comment(self, start):
        """
        Tokenize a comment, returns Token(TokenKind.COMMENT, ' a comment')
        for a cursor at '# a comment\\n'. The line feed is left for
        the next token.
        """
        if self.cursor.consume_char(HASH) is None:
            return None
        text = self.cursor.consume_while(lambda char: not is_newline(char))
        return Token(TokenKind.COMMENT, text or "", start)

    def tokenize_line_break(self, start):
        if self.cursor.consume_if(is_newline) is None:
            return None
        return Token(TokenKind.LINE_BREAK, None, start)

    def tokenize_value(self, start):
        """
        Tokenize an unquoted value, returns Token(TokenKind.VALUE, 'abc')
        for a cursor at 'abc' and Token(TokenKind.NULL) for a cursor
        at '-'.
        """
        text = self.cursor.consume_while(is_value_char)
        if text is None:
            return None
        if text == "-":
            return Token(TokenKind.NULL, None, start)
        if self.cursor.peek() == QUOTE:
            self.defer_error(ErrorKind.INVALID_DOUBLE_QUOTE_AFTER_VALUE)
        return Token(TokenKind.VALUE, text, start)
