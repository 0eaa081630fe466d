from abc import ABC, abstractmethod
from itertools import chain

from _wsvio.tokenizer.location import NEWLINE

WHITESPACE = frozenset(
    chr(code_point)
    for code_point in chain(
        (0x09, 0x0B, 0x0C, 0x0D, 0x20, 0x85, 0xA0, 0x1680),
        range(0x2000, 0x200B),
        (0x2028, 0x2029, 0x202F, 0x205F, 0x3000),
    )
)


def is_whitespace(char):
    """
    Whitespace separating wsv values. Note that the line feed is not
    whitespace, it separates rows.
    """
    return char in WHITESPACE


def is_newline(char):
    return char == NEWLINE


# Marks the lookahead slot as empty, None is taken by end of input.
_EMPTY = object()


class AbstractCursor(ABC):
    """
    A cursor over a sequence of characters with one character of
    lookahead. The source is asked for each character at most once.

    This is an abstract class which does not implement how characters are
    fetched and how spans of matched characters are materialized.
    """

    def __init__(self, tracker):
        """
        :param tracker: The LocationTracker that follows the cursor.
        """
        self.tracker = tracker
        self._peeked = _EMPTY

    @abstractmethod
    def _fetch(self):
        """
        :returns: The next character from the source, or None at the end of
            input.
        """
        pass

    @abstractmethod
    def consume_while(self, predicate):
        """
        Consume characters for as long as they satisfy predicate.

        :returns: The consumed characters as a string, or None if no
            characters were consumed.
        """
        pass

    def peek(self):
        """
        :returns: The next character without consuming it, or None at
            the end of input.
        """
        if self._peeked is _EMPTY:
            self._peeked = self._fetch()
        return self._peeked

    def consume_if(self, predicate):
        """
        Consume the next character if it satisfies predicate.

        :returns: The consumed character, or None if there was no
            character or it did not satisfy the predicate.
        """
        char = self.peek()
        if char is None or not predicate(char):
            return None
        self._peeked = _EMPTY
        self.tracker.advance(char)
        return char

    def consume_char(self, expected):
        return self.consume_if(lambda char: char == expected)

    def location(self):
        """
        :returns: The Location of the next character to be consumed.
        """
        return self.tracker.snapshot()
