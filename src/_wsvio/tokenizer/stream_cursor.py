from itertools import chain

from _wsvio.tokenizer.abstract_cursor import AbstractCursor
from _wsvio.tokenizer.location import LocationTracker


class StreamCursor(AbstractCursor):
    """
    Cursor over a character stream that need not fit in memory, ie. any
    iterable of strings such as a generator of characters or an open text
    file. Items are split into characters lazily, and only one item of
    the source is held at a time.

    Offsets are not tracked as there is no buffer to index into.
    """

    def __init__(self, chars):
        """
        :param chars: Iterable of strings, each containing zero or
            more characters.
        """
        super().__init__(LocationTracker(offset=None))
        self.chars = chain.from_iterable(chars)

    def _fetch(self):
        return next(self.chars, None)

    def consume_while(self, predicate):
        consumed = []
        char = self.consume_if(predicate)
        while char is not None:
            consumed.append(char)
            char = self.consume_if(predicate)
        if not consumed:
            return None
        return "".join(consumed)
