from _wsvio.tokenizer.abstract_cursor import AbstractCursor
from _wsvio.tokenizer.location import LocationTracker


class BufferCursor(AbstractCursor):
    """
    Cursor over a string held in memory. Spans are cut from the source
    with a single slice.
    """

    def __init__(self, text):
        """
        :param text: The wsv source text.
        """
        super().__init__(LocationTracker(offset=0))
        self.text = text

    def _fetch(self):
        offset = self.tracker.offset
        if offset < len(self.text):
            return self.text[offset]
        return None

    def consume_while(self, predicate):
        start = self.tracker.offset
        while self.consume_if(predicate) is not None:
            pass
        end = self.tracker.offset
        if end == start:
            return None
        return self.text[start:end]
