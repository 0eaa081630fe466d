from dataclasses import dataclass
from typing import Optional

NEWLINE = "\n"


@dataclass(frozen=True)
class Location:
    """
    A position in wsv source text. Line and column count code points
    and start at 1. The offset is the code point index into the source
    string, not a byte offset into its encoding, and is only known when
    the whole source is in memory.
    """

    line: int = 1
    column: int = 1
    offset: Optional[int] = 0

    def __str__(self):
        return f"line {self.line}, column {self.column}"


class LocationTracker:
    """
    Keeps track of the position of the next character a cursor
    will consume.

    >>> tracker = LocationTracker()
    >>> tracker.advance("a")
    >>> tracker.advance("\\n")
    >>> tracker.snapshot()
    Location(line=2, column=1, offset=2)

    """

    def __init__(self, offset=0):
        """
        :param offset: The starting offset, or None to not track
            offsets at all (as for streams).
        """
        self.line = 1
        self.column = 1
        self.offset = offset

    def advance(self, char):
        if char == NEWLINE:
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        if self.offset is not None:
            self.offset += 1

    def snapshot(self):
        return Location(self.line, self.column, self.offset)
