import warnings
from collections import deque
from collections.abc import Sized
from enum import Enum, unique

from _wsvio.tokenizer.abstract_cursor import is_whitespace

NULL = "-"


class WsvWriteError(Exception):
    pass


@unique
class Alignment(Enum):
    PACKED = 1
    LEFT = 2
    RIGHT = 3


def needs_quotes(value):
    """
    Whether a cell value has to be quoted to be read back as itself. That
    is the case if it contains a line feed, '"', '#' or whitespace, and
    for the empty string and '-', which would otherwise read back as no
    cell and as null respectively.
    """
    if value == "" or value == NULL:
        return True
    return any(char in '\n"#' or is_whitespace(char) for char in value)


def render_cell(value):
    """
    :param value: A cell value, either a string or None for null.
    :returns: The cell as it is written in a wsv document.
    """
    if value is None:
        return NULL
    if not isinstance(value, str):
        raise WsvWriteError(
            f"wsv cells must be strings or None, found {type(value).__name__}: {value!r}"
        )
    if not needs_quotes(value):
        return value
    escaped = value.replace('"', '""').replace("\n", '"/"')
    return f'"{escaped}"'


class LazyWriter:
    """
    An iterator over the characters of the packed wsv document for the
    given rows. Neither the rows nor the document are held in memory
    beyond the current cell, so this can write documents of any size.

    >>> "".join(LazyWriter([["a", None], ["b c"]]))
    'a -\\n"b c"'

    """

    def __init__(self, rows):
        """
        :param rows: Iterable of rows, where each row is an iterable of
            strings or None.
        """
        self.rows = iter(rows)
        self.current_row = None
        self.at_row_start = True
        self.started = False
        self.pending = deque()

    def __iter__(self):
        return self

    def __next__(self):
        while not self.pending:
            if self.current_row is not None:
                try:
                    value = next(self.current_row)
                except StopIteration:
                    self.current_row = None
                    continue
                if self.at_row_start:
                    self.at_row_start = False
                else:
                    self.pending.append(" ")
                self.pending.extend(render_cell(value))
                continue

            row = next(self.rows)
            self.current_row = iter(row)
            self.at_row_start = True
            if self.started:
                return "\n"
            self.started = True
        return self.pending.popleft()


def lazy_write(rows):
    """
    Lazily writes rows as a packed wsv document, one character at a time,
    ie.

    >>> with open("large.wsv", "w") as f:
    ...     for char in lazy_write(rows):
    ...         f.write(char)

    :param rows: Iterable of rows, where each row is an iterable of
        strings or None.
    :returns: Iterator of the characters of the document.
    """
    return LazyWriter(rows)


def column_widths(rendered_rows):
    widths = []
    for row in rendered_rows:
        for i, cell in enumerate(row):
            if i < len(widths):
                widths[i] = max(widths[i], len(cell))
            else:
                widths.append(len(cell))
    return widths


def write_aligned(rows, alignment):
    rendered_rows = [[render_cell(value) for value in row] for row in rows]
    widths = column_widths(rendered_rows)

    lines = []
    for row in rendered_rows:
        if alignment == Alignment.RIGHT:
            cells = [cell.rjust(widths[i]) for i, cell in enumerate(row)]
        else:
            cells = [cell.ljust(widths[i]) for i, cell in enumerate(row)]
        lines.append(" ".join(cells))
    return "\n".join(lines)


def write(rows, alignment=Alignment.PACKED):
    """
    Writes the given rows as a wsv document.

    :param rows: Iterable of rows, where each row is an iterable of
        strings or None. Rows may have differing lengths.
    :param alignment: Alignment.PACKED (the default) separates cells by a
        single space. Alignment.LEFT and Alignment.RIGHT pad the cells
        so that columns line up, which requires all rows to be in memory
        at once. Use Alignment.PACKED, or lazy_write, for rows that do not
        fit in memory.
    :returns: The document as a string.
    """
    if alignment == Alignment.PACKED:
        return "".join(LazyWriter(rows))

    if alignment not in (Alignment.LEFT, Alignment.RIGHT):
        raise ValueError(f"Unknown alignment {alignment}")

    if not isinstance(rows, Sized):
        warnings.warn(
            f"{alignment} reads all rows into memory to compute column widths"
            ", use Alignment.PACKED or lazy_write for unbounded input.",
            stacklevel=2,
        )
    return write_aligned(rows, alignment)
