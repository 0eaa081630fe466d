from enum import Enum, auto, unique


@unique
class ErrorKind(Enum):
    """
    The kinds of errors a wsv document can contain.
    """

    STRING_NOT_CLOSED = auto()
    INVALID_DOUBLE_QUOTE_AFTER_VALUE = auto()
    INVALID_CHARACTER_AFTER_STRING = auto()
    INVALID_STRING_LINE_BREAK = auto()

    @property
    def description(self):
        return self.name.replace("_", " ").title()


class WsvError(Exception):
    """
    Raised when the contents of a wsv document is malformed. Once a
    tokenizer or row iterator has raised a WsvError it is exhausted.

    :param kind: The ErrorKind of the error.
    :param location: The Location in the source text where the error
        was found.
    """

    def __init__(self, kind, location):
        self.kind = kind
        self.location = location
        super().__init__(
            f"(line: {location.line}, column: {location.column}) {kind.description}"
        )

    def __eq__(self, other):
        if not isinstance(other, WsvError):
            return NotImplemented
        return self.kind == other.kind and self.location == other.location

    def __hash__(self):
        return hash((self.kind, self.location))
