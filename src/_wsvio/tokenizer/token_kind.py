from enum import Enum, auto, unique


@unique
class TokenKind(Enum):
    LINE_BREAK = auto()
    NULL = auto()
    VALUE = auto()
    COMMENT = auto()

    @classmethod
    def cell_kinds(cls):
        return (cls.NULL, cls.VALUE)
