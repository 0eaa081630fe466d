from dataclasses import dataclass, field
from typing import Optional

from _wsvio.tokenizer.location import Location
from _wsvio.tokenizer.token_kind import TokenKind


@dataclass
class Token:
    """
    A token in a wsv document. For kind=TokenKind.VALUE the value is the
    unescaped cell text, and for kind=TokenKind.COMMENT it is the comment
    text without the leading '#'. The location is where the token starts
    in the source and does not take part in comparisons.
    """

    kind: TokenKind
    value: Optional[str] = None
    location: Optional[Location] = field(default=None, compare=False)

    def as_cell(self):
        """
        :returns: The cell a NULL or VALUE token represents, ie. None for
            null and the value string otherwise.
        """
        if self.kind not in TokenKind.cell_kinds():
            raise ValueError(f"{self.kind} token does not represent a cell")
        return self.value
