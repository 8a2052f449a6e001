"""Token kinds and tokens produced by the Datalog scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Every kind of token the scanner can emit."""

    COMMA = auto()
    PERIOD = auto()
    Q_MARK = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    COLON = auto()
    COLON_DASH = auto()
    MULTIPLY = auto()
    ADD = auto()
    SCHEMES = auto()
    FACTS = auto()
    RULES = auto()
    QUERIES = auto()
    ID = auto()
    STRING = auto()
    COMMENT = auto()
    WHITESPACE = auto()
    UNDEFINED = auto()
    ENDOF = auto()

    @property
    def label(self) -> str:
        """The name used when the token is printed."""
        return _LABELS.get(self, self.name)


_LABELS = {
    TokenType.ENDOF: "EOF",
    TokenType.WHITESPACE: "INVALID",
}


@dataclass(frozen=True)
class Token:
    """A scanned token: its kind, the text it covers and its line."""

    type: TokenType = TokenType.UNDEFINED
    value: str = ""
    line: int = 0

    def __str__(self) -> str:
        return f'({self.type.label},"{self.value}",{self.line})'