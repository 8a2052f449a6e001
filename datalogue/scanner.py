"""Lexical scanner for Datalog programs."""

from __future__ import annotations

import string
from collections.abc import Iterator

from datalogue.tokens import Token, TokenType

_WHITESPACE = frozenset(" \t\n\v\f\r")
_LETTERS = frozenset(string.ascii_letters)
_ALNUM = frozenset(string.ascii_letters + string.digits)

_PUNCTUATION = {
    ",": TokenType.COMMA,
    ".": TokenType.PERIOD,
    "?": TokenType.Q_MARK,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "*": TokenType.MULTIPLY,
    "+": TokenType.ADD,
}

_KEYWORDS = {
    "S": ("Schemes", TokenType.SCHEMES),
    "F": ("Facts", TokenType.FACTS),
    "R": ("Rules", TokenType.RULES),
    "Q": ("Queries", TokenType.QUERIES),
}


def _is_keyword(text: str, pos: int, keyword: str) -> bool:
    """True if keyword starts at pos and is followed by whitespace, ':' or the end."""
    if not text.startswith(keyword, pos):
        return False
    end = pos + len(keyword)
    return end == len(text) or text[end] in _WHITESPACE or text[end] == ":"


class Scanner:
    """Turns Datalog source text into a list of tokens ending with EOF."""

    def __init__(self, text: str, line: int = 1, keep_comments: bool = False) -> None:
        self._text = text
        self._line = line
        self._keep_comments = keep_comments

    def scan(self) -> list[Token]:
        """Scan the whole text and return its tokens, the last being EOF."""
        return list(self._tokens())

    def _tokens(self) -> Iterator[Token]:
        text = self._text
        size = len(text)
        line = self._line
        pos = 0
        while pos < size:
            ch = text[pos]

            if ch == "\n":
                line += 1
                pos += 1
                continue
            if ch in _WHITESPACE:
                pos += 1
                continue

            if ch in _PUNCTUATION:
                yield Token(_PUNCTUATION[ch], ch, line)
                pos += 1
                continue

            if ch == ":":
                if text.startswith(":-", pos):
                    yield Token(TokenType.COLON_DASH, ":-", line)
                    pos += 2
                else:
                    yield Token(TokenType.COLON, ":", line)
                    pos += 1
                continue

            if ch in _KEYWORDS:
                keyword, kind = _KEYWORDS[ch]
                if _is_keyword(text, pos, keyword):
                    yield Token(kind, keyword, line)
                    pos += len(keyword)
                    continue

            if ch == "'":
                close = text.find("'", pos + 1)
                if close == -1:
                    # An unterminated string swallows the rest of the input.
                    yield Token(TokenType.UNDEFINED, text[pos:], line)
                    line += text.count("\n", pos)
                    pos = size
                else:
                    yield Token(TokenType.STRING, text[pos:close + 1], line)
                    pos = close + 1
                continue

            if ch == "#":
                end = text.find("\n", pos)
                if end == -1:
                    end = size
                if self._keep_comments:
                    yield Token(TokenType.COMMENT, text[pos:end], line)
                pos = end
                continue

            if ch in _LETTERS:
                end = pos
                while end < size and text[end] in _ALNUM:
                    end += 1
                yield Token(TokenType.ID, text[pos:end], line)
                pos = end
                continue

            yield Token(TokenType.UNDEFINED, ch, line)
            pos += 1

        yield Token(TokenType.ENDOF, "", line)


def scan(text: str, keep_comments: bool = False) -> list[Token]:
    """Scan text starting at line 1 and return its tokens."""
    return Scanner(text, keep_comments=keep_comments).scan()