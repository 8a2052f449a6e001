"""Typed lines of a book list file."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InfoType(Enum):
    """The kinds of information a line can carry."""

    TITLE = "title"
    AUTHOR = "author"
    GENRE = "genre"
    PAGES = "pages"
    HOURS = "hours"
    UNRECOGNIZED = ""


@dataclass(frozen=True)
class Info:
    """One line's kind and the text that follows its label."""

    type: InfoType
    text: str


def _info_type(word: str) -> InfoType:
    try:
        return InfoType(word)
    except ValueError:
        return InfoType.UNRECOGNIZED


def parse_info(line: str) -> Info:
    """Split 'label: text' into an Info; raise ValueError for unknown labels."""
    space = line.find(" ")
    if space == -1:
        first_word, rest = line, line
    else:
        first_word, rest = line[:space], line[space + 1:]
    if first_word.endswith(":"):
        first_word = first_word[:-1]
    kind = _info_type(first_word)
    if kind is InfoType.UNRECOGNIZED:
        raise ValueError(f"Sorry, info type {first_word} is not recognized.")
    return Info(kind, rest)