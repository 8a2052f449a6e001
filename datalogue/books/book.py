"""Books and parsing of their numeric fields."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_MAX = 2**31 - 1

PAGES_ERROR = "Page value must be a whole number."
HOURS_ERROR = "Hour value must be a positive number."


class BookError(ValueError):
    """Raised when book data is missing, repeated or malformed."""


@dataclass
class Book:
    """A book with its title, author and optional details."""

    title: str
    author: str
    genre: str = "uncategorized"
    pages: int = 0
    hours: float = 0.0

    def __str__(self) -> str:
        return f"{self.title} by {self.author}"


def parse_pages(text: str) -> int:
    """Read a leading whole number of pages; raise BookError if there is none."""
    match = _INT.match(text)
    if match is None:
        raise BookError(PAGES_ERROR)
    pages = int(match.group(1))
    if pages < 0 or pages > _INT_MAX:
        raise BookError(PAGES_ERROR)
    return pages


def parse_hours(text: str) -> float:
    """Read a leading non-negative number of hours; raise BookError otherwise."""
    match = _FLOAT.match(text)
    if match is None:
        raise BookError(HOURS_ERROR)
    hours = float(match.group(1))
    if hours < 0:
        raise BookError(HOURS_ERROR)
    return hours