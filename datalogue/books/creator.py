"""Building books from the lines of a book list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from datalogue.books.book import Book, BookError, parse_hours, parse_pages
from datalogue.books.info import Info, InfoType, parse_info


def _info(line: str) -> Info:
    try:
        return parse_info(line)
    except BookError:
        raise
    except ValueError as error:
        raise BookError(str(error)) from error


def _expect(info: Info, kind: InfoType) -> None:
    if info.type is not kind:
        raise BookError(f"Info provided was not of type {kind.value} as expected.")


def _books(lines: list[str]) -> Iterator[Book]:
    position = 0
    while position < len(lines):
        title = author = ""
        book: Book | None = None
        seen: set[InfoType] = set()
        line_number = 0
        while position < len(lines):
            line = lines[position]
            position += 1
            if not line.strip():
                break
            info = _info(line)
            if line_number == 0:
                _expect(info, InfoType.TITLE)
                title = info.text
            elif line_number == 1:
                _expect(info, InfoType.AUTHOR)
                author = info.text
                book = Book(title, author)
            else:
                assert book is not None
                kind = info.type
                if kind in (InfoType.TITLE, InfoType.AUTHOR) or kind in seen:
                    raise BookError(
                        f"{kind.value.capitalize()} can not be set twice for the same book."
                    )
                seen.add(kind)
                if kind is InfoType.GENRE:
                    book.genre = info.text
                elif kind is InfoType.HOURS:
                    book.hours = parse_hours(info.text)
                elif kind is InfoType.PAGES:
                    book.pages = parse_pages(info.text)
            line_number += 1
        if not title or not author or book is None:
            raise BookError("Title and author data not provided as required.")
        yield book


def read_books(lines: Iterable[str]) -> list[Book]:
    """Build the books described by lines; books are separated by blank lines.

    Every remaining line, including an empty last one after a final newline,
    is taken into account, so pass text.split("\\n") to read a whole file.
    """
    return list(_books([line.rstrip("\n") for line in lines]))