"""A library of books grouped by author and by genre, and its command."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping, Sequence

from datalogue.books.book import Book, BookError
from datalogue.books.creator import read_books

_USAGE = "usage: books input_file"


def _group(books: Iterable[Book], key) -> dict[str, list[Book]]:
    groups: dict[str, list[Book]] = {}
    for book in books:
        groups.setdefault(key(book), []).append(book)
    return dict(sorted(groups.items()))


def _format_groups(groups: Mapping[str, Sequence[Book]]) -> str:
    parts: list[str] = []
    for key, books in groups.items():
        parts.append(f"\t{key}\n")
        parts.extend(f"\t\t{book}\n" for book in books)
        pages = sum(book.pages for book in books)
        hours = sum(book.hours for book in books)
        parts.append("\t\t---\n")
        parts.append(f"\t\tNumber of books: {len(books)}\n")
        parts.append(f"\t\tNumber of pages: {pages}\n")
        parts.append(f"\t\tNumber of hours: {hours:g}\n")
        parts.append("\n")
    return "".join(parts)


class Library:
    """Books organised by author and by genre, each in sorted key order."""

    def __init__(self, books: Iterable[Book]) -> None:
        self.books = list(books)
        self.by_author = _group(self.books, lambda book: book.author)
        self.by_genre = _group(self.books, lambda book: book.genre)

    def __str__(self) -> str:
        return (
            "Books, Organized By Author\n"
            f"{_format_groups(self.by_author)}\n"
            "Books, Organized By Genre\n"
            f"{_format_groups(self.by_genre)}\n"
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Read a book list file and print the library built from it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(_USAGE)
        return 1
    file_name = args[0]
    try:
        with open(file_name, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print(f"File {file_name} could not be found or opened.")
        return 1
    try:
        books = read_books(text.split("\n"))
    except BookError as error:
        print(error)
        return 1
    print(Library(books), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())