import pytest

from datalogue.books.book import BookError
from datalogue.books.creator import read_books

TWO_BOOKS = [
    "title: Dune",
    "author: Frank Herbert",
    "genre: scifi",
    "pages: 412",
    "hours: 21.5",
    "",
    "title: Emma",
    "author: Jane Austen",
]


def test_reads_all_books():
    books = read_books(TWO_BOOKS)
    assert [str(b) for b in books] == ["Dune by Frank Herbert", "Emma by Jane Austen"]


def test_details_are_applied():
    dune = read_books(TWO_BOOKS)[0]
    assert dune.genre == "scifi"
    assert dune.pages == 412
    assert dune.hours == 21.5


def test_missing_details_keep_defaults():
    emma = read_books(TWO_BOOKS)[1]
    assert emma.genre == "uncategorized"
    assert emma.pages == 0


def test_lines_with_newlines_are_accepted():
    books = read_books(line + "\n" for line in TWO_BOOKS)
    assert [b.title for b in books] == ["Dune", "Emma"]


def test_whitespace_line_separates_books():
    books = read_books(["title: A", "author: B", "   ", "title: C", "author: D"])
    assert [b.author for b in books] == ["B", "D"]


def test_no_lines_no_books():
    assert read_books([]) == []


def test_extra_blank_line_is_an_error():
    with pytest.raises(BookError) as excinfo:
        read_books(["title: A", "author: B", "", ""])
    assert str(excinfo.value) == "Title and author data not provided as required."


def test_first_line_must_be_title():
    with pytest.raises(BookError) as excinfo:
        read_books(["author: B", "title: A"])
    assert str(excinfo.value) == "Info provided was not of type title as expected."


def test_second_line_must_be_author():
    with pytest.raises(BookError, match="not of type author"):
        read_books(["title: A", "genre: x"])


def test_missing_author():
    with pytest.raises(BookError, match="Title and author data not provided"):
        read_books(["title: A"])


@pytest.mark.parametrize(
    "line, message",
    [
        ("title: Again", "Title can not be set twice for the same book."),
        ("author: Again", "Author can not be set twice for the same book."),
    ],
)
def test_title_and_author_only_once(line, message):
    with pytest.raises(BookError) as excinfo:
        read_books(["title: A", "author: B", line])
    assert str(excinfo.value) == message


@pytest.mark.parametrize(
    "line, message",
    [
        ("genre: y", "Genre can not be set twice for the same book."),
        ("pages: 3", "Pages can not be set twice for the same book."),
        ("hours: 3", "Hours can not be set twice for the same book."),
    ],
)
def test_details_only_once(line, message):
    with pytest.raises(BookError) as excinfo:
        read_books(["title: A", "author: B", line, line])
    assert str(excinfo.value) == message


def test_bad_pages_value():
    with pytest.raises(BookError, match="Page value must be a whole number."):
        read_books(["title: A", "author: B", "pages: many"])


def test_unrecognized_label():
    with pytest.raises(BookError, match="Sorry, info type isbn is not recognized."):
        read_books(["title: A", "author: B", "isbn: 1"])