"""Command-line entry points: token listing, parsing, books and demonstrations."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from datalogue.books import library
from datalogue.interpreter import build_dependency_graph
from datalogue.parser import ParseError, Parser
from datalogue.relation import Relation, format_row
from datalogue.scanner import Scanner, scan
from datalogue.syntax import Predicate, Rule


def _read(file_name: str) -> str | None:
    try:
        with open(file_name, encoding="utf-8") as handle:
            return handle.read()
    except OSError:
        return None


def tokens_main(argv: Sequence[str] | None = None) -> int:
    """Print every token of a file, comments included, and the token count."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("No input file passed.")
        print("Total Tokens = 0")
        return 0
    text = _read(args[0])
    if text is None:
        print("File couldn't open.")
        print("Total Tokens = 0")
        return 1
    tokens = Scanner(text, 1, keep_comments=True).scan()
    for token in tokens:
        print(token)
    print(f"Total Tokens = {len(tokens)}")
    return 0


def parse_main(argv: Sequence[str] | None = None) -> int:
    """Parse a Datalog file and print the program, or the first bad token."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: parse input_file")
        return 1
    text = _read(args[0])
    if text is None:
        print(f"File {args[0]} could not be found or opened.")
        return 1
    try:
        program = Parser(scan(text)).parse()
    except ParseError as error:
        print("Failure!")
        print(f"  {error.token}")
        return 0
    print("Success!")
    print(program, end="")
    return 0


def _select_demo() -> str:
    scheme = ("ID", "Name", "Major")
    rows = [
        ("'42'", "'Ann'", "'CS'"),
        ("'32'", "'Bob'", "'CS'"),
        ("'64'", "'Ned'", "'EE'"),
        ("'16'", "'Jim'", "'EE'"),
    ]
    relation = Relation("student", scheme)
    lines = []
    for row in rows:
        lines.append(format_row(scheme, row) + "\n")
        relation.add(row)
    lines.append("\nrelation:\n")
    lines.append(f"{relation}\n")
    lines.append("select Major='CS' result:\n")
    lines.append(f"{relation.select_value(2, chr(39) + 'CS' + chr(39))}\n")
    return "".join(lines)


def _join_demo() -> str:
    students = Relation(
        "students",
        ("ID", "Name", "Major"),
        [("'42'", "'Ann'", "'CS'"), ("'64'", "'Ned'", "'EE'")],
    )
    courses = Relation(
        "courses",
        ("ID", "Course"),
        [("'42'", "'CS 100'"), ("'32'", "'CS 232'")],
    )
    return str(students.join(courses))


def _graph_demo() -> str:
    rule_names = [
        ("A", ["B", "C"]),
        ("B", ["A", "D"]),
        ("B", ["B"]),
        ("E", ["F", "G"]),
        ("E", ["E", "F"]),
    ]
    rules = [
        Rule(head=Predicate(head), body=[Predicate(name) for name in body])
        for head, body in rule_names
    ]
    return str(build_dependency_graph(rules))


_DEMOS = {
    "select": _select_demo,
    "join": _join_demo,
    "graph": _graph_demo,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Dispatch to the tokens, parse, books and demo sub-commands."""
    parser = argparse.ArgumentParser(prog="datalogue")
    commands = parser.add_subparsers(dest="command", required=True)

    tokens = commands.add_parser("tokens", help="list the tokens of a file")
    tokens.add_argument("file", nargs="?")
    parse = commands.add_parser("parse", help="parse a Datalog program")
    parse.add_argument("file")
    books = commands.add_parser("books", help="organise a book list")
    books.add_argument("file")
    demo = commands.add_parser("demo", help="run a built-in example")
    demo.add_argument("name", choices=sorted(_DEMOS))

    args = parser.parse_args(list(sys.argv[1:] if argv is None else argv))
    if args.command == "tokens":
        return tokens_main([args.file] if args.file else [])
    if args.command == "parse":
        return parse_main([args.file])
    if args.command == "books":
        return library.main([args.file])
    print(_DEMOS[args.name](), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())