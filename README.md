# datalogue

A small Datalog toolkit. It scans Datalog source into tokens, parses
it into a program of schemes, facts, rules and queries, and evaluates
that program with relational algebra (select, project, rename, join
and union). It also includes a small reporter that reads a list of
books and groups them by author and by genre.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Commands

### `datalogue-tokens FILE`

Scans a Datalog source file, comments included, and prints one token
per line in the form `(TYPE,"value",line)`, ending with an `EOF`
token. The last line gives the count: `Total Tokens = N`. Without a
file it prints `No input file passed.` and `Total Tokens = 0`; if the
file cannot be opened it prints `File couldn't open.` and exits with
status 1.

### `datalogue-parse FILE`

Parses a Datalog source file. On success it prints `Success!` and then
the schemes, facts, rules, queries and the sorted domain of constant
strings used in the facts, each section headed by its name and count.
On a syntax error it prints `Failure!` and the offending token.
Comments are ignored.

A Datalog file looks like this:

    Schemes:
      snap(S,N,A,P)
    Facts:
      snap('12345','C. Brown','12 Apple St.','555-1234').
    Rules:
      known(N) :- snap(S,N,A,P).
    Queries:
      snap(Id,'C. Brown',Address,Phone)?

Comments start with `#` and run to the end of the line.

### `datalogue-books FILE`

Reads a book list and prints the books grouped by author and by genre
(groups in sorted order), with the number of books, pages and hours
for each group. Each book is a block of lines separated from the next
by a blank line. The first line must be the title and the second the
author; genre, pages and hours may follow, each at most once:

    title: The Hobbit
    author: J. R. R. Tolkien
    genre: fantasy
    pages: 310
    hours: 11.1

Books without a genre are listed as `uncategorized`. Malformed input
stops with a message saying what was wrong and exit status 1.

### `datalogue COMMAND`

A single entry point with sub-commands:

- `datalogue tokens [FILE]` — as `datalogue-tokens`
- `datalogue parse FILE` — as `datalogue-parse`
- `datalogue books FILE` — as `datalogue-books`
- `datalogue demo {graph,join,select}` — prints a built-in example:
  a selection on a small student relation, a natural join of students
  with courses, or the dependency graph of a fixed set of rules.

## Using it from Python

    from datalogue.parser import parse_program
    from datalogue.interpreter import Interpreter

    with open("program.dl") as handle:
        program = parse_program(handle.read())

    interpreter = Interpreter(program)
    print(interpreter.evaluate_rules(), end="")
    print(interpreter.evaluate_queries(), end="")

`evaluate_rules` applies every rule until no new rows appear and
returns a report of the rows each rule added and the number of passes;
`evaluate_queries` returns, for each query, `Yes(n)` or `No` followed
by the matching variable bindings. `Interpreter.evaluate_query` gives
one query's result as an object, and `build_dependency_graph(rules)`
returns a `Graph` with an edge from each rule to the rules whose heads
its body uses.

Lower-level pieces are available too: `datalogue.scanner.scan`,
`datalogue.parser.Parser` (raising `ParseError`), and
`datalogue.relation.Relation`:

    from datalogue.relation import Relation

    students = Relation("students", ["ID", "Name", "Major"], [
        ("'42'", "'Ann'", "'CS'"),
        ("'64'", "'Ned'", "'EE'"),
    ])
    computing = students.select_value(2, "'CS'")
    print(computing)

## Limitations

There is no command that evaluates a Datalog program from a file: the
`parse` command only checks and prints the program. Rule and query
evaluation is available through the `Interpreter` class only. The
dependency graph is built but not used to order rule evaluation.