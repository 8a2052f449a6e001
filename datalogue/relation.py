"""Relations: named, schemed sets of rows, with relational algebra."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

Row = tuple[str, ...]
Scheme = tuple[str, ...]


def format_row(scheme: Sequence[str], row: Sequence[str]) -> str:
    """Render a row as 'name=value' pairs joined by ', ', one per scheme column."""
    if len(row) < len(scheme):
        raise IndexError(
            f"row has {len(row)} values but the scheme has {len(scheme)} columns"
        )
    return ", ".join(f"{name}={value}" for name, value in zip(scheme, row))


class Relation:
    """A named relation: an ordered scheme of column names and a set of rows."""

    def __init__(
        self,
        name: str = "",
        scheme: Iterable[str] = (),
        rows: Iterable[Sequence[str]] = (),
    ) -> None:
        self.name = name
        self._scheme: Scheme = tuple(scheme)
        self._rows: set[Row] = {tuple(row) for row in rows}

    @property
    def scheme(self) -> Scheme:
        """The column names, in order."""
        return self._scheme

    @property
    def rows(self) -> frozenset[Row]:
        """The rows held by the relation."""
        return frozenset(self._rows)

    def add(self, row: Sequence[str]) -> bool:
        """Add a row; return True if it was not already present."""
        row = tuple(row)
        if row in self._rows:
            return False
        self._rows.add(row)
        return True

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(sorted(self._rows))

    def __contains__(self, row: object) -> bool:
        return isinstance(row, (tuple, list)) and tuple(row) in self._rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return (
            self.name == other.name
            and self._scheme == other._scheme
            and self._rows == other._rows
        )

    def __repr__(self) -> str:
        return f"Relation({self.name!r}, {self._scheme!r}, {sorted(self._rows)!r})"

    def __str__(self) -> str:
        return "".join(f"{format_row(self._scheme, row)}\n" for row in self)

    def format_rows(self) -> str:
        """Every row on its own line, indented by two spaces."""
        return "".join(f"  {format_row(self._scheme, row)}\n" for row in self)

    def select_value(self, index: int, value: str) -> Relation:
        """Rows whose column at index equals value; name and scheme are kept."""
        return Relation(
            self.name, self._scheme, (row for row in self._rows if row[index] == value)
        )

    def select_equal(self, first: int, second: int) -> Relation:
        """Rows whose values in the two columns are equal."""
        return Relation(
            self.name,
            self._scheme,
            (row for row in self._rows if row[first] == row[second]),
        )

    def project(self, indices: Sequence[int]) -> Relation:
        """Keep only the given columns, in the given order."""
        indices = list(indices)
        scheme = [self._scheme[i] for i in indices]
        return Relation(
            self.name,
            scheme,
            (tuple(row[i] for i in indices) for row in self._rows),
        )

    def rename(self, names: Iterable[str]) -> Relation:
        """The same rows under a new scheme."""
        return Relation(self.name, names, self._rows)

    @staticmethod
    def joinable(
        left_scheme: Sequence[str],
        right_scheme: Sequence[str],
        left_row: Sequence[str],
        right_row: Sequence[str],
    ) -> bool:
        """True if the rows agree on every column name the schemes share."""
        for left_name, left_value in zip(left_scheme, left_row):
            for right_name, right_value in zip(right_scheme, right_row):
                if left_name == right_name and left_value != right_value:
                    return False
        return True

    def join(self, other: Relation) -> Relation:
        """Natural join: combine every pair of rows that agree on shared columns."""
        left_scheme = self._scheme
        right_scheme = other._scheme
        scheme = left_scheme + tuple(n for n in right_scheme if n not in left_scheme)
        right_index = {name: i for i, name in reversed(list(enumerate(right_scheme)))}
        extra = [right_index[name] for name in scheme[len(left_scheme):]]

        result = Relation(self.name, scheme)
        for left_row in self._rows:
            for right_row in other._rows:
                if self.joinable(left_scheme, right_scheme, left_row, right_row):
                    result.add(tuple(left_row) + tuple(right_row[i] for i in extra))
        return result

    def union(self, other: Relation) -> list[Row]:
        """Add the other relation's rows; return the newly added ones, sorted."""
        added = sorted(row for row in other._rows if row not in self._rows)
        self._rows.update(added)
        return added