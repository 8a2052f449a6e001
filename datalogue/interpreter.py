"""Evaluation of Datalog programs over a database of relations."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from functools import reduce

from datalogue.graph import Graph
from datalogue.relation import Relation, Row, format_row
from datalogue.syntax import DatalogProgram, Predicate, Rule


class Database(dict):
    """Relations keyed by their name."""

    def size(self) -> int:
        """The total number of rows over all relations."""
        return sum(len(relation) for relation in self.values())


@dataclass(frozen=True)
class QueryResult:
    """The answer to one query: matches found and the renamed projection."""

    predicate: Predicate
    count: int
    relation: Relation

    def __str__(self) -> str:
        answer = f"Yes({self.count})" if self.count > 0 else "No"
        text = f"{self.predicate}? {answer}\n"
        if self.relation.scheme:
            text += self.relation.format_rows()
        return text


class Interpreter:
    """Builds a database from a program's schemes and facts and evaluates it."""

    def __init__(self, program: DatalogProgram) -> None:
        self.program = program
        self.database = Database()
        self.passes = 0
        for scheme in program.schemes:
            self.database.setdefault(
                scheme.name, Relation(scheme.name, scheme.parameter_names())
            )
        for fact in program.facts:
            self.database[fact.name].add(fact.parameter_names())

    def _select(self, predicate: Predicate) -> tuple[Relation, dict[str, int]]:
        """Apply the predicate's constants and repeated variables as selections."""
        relation = self.database[predicate.name]
        first_seen: dict[str, int] = {}
        for index, parameter in enumerate(predicate.parameters):
            if parameter.is_constant():
                relation = relation.select_value(index, parameter.name)
            elif parameter.name in first_seen:
                relation = relation.select_equal(index, first_seen[parameter.name])
            else:
                first_seen[parameter.name] = index
        return relation, first_seen

    def evaluate_predicate(self, predicate: Predicate) -> Relation:
        """The relation of the predicate's variables that satisfy it."""
        relation, variables = self._select(predicate)
        return relation.project(list(variables.values())).rename(list(variables))

    def evaluate_query(self, predicate: Predicate) -> QueryResult:
        """Evaluate one query and return its answer."""
        relation, variables = self._select(predicate)
        count = len(relation)
        projected = relation.project(list(variables.values())).rename(list(variables))
        return QueryResult(predicate, count, projected)

    def evaluate_queries(self) -> str:
        """Evaluate every query of the program and return the report."""
        lines = ["Query Evaluation\n"]
        lines.extend(str(self.evaluate_query(query)) for query in self.program.queries)
        return "".join(lines)

    def evaluate_rule(self, rule: Rule) -> list[Row]:
        """Apply a rule once; return the rows it added to the head relation."""
        if not rule.body:
            raise ValueError(f"rule {rule.head} has no body predicates")
        joined = reduce(
            Relation.join, (self.evaluate_predicate(p) for p in rule.body)
        )
        names: list[str] = []
        indices: list[int] = []
        for name in rule.head.parameter_names():
            if name in joined.scheme:
                names.append(name)
                indices.append(joined.scheme.index(name))
        result = joined.project(indices).rename(names)
        return self.database[rule.head.name].union(result)

    def evaluate_rules(self) -> str:
        """Apply all rules until no new rows appear and return the report."""
        lines = ["Rule Evaluation\n"]
        self.passes = 0
        while True:
            size_before = self.database.size()
            for rule in self.program.rules:
                lines.append(f"{rule}.\n")
                scheme = self.database[rule.head.name].scheme
                lines.extend(
                    f"  {format_row(scheme, row)}\n" for row in self.evaluate_rule(rule)
                )
            self.passes += 1
            if self.database.size() == size_before:
                break
        lines.append(
            f"\nSchemes populated after {self.passes} passes through the Rules.\n\n"
        )
        return "".join(lines)


def build_dependency_graph(rules: Sequence[Rule]) -> Graph:
    """Graph with an edge from each rule to every rule whose head its body uses."""
    graph = Graph(len(rules))
    for source, rule in enumerate(rules):
        for body in rule.body:
            for target, other in enumerate(rules):
                if body.name == other.head.name:
                    graph.add_edge(source, target)
    return graph