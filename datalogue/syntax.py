"""Syntax tree of a parsed Datalog program."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Parameter:
    """A predicate argument: a quoted constant or a variable name."""

    name: str

    def is_constant(self) -> bool:
        """True if the parameter is a quoted string constant."""
        return self.name.startswith("'")

    def __str__(self) -> str:
        return self.name


@dataclass
class Predicate:
    """A named predicate with an ordered list of parameters."""

    name: str = ""
    parameters: list[Parameter] = field(default_factory=list)

    def parameter_names(self) -> list[str]:
        """The text of every parameter, in order."""
        return [parameter.name for parameter in self.parameters]

    def __str__(self) -> str:
        return f"{self.name}({','.join(self.parameter_names())})"


@dataclass
class Rule:
    """A rule: a head predicate implied by a conjunction of body predicates."""

    head: Predicate = field(default_factory=Predicate)
    body: list[Predicate] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.head} :- {','.join(str(p) for p in self.body)}"


@dataclass
class DatalogProgram:
    """Schemes, facts, rules and queries of a program, plus its domain."""

    schemes: list[Predicate] = field(default_factory=list)
    facts: list[Predicate] = field(default_factory=list)
    rules: list[Rule] = field(default_factory=list)
    queries: list[Predicate] = field(default_factory=list)
    domain: set[str] = field(default_factory=set)

    def add_domain(self, value: str | Parameter) -> None:
        """Record a constant that appears in a fact."""
        self.domain.add(value.name if isinstance(value, Parameter) else value)

    def __str__(self) -> str:
        sections = [
            ("Schemes", [str(s) for s in self.schemes]),
            ("Facts", [f"{f}." for f in self.facts]),
            ("Rules", [f"{r}." for r in self.rules]),
            ("Queries", [f"{q}?" for q in self.queries]),
            ("Domain", sorted(self.domain)),
        ]
        lines = []
        for title, entries in sections:
            lines.append(f"{title}({len(entries)}):")
            lines.extend(f"  {entry}" for entry in entries)
        return "\n".join(lines) + "\n"