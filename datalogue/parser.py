"""Recursive-descent parser for Datalog programs."""

from __future__ import annotations

from collections.abc import Iterable

from datalogue.scanner import scan
from datalogue.syntax import DatalogProgram, Parameter, Predicate, Rule
from datalogue.tokens import Token, TokenType


class ParseError(Exception):
    """Raised when a token does not fit the grammar."""

    def __init__(self, token: Token) -> None:
        super().__init__(str(token))
        self.token = token


class Parser:
    """Parses a token list, ending with EOF, into a DatalogProgram."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0
        self._program = DatalogProgram()

    def parse(self) -> DatalogProgram:
        """Parse the whole token list; raise ParseError at the first bad token."""
        self._pos = 0
        self._program = DatalogProgram()
        self._datalog_program()
        return self._program

    # helpers

    def _peek(self) -> Token:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        if self._tokens:
            return self._tokens[-1]
        return Token(TokenType.ENDOF, "", 0)

    def _at(self, kind: TokenType) -> bool:
        return self._peek().type is kind

    def _expect(self, kind: TokenType) -> Token:
        token = self._peek()
        if token.type is not kind:
            raise ParseError(token)
        self._pos += 1
        return token

    # grammar

    def _datalog_program(self) -> None:
        self._expect(TokenType.SCHEMES)
        self._expect(TokenType.COLON)
        self._program.schemes.append(self._scheme())
        while self._at(TokenType.ID):
            self._program.schemes.append(self._scheme())

        self._expect(TokenType.FACTS)
        self._expect(TokenType.COLON)
        while self._at(TokenType.ID):
            self._program.facts.append(self._fact())

        self._expect(TokenType.RULES)
        self._expect(TokenType.COLON)
        while self._at(TokenType.ID):
            self._program.rules.append(self._rule())

        self._expect(TokenType.QUERIES)
        self._expect(TokenType.COLON)
        self._program.queries.append(self._query())
        while self._at(TokenType.ID):
            self._program.queries.append(self._query())

        self._expect(TokenType.ENDOF)
        self._pos -= 1  # leave EOF in place

    def _scheme(self) -> Predicate:
        predicate = Predicate(self._expect(TokenType.ID).value)
        self._expect(TokenType.LEFT_PAREN)
        predicate.parameters.append(Parameter(self._expect(TokenType.ID).value))
        while self._at(TokenType.COMMA):
            self._expect(TokenType.COMMA)
            predicate.parameters.append(Parameter(self._expect(TokenType.ID).value))
        self._expect(TokenType.RIGHT_PAREN)
        return predicate

    def _fact(self) -> Predicate:
        predicate = Predicate(self._expect(TokenType.ID).value)
        self._expect(TokenType.LEFT_PAREN)
        predicate.parameters.append(self._constant())
        while self._at(TokenType.COMMA):
            self._expect(TokenType.COMMA)
            predicate.parameters.append(self._constant())
        self._expect(TokenType.RIGHT_PAREN)
        self._expect(TokenType.PERIOD)
        return predicate

    def _constant(self) -> Parameter:
        parameter = Parameter(self._expect(TokenType.STRING).value)
        self._program.add_domain(parameter)
        return parameter

    def _rule(self) -> Rule:
        rule = Rule(head=self._predicate())
        self._expect(TokenType.COLON_DASH)
        rule.body.append(self._predicate())
        while self._at(TokenType.COMMA):
            self._expect(TokenType.COMMA)
            rule.body.append(self._predicate())
        self._expect(TokenType.PERIOD)
        return rule

    def _query(self) -> Predicate:
        predicate = self._predicate()
        self._expect(TokenType.Q_MARK)
        return predicate

    def _predicate(self) -> Predicate:
        predicate = Predicate(self._expect(TokenType.ID).value)
        self._expect(TokenType.LEFT_PAREN)
        predicate.parameters.append(self._parameter())
        while self._at(TokenType.COMMA):
            self._expect(TokenType.COMMA)
            predicate.parameters.append(self._parameter())
        self._expect(TokenType.RIGHT_PAREN)
        return predicate

    def _parameter(self) -> Parameter:
        token = self._peek()
        if token.type not in (TokenType.STRING, TokenType.ID):
            raise ParseError(token)
        self._pos += 1
        return Parameter(token.value)


def parse_program(text: str) -> DatalogProgram:
    """Scan and parse Datalog source text."""
    return Parser(scan(text)).parse()