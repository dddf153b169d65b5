"""
The literal mini-language used to write clauses.

    literal  := ["!"] atom
    atom     := functor "(" [ term ("," term)* ] ")"
    term     := atom | "[" name "]"

Functors and variable names are alphanumeric. Whitespace is ignored.
c() is a constant, [x] is a variable:

    Eq(add([x], [y]), add([y], [x]))
    !mortal(socrates())
"""

import re

from .unification import Application, Literal, Variable


class ParseError(ValueError):
    """Malformed literal text."""

    def __init__(self, text: str, pos: int, message: str):
        self.text = text
        self.pos = pos
        super().__init__(f"{message} at position {pos} in {text!r}")


_TOKEN = re.compile(r"\s*(?:([A-Za-z0-9]+)|(\S))")


def _tokenize(text: str) -> list:
    tokens = []
    for m in _TOKEN.finditer(text):
        name, punct = m.groups()
        if name is not None:
            tokens.append(("name", name, m.start(1)))
        elif punct is not None:
            if punct not in "!(),[]":
                raise ParseError(text, m.start(2), f"unexpected character {punct!r}")
            tokens.append((punct, punct, m.start(2)))
    tokens.append(("end", "", len(text)))
    return tokens


class _Parser:
    def __init__(self, text: str):
        self.text = text
        self.tokens = _tokenize(text)
        self.i = 0

    def peek(self):
        return self.tokens[self.i][0]

    def expect(self, kind: str) -> str:
        tok_kind, value, pos = self.tokens[self.i]
        if tok_kind != kind:
            found = "end of input" if tok_kind == "end" else repr(value)
            wanted = "a name" if kind == "name" else repr(kind)
            raise ParseError(self.text, pos, f"expected {wanted}, found {found}")
        self.i += 1
        return value

    def literal(self) -> Literal:
        negated = False
        if self.peek() == "!":
            self.expect("!")
            negated = True
        return Literal(self.atom(), negated)

    def atom(self) -> Application:
        functor = self.expect("name")
        self.expect("(")
        args = []
        if self.peek() != ")":
            args.append(self.term())
            while self.peek() == ",":
                self.expect(",")
                args.append(self.term())
        self.expect(")")
        return Application(functor, tuple(args))

    def term(self):
        if self.peek() == "[":
            self.expect("[")
            name = self.expect("name")
            self.expect("]")
            return Variable(name)
        return self.atom()

    def finish(self):
        self.expect("end")


def parse_literal(text: str) -> Literal:
    """Parse one literal, e.g. "!Eq([x], c())"."""
    parser = _Parser(text)
    lit = parser.literal()
    parser.finish()
    return lit


def parse_term(text: str):
    """Parse one term, e.g. "add([x], c())" or "[x]"."""
    parser = _Parser(text)
    term = parser.term()
    parser.finish()
    return term
