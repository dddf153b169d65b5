"""
Tests for the literal mini-language.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from refute.core.syntax import ParseError, parse_literal, parse_term
from refute.core.unification import Application, Literal, Variable


class TestParseLiteral:
    def test_positive_literal(self):
        lit = parse_literal("human(socrates())")
        assert lit == Literal(Application("human", (Application("socrates"),)))

    def test_negated_literal(self):
        lit = parse_literal("!mortal([x])")
        assert lit.negated
        assert lit.atom == Application("mortal", (Variable("x"),))

    def test_zero_argument_atom_is_a_proposition(self):
        assert parse_literal("rain()") == Literal(Application("rain"))

    def test_nested_terms(self):
        lit = parse_literal("Eq(add([x], add([y], [z])), add(add([x], [y]), [z]))")
        x, y, z = Variable("x"), Variable("y"), Variable("z")
        assert lit.atom == Application("Eq", (
            Application("add", (x, Application("add", (y, z)))),
            Application("add", (Application("add", (x, y)), z)),
        ))

    def test_whitespace_is_ignored(self):
        assert parse_literal(" ! Eq ( [ x ] ,\tc( ) ) ") == parse_literal("!Eq([x],c())")

    def test_trailing_whitespace_is_ignored(self):
        assert parse_literal("P(a()) ") == parse_literal("P(a())")
        assert parse_literal("Eq([x], [x])\n") == parse_literal("Eq([x],[x])")

    def test_round_trip_through_str(self):
        text = "!Eq(add(a(), [y]), [y])"
        assert str(parse_literal(text)) == text

    def test_alphanumeric_names(self):
        lit = parse_literal("P2([x1], s0())")
        assert lit.atom.functor == "P2"
        assert lit.atom.args == (Variable("x1"), Application("s0"))


class TestParseTerm:
    def test_variable(self):
        assert parse_term("[x]") == Variable("x")

    def test_constant(self):
        assert parse_term("c()") == Application("c")


class TestParseErrors:
    @pytest.mark.parametrize("text", [
        "",
        "P",
        "P(",
        "P(a)",            # bare name is not a term
        "P([x)",
        "P([])",
        "P(a(),)",
        "P(a()) Q(b())",
        "!!P(a())",
        "P(a-b())",
        "[x]",             # a literal must be an atom
    ])
    def test_malformed_text_raises(self, text):
        with pytest.raises(ParseError):
            parse_literal(text)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_literal("P(")

    def test_message_names_position(self):
        with pytest.raises(ParseError) as info:
            parse_literal("P(a(), %)")
        assert info.value.pos == 7
        assert "position 7" in str(info.value)


names = st.text(alphabet="abcXYZ019", min_size=1, max_size=4)


@st.composite
def term_text(draw, depth=2):
    if depth == 0 or draw(st.booleans()):
        if draw(st.booleans()):
            return f"[{draw(names)}]"
        return f"{draw(names)}()"
    args = [draw(term_text(depth=depth - 1)) for _ in range(draw(st.integers(1, 3)))]
    return f"{draw(names)}({', '.join(args)})"


class TestParseProperties:

    @given(term_text())
    def test_rendering_parses_back(self, text):
        term = parse_term(text)
        assert parse_term(str(term)) == term
