"""
Tests for Clause and the knowledge base's ingestion side.

Core invariants:
    - Clause equality is literal-set equality; provenance is ignored
    - Every stored clause has variables no other stored clause uses
    - The same clause (up to renaming) is never stored twice
    - After the empty clause is found, the knowledge base refuses mutation
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from refute.core.state import Clause, KnowledgeBase, InvalidStateError
from refute.core.syntax import ParseError, parse_literal
from refute.core.unification import variables_of


def clause(*texts, **kwargs):
    return Clause(literals=frozenset(parse_literal(t) for t in texts), **kwargs)


def clause_vars(c):
    return set().union(set(), *(variables_of(lit.atom) for lit in c.literals))


class TestClause:
    def test_duplicate_literals_collapse(self):
        assert len(clause("P(a())", "P(a())").literals) == 1

    def test_equality_ignores_order_and_source(self):
        parent = clause("R(c())")
        c1 = clause("P(a())", "!Q(b())", source=(parent,))
        c2 = clause("!Q(b())", "P(a())", label="other")
        assert c1 == c2
        assert hash(c1) == hash(c2)

    def test_sign_distinguishes_literals(self):
        assert clause("P(a())") != clause("!P(a())")

    def test_empty_clause(self):
        empty = Clause(literals=frozenset())
        assert empty.is_empty
        assert empty.name == "[]"

    def test_name_is_sorted_literal_syntax(self):
        assert clause("Q([x])", "!P(a())").name == "!P(a()) | Q([x])"

    def test_content_carries_label(self):
        assert clause("P(a())", label="fact").content == "[fact] P(a())"

    def test_horn(self):
        assert clause("!P([x])", "Q([x])").is_horn
        assert clause("!P([x])", "!Q([x])").is_horn
        assert not clause("P([x])", "Q([x])").is_horn


class TestIngest:
    def test_returns_stored_clause_without_parents(self):
        kb = KnowledgeBase()
        c = kb.ingest("P(a())")
        assert kb.clauses == [c]
        assert c.source == ()

    def test_variables_are_renamed_with_clause_index(self):
        kb = KnowledgeBase()
        kb.ingest("P([x])")
        c = kb.ingest("!P([x])", "Q([x], [y])")
        assert {v.name for v in clause_vars(c)} == {"x_1", "y_1"}

    def test_clauses_are_standardized_apart(self):
        kb = KnowledgeBase()
        first = kb.ingest("Eq([x], [x])")
        second = kb.ingest("!Eq([x], [y])", "Eq([y], [x])")
        assert clause_vars(first).isdisjoint(clause_vars(second))

    def test_same_clause_twice_is_stored_once(self):
        kb = KnowledgeBase()
        first = kb.ingest("Eq([x], [x])")
        second = kb.ingest("Eq([x], [x])")
        assert len(kb.clauses) == 1
        assert second is first

    def test_renamed_clause_is_a_duplicate(self):
        kb = KnowledgeBase()
        kb.ingest("!P([x])", "Q([x], [y])")
        kb.ingest("Q([u], [v])", "!P([u])")
        assert len(kb.clauses) == 1

    def test_ground_duplicate(self):
        kb = KnowledgeBase()
        kb.ingest("P(a())", "Q(b())")
        kb.ingest("Q(b())", "P(a())")
        assert len(kb.clauses) == 1

    def test_accepts_literal_objects(self):
        kb = KnowledgeBase()
        c = kb.ingest(parse_literal("P(a())"), "Q(b())")
        assert c == clause("P(a())", "Q(b())")

    def test_rejects_other_types(self):
        kb = KnowledgeBase()
        with pytest.raises(TypeError):
            kb.ingest(42)

    def test_parse_error_admits_nothing(self):
        kb = KnowledgeBase()
        with pytest.raises(ParseError):
            kb.ingest("P(a())", "Q(")
        assert kb.clauses == []

    def test_label_kept(self):
        kb = KnowledgeBase()
        assert kb.ingest("P(a())", label="fact").label == "fact"

    def test_empty_clause_is_a_contradiction(self):
        kb = KnowledgeBase()
        kb.ingest("P(a())")
        empty = kb.ingest()
        assert empty.is_empty
        assert kb.has_contradiction()
        assert kb.empty_clause is empty

    def test_no_ingest_after_contradiction(self):
        kb = KnowledgeBase()
        kb.ingest()
        with pytest.raises(InvalidStateError):
            kb.ingest("P(a())")

    def test_no_admit_after_contradiction(self):
        kb = KnowledgeBase()
        kb.ingest("P(a())")
        kb.ingest()
        before = len(kb.clauses)
        with pytest.raises(InvalidStateError):
            kb.admit(clause("Z(a())"))
        assert len(kb.clauses) == before

    def test_ingest_with_trailing_newline(self):
        kb = KnowledgeBase()
        c = kb.ingest("Eq([x], [x])\n")
        assert c.name == "Eq([x_0], [x_0])"

    def test_index_of(self):
        kb = KnowledgeBase()
        kb.ingest("P(a())")
        c = kb.ingest("Q(a())")
        assert kb.index_of(c) == 1
        with pytest.raises(ValueError):
            kb.index_of(clause("Q(a())"))


variable_literals = st.sampled_from([
    "P([x])", "!P([y])", "Q([x], [y])", "!Q([y], f([x]))", "R(a())", "!R([z])",
])


class TestIngestProperties:

    @given(st.lists(st.lists(variable_literals, min_size=1, max_size=3), min_size=1, max_size=6))
    def test_stored_clauses_never_share_variables(self, specs):
        kb = KnowledgeBase()
        for spec in specs:
            kb.ingest(*spec)
        for i, c1 in enumerate(kb.clauses):
            for c2 in kb.clauses[i + 1:]:
                assert clause_vars(c1).isdisjoint(clause_vars(c2))

    @given(st.lists(variable_literals, min_size=1, max_size=3))
    def test_ingest_is_idempotent(self, spec):
        kb = KnowledgeBase()
        kb.ingest(*spec)
        kb.ingest(*spec)
        kb.ingest(*reversed(spec))
        assert len(kb.clauses) == 1
