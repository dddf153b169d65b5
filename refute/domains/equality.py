"""
Domain: Equality.

Equality axiomatized by hand (reflexivity, symmetry, transitivity and
congruence for add) together with commutativity and associativity of add.
The claim to prove:

    d = c  ->  a + (b + c) = a + (b + d)

is refuted in its negated form. Resolution has to rebuild the equality
reasoning step by step, so the clause set grows quickly; a proof turns up
within a handful of rounds.
"""

from ..core.state import KnowledgeBase


EQUALITY_AXIOMS = [
    (("Eq([x], [x])",), "reflexivity"),
    (("!Eq([x], [y])", "Eq([y], [x])"), "symmetry"),
    (("!Eq([x], [y])", "!Eq([y], [z])", "Eq([x], [z])"), "transitivity"),
    (("!Eq([x], [xs])", "!Eq([y], [ys])", "Eq(add([x], [y]), add([xs], [ys]))"),
     "congruence of add"),
]

ADD_AXIOMS = [
    (("Eq(add([x], [y]), add([y], [x]))",), "add commutes"),
    (("Eq(add([x], add([y], [z])), add(add([x], [y]), [z]))",), "add associates"),
]


def make_equality_kb() -> KnowledgeBase:
    kb = KnowledgeBase()
    for literals, label in EQUALITY_AXIOMS + ADD_AXIOMS:
        kb.ingest(*literals, label=label)

    kb.ingest("Eq(d(), c())", label="premise: d = c")
    kb.ingest(
        "!Eq(add(a(), add(b(), c())), add(a(), add(b(), d())))",
        label="negated goal: a+(b+c) != a+(b+d)",
    )
    return kb
