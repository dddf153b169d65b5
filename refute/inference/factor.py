"""
Factoring: merge two same-sign literals of one clause that unify.

    P([x]) | P(a()) | Q([x])   factors to   P(a()) | Q(a())

Resolution alone is not refutation-complete without it.
"""

from ..core.state import Clause
from ..core.unification import unify_literals, apply_sub_to_clause


def factor(clause: Clause) -> list:
    """
    All factors reachable in one factoring step, each with source (clause,).

    Every unordered pair of literals is tried once; the second literal of
    the pair is the one dropped.
    """
    results = []
    lits = clause.ordered()

    for i, lit1 in enumerate(lits):
        for lit2 in lits[i + 1:]:
            if lit1.negated != lit2.negated:
                continue

            sub = unify_literals(lit1, lit2)
            if sub is None:
                continue

            results.append(Clause(
                literals=apply_sub_to_clause(sub, clause.literals - {lit2}),
                source=(clause,),
            ))

    return results
