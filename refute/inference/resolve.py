"""
Binary resolution: the core inference rule of the saturation loop.

Given two clauses, find a pair of complementary literals (one positive,
one negative, unifiable atoms) and produce a resolvent that contains all
the remaining literals from both clauses with the unifier applied.

If the resolvent is empty, a contradiction has been found.
"""

from ..core.state import Clause
from ..core.unification import unify_literals, apply_sub_to_clause


def resolve(c1: Clause, c2: Clause) -> list:
    """
    Binary resolution between two clauses.

    The clauses must not share variables; the knowledge base guarantees
    this by renaming every stored clause apart.

    Returns a list of resolvents, one per complementary literal pair that
    unifies, each with source (c1, c2).
    """
    results = []

    for lit1 in c1.ordered():
        for lit2 in c2.ordered():
            if lit1.negated == lit2.negated:
                continue  # same sign, can't resolve

            sub = unify_literals(lit1, lit2)
            if sub is None:
                continue

            remaining = (c1.literals - {lit1}) | (c2.literals - {lit2})
            results.append(Clause(
                literals=apply_sub_to_clause(sub, remaining),
                source=(c1, c2),
            ))

    return results
