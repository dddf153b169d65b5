"""
Proof extraction and display.

After the saturation loop finds the empty clause (contradiction), these
utilities walk back through the source links to recover the derivation.
"""

from collections import Counter, deque
from typing import NamedTuple

from .state import Clause, KnowledgeBase


class ProofStep(NamedTuple):
    clause: Clause
    parents: tuple  # () means derived from the knowledge base itself


def found_empty_clause(kb: KnowledgeBase) -> bool:
    """Stop condition: has the empty clause (contradiction) been derived?"""
    return kb.has_contradiction()


def reconstruct_proof(kb: KnowledgeBase) -> list:
    """
    Walk back from the empty clause through source links.

    Returns ProofSteps ordered from axioms to the empty clause, one per
    distinct clause in the derivation. Every clause comes after all of its
    parents. Returns [] if no contradiction has been found.
    """
    if kb.empty_clause is None:
        return []

    # How many derivation steps in the proof consume each clause.
    consumers = Counter()
    seen = {id(kb.empty_clause)}
    queue = deque([kb.empty_clause])
    while queue:
        clause = queue.popleft()
        for parent in clause.source:
            consumers[id(parent)] += 1
            if id(parent) not in seen:
                seen.add(id(parent))
                queue.append(parent)

    # Breadth-first from the empty clause; a clause is emitted only once
    # every clause that consumes it has been emitted.
    derivation = []
    queue = deque([kb.empty_clause])
    while queue:
        clause = queue.popleft()
        derivation.append(ProofStep(clause, clause.source))
        for parent in clause.source:
            consumers[id(parent)] -= 1
            if consumers[id(parent)] == 0:
                queue.append(parent)

    derivation.reverse()
    return derivation


def print_proof(kb: KnowledgeBase):
    """Pretty-print the derivation, numbering each step."""
    proof = reconstruct_proof(kb)
    if not proof:
        print("No proof found.")
        return
    number = {id(step.clause): i + 1 for i, step in enumerate(proof)}
    print(f"\n{'='*60}")
    print("PROOF (refutation)")
    print(f"{'='*60}")
    for i, (clause, parents) in enumerate(proof):
        if parents:
            src = "from " + " + ".join(str(number[id(p)]) for p in parents)
        else:
            src = "KB"
        label = f"  [{clause.label}]" if clause.label else ""
        print(f"  {i+1}. {src} |= {clause.name}{label}")
    print(f"{'='*60}")
    print("  QED: empty clause derived -> negated goal is contradictory -> theorem holds.")
