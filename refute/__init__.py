"""
Refute: a first-order resolution theorem prover.

Clauses go into a KnowledgeBase; saturation rounds factor and resolve
them until the empty clause turns up (the clause set is contradictory,
so the negated goal's theorem holds) or a round adds nothing new.

Usage:
    python -m refute --domain equality
    python -m refute --domain syllogism
    python -m refute --domain chain
    python -m refute --domain consistent
"""

from .core.unification import Variable, Application, Literal, unify_terms, apply_substitution
from .core.syntax import ParseError, parse_literal, parse_term
from .core.state import Clause, KnowledgeBase, InvalidStateError
from .core.engine import saturation_step, run_saturation
from .core.proof import ProofStep, found_empty_clause, reconstruct_proof, print_proof
from .inference.resolve import resolve
from .inference.factor import factor

__all__ = [
    "Variable", "Application", "Literal", "unify_terms", "apply_substitution",
    "ParseError", "parse_literal", "parse_term",
    "Clause", "KnowledgeBase", "InvalidStateError",
    "saturation_step", "run_saturation",
    "ProofStep", "found_empty_clause", "reconstruct_proof", "print_proof",
    "resolve", "factor",
]
