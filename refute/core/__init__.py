from .unification import (
    Variable, Application, Literal,
    is_variable, is_function, occurs_in,
    apply_substitution, apply_sub_to_literal, apply_sub_to_clause,
    unify_terms, unify_literals, complement, standardize_apart, variant_key,
)
from .syntax import ParseError, parse_literal, parse_term
from .state import Clause, KnowledgeBase, InvalidStateError
from .engine import saturation_step, run_saturation
from .proof import ProofStep, found_empty_clause, reconstruct_proof, print_proof

__all__ = [
    "Variable", "Application", "Literal",
    "is_variable", "is_function", "occurs_in",
    "apply_substitution", "apply_sub_to_literal", "apply_sub_to_clause",
    "unify_terms", "unify_literals", "complement", "standardize_apart", "variant_key",
    "ParseError", "parse_literal", "parse_term",
    "Clause", "KnowledgeBase", "InvalidStateError",
    "saturation_step", "run_saturation",
    "ProofStep", "found_empty_clause", "reconstruct_proof", "print_proof",
]
