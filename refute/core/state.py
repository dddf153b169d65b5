"""
Core data structures: Clause, KnowledgeBase.

These are the atoms of the whole system. Nothing in here depends on
inference rules, domains, or the saturation loop.

A Clause is a frozenset of Literals (disjunction) plus the parent clauses
it was derived from. The empty clause [] is a contradiction -> proof found.
"""

from dataclasses import dataclass, field
from typing import Optional

from .syntax import parse_literal
from .unification import Literal, standardize_apart, variant_key


class InvalidStateError(RuntimeError):
    """The knowledge base already holds the empty clause; search is over."""


@dataclass
class Clause:
    """
    A disjunction of literals.

    source holds the parent clauses: () for axioms and premises, one parent
    for a factor, two for a resolvent. Equality ignores source, so two
    derivations of the same literal set are the same clause.
    """
    literals: frozenset
    source: tuple = ()
    step: int = 0
    label: str = ""
    _ordered: tuple = field(default=None, init=False, repr=False)

    @property
    def name(self):
        if not self.literals:
            return "[]"
        return " | ".join(str(lit) for lit in self.ordered())

    @property
    def content(self):
        if self.label:
            return f"[{self.label}] {self.name}"
        return self.name

    @property
    def is_empty(self):
        return len(self.literals) == 0

    @property
    def is_horn(self):
        """At most one positive literal."""
        return sum(1 for lit in self.literals if not lit.negated) <= 1

    def ordered(self) -> tuple:
        """Literals in a stable order, so inference is reproducible run to run."""
        if self._ordered is None:
            self._ordered = tuple(sorted(self.literals, key=str))
        return self._ordered

    def __hash__(self):
        return hash(self.literals)

    def __eq__(self, other):
        return isinstance(other, Clause) and self.literals == other.literals

    def __repr__(self):
        return f"Clause({self.name})"


@dataclass
class KnowledgeBase:
    """
    The growing clause set of a resolution refutation.

    clauses:      every clause ever admitted, in admission order
    signatures:   variant key -> stored clause, for duplicate checks
    processed:    highest index already resolved against everything before it
    empty_clause: the first empty clause found, or None while searching
    history:      one entry per saturation round
    """
    clauses: list = field(default_factory=list)
    signatures: dict = field(default_factory=dict)
    processed: int = -1
    empty_clause: Optional[Clause] = None
    history: list = field(default_factory=list)
    step: int = 0
    halted: bool = False
    halt_reason: str = ""

    def has_contradiction(self) -> bool:
        return self.empty_clause is not None

    def ingest(self, *literals, label: str = "") -> Clause:
        """
        Add an axiom or premise.

        Each literal is either text in the literal syntax ("!Eq([x], [y])")
        or a Literal. Variables are local to this call and renamed apart from
        every other clause. Returns the stored clause, which is the existing
        one if the same clause (up to renaming) is already present.
        """
        if self.has_contradiction():
            raise InvalidStateError("knowledge base already contains the empty clause")

        parsed = []
        for lit in literals:
            if isinstance(lit, str):
                parsed.append(parse_literal(lit))
            elif isinstance(lit, Literal):
                parsed.append(lit)
            else:
                raise TypeError(f"expected literal text or Literal, got {type(lit).__name__}")

        clause = Clause(literals=frozenset(parsed), label=label)
        existing = self.signatures.get(variant_key(clause.literals))
        if existing is not None:
            return existing

        stored = self.admit(clause)
        if stored.is_empty:
            self.empty_clause = stored
            self.halted = True
            self.halt_reason = "empty clause derived"
        return stored

    def admit(self, clause: Clause) -> Optional[Clause]:
        """
        Store a clause unless a renaming of it is already present.

        The stored copy has its variables suffixed with its own index.
        Returns the stored clause, or None for a duplicate.
        """
        if self.has_contradiction():
            raise InvalidStateError("knowledge base already contains the empty clause")
        key = variant_key(clause.literals)
        if key in self.signatures:
            return None
        stored = Clause(
            literals=standardize_apart(clause.literals, f"_{len(self.clauses)}"),
            source=clause.source,
            step=self.step,
            label=clause.label,
        )
        self.signatures[key] = stored
        self.clauses.append(stored)
        return stored

    def index_of(self, clause: Clause) -> int:
        """Position of a stored clause (by identity)."""
        for i, c in enumerate(self.clauses):
            if c is clause:
                return i
        raise ValueError(f"{clause!r} is not stored in this knowledge base")
