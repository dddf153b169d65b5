"""
Martelli-Montanari unification with occurs check.

This is the logical foundation that everything else builds on.
Given two terms, find a substitution that makes them identical --
or report that no such substitution exists.

Terms:
    Variable("x_3")                          -> [x_3]
    Application("c")                         -> c()      (a constant)
    Application("add", (Variable("x"), c))   -> add([x], c())

Literals:
    Literal(atom)                            -> human(socrates())
    Literal(atom, negated=True)              -> !mortal([x])

Substitutions are plain dicts: {Variable("x"): Application("a")}
"""

import re
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class Variable:
    """A logic variable. Names are unique per clause once stored."""
    name: str

    def __str__(self):
        return f"[{self.name}]"


@dataclass(frozen=True)
class Application:
    """A functor applied to argument terms. No arguments means a constant."""
    functor: str
    args: tuple = ()

    def __str__(self):
        return f"{self.functor}({', '.join(str(a) for a in self.args)})"


@dataclass(frozen=True)
class Literal:
    """A possibly negated atom."""
    atom: Application
    negated: bool = False

    @property
    def predicate(self):
        return self.atom.functor

    def __str__(self):
        return f"{'!' if self.negated else ''}{self.atom}"


def is_variable(term) -> bool:
    return isinstance(term, Variable)


def is_function(term) -> bool:
    return isinstance(term, Application)


def occurs_in(var, term) -> bool:
    """Does variable var occur anywhere in term? Prevents infinite substitutions."""
    if var == term:
        return True
    if is_function(term):
        return any(occurs_in(var, arg) for arg in term.args)
    return False


def variables_of(term) -> set:
    if is_variable(term):
        return {term}
    found = set()
    for arg in term.args:
        found |= variables_of(arg)
    return found


def apply_substitution(sub: dict, term):
    """Apply a substitution dict to a single term. Follows chains."""
    if is_variable(term):
        if term in sub:
            return apply_substitution(sub, sub[term])
        return term
    if not term.args:
        return term
    return Application(term.functor, tuple(apply_substitution(sub, arg) for arg in term.args))


def apply_sub_to_literal(sub: dict, literal):
    """Apply substitution to the atom of a literal, keeping its sign."""
    return Literal(apply_substitution(sub, literal.atom), literal.negated)


def apply_sub_to_clause(sub: dict, literals) -> frozenset:
    """Apply substitution to every literal in a literal set."""
    return frozenset(apply_sub_to_literal(sub, lit) for lit in literals)


def unify_terms(t1, t2):
    """
    Compute a most general unifier of two terms.

    Returns the substitution dict, or None if unification fails.

    A work-list of term pairs is reconciled one pair at a time. Every new
    binding is applied at once to the pairs still waiting and to the
    bindings already recorded, so the result is idempotent: applying it
    once is the same as applying it to a fixed point.
    """
    sub = {}
    pending = deque([(t1, t2)])

    while pending:
        a, b = pending.popleft()
        if a == b:
            continue

        if is_function(a) and is_function(b):
            if a.functor != b.functor or len(a.args) != len(b.args):
                return None  # different functor or arity
            pending.extend(zip(a.args, b.args))
            continue

        var, term = (a, b) if is_variable(a) else (b, a)
        if occurs_in(var, term):
            return None  # occurs check: X unify f(X) is unsound

        binding = {var: term}
        pending = deque(
            (apply_substitution(binding, x), apply_substitution(binding, y))
            for x, y in pending
        )
        sub = {v: apply_substitution(binding, t) for v, t in sub.items()}
        sub[var] = term

    return sub


def unify_literals(lit1, lit2):
    """
    Unify the atoms of two literals, ignoring sign.
    Returns substitution or None.
    """
    a1, a2 = lit1.atom, lit2.atom
    if a1.functor != a2.functor or len(a1.args) != len(a2.args):
        return None
    return unify_terms(a1, a2)


def complement(literal):
    """Flip the sign of a literal."""
    return Literal(literal.atom, not literal.negated)


_SUFFIX = re.compile(r"_\d+$")


def base_name(var: Variable) -> str:
    """The user-facing name of a variable, without its clause suffix."""
    return _SUFFIX.sub("", var.name)


def standardize_apart(literals, suffix) -> frozenset:
    """
    Rename all variables in a literal set to <base><suffix>.

    Distinct variables that share a base name (x_0 and x_3 in a resolvent)
    get distinct new names: x, x1, x2, ...
    """
    var_map = {}
    taken = set()

    def rename(term):
        if is_variable(term):
            if term not in var_map:
                base = base_name(term)
                candidate, n = base, 1
                while candidate in taken:
                    candidate = f"{base}{n}"
                    n += 1
                taken.add(candidate)
                var_map[term] = Variable(f"{candidate}{suffix}")
            return var_map[term]
        if not term.args:
            return term
        return Application(term.functor, tuple(rename(arg) for arg in term.args))

    return frozenset(
        Literal(rename(lit.atom), lit.negated)
        for lit in sorted(literals, key=str)
    )


def _shape(term) -> str:
    if is_variable(term):
        return "?"
    return f"{term.functor}({','.join(_shape(a) for a in term.args)})"


def variant_key(literals) -> frozenset:
    """
    A name-independent signature for a literal set.

    Variables are renamed by first occurrence, walking the literals by sign
    and shape, with ties between same-shape literals broken by their text.
    Equal keys imply the two sets are renamings of each other. The converse
    is best effort only: the tie-break sees variable names, so renamings
    that reorder same-shape literals, such as {P(x, y), P(y, z)} and
    {P(b, a), P(a, c)}, can get different keys and both be stored.
    """
    ordered = sorted(
        literals,
        key=lambda lit: (lit.negated, _shape(lit.atom), str(lit)),
    )
    var_map = {}

    def rename(term):
        if is_variable(term):
            if term not in var_map:
                var_map[term] = Variable(f"_{len(var_map)}")
            return var_map[term]
        if not term.args:
            return term
        return Application(term.functor, tuple(rename(arg) for arg in term.args))

    return frozenset((lit.negated, rename(lit.atom)) for lit in ordered)
