"""
Domain: Resolution (small textbook problems).

syllogism  -- Socrates syllogism (mortal(socrates))
chain      -- multi-step implication chain (builds(alice, bob))
consistent -- a satisfiable clause set; saturation stops without a proof
"""

from ..core.state import KnowledgeBase


def make_syllogism_kb() -> KnowledgeBase:
    """
    Axioms:
        all humans are mortal:  !human([x]) | mortal([x])
        socrates is human:      human(socrates())

    Negated goal (to refute):
        socrates is NOT mortal: !mortal(socrates())
    """
    kb = KnowledgeBase()
    kb.ingest("!human([x])", "mortal([x])", label="all humans are mortal")
    kb.ingest("human(socrates())", label="socrates is human")
    kb.ingest("!mortal(socrates())", label="negated goal: socrates not mortal")
    return kb


def make_chain_kb() -> KnowledgeBase:
    """
    Axioms:
        knows(alice, bob).
        knows(X,Y)      -> trusts(X,Y)
        trusts(X,Y)     -> cooperates(X,Y)
        cooperates(X,Y) -> builds(X,Y)

    Negated goal: !builds(alice, bob)
    """
    kb = KnowledgeBase()
    kb.ingest("knows(alice(), bob())", label="alice knows bob")
    kb.ingest("!knows([x], [y])", "trusts([x], [y])",
              label="knowing implies trusting")
    kb.ingest("!trusts([x], [y])", "cooperates([x], [y])",
              label="trusting implies cooperating")
    kb.ingest("!cooperates([x], [y])", "builds([x], [y])",
              label="cooperating implies building")
    kb.ingest("!builds(alice(), bob())",
              label="negated goal: alice doesn't build with bob")
    return kb


def make_consistent_kb() -> KnowledgeBase:
    """
    P(a), P(x) -> Q(x), ~R(b). Derives Q(a) and then nothing more.
    """
    kb = KnowledgeBase()
    kb.ingest("P(a())", label="fact")
    kb.ingest("!P([x])", "Q([x])", label="P implies Q")
    kb.ingest("!R(b())", label="not R(b)")
    return kb
