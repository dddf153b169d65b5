"""
Domain registry.

Each domain is a dict describing a ready-made knowledge base:
    make_kb:      () -> KnowledgeBase
    steps:        default round limit
    description:  str
"""

from .equality import make_equality_kb
from .resolution import make_syllogism_kb, make_chain_kb, make_consistent_kb


DOMAINS = {
    "equality": {
        "make_kb":     make_equality_kb,
        "steps":       10,
        "description": "Hand-axiomatized equality: d = c -> a+(b+c) = a+(b+d)",
    },
    "syllogism": {
        "make_kb":     make_syllogism_kb,
        "steps":       10,
        "description": "Socrates syllogism: prove mortal(socrates) by refutation",
    },
    "chain": {
        "make_kb":     make_chain_kb,
        "steps":       10,
        "description": "Multi-step resolution: prove a chain of implications",
    },
    "consistent": {
        "make_kb":     make_consistent_kb,
        "steps":       10,
        "description": "Satisfiable clauses: saturation stops without a proof",
    },
}
