"""
The saturation loop.

Each round factors the clauses added by the previous round, resolves every
clause pair that has not met before, and admits the new clauses. A pair
is resolved exactly once over the whole run: clauses up to the processed
watermark have already met each other, so a round only pairs old with new
and new with new.
"""

from dataclasses import replace

from .state import InvalidStateError, KnowledgeBase
from ..inference.factor import factor
from ..inference.resolve import resolve


def _factor_phase(kb: KnowledgeBase) -> list:
    candidates = []
    for clause in kb.clauses[kb.processed + 1:]:
        candidates.extend(factor(clause))
    return candidates


def _resolve_phase(kb: KnowledgeBase, candidates: list):
    """
    Resolve the unmet pairs in (i, j) order, appending to candidates.
    Returns the first empty resolvent, or None.
    """
    clauses = kb.clauses
    n = len(clauses)
    for i in range(n):
        for j in range(max(kb.processed + 1, i + 1), n):
            resolvents = resolve(clauses[i], clauses[j])
            candidates.extend(resolvents)
            for r in resolvents:
                if r.is_empty:
                    return r
    return None


def saturation_step(kb: KnowledgeBase, verbose: bool = False) -> int:
    """
    Execute one saturation round.

    Returns the number of clauses admitted. 0 means no new clause could be
    derived at this depth; that is a local fixpoint, not a proof that the
    clause set is consistent.

    If the empty clause turns up, it becomes kb.empty_clause and nothing
    from the round is admitted. The return value is then the number of
    candidates generated (always at least 1) so a caller testing for 0
    never mistakes a proof for a fixpoint.
    """
    if kb.has_contradiction():
        raise InvalidStateError("knowledge base already contains the empty clause")

    kb.step += 1
    if verbose:
        print(f"\n--- Round {kb.step}: {len(kb.clauses)} clauses, "
              f"{len(kb.clauses) - kb.processed - 1} new ---")

    candidates = _factor_phase(kb)
    n_factors = len(candidates)
    empty = _resolve_phase(kb, candidates)

    entry = {
        "step": kb.step,
        "factors": n_factors,
        "resolvents": len(candidates) - n_factors,
        "admitted": 0,
        "clauses": len(kb.clauses),
        "processed": kb.processed,
    }

    if empty is not None:
        empty = replace(empty, step=kb.step)
        kb.empty_clause = empty
        kb.halted = True
        kb.halt_reason = "empty clause derived"
        kb.history.append(entry)
        if verbose:
            left, right = empty.source
            print(f"  [empty clause] from {left.name} + {right.name}")
        return len(candidates)

    kb.processed = len(kb.clauses) - 1

    admitted = 0
    for candidate in candidates:
        stored = kb.admit(candidate)
        if stored is None:
            continue
        admitted += 1
        if verbose:
            parents = " + ".join(p.name for p in stored.source)
            print(f"  [new] {stored.name} (from {parents})")

    entry["admitted"] = admitted
    entry["clauses"] = len(kb.clauses)
    entry["processed"] = kb.processed
    kb.history.append(entry)

    if verbose:
        print(f"  Admitted: {admitted} | Clauses: {len(kb.clauses)}")

    return admitted


def run_saturation(
    kb: KnowledgeBase,
    max_steps: int = 10,
    verbose: bool = False,
) -> KnowledgeBase:
    """
    Run saturation rounds until the empty clause is found, a round adds
    nothing, or max_steps rounds have run.

    Args:
        kb:         knowledge base with its axioms and premises ingested
        max_steps:  safety limit on the number of rounds
        verbose:    print progress
    """
    for _ in range(max_steps):
        if kb.has_contradiction():
            break
        if saturation_step(kb, verbose=verbose) == 0:
            kb.halted = True
            kb.halt_reason = "saturated"
            break
    else:
        if not kb.has_contradiction():
            kb.halted = True
            kb.halt_reason = "step limit"
    return kb
