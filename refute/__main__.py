"""
CLI entry point. Run as: python -m refute --domain <name>
"""

import argparse

from .core.engine import run_saturation
from .core.proof import found_empty_clause, print_proof
from .visualization import print_state, print_history, export_dot
from .domains import DOMAINS


def main(argv=None):
    parser = argparse.ArgumentParser(description="First-order resolution prover")
    parser.add_argument(
        "--domain",
        choices=list(DOMAINS.keys()),
        default="syllogism",
        help="Which knowledge base to refute",
    )
    parser.add_argument("--steps", type=int, default=None, help="Max saturation rounds")
    parser.add_argument("--dot",   type=str, default=None, help="Export DOT graph to file")
    parser.add_argument("--quiet", action="store_true",    help="Less output")
    args = parser.parse_args(argv)

    domain = DOMAINS[args.domain]
    kb = domain["make_kb"]()
    steps = args.steps if args.steps is not None else domain["steps"]

    print(f"Domain: {args.domain} -- {domain['description']}")
    print_state(kb)

    # --- Run ---
    try:
        kb = run_saturation(kb, max_steps=steps, verbose=not args.quiet)
    except KeyboardInterrupt:
        print("\nInterrupted.")

    if not args.quiet:
        print_state(kb)
    print_history(kb)

    if found_empty_clause(kb):
        print("\nProof found!")
        print_proof(kb)
    elif kb.halt_reason == "saturated":
        print("\nSaturated: no new clauses (not a consistency proof).")
    else:
        print(f"\nNo proof found ({kb.halt_reason or 'interrupted'}).")

    if args.dot:
        export_dot(kb, args.dot)


if __name__ == "__main__":
    main()
