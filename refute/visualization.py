"""
Visualization and reporting utilities.
"""

from .core.state import KnowledgeBase


def print_state(kb: KnowledgeBase):
    """Print a summary of the knowledge base."""
    print(f"\n{'='*60}")
    print(f"Round: {kb.step}")
    print(f"Clauses ({len(kb.clauses)}, processed through {kb.processed}):")
    index = {id(c): i for i, c in enumerate(kb.clauses)}
    for i, clause in enumerate(kb.clauses):
        src = ""
        if clause.source:
            src = " (from " + " + ".join(str(index[id(p)]) for p in clause.source) + ")"
        print(f"  {i}. {clause.content}{src}")
    if kb.has_contradiction():
        print("Empty clause: derived")
    print(f"{'='*60}")


def print_history(kb: KnowledgeBase):
    """Print what each saturation round produced."""
    print(f"\n{'='*60}")
    print("Saturation history:")
    print(f"{'='*60}")
    for entry in kb.history:
        print(f"  Round {entry['step']}: {entry['factors']} factors, "
              f"{entry['resolvents']} resolvents -> {entry['admitted']} admitted "
              f"({entry['clauses']} clauses)")


def export_dot(kb: KnowledgeBase, path="refute_graph.dot"):
    """Export the derivation graph as a DOT file for Graphviz visualization."""
    nodes = list(kb.clauses)
    if kb.empty_clause is not None:
        nodes.append(kb.empty_clause)
    index = {id(c): i for i, c in enumerate(nodes)}

    with open(path, "w") as f:
        f.write("digraph refute {\n")
        f.write("  rankdir=BT;\n")
        f.write("  node [shape=box, style=rounded];\n")

        for i, clause in enumerate(nodes):
            label = clause.name.replace('"', '\\"')
            if clause.is_empty:
                color = "salmon"
            elif clause.source:
                color = "lightblue"
            else:
                color = "lightgray"
            f.write(f'  c{i} [label="{label}", fillcolor={color}, style=filled];\n')
            for parent in clause.source:
                f.write(f"  c{index[id(parent)]} -> c{i};\n")
        f.write("}\n")
    print(f"Graph exported to {path}")
