"""Largest drop from an ancestor's value to a descendant's in a rooted tree."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence


def max_ancestor_drop(costs: Sequence[int], parents: Sequence[int]) -> int:
    """Largest ``max(cost on the path from the root) - cost(node)`` over all nodes.

    Nodes are numbered from 1; ``parents[i]`` is the parent of node ``i + 1``,
    or -1 for the root.
    """
    n = len(costs)
    if len(parents) != n:
        raise ValueError("costs and parents must have the same length")
    children: defaultdict[int, list[int]] = defaultdict(list)
    root = None
    for node, parent in enumerate(parents, start=1):
        if parent == -1:
            root = node
        elif 1 <= parent <= n:
            children[parent].append(node)
        else:
            raise ValueError(f"node {node} has an unknown parent {parent}")
    if root is None:
        raise ValueError("the tree has no root")

    best: int | None = None
    stack = [(root, costs[root - 1])]
    while stack:
        node, highest = stack.pop()
        cost = costs[node - 1]
        highest = max(highest, cost)
        drop = highest - cost
        best = drop if best is None else max(best, drop)
        stack.extend((child, highest) for child in children[node])
    return best