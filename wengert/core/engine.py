# wengert/core/engine.py
from __future__ import annotations
import numpy as np
from .tape import Tape


def reverse(tape: Tape, index: int, seed=1.0) -> np.ndarray:
    """
    Run a single reverse pass rooted at node `index`.

    Returns the dense array of adjoints, one per node recorded so far:
        partials[i] = ∂(node index) / ∂(node i) * seed

    Notes:
        - Nodes are swept in strictly decreasing index order. Every consumer
          of node i has a larger index, so partials[i] is final when visited.
        - Leaves and the inert slot of unary nodes point at themselves; those
          slots are skipped, so they add nothing even when the adjoint is inf.
        - inf/nan weights propagate like any other number along live edges.
        - Unlike a plain sweep from the last node that adds every product,
          nodes with an exactly zero adjoint are skipped, so `0 * inf` from
          an unreached or zero-weighted branch yields 0 rather than nan
          (e.g. sqrt(x) * 0.0 at x = 0 has partial 0.0).
    """
    nodes = tape._nodes
    n = len(nodes)
    if not 0 <= index < n:
        raise IndexError(f"node index {index} is not on the tape (size {n})")

    partials = np.zeros(n, dtype=tape.dtype)
    partials[index] = seed

    # Nodes after the seed cannot reach it.
    with np.errstate(all="ignore"):
        for i in range(index, -1, -1):
            adj = partials[i]
            if adj == 0:
                continue  # nothing to propagate
            node = nodes[i]
            # A self-referential slot is inert: skip it so 0 * inf stays out.
            if node.parent1 != i:
                partials[node.parent1] += node.weight1 * adj
            if node.parent2 != i:
                partials[node.parent2] += node.weight2 * adj
    return partials
