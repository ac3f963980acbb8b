# wengert/core/node.py
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Node:
    """
    One node on the tape produced by a primitive operation.

    Attributes
    ----------
    weight1, weight2 : scalar
        Local partials ∂out/∂parent1 and ∂out/∂parent2, stored in the
        tape's dtype.
    parent1, parent2 : int
        Tape indices of the operands. Always <= the node's own index;
        equality marks an inert slot (leaf, or the unused slot of a
        unary node) whose weight is zero.
    op_tag : str
        Debug tag (e.g., "add", "sin"). Never used in arithmetic.
    """
    weight1: Any
    weight2: Any
    parent1: int
    parent2: int
    op_tag: str = "leaf"

    @property
    def parents(self):
        return (self.parent1, self.parent2)

    @property
    def weights(self):
        return (self.weight1, self.weight2)
