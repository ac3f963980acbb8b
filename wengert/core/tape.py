# wengert/core/tape.py
from __future__ import annotations
from typing import List, Tuple
import numpy as np
from .node import Node

DEFAULT_DTYPE = np.float64


def to_scalar(dtype, x):
    """Cast a real number to `dtype`; values beyond its range become ±inf."""
    dtype = np.dtype(dtype)
    try:
        with np.errstate(over="ignore"):
            return dtype.type(x)
    except OverflowError:
        # Python ints too large for a C double
        return dtype.type(np.inf if x > 0 else -np.inf)


class Tape:
    """
    Append-only record of Nodes in forward order (a Wengert list).

    The position of a node in `nodes` is its index; indices are never reused
    or renumbered while the tape lives. Every node's parents precede it, so
    append order already is a topological order of the graph.

    Parameters
    ----------
    dtype : numpy floating dtype
        Precision of every value, weight and partial on this tape.
    """

    def __init__(self, dtype=DEFAULT_DTYPE):
        dtype = np.dtype(dtype)
        if not np.issubdtype(dtype, np.floating):
            raise TypeError(f"Tape dtype must be a floating-point type, got {dtype}")
        self.dtype = dtype
        self._nodes: List[Node] = []
        # Identity token carried by every handle; replaced on reset().
        self._token = object()

    def __len__(self):
        return len(self._nodes)

    def __repr__(self):
        return f"Tape(nodes={len(self._nodes)}, dtype={self.dtype.name})"

    def __copy__(self):
        raise TypeError("Tape cannot be copied; create a new Tape instead")

    def __deepcopy__(self, memo):
        raise TypeError("Tape cannot be copied; create a new Tape instead")

    @property
    def nodes(self) -> Tuple[Node, ...]:
        return tuple(self._nodes)

    def node(self, index: int) -> Node:
        return self._nodes[index]

    def scalar(self, x):
        """Cast `x` to this tape's floating-point type (overflow gives inf)."""
        return to_scalar(self.dtype, x)

    def variable(self, value):
        """Create a new leaf Variable permanently bound to this tape."""
        from .recording import is_constant  # local import to avoid cycles
        from .var import Variable
        if not is_constant(value):
            raise TypeError(
                f"Tape.variable only accepts real scalars (int, float, numpy scalar), "
                f"but got {type(value)}"
            )
        return Variable(self, self.scalar(value), self.push_leaf())

    def reset(self):
        """
        Drop the whole graph. Handles created before the reset are retired:
        using them afterwards raises CrossTapeError.
        """
        self._nodes.clear()
        self._token = object()

    # ------------------------------------------------------------------
    # Appends. The only operations that mutate the graph.
    # ------------------------------------------------------------------
    def push_leaf(self) -> int:
        """Append a node with no parents (both slots self-referential, zero weight)."""
        size = len(self._nodes)
        zero = self.scalar(0.0)
        self._nodes.append(Node(zero, zero, size, size))
        return size

    def push_unary(self, weight, parent: int, *, op_tag: str = "unary") -> int:
        """Append a node with one operand; the second slot is inert."""
        size = len(self._nodes)
        self._check_parent(parent, size)
        self._nodes.append(Node(self.scalar(weight), self.scalar(0.0), parent, size, op_tag))
        return size

    def push_binary(self, weight1, parent1: int, weight2, parent2: int, *, op_tag: str = "binary") -> int:
        """Append a node with two operands."""
        size = len(self._nodes)
        self._check_parent(parent1, size)
        self._check_parent(parent2, size)
        self._nodes.append(
            Node(self.scalar(weight1), self.scalar(weight2), parent1, parent2, op_tag)
        )
        return size

    @staticmethod
    def _check_parent(parent: int, size: int):
        if not 0 <= parent < size:
            raise IndexError(f"parent index {parent} is not on the tape (size {size})")
