# wengert/core/var.py
from __future__ import annotations
from .engine import reverse
from .errors import CrossTapeError
from .gradient import Gradient


class Variable:
    """
    Active scalar for reverse-mode Automatic Differentiation (AD).

    A Variable is a lightweight view into a Tape: its primal value plus the
    index of the node that produced it. It owns nothing on the tape. Create
    leaves with `Tape.variable(value)`; every operation on Variables returns
    a new Variable and appends exactly one node.

    Attributes
    ----------
    tape : Tape
        The tape this variable was recorded on.
    index : int
        Position of the producing node on `tape`.
    """

    __slots__ = ("tape", "_token", "_value", "_index")

    # NumPy scalars on the left (np.float64(2.0) * v) defer to our reflected ops
    __array_ufunc__ = None

    def __init__(self, tape, value, index: int):
        self.tape = tape
        self._token = tape._token
        self._value = value
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    def value(self):
        """The primal value. Reading it records nothing."""
        return self._value

    def __float__(self):
        return float(self._value)

    def __repr__(self):
        return f"Variable({self._value!r}, index={self._index})"

    def gradient(self) -> Gradient:
        """Partials of this variable with respect to every node on its tape."""
        if self._token is not self.tape._token:
            raise CrossTapeError("Variable was recorded before its tape was reset")
        return Gradient(self.tape, self._token, reverse(self.tape, self._index))

    # Copying is a differentiable read: it appends an identity node.
    def copy(self) -> "Variable":
        from .recording import record_unary
        return record_unary(self, self._value, 1.0, op_tag="copy")

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    # Operator overloading for arithmetic operations. Compound assignments
    # (+=, *=, ...) fall back to these and rebind to the new node.
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import pow
        return pow(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pos__(self):
        from ..ops.arithmetic import pos
        return pos(self)

    def __abs__(self):
        from ..ops.transcendental import abs
        return abs(self)
