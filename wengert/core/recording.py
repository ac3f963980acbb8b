# wengert/core/recording.py
"""
Internal append contract between the operation modules and the tape.

Operations compute values and local partials; this module is the only
place that checks tape membership and turns them into nodes. Nothing here
is public API.
"""
from __future__ import annotations
import numpy as np
from .errors import CrossTapeError
from .var import Variable

CONSTANT_TYPES = (int, float, np.integer, np.floating)


def is_constant(x) -> bool:
    return isinstance(x, CONSTANT_TYPES) and not isinstance(x, bool)


def check_live(x: Variable):
    """Reject a handle whose tape was reset after it was recorded."""
    if x._token is not x.tape._token:
        raise CrossTapeError("Variable was recorded before its tape was reset")


def same_tape(x: Variable, y: Variable):
    if x.tape is not y.tape or x._token is not y._token:
        raise CrossTapeError("Variables were not recorded on the same tape")
    check_live(x)


def as_operand(x, name="operand"):
    """Validate one argument of an operation: a Variable or a real constant."""
    if isinstance(x, Variable) or is_constant(x):
        return x
    raise TypeError(
        f"{name} must be a Variable or a real scalar, but got {type(x).__name__}"
    )


def record_unary(x: Variable, value, weight, *, op_tag: str) -> Variable:
    """Append out = op(x) with ∂out/∂x = weight."""
    check_live(x)
    tape = x.tape
    index = tape.push_unary(weight, x.index, op_tag=op_tag)
    return Variable(tape, tape.scalar(value), index)


def record_binary(x: Variable, y: Variable, value, w1, w2, *, op_tag: str) -> Variable:
    """Append out = op(x, y) with local partials (∂out/∂x, ∂out/∂y)."""
    same_tape(x, y)
    tape = x.tape
    index = tape.push_binary(w1, x.index, w2, y.index, op_tag=op_tag)
    return Variable(tape, tape.scalar(value), index)
