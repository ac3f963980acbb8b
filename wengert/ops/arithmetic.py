# wengert/ops/arithmetic.py
import numpy as np
from ..core.var import Variable
from ..core.recording import as_operand, record_binary, record_unary, same_tape
from ..core.tape import to_scalar
from .table import evaluate_binary, evaluate_unary


def _unary(tag, x):
    """
    Generic unary primitive:
      - computes out = f(x) and the local partial from the operation table
      - pushes one node holding ∂out/∂x
    A plain number is evaluated in float64 and returned untraced.
    """
    x = as_operand(x, "x")
    if not isinstance(x, Variable):
        y, _ = evaluate_unary(tag, to_scalar(np.float64, x))
        return y
    y, dydx = evaluate_unary(tag, x.value())
    return record_unary(x, y, dydx, op_tag=tag)


def _binary(tag, x, y):
    """
    Generic binary primitive:
      - Variable ∘ Variable : one node with both partials
      - Variable ∘ constant : one node with the Variable's partial only;
                              constants are never recorded
    Mixed tapes are rejected before anything is evaluated or pushed.
    """
    x = as_operand(x, "x")
    y = as_operand(y, "y")
    if isinstance(x, Variable) and isinstance(y, Variable):
        same_tape(x, y)
        out, dx, dy = evaluate_binary(tag, x.value(), y.value())
        return record_binary(x, y, out, dx, dy, op_tag=tag)
    if isinstance(x, Variable):
        out, dx, _ = evaluate_binary(tag, x.value(), x.tape.scalar(y))
        return record_unary(x, out, dx, op_tag=tag)
    if isinstance(y, Variable):
        out, _, dy = evaluate_binary(tag, y.tape.scalar(x), y.value())
        return record_unary(y, out, dy, op_tag=tag)
    out, _, _ = evaluate_binary(tag, to_scalar(np.float64, x), to_scalar(np.float64, y))
    return out


def add(x, y): return _binary("add", x, y)
def sub(x, y): return _binary("sub", x, y)
def mul(x, y): return _binary("mul", x, y)
def div(x, y): return _binary("div", x, y)


def pow(x, y):
    """
    Power x ** y for any mix of Variable and constant.

    Local partials:
      ∂out/∂x = y * x^(y-1)
      ∂out/∂y = x^y * log(x)        (nan for x <= 0)
    """
    return _binary("pow", x, y)


def neg(x): return _unary("neg", x)
def pos(x): return _unary("pos", x)
