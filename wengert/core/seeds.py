# wengert/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the tape. Each driver records on its own fresh tape, so
# the graph is released as soon as the call returns.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List
import numpy as np

from .recording import is_constant
from .tape import DEFAULT_DTYPE, Tape
from .var import Variable


def value(x: Any) -> Any:
    """Return the numeric value of a Variable; pass through plain numbers unchanged."""
    return x.value() if isinstance(x, Variable) else x


def _partials(tape: Tape, y: Any, xs: List[Variable], caller: str) -> List[Any]:
    """Run one reverse pass from `y` and read the partial of every input."""
    if isinstance(y, Variable):
        g = y.gradient()
        return [g.with_respect_to(x) for x in xs]
    # Expect scalar output
    if not is_constant(y):
        raise ValueError(f"{caller} expects f to return a scalar, got {type(y).__name__}")
    # Output does not depend on the inputs at all.
    return [tape.scalar(0.0) for _ in xs]


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Variable], Any], x0, dtype=DEFAULT_DTYPE):
    """
    Derivative of a scalar function y=f(x) at x0 (single input).
    Runs one reverse pass within a fresh, isolated tape.
    """
    tape = Tape(dtype)
    x = tape.variable(x0)
    return _partials(tape, f(x), [x], "grad(f, x0)")[0]


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Variable]], Any],
          inputs: Dict[str, Any], dtype=DEFAULT_DTYPE) -> Dict[str, Any]:
    """
    Gradient of a scalar function y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Variable} and returning a scalar Variable
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: partial}  # same key order as `inputs`
    """
    tape = Tape(dtype)
    vars_ad = {k: tape.variable(v) for k, v in inputs.items()}
    partials = _partials(tape, f(vars_ad), list(vars_ad.values()), "grads(f, inputs)")
    return dict(zip(vars_ad.keys(), partials))


def grads_list(f: Callable[[List[Variable]], Any],
               x0_list: Iterable[Any], dtype=DEFAULT_DTYPE) -> List[Any]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    tape = Tape(dtype)
    xs = [tape.variable(v) for v in x0_list]
    return _partials(tape, f(xs), xs, "grads_list(f, x0_list)")


def gradient_array(f: Callable[[List[Variable]], Any],
                   x0_list: Iterable[Any], dtype=DEFAULT_DTYPE) -> np.ndarray:
    """grads_list() packed into a 1-D array of the tape's dtype."""
    return np.asarray(grads_list(f, x0_list, dtype=dtype), dtype=dtype)
