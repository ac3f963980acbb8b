# wengert/ops/table.py
"""
Closed table of primitive operations.

Every primitive is a tag mapped to its forward function and its local
partial derivative(s). Rules are pure and stateless; they receive NumPy
scalars of the tape's dtype; results are cast back to that dtype when
they are recorded.

Unary rule : forward(x) -> y,     derivative(x, y) -> dy/dx
Binary rule: forward(a, b) -> y,  d_a(a, b, y) -> dy/da,  d_b(a, b, y) -> dy/db

The derivative callables take the already computed forward value `y` so that
rules like exp, tan or tanh can reuse it.
"""
from typing import Callable, Dict, NamedTuple
import numpy as np
from scipy import special as sp

LN2 = np.log(2.0)
LN10 = np.log(10.0)
TWO_OVER_SQRT_PI = 2.0 / np.sqrt(np.pi)
SQRT_TWO_PI = np.sqrt(2.0 * np.pi)


class UnaryRule(NamedTuple):
    forward: Callable
    derivative: Callable


class BinaryRule(NamedTuple):
    forward: Callable
    d_a: Callable
    d_b: Callable


UNARY: Dict[str, UnaryRule] = {
    # arithmetic
    "neg":      UnaryRule(lambda x: -x,               lambda x, y: -1.0),
    "pos":      UnaryRule(lambda x: +x,               lambda x, y: 1.0),
    "abs":      UnaryRule(np.abs,                     lambda x, y: np.sign(x)),
    # powers and roots
    "sqrt":     UnaryRule(np.sqrt,                    lambda x, y: 0.5 / y),
    "cbrt":     UnaryRule(np.cbrt,                    lambda x, y: 1.0 / (3.0 * y * y)),
    # exponentials and logarithms
    "exp":      UnaryRule(np.exp,                     lambda x, y: y),
    "exp2":     UnaryRule(np.exp2,                    lambda x, y: y * LN2),
    "log":      UnaryRule(np.log,                     lambda x, y: 1.0 / x),
    "log2":     UnaryRule(np.log2,                    lambda x, y: 1.0 / (x * LN2)),
    "log10":    UnaryRule(np.log10,                   lambda x, y: 1.0 / (x * LN10)),
    # trigonometric
    "sin":      UnaryRule(np.sin,                     lambda x, y: np.cos(x)),
    "cos":      UnaryRule(np.cos,                     lambda x, y: -np.sin(x)),
    "tan":      UnaryRule(np.tan,                     lambda x, y: 1.0 + y * y),
    "sec":      UnaryRule(lambda x: 1.0 / np.cos(x),  lambda x, y: y * np.tan(x)),
    "csc":      UnaryRule(lambda x: 1.0 / np.sin(x),  lambda x, y: -y / np.tan(x)),
    "cot":      UnaryRule(lambda x: 1.0 / np.tan(x),  lambda x, y: -(1.0 + y * y)),
    # inverse trigonometric
    "arcsin":   UnaryRule(np.arcsin,                  lambda x, y: 1.0 / np.sqrt(1.0 - x * x)),
    "arccos":   UnaryRule(np.arccos,                  lambda x, y: -1.0 / np.sqrt(1.0 - x * x)),
    "arctan":   UnaryRule(np.arctan,                  lambda x, y: 1.0 / (1.0 + x * x)),
    "arcsec":   UnaryRule(lambda x: np.arccos(1.0 / x),
                          lambda x, y: 1.0 / (np.abs(x) * np.sqrt(x * x - 1.0))),
    "arccsc":   UnaryRule(lambda x: np.arcsin(1.0 / x),
                          lambda x, y: -1.0 / (np.abs(x) * np.sqrt(x * x - 1.0))),
    "arccot":   UnaryRule(lambda x: 0.5 * np.pi - np.arctan(x),
                          lambda x, y: -1.0 / (1.0 + x * x)),
    # hyperbolic
    "sinh":     UnaryRule(np.sinh,                    lambda x, y: np.cosh(x)),
    "cosh":     UnaryRule(np.cosh,                    lambda x, y: np.sinh(x)),
    "tanh":     UnaryRule(np.tanh,                    lambda x, y: 1.0 - y * y),
    "sech":     UnaryRule(lambda x: 1.0 / np.cosh(x), lambda x, y: -y * np.tanh(x)),
    "csch":     UnaryRule(lambda x: 1.0 / np.sinh(x), lambda x, y: -y / np.tanh(x)),
    "coth":     UnaryRule(lambda x: 1.0 / np.tanh(x), lambda x, y: 1.0 - y * y),
    # inverse hyperbolic
    "arsinh":   UnaryRule(np.arcsinh,                 lambda x, y: 1.0 / np.sqrt(x * x + 1.0)),
    "arcosh":   UnaryRule(np.arccosh,                 lambda x, y: 1.0 / np.sqrt(x * x - 1.0)),
    "artanh":   UnaryRule(np.arctanh,                 lambda x, y: 1.0 / (1.0 - x * x)),
    "arsech":   UnaryRule(lambda x: np.arccosh(1.0 / x),
                          lambda x, y: -1.0 / (x * np.sqrt(1.0 - x * x))),
    "arcsch":   UnaryRule(lambda x: np.arcsinh(1.0 / x),
                          lambda x, y: -1.0 / (np.abs(x) * np.sqrt(1.0 + x * x))),
    "arcoth":   UnaryRule(lambda x: np.arctanh(1.0 / x),
                          lambda x, y: 1.0 / (1.0 - x * x)),
    # special functions
    # scipy has no long-double loops; evaluate in float64
    "erf":      UnaryRule(lambda x: sp.erf(np.float64(x)),
                          lambda x, y: TWO_OVER_SQRT_PI * np.exp(-x * x)),
    "norm_cdf": UnaryRule(lambda x: sp.ndtr(np.float64(x)),
                          lambda x, y: np.exp(-0.5 * x * x) / SQRT_TWO_PI),
}

BINARY: Dict[str, BinaryRule] = {
    "add":  BinaryRule(lambda a, b: a + b, lambda a, b, y: 1.0,     lambda a, b, y: 1.0),
    "sub":  BinaryRule(lambda a, b: a - b, lambda a, b, y: 1.0,     lambda a, b, y: -1.0),
    "mul":  BinaryRule(lambda a, b: a * b, lambda a, b, y: b,       lambda a, b, y: a),
    "div":  BinaryRule(lambda a, b: a / b, lambda a, b, y: 1.0 / b, lambda a, b, y: -y / b),
    # ∂/∂b is nan for a <= 0 (log of a non-positive base)
    "pow":  BinaryRule(lambda a, b: a ** b,
                       lambda a, b, y: b * a ** (b - 1.0),
                       lambda a, b, y: y * np.log(a)),
    # log of `a` in base `b`
    "logb": BinaryRule(lambda a, b: np.log(a) / np.log(b),
                       lambda a, b, y: 1.0 / (a * np.log(b)),
                       lambda a, b, y: -y / (b * np.log(b))),
}


def evaluate_unary(tag: str, x):
    """Return (y, dy/dx). Domain errors yield inf/nan, never an exception."""
    rule = UNARY[tag]
    with np.errstate(all="ignore"):
        y = rule.forward(x)
        return y, rule.derivative(x, y)


def evaluate_binary(tag: str, a, b):
    """Return (y, dy/da, dy/db). Domain errors yield inf/nan, never an exception."""
    rule = BINARY[tag]
    with np.errstate(all="ignore"):
        y = rule.forward(a, b)
        return y, rule.d_a(a, b, y), rule.d_b(a, b, y)
