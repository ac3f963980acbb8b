# wengert/ops/__init__.py

# Convenience re-exports so users can do: from wengert.ops import mul, exp, ...
from .arithmetic import add, sub, mul, div, neg, pos, pow
from .transcendental import (
    sqrt, cbrt, exp, exp2, log, ln, log2, log10,
    sin, cos, tan, sec, csc, cot,
    arcsin, arccos, arctan, arcsec, arccsc, arccot,
    sinh, cosh, tanh, sech, csch, coth,
    arsinh, arcosh, artanh, arsech, arcsch, arcoth,
    abs,
)
from .special import erf, norm_cdf
from .table import UNARY, BINARY

__all__ = [
    "add", "sub", "mul", "div", "neg", "pos", "pow",
    "sqrt", "cbrt", "exp", "exp2", "log", "ln", "log2", "log10",
    "sin", "cos", "tan", "sec", "csc", "cot",
    "arcsin", "arccos", "arctan", "arcsec", "arccsc", "arccot",
    "sinh", "cosh", "tanh", "sech", "csch", "coth",
    "arsinh", "arcosh", "artanh", "arsech", "arcsch", "arcoth",
    "abs",
    "erf", "norm_cdf",
    "UNARY", "BINARY",
]
