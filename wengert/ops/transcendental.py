# wengert/ops/transcendental.py
from .arithmetic import _binary, _unary


def sqrt(x):  return _unary("sqrt", x)
def cbrt(x):  return _unary("cbrt", x)
def exp(x):   return _unary("exp", x)
def exp2(x):  return _unary("exp2", x)
def log2(x):  return _unary("log2", x)
def log10(x): return _unary("log10", x)


def log(x, base=None):
    """
    Natural logarithm, or logarithm in `base` when one is given.

    Either argument may be a Variable or a constant; with two Variables the
    node records both partials:
      ∂/∂x    =  1 / (x * ln(base))
      ∂/∂base = -log_base(x) / (base * ln(base))
    """
    if base is None:
        return _unary("log", x)
    return _binary("logb", x, base)


def ln(x):
    """Natural logarithm."""
    return _unary("log", x)


def sin(x): return _unary("sin", x)
def cos(x): return _unary("cos", x)
def tan(x): return _unary("tan", x)
def sec(x): return _unary("sec", x)
def csc(x): return _unary("csc", x)
def cot(x): return _unary("cot", x)

def arcsin(x): return _unary("arcsin", x)
def arccos(x): return _unary("arccos", x)
def arctan(x): return _unary("arctan", x)
def arcsec(x): return _unary("arcsec", x)
def arccsc(x): return _unary("arccsc", x)


def arccot(x):
    """Inverse cotangent on the principal branch (0, pi): pi/2 - arctan(x)."""
    return _unary("arccot", x)


def sinh(x): return _unary("sinh", x)
def cosh(x): return _unary("cosh", x)
def tanh(x): return _unary("tanh", x)
def sech(x): return _unary("sech", x)
def csch(x): return _unary("csch", x)
def coth(x): return _unary("coth", x)

def arsinh(x): return _unary("arsinh", x)
def arcosh(x): return _unary("arcosh", x)
def artanh(x): return _unary("artanh", x)
def arsech(x): return _unary("arsech", x)
def arcsch(x): return _unary("arcsch", x)
def arcoth(x): return _unary("arcoth", x)


def abs(x):
    """|x|, with derivative sign(x) (zero at the kink)."""
    return _unary("abs", x)


__all__ = [
    "sqrt", "cbrt", "exp", "exp2", "log", "ln", "log2", "log10",
    "sin", "cos", "tan", "sec", "csc", "cot",
    "arcsin", "arccos", "arctan", "arcsec", "arccsc", "arccot",
    "sinh", "cosh", "tanh", "sech", "csch", "coth",
    "arsinh", "arcosh", "artanh", "arsech", "arcsch", "arcoth",
    "abs",
]
