# wengert/ops/special.py
from .arithmetic import _unary


def erf(x):
    """
    Error function: erf(x) = (2/√π) ∫₀ˣ e^(-t²) dt

    Derivative: d/dx erf(x) = (2/√π) * e^(-x²)
    """
    return _unary("erf", x)


def norm_cdf(x):
    """
    Standard normal CDF N(x); records the local partial dN/dx = phi(x).
    """
    return _unary("norm_cdf", x)
