# wengert/core/__init__.py

"""
Core public API for the wengert package.

This module exposes the minimal set of symbols that users of the AD engine
should import from `wengert.core`. The node layout and the append contract
(`recording`) stay internal.

Exports:
    Tape           : Append-only record of operations; creates leaf Variables.
    Variable       : Traced scalar: a value plus its node index on a tape.
    Gradient       : Partials of one terminal w.r.t. every recorded node.
    CrossTapeError : Raised when handles from different tapes are mixed.
    reverse        : Run a single reverse pass and return the raw partials.
    grad, grads, grads_list, gradient_array, value : convenience drivers.
"""

from .errors import CrossTapeError
from .tape import Tape, DEFAULT_DTYPE
from .var import Variable
from .gradient import Gradient
from .engine import reverse
from .seeds import grad, grads, grads_list, gradient_array, value

__all__ = [
    "CrossTapeError",
    "Tape", "DEFAULT_DTYPE",
    "Variable",
    "Gradient",
    "reverse",
    "grad", "grads", "grads_list", "gradient_array", "value",
]
