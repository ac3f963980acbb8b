# wengert/__init__.py
# Reverse-mode automatic differentiation of scalar computations on a tape

from .core.errors import CrossTapeError
from .core.tape import Tape
from .core.var import Variable
from .core.gradient import Gradient
from .core.engine import reverse
from .core.seeds import grad, grads, grads_list, gradient_array, value
from .core.graph_utils import get_graph_stats, analyze_graph_complexity

# Elementary functions
from . import ops
from .ops import *  # noqa: F401,F403

__version__ = "0.1.0"

__all__ = [
    # Core
    'Tape',
    'Variable',
    'Gradient',
    'CrossTapeError',
    # Engine
    'reverse',
    # Drivers
    'grad',
    'grads',
    'grads_list',
    'gradient_array',
    'value',
    # Graph inspection
    'get_graph_stats',
    'analyze_graph_complexity',
    # Operations
    'ops',
    *ops.__all__,
]
