# wengert/core/errors.py


class CrossTapeError(ValueError):
    """
    Raised when handles recorded on different tapes are combined.

    "Different" also covers handles created on a tape before its `reset()`:
    their indices refer to a graph that no longer exists.
    """
