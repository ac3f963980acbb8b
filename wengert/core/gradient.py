# wengert/core/gradient.py
from __future__ import annotations
import warnings
import numpy as np
from .errors import CrossTapeError


class Gradient:
    """
    Result of one reverse pass: ∂(terminal)/∂(node i) for every node that
    existed on the tape when the pass ran. Immutable.
    """

    __slots__ = ("tape", "_token", "_partials")

    def __init__(self, tape, token, partials: np.ndarray):
        self.tape = tape
        self._token = token
        partials.setflags(write=False)
        self._partials = partials

    def __len__(self):
        return len(self._partials)

    def __repr__(self):
        return f"Gradient(nodes={len(self._partials)}, dtype={self._partials.dtype.name})"

    @property
    def partials(self) -> np.ndarray:
        return self._partials.copy()

    def with_respect_to(self, variable):
        """Partial derivative of the terminal with respect to `variable`."""
        from .var import Variable  # local import to avoid cycles
        if not isinstance(variable, Variable):
            raise TypeError(
                f"Gradient lookup needs a Variable, but got {type(variable).__name__}"
            )
        if variable.tape is not self.tape or variable._token is not self._token:
            raise CrossTapeError(
                "Variable and Gradient were not recorded on the same tape"
            )
        if variable.index >= len(self._partials):
            # Recorded after the pass: the terminal cannot depend on it.
            warnings.warn(
                f"Variable at index {variable.index} was created after this gradient "
                f"was computed ({len(self._partials)} nodes); its partial is zero",
                RuntimeWarning,
                stacklevel=2,
            )
            return self.tape.scalar(0.0)
        return self._partials[variable.index]

    wrt = with_respect_to

    def __getitem__(self, variable):
        return self.with_respect_to(variable)
