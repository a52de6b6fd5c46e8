# qregsim/metrics.py
"""State comparison and information measures over pure-state amplitude arrays."""
import numpy as np

from .config import PROBABILITY_CUTOFF
from .errors import DimensionMismatch
from .linalg import as_vector


def _pair(a, b):
    x, y = as_vector(a), as_vector(b)
    if x.shape != y.shape:
        raise DimensionMismatch(f"States must have the same dimension: {x.shape[0]} vs {y.shape[0]}")
    return x, y

def state_fidelity(a, b) -> float:
    """|<a|b>|^2."""
    x, y = _pair(a, b)
    return float(abs(np.vdot(x, y)) ** 2)

def trace_distance(a, b) -> float:
    """Trace distance of two pure states, sqrt(1 - |<a|b>|^2)."""
    f = state_fidelity(a, b)
    return float(np.sqrt(max(0.0, 1.0 - f)))

def entropy(state) -> float:
    """Shannon entropy (bits) of the computational-basis outcome distribution."""
    p = np.abs(as_vector(state)) ** 2
    p = p[p > PROBABILITY_CUTOFF]
    return float(-np.sum(p * np.log2(p)))

def purity(state) -> float:
    """sum p_i^2: purity of the state after full dephasing in the computational basis."""
    p = np.abs(as_vector(state)) ** 2
    return float(np.sum(p ** 2))

def concurrence(state) -> float:
    """2|a00*a11 - a01*a10| for a 2-qubit pure state."""
    x = as_vector(state)
    if x.shape[0] != 4:
        raise DimensionMismatch("Concurrence only defined for 2-qubit states")
    return float(2 * abs(x[0] * x[3] - x[1] * x[2]))
