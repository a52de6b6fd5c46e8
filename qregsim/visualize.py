# qregsim/visualize.py
"""Text rendering of states, probability maps and circuits, plus a matplotlib histogram."""
import math
from typing import Mapping

import numpy as np

from . import complex_math as cm
from .config import PROBABILITY_CUTOFF
from .errors import DimensionMismatch
from .linalg import as_vector


def format_state(amplitudes, precision: int = 4) -> str:
    psi = as_vector(amplitudes)
    n = max(1, int(psi.shape[0]).bit_length() - 1)
    out = ["Quantum State:"]
    for i, a in enumerate(psi):
        p = cm.magnitude_squared(a)
        if p > PROBABILITY_CUTOFF:
            out.append(f"|{i:0{n}b}⟩: {cm.to_string(a, precision)} (P: {p:.{precision}f})")
    return "\n".join(out) + "\n"

def format_probabilities(probs: Mapping[str, float], precision: int = 4) -> str:
    out = ["Measurement Probabilities:"]
    for state, p in sorted(probs.items(), key=lambda kv: (-kv[1], kv[0])):
        bar = "█" * int(math.floor(p * 50))
        out.append(f"|{state}⟩: {p * 100:.{precision}f}% {bar}")
    return "\n".join(out) + "\n"

def format_circuit(circuit) -> str:
    return str(circuit)

def bloch_vector(state):
    """(x, y, z) on the Bloch sphere for a single-qubit pure state."""
    psi = as_vector(state)
    if psi.shape[0] != 2:
        raise DimensionMismatch("Bloch sphere representation only for single qubit")
    alpha, beta = complex(psi[0]), complex(psi[1])
    theta = 2 * math.acos(min(1.0, cm.magnitude(alpha)))
    phi = cm.phase(beta) - cm.phase(alpha)
    return (math.sin(theta) * math.cos(phi),
            math.sin(theta) * math.sin(phi),
            math.cos(theta))

def plot_histogram(data: Mapping[str, float], path, title: str = "Measurement outcomes"):
    """Bar chart of counts or probabilities keyed by bit-string, saved to ``path``."""
    import matplotlib.pyplot as plt

    keys = sorted(data)
    vals = np.array([data[k] for k in keys], dtype=float)
    fig = plt.figure()
    plt.bar(keys, vals)
    plt.xlabel("Outcome")
    plt.ylabel("Counts" if vals.size and vals.max() > 1 else "Probability")
    plt.title(title)
    plt.grid(True, axis="y", ls="--", lw=0.5)
    plt.tight_layout()
    plt.savefig(path, dpi=200)
    plt.close(fig)
    return path
