# qregsim/noise.py
"""
Single-trajectory noise channels.

Each call picks one Kraus branch with its Born probability (one draw from
``rng``) and returns the renormalized post-branch state; averaging many
trajectories reproduces the channel.
"""
from typing import Sequence

import numpy as np

from . import gates as G
from .embedding import embed_operator, validate_targets
from .errors import DimensionMismatch, InvalidArgument
from .linalg import apply_to_vector, as_vector


def _num_qubits(psi: np.ndarray) -> int:
    n = int(psi.shape[0]).bit_length() - 1
    if n < 1 or psi.shape[0] != (1 << n):
        raise DimensionMismatch(f"state length {psi.shape[0]} is not a power of two")
    return n

def _check_probability(value: float, what: str) -> float:
    if not 0.0 <= value <= 1.0:
        raise InvalidArgument(f"{what} must lie in [0, 1], got {value}")
    return float(value)

def _apply_1q(psi: np.ndarray, U: np.ndarray, qubit: int, n: int) -> np.ndarray:
    return apply_to_vector(embed_operator(U, [qubit], n), psi)

def kraus_trajectory(state, kraus: Sequence[np.ndarray], qubit: int, rng: np.random.Generator) -> np.ndarray:
    """Apply one of the single-qubit Kraus operators ``kraus`` to ``qubit``."""
    psi = as_vector(state)
    n = _num_qubits(psi)
    (q,) = validate_targets([qubit], n)
    branches = [_apply_1q(psi, K, q, n) for K in kraus]
    weights = np.array([np.vdot(b, b).real for b in branches])
    u = rng.random() * weights.sum()
    pick = min(int(np.searchsorted(np.cumsum(weights), u, side="right")), len(branches) - 1)
    out = branches[pick]
    return out / np.sqrt(weights[pick])

def depolarizing(state, probability: float, rng: np.random.Generator) -> np.ndarray:
    """With ``probability`` apply X, Y or Z (uniformly) to a uniformly chosen qubit."""
    p = _check_probability(probability, "probability")
    psi = as_vector(state).copy()
    n = _num_qubits(psi)
    if rng.random() >= p:
        return psi
    qubit = int(rng.integers(n))
    pauli = (G.X, G.Y, G.Z)[int(rng.integers(3))]
    return _apply_1q(psi, pauli(), qubit, n)

def amplitude_damping(state, gamma: float, rng: np.random.Generator, qubit: int = 0) -> np.ndarray:
    """Energy relaxation |1> -> |0> on ``qubit`` with strength ``gamma``."""
    g = _check_probability(gamma, "gamma")
    K0 = np.array([[1, 0], [0, np.sqrt(1 - g)]], dtype=np.complex128)
    K1 = np.array([[0, np.sqrt(g)], [0, 0]], dtype=np.complex128)
    return kraus_trajectory(state, [K0, K1], qubit, rng)

def phase_damping(state, lam: float, rng: np.random.Generator, qubit: int = 0) -> np.ndarray:
    """Loss of phase coherence on ``qubit`` with strength ``lam``."""
    s = _check_probability(lam, "lam")
    K0 = np.array([[1, 0], [0, np.sqrt(1 - s)]], dtype=np.complex128)
    K1 = np.array([[0, 0], [0, np.sqrt(s)]], dtype=np.complex128)
    return kraus_trajectory(state, [K0, K1], qubit, rng)
