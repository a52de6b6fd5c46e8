# qregsim/embedding.py
"""
Embed a k-qubit operator into the full 2^n x 2^n space of an n-qubit register.

Basis indices are little-endian: bit q of an index is the value of qubit q.
A target list maps the operator's local bits onto register qubits, with
``targets[0]`` feeding local bit 0 (the least significant).
"""
from numbers import Integral
from typing import Sequence, Tuple

import numpy as np

from .errors import DimensionMismatch, InvalidQubitIndex
from .linalg import as_matrix


def validate_targets(targets: Sequence[int], num_qubits: int) -> Tuple[int, ...]:
    """Return targets as a tuple of ints; raise InvalidQubitIndex on any bad entry."""
    out = []
    for q in targets:
        if isinstance(q, bool) or not isinstance(q, Integral):
            raise InvalidQubitIndex(f"Invalid qubit index: {q!r}")
        q = int(q)
        if q < 0 or q >= num_qubits:
            raise InvalidQubitIndex(f"Invalid qubit index: {q} (register has {num_qubits} qubits)")
        out.append(q)
    if len(set(out)) != len(out):
        raise InvalidQubitIndex(f"Target qubits must be distinct: {out}")
    if not out:
        raise InvalidQubitIndex("An operation needs at least one target qubit")
    return tuple(out)

def validate_operation(operator, targets: Sequence[int], num_qubits: int):
    """
    Check an (operator, targets) pair against an n-qubit register.

    Targets are checked first, then the operator must be 2^k x 2^k with
    k == len(targets). Returns ``(matrix, targets)`` normalized to a complex
    ndarray and a tuple of ints.
    """
    tgt = validate_targets(targets, num_qubits)
    U = as_matrix(operator)
    k = len(tgt)
    if U.shape[0] != U.shape[1] or U.shape[0] != (1 << k):
        raise DimensionMismatch(
            f"Gate size does not match target qubits: {U.shape[0]}x{U.shape[1]} operator on {k} target(s)"
        )
    return U, tgt

def gather_indices(targets: Sequence[int], num_qubits: int):
    """
    For every basis index i in [0, 2^n) return ``(local[i], rest[i])``.

    local[i] collects the target bits of i in target-list order (position 0 is
    the least significant local bit); rest[i] is i with those bits cleared.
    """
    idx = np.arange(1 << num_qubits, dtype=np.int64)
    local = np.zeros_like(idx)
    rest = idx.copy()
    for pos, q in enumerate(targets):
        local |= ((idx >> q) & 1) << pos
        rest &= ~np.int64(1 << q)
    return local, rest

def local_offsets(targets: Sequence[int]) -> np.ndarray:
    """offsets[a] = register bits set by local index a (used by the in-place kernels)."""
    k = len(targets)
    offs = np.zeros(1 << k, dtype=np.int64)
    for a in range(1 << k):
        for pos, q in enumerate(targets):
            if (a >> pos) & 1:
                offs[a] |= 1 << q
    return offs

def embed_operator(operator, targets: Sequence[int], num_qubits: int) -> np.ndarray:
    """
    Full 2^n x 2^n matrix acting as ``operator`` on ``targets`` and as the
    identity on every other qubit.

    Entry (i, j) is operator[i_local, j_local] when i and j agree on all
    spectator bits and 0 otherwise, which yields 2^(n-k) permuted copies of
    the operator. Time and memory are O(4^n).
    """
    U, tgt = validate_operation(operator, targets, num_qubits)
    local, rest = gather_indices(tgt, num_qubits)
    same_rest = rest[:, None] == rest[None, :]
    block = U[local[:, None], local[None, :]]
    return np.where(same_rest, block, 0).astype(U.dtype, copy=False)
