# qregsim/apply_serial.py
"""In-place O(2^n * 2^k) kernels written as plain Python loops."""
import numpy as np

from .embedding import local_offsets


def apply_single_qubit(psi: np.ndarray, U2: np.ndarray, k: int):
    """Apply 2x2 gate U2 to qubit k (little-endian: bit k)."""
    assert U2.shape == (2,2)
    N = psi.shape[0]
    step = 1 << k
    block = step << 1
    # iterate blocks of size 2^(k+1), update pairs (i0, i1=i0+step)
    for base in range(0, N, block):
        for off in range(step):
            i0 = base + off
            i1 = i0 + step
            a0 = psi[i0]
            a1 = psi[i1]
            psi[i0] = U2[0,0]*a0 + U2[0,1]*a1
            psi[i1] = U2[1,0]*a0 + U2[1,1]*a1

def apply_multi_qubit(psi: np.ndarray, U: np.ndarray, targets):
    """
    Apply a 2^k x 2^k gate to ``targets`` (targets[0] is local bit 0).

    Every base index with all target bits clear owns one group of 2^k
    amplitudes ``base | offsets[a]``; groups are disjoint, so each is
    updated independently.
    """
    offsets = [int(o) for o in local_offsets(targets)]
    dim = len(offsets)
    assert U.shape == (dim, dim)
    mask = offsets[-1]
    N = psi.shape[0]
    for base in range(N):
        if base & mask:
            continue
        amps = [psi[base + o] for o in offsets]
        for r in range(dim):
            acc = 0
            for c in range(dim):
                acc += U[r,c]*amps[c]
            psi[base + offsets[r]] = acc

def apply_operator(psi: np.ndarray, U: np.ndarray, targets):
    U = np.asarray(U, dtype=psi.dtype)
    if len(targets) == 1:
        apply_single_qubit(psi, U, targets[0])
    else:
        apply_multi_qubit(psi, U, targets)
