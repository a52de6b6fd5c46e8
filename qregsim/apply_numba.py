# qregsim/apply_numba.py
import numpy as np
from numba import njit, prange, set_num_threads, get_num_threads

from .embedding import local_offsets

# ---------- low-level kernels (Numba JIT) ----------

@njit(parallel=True, fastmath=True)
def _single_qubit_kernel(psi, U2, k):
    N = psi.shape[0]
    step = 1 << k
    block = step << 1
    nblocks = N // block
    for b in prange(nblocks):
        base = b * block
        for off in range(step):
            i0 = base + off
            i1 = i0 + step
            a0 = psi[i0]
            a1 = psi[i1]
            psi[i0] = U2[0,0]*a0 + U2[0,1]*a1
            psi[i1] = U2[1,0]*a0 + U2[1,1]*a1

@njit(parallel=True, fastmath=True)
def _multi_qubit_kernel(psi, U, offsets, mask):
    N = psi.shape[0]
    dim = offsets.shape[0]
    # Iterate only bases where every target bit is 0 → disjoint groups.
    for base in prange(N):
        if (base & mask) == 0:
            amps = np.empty_like(psi[:dim])
            for a in range(dim):
                amps[a] = psi[base + offsets[a]]
            for r in range(dim):
                acc = U[r,0]*amps[0]
                for c in range(1, dim):
                    acc += U[r,c]*amps[c]
                psi[base + offsets[r]] = acc

# ---------- user-facing apply helpers ----------

def set_threads(n: int):
    set_num_threads(n)

def get_threads() -> int:
    return get_num_threads()

def apply_single_qubit(psi: np.ndarray, U2: np.ndarray, k: int):
    _single_qubit_kernel(psi, np.ascontiguousarray(U2, dtype=psi.dtype), k)

def apply_multi_qubit(psi: np.ndarray, U: np.ndarray, targets):
    offsets = local_offsets(targets)
    _multi_qubit_kernel(psi, np.ascontiguousarray(U, dtype=psi.dtype), offsets, np.int64(offsets[-1]))

def apply_operator(psi: np.ndarray, U: np.ndarray, targets):
    if len(targets) == 1:
        apply_single_qubit(psi, U, targets[0])
    else:
        apply_multi_qubit(psi, U, targets)
