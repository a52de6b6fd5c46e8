# qregsim/linalg.py
"""Dense complex linear algebra on numpy arrays.

Shapes are checked up front and reported as ``DimensionMismatch`` so the
callers (embedding, register, circuit inversion) never see a raw numpy
broadcasting error.
"""
import numpy as np

from .errors import DimensionMismatch


def as_matrix(a, dtype=np.complex128) -> np.ndarray:
    m = np.asarray(a, dtype=dtype)
    if m.ndim != 2:
        raise DimensionMismatch(f"expected a 2-D matrix, got shape {m.shape}")
    return m

def as_vector(v, dtype=np.complex128) -> np.ndarray:
    x = np.asarray(v, dtype=dtype)
    if x.ndim != 1:
        raise DimensionMismatch(f"expected a 1-D vector, got shape {x.shape}")
    return x

def multiply(a, b) -> np.ndarray:
    """Matrix product A·B; requires A.cols == B.rows."""
    A, B = as_matrix(a), as_matrix(b)
    if A.shape[1] != B.shape[0]:
        raise DimensionMismatch(f"cannot multiply {A.shape} by {B.shape}")
    return A @ B

def tensor_product(a, b) -> np.ndarray:
    """
    Kronecker product A⊗B.

    Entry [i*rowsB + k, j*colsB + l] = A[i,j] * B[k,l], i.e. A is the more
    significant block.
    """
    return np.kron(as_matrix(a), as_matrix(b))

def identity(size: int, dtype=np.complex128) -> np.ndarray:
    return np.eye(size, dtype=dtype)

def apply_to_vector(matrix, vector) -> np.ndarray:
    """M·v; requires M.cols == len(v). Keeps the vector's complex dtype."""
    v = np.asarray(vector)
    dtype = v.dtype if np.iscomplexobj(v) else np.complex128
    M, x = as_matrix(matrix, dtype=dtype), as_vector(v, dtype=dtype)
    if M.shape[1] != x.shape[0]:
        raise DimensionMismatch(f"matrix {M.shape} cannot act on vector of length {x.shape[0]}")
    return M @ x

def conjugate_transpose(matrix) -> np.ndarray:
    return as_matrix(matrix).conj().T

def is_unitary(matrix, tol: float = 1e-9) -> bool:
    M = as_matrix(matrix)
    if M.shape[0] != M.shape[1]:
        return False
    return bool(np.allclose(M @ M.conj().T, np.eye(M.shape[0]), atol=tol, rtol=0))
