# qregsim/gates.py
# Multi-qubit matrices are written in target-list order: the first target
# (the control, for controlled gates) is local bit 0, i.e. the LSB of the
# row/column index. CNOT(c, t) therefore swaps |c=1,t=0> (1) with |c=1,t=1> (3).
import numpy as np

def I(dtype=np.complex128) -> np.ndarray:
    return np.eye(2, dtype=dtype)

def X(dtype=np.complex128) -> np.ndarray:
    return np.array([[0, 1],
                     [1, 0]], dtype=dtype)

def Y(dtype=np.complex128) -> np.ndarray:
    return np.array([[0, -1j],
                     [1j, 0]], dtype=dtype)

def Z(dtype=np.complex128) -> np.ndarray:
    return np.array([[1, 0],
                     [0, -1]], dtype=dtype)

def H(dtype=np.complex128) -> np.ndarray:
    s = np.sqrt(0.5)
    return np.array([[s, s],
                     [s, -s]], dtype=dtype)

def S(dtype=np.complex128) -> np.ndarray:
    return np.array([[1, 0],
                     [0, 1j]], dtype=dtype)

def SDG(dtype=np.complex128) -> np.ndarray:
    return np.array([[1, 0],
                     [0, -1j]], dtype=dtype)

def T(dtype=np.complex128) -> np.ndarray:
    return PHASE(np.pi / 4, dtype=dtype)

def TDG(dtype=np.complex128) -> np.ndarray:
    return PHASE(-np.pi / 4, dtype=dtype)

def RX(theta: float, dtype=np.complex128) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = -1j*np.sin(theta/2.0)
    return np.array([[c, s],
                     [s, c]], dtype=dtype)

def RY(theta: float, dtype=np.complex128) -> np.ndarray:
    c = np.cos(theta/2.0)
    s = np.sin(theta/2.0)
    return np.array([[c, -s],
                     [s, c]], dtype=dtype)

def RZ(theta: float, dtype=np.complex128) -> np.ndarray:
    return np.array([[np.exp(-0.5j*theta), 0],
                     [0, np.exp(+0.5j*theta)]], dtype=dtype)

def PHASE(theta: float, dtype=np.complex128) -> np.ndarray:
    return np.array([[1, 0],
                     [0, np.exp(1j*theta)]], dtype=dtype)

def _permutation(dim: int, swap_a: int, swap_b: int, dtype) -> np.ndarray:
    mat = np.eye(dim, dtype=dtype)
    mat[swap_a, swap_a] = 0; mat[swap_b, swap_b] = 0
    mat[swap_a, swap_b] = 1; mat[swap_b, swap_a] = 1
    return mat

def CNOT(dtype=np.complex128) -> np.ndarray:
    # targets (control, target): flip local bit 1 when local bit 0 is set
    return _permutation(4, 1, 3, dtype)

def CZ(dtype=np.complex128) -> np.ndarray:
    return np.diag(np.array([1, 1, 1, -1], dtype=dtype))

def CPHASE(theta: float, dtype=np.complex128) -> np.ndarray:
    return np.diag(np.array([1, 1, 1, np.exp(1j*theta)], dtype=dtype))

def SWAP(dtype=np.complex128) -> np.ndarray:
    return _permutation(4, 1, 2, dtype)

def ISWAP(dtype=np.complex128) -> np.ndarray:
    mat = np.zeros((4, 4), dtype=dtype)
    mat[0, 0] = 1; mat[3, 3] = 1
    mat[1, 2] = 1j; mat[2, 1] = 1j
    return mat

def TOFFOLI(dtype=np.complex128) -> np.ndarray:
    # targets (c1, c2, t): |c1=1,c2=1,t=0> is local 3, with t=1 it is 7
    return _permutation(8, 3, 7, dtype)

def FREDKIN(dtype=np.complex128) -> np.ndarray:
    # targets (c, a, b): swap a and b when c=1, i.e. local 3 <-> 5
    return _permutation(8, 3, 5, dtype)


ONE_QUBIT = {"I": I, "X": X, "Y": Y, "Z": Z, "H": H, "S": S, "SDG": SDG, "T": T, "TDG": TDG}
TWO_QUBIT = {"CNOT": CNOT, "CZ": CZ, "SWAP": SWAP, "ISWAP": ISWAP}
THREE_QUBIT = {"TOFFOLI": TOFFOLI, "FREDKIN": FREDKIN}
PARAMETRIC = {"RX": RX, "RY": RY, "RZ": RZ, "PHASE": PHASE, "CPHASE": CPHASE}
