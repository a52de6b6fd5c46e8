# qregsim/state.py
from dataclasses import dataclass, field
from numbers import Integral
from typing import Dict, List, Optional

import numpy as np

from .config import BACKENDS, NORM_TOLERANCE, PROBABILITY_CUTOFF
from .embedding import embed_operator, validate_operation, validate_targets
from .errors import DimensionMismatch, InvalidArgument
from .linalg import apply_to_vector
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MeasurementResult:
    state: str                    # bit-string, qubit n-1 first
    probability: float
    counts: Optional[int] = None  # only set for sampled outcomes


def bitstring(index: int, n: int) -> str:
    return format(index, f"0{n}b")

def check_num_qubits(n) -> int:
    if isinstance(n, bool) or not isinstance(n, Integral) or n < 1:
        raise InvalidArgument(f"qubit count must be a positive integer, got {n!r}")
    return int(n)

def basis_vector(n: int, index: int = 0, dtype=np.complex128) -> np.ndarray:
    n = check_num_qubits(n)
    N = 1 << n
    if isinstance(index, bool) or not isinstance(index, Integral) or not 0 <= index < N:
        raise InvalidArgument(f"initial basis index {index!r} outside [0, {N})")
    psi = np.zeros(N, dtype=dtype)
    psi[int(index)] = 1.0 + 0.0j
    return psi


def _backend_kernel(backend: str):
    if backend == "serial":
        from .apply_serial import apply_operator
        return apply_operator
    if backend == "numba":
        try:
            from .apply_numba import apply_operator
        except Exception as e:
            raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
        return apply_operator
    raise NotImplementedError(f"Unknown backend: {backend}")


@dataclass
class StateRegister:
    """
    n-qubit register owning a dense amplitude vector of length 2^n.

    Index i of ``psi`` is the basis state whose bit q is the value of qubit q.
    Operators are applied in place (the vector object may be replaced), and
    every measurement draws exactly one uniform number from ``rng``.
    """
    n: int
    psi: np.ndarray  # shape (2**n,), dtype complex64/128
    rng: np.random.Generator = field(default_factory=np.random.default_rng, repr=False)
    backend: str = "dense"
    history: List[MeasurementResult] = field(default_factory=list, repr=False)

    def __post_init__(self):
        self.n = check_num_qubits(self.n)
        psi = np.asarray(self.psi)
        if not np.issubdtype(psi.dtype, np.number):
            raise InvalidArgument(f"amplitudes must be numeric, got dtype {psi.dtype}")
        if not np.iscomplexobj(psi):
            # real input is promoted; kernels cast operators to the vector's dtype
            psi = psi.astype(np.result_type(psi.dtype, np.complex64))
        self.psi = psi
        if self.psi.ndim != 1 or self.psi.shape[0] != (1 << self.n):
            raise DimensionMismatch(f"state vector of shape {self.psi.shape} does not fit {self.n} qubits")
        if self.backend not in BACKENDS:
            raise NotImplementedError(f"Unknown backend: {self.backend}")
        if self.rng is None:
            self.rng = np.random.default_rng()

    @staticmethod
    def basis(n: int, index: int = 0, dtype=np.complex128,
              rng: Optional[np.random.Generator] = None, backend: str = "dense") -> "StateRegister":
        psi = basis_vector(n, index, dtype=dtype)
        return StateRegister(n=int(n), psi=psi, rng=rng, backend=backend)

    @staticmethod
    def zero(n: int, dtype=np.complex128,
             rng: Optional[np.random.Generator] = None, backend: str = "dense") -> "StateRegister":
        return StateRegister.basis(n, 0, dtype=dtype, rng=rng, backend=backend)

    # ----------------------------- views -----------------------------

    @property
    def num_qubits(self) -> int:
        return self.n

    @property
    def dtype(self):
        return self.psi.dtype

    def as_numpy(self) -> np.ndarray:
        return self.psi

    def amplitudes(self) -> np.ndarray:
        return self.psi.copy()

    def measurement_history(self) -> List[MeasurementResult]:
        return list(self.history)

    def norm2(self) -> float:
        return float(np.vdot(self.psi, self.psi).real)

    def check_normalized(self, tol=NORM_TOLERANCE):
        n2 = self.norm2()
        if not (abs(1.0 - n2) <= tol):
            raise AssertionError(f"Normalization failed: ||psi||^2={n2}")

    def copy(self) -> "StateRegister":
        return StateRegister(self.n, self.psi.copy(), rng=self.rng,
                             backend=self.backend, history=list(self.history))

    def probabilities_array(self) -> np.ndarray:
        return np.abs(self.psi) ** 2

    def probabilities(self, cutoff: float = PROBABILITY_CUTOFF) -> Dict[str, float]:
        """Bit-string -> probability in ascending basis order, dropping p <= cutoff."""
        probs = self.probabilities_array()
        return {bitstring(i, self.n): float(p) for i, p in enumerate(probs) if p > cutoff}

    # ---------------------------- mutation ----------------------------

    def apply_operator(self, operator, targets) -> "StateRegister":
        """Apply a 2^k x 2^k operator to ``targets``; no renormalization."""
        if self.backend == "dense":
            full = embed_operator(operator, targets, self.n)
            self.psi = apply_to_vector(full, self.psi)
        else:
            U, tgt = validate_operation(operator, targets, self.n)
            _backend_kernel(self.backend)(self.psi, U.astype(self.psi.dtype), tgt)
        return self

    def set_state(self, amplitudes) -> "StateRegister":
        amps = np.array(amplitudes, dtype=self.psi.dtype)
        if amps.ndim != 1 or amps.shape[0] != (1 << self.n):
            raise DimensionMismatch(
                f"Invalid state vector size: expected {1 << self.n}, got {amps.shape}"
            )
        norm = float(np.sqrt(np.sum(np.abs(amps) ** 2)))
        if norm == 0.0:
            raise InvalidArgument("cannot normalize an all-zero state vector")
        self.psi = amps / norm
        return self

    def reset(self, index: int = 0):
        self.psi = basis_vector(self.n, index, dtype=self.psi.dtype)
        self.history = []

    # --------------------------- measurement ---------------------------

    def measure(self, qubit: Optional[int] = None) -> MeasurementResult:
        if qubit is not None:
            return self._measure_qubit(qubit)
        return self._measure_all()

    def _measure_qubit(self, qubit: int) -> MeasurementResult:
        (q,) = validate_targets([qubit], self.n)
        mask = 1 << q
        probs = self.probabilities_array()
        zero_bit = (np.arange(probs.shape[0]) & mask) == 0
        prob0 = float(np.sum(probs[zero_bit]))

        outcome = 0 if self.rng.random() < prob0 else 1
        p = prob0 if outcome == 0 else 1.0 - prob0

        # Collapse: drop the branch that was not observed, renormalize the rest.
        keep = zero_bit if outcome == 0 else ~zero_bit
        psi = np.where(keep, self.psi, 0)
        self.psi = (psi / np.sqrt(p)).astype(self.psi.dtype, copy=False)

        result = MeasurementResult(state=str(outcome), probability=p)
        self.history.append(result)
        logger.debug("measured qubit %d -> %d (p=%.6f)", q, outcome, p)
        return result

    def _measure_all(self) -> MeasurementResult:
        probs = self.probabilities_array()
        draw = self.rng.random()
        cumulative = np.cumsum(probs)
        # first index whose running sum exceeds the draw; last index on drift
        idx = int(np.searchsorted(cumulative, draw, side="right"))
        idx = min(idx, probs.shape[0] - 1)
        p = float(probs[idx])

        psi = np.zeros_like(self.psi)
        psi[idx] = 1.0
        self.psi = psi

        result = MeasurementResult(state=bitstring(idx, self.n), probability=p)
        self.history.append(result)
        logger.debug("measured register -> %s (p=%.6f)", result.state, p)
        return result
