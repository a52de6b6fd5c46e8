# qregsim/circuit.py
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

import numpy as np

from .config import BACKENDS, NORM_TOLERANCE
from .embedding import validate_operation
from .linalg import conjugate_transpose
from .logging_config import get_logger
from .state import StateRegister, check_num_qubits
from . import gates as G

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class Operation:
    matrix: np.ndarray            # read-only 2^k x 2^k
    targets: Tuple[int, ...]
    name: str
    parameters: Tuple[float, ...] = ()

    def __str__(self):
        s = self.name
        if self.parameters:
            s += "(" + ", ".join(f"{p:.4f}" for p in self.parameters) + ")"
        return s + " on qubit(s): " + ", ".join(str(t) for t in self.targets)


@dataclass
class Circuit:
    """
    Ordered list of (operator, targets) operations on ``n`` qubits.

    Gate methods validate their targets immediately and return the circuit,
    so programs are built by chaining: ``Circuit.empty(2).h(0).cnot(0, 1)``.
    """
    n: int
    ops: Tuple[Operation, ...] = field(default=(), init=False)  # grows only through append()

    def __post_init__(self):
        self.n = check_num_qubits(self.n)

    @staticmethod
    def empty(n:int) -> "Circuit":
        return Circuit(n)

    @property
    def num_qubits(self) -> int:
        return self.n

    @property
    def operations(self) -> Tuple[Operation, ...]:
        return self.ops

    def __len__(self):
        return len(self.ops)

    def append(self, operator, targets: Sequence[int], name: str,
               parameters: Optional[Sequence[float]] = None) -> "Circuit":
        """Validate and record one operation; nothing is applied until execute()."""
        U, tgt = validate_operation(operator, targets, self.n)
        U = U.copy()
        U.setflags(write=False)
        params = tuple(float(p) for p in parameters) if parameters else ()
        self.ops = self.ops + (Operation(U, tgt, name, params),)
        return self

    def clear(self) -> "Circuit":
        self.ops = ()
        return self

    def compose(self, other: "Circuit") -> "Circuit":
        """Append every operation of ``other`` (which must fit in this register)."""
        for op in other.ops:
            self.append(op.matrix, op.targets, op.name, op.parameters)
        return self

    def inverse(self) -> "Circuit":
        """New circuit undoing this one: reversed order, each operator daggered."""
        inv = Circuit(self.n)
        for op in reversed(self.ops):
            inv.append(conjugate_transpose(op.matrix), op.targets, op.name + "†", op.parameters)
        return inv

    # --------------------------- single qubit ---------------------------
    def i(self, k:int): return self.append(G.I(), [k], "I")
    def h(self, k:int): return self.append(G.H(), [k], "H")
    def x(self, k:int): return self.append(G.X(), [k], "X")
    def y(self, k:int): return self.append(G.Y(), [k], "Y")
    def z(self, k:int): return self.append(G.Z(), [k], "Z")
    def s(self, k:int): return self.append(G.S(), [k], "S")
    def t(self, k:int): return self.append(G.T(), [k], "T")
    def sdg(self, k:int): return self.append(G.SDG(), [k], "SDG")
    def tdg(self, k:int): return self.append(G.TDG(), [k], "TDG")
    def rx(self, k:int, theta:float): return self.append(G.RX(theta), [k], "RX", [theta])
    def ry(self, k:int, theta:float): return self.append(G.RY(theta), [k], "RY", [theta])
    def rz(self, k:int, theta:float): return self.append(G.RZ(theta), [k], "RZ", [theta])
    def phase(self, k:int, theta:float): return self.append(G.PHASE(theta), [k], "Phase", [theta])

    # ----------------------------- two qubit -----------------------------
    def cnot(self, c:int, t:int): return self.append(G.CNOT(), [c, t], "CNOT")
    def cx(self, c:int, t:int): return self.cnot(c, t)
    def cz(self, c:int, t:int): return self.append(G.CZ(), [c, t], "CZ")
    def cphase(self, c:int, t:int, theta:float): return self.append(G.CPHASE(theta), [c, t], "CPhase", [theta])
    def swap(self, a:int, b:int): return self.append(G.SWAP(), [a, b], "SWAP")
    def iswap(self, a:int, b:int): return self.append(G.ISWAP(), [a, b], "ISWAP")

    # ---------------------------- three qubit ----------------------------
    def toffoli(self, c1:int, c2:int, t:int): return self.append(G.TOFFOLI(), [c1, c2, t], "TOFFOLI")
    def ccx(self, c1:int, c2:int, t:int): return self.toffoli(c1, c2, t)
    def fredkin(self, c:int, a:int, b:int): return self.append(G.FREDKIN(), [c, a, b], "FREDKIN")
    def cswap(self, c:int, a:int, b:int): return self.fredkin(c, a, b)

    def execute(self, initial_index:int=0, rng:Optional[np.random.Generator]=None,
                backend:str="dense", dtype=np.complex128, check_norm=False,
                check_norm_tol=NORM_TOLERANCE, num_threads=None) -> StateRegister:
        """Replay every operation, in order, on a fresh register."""
        if backend not in BACKENDS:
            raise NotImplementedError(f"Unknown backend: {backend}")
        if backend == "numba" and num_threads is not None:
            try:
                from .apply_numba import set_threads
            except Exception as e:
                raise RuntimeError("Numba backend not available. Did you `pip install numba`?") from e
            set_threads(int(num_threads))

        st = StateRegister.basis(self.n, initial_index, dtype=dtype, rng=rng, backend=backend)
        for op in self.ops:
            st.apply_operator(op.matrix, op.targets)

        if check_norm:
            st.check_normalized(tol=check_norm_tol)
        logger.debug("executed %d operation(s) on %d qubit(s) [%s]", len(self.ops), self.n, backend)
        return st

    def __str__(self):
        lines = [f"Quantum Circuit ({self.n} qubits)", "=" * 40]
        for i, op in enumerate(self.ops, 1):
            lines.append(f"{i}. {op}")
        return "\n".join(lines) + "\n"

