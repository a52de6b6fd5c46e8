# qregsim/algorithms.py
"""Ready-made circuits built from the fluent Circuit API."""
import math
from typing import Callable, Iterable

from .circuit import Circuit
from .errors import InvalidArgument


def bell_state() -> Circuit:
    return Circuit.empty(2).h(0).cnot(0, 1)

def ghz_state(n: int) -> Circuit:
    c = Circuit.empty(n).h(0)
    for k in range(1, n):
        c.cnot(0, k)
    return c

def qft(n: int) -> Circuit:
    """
    Quantum Fourier transform, |x> -> sum_y exp(2*pi*i*x*y/2^n) |y> / sqrt(2^n).

    Qubit n-1 is the most significant bit, so it is processed first and the
    bit order is reversed with swaps at the end.
    """
    c = Circuit.empty(n)
    for j in reversed(range(n)):
        c.h(j)
        for m in reversed(range(j)):
            c.cphase(m, j, math.pi / (1 << (j - m)))
    for k in range(n // 2):
        c.swap(k, n - 1 - k)
    return c

def inverse_qft(n: int) -> Circuit:
    return qft(n).inverse()

def deutsch_jozsa(oracle: Callable[[Circuit], None], n: int) -> Circuit:
    """
    Deutsch-Jozsa on ``n`` input qubits with the ancilla at index ``n``.

    ``oracle`` appends U_f to the circuit it is given. A constant f leaves the
    input register in |0...0>.
    """
    c = Circuit.empty(n + 1).x(n)
    for k in range(n + 1):
        c.h(k)
    oracle(c)
    for k in range(n):
        c.h(k)
    return c

def _phase_flip_all_ones(c: Circuit, n: int):
    if n == 2:
        c.cz(0, 1)
    else:
        c.h(n - 1).toffoli(0, 1, n - 1).h(n - 1)

def _mark(c: Circuit, state: int, n: int):
    flips = [k for k in range(n) if not (state >> k) & 1]
    for k in flips:
        c.x(k)
    _phase_flip_all_ones(c, n)
    for k in flips:
        c.x(k)

def _diffusion(c: Circuit, n: int):
    for k in range(n):
        c.h(k)
    for k in range(n):
        c.x(k)
    _phase_flip_all_ones(c, n)
    for k in range(n):
        c.x(k)
    for k in range(n):
        c.h(k)

def grover_search(marked: Iterable[int], n: int) -> Circuit:
    """Grover search over 2 or 3 qubits with floor(pi/4 * sqrt(2^n)) iterations."""
    if n not in (2, 3):
        raise InvalidArgument(f"grover_search supports 2 or 3 qubits, got {n}")
    marked = list(marked)
    for state in marked:
        if not 0 <= state < (1 << n):
            raise InvalidArgument(f"marked state {state} outside [0, {1 << n})")
    iterations = int(math.pi / 4 * math.sqrt(1 << n))
    c = Circuit.empty(n)
    for k in range(n):
        c.h(k)
    for _ in range(iterations):
        for state in marked:
            _mark(c, state, n)
        _diffusion(c, n)
    return c

def teleportation() -> Circuit:
    """Teleport qubit 0 onto qubit 2, corrections applied as controlled gates."""
    c = Circuit.empty(3)
    c.h(1).cnot(1, 2)      # Bell pair on 1, 2
    c.cnot(0, 1).h(0)      # Alice
    c.cnot(1, 2).cz(0, 2)  # Bob
    return c

def superdense_coding(message: str = "11") -> Circuit:
    """Send two classical bits; measuring yields ``message`` (qubit 1 first)."""
    if len(message) != 2 or set(message) - {"0", "1"}:
        raise InvalidArgument(f"message must be two bits, got {message!r}")
    c = Circuit.empty(2).h(0).cnot(0, 1)
    if message[1] == "1":
        c.z(0)
    if message[0] == "1":
        c.x(0)
    return c.cnot(0, 1).h(0)
