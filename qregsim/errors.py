# qregsim/errors.py


class QuantumError(Exception):
    """Base class for every precondition failure raised by qregsim."""


class InvalidQubitIndex(QuantumError, IndexError):
    """A target qubit is out of range, not an integer, or repeated."""


class DimensionMismatch(QuantumError, ValueError):
    """Matrix, operator or vector sizes do not line up."""


class InvalidArgument(QuantumError, ValueError):
    """A scalar argument (basis index, qubit count, shots, ...) is out of range."""
