# qregsim/__init__.py
"""Dense state-vector quantum circuit simulator."""
from .circuit import Circuit, Operation
from .config import DEFAULT_CONFIG, SimulatorConfig
from .errors import DimensionMismatch, InvalidArgument, InvalidQubitIndex, QuantumError
from .sampler import Sampler, SimulationResult
from .state import MeasurementResult, StateRegister

__all__ = [
    "Circuit", "Operation", "StateRegister", "MeasurementResult",
    "Sampler", "SimulationResult", "SimulatorConfig", "DEFAULT_CONFIG",
    "QuantumError", "InvalidQubitIndex", "DimensionMismatch", "InvalidArgument",
]
