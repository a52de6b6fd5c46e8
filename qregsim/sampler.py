# qregsim/sampler.py
import time
from dataclasses import dataclass, field
from numbers import Integral
from typing import Dict, List, Optional

import numpy as np

from .circuit import Circuit
from .config import SimulatorConfig
from .errors import InvalidArgument
from .logging_config import get_logger
from .state import MeasurementResult, StateRegister

logger = get_logger(__name__)


@dataclass
class SimulationResult:
    circuit: Circuit
    final_state: np.ndarray                 # exact amplitudes after one execution
    probabilities: Dict[str, float]         # exact, from final_state
    measurements: List[MeasurementResult]   # sampled; probability = count / shots
    counts: Dict[str, int] = field(default_factory=dict)
    frequencies: Dict[str, float] = field(default_factory=dict)
    shots: int = 0
    execution_time_ms: float = 0.0


def _check_positive(value, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral) or value < 1:
        raise InvalidArgument(f"{what} must be a positive integer, got {value!r}")
    return int(value)


class Sampler:
    """
    Shot-based sampler: replays a circuit on fresh registers and tallies
    full-register measurements.

    One generator, seeded once, feeds every shot, so a fixed ``seed`` (and a
    fixed sequence of calls) reproduces every count exactly.
    """

    def __init__(self, shots: int = 1000, seed: Optional[int] = None, backend: str = "dense",
                 dtype=np.complex128, num_threads: Optional[int] = None):
        self._shots = _check_positive(shots, "shots")
        self.seed = seed
        self.backend = backend
        self.dtype = dtype
        self.num_threads = num_threads
        self.rng = np.random.default_rng(seed)

    @classmethod
    def from_config(cls, config: SimulatorConfig) -> "Sampler":
        return cls(shots=config.shots, seed=config.seed, backend=config.backend,
                   dtype=config.dtype, num_threads=config.num_threads)

    @property
    def shots(self) -> int:
        return self._shots

    @shots.setter
    def shots(self, value: int):
        self._shots = _check_positive(value, "shots")

    def _shot(self, circuit: Circuit, initial_index: int) -> str:
        reg = StateRegister.basis(circuit.num_qubits, initial_index, dtype=self.dtype,
                                  rng=self.rng, backend=self.backend)
        for op in circuit.operations:
            reg.apply_operator(op.matrix, op.targets)
        return reg.measure().state

    def simulate(self, circuit: Circuit, initial_index: int = 0) -> SimulationResult:
        t0 = time.perf_counter()

        exact = circuit.execute(initial_index, rng=self.rng, backend=self.backend, dtype=self.dtype,
                                num_threads=self.num_threads)

        counts: Dict[str, int] = {}
        for _ in range(self._shots):
            outcome = self._shot(circuit, initial_index)
            counts[outcome] = counts.get(outcome, 0) + 1

        counts = dict(sorted(counts.items()))
        frequencies = {s: c / self._shots for s, c in counts.items()}
        measurements = [MeasurementResult(state=s, probability=frequencies[s], counts=c)
                        for s, c in counts.items()]

        wall = (time.perf_counter() - t0) * 1e3
        logger.info("sampled %d shot(s) of %d-qubit circuit (%d ops) in %.2f ms: %s",
                    self._shots, circuit.num_qubits, len(circuit), wall, counts)
        return SimulationResult(
            circuit=circuit,
            final_state=exact.amplitudes(),
            probabilities=exact.probabilities(),
            measurements=measurements,
            counts=counts,
            frequencies=frequencies,
            shots=self._shots,
            execution_time_ms=wall,
        )

    def run_multiple_experiments(self, circuit: Circuit, experiments: int,
                                 initial_index: int = 0) -> Dict[str, List[int]]:
        """
        Repeat simulate() and collect, per outcome, the count from every
        experiment in order (0 where the outcome was not drawn).
        """
        experiments = _check_positive(experiments, "experiments")
        per_outcome: Dict[str, List[int]] = {}
        for i in range(experiments):
            result = self.simulate(circuit, initial_index)
            for state in result.counts.keys() - per_outcome.keys():
                per_outcome[state] = [0] * i
            for state, series in per_outcome.items():
                series.append(result.counts.get(state, 0))
        return dict(sorted(per_outcome.items()))
