# qregsim/config.py
"""
Configuration for the state-vector simulator.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

NORM_TOLERANCE = 1e-9       # |sum |a|^2 - 1| allowed after unitary evolution
PROBABILITY_CUTOFF = 1e-10  # probabilities at or below this are omitted from maps

BACKENDS = ("dense", "serial", "numba")


@dataclass
class SimulatorConfig:
    """Settings consumed by ``Sampler.from_config``."""

    # Sampling
    shots: int = 1000
    seed: Optional[int] = None

    # Execution
    backend: str = "dense"
    dtype: type = np.complex128
    num_threads: Optional[int] = None  # numba backend only


# Default configuration instance
DEFAULT_CONFIG = SimulatorConfig()
