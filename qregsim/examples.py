# qregsim/examples.py
"""Small runnable demos: ``python -m qregsim.examples [bell|grover|qft|custom|all]``."""
import argparse, logging, math
from .algorithms import bell_state, grover_search, qft
from .circuit import Circuit
from .logging_config import setup_logging
from .sampler import Sampler
from .visualize import format_probabilities, format_state

def bell_state_example():
    print("=== Bell State Example ===")
    circ = bell_state()
    print(circ)
    reg = circ.execute()
    print(format_state(reg.amplitudes()))
    print(format_probabilities(reg.probabilities()))
    return reg

def grover_example(shots=1000, seed=None):
    print("=== Grover Search Example ===")
    circ = grover_search([3], 2)
    print(circ)
    result = Sampler(shots=shots, seed=seed).simulate(circ)
    print(format_probabilities(result.probabilities))
    return result

def qft_example(n=3):
    print("=== Quantum Fourier Transform Example ===")
    circ = qft(n)
    print(circ)
    reg = circ.execute()
    print(format_state(reg.amplitudes()))
    return reg

def custom_circuit_example(shots=1000, seed=None):
    print("=== Custom Circuit Example ===")
    circ = Circuit.empty(3).h(0).cnot(0, 1).cnot(1, 2).rz(2, math.pi / 4).h(2)
    print(circ)
    result = Sampler(shots=shots, seed=seed).simulate(circ)
    print(f"Execution time: {result.execution_time_ms:.3f} ms")
    print(format_probabilities(result.probabilities))
    return result

EXAMPLES = {
    "bell": bell_state_example,
    "grover": grover_example,
    "qft": qft_example,
    "custom": custom_circuit_example,
}

def main(argv=None):
    p = argparse.ArgumentParser(description="qregsim demo circuits")
    p.add_argument("which", nargs="?", default="all", choices=["all", *EXAMPLES])
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    names = list(EXAMPLES) if args.which == "all" else [args.which]
    for name in names:
        EXAMPLES[name]()

if __name__ == "__main__":
    main()
