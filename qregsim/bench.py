# qregsim/bench.py
import argparse, csv, logging, os, socket, subprocess, time
from datetime import datetime
import numpy as np
from .algorithms import ghz_state
from .circuit import Circuit
from .config import BACKENDS
from .logging_config import setup_logging
from .sampler import Sampler

DATA_DIR = os.path.join(os.getcwd(), "data")
HEADER = ["qubits","depth","backend","gates","shots","wall_ms","hostname","commit","dtype","timestamp"]

# single-qubit layers draw from these; entanglers alternate cnot/cz/swap
ONE_QUBIT_MOVES = ("h", "x", "s", "t")
TWO_QUBIT_MOVES = ("cnot", "cz", "swap")

def backend_dir(backend, data_dir=None):
    path = os.path.join(data_dir or DATA_DIR, backend)
    os.makedirs(path, exist_ok=True)
    return path

# ---------------------------------------------------------------------

def _git_commit():
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                      stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return ""
    return out.decode().strip()

def meta_row(dtype="complex128"):
    """Provenance columns stamped onto every CSV row."""
    return {
        "hostname": socket.gethostname(),
        "commit": _git_commit(),
        "dtype": dtype,
        "timestamp": datetime.now().isoformat(timespec="seconds"),
    }

def new_csv(path):
    """Truncate ``path`` and write the header line."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", newline="") as f:
        csv.DictWriter(f, fieldnames=HEADER).writeheader()

def write_row(path, row):
    with open(path, "a", newline="") as f:
        csv.DictWriter(f, fieldnames=HEADER).writerow({**row, **meta_row()})

# ---------------------------------------------------------------------

def random_circuit(n, depth, seed=0):
    """Brick-wall circuit: even layers act on every qubit, odd layers on neighbour pairs."""
    rng = np.random.default_rng(seed)
    circ = Circuit.empty(n)
    for layer in range(depth):
        if layer % 2 == 0 or n < 2:
            for q in range(n):
                getattr(circ, ONE_QUBIT_MOVES[rng.integers(len(ONE_QUBIT_MOVES))])(q)
        else:
            for a in range(1 if layer % 4 == 3 else 0, n - 1, 2):
                move = TWO_QUBIT_MOVES[rng.integers(len(TWO_QUBIT_MOVES))]
                pair = (a, a + 1) if rng.integers(2) == 0 else (a + 1, a)
                getattr(circ, move)(*pair)
    return circ

def warmup(circ, backend, threads=None):
    # numba compiles on first call; keep that out of the timings
    circ.execute(backend=backend, num_threads=threads)

def time_run(circ, backend, threads=None):
    t0 = time.perf_counter()
    circ.execute(backend=backend, num_threads=threads)
    return (time.perf_counter() - t0) * 1e3  # ms

# ---------------------------------------------------------------------
# individual experiments

def bench_qubits(ns, depth, backend, out_path):
    print(f"[run] Qubits scaling → {out_path}")
    new_csv(out_path)
    walls = []
    for i, n in enumerate(ns):
        circ = random_circuit(n, depth, seed=42)
        if i == 0:
            warmup(circ, backend=backend)
        wall = time_run(circ, backend)
        write_row(out_path, {
            "qubits": n, "depth": depth, "backend": backend,
            "gates": len(circ), "shots": 0, "wall_ms": f"{wall:.3f}",
        })
        walls.append(wall)
        print(f"  n={n}  gates={len(circ)}  wall={wall:.2f} ms")
    print("✓ done.\n")
    return walls

def bench_shots(n, shots_list, backend, out_path, seed=0):
    print(f"[run] Shot scaling → {out_path}")
    new_csv(out_path)
    circ = ghz_state(n)
    walls = []
    for shots in shots_list:
        result = Sampler(shots=shots, seed=seed, backend=backend).simulate(circ)
        write_row(out_path, {
            "qubits": n, "depth": len(circ), "backend": backend,
            "gates": len(circ), "shots": shots, "wall_ms": f"{result.execution_time_ms:.3f}",
        })
        walls.append(result.execution_time_ms)
        print(f"  shots={shots}  wall={result.execution_time_ms:.2f} ms")
    print("✓ done.\n")
    return walls

# ---------------------------------------------------------------------
def main(argv=None):
    p = argparse.ArgumentParser(description="qregsim benchmarks → data/<backend>/*.csv (auto)")
    p.add_argument("--data-dir", type=str, default=None)
    p.add_argument("--verbose", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_qubits = sub.add_parser("qubits")
    p_qubits.add_argument("--ns", type=str, required=True)
    p_qubits.add_argument("--depth", type=int, default=20)
    p_qubits.add_argument("--backend", type=str, default="dense", choices=list(BACKENDS))

    p_shots = sub.add_parser("shots")
    p_shots.add_argument("--n", type=int, default=2)
    p_shots.add_argument("--shots", type=str, default="100,1000,10000")
    p_shots.add_argument("--seed", type=int, default=0)
    p_shots.add_argument("--backend", type=str, default="dense", choices=list(BACKENDS))

    sub.add_parser("plot")

    args = p.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    data_dir = args.data_dir or DATA_DIR

    if args.cmd == "qubits":
        ns = [int(x) for x in args.ns.split(",")]
        out_path = os.path.join(backend_dir(args.backend, data_dir), "qubits.csv")
        bench_qubits(ns, args.depth, args.backend, out_path)

    elif args.cmd == "shots":
        ss = [int(x) for x in args.shots.split(",")]
        out_path = os.path.join(backend_dir(args.backend, data_dir), "shots.csv")
        bench_shots(args.n, ss, args.backend, out_path, seed=args.seed)

    elif args.cmd == "plot":
        from .plot_results import plot_all
        plot_all(data_dir)

if __name__ == "__main__":
    main()
