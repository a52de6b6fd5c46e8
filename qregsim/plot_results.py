# qregsim/plot_results.py
import csv, os
import matplotlib.pyplot as plt
from collections import defaultdict
from statistics import median

# bench CSV columns that are numeric; everything else stays a string
COLUMN_TYPES = {"qubits": int, "depth": int, "gates": int, "shots": int, "wall_ms": float}

def load_rows(path):
    with open(path, "r", newline="") as f:
        return [{k: COLUMN_TYPES.get(k, str)(v) for k, v in row.items()}
                for row in csv.DictReader(f)]

def median_by_key(rows, key_fields):
    """Median ``wall_ms`` per distinct tuple of ``key_fields``."""
    walls = defaultdict(list)
    for row in rows:
        walls[tuple(row[k] for k in key_fields)].append(row["wall_ms"])
    return [dict(zip(key_fields, key), wall_ms=float(median(ws))) for key, ws in walls.items()]

def _plot_series(rows, x_field, xlabel, title, out_path, logy=False):
    pts = median_by_key(rows, ["backend", x_field])
    if not pts:
        return None
    by_backend = defaultdict(list)
    for r in pts:
        by_backend[r["backend"]].append((r[x_field], r["wall_ms"]))
    fig = plt.figure()
    for be, p in by_backend.items():
        xs, ys = zip(*sorted(p))
        plt.plot(xs, ys, marker="o", label=be)
    plt.xlabel(xlabel)
    plt.ylabel("Runtime (ms, log scale)" if logy else "Runtime (ms)")
    plt.title(title)
    if logy:
        plt.yscale("log")
    plt.grid(True, which="both", ls="--", lw=0.5)
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close(fig)
    return out_path

def plot_runtime_vs_qubits(rows, out_dir, tag):
    return _plot_series(rows, "qubits", "Qubits (n)", f"Runtime vs Qubits [{tag}]",
                        os.path.join(out_dir, f"runtime_vs_qubits_{tag}.png"), logy=True)

def plot_runtime_vs_shots(rows, out_dir, tag):
    return _plot_series(rows, "shots", "Shots", f"Sampler runtime vs Shots [{tag}]",
                        os.path.join(out_dir, f"runtime_vs_shots_{tag}.png"))

def plot_all(data_dir):
    """Render every data/<backend>/{qubits,shots}.csv next to its CSV."""
    csvs = []
    for root, _, files in os.walk(data_dir):
        for f in files:
            if f.endswith(".csv"):
                csvs.append(os.path.join(root, f))

    if not csvs:
        print(f"No CSV files found under {data_dir}")
        return []

    written = []
    for path in sorted(csvs):
        tag = os.path.splitext(os.path.basename(path))[0]
        backend = os.path.basename(os.path.dirname(path))
        rows = load_rows(path)
        print(f"Plotting from {backend}/{tag}.csv ({len(rows)} rows)...")
        out_dir = os.path.dirname(path)
        if tag.startswith("qubits"):
            out = plot_runtime_vs_qubits(rows, out_dir, backend)
        elif tag.startswith("shots"):
            out = plot_runtime_vs_shots(rows, out_dir, backend)
        else:
            continue
        if out:
            written.append(out)
    print(f"\nSaved {len(written)} plot(s) under {data_dir}/<backend>/*.png")
    return written
