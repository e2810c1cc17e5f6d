"""
Utility script to plot benchmark results from CSV files.
Usage: python -m matmul_lab.bench.plot_results
"""

import sys
import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path

# Add project root to path (two levels up from this file)
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

results_dir = project_root / "results"
plots_dir = results_dir / "plots"

MARKERS = {'baseline': 'o', 'numpy': 's', 'numba': '^'}
LABELS = {'baseline': 'Pure Python', 'numpy': 'NumPy', 'numba': 'Numba'}


def plot_matmul_results(csv_path=None, output_dir=None):
    """
    Plot GEMM benchmark results: latency and throughput against problem size.

    Returns the path of the saved PNG, or None when there was nothing to plot.
    """
    csv_path = Path(csv_path) if csv_path else results_dir / "matmul_results.csv"
    output_dir = Path(output_dir) if output_dir else plots_dir

    if not csv_path.exists():
        print(f"Results file not found: {csv_path}")
        return None

    df = pd.read_csv(csv_path)
    if df.empty:
        print(f"No results in: {csv_path}")
        return None

    df['size'] = df['M'] * df['N'] * df['P']

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))

    for kernel, data in df.groupby('kernel'):
        data = data.sort_values('size')
        label = LABELS.get(kernel, kernel)
        marker = MARKERS.get(kernel, 'o')
        axes[0].semilogy(data['size'], data['latency_ms'], '-', label=label, marker=marker)
        axes[1].plot(data['size'], data['throughput_gops'], '-', label=label, marker=marker)

    # Latency comparison
    axes[0].set_xscale('log')
    axes[0].set_xlabel('Problem Size (M × N × P)')
    axes[0].set_ylabel('Latency (ms)')
    axes[0].set_title('GEMM Latency Comparison')
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    # Throughput comparison
    axes[1].set_xscale('log')
    axes[1].set_xlabel('Problem Size (M × N × P)')
    axes[1].set_ylabel('Throughput (GOPS)')
    axes[1].set_title('GEMM Throughput Comparison')
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / "matmul_results.png"

    plt.tight_layout()
    plt.savefig(output_path, dpi=150)
    print(f"Saved plot: {output_path}")
    plt.close(fig)

    return output_path


if __name__ == "__main__":
    print("Generating plots from benchmark results...")
    plot_matmul_results()
    print("Plot generation complete!")
