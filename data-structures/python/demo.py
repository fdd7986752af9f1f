"""
Max-Heap Demo -- Operation walk-through, tree visualizations, and heap sort
timing against built-in sorting.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from max_heap import MaxHeap, DESCENDING, heap_sort

SEED = 42

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

SAMPLE = [3, 10, 5, 1, 2, 7]
SIZES = [100, 500, 1_000, 5_000, 10_000, 50_000]
N_RUNS = 3


def draw_tree(ax, values, title, highlight=None):
    """Draw a flat heap array as a binary tree."""
    ax.set_title(title, fontsize=11)
    ax.axis("off")
    if not values:
        ax.text(0.5, 0.5, "(empty)", ha="center", va="center")
        return

    depth = int(np.floor(np.log2(len(values)))) + 1
    positions = []
    for i in range(len(values)):
        level = int(np.floor(np.log2(i + 1)))
        offset = i - (2 ** level - 1)
        x = (offset + 0.5) / 2 ** level
        y = 1.0 - level / max(depth, 2)
        positions.append((x, y))

    for i, (x, y) in enumerate(positions):
        for child in (2 * i + 1, 2 * i + 2):
            if child < len(values):
                cx, cy = positions[child]
                ax.plot([x, cx], [y, cy], color="gray", linewidth=1, zorder=1)

    for i, (x, y) in enumerate(positions):
        color = "salmon" if i == highlight else "lightsteelblue"
        ax.scatter([x], [y], s=900, color=color, edgecolors="black", zorder=2)
        ax.text(x, y, str(values[i]), ha="center", va="center", fontsize=10, zorder=3)
        ax.text(x, y - 0.09, f"[{i}]", ha="center", va="center", fontsize=7, color="dimgray")

    ax.set_xlim(-0.05, 1.05)
    ax.set_ylim(-0.2, 1.1)


def example_1_operations():
    """Walk through construction, insert, remove, and sort on a small input."""
    print("=" * 60)
    print("Example 1: Heap Operations")
    print("=" * 60)

    heap = MaxHeap(SAMPLE)
    print(f"  Input:            {SAMPLE}")
    print(f"  Built heap:       {heap.get()}")
    heap.insert(12)
    print(f"  After insert(12): {heap.get()}")
    heap.remove(12)
    heap.remove(5)
    print(f"  After remove(5):  {heap.get()}")
    heap.remove(10)
    print(f"  After remove(10): {heap.get()}")
    try:
        heap.remove(99)
    except ValueError as exc:
        print(f"  remove(99):       ValueError: {exc}")

    heap = MaxHeap(SAMPLE)
    print(f"  sort():           {heap.sort()}")
    print(f"  sort(descending): {heap.sort(DESCENDING)}")
    print(f"  Heap-shaped after sort: {heap.is_valid()}")


def example_2_tree_views():
    """Visualize how insert and remove reshape the tree."""
    print("\n" + "=" * 60)
    print("Example 2: Tree Views")
    print("=" * 60)

    heap = MaxHeap(SAMPLE)
    stages = [("Built from " + str(SAMPLE), heap.get(), 0)]
    heap.insert(12)
    stages.append(("insert(12)", heap.get(), 0))
    heap.remove(3)
    stages.append(("remove(3)", heap.get(), heap.get().index(7)))
    heap.remove(12)
    stages.append(("remove(12)", heap.get(), 0))

    fig, axes = plt.subplots(2, 2, figsize=(12, 8))
    for ax, (title, values, highlight) in zip(axes.flat, stages):
        draw_tree(ax, values, f"{title}\n{values}", highlight=highlight)
        print(f"  {title:<28} {values}")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_heap_tree.png", dpi=150)
    plt.close(fig)
    print(f"\n  Saved: viz/01_heap_tree.png")


def example_3_sort_timing():
    """Compare heap sort against sorted() and np.sort."""
    print("\n" + "=" * 60)
    print("Example 3: Sort Timing")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    results = {"heap_sort": [], "sorted": [], "np.sort": []}

    print(f"\n  {'n':>8} {'heap_sort (ms)':>16} {'sorted (ms)':>13} {'np.sort (ms)':>14}")
    print(f"  {'-'*54}")
    for n in SIZES:
        arr = rng.integers(-n, n, size=n)
        values = arr.tolist()

        expected = sorted(values)
        if heap_sort(values) != expected or heap_sort(values, DESCENDING) != expected[::-1]:
            raise RuntimeError(f"heap_sort disagrees with sorted() for n={n}")

        for name, fn in (("heap_sort", lambda: heap_sort(values)),
                         ("sorted", lambda: sorted(values)),
                         ("np.sort", lambda: np.sort(arr))):
            runs = []
            for _ in range(N_RUNS):
                t0 = time.perf_counter()
                fn()
                runs.append(time.perf_counter() - t0)
            results[name].append(np.median(runs) * 1000)

        print(f"  {n:>8} {results['heap_sort'][-1]:>16.2f} "
              f"{results['sorted'][-1]:>13.2f} {results['np.sort'][-1]:>14.2f}")

    sizes = np.array(SIZES)
    nlogn = sizes * np.log2(sizes)
    scale = results["heap_sort"][-1] / nlogn[-1]

    fig, ax = plt.subplots(figsize=(9, 6))
    for name, marker in (("heap_sort", "o"), ("sorted", "s"), ("np.sort", "^")):
        ax.plot(sizes, results[name], marker=marker, label=name)
    ax.plot(sizes, nlogn * scale, "k--", alpha=0.5, label="n log n (scaled)")
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Input size n")
    ax.set_ylabel("Median time (ms)")
    ax.set_title("Heap Sort vs Built-in Sorting")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_sort_timing.png", dpi=150)
    plt.close(fig)
    print(f"\n  Saved: viz/02_sort_timing.png")


def generate_pdf_report():
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))
    titles = {
        "01_heap_tree.png": "Example 2: Tree Views",
        "02_sort_timing.png": "Example 3: Sort Timing",
    }

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Max-Heap", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Array-Backed Binary Heap with Heap Sort", fontsize=22, ha="center")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


def main():
    print("Max-Heap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_operations()
    example_2_tree_views()
    example_3_sort_timing()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
