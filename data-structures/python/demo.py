"""
Binary Heap Demo — Reference drains, heapsort, comparison scaling, tie handling.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import os
import sys

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from binary_heap import Heap

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

SCALING_SIZES = [2 ** k for k in range(6, 15)]


def counting(compare):
    """Wrap a comparator so every call is tallied in .calls."""
    def wrapped(a, b):
        wrapped.calls += 1
        return compare(a, b)
    wrapped.calls = 0
    return wrapped


def example_1_reference_drains():
    """Min and max heaps over 4, 2, 9, 11."""
    print("=" * 60)
    print("Example 1: Min/Max Drains of 4, 2, 9, 11")
    print("=" * 60)

    values = [4, 2, 9, 11]
    layouts = {}
    for name, heap in (("min", Heap.new_min()), ("max", Heap.new_max())):
        for v in values:
            heap.add(v)
        layouts[name] = list(heap._data)
        print(f"{name}-heap array: {layouts[name]}")
        print(f"{name}-heap drain: {list(heap)}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    for ax, (name, layout), color in zip(axes, layouts.items(), ["steelblue", "#e74c3c"]):
        ax.bar(range(len(layout)), layout, color=color, alpha=0.8)
        for i, v in enumerate(layout):
            ax.text(i, v + 0.2, str(v), ha="center")
        ax.set_xticks(range(len(layout)))
        ax.set_xlabel("Array index")
        ax.set_ylabel("Value")
        ax.set_title(f"{name.capitalize()}-Heap Layout After Inserts")
        ax.grid(True, alpha=0.3, axis="y")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_reference_drains.png", dpi=150)
    plt.close(fig)

    return fig, layouts


def example_2_heapsort():
    """Heapsort-by-extraction of random integers."""
    print("\n" + "=" * 60)
    print("Example 2: Heapsort by Extraction")
    print("=" * 60)

    np.random.seed(SEED)
    values = np.random.randint(0, 1000, size=200)

    heap = Heap.new_min()
    for v in values.tolist():
        heap.add(v)
    drained = np.array(list(heap))

    matches = np.array_equal(drained, np.sort(values))
    print(f"Input size: {len(values)}")
    print(f"Drained order matches np.sort: {matches}")
    print(f"Heap empty after drain: {heap.is_empty()}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    axes[0].scatter(range(len(values)), values, s=10, color="steelblue", alpha=0.7)
    axes[0].set_title("Insertion Order")
    axes[1].scatter(range(len(drained)), drained, s=10, color="#27ae60", alpha=0.7)
    axes[1].set_title("Drain Order (Min-Heap)")
    for ax in axes:
        ax.set_xlabel("Position")
        ax.set_ylabel("Value")
        ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_heapsort.png", dpi=150)
    plt.close(fig)

    return fig, matches


def example_3_comparison_scaling():
    """Comparator calls per operation against log2(n)."""
    print("\n" + "=" * 60)
    print("Example 3: Comparison Scaling")
    print("=" * 60)

    add_per_op = []
    pop_per_op = []
    for n in SCALING_SIZES:
        np.random.seed(SEED)
        compare = counting(lambda a, b: a < b)
        heap = Heap(compare)
        for v in np.random.randint(0, 10 * n, size=n).tolist():
            heap.add(v)
        add_per_op.append(compare.calls / n)

        compare.calls = 0
        while heap:
            heap.pop_top()
        pop_per_op.append(compare.calls / n)

        print(f"n={n:<6} add: {add_per_op[-1]:6.2f} cmp/op   pop_top: {pop_per_op[-1]:6.2f} cmp/op   "
              f"log2(n): {np.log2(n):5.1f}")

    sizes = np.array(SCALING_SIZES)
    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(sizes, add_per_op, "o-", label="add", color="steelblue", linewidth=2)
    ax.plot(sizes, pop_per_op, "s-", label="pop_top", color="#e74c3c", linewidth=2)
    ax.plot(sizes, 2 * np.log2(sizes), "k--", label="2 log2(n)", alpha=0.6)
    ax.set_xscale("log", base=2)
    ax.set_xlabel("Heap size n")
    ax.set_ylabel("Comparator calls per operation")
    ax.set_title("Comparisons per Operation vs Heap Size")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_comparison_scaling.png", dpi=150)
    plt.close(fig)

    return fig, (add_per_op, pop_per_op)


def example_4_tie_handling():
    """Drain records that share priorities."""
    print("\n" + "=" * 60)
    print("Example 4: Tie Handling With a Key Comparator")
    print("=" * 60)

    records = [(2, "a"), (1, "b"), (2, "c"), (1, "d"), (3, "e"), (2, "f"), (1, "g")]
    heap = Heap(lambda a, b: a[0] < b[0])
    for record in records:
        heap.add(record)
    drained = list(heap)

    print(f"Inserted: {records}")
    print(f"Drained:  {drained}")

    fig, ax = plt.subplots(figsize=(10, 5))
    priorities = [p for p, _ in drained]
    ax.step(range(len(drained)), priorities, where="mid", color="steelblue", linewidth=2)
    for i, (p, label) in enumerate(drained):
        ax.annotate(label, (i, p), textcoords="offset points", xytext=(0, 8), ha="center")
    ax.set_xlabel("Drain position")
    ax.set_ylabel("Priority")
    ax.set_title("Drain Order of Equal-Priority Records")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_tie_handling.png", dpi=150)
    plt.close(fig)

    return fig, drained


def generate_pdf_report(figures_data):
    """Generate comprehensive PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Binary Heap", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Comparator-Driven Min/Max Priority Queue", fontsize=24, ha="center")
        fig.text(0.5, 0.35, "Demonstration & Analysis Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")

        summary_text = """
This report demonstrates a binary heap whose ordering is supplied
as a strict "is better than" comparator.

• Operations:
  - add: append, then sift up while the parent is not better
  - pop_top: swap root with last, pop, then sift down
  - iteration: each step is one pop_top (destructive drain)

• Construction:
  - Heap(comparator) for any strict weak ordering
  - Heap.new_min() / Heap.new_max() for orderable values

Key Findings:
  1. Draining a min-heap reproduces np.sort exactly
  2. Comparator calls per operation grow with log2(n)
  3. Equal-priority records drain in a deterministic order
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, image_name in figures_data:
            fig_copy = plt.figure(figsize=(11, 8.5))
            fig_copy.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            img = plt.imread(VIZ_DIR / image_name)
            ax = fig_copy.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig_copy)
            plt.close(fig_copy)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 21 + "BINARY HEAP DEMO" + " " * 21 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_reference_drains()
    example_2_heapsort()
    example_3_comparison_scaling()
    example_4_tie_handling()

    figures = [
        ("Example 1: Reference Drains", "01_reference_drains.png"),
        ("Example 2: Heapsort", "02_heapsort.png"),
        ("Example 3: Comparison Scaling", "03_comparison_scaling.png"),
        ("Example 4: Tie Handling", "04_tie_handling.png"),
    ]
    generate_pdf_report(figures)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
