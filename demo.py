"""
Chained Hash Table Demo -- Basic operations, hash quality, and rehash effects.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import logging
import random
import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from hash_table import HashTable, default_hash
from distribution import chain_lengths, length_histogram, summarize

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s: %(message)s")

SEED = 42
random.seed(SEED)
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


def _random_words(n, length=8):
    alphabet = "abcdefghijklmnopqrstuvwxyz"
    return ["".join(random.choice(alphabet) for _ in range(length)) for _ in range(n)]


def sum_of_bytes_hash(key, n):
    """A weak hash: anagrams and near-anagrams all collide."""
    return sum(key.encode("utf-8")) % n


# ---------------------------------------------------------------------------
# Example 1: Basic Operations
# ---------------------------------------------------------------------------
def example_1_basic_operations():
    """Walk through insert, replace, remove and the bucket layout."""
    print("=" * 60)
    print("Example 1: Basic Operations")
    print("=" * 60)

    table = HashTable(4)
    for key, value in [("a", 1), ("b", 2), ("a", 3)]:
        old = table.insert(key, value)
        print(f"  insert({key!r}, {value}) -> {old!r}   bucket={default_hash(key, 4)}")

    print(f"\n  size()   = {table.size()}")
    print(f"  get('a') = {table.get('a')}")
    print(f"  get('b') = {table.get('b')}")
    print(f"  keys()   = {table.keys()}")
    print(f"  values() = {table.values()}")

    assert table.size() == 2
    assert table.get("a") == 3 and table.get("b") == 2

    removed = table.remove("b")
    print(f"\n  remove('b') -> {removed}, get('b') -> {table.get('b')!r}")
    print(f"  is_empty() = {table.is_empty()}")
    table.destroy()


# ---------------------------------------------------------------------------
# Example 2: Hash Function Quality
# ---------------------------------------------------------------------------
def example_2_hash_quality():
    """Compare chain length distribution of the default hash and a weak one."""
    print("\n" + "=" * 60)
    print("Example 2: Hash Function Quality")
    print("=" * 60)

    words = _random_words(2000)
    tables = {
        "Polynomial (base 127)": HashTable(101),
        "Sum of bytes": HashTable(101, sum_of_bytes_hash),
    }
    for table in tables.values():
        for w in words:
            table.insert(w, len(w))

    fig, axes = plt.subplots(2, 2, figsize=(14, 9))
    for col, (name, table) in enumerate(tables.items()):
        stats = summarize(table)
        print(f"\n  {name}:")
        print(f"    entries={stats['entries']}, load factor={stats['load_factor']:.2f}")
        print(f"    max chain={stats['max_chain']}, std={stats['std_chain']:.2f}, "
              f"empty buckets={stats['empty_buckets']}, chi2={stats['chi2']:.1f}")

        color = COLORS["green"] if col == 0 else COLORS["red"]
        lengths = chain_lengths(table)
        axes[0, col].bar(np.arange(len(lengths)), lengths, color=color, edgecolor="white")
        axes[0, col].axhline(stats["load_factor"], color=COLORS["dark"], linestyle="--",
                             linewidth=1, label="load factor")
        axes[0, col].set_xlabel("Bucket index")
        axes[0, col].set_ylabel("Chain length")
        axes[0, col].set_title(f"{name}\nmax chain = {stats['max_chain']}",
                               fontsize=10, fontweight="bold")
        axes[0, col].legend(fontsize=9)
        axes[0, col].grid(True, alpha=0.3, axis="y")

        hist = length_histogram(table)
        axes[1, col].bar(np.arange(len(hist)), hist, color=color, edgecolor="white")
        axes[1, col].set_xlabel("Chain length")
        axes[1, col].set_ylabel("Number of buckets")
        axes[1, col].set_title(f"Chain length histogram\nchi2 = {stats['chi2']:.1f}",
                               fontsize=10, fontweight="bold")
        axes[1, col].grid(True, alpha=0.3, axis="y")

    plt.tight_layout()
    plt.savefig(VIZ_DIR / "01_hash_quality.png", dpi=120)
    plt.close(fig)
    print(f"\n  Saved: {VIZ_DIR / '01_hash_quality.png'}")


# ---------------------------------------------------------------------------
# Example 3: Rehash Effect
# ---------------------------------------------------------------------------
def example_3_rehash():
    """Resize a crowded table and track load factor and longest chain."""
    print("\n" + "=" * 60)
    print("Example 3: Rehash Effect")
    print("=" * 60)

    words = _random_words(3000)
    table = HashTable(7)
    for i, w in enumerate(words):
        table.insert(w, i)

    bucket_counts = [7, 31, 127, 509, 2039, 8191]
    load_factors, max_chains = [], []
    for count in bucket_counts:
        if count != table.bucket_count:
            table = table.rehash(count)
        stats = summarize(table)
        load_factors.append(stats["load_factor"])
        max_chains.append(stats["max_chain"])
        print(f"  buckets={count:5d}  load factor={stats['load_factor']:8.2f}  "
              f"max chain={stats['max_chain']:4d}")

    assert table.size() == len(set(words))
    for w in words:
        assert table.contains(w)

    fig, ax = plt.subplots(figsize=(9, 5.5))
    ax.loglog(bucket_counts, load_factors, "o-", color=COLORS["blue"], label="Load factor")
    ax.loglog(bucket_counts, max_chains, "s-", color=COLORS["orange"], label="Max chain length")
    ax.set_xlabel("Bucket count")
    ax.set_ylabel("Entries")
    ax.set_title("Rehash: load factor and longest chain vs bucket count",
                 fontsize=11, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3, which="both")
    plt.tight_layout()
    plt.savefig(VIZ_DIR / "02_rehash.png", dpi=120)
    plt.close(fig)
    print(f"\n  Saved: {VIZ_DIR / '02_rehash.png'}")
    table.destroy()


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Bundle the visualizations into a single PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))
    titles = {
        "01_hash_quality.png": "Example 2: Hash Function Quality",
        "02_rehash.png": "Example 3: Rehash Effect",
    }

    with PdfPages(report_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Chained Hash Table", ha="center", fontsize=26, fontweight="bold")
        fig.text(0.5, 0.5, "Separate chaining, pluggable hashing, caller-driven rehash",
                 ha="center", fontsize=13)
        fig.text(0.5, 0.4, f"Seed: {SEED}", ha="center", fontsize=11, color="gray")
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


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Chained Hash Table Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_basic_operations()
    example_2_hash_quality()
    example_3_rehash()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
