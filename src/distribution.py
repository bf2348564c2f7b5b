"""
Load distribution analysis for chained hash tables.

A table's lookup cost is proportional to the length of the chain a key lands
in, so the quality of a hash function shows up as the spread of chain lengths.
With n entries in m buckets and a well-mixing hash, chain lengths follow
roughly Poisson(n / m): most buckets hold about the load factor, few are
empty and none are long. A weak hash piles entries into a handful of buckets.

This module turns a table's chain lengths into NumPy arrays and summary
statistics, including a Pearson chi-square statistic against a perfectly
uniform spread (about m - 1 for a good hash, much larger for a bad one).
"""

from typing import Dict, Union

import numpy as np


def chain_lengths(table) -> np.ndarray:
    """Chain length of every bucket, in bucket-index order."""
    return np.asarray(table.bucket_lengths(), dtype=np.int64)


def load_factor(table) -> float:
    return table.load_factor()


def length_histogram(table) -> np.ndarray:
    """
    Returns:
        hist where hist[k] is the number of buckets holding exactly k entries
    """
    return np.bincount(chain_lengths(table))


def uniformity_chi2(table) -> float:
    """Pearson chi-square of chain lengths against an even spread."""
    lengths = chain_lengths(table).astype(np.float64)
    expected = lengths.sum() / len(lengths)
    if expected == 0.0:
        return 0.0
    return float(np.sum((lengths - expected) ** 2) / expected)


def summarize(table) -> Dict[str, Union[int, float]]:
    lengths = chain_lengths(table)
    buckets = len(lengths)
    entries = int(lengths.sum())
    empty = int(np.count_nonzero(lengths == 0))
    return {
        "buckets": buckets,
        "entries": entries,
        "load_factor": entries / buckets,
        "max_chain": int(lengths.max()),
        "mean_chain": float(lengths.mean()),
        "std_chain": float(lengths.std()),
        "empty_buckets": empty,
        "empty_fraction": empty / buckets,
        "chi2": uniformity_chi2(table),
    }
