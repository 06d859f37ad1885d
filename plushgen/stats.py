"""
PlushGen Genome Statistics

Summaries of generated genomes, used to check that a batch of random
genomes has the intended structure.
"""

from typing import Any, Dict, Optional, Sequence

import numpy as np

from .config import CLOSE, SILENT
from .genome import Genome


def close_count_histogram(genomes: Sequence[Genome], max_closes: Optional[int] = None) -> np.ndarray:
    """
    Count how many entries carry each close count.

    Entries without a close marker count as zero closes.

    Args:
        genomes: Genomes to summarize
        max_closes: Minimum highest bucket; the histogram grows to fit larger counts

    Returns:
        Integer array where index i holds the number of entries with i closes
    """
    closes = np.array([entry.get(CLOSE, 0) for genome in genomes for entry in genome], dtype=int)
    minlength = 0 if max_closes is None else max_closes + 1
    return np.bincount(closes, minlength=minlength)


def close_count_frequencies(genomes: Sequence[Genome], max_closes: Optional[int] = None) -> np.ndarray:
    """Return close_count_histogram normalized to frequencies."""
    histogram = close_count_histogram(genomes, max_closes)
    total = histogram.sum()
    if total == 0:
        return histogram.astype(float)
    return histogram / total


def summarize_genomes(genomes: Sequence[Genome]) -> Dict[str, Any]:
    """
    Get summary statistics for a batch of genomes.

    Returns:
        Dict with genome count, length statistics, close-count frequencies
        and the fraction of silent entries
    """
    if not genomes:
        return {}

    lengths = np.array([len(genome) for genome in genomes])
    entries = [entry for genome in genomes for entry in genome]
    silent = np.array([bool(entry.get(SILENT, False)) for entry in entries])

    return {
        'num_genomes': len(genomes),
        'num_entries': len(entries),
        'mean_length': float(lengths.mean()),
        'length_std': float(lengths.std()),
        'length_range': (int(lengths.min()), int(lengths.max())),
        'close_frequencies': close_count_frequencies(genomes).tolist(),
        'silent_fraction': float(silent.mean()) if entries else 0.0,
    }
