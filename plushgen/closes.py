"""
PlushGen Close Counts

Draws how many block closes are attached to one instruction entry, using a
discrete probability table over close counts.
"""

import math
from typing import List, Optional, Sequence

import numpy as np

from .errors import InvalidArgument
from .random_source import RandomSource, resolve_random_source

# Roughly Binomial(n=4, p=1/16):
#   p(0) = 0.772, p(1) = 0.206, p(2) = 0.021, p(3) = 0.001
DEFAULT_CLOSE_PARENS_PROBABILITIES = (0.772, 0.206, 0.021, 0.001)

# Tolerance for tables whose floating point sum lands just above 1.0
_SUM_TOLERANCE = 1e-9


def validate_close_probabilities(probabilities: Sequence[float]) -> List[float]:
    """
    Check a close-count probability table and return it as a list of floats.

    Tables summing to less than 1 are valid; the residual mass goes to the
    count one past the last entry.

    Raises:
        InvalidArgument: If an entry is negative or not finite, or if the
            running sum exceeds 1
    """
    values = []
    total = 0.0
    for idx, p in enumerate(probabilities):
        try:
            p = float(p)
        except (TypeError, ValueError):
            raise InvalidArgument(f"Close probability at index {idx} is not a number: {p!r}")
        if not math.isfinite(p) or p < 0:
            raise InvalidArgument(f"Close probability at index {idx} must be a finite non-negative number, got {p}")
        total += p
        if total > 1.0 + _SUM_TOLERANCE:
            raise InvalidArgument(f"Close probabilities sum to more than 1 (running sum {total:.6f} at index {idx})")
        values.append(p)
    return values


class CloseCountSampler:
    """
    Samples close counts from a probability table.

    The table is turned into running cumulative bounds with a final bound of
    1.0 appended. A uniform draw u yields the index of the first bound >= u.
    """

    def __init__(self, probabilities: Optional[Sequence[float]] = None):
        if probabilities is None:
            probabilities = DEFAULT_CLOSE_PARENS_PROBABILITIES
        self.probabilities = tuple(validate_close_probabilities(probabilities))
        self.bounds = np.append(np.cumsum(self.probabilities, dtype=float), 1.0)

    def __repr__(self):
        return f"CloseCountSampler({list(self.probabilities)})"

    @property
    def max_closes(self) -> int:
        """Largest count this sampler can return."""
        return len(self.probabilities)

    def sample(self, rng: Optional[RandomSource] = None) -> int:
        """Draw one close count."""
        u = resolve_random_source(rng).uniform_float()
        return int(np.searchsorted(self.bounds, u, side='left'))

    def bucket_probabilities(self) -> np.ndarray:
        """
        Exact probability of each close count, including the residual bucket.

        Returns:
            Array of length max_closes + 1 summing to 1
        """
        return np.diff(self.bounds, prepend=0.0).clip(min=0.0)


def random_closes(probabilities: Optional[Sequence[float]] = None,
                  rng: Optional[RandomSource] = None) -> int:
    """
    Return a random number of closes drawn from probabilities.

    Args:
        probabilities: Close-count table, defaults to DEFAULT_CLOSE_PARENS_PROBABILITIES
        rng: Random source, defaults to the context source

    Returns:
        Number of closes, between 0 and len(probabilities)
    """
    return CloseCountSampler(probabilities).sample(rng)
