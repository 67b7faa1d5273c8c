"""
Statistics Service - descriptive statistics over step duration samples.
"""

import statistics
from typing import List, Optional, Sequence

from pydantic import BaseModel


class DurationStatistics(BaseModel):
    """Summary of one bucket's duration samples, in seconds."""

    count: int
    mean: float
    median: float
    min: float
    max: float
    stddev: float


def median(sorted_values: Sequence[float]) -> float:
    """Median of an already sorted, non-empty sequence."""
    n = len(sorted_values)
    mid = n // 2
    if n % 2 == 0:
        return (sorted_values[mid - 1] + sorted_values[mid]) / 2
    return sorted_values[mid]


def compute_statistics(samples: Sequence[float]) -> Optional[DurationStatistics]:
    """
    Calculate mean, median, min, max and sample standard deviation.

    Returns None when there are no samples. The input is never mutated.
    """
    if not samples:
        return None

    sorted_values: List[float] = sorted(float(v) for v in samples)
    n = len(sorted_values)

    return DurationStatistics(
        count=n,
        mean=statistics.mean(sorted_values),
        median=median(sorted_values),
        min=sorted_values[0],
        max=sorted_values[-1],
        # Bessel-corrected; a single sample has no spread
        stddev=statistics.stdev(sorted_values) if n > 1 else 0.0,
    )
