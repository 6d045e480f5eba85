"""
Definitions of all reported sieve statistics.

Responsibility: report-facing quantities computed from a finished table.
"""

import numpy as np
import pandas as pd
from typing import Any, Dict, Optional

from .primes import count_primes
from .sieve import FactorWitnessTable


def bound_bits(max_range: int) -> Optional[int]:
    """log2(max_range) when max_range is a power of two, else None."""
    if max_range > 0 and max_range & (max_range - 1) == 0:
        return max_range.bit_length() - 1
    return None


def sieve_summary(table: FactorWitnessTable, elapsed: Optional[float] = None) -> Dict[str, Any]:
    """
    Summarize a finished sieve.

    Parameters
    ----------
    table : FactorWitnessTable
        Table from build_sieve.
    elapsed : float, optional
        Wall-clock seconds spent building the table.

    Returns
    -------
    dict
        max_range, bits, primes_found, composites_witnessed,
        total_witnesses, max_witnesses, mean_witnesses, elapsed_seconds.
    """
    counts = table.witness_counts()
    witnessed = counts[counts > 0]

    return {
        'max_range': table.max_range,
        'bits': bound_bits(table.max_range),
        'primes_found': count_primes(table),
        'composites_witnessed': int(len(witnessed)),
        'total_witnesses': int(counts.sum()),
        'max_witnesses': int(witnessed.max()) if len(witnessed) else 0,
        'mean_witnesses': float(np.mean(witnessed)) if len(witnessed) else np.nan,
        'elapsed_seconds': elapsed,
    }


def witness_count_distribution(table: FactorWitnessTable) -> pd.DataFrame:
    """
    Histogram of witness pairs per witnessed cell.

    Returns
    -------
    pd.DataFrame
        Columns: witnesses, count. One row per observed witness count >= 1.
    """
    counts = table.witness_counts()
    values, freq = np.unique(counts[counts > 0], return_counts=True)
    return pd.DataFrame({'witnesses': values, 'count': freq})
