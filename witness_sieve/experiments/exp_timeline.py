"""
Experiment: Processing Time Projection

Extrapolates the measured sieve time to larger bounds, assuming each extra
bit doubles the work, and marks when the projection outlives the Sun and
the Universe.
"""

import pandas as pd
from pathlib import Path

from ..timeline import MAX_BITS, project_timelines


def run_timeline_experiment(bits: int, total_seconds: float, output_dir: Path,
                            max_bits: int = MAX_BITS) -> pd.DataFrame:
    """
    Print and save the timeline projection.

    Parameters
    ----------
    bits : int
        Bit size of the sieved bound.
    total_seconds : float
        Measured sieve time.
    output_dir : Path
        Directory for output files.
    max_bits : int
        Largest bit size to project.

    Returns
    -------
    pd.DataFrame
        Projection table from project_timelines.
    """
    print("Processing Estimates:")

    df = project_timelines(bits, total_seconds, max_bits)

    for row in df.itertuples(index=False):
        if row.milestone:
            print()
            print(f"  {row.milestone}")
            print()
        print(f"  {row.bits} bits in {row.duration}")

    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'timeline.csv', index=False)

    print(f"  Results saved to {output_dir}")

    return df
