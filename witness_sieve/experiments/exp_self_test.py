"""
Experiment: Factorization Self-Test

Factorizes randomly sampled numbers from a finished witness table and
checks that each product reconstructs the number from primes only.
Outputs a table and CSV.
"""

import math
import numpy as np
import pandas as pd
from pathlib import Path
from typing import Any, Dict

from ..config import DEFAULT_CONFIG_PATH, load_config, resolve_max_range
from ..factorization import factorize
from ..sieve import FactorWitnessTable, build_sieve


def sample_numbers(max_range: int, samples: int, seed: int = 123) -> np.ndarray:
    """
    Draw numbers uniformly from [2, max_range).

    Parameters
    ----------
    max_range : int
        Exclusive upper bound of the table.
    samples : int
        How many numbers to draw (with replacement).
    seed : int
        Random seed.

    Returns
    -------
    np.ndarray
        int64 array of length samples.
    """
    rng = np.random.default_rng(seed)
    return rng.integers(2, max_range, size=samples, dtype=np.int64)


def check_factorization(table: FactorWitnessTable, n: int) -> Dict[str, Any]:
    """Factorize n and report whether the result is a valid prime factorization."""
    factors = factorize(table, n)
    product = math.prod(factors)
    all_prime = all(table.is_prime(p) for p in factors)

    return {
        'number': int(n),
        'product': product,
        'factors': ', '.join(str(p) for p in factors),
        'all_prime': all_prime,
        'ok': product == n and all_prime,
    }


def exhaustive_check(table: FactorWitnessTable) -> int:
    """Return the number of n in [2, max_range) whose factorization fails."""
    failures = 0
    for n in range(2, table.max_range):
        if not check_factorization(table, n)['ok']:
            failures += 1
    return failures


def run_self_test_experiment(table: FactorWitnessTable, samples: int,
                             output_dir: Path, seed: int = 123) -> pd.DataFrame:
    """
    Run the random factorization self-test.

    Parameters
    ----------
    table : FactorWitnessTable
        Table from build_sieve.
    samples : int
        Number of random factorizations.
    output_dir : Path
        Directory for output files.
    seed : int
        Random seed.

    Returns
    -------
    pd.DataFrame
        One row per sample: number, product, factors, all_prime, ok.
    """
    print("Testing Prime Factorization:")

    rows = []
    for n in sample_numbers(table.max_range, samples, seed):
        row = check_factorization(table, int(n))
        print(f"  {row['number']:,} | Product: {row['product']:,} | Factors: [{row['factors']}]")
        rows.append(row)

    df = pd.DataFrame(rows)

    failures = int((~df['ok']).sum())
    if failures:
        print(f"  ✗ {failures:,} of {samples:,} factorizations failed")
    else:
        print(f"  ✓ All {samples:,} factorizations verified")

    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'self_test.csv', index=False)

    print(f"  Results saved to {output_dir}")

    return df


def main(config_path=DEFAULT_CONFIG_PATH) -> pd.DataFrame:
    """Run the self-test standalone from a YAML config."""
    config = load_config(config_path)
    table = build_sieve(resolve_max_range(config))
    df = run_self_test_experiment(table, config['samples'], Path(config['output_dir']), config['seed'])
    print("\nSummary:")
    print(df.to_string(index=False))
    return df


if __name__ == '__main__':
    main()
