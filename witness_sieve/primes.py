"""
Prime listing utilities.

Responsibility: prime flags and lists, read from a witness table or from
an independent reference sieve. No factorization.
"""

import numpy as np

from .sieve import FactorWitnessTable


def prime_flags(table: FactorWitnessTable) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    A number is prime iff it is 2, or odd, >= 3 and without a witness.

    Parameters
    ----------
    table : FactorWitnessTable
        Table from build_sieve.

    Returns
    -------
    np.ndarray
        Boolean array of length table.max_range.
    """
    flags = table.witness_counts() == 0
    flags[0] = flags[1] = False
    flags[4::2] = False  # powers of two carry no witness
    return flags


def primes_from_table(table: FactorWitnessTable) -> np.ndarray:
    """Return array of all primes below table.max_range."""
    return np.nonzero(prime_flags(table))[0]


def count_primes(table: FactorWitnessTable) -> int:
    return int(np.count_nonzero(prime_flags(table)))


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Plain Sieve of Eratosthenes, independent of the witness table. Used to
    cross-check it.

    Parameters
    ----------
    N : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length N+1.
    """
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, int(N**0.5) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def primes_upto(N: int) -> np.ndarray:
    """Return array of all primes <= N (reference sieve)."""
    return np.nonzero(prime_flags_upto(N))[0]
