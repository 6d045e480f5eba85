"""
Factorization utilities.

Responsibility: decompose numbers using a prebuilt witness table.
This file only reads the table; it never sieves.
"""

from typing import List, Set

from .errors import DomainError
from .sieve import FactorWitnessTable, is_integer


def _check_domain(table: FactorWitnessTable, n: int) -> int:
    if not is_integer(n) or not 2 <= n < table.max_range:
        raise DomainError(
            f"{n!r} is outside the table domain [2, {table.max_range:,})"
        )
    return int(n)


def factorize(table: FactorWitnessTable, n: int) -> List[int]:
    """
    Return the prime factors of n with multiplicity.

    Parameters
    ----------
    table : FactorWitnessTable
        Table from build_sieve.
    n : int
        Integer in [2, table.max_range).

    Returns
    -------
    list of int
        Prime factors in tie-break order (largest witness base first at each
        step, trailing halvings for the power-of-two part). Not sorted; the
        product always equals n.

    Raises
    ------
    DomainError
        If n is outside [2, table.max_range).

    Note
    ----
    Prime 2 is never a witness base, so an empty cell for an even n means
    n is a power of two and is resolved by halving. Each step strictly
    decreases n, so the loop runs at most log2(n) times.
    """
    n = _check_domain(table, n)

    factors = []
    while True:
        witness = table.largest_witness(n)
        if witness is not None:
            p, n = witness
            factors.append(p)
            continue

        if n == 2 or n % 2 == 1:  # no witness: n is prime
            factors.append(n)
            return factors

        factors.append(2)  # power-of-two fallback
        n //= 2


def distinct_prime_factors(table: FactorWitnessTable, n: int) -> Set[int]:
    """
    Return set of distinct prime factors of n.

    Parameters
    ----------
    table : FactorWitnessTable
        Table from build_sieve.
    n : int
        Integer in [2, table.max_range).

    Returns
    -------
    set
        Distinct prime factors.
    """
    return set(factorize(table, n))


def omega(table: FactorWitnessTable, n: int) -> int:
    """
    Count distinct prime factors of n (small omega).

    Parameters
    ----------
    table : FactorWitnessTable
        Table from build_sieve.
    n : int
        Integer in [2, table.max_range).

    Returns
    -------
    int
        Number of distinct prime factors.
    """
    return len(distinct_prime_factors(table, n))


def Omega(table: FactorWitnessTable, n: int) -> int:
    """Count prime factors of n with multiplicity (big Omega)."""
    return len(factorize(table, n))
