"""
Sieve with factor-witness recording.

Responsibility: build the factor-witness table. No factorization logic,
no console output.

Every prime p found while scanning the odd numbers marks each multiple
p*i below the bound with the witness pair (p, i). A cell left empty when
the scan reaches it is prime.

Prime 2 is never scanned and never used as a marking base. Even numbers
are covered instead by the halving fallback in factorization.factorize,
so a power of two has no witness at all. Treating 2 as a normal base
would change witness contents and the fallback would have to be
re-derived.
"""

import numpy as np
from typing import Callable, List, Optional, Tuple

from .errors import ConfigurationError, DomainError, ResourceExhaustion

Witness = Tuple[int, int]
ProgressCallback = Callable[[int, int], None]


def is_integer(value) -> bool:
    """True for Python and numpy integers, False for bool and everything else."""
    return not isinstance(value, bool) and isinstance(value, (int, np.integer))


class FactorWitnessTable:
    """
    Read-only mapping n -> witness pairs (prime_base, cofactor) for 0 <= n < max_range.

    Only build_sieve creates populated tables. An empty cell means n is
    prime, a power of two, or one of 0 and 1.
    """

    def __init__(self, max_range: int, cells: List[Optional[List[Witness]]]):
        self._max_range = max_range
        self._cells = cells

    @property
    def max_range(self) -> int:
        return self._max_range

    def __len__(self) -> int:
        return self._max_range

    def __repr__(self) -> str:
        return f"FactorWitnessTable(max_range={self._max_range:,})"

    def _cell(self, n: int) -> Optional[List[Witness]]:
        if not is_integer(n) or not 0 <= n < self._max_range:
            raise DomainError(
                f"{n!r} is outside the table domain [0, {self._max_range:,})"
            )
        return self._cells[n]

    def witnesses(self, n: int) -> Tuple[Witness, ...]:
        """Witness pairs recorded for n, in insertion order (empty if none)."""
        cell = self._cell(n)
        if cell is None:
            return ()
        return tuple(cell)

    def has_witness(self, n: int) -> bool:
        return self._cell(n) is not None

    def largest_witness(self, n: int) -> Optional[Witness]:
        """
        Witness with the numerically largest prime base, or None.

        This tie-break makes factorizations reproducible across builds,
        whatever the insertion order of the cell.
        """
        cell = self._cell(n)
        if cell is None:
            return None
        return max(cell, key=lambda pair: pair[0])

    def is_prime(self, n: int) -> bool:
        cell = self._cell(n)
        if n == 2:
            return True
        return n >= 3 and n % 2 == 1 and cell is None

    def witness_counts(self) -> np.ndarray:
        """
        Number of witness pairs per cell.

        Returns
        -------
        np.ndarray
            int64 array of length max_range.
        """
        return np.fromiter(
            (0 if cell is None else len(cell) for cell in self._cells),
            dtype=np.int64,
            count=self._max_range,
        )

    @property
    def total_witnesses(self) -> int:
        return int(self.witness_counts().sum())


def _allocate_cells(max_range: int) -> List[Optional[List[Witness]]]:
    return [None] * max_range


def _mark_multiples(cells: List[Optional[List[Witness]]], max_range: int, prime: int) -> None:
    """Append (prime, i) to every cell prime*i below max_range, i >= 2."""
    i = 2
    product = prime * i
    while product < max_range:
        cell = cells[product]
        if cell is None:
            cell = []
            cells[product] = cell
        cell.append((prime, i))
        i += 1
        product += prime


def build_sieve(max_range: int, progress: Optional[ProgressCallback] = None,
                progress_interval: int = 1000) -> FactorWitnessTable:
    """
    Sieve all odd numbers below max_range and record factor witnesses.

    Parameters
    ----------
    max_range : int
        Exclusive upper bound, at least 3.
    progress : callable, optional
        Called as progress(primes_found, max_range) whenever the running
        prime count (2 included) reaches a multiple of progress_interval.
    progress_interval : int
        Number of primes between progress calls.

    Returns
    -------
    FactorWitnessTable
        Fully populated table covering [0, max_range).

    Raises
    ------
    ConfigurationError
        If max_range is not an integer >= 3 or progress_interval < 1.
    ResourceExhaustion
        If the table cannot be allocated. No partial table is returned.
    """
    if not is_integer(max_range):
        raise ConfigurationError(f"max_range must be an integer, got {max_range!r}")
    max_range = int(max_range)
    if max_range < 3:
        raise ConfigurationError(f"max_range must be >= 3, got {max_range}")
    if progress_interval < 1:
        raise ConfigurationError(f"progress_interval must be >= 1, got {progress_interval}")

    try:
        cells = _allocate_cells(max_range)

        primes_found = 1  # prime 2, never scanned
        for index in range(3, max_range, 2):
            if cells[index] is None:  # index is prime
                primes_found += 1
                if progress is not None and primes_found % progress_interval == 0:
                    progress(primes_found, max_range)
                _mark_multiples(cells, max_range, index)
    except MemoryError as e:
        raise ResourceExhaustion(
            f"Could not allocate witness table for max_range={max_range:,}"
        ) from e

    return FactorWitnessTable(max_range, cells)


def build_sieve_bits(bits: int, progress: Optional[ProgressCallback] = None,
                     progress_interval: int = 1000) -> FactorWitnessTable:
    """Build the table for max_range = 2**bits (bits >= 2)."""
    if not is_integer(bits) or bits < 2:
        raise ConfigurationError(f"bits must be an integer >= 2, got {bits!r}")
    return build_sieve(2 ** int(bits), progress, progress_interval)
