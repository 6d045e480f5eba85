"""
Visualization utilities.

Responsibility: plots only. No sieving, no factorization.
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from pathlib import Path
from typing import Optional


def plot_prime_counting(flags: np.ndarray, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot the prime counting function pi(x) against x / ln x.

    Parameters
    ----------
    flags : np.ndarray
        Boolean prime flags, e.g. from primes.prime_flags.
    output_path : Path, optional
        If provided, save figure to this path.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    x = np.arange(len(flags))
    pi_x = np.cumsum(flags)

    ax.plot(x, pi_x, '-', label='pi(x) from witness table')
    mask = x >= 2
    ax.plot(x[mask], x[mask] / np.log(x[mask]), '--', label='x / ln x')

    ax.set_xlabel('x')
    ax.set_ylabel('Primes <= x')
    ax.set_title(f'Prime Counting up to {len(flags) - 1:,}')
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_witness_histogram(df: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot how many witness pairs each composite collected.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame from metrics.witness_count_distribution with columns
        witnesses, count.
    output_path : Path, optional
        If provided, save figure.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(8, 6))

    ax.bar(df['witnesses'], df['count'], alpha=0.8, edgecolor='black')

    ax.set_xlabel('Witness pairs per number')
    ax.set_ylabel('Numbers')
    ax.set_title('Witness Count Distribution')
    ax.set_xticks(df['witnesses'])
    ax.grid(True, alpha=0.3, axis='y')

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig


def plot_timeline(df: pd.DataFrame, output_path: Optional[Path] = None) -> plt.Figure:
    """
    Plot projected sieve time (log scale) against bit size.

    Parameters
    ----------
    df : pd.DataFrame
        DataFrame from timeline.project_timelines.
    output_path : Path, optional
        If provided, save figure.

    Returns
    -------
    matplotlib.Figure
    """
    fig, ax = plt.subplots(figsize=(10, 6))

    ax.semilogy(df['bits'], df['seconds'], 'o-', markersize=3)

    for row in df[df['milestone'] != ''].itertuples(index=False):
        ax.axvline(row.bits, color='red', linestyle='--', alpha=0.6)

    ax.set_xlabel('Bits')
    ax.set_ylabel('Projected seconds')
    ax.set_title('Projected Sieve Time')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches='tight')

    return fig
