#!/usr/bin/env python3
"""
Full sieve run.

Builds the factor-witness sieve, verifies random factorizations, projects
running times for larger bounds and writes every table and figure.

Usage:
    python run_all.py
    python run_all.py --config config/custom.yaml
    python run_all.py --bits 20 --samples 50
"""

import argparse
import time
import pandas as pd
from pathlib import Path

from witness_sieve.config import (
    DEFAULT_CONFIG_PATH, load_config, resolve_bits, resolve_max_range, validate_config
)
from witness_sieve.sieve import build_sieve
from witness_sieve.primes import prime_flags
from witness_sieve.metrics import sieve_summary, witness_count_distribution
from witness_sieve.experiments.exp_self_test import run_self_test_experiment
from witness_sieve.experiments.exp_timeline import run_timeline_experiment
from witness_sieve.plotting import plot_prime_counting, plot_witness_histogram, plot_timeline


def print_progress(primes_found: int, max_range: int) -> None:
    print(f"  Total Found: {primes_found:,} / {max_range:,}")


def main():
    parser = argparse.ArgumentParser(description='Sieve primes with factor witnesses')
    parser.add_argument('--config', type=str, default=str(DEFAULT_CONFIG_PATH),
                        help='Path to config file')
    parser.add_argument('--bits', type=int, default=None,
                        help='Sieve up to 2**bits (overrides config)')
    parser.add_argument('--max-range', type=int, default=None,
                        help='Exclusive sieve bound (overrides --bits)')
    parser.add_argument('--samples', type=int, default=None,
                        help='Number of random self-test factorizations')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for the self-test')
    parser.add_argument('--no-plots', action='store_true',
                        help='Skip figure generation')
    args = parser.parse_args()

    # Load config
    config = load_config(args.config)
    if args.bits is not None:
        config['bits'] = args.bits
    if args.max_range is not None:
        config['max_range'] = args.max_range
    if args.samples is not None:
        config['samples'] = args.samples
    if args.seed is not None:
        config['seed'] = args.seed
    if args.no_plots:
        config['plots'] = False
    validate_config(config)

    max_range = resolve_max_range(config)
    bits = resolve_bits(config)

    print("=" * 60)
    print("Witness Sieve - Prime Factorization Table")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  max_range = {max_range:,}")
    print(f"  samples = {config['samples']}")
    print(f"  seed = {config['seed']}")
    print(f"  progress_interval = {config['progress_interval']:,}")
    print()

    output_dir = Path(config['output_dir'])
    output_dir.mkdir(parents=True, exist_ok=True)

    total_start = time.time()

    # 1. Sieve
    print("-" * 60)
    print(f"1. Calculating Primes to {max_range:,}")
    print("-" * 60)
    start = time.time()
    table = build_sieve(max_range, progress=print_progress,
                        progress_interval=config['progress_interval'])
    elapsed = time.time() - start

    summary = sieve_summary(table, elapsed)
    print(f"   Found Primes: {summary['primes_found']:,} / {max_range:,} ({bits} bits) in {elapsed:.3f}s")
    print(f"   Witness pairs: {summary['total_witnesses']:,} over "
          f"{summary['composites_witnessed']:,} composites (max {summary['max_witnesses']} per number)")
    pd.DataFrame([summary]).to_csv(output_dir / 'sieve_summary.csv', index=False)
    print()

    # 2. Self-test
    print("-" * 60)
    print("2. Factorization Self-Test")
    print("-" * 60)
    start = time.time()
    df_self_test = run_self_test_experiment(table, config['samples'], output_dir, config['seed'])
    print(f"   Completed in {time.time() - start:.1f}s")
    print()

    # 3. Timeline projection
    print("-" * 60)
    print("3. Timeline Projection")
    print("-" * 60)
    df_timeline = run_timeline_experiment(bits, elapsed, output_dir, config['max_bits'])
    print()

    # 4. Figures
    figures_dir = output_dir / 'figures'
    if config['plots']:
        print("-" * 60)
        print("4. Generating Figures")
        print("-" * 60)

        figures_dir.mkdir(exist_ok=True)

        print("  - Prime counting...")
        plot_prime_counting(prime_flags(table), figures_dir / 'prime_counting.png')

        print("  - Witness histogram...")
        plot_witness_histogram(witness_count_distribution(table),
                               figures_dir / 'witness_histogram.png')

        print("  - Timeline...")
        plot_timeline(df_timeline, figures_dir / 'timeline.png')

        print()

    # Summary
    total_time = time.time() - total_start
    print("=" * 60)
    print("COMPLETE")
    print("=" * 60)
    print(f"\nTotal runtime: {total_time:.1f}s")
    print(f"\nOutputs saved to: {output_dir.absolute()}")
    print(f"\nGenerated files:")

    for f in sorted(output_dir.glob('*.csv')):
        print(f"  - {f.name}")

    if config['plots']:
        print(f"\nFigures:")
        for f in sorted(figures_dir.glob('*.png')):
            print(f"  - figures/{f.name}")

    failures = int((~df_self_test['ok']).sum())
    print(f"\nSelf-test failures: {failures}")


if __name__ == '__main__':
    main()
