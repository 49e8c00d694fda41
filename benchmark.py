#!/usr/bin/env python3
"""
Benchmark and self-check for the factorization engine.

Samples values from each configured range, times factorize() over them
and checks that every factorization multiplies back to its input.

Usage:
    python benchmark.py
    python benchmark.py --config config/custom.yaml
"""

import argparse
import time
from pathlib import Path

import numpy as np
import pandas as pd
import yaml

from intfactor.batch import divisor_count_array
from intfactor.factorization import factorize, product
from intfactor.primes import prime_table

DEFAULT_CONFIG = {
    'seed': 42,
    'sample_size': 1000,
    'ranges': [[2, 1000], [4000000000, 4294967295]],
    'hard_cases': [4294967291],
    'output_dir': 'data/results',
}


def load_config(path) -> dict:
    """Load a YAML config, filling missing keys from DEFAULT_CONFIG."""
    with open(path) as f:
        loaded = yaml.safe_load(f) or {}
    return {**DEFAULT_CONFIG, **loaded}


def time_factorize(values: np.ndarray) -> float:
    """
    Factor every value, verifying the round trip.

    Returns
    -------
    float
        Mean seconds per call.
    """
    start = time.perf_counter()
    for n in values:
        factors = factorize(int(n))
        if product(factors) != n:
            raise AssertionError(f"factorization of {n} does not multiply back: {factors}")
    elapsed = time.perf_counter() - start
    return elapsed / max(len(values), 1)


def run_benchmark(config: dict) -> pd.DataFrame:
    """Run every configured range and hard case, returning one row each."""
    rng = np.random.default_rng(config['seed'])
    rows = []

    for low, high in config['ranges']:
        values = rng.integers(low, high, size=config['sample_size'],
                              endpoint=True, dtype=np.int64)
        per_call = time_factorize(values)

        start = time.perf_counter()
        divisor_count_array(values)
        batch_time = time.perf_counter() - start

        rows.append({
            'case': f'[{low:,}, {high:,}]',
            'count': len(values),
            'us_per_factorize': per_call * 1e6,
            'us_per_batch_item': batch_time / len(values) * 1e6,
        })

    for n in config['hard_cases']:
        per_call = time_factorize(np.array([n], dtype=np.int64))
        rows.append({
            'case': ' * '.join(f'{p}^{e}' if e > 1 else str(p) for p, e in factorize(n)),
            'count': 1,
            'us_per_factorize': per_call * 1e6,
            'us_per_batch_item': np.nan,
        })

    return pd.DataFrame(rows)


def main():
    parser = argparse.ArgumentParser(description='Benchmark u32 factorization')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    args = parser.parse_args()

    config = load_config(args.config)

    print("=" * 60)
    print("intfactor benchmark")
    print("=" * 60)
    print(f"\nConfiguration:")
    print(f"  seed = {config['seed']}")
    print(f"  sample_size = {config['sample_size']:,}")
    print(f"  ranges = {config['ranges']}")
    print()

    print("Building prime table...", end=" ", flush=True)
    t0 = time.time()
    table = prime_table()
    print(f"{len(table):,} primes in {time.time() - t0:.3f}s")

    # First call compiles the numba kernels
    print("Compiling kernels...", end=" ", flush=True)
    t0 = time.time()
    factorize(2)
    divisor_count_array(np.array([2], dtype=np.uint32))
    print(f"{time.time() - t0:.1f}s")
    print()

    df = run_benchmark(config)

    output_dir = Path(config['output_dir'])
    output_dir.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_dir / 'benchmark.csv', index=False)

    print(df.to_string(index=False))
    print(f"\nResults saved to {output_dir / 'benchmark.csv'}")


if __name__ == '__main__':
    main()
