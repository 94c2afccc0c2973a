"""
Distribution Comparison Harness.

Responsibility boundaries:
- Draws the same number of values from a NonRepeatingPicker and from a plain uniform source.
- Collects and prints spread metrics side by side.
"""

import sys
import os
from typing import Any, Dict, Sequence

import numpy as np

# Ensure we can import core modules
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.picker import NonRepeatingPicker
from utils.rng import NumpyRNG


def summarize_sequence(values: Sequence[int], size: int) -> Dict[str, Any]:
    """
    Spread metrics for a sequence of draws from [0, size).

    - counts: occurrences per value
    - repeats: consecutive equal values
    - adjacent: consecutive values exactly one apart
    - mean_abs_step: mean |v[i+1] - v[i]|
    - count_std: standard deviation of `counts` (lower is more even)
    """
    arr = np.asarray(values, dtype=np.int64)
    counts = np.bincount(arr, minlength=size) if arr.size else np.zeros(size, dtype=np.int64)
    steps = np.abs(np.diff(arr))

    return {
        "draws": int(arr.size),
        "counts": counts.tolist(),
        "repeats": int(np.count_nonzero(steps == 0)),
        "adjacent": int(np.count_nonzero(steps == 1)),
        "mean_abs_step": float(steps.mean()) if steps.size else 0.0,
        "count_std": float(counts.std()),
    }


def run_experiment(size: int = 20, draws: int = 1000, seed: int = 42) -> Dict[str, Dict[str, Any]]:
    print(f"Starting Distribution Comparison: size={size}, draws={draws}, seed={seed}")

    picker = NonRepeatingPicker(size, rng=NumpyRNG(seed))
    picked = picker.draw_many(draws)

    # a second generator seeded identically, so both sources start from the same state
    uniform = NumpyRNG(seed).draw_array(size, draws)

    results = {
        "picker": summarize_sequence(picked, size),
        "uniform": summarize_sequence(uniform, size),
    }

    print("\n" + "="*50)
    print("Distribution Metrics")
    print("="*50)
    print(f"{'metric':14} | {'picker':>10} | {'uniform':>10}")
    print("-" * 40)
    for key in ("repeats", "adjacent", "mean_abs_step", "count_std"):
        p, u = results["picker"][key], results["uniform"][key]
        print(f"{key:14} | {p:10.3f} | {u:10.3f}")
    print("="*50)
    print(f"Picker counts:  {results['picker']['counts']}")
    print(f"Uniform counts: {results['uniform']['counts']}")

    return results


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=20)
    parser.add_argument("--draws", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    run_experiment(size=args.size, draws=args.draws, seed=args.seed)
