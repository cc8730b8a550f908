"""
Profiling script for rbset tree performance analysis.

This script profiles insert, lookup and removal workloads to identify
bottlenecks in the rebalancing code.
"""

import cProfile
import pstats
import io
from pstats import SortKey
import time

import numpy as np
from rbset import RBTree


def create_keys(n_keys, sorted_input=False, seed=42):
    """Create n_keys integer keys, shuffled unless sorted_input is set."""
    if sorted_input:
        return list(range(n_keys))
    rng = np.random.default_rng(seed)
    return rng.permutation(n_keys).tolist()


def build_tree(keys):
    tree = RBTree(lambda a, b: a - b)
    for k in keys:
        tree.add(k)
    return tree


def profile_random_inserts():
    """Profile inserting 100k keys in random order."""
    build_tree(create_keys(100_000))


def profile_sorted_inserts():
    """Profile inserting 100k keys in ascending order (rotation heavy)."""
    build_tree(create_keys(100_000, sorted_input=True))


def profile_lookups():
    """Profile 100k membership tests, half of them misses."""
    keys = create_keys(50_000)
    tree = build_tree(keys)
    rng = np.random.default_rng(7)
    for probe in rng.integers(0, 100_000, size=100_000).tolist():
        tree.contains(probe)


def profile_removals():
    """Profile removing every key in random order."""
    keys = create_keys(50_000)
    tree = build_tree(keys)
    for k in create_keys(50_000, seed=3):
        tree.remove(k)


def profile_extract_min():
    """Profile draining a tree through extract_min."""
    tree = build_tree(create_keys(50_000))
    while not tree.is_empty():
        tree.extract_min()


def benchmark_scenario(name, func):
    """Benchmark a scenario and print timing."""
    print(f"\n{'='*60}")
    print(f"Profiling: {name}")
    print('='*60)

    # Create profiler
    profiler = cProfile.Profile()

    # Run with profiling
    start_time = time.time()
    profiler.enable()
    func()
    profiler.disable()
    elapsed = time.time() - start_time

    print(f"\nTotal time: {elapsed:.3f}s")

    # Print stats
    s = io.StringIO()
    ps = pstats.Stats(profiler, stream=s).sort_stats(SortKey.CUMULATIVE)
    ps.print_stats(15)

    print("\nTop 15 functions by cumulative time:")
    print(s.getvalue())

    return profiler


def main():
    """Run all profiling scenarios."""
    print("rbset Performance Profiling")
    print("=" * 60)

    scenarios = [
        ("Random Inserts (100k)", profile_random_inserts),
        ("Sorted Inserts (100k)", profile_sorted_inserts),
        ("Lookups (100k over 50k keys)", profile_lookups),
        ("Removals (50k)", profile_removals),
        ("Extract Min (50k)", profile_extract_min),
    ]

    profilers = {}
    for name, func in scenarios:
        profilers[name] = benchmark_scenario(name, func)

    # Save detailed profiles
    print("\n" + "="*60)
    print("Saving detailed profiles...")
    print("="*60)

    for name, profiler in profilers.items():
        filename = f"profile_{name.lower().replace(' ', '_').replace('(', '').replace(')', '')}.prof"
        profiler.dump_stats(filename)
        print(f"Saved: {filename}")

    print("\nTo view detailed profile, use:")
    print("  python -m pstats <profile_file>")


if __name__ == "__main__":
    main()
