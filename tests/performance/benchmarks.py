"""
Performance benchmarks for the GS1 GTIN toolkit.
"""

import time
import statistics
from typing import Tuple

from gs1_gtin import generate, gs1_prefix_country, inspect_gtin, normalize, validate


def benchmark(func, iterations: int = 1000) -> Tuple[float, float, float]:
    """
    Run a benchmark and return timing statistics.

    Returns:
        (mean_us, min_us, max_us)
    """
    times = []

    for _ in range(iterations):
        start = time.perf_counter()
        func()
        elapsed = time.perf_counter() - start
        times.append(elapsed * 1_000_000)  # Convert to us

    return (
        statistics.mean(times),
        min(times),
        max(times)
    )


def run_benchmarks():
    """Run all benchmarks and print results."""
    print("=" * 60)
    print("GS1 GTIN Benchmarks")
    print("=" * 60)
    print()

    test_cases = [
        ("validate GTIN-8", lambda: validate("96385074")),
        ("validate GTIN-13", lambda: validate("6291041500213")),
        ("validate GTIN-14 (padded)", lambda: validate("  06285096000842\n")),
        ("generate GTIN-13", lambda: generate("629104150021")),
        ("normalize GTIN-13", lambda: normalize("6291041500213")),
        ("prefix (3-digit hit)", lambda: gs1_prefix_country("9780306406157")),
        ("prefix (2-digit hit)", lambda: gs1_prefix_country("012345678905")),
        ("inspect GTIN-13", lambda: inspect_gtin("6291041500213")),
    ]

    for name, func in test_cases:
        mean, min_t, max_t = benchmark(func, iterations=10000)
        print(f"  {name:30} {mean:8.2f}us avg ({min_t:.2f}-{max_t:.2f})")

    print()
    print("Throughput test (100000 validations):")
    print("-" * 60)

    start = time.perf_counter()
    for _ in range(100000):
        validate("6291041500213")
    total = time.perf_counter() - start

    print(f"  Throughput: {100000 / total:.0f} validations/second")
    print(f"  Total time: {total:.3f}s")

    print()
    print("=" * 60)


if __name__ == "__main__":
    run_benchmarks()
