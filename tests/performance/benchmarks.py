"""
Performance benchmarks for GMN check characters.
"""

import time
import statistics
from typing import Tuple

from gs1_gmn import add_check_characters, check_characters, verify_check_characters


def benchmark(func, iterations: int = 10000) -> Tuple[float, float, float]:
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
    print("GMN Check Character Benchmarks")
    print("=" * 60)
    print()

    test_cases = [
        ("Shortest check", lambda: check_characters("12345A")),
        ("Longest check", lambda: check_characters("1987654Ad4X4bL5ttr2310c")),
        ("Complete", lambda: add_check_characters("1987654Ad4X4bL5ttr2310c")),
        ("Verify valid", lambda: verify_check_characters("1987654Ad4X4bL5ttr2310c2K")),
        ("Verify not valid", lambda: verify_check_characters("1987654Ad4X4bL5ttr2310cXK")),
    ]

    for name, func in test_cases:
        mean, min_t, max_t = benchmark(func)
        print(f"  {name:30} {mean:8.2f}us avg ({min_t:.2f}-{max_t:.2f})")

    print()


if __name__ == "__main__":
    run_benchmarks()
