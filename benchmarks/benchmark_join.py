"""Benchmark lazy joins against eager str.join.

Run with:
    python benchmarks/benchmark_join.py
"""

import time


def benchmark_eager(rows: int, cols: int, iterations: int = 10) -> float:
    """Nested str.join, one intermediate string per row."""
    start = time.perf_counter()
    for _ in range(iterations):
        "\n".join(
            "| " + " | ".join(f"a{i}{j}" for j in range(cols)) + " |" for i in range(rows)
        )
    return (time.perf_counter() - start) / iterations


def benchmark_lazy(rows: int, cols: int, iterations: int = 10) -> float:
    """Nested Join/lazy_format, materialized once."""
    from join_lazy_fmt import Join, lazy_format

    start = time.perf_counter()
    for _ in range(iterations):
        str(
            Join("\n").join(
                lazy_format("| {} |", Join(" | ").join(f"a{i}{j}" for j in range(cols)))
                for i in range(rows)
            )
        )
    return (time.perf_counter() - start) / iterations


def main() -> None:
    """Run benchmarks and print results."""
    import sys

    print(f"Python {sys.version.split()[0]}\n")
    for rows, cols in [(10, 10), (100, 100), (1000, 20)]:
        eager = benchmark_eager(rows, cols)
        lazy = benchmark_lazy(rows, cols)
        print(
            f"{rows:>5} x {cols:<4} eager: {eager * 1000:8.2f}ms  "
            f"lazy: {lazy * 1000:8.2f}ms  ratio: {lazy / eager:5.2f}x"
        )


if __name__ == "__main__":
    main()
