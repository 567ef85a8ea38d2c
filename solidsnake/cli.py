"""Command line entry point: native Fibonacci benchmarks and a system banner."""

from __future__ import annotations

import argparse
import platform
import sys
import time
from collections.abc import Sequence

import psutil

VERSION = "0.1.0"


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, computed iteratively."""
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_recursive(n: int) -> int:
    """Return the n-th Fibonacci number by naive recursion."""
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def _bench(func, fib_n: int, n_iter: int) -> tuple[int, int]:
    if n_iter < 1:
        raise ValueError("number of iterations must be at least 1")
    result = 0
    start = time.perf_counter_ns()
    for _ in range(n_iter):
        result = func(fib_n)
    avg_ns = (time.perf_counter_ns() - start) // n_iter
    return avg_ns, result


def bench_native_fib(fib_n: int, n_iter: int) -> tuple[int, int]:
    """Time the iterative Fibonacci; print and return (average ns, result)."""
    avg_ns, result = _bench(fibonacci, fib_n, n_iter)
    print(f"Native avg over {n_iter} runs: {avg_ns} ns (total: {result})")
    return avg_ns, result


def bench_native_fib_recursive(fib_n: int, n_iter: int) -> tuple[int, int]:
    """Time the recursive Fibonacci; print and return (average ns, result)."""
    avg_ns, result = _bench(fibonacci_recursive, fib_n, n_iter)
    print(f"Native recursive avg over {n_iter} runs: {avg_ns} ns (result: {result})")
    return avg_ns, result


def _memory_line() -> str | None:
    try:
        mem_bytes = psutil.Process().memory_info().rss
    except psutil.Error:
        return None
    return f"Memory used:       {mem_bytes // (1024 * 1024)}.{(mem_bytes // 1024) % 1024}mb"


def system_banner(version: str) -> str:
    """Build the start-up banner describing the host system."""
    lines = [
        "",
        f"🐍 Solid Snake {version} Repl",
        "",
        f"System:            {platform.system() or 'Unknown'} {platform.version() or 'unknown'}",
        f"Kernel             {platform.release() or 'Unknown'}",
        f"Python version:    {platform.python_version()}",
    ]
    memory = _memory_line()
    if memory is not None:
        lines.append(memory)
    lines.append("")
    return "\n".join(lines)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="solidsnake", description="Solid Snake benchmarks")
    parser.add_argument("--fib-n", type=int, default=80, help="Fibonacci index for the loop benchmark")
    parser.add_argument("--iterations", type=int, default=1000, help="runs of the loop benchmark")
    parser.add_argument(
        "--recursive-max", type=int, default=20, help="recursive benchmark runs for n below this"
    )
    parser.add_argument(
        "--recursive-iterations", type=int, default=200, help="runs of each recursive benchmark"
    )
    parser.add_argument("--no-wait", action="store_true", help="do not wait for input before exiting")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmarks, show the banner and wait for a key press."""
    args = _parser().parse_args(argv)
    print("🐍 Solid Snake starting..")

    try:
        bench_native_fib(args.fib_n, args.iterations)
        for n in range(args.recursive_max):
            print(n)
            bench_native_fib_recursive(n, args.recursive_iterations)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(system_banner(VERSION))

    if not args.no_wait:
        sys.stdin.read(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())