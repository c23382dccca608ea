"""Deliberately slow Fibonacci used to put observable load on the CPU."""

from __future__ import annotations

import time


def fib(n: int) -> int:
    """Return the n-th Fibonacci number by naive double recursion.

    Exponential on purpose: this is the CPU stress knob, not a math helper.
    """
    if n <= 1:
        return n
    return fib(n - 1) + fib(n - 2)


def effective_n(requested: int | None, default: int, cap: int) -> int:
    """Resolve the query parameter into the n actually computed."""
    if requested is None:
        requested = default
    return min(requested, cap)


def timed_fib(n: int) -> tuple[int, float]:
    """Compute ``fib(n)`` and return ``(result, elapsed_ms)``."""
    start = time.perf_counter()
    result = fib(n)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return result, elapsed_ms
