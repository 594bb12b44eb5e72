"""Benchmarks for gamma density evaluation.

Compares a Python loop over the scalar evaluator with the vectorized
evaluation of a bound density, for plain lists and tensors.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import torch

from torchgamma import bind, number_pdf, pdf


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Mean, min and max time in seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": sum(times) / len(times),
        "min": min(times),
        "max": max(times),
    }


def scalar_loop(values: list[float], alpha: float, beta: float) -> list[float]:
    return [number_pdf(value, alpha, beta) for value in values]


def bound_loop(values: list[float], alpha: float, beta: float) -> list[float]:
    density = bind(alpha, beta)
    return [density(value) for value in values]


def main() -> None:
    alpha, beta = 2.5, 0.5
    for n in (100, 1_000, 10_000):
        values = torch.linspace(0, 20, n, dtype=torch.float64)
        as_list = values.tolist()
        results = {
            "scalar loop": benchmark(scalar_loop, as_list, alpha, beta, iterations=3),
            "bound loop": benchmark(bound_loop, as_list, alpha, beta, iterations=3),
            "pdf(list)": benchmark(pdf, as_list, alpha=alpha, beta=beta),
            "pdf(tensor)": benchmark(pdf, values, alpha=alpha, beta=beta),
        }
        print(f"n = {n}")
        for name, stats in results.items():
            print(f"  {name:<12} mean {stats['mean'] * 1e3:9.3f} ms")


if __name__ == "__main__":
    main()
