"""
Timing helpers around the graph engine.

Mirrors a size sweep: every size is measured at each density with full
Hamiltonian enumeration until the densest graph needs more than
`time_limit` seconds to enumerate, then a few much larger sizes are measured
with first-only search. Records stay in memory; writing them anywhere is up
to the caller.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple

import numpy as np

from circuit_errors import NotEulerianError
from graph_generator import DEFAULT_MAX_ATTEMPTS, generate

logger = logging.getLogger(__name__)

DEFAULT_DENSITIES = (0.2, 0.6)
DEFAULT_START_SIZE = 5
DEFAULT_TIME_LIMIT = 5.0
DEFAULT_EXTRA_STEPS = 10
DEFAULT_SIZE_STEP = 50


@dataclass
class BenchmarkSettings:
    densities: Tuple[float, ...] = DEFAULT_DENSITIES
    start_size: int = DEFAULT_START_SIZE
    time_limit: float = DEFAULT_TIME_LIMIT  # seconds of full enumeration on the densest graph
    extra_steps: int = DEFAULT_EXTRA_STEPS  # first-only sizes after the limit is hit
    size_step: int = DEFAULT_SIZE_STEP
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    seed: Optional[int] = None


@dataclass
class BenchmarkRecord:
    size: int
    density: float
    measured_density: float
    edges: int
    euler_time: float
    hamilton_count: Optional[int]  # None in first-only mode
    hamilton_first: Optional[float]
    hamilton_total: Optional[float]  # None in first-only mode
    extra: Dict[str, Any] = field(default_factory=dict)


def time_call(label: str, fn: Callable, *args, **kwargs) -> Tuple[Any, float]:
    """Run fn(*args, **kwargs) and return (result, elapsed seconds)."""
    start = time.perf_counter()
    result = fn(*args, **kwargs)
    elapsed = time.perf_counter() - start
    logger.info("%s took %fs", label, elapsed)
    return result, elapsed


def benchmark_graph(
    n: int,
    density: float,
    find_all: bool = True,
    seed: Optional[int] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> BenchmarkRecord:
    """Generate one graph and time both circuit algorithms on it."""
    g = generate(n, density, seed=seed, max_attempts=max_attempts)
    if not g.is_eulerian():
        raise NotEulerianError(f"generated graph n={n} d={density} is not Eulerian")
    measured = g.density()
    edges = g.edge_count()
    logger.info("Graph n=%d density: %f", n, measured)

    # the search only reads, extraction drains: give the search its own copy
    ham = g.copy().hamiltonian_search(find_all=find_all)
    if ham.time_to_first is not None:
        logger.info("First Hamilton circuit for n=%d, d=%.1f = %fs", n, density, ham.time_to_first)
    if find_all:
        logger.info("All Hamilton circuits for n=%d, d=%.1f = %fs", n, density, ham.time_total)

    _, euler_time = time_call(f"Eulerian circuit for n={n}, d={density:.1f}", g.eulerian_circuit)

    return BenchmarkRecord(
        size=n,
        density=density,
        measured_density=measured,
        edges=edges,
        euler_time=euler_time,
        hamilton_count=ham.count if find_all else None,
        hamilton_first=ham.time_to_first,
        hamilton_total=ham.time_total if find_all else None,
        extra={"nodes_explored": ham.nodes_explored},
    )


def sweep(settings: Optional[BenchmarkSettings] = None) -> Iterator[BenchmarkRecord]:
    """Yield records for growing sizes, see module docstring."""
    if settings is None:
        settings = BenchmarkSettings()
    densities = tuple(settings.densities)
    densest = max(densities)
    seed = settings.seed

    def next_seed():
        nonlocal seed
        if seed is None:
            return None
        seed += 1
        return seed - 1

    size = settings.start_size
    while True:
        slowest = 0.0
        for d in densities:
            rec = benchmark_graph(size, d, find_all=True, seed=next_seed(),
                                  max_attempts=settings.max_attempts)
            if d == densest:
                slowest = rec.hamilton_total
            yield rec
        size += 1
        if slowest >= settings.time_limit:
            break

    for _ in range(settings.extra_steps):
        size += settings.size_step
        for d in densities:
            logger.info("Generating d=%.1f for n=%d", d, size)
            yield benchmark_graph(size, d, find_all=False, seed=next_seed(),
                                  max_attempts=settings.max_attempts)


def summarize(records: Iterable[BenchmarkRecord]) -> Dict[float, Dict[str, np.ndarray]]:
    """
    Group records by target density into numpy arrays.

    Missing values (first-only records have no totals or counts) become NaN.
    """
    grouped: Dict[float, list] = {}
    for rec in records:
        grouped.setdefault(rec.density, []).append(rec)

    out: Dict[float, Dict[str, np.ndarray]] = {}
    for density, recs in sorted(grouped.items()):
        recs.sort(key=lambda r: r.size)

        def column(attr):
            return np.array(
                [np.nan if getattr(r, attr) is None else getattr(r, attr) for r in recs],
                dtype=float,
            )

        out[density] = {
            "size": np.array([r.size for r in recs], dtype=int),
            "measured_density": column("measured_density"),
            "euler_time": column("euler_time"),
            "hamilton_first": column("hamilton_first"),
            "hamilton_total": column("hamilton_total"),
            "hamilton_count": column("hamilton_count"),
        }
    return out


__all__ = [
    "BenchmarkSettings",
    "BenchmarkRecord",
    "time_call",
    "benchmark_graph",
    "sweep",
    "summarize",
]
