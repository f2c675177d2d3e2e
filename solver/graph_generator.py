"""
Random connected Eulerian graph generator.

Strategy per attempt:
  1. lay a random spanning path through all vertices (connectivity seed)
  2. add random edges until the target edge count is reached
  3. parity repair: pair every odd vertex with a later odd vertex and toggle
     the edge between them (add if absent, remove if present)
  4. validate Eulerian / no isolated vertex / connected, else retry

The target edge count follows the density convention of Graph.density():
floor(density * n * (n - 1)) // 2.
"""

import logging
import math
import random
from numbers import Integral, Real
from typing import Optional

from circuit_errors import GenerationError, InvalidInputError
from circuit_graph import Graph

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 100


def target_edge_count(n: int, density: float) -> int:
    return math.floor(density * n * (n - 1)) // 2


def validate_arguments(n, density) -> None:
    """Reject bad generator input before anything is allocated."""
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidInputError(f"vertex count must be an int, got {n!r}")
    if n < 1:
        raise InvalidInputError(f"vertex count must be >= 1, got {n}")
    if isinstance(density, bool) or not isinstance(density, Real):
        raise InvalidInputError(f"density must be a real number, got {density!r}")
    if not 0 < density < 1:
        raise InvalidInputError(f"density must lie in (0, 1), got {density}")


def add_spanning_path(g: Graph, rng: random.Random) -> None:
    """Chain all vertices in random order so the graph starts out connected."""
    order = [v.id for v in g.vertices]
    rng.shuffle(order)
    for u, v in zip(order, order[1:]):
        g.add_edge(u, v)


def add_random_edges(g: Graph, target: int, rng: random.Random) -> None:
    n = len(g)
    # no self-loops, no duplicates
    while g.edge_count() < target:
        u = rng.randint(1, n)
        v = rng.randint(1, n)
        if u == v or g.has_edge(u, v):
            continue
        g.add_edge(u, v)


def toggle_edge(g: Graph, u: int, v: int) -> None:
    if g.has_edge(u, v):
        g.remove_edge(u, v)
    else:
        g.add_edge(u, v)


def repair_parity(g: Graph, rng: random.Random) -> int:
    """
    Make every degree even by toggling edges between odd vertices.

    Vertices are visited in id order; an odd vertex is paired with a random
    later odd vertex, which fixes both at once. The number of odd vertices is
    always even, so the last one visited never lacks a partner.

    Returns the number of toggles (at most n // 2).
    """
    toggles = 0
    for v in g.vertices:
        if v.degree() % 2 == 0:
            continue
        later_odd = [u.id for u in g.vertices[v.id:] if u.degree() % 2 != 0]
        partner = rng.choice(later_odd)
        toggle_edge(g, v.id, partner)
        toggles += 1
    return toggles


def build_candidate(n: int, density: float, rng: random.Random) -> Graph:
    """One generate-and-repair pass; the result is not validated yet."""
    g = Graph(n)
    add_spanning_path(g, rng)
    add_random_edges(g, target_edge_count(n, density), rng)
    repair_parity(g, rng)
    return g


def rejection_reason(g: Graph) -> Optional[str]:
    if not g.is_eulerian():
        return "odd degree"
    if g.has_isolated_vertex():
        return "isolated vertex"
    if not g.is_connected():
        return "disconnected"
    return None


def generate(
    n: int,
    density: float,
    seed: Optional[int] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    rng: Optional[random.Random] = None,
) -> Graph:
    """
    Build a connected Eulerian graph on vertices 1..n with no isolated vertex.

    Args:
        n: number of vertices (>= 1)
        density: target density in (0, 1), see Graph.density()
        seed: seed for a private random.Random (ignored if rng is given)
        max_attempts: retry budget before GenerationError is raised
        rng: random source to draw from instead of a seeded one

    Raises:
        InvalidInputError: n or density out of range
        GenerationError: no valid graph within max_attempts; raised at once
            for n < 3, where no simple graph can satisfy all invariants
    """
    validate_arguments(n, density)
    if max_attempts < 1:
        raise InvalidInputError(f"max_attempts must be >= 1, got {max_attempts}")
    if n < 3:
        raise GenerationError(n, density, 0)

    if rng is None:
        rng = random.Random(seed)

    for attempt in range(1, max_attempts + 1):
        g = build_candidate(n, density, rng)
        reason = rejection_reason(g)
        if reason is None:
            logger.debug(
                "Generated n=%d d=%.2f: %d edges, density %.4f (attempt %d)",
                n, density, g.edge_count(), g.density(), attempt,
            )
            return g
        logger.debug("Attempt %d for n=%d d=%.2f rejected: %s", attempt, n, density, reason)

    raise GenerationError(n, density, max_attempts)


__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "target_edge_count",
    "validate_arguments",
    "repair_parity",
    "generate",
]
