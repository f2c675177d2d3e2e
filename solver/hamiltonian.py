"""
Hamiltonian circuit search by backtracking.

The search fixes vertex 1 as the anchor and extends a simple path one
neighbor at a time, in adjacency order. A path holding all N vertices whose
last vertex is adjacent to the anchor is one hit. Each undirected cycle is
therefore found twice, once per traversal direction.

Modes:
  - first only (find_all=False): stop the whole search at the first hit
  - enumerate all (find_all=True): explore every branch

Backtracking runs on an explicit stack of neighbor iterators, so the depth
is not tied to the interpreter's recursion limit.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, NamedTuple, Optional

logger = logging.getLogger(__name__)

ANCHOR = 1


class HamiltonResult(NamedTuple):
    count: int                      # hits, counted per traversal direction
    time_to_first: Optional[float]  # seconds, None if nothing was found
    time_total: float               # seconds
    nodes_explored: int
    first_cycle: Optional[List[int]]

    @property
    def cycles(self) -> int:
        """Distinct undirected cycles."""
        return self.count // 2


@dataclass
class SearchContext:
    """Counters and timestamps of one search call."""
    find_all: bool
    started: float
    on_node: Optional[Callable[[List[int]], None]] = None
    count: int = 0
    nodes_explored: int = 0
    time_to_first: Optional[float] = None
    first_cycle: Optional[List[int]] = None

    def visit(self, path: List[int]) -> None:
        self.nodes_explored += 1
        if self.on_node is not None:
            self.on_node(path)

    def accept(self, path: List[int]) -> None:
        if self.count == 0:
            self.time_to_first = time.perf_counter() - self.started
            self.first_cycle = path + [path[0]]
        self.count += 1

    @property
    def stopped(self) -> bool:
        return not self.find_all and self.count > 0


def _backtrack(graph, ctx: SearchContext) -> None:
    n = len(graph)
    path = [ANCHOR]
    visited = {ANCHOR}
    ctx.visit(path)

    # stack[i] iterates the neighbors of path[i]
    stack = [iter(graph.neighbors(ANCHOR))]
    while stack:
        for nb in stack[-1]:
            if nb in visited:
                continue
            path.append(nb)
            visited.add(nb)
            ctx.visit(path)

            if len(path) == n:
                if graph.has_edge(nb, ANCHOR):
                    ctx.accept(path)
                    if ctx.stopped:
                        return
                path.pop()
                visited.discard(nb)
                continue

            stack.append(iter(graph.neighbors(nb)))
            break
        else:
            stack.pop()
            visited.discard(path.pop())


def hamiltonian_search(
    graph,
    find_all: bool = False,
    on_node: Optional[Callable[[List[int]], None]] = None,
) -> HamiltonResult:
    """
    Search `graph` for Hamiltonian circuits through vertex 1.

    Args:
        graph: Graph to search; it is only read
        find_all: enumerate every circuit instead of stopping at the first
        on_node: called with the current path (a live list, copy it to keep
                 it) for every search node entered

    Returns:
        HamiltonResult; graphs with fewer than 3 vertices report no circuit
    """
    ctx = SearchContext(find_all=find_all, on_node=on_node, started=time.perf_counter())
    if len(graph) >= 3:
        _backtrack(graph, ctx)
    time_total = time.perf_counter() - ctx.started

    logger.debug(
        "Hamiltonian search (%s): %d hit(s), %d nodes, %.6fs",
        "all" if find_all else "first", ctx.count, ctx.nodes_explored, time_total,
    )
    return HamiltonResult(
        count=ctx.count,
        time_to_first=ctx.time_to_first,
        time_total=time_total,
        nodes_explored=ctx.nodes_explored,
        first_cycle=ctx.first_cycle,
    )


__all__ = ["ANCHOR", "HamiltonResult", "SearchContext", "hamiltonian_search"]
