"""
Eulerian circuit extraction (Hierholzer's method, destructive).

The walk is built by peeling edges off the graph with an explicit stack, so
the graph has no edges left afterwards. Run it on Graph.copy() when the edge
set is still needed.
"""

import logging
from typing import List

from circuit_errors import NotEulerianError

logger = logging.getLogger(__name__)


def check_eulerian(graph, start: int = 1) -> None:
    """Raise NotEulerianError unless `graph` has a closed walk over all edges from `start`."""
    odd = graph.odd_vertices()
    if odd:
        raise NotEulerianError(f"{len(odd)} vertex(es) of odd degree, first is {odd[0]}")

    if graph.degree(start) == 0 and graph.edge_count():
        raise NotEulerianError(f"start vertex {start} has no edges")

    # vertices without edges may stay unreached
    stranded = [v for v in graph.unreached_vertices(start) if graph.degree(v) > 0]
    if stranded:
        raise NotEulerianError(f"edges unreachable from vertex {start}, e.g. at vertex {min(stranded)}")


def eulerian_circuit(graph, start: int = 1) -> List[int]:
    """
    Return a closed walk that uses every edge of `graph` exactly once.

    The walk starts and ends at `start` and has edge_count() + 1 entries.
    All edges are removed from `graph` in the process.

    Raises:
        NotEulerianError: odd degrees, or edges not reachable from `start`
    """
    check_eulerian(graph, start)
    n_edges = graph.edge_count()

    circuit: List[int] = []
    stack = [start]
    while stack:
        top = graph.vertex(stack[-1]).adjacent
        nxt = top.first()
        if nxt is not None:
            stack.append(nxt)
            graph.remove_edge(top.owner, nxt)
        else:
            circuit.append(stack.pop())

    circuit.reverse()
    logger.debug("Eulerian circuit over %d edges from vertex %d", n_edges, start)
    return circuit


__all__ = ["check_eulerian", "eulerian_circuit"]
