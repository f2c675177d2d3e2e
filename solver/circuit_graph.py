"""
Undirected graph over vertices 1..N backed by coupled adjacency stores.

The vertex set is fixed at construction; only edges change afterwards.
Edge ids are shared between the two endpoint stores through one
EdgeRegistry per graph (see adjacency.py).
"""

from typing import Iterable, Iterator, List, Set, Tuple

import networkx as nx

from adjacency import AdjacencyStore, EdgeRegistry
from circuit_errors import VertexError

Edge = Tuple[int, int]


class Vertex:
    __slots__ = ['id', 'adjacent']

    def __init__(self, vid: int, registry: EdgeRegistry):
        self.id = vid
        self.adjacent = AdjacencyStore(vid, registry)

    def degree(self) -> int:
        return self.adjacent.size()

    def __repr__(self):
        return f"Vertex({self.id}, degree={self.degree()})"


class Graph:
    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"vertex count must be non-negative, got {n}")
        self._edges = EdgeRegistry()
        self.vertices: List[Vertex] = [Vertex(i + 1, self._edges) for i in range(n)]

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Edge]) -> "Graph":
        g = cls(n)
        for u, v in edges:
            g.add_edge(u, v)
        return g

    # -------------------- Vertices and edges --------------------

    def vertex(self, vid: int) -> Vertex:
        # ids are dense and sorted, so id - 1 is the list position
        if not 1 <= vid <= len(self.vertices):
            raise VertexError(f"vertex {vid} outside 1..{len(self.vertices)}")
        return self.vertices[vid - 1]

    def add_edge(self, u: int, v: int) -> None:
        self.vertex(u).adjacent.insert_coupled(self.vertex(v).adjacent)

    def remove_edge(self, u: int, v: int) -> None:
        self.vertex(v)  # range check only
        self.vertex(u).adjacent.remove(v)

    def has_edge(self, u: int, v: int) -> bool:
        return self.vertex(u).adjacent.contains(v)

    def neighbors(self, vid: int) -> List[int]:
        return self.vertex(vid).adjacent.values()

    def degree(self, vid: int) -> int:
        return self.vertex(vid).degree()

    def edges(self) -> Iterator[Edge]:
        """Yield every edge once, in insertion order."""
        return iter(self._edges)

    def edge_count(self) -> int:
        return len(self._edges)

    def density(self) -> float:
        """Sum of degrees over N(N-1); the denominator is not halved."""
        n = len(self.vertices)
        if n < 2:
            return 0.0
        return 2 * self.edge_count() / (n * (n - 1))

    def copy(self) -> "Graph":
        """Independent graph with the same edges and neighbor order."""
        return Graph.from_edges(len(self.vertices), self.edges())

    # -------------------- Structural checks --------------------

    def unreached_vertices(self, start: int = 1) -> Set[int]:
        """Vertices a depth-first walk from `start` cannot reach."""
        n = len(self.vertices)
        if n == 0:
            return set()

        visited = {start}
        stack = [iter(self.neighbors(start))]
        while stack and len(visited) < n:
            for nb in stack[-1]:
                if nb not in visited:
                    visited.add(nb)
                    stack.append(iter(self.neighbors(nb)))
                    break
            else:
                # stack top has no unvisited neighbor left
                stack.pop()
        return {v.id for v in self.vertices if v.id not in visited}

    def is_connected(self) -> bool:
        return not self.unreached_vertices()

    def is_eulerian(self) -> bool:
        return all(v.degree() % 2 == 0 for v in self.vertices)

    def has_isolated_vertex(self) -> bool:
        return any(v.degree() == 0 for v in self.vertices)

    def odd_vertices(self) -> List[int]:
        return [v.id for v in self.vertices if v.degree() % 2 != 0]

    # -------------------- Circuits --------------------

    def eulerian_circuit(self, start: int = 1) -> List[int]:
        """Consume every edge into a closed walk. Leaves the graph edgeless."""
        from eulerian import eulerian_circuit
        return eulerian_circuit(self, start)

    def hamiltonian_search(self, find_all: bool = False, on_node=None):
        from hamiltonian import hamiltonian_search
        return hamiltonian_search(self, find_all=find_all, on_node=on_node)

    # -------------------- Interop --------------------

    def to_networkx(self) -> nx.Graph:
        G = nx.Graph()
        G.add_nodes_from(v.id for v in self.vertices)
        G.add_edges_from(self.edges())
        return G

    def __len__(self):
        return len(self.vertices)

    def __str__(self):
        return "\n".join(f"{v.id}: {v.adjacent}" for v in self.vertices)

    def __repr__(self):
        return f"Graph(n={len(self.vertices)}, edges={self.edge_count()})"


__all__ = ["Edge", "Vertex", "Graph"]
