"""
Adjacency storage with coupled edge insertion and removal.

Every undirected edge is recorded exactly once in an EdgeRegistry. The two
endpoint AdjacencyStores only keep the record's id, so adding or removing an
edge always touches both endpoints in the same step and a neighbor entry can
never outlive its counterpart.
"""

from typing import Dict, Iterator, List, Optional, Tuple


class EdgeRegistry:
    """Arena of edge records keyed by an ever increasing edge id."""
    __slots__ = ['_records', '_next_id']

    def __init__(self):
        self._records: Dict[int, Tuple["AdjacencyStore", "AdjacencyStore"]] = {}
        self._next_id = 0

    def register(self, a: "AdjacencyStore", b: "AdjacencyStore") -> int:
        edge_id = self._next_id
        self._next_id += 1
        self._records[edge_id] = (a, b)
        return edge_id

    def release(self, edge_id: int) -> Tuple["AdjacencyStore", "AdjacencyStore"]:
        return self._records.pop(edge_id)

    def endpoints(self, edge_id: int) -> Tuple[int, int]:
        a, b = self._records[edge_id]
        return a.owner, b.owner

    def __len__(self):
        return len(self._records)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        """Yield (u, v) pairs in the order the edges were inserted."""
        for a, b in self._records.values():
            yield a.owner, b.owner


class AdjacencyStore:
    """
    Neighbor list of a single vertex.

    Neighbors keep insertion order. Lookups go through a neighbor -> edge id
    index, so contains() is constant time per queried value.
    """
    __slots__ = ['owner', 'registry', '_edges', '_neighbors']

    def __init__(self, owner: int, registry: EdgeRegistry):
        self.owner = owner
        self.registry = registry
        self._edges: Dict[int, int] = {}      # edge id -> neighbor
        self._neighbors: Dict[int, int] = {}  # neighbor -> edge id

    def insert_coupled(self, other: "AdjacencyStore") -> int:
        """
        Add the edge self.owner <-> other.owner.

        Appends other.owner here and self.owner to `other`; both entries point
        at one new registry record. Returns the edge id.
        """
        if other is self:
            raise ValueError(f"self-loop on vertex {self.owner}")
        if other.registry is not self.registry:
            raise ValueError("adjacency stores belong to different graphs")
        if other.owner in self._neighbors:
            raise ValueError(f"edge {self.owner}-{other.owner} already present")

        edge_id = self.registry.register(self, other)
        self._attach(edge_id, other.owner)
        other._attach(edge_id, self.owner)
        return edge_id

    def remove(self, value: int) -> None:
        """Drop the edge to `value` from both endpoints. No-op if absent."""
        edge_id = self._neighbors.get(value)
        if edge_id is None:
            return
        a, b = self.registry.release(edge_id)
        a._detach(edge_id)
        b._detach(edge_id)

    def contains(self, *values: int) -> bool:
        """True iff every value is a neighbor. Vacuously true for no values."""
        if not values:
            return True
        if not self._edges:
            return False
        return all(value in self._neighbors for value in values)

    def size(self) -> int:
        return len(self._edges)

    def values(self) -> List[int]:
        return list(self._edges.values())

    def first(self) -> Optional[int]:
        """First neighbor in insertion order, or None when empty."""
        return next(iter(self._edges.values()), None)

    def clear(self) -> None:
        """Remove every edge of this vertex, counterpart entries included."""
        for edge_id in list(self._edges):
            a, b = self.registry.release(edge_id)
            a._detach(edge_id)
            b._detach(edge_id)

    def _attach(self, edge_id: int, neighbor: int) -> None:
        self._edges[edge_id] = neighbor
        self._neighbors[neighbor] = edge_id

    def _detach(self, edge_id: int) -> None:
        neighbor = self._edges.pop(edge_id)
        del self._neighbors[neighbor]

    def __contains__(self, value):
        return value in self._neighbors

    def __len__(self):
        return len(self._edges)

    def __iter__(self):
        return iter(list(self._edges.values()))

    def __str__(self):
        return " -> ".join(str(v) for v in self._edges.values())

    def __repr__(self):
        return f"AdjacencyStore(owner={self.owner}, neighbors=[{', '.join(map(str, self._edges.values()))}])"


__all__ = ["EdgeRegistry", "AdjacencyStore"]
