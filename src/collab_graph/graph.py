from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator

from .errors import UnknownNodeError
from .models import Edge, ParseResult


class Graph:
    """Immutable undirected simple graph over integer author ids.

    Adjacency is symmetric: b in neighbors(a) iff a in neighbors(b). Neighbour
    sets are frozensets and there are no mutators, so every analysis can walk
    the same instance repeatedly.
    """

    __slots__ = ("_adjacency", "_edge_count")

    def __init__(self, adjacency: dict[int, frozenset[int]], edge_count: int) -> None:
        self._adjacency = adjacency
        self._edge_count = edge_count

    @classmethod
    def build(cls, edges: Iterable[Edge | tuple[int, int]], nodes: Iterable[int] = ()) -> "Graph":
        neighbors: dict[int, set[int]] = defaultdict(set)
        for node in nodes:
            neighbors.setdefault(node, set())
        for item in edges:
            edge = item if isinstance(item, Edge) else Edge.of(*item)
            neighbors[edge.source].add(edge.target)
            neighbors[edge.target].add(edge.source)

        adjacency = {node: frozenset(neighbors[node]) for node in sorted(neighbors)}
        edge_count = sum(len(adj) for adj in adjacency.values()) // 2
        return cls(adjacency, edge_count)

    @classmethod
    def from_parse_result(cls, result: ParseResult) -> "Graph":
        return cls.build(result.edges, result.nodes)

    def neighbors(self, node: int) -> frozenset[int]:
        try:
            return self._adjacency[node]
        except KeyError:
            raise UnknownNodeError(node) from None

    def degree(self, node: int) -> int:
        return len(self.neighbors(node))

    def node_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        return self._edge_count

    def is_empty(self) -> bool:
        return not self._adjacency

    def nodes(self) -> Iterator[int]:
        # build() inserts keys in ascending order
        return iter(self._adjacency)

    def edges(self) -> Iterator[tuple[int, int]]:
        for node, adj in self._adjacency.items():
            for nei in sorted(adj):
                if node < nei:
                    yield (node, nei)

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[int]:
        return self.nodes()

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
