"""Mutable adjacency-list directed graph."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Self, overload

from ._errors import OutOfRangeError, require_vertex

if TYPE_CHECKING:
    from ._source import GraphSource

logger = logging.getLogger(__name__)


class AdjacencyView(Sequence[int]):
    """Read-only view over one vertex's adjacency list.

    The view is live: edges added to the digraph after the view was taken
    show up in it. Iterating it twice yields the same destinations in the
    same (insertion) order.
    """

    __slots__ = ("_targets",)

    def __init__(self, targets: list[int]) -> None:
        self._targets = targets

    @overload
    def __getitem__(self, index: int) -> int: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[int]: ...
    def __getitem__(self, index: int | slice) -> int | Sequence[int]:
        if isinstance(index, slice):
            return tuple(self._targets[index])
        return self._targets[index]

    def __len__(self) -> int:
        return len(self._targets)

    def __iter__(self) -> Iterator[int]:
        return iter(self._targets)

    def __repr__(self) -> str:
        return f"AdjacencyView({self._targets!r})"


class Digraph:
    """A directed graph over vertices ``0 .. vertex_count - 1``.

    The vertex count is fixed at construction; edges are added one at a time
    and are never removed. Parallel edges and self-loops are allowed. Each
    adjacency list keeps insertion order, which makes every traversal over
    the graph deterministic.

    Example:
        >>> graph = Digraph(3)
        >>> graph.add_edge(0, 1)
        >>> graph.add_edge(0, 2)
        >>> list(graph.adjacency(0))
        [1, 2]
        >>> graph.indegree(2)
        1

    """

    __slots__ = ("_adjacency", "_edge_count", "_indegree", "_vertex_count")

    def __init__(self, vertex_count: int) -> None:
        """Create an empty digraph.

        Args:
            vertex_count: Number of vertices. Must be non-negative.

        Raises:
            OutOfRangeError: If vertex_count is negative.

        """
        if vertex_count < 0:
            raise OutOfRangeError(None, vertex_count)
        self._vertex_count = vertex_count
        self._edge_count = 0
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
        self._indegree: list[int] = [0] * vertex_count

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[tuple[int, int]]) -> Self:
        """Build a digraph from a vertex count and (source, target) pairs.

        Args:
            vertex_count: Number of vertices.
            edges: Edge pairs, added in iteration order.

        Returns:
            A new Digraph.

        Raises:
            OutOfRangeError: If the count is negative or an endpoint is out of range.

        Example:
            >>> graph = Digraph.from_edges(3, [(0, 1), (1, 2)])
            >>> graph.edge_count
            2

        """
        graph = cls(vertex_count)
        for v, w in edges:
            graph.add_edge(v, w)
        return graph

    @classmethod
    def from_source(cls, source: GraphSource) -> Self:
        """Build a digraph from a validated GraphSource."""
        return cls.from_edges(source.vertex_count, source.edges)

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        """Number of edges, counting parallel edges separately."""
        return self._edge_count

    def add_edge(self, v: int, w: int) -> None:
        """Add the directed edge v->w.

        Raises:
            OutOfRangeError: If either endpoint is out of range.

        """
        require_vertex(v, self._vertex_count)
        require_vertex(w, self._vertex_count)
        self._adjacency[v].append(w)
        self._indegree[w] += 1
        self._edge_count += 1

    def adjacency(self, v: int) -> AdjacencyView:
        """Vertices adjacent from v, in the order their edges were added."""
        require_vertex(v, self._vertex_count)
        return AdjacencyView(self._adjacency[v])

    def outdegree(self, v: int) -> int:
        """Number of edges leaving v."""
        require_vertex(v, self._vertex_count)
        return len(self._adjacency[v])

    def indegree(self, v: int) -> int:
        """Number of edges entering v."""
        require_vertex(v, self._vertex_count)
        return self._indegree[v]

    def has_edge(self, v: int, w: int) -> bool:
        """Check whether at least one edge v->w exists."""
        require_vertex(v, self._vertex_count)
        require_vertex(w, self._vertex_count)
        return w in self._adjacency[v]

    def edges(self) -> Iterator[tuple[int, int]]:
        """Iterate all edges, by source vertex then insertion order."""
        for v, targets in enumerate(self._adjacency):
            for w in targets:
                yield v, w

    def reverse(self) -> Digraph:
        """Return a new digraph with every edge flipped.

        The receiver is not modified.
        """
        reversed_graph = Digraph(self._vertex_count)
        for v, w in self.edges():
            reversed_graph.add_edge(w, v)
        logger.debug("Reversed digraph with %d vertices and %d edges", self._vertex_count, self._edge_count)
        return reversed_graph

    def copy(self) -> Digraph:
        """Return an independent copy with the same adjacency order."""
        clone = Digraph(self._vertex_count)
        clone._adjacency = [list(targets) for targets in self._adjacency]
        clone._indegree = list(self._indegree)
        clone._edge_count = self._edge_count
        return clone

    def __copy__(self) -> Digraph:
        return self.copy()

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return self._vertex_count

    def __contains__(self, v: object) -> bool:
        """Check if v is a valid vertex index."""
        return isinstance(v, int) and not isinstance(v, bool) and 0 <= v < self._vertex_count

    def __repr__(self) -> str:
        return f"Digraph(vertex_count={self._vertex_count}, edge_count={self._edge_count})"
