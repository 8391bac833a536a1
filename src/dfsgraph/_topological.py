"""Topological ordering of directed acyclic graphs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._config import DfsConfig
from ._cycle import DirectedCycle
from ._errors import CertificationError, require_vertex
from ._order import DepthFirstOrder

if TYPE_CHECKING:
    from ._digraph import Digraph

logger = logging.getLogger(__name__)


class Topological:
    """Topological order of a digraph, when one exists.

    The digraph is first checked for a directed cycle. If there is none,
    the order is the reverse postorder of a depth-first search: a vertex
    finishes only after everything reachable from it, so reading finish
    times backwards puts every edge's source before its target.

    If the digraph has a cycle there is no order; :meth:`order` returns
    None, :meth:`rank` returns -1, and :meth:`cycle` gives the witness.

    Example:
        >>> from dfsgraph import Digraph
        >>> topo = Topological(Digraph.from_edges(4, [(0, 1), (0, 2), (1, 3), (2, 3)]))
        >>> topo.order()
        (0, 2, 1, 3)
        >>> topo.rank(3)
        3

    """

    __slots__ = ("_cycle", "_order", "_rank", "_vertex_count")

    def __init__(self, graph: Digraph, *, config: DfsConfig | None = None) -> None:
        config = config or DfsConfig()
        self._vertex_count = graph.vertex_count
        self._order: tuple[int, ...] | None = None
        self._rank: tuple[int, ...] | None = None

        finder = DirectedCycle(graph, config=config)
        self._cycle = finder.cycle()
        if finder.has_cycle():
            logger.debug("Digraph has a cycle; no topological order")
            return

        order = DepthFirstOrder(graph, config=config).reverse_postorder()
        rank = [0] * graph.vertex_count
        for i, v in enumerate(order):
            rank[v] = i
        self._order = order
        self._rank = tuple(rank)
        logger.debug("Topological order: %s", order)

        if config.verify:
            self._certify(graph)

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the analyzed digraph."""
        return self._vertex_count

    def has_order(self) -> bool:
        """Check whether the digraph has a topological order (is a DAG)."""
        return self._order is not None

    def order(self) -> tuple[int, ...] | None:
        """Return vertices in topological order, or None if there is a cycle."""
        return self._order

    def rank(self, v: int) -> int:
        """Position of v in the topological order, or -1 if there is none.

        Raises:
            OutOfRangeError: If v is out of range.

        """
        require_vertex(v, self._vertex_count)
        if self._rank is None:
            return -1
        return self._rank[v]

    def cycle(self) -> tuple[int, ...] | None:
        """Return the directed cycle that prevents an order, or None."""
        return self._cycle

    def _certify(self, graph: Digraph) -> None:
        if self._rank is None:
            return
        for v, w in graph.edges():
            if self._rank[v] >= self._rank[w]:
                msg = f"edge {v}->{w} violates topological order"
                raise CertificationError(msg)
