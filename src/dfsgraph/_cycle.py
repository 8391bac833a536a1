"""Directed cycle detection by depth-first search."""

from __future__ import annotations

import logging
from itertools import pairwise
from typing import TYPE_CHECKING

from ._config import DfsConfig
from ._errors import CertificationError
from ._traversal import StepKind, depth_first

if TYPE_CHECKING:
    from ._digraph import Digraph

logger = logging.getLogger(__name__)


class DirectedCycle:
    """Find one directed cycle in a digraph, if any exists.

    Roots are tried in index order and the search stops at the first edge
    that leads back to a vertex on the current search path. The reported
    cycle is the first one found, not necessarily the shortest.

    Example:
        >>> from dfsgraph import Digraph
        >>> finder = DirectedCycle(Digraph.from_edges(3, [(0, 1), (1, 2), (2, 0)]))
        >>> finder.cycle()
        (0, 1, 2, 0)

    """

    __slots__ = ("_cycle", "_vertex_count")

    def __init__(self, graph: Digraph, *, config: DfsConfig | None = None) -> None:
        config = config or DfsConfig()
        self._vertex_count = graph.vertex_count
        self._cycle: tuple[int, ...] | None = None

        marked = [False] * graph.vertex_count
        on_stack = [False] * graph.vertex_count
        edge_to = [-1] * graph.vertex_count

        for root in range(graph.vertex_count):
            if marked[root]:
                continue
            for step in depth_first(graph, root, marked, config.traversal):
                match step.kind:
                    case StepKind.ENTER:
                        on_stack[step.vertex] = True
                    case StepKind.TREE:
                        edge_to[step.target] = step.vertex
                    case StepKind.REVISIT if on_stack[step.target]:
                        self._cycle = _trace_cycle(edge_to, step.vertex, step.target)
                        break
                    case StepKind.EXIT:
                        on_stack[step.vertex] = False
            if self._cycle is not None:
                break

        if self._cycle is None:
            logger.debug("No directed cycle in digraph with %d vertices", graph.vertex_count)
        else:
            logger.debug("Found directed cycle: %s", self._cycle)

        if config.verify:
            self._certify(graph)

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the analyzed digraph."""
        return self._vertex_count

    def has_cycle(self) -> bool:
        """Check whether the digraph has a directed cycle."""
        return self._cycle is not None

    def cycle(self) -> tuple[int, ...] | None:
        """Return a directed cycle, or None if the digraph is acyclic.

        The first and last vertices are the same, and every consecutive pair
        is an edge of the digraph.
        """
        return self._cycle

    def _certify(self, graph: Digraph) -> None:
        if self._cycle is None:
            return
        first, last = self._cycle[0], self._cycle[-1]
        if first != last:
            msg = f"cycle begins with {first} and ends with {last}"
            raise CertificationError(msg)
        for v, w in pairwise(self._cycle):
            if not graph.has_edge(v, w):
                msg = f"cycle {self._cycle} uses missing edge {v}->{w}"
                raise CertificationError(msg)


def _trace_cycle(edge_to: list[int], v: int, w: int) -> tuple[int, ...]:
    """Close the cycle formed by the back edge v->w.

    Follows parent links from v up to its ancestor w, then reverses the
    path so it reads w, ..., v and appends w to close it.
    """
    path = []
    x = v
    while x != w:
        path.append(x)
        x = edge_to[x]
    path.append(w)
    path.reverse()
    path.append(w)
    return tuple(path)
