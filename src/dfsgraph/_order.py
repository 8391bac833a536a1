"""Depth-first preorder and postorder numbering."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._config import DfsConfig
from ._errors import CertificationError, require_vertex
from ._traversal import StepKind, depth_first

if TYPE_CHECKING:
    from ._digraph import Digraph

logger = logging.getLogger(__name__)


class DepthFirstOrder:
    """Preorder, postorder and reverse postorder of a digraph.

    Depth-first search runs from every unvisited vertex in index order. A
    vertex gets its preorder number when first visited and its postorder
    number once all vertices reachable from it have been finished.

    Attributes are computed once at construction; the returned sequences
    are immutable tuples.

    Example:
        >>> from dfsgraph import Digraph
        >>> dfs = DepthFirstOrder(Digraph.from_edges(3, [(0, 1), (0, 2)]))
        >>> dfs.preorder(), dfs.postorder(), dfs.reverse_postorder()
        ((0, 1, 2), (1, 2, 0), (0, 2, 1))

    """

    __slots__ = ("_post", "_postorder", "_pre", "_preorder", "_vertex_count")

    def __init__(self, graph: Digraph, *, config: DfsConfig | None = None) -> None:
        config = config or DfsConfig()
        self._vertex_count = graph.vertex_count

        pre = [0] * graph.vertex_count
        post = [0] * graph.vertex_count
        preorder: list[int] = []
        postorder: list[int] = []
        marked = [False] * graph.vertex_count

        for root in range(graph.vertex_count):
            if marked[root]:
                continue
            for step in depth_first(graph, root, marked, config.traversal):
                if step.kind is StepKind.ENTER:
                    pre[step.vertex] = len(preorder)
                    preorder.append(step.vertex)
                elif step.kind is StepKind.EXIT:
                    post[step.vertex] = len(postorder)
                    postorder.append(step.vertex)

        self._pre = tuple(pre)
        self._post = tuple(post)
        self._preorder = tuple(preorder)
        self._postorder = tuple(postorder)
        logger.debug("Computed depth-first order over %d vertices", graph.vertex_count)

        if config.verify:
            self._certify()

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the analyzed digraph."""
        return self._vertex_count

    def preorder_rank(self, v: int) -> int:
        """Position of v in preorder.

        Raises:
            OutOfRangeError: If v is out of range.

        """
        require_vertex(v, self._vertex_count)
        return self._pre[v]

    def postorder_rank(self, v: int) -> int:
        """Position of v in postorder.

        Raises:
            OutOfRangeError: If v is out of range.

        """
        require_vertex(v, self._vertex_count)
        return self._post[v]

    def preorder(self) -> tuple[int, ...]:
        """Vertices in the order they were first visited."""
        return self._preorder

    def postorder(self) -> tuple[int, ...]:
        """Vertices in the order they were finished."""
        return self._postorder

    def reverse_postorder(self) -> tuple[int, ...]:
        """Postorder read back to front."""
        return self._postorder[::-1]

    def _certify(self) -> None:
        for rank, v in enumerate(self._preorder):
            if self._pre[v] != rank:
                msg = f"preorder rank of {v} is {self._pre[v]}, expected {rank}"
                raise CertificationError(msg)
        for rank, v in enumerate(self._postorder):
            if self._post[v] != rank:
                msg = f"postorder rank of {v} is {self._post[v]}, expected {rank}"
                raise CertificationError(msg)
