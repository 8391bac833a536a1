"""Validated contract for anything that supplies a digraph's shape."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Self

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from ._digraph import Digraph


class GraphSource(BaseModel):
    """Vertex count plus an ordered list of (source, target) edge pairs.

    This is what a loader (file reader, database query, API response) hands
    to :meth:`Digraph.from_source`. Pydantic checks the shape; endpoint
    ranges are checked by the digraph when the source is materialized.

    Example:
        >>> source = GraphSource.model_validate({"vertex_count": 2, "edges": [[0, 1]]})
        >>> source.edges
        [(0, 1)]

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    vertex_count: Annotated[int, Field(ge=0, strict=True)]
    edges: list[tuple[int, int]] = Field(default_factory=list)

    @classmethod
    def from_digraph(cls, graph: Digraph) -> Self:
        """Snapshot a digraph's vertex count and edges in adjacency order."""
        return cls(vertex_count=graph.vertex_count, edges=list(graph.edges()))
