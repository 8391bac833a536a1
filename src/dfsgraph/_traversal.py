"""Depth-first traversal shared by the graph analyses.

The traversal is exposed as a generator of steps so each analysis can keep
its own auxiliary arrays (on-stack flags, parent links, counters) and react
to the steps it cares about. Closing the generator stops the search.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from ._config import Traversal

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ._digraph import Digraph


class StepKind(Enum):
    """What happened at a traversal step."""

    ENTER = auto()  # vertex visited for the first time
    TREE = auto()  # edge to an unvisited target, yielded before the target is entered
    REVISIT = auto()  # edge to a target that is already marked
    EXIT = auto()  # all of vertex's edges processed


@dataclass(frozen=True, slots=True)
class Step:
    """One traversal step.

    Attributes:
        kind: The kind of step.
        vertex: The vertex being entered, exited, or whose edge is followed.
        target: Destination of the edge for TREE and REVISIT steps, else None.

    """

    kind: StepKind
    vertex: int
    target: int | None = None


def depth_first(
    graph: Digraph,
    root: int,
    marked: list[bool],
    strategy: Traversal = Traversal.ITERATIVE,
) -> Iterator[Step]:
    """Search depth-first from root, marking every vertex it reaches.

    Adjacency lists are followed in insertion order. Vertices already set in
    ``marked`` are never entered, so calling this once per unmarked root
    covers the whole graph exactly once.

    Args:
        graph: The digraph to search.
        root: Start vertex. Must not be marked yet.
        marked: Per-vertex visited flags, owned and shared by the caller.
        strategy: Drive the search with an explicit stack or with recursion.

    Yields:
        Steps in visiting order. Both strategies yield identical sequences.

    Raises:
        OutOfRangeError: If root is out of range.

    """
    graph.adjacency(root)
    if strategy == Traversal.RECURSIVE:
        return _recursive(graph, root, marked)
    return _iterative(graph, root, marked)


def _recursive(graph: Digraph, v: int, marked: list[bool]) -> Iterator[Step]:
    marked[v] = True
    yield Step(StepKind.ENTER, v)
    for w in graph.adjacency(v):
        if marked[w]:
            yield Step(StepKind.REVISIT, v, w)
        else:
            yield Step(StepKind.TREE, v, w)
            yield from _recursive(graph, w, marked)
    yield Step(StepKind.EXIT, v)


def _iterative(graph: Digraph, root: int, marked: list[bool]) -> Iterator[Step]:
    marked[root] = True
    yield Step(StepKind.ENTER, root)
    # Each frame resumes its vertex's adjacency iteration where it left off
    stack: list[tuple[int, Iterator[int]]] = [(root, iter(graph.adjacency(root)))]

    while stack:
        v, neighbors = stack[-1]
        for w in neighbors:
            if marked[w]:
                yield Step(StepKind.REVISIT, v, w)
                continue
            yield Step(StepKind.TREE, v, w)
            marked[w] = True
            yield Step(StepKind.ENTER, w)
            stack.append((w, iter(graph.adjacency(w))))
            break
        else:
            stack.pop()
            yield Step(StepKind.EXIT, v)
