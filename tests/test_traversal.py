"""Tests for the shared depth-first traversal."""

import pytest

from dfsgraph import Digraph, OutOfRangeError, Step, StepKind, Traversal, depth_first

STRATEGIES = [Traversal.ITERATIVE, Traversal.RECURSIVE]


@pytest.mark.parametrize("strategy", STRATEGIES)
class TestDepthFirst:
    """Tests for the step sequence produced by depth_first."""

    def test_single_vertex(self, strategy: Traversal) -> None:
        marked = [False]
        steps = list(depth_first(Digraph(1), 0, marked, strategy))
        assert steps == [Step(StepKind.ENTER, 0), Step(StepKind.EXIT, 0)]
        assert marked == [True]

    def test_step_sequence(self, strategy: Traversal) -> None:
        # 0 -> 1 -> 2, 0 -> 2, 2 -> 0
        graph = Digraph.from_edges(3, [(0, 1), (1, 2), (0, 2), (2, 0)])
        steps = list(depth_first(graph, 0, [False] * 3, strategy))
        assert steps == [
            Step(StepKind.ENTER, 0),
            Step(StepKind.TREE, 0, 1),
            Step(StepKind.ENTER, 1),
            Step(StepKind.TREE, 1, 2),
            Step(StepKind.ENTER, 2),
            Step(StepKind.REVISIT, 2, 0),
            Step(StepKind.EXIT, 2),
            Step(StepKind.EXIT, 1),
            Step(StepKind.REVISIT, 0, 2),
            Step(StepKind.EXIT, 0),
        ]

    def test_skips_marked_vertices(self, strategy: Traversal) -> None:
        graph = Digraph.from_edges(3, [(0, 1), (0, 2)])
        marked = [False, True, False]
        entered = [s.vertex for s in depth_first(graph, 0, marked, strategy) if s.kind is StepKind.ENTER]
        assert entered == [0, 2]
        assert marked == [True, True, True]

    def test_only_reachable_vertices_marked(self, strategy: Traversal) -> None:
        graph = Digraph.from_edges(4, [(1, 2), (2, 3)])
        marked = [False] * 4
        list(depth_first(graph, 1, marked, strategy))
        assert marked == [False, True, True, True]

    def test_self_loop_is_revisit(self, strategy: Traversal) -> None:
        graph = Digraph.from_edges(1, [(0, 0)])
        steps = list(depth_first(graph, 0, [False], strategy))
        assert Step(StepKind.REVISIT, 0, 0) in steps

    def test_can_stop_early(self, strategy: Traversal) -> None:
        graph = Digraph.from_edges(4, [(0, 1), (1, 2), (2, 3)])
        marked = [False] * 4
        for step in depth_first(graph, 0, marked, strategy):
            if step.kind is StepKind.ENTER and step.vertex == 1:
                break
        assert marked == [True, True, False, False]

    def test_root_out_of_range(self, strategy: Traversal) -> None:
        with pytest.raises(OutOfRangeError):
            depth_first(Digraph(2), 2, [False, False], strategy)
