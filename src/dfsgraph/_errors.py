"""Exceptions raised by the graph library."""


class OutOfRangeError(ValueError):
    """Raised when a vertex index falls outside ``[0, vertex_count)``.

    Also raised when a digraph is created with a negative vertex count, in
    which case ``vertex`` is ``None``.
    """

    def __init__(self, vertex: int | None, vertex_count: int) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        if vertex is None:
            msg = f"Number of vertices must be non-negative, got {vertex_count}"
        else:
            msg = f"vertex {vertex} is not between 0 and {vertex_count - 1}"
        super().__init__(msg)


class CertificationError(RuntimeError):
    """Raised when an analysis fails its own post-construction check.

    This indicates a bug in the library, not bad input.
    """


def require_vertex(vertex: int, vertex_count: int) -> None:
    """Raise OutOfRangeError unless ``0 <= vertex < vertex_count``."""
    if vertex < 0 or vertex >= vertex_count:
        raise OutOfRangeError(vertex, vertex_count)
