"""Directed graphs with depth-first cycle detection, ordering and topological sort."""

__all__ = [
    "AdjacencyView",
    "CertificationError",
    "ConfigError",
    "DepthFirstOrder",
    "DfsConfig",
    "Digraph",
    "DirectedCycle",
    "GraphSource",
    "OutOfRangeError",
    "Step",
    "StepKind",
    "Topological",
    "Traversal",
    "depth_first",
    "find_pyproject_toml",
    "get_config",
    "load_config",
]

from ._config import ConfigError, DfsConfig, Traversal, find_pyproject_toml, get_config, load_config
from ._cycle import DirectedCycle
from ._digraph import AdjacencyView, Digraph
from ._errors import CertificationError, OutOfRangeError
from ._order import DepthFirstOrder
from ._source import GraphSource
from ._topological import Topological
from ._traversal import Step, StepKind, depth_first
