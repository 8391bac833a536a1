"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Self


class ConfigError(Exception):
    """Error in dfsgraph configuration."""


class Traversal(StrEnum):
    """Strategy used to drive depth-first search.

    Both strategies visit vertices and edges in exactly the same order.
    """

    def __new__(cls, value: str, doc: str = "") -> Self:
        """Create a new enum member with a docstring."""
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj

    ITERATIVE = "iterative", "Explicit stack of (vertex, adjacency iterator) frames; no depth limit"
    RECURSIVE = "recursive", "Plain recursion; bounded by the interpreter recursion limit"


@dataclass(slots=True, frozen=True)
class DfsConfig:
    """Settings shared by every analysis.

    Attributes:
        traversal: How depth-first search is driven.
        verify: Run post-construction self-checks on every analysis.

    """

    traversal: Traversal = Traversal.ITERATIVE
    verify: bool = True


_KNOWN_KEYS = frozenset({"traversal", "verify"})


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_traversal(value: object) -> Traversal:
    if not isinstance(value, str):
        msg = "Invalid [tool.dfsgraph].traversal: expected string"
        raise ConfigError(msg)
    try:
        return Traversal(value.lower())
    except ValueError as e:
        choices = ", ".join(f"'{t.value}'" for t in Traversal)
        msg = f"Invalid [tool.dfsgraph].traversal '{value}'. Expected one of: {choices}"
        raise ConfigError(msg) from e


def load_config(pyproject_path: Path) -> DfsConfig:
    """Load and validate [tool.dfsgraph] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed DfsConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("dfsgraph", {})
    if not section:
        return DfsConfig()

    unknown = sorted(set(section) - _KNOWN_KEYS)
    if unknown:
        msg = f"Unknown [tool.dfsgraph] keys: {', '.join(unknown)}"
        raise ConfigError(msg)

    traversal = Traversal.ITERATIVE
    if "traversal" in section:
        traversal = _parse_traversal(section["traversal"])

    verify = True
    if "verify" in section:
        verify = section["verify"]
        if not isinstance(verify, bool):
            msg = "Invalid [tool.dfsgraph].verify: expected boolean"
            raise ConfigError(msg)

    return DfsConfig(traversal=traversal, verify=verify)


def get_config() -> DfsConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        DfsConfig (defaults if no pyproject.toml or no [tool.dfsgraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return DfsConfig()
    return load_config(pyproject_path)
