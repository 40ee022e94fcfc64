"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every traversal the graph API knows about.

    from algorithms import REGISTRY, get_algorithm, run_traversal

REGISTRY is a dict:
    {
        "dfs": AlgoInfo(key, label, fn, pseudocode, …),
        …
    }

Adding a traversal is: write the generator, add one entry here.
"""

from dataclasses import dataclass
from typing import Callable, List, Dict, Optional

from graph import Graph, Vertex, UnknownAlgorithmError

# ---------------------------------------------------------------------------
# Import all algorithm modules
# ---------------------------------------------------------------------------
from algorithms.bfs import bfs as _bfs, PSEUDOCODE as _bfs_pc
from algorithms.dfs import dfs as _dfs, PSEUDOCODE as _dfs_pc


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str          # registry key, e.g. "bfs"
    label:            str          # human label, e.g. "Breadth-First Search"
    fn:               Callable     # the generator function
    pseudocode:       List[str]
    complexity_time:  str = ""
    complexity_space: str = ""
    description:      str = ""

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "pseudocode":       self.pseudocode,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Fully explores each neighbour before moving to the next.",
    ),

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Visits every vertex at one hop distance before the next.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def run_traversal(graph: Graph, key: str, source: str) -> List[Vertex]:
    """Run the registered traversal `key` from `source` and collect the order."""
    info = REGISTRY.get(key)
    if info is None:
        raise UnknownAlgorithmError(key)
    return list(info.fn(graph, source))


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "run_traversal",
]
