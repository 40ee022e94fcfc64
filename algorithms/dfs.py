"""
dfs.py — Depth-First Traversal
==============================
Generator-based DFS using an explicit stack (no Python recursion limit issues).

The stack holds one neighbour iterator per open vertex, so the order is
exactly that of the textbook recursive version: visit a vertex, then fully
explore each unvisited neighbour in adjacency order before the next one.
"""

from typing import Generator, Iterator, List, Set

from graph import Graph, Vertex


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS(graph, source):",                  # 0
    "    visited ← {source}",                   # 1
    "    emit source",                          # 2
    "    for neighbour in adj(source):",        # 3
    "        if neighbour not visited:",        # 4
    "            DFS(graph, neighbour)",        # 5
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def dfs(graph: Graph, source: str) -> Generator[Vertex, None, None]:
    """
    Yields every vertex reachable from `source`, depth-first.

    Yields nothing when `source` is not in the graph.
    """
    start = graph.get_vertex(source)
    if start is None:
        return

    visited: Set[str] = {source}
    yield start

    stack: List[Iterator[Vertex]] = [iter(graph.neighbours(source))]
    while stack:
        for nbr in stack[-1]:
            if nbr.label not in visited:
                visited.add(nbr.label)
                yield nbr
                # descend; the parent's iterator resumes once this one is drained
                stack.append(iter(graph.neighbours(nbr.label)))
                break
        else:
            stack.pop()
