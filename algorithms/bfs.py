"""
bfs.py — Breadth-First Traversal
================================
Generator-based BFS.  Vertices are marked visited when they are enqueued,
not when they are dequeued, so a vertex reachable through two
predecessors is queued only once.
"""

from collections import deque
from typing import Deque, Generator, List, Set

from graph import Graph, Vertex


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, source):",                  # 0
    "    queue ← [source]",                     # 1
    "    visited ← {source}",                   # 2
    "    while queue is not empty:",            # 3
    "        node ← queue.dequeue()",           # 4
    "        emit node",                        # 5
    "        for neighbour in adj(node):",      # 6
    "            if neighbour not visited:",    # 7
    "                visited.add(neighbour)",   # 8
    "                queue.enqueue(neighbour)", # 9
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(graph: Graph, source: str) -> Generator[Vertex, None, None]:
    """
    Yields every vertex reachable from `source`, layer by layer.

    Yields nothing when `source` is not in the graph.
    """
    start = graph.get_vertex(source)
    if start is None:
        return

    visited: Set[str]      = {source}
    queue:   Deque[Vertex] = deque([start])

    while queue:
        vertex = queue.popleft()
        yield vertex

        for nbr in graph.neighbours(vertex.label):
            if nbr.label not in visited:
                visited.add(nbr.label)
                queue.append(nbr)
