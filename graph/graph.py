"""
graph.py — Graph Container
==========================
Single source of truth for the graph.  The traversal algorithms and the
web API both talk to this object.

Responsibilities:
  1. Own every Vertex, keyed by label       (insert-if-absent on add_edge)
  2. Adjacency queries                      (neighbours, get_vertex, …)
  3. Bulk load from edge-list text / files  (see graph.loader)
  4. Traversal entry points                 (depth-first, breadth-first)

Design decisions:
  - Vertices live in a plain dict keyed by label for O(1) lookup.  A
    vertex's adjacency stores labels, so this dict is the only place
    holding Vertex references.
  - Undirected: add_edge always links both directions.
  - Traversals keep their visited set local to the call.  Nothing on the
    vertices changes, so no reset pass is needed afterwards and two
    traversals over the same graph cannot interfere.
"""

import logging
from contextlib import closing
from typing import Dict, Iterable, List, Optional

from graph.vertex import Vertex
from graph.errors import SourceNotFoundError
from graph.loader import LoadReport, iter_edges, iter_edge_lines

logger = logging.getLogger(__name__)


class Graph:
    """
    Attributes:
        vertices : {label: Vertex}
    """

    def __init__(self):
        self.vertices: Dict[str, Vertex] = {}

    # ==================================================================
    # VERTEX ACCESS
    # ==================================================================
    def get_vertex(self, label: str) -> Optional[Vertex]:
        return self.vertices.get(label)

    def has_vertex(self, label: str) -> bool:
        return label in self.vertices

    def labels(self) -> List[str]:
        return list(self.vertices.keys())

    def neighbours(self, label: str) -> List[Vertex]:
        """Return the Vertex objects adjacent to `label`, in adjacency order."""
        vertex = self.vertices.get(label)
        if vertex is None:
            return []
        return [self.vertices[nbr] for nbr in vertex.adjacent]

    # ==================================================================
    # EDGES
    # ==================================================================
    def _ensure_vertex(self, label: str) -> Vertex:
        vertex = self.vertices.get(label)
        if vertex is None:
            vertex = Vertex(label)
            self.vertices[label] = vertex
        return vertex

    def add_edge(self, start_label: str, end_label: str) -> None:
        """
        Add an undirected edge, creating either vertex if it is missing.

        Existing vertices keep their adjacency; adding the same edge twice
        (in either direction) changes nothing.
        """
        start = self._ensure_vertex(start_label)
        end   = self._ensure_vertex(end_label)
        start.add_edge(end)
        end.add_edge(start)
        logger.debug(f"Edge {start_label!r} -- {end_label!r}")

    def add_edges_from_lines(
        self,
        lines: Iterable[str],
        strict: bool = False,
        source: str = "<lines>",
    ) -> LoadReport:
        """
        Add one edge per well-formed line of `lines`.

        Malformed lines are skipped and listed in the report unless
        `strict` is set, in which case MalformedLineError propagates.
        Edges added before the failure stay in the graph.
        """
        report = LoadReport(source=source)
        for start_label, end_label in iter_edges(lines, report, strict=strict):
            self.add_edge(start_label, end_label)
            report.edges_added += 1

        logger.info(
            f"Loaded {report.edges_added} edge(s) from {source}"
            + (f", skipped {report.skipped_count} malformed line(s)" if report.skipped else "")
        )
        return report

    def add_edges_from_file(self, path: str, strict: bool = False) -> LoadReport:
        """
        Read an edge-list file and add every edge it lists.

        An unreadable file does not raise: the returned report carries the
        SourceNotFoundError in `error` and the graph keeps whatever it
        already had (including edges read before a mid-file read error).
        The file is closed as soon as the load ends, strict failures included.
        """
        try:
            with closing(iter_edge_lines(path)) as lines:
                return self.add_edges_from_lines(lines, strict=strict, source=str(path))
        except SourceNotFoundError as e:
            logger.warning(str(e))
            return LoadReport(source=str(path), error=e)

    # ==================================================================
    # TRAVERSALS
    # ==================================================================
    def depth_first_traversal(self, start_label: str) -> List[Vertex]:
        """Vertices reachable from `start_label` in depth-first order ([] if absent)."""
        from algorithms.dfs import dfs
        return list(dfs(self, start_label))

    def breadth_first_traversal(self, start_label: str) -> List[Vertex]:
        """Vertices reachable from `start_label` in breadth-first order ([] if absent)."""
        from algorithms.bfs import bfs
        return list(bfs(self, start_label))

    # ==================================================================
    # UTILITY
    # ==================================================================
    def vertex_count(self) -> int:
        return len(self.vertices)

    def edge_count(self) -> int:
        """Undirected edges, each counted once; a self-loop counts as one."""
        ends = 0
        loops = 0
        for vertex in self.vertices.values():
            ends += vertex.degree()
            if vertex.has_neighbour(vertex.label):
                loops += 1
        return (ends - loops) // 2 + loops

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, label: object) -> bool:
        return label in self.vertices

    def __str__(self) -> str:
        return "".join(f"{v}\n" for v in self.vertices.values())

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count()}, edges={self.edge_count()})"
