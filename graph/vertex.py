"""
vertex.py — Graph Vertex
========================
A named node: immutable label, ordered adjacency, transient visited flag.

Design decisions:
  - Adjacency holds neighbour *labels*, not Vertex references.  The owning
    Graph is the arena that resolves a label back to its single Vertex, so
    there are no reference cycles between vertices.
  - Labels are unique inside a Graph, which makes the label the vertex's
    identity there; the duplicate check on insert relies on that.
  - `visited` is kept for callers that want a scratch marker.  The
    traversal algorithms track visits in their own local set and never
    touch it.
"""

from typing import List, Tuple


class Vertex:
    """
    Attributes:
        label   : Name of the vertex (read-only).
        visited : Scratch flag, False unless a caller sets it.
        _adj    : Neighbour labels in edge-insertion order, no duplicates.
    """

    __slots__ = ("_label", "_adj", "visited")

    def __init__(self, label: str):
        self._label:  str       = label
        self._adj:    List[str] = []
        self.visited: bool      = False

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def label(self) -> str:
        return self._label

    @property
    def adjacent(self) -> Tuple[str, ...]:
        """Neighbour labels in insertion order (a snapshot, not the live list)."""
        return tuple(self._adj)

    def degree(self) -> int:
        return len(self._adj)

    def has_neighbour(self, label: str) -> bool:
        return label in self._adj

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add_edge(self, other: "Vertex") -> None:
        """
        Add `other` as a neighbour unless it is already one.

        Only this vertex changes; the caller links the reverse direction.
        Neighbours are matched by label, so two distinct Vertex objects
        with the same label count as the same neighbour.
        """
        if other.label not in self._adj:
            self._adj.append(other.label)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"{self._label} [{', '.join(self._adj)}]"

    def __repr__(self) -> str:
        return f"Vertex(label={self._label!r}, degree={len(self._adj)})"
