"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Vertex
    from graph import LoadReport, GraphError, SourceNotFoundError, MalformedLineError
"""

from graph.errors import GraphError, SourceNotFoundError, MalformedLineError, UnknownAlgorithmError
from graph.vertex import Vertex
from graph.loader import LoadReport
from graph.graph  import Graph

__all__ = [
    "Vertex",
    "Graph",
    "LoadReport",
    "GraphError",
    "SourceNotFoundError",
    "MalformedLineError",
    "UnknownAlgorithmError",
]
