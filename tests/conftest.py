"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from graph import Graph


@pytest.fixture
def sample_graph() -> Graph:
    """Edges A-B, A-C, B-D, inserted in that order."""
    g = Graph()
    g.add_edge("A", "B")
    g.add_edge("A", "C")
    g.add_edge("B", "D")
    return g


@pytest.fixture
def cyclic_graph() -> Graph:
    """Square A-B-C-D-A with a chord A-C and a separate component X-Y."""
    g = Graph()
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    g.add_edge("C", "D")
    g.add_edge("D", "A")
    g.add_edge("A", "C")
    g.add_edge("X", "Y")
    return g


@pytest.fixture
def edge_list_file(tmp_path: Path) -> Path:
    """Well-formed two-line edge list."""
    path = tmp_path / "edges.txt"
    path.write_text("A B\nB C\n", encoding="utf-8")
    return path


@pytest.fixture
def app_client(monkeypatch):
    """Flask test client with no preloaded edge list and a clean graph store."""
    import config
    import main

    monkeypatch.setattr(config, "EDGE_LIST_PATH", None)
    monkeypatch.setattr(config, "STRICT_EDGE_LIST", False)
    main.GRAPHS.clear()
    main.app.config["TESTING"] = True
    with main.app.test_client() as client:
        yield client
    main.GRAPHS.clear()

