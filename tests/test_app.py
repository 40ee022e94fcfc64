"""
Tests for the Flask JSON API.
"""

import config


class TestIndex:

    def test_index_lists_algorithms(self, app_client):
        resp = app_client.get("/")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["vertices"] == 0
        assert data["edges"] == 0
        assert [a["key"] for a in data["algorithms"]] == ["dfs", "bfs"]


class TestGraphRoutes:

    def test_add_edge_and_dump(self, app_client):
        for start, end in [("A", "B"), ("A", "C"), ("B", "D")]:
            resp = app_client.post("/api/graph/edge", json={"start": start, "end": end})
            assert resp.status_code == 200

        data = app_client.get("/api/graph").get_json()
        assert data["vertices"] == {"A": ["B", "C"], "B": ["A", "D"], "C": ["A"], "D": ["B"]}
        assert data["text"] == "A [B, C]\nB [A, D]\nC [A]\nD [B]\n"

    def test_add_edge_requires_labels(self, app_client):
        resp = app_client.post("/api/graph/edge", json={"start": "A"})
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_import_text(self, app_client):
        resp = app_client.post("/api/graph/import", json={"text": "A B\nnope\nB C\n"})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["report"]["edges_added"] == 2
        assert data["report"]["skipped"] == [{"line_number": 2, "line": "nope"}]
        assert data["vertices"] == 3

    def test_import_strict_rejects(self, app_client):
        resp = app_client.post("/api/graph/import", json={"text": "A B\nnope\n", "strict": True})
        assert resp.status_code == 400
        assert resp.get_json()["line_number"] == 2

    def test_import_strict_must_be_boolean(self, app_client):
        resp = app_client.post("/api/graph/import", json={"text": "A B\nnope\n", "strict": "false"})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "'strict' must be true or false"

    def test_import_strict_false_skips(self, app_client):
        resp = app_client.post("/api/graph/import", json={"text": "A B\nnope\n", "strict": False})
        assert resp.status_code == 200
        assert resp.get_json()["report"]["edges_added"] == 1

    def test_load_strict_must_be_boolean(self, app_client, edge_list_file):
        resp = app_client.post("/api/graph/load", json={"path": str(edge_list_file), "strict": 1})
        assert resp.status_code == 400

    def test_load_file(self, app_client, edge_list_file):
        resp = app_client.post("/api/graph/load", json={"path": str(edge_list_file)})
        assert resp.status_code == 200
        assert resp.get_json()["edges"] == 2

    def test_load_missing_file(self, app_client, tmp_path):
        resp = app_client.post("/api/graph/load", json={"path": str(tmp_path / "missing.txt")})
        assert resp.status_code == 404
        assert "was not found" in resp.get_json()["error"]

    def test_load_invalid_utf8_file(self, app_client, tmp_path):
        path = tmp_path / "edges.txt"
        path.write_bytes(b"A B\n\xff\xfe C\n")
        resp = app_client.post("/api/graph/load", json={"path": str(path)})
        assert resp.status_code == 404
        assert "not valid utf-8" in resp.get_json()["error"]

    def test_load_without_path(self, app_client):
        resp = app_client.post("/api/graph/load", json={})
        assert resp.status_code == 400

    def test_clear(self, app_client):
        app_client.post("/api/graph/edge", json={"start": "A", "end": "B"})
        resp = app_client.post("/api/graph/clear")
        assert resp.get_json() == {"vertices": 0, "edges": 0}

    def test_preloaded_edge_list(self, app_client, edge_list_file, monkeypatch):
        monkeypatch.setattr(config, "EDGE_LIST_PATH", str(edge_list_file))
        app_client.post("/api/graph/clear")
        data = app_client.get("/api/graph").get_json()
        assert data["vertices"] == {"A": ["B"], "B": ["A", "C"], "C": ["B"]}


class TestTraverseRoute:

    def _build(self, client):
        client.post("/api/graph/import", json={"text": "A B\nA C\nB D"})

    def test_dfs(self, app_client):
        self._build(app_client)
        data = app_client.get("/api/traverse/dfs?start=A").get_json()
        assert data == {"algorithm": "dfs", "start": "A", "order": ["A", "B", "D", "C"]}

    def test_bfs(self, app_client):
        self._build(app_client)
        data = app_client.get("/api/traverse/bfs?start=A").get_json()
        assert data["order"] == ["A", "B", "C", "D"]

    def test_absent_start(self, app_client):
        self._build(app_client)
        data = app_client.get("/api/traverse/bfs?start=Z").get_json()
        assert data["order"] == []

    def test_missing_start(self, app_client):
        resp = app_client.get("/api/traverse/dfs")
        assert resp.status_code == 400

    def test_unknown_algorithm(self, app_client):
        resp = app_client.get("/api/traverse/dijkstra?start=A")
        assert resp.status_code == 404
        assert resp.get_json()["error"] == "Unknown algorithm 'dijkstra'"


class TestGraphStore:

    def test_cookieless_clients_do_not_grow_store(self, app_client, monkeypatch):
        import main

        monkeypatch.setattr(config, "MAX_GRAPHS", 10)
        for _ in range(50):
            with main.app.test_client() as client:
                assert client.get("/").status_code == 200
        assert len(main.GRAPHS) <= 10

    def test_recently_used_graph_survives_eviction(self, app_client, monkeypatch):
        import main

        monkeypatch.setattr(config, "MAX_GRAPHS", 3)
        app_client.post("/api/graph/edge", json={"start": "A", "end": "B"})
        for _ in range(5):
            with main.app.test_client() as client:
                client.get("/")
            # touching the graph keeps it at the fresh end of the store
            app_client.get("/")
        data = app_client.get("/api/graph").get_json()
        assert data["vertices"] == {"A": ["B"], "B": ["A"]}
