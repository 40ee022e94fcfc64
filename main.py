"""
main.py — graphwalk Flask App
=============================
JSON API over an undirected graph.

Routes:
  GET  /                       – summary + registered algorithms
  GET  /api/graph              – adjacency of every vertex + text dump
  POST /api/graph/edge         – add one edge
  POST /api/graph/import       – add edges from edge-list text
  POST /api/graph/load         – add edges from an edge-list file
  POST /api/graph/clear        – start over with an empty graph
  GET  /api/traverse/<algo>    – dfs / bfs order from ?start=<label>

State management:
  Each browser session carries only an opaque graph id.  The graphs
  themselves stay in the process-local GRAPHS dict (in-memory, lost on
  restart), capped at config.MAX_GRAPHS with least-recently-used eviction.
"""

import logging
import secrets
from collections import OrderedDict
from typing import Optional

from flask import Flask, request, jsonify, session

import config
from graph import Graph, GraphError, SourceNotFoundError, MalformedLineError, UnknownAlgorithmError
from algorithms import list_algorithms, run_traversal

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = config.SECRET_KEY

GRAPHS: "OrderedDict[str, Graph]" = OrderedDict()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def new_graph() -> Graph:
    """Empty graph, preloaded from EDGE_LIST_PATH when one is configured."""
    g = Graph()
    if config.EDGE_LIST_PATH:
        report = g.add_edges_from_file(config.EDGE_LIST_PATH, strict=config.STRICT_EDGE_LIST)
        if not report.ok:
            logger.warning(f"Starting with an empty graph: {report.error}")
    return g


def get_graph() -> Graph:
    """Return the session's graph, creating it on first use."""
    graph_id = session.get("graph_id")
    if graph_id is not None and graph_id in GRAPHS:
        GRAPHS.move_to_end(graph_id)
        return GRAPHS[graph_id]

    graph_id = secrets.token_hex(16)
    session["graph_id"] = graph_id
    GRAPHS[graph_id] = new_graph()
    logger.debug(f"Created graph {graph_id}")
    while len(GRAPHS) > config.MAX_GRAPHS:
        evicted, _ = GRAPHS.popitem(last=False)
        logger.info(f"Evicted graph {evicted} (store full at {config.MAX_GRAPHS})")
    return GRAPHS[graph_id]


def reset_graph() -> Graph:
    graph_id = session.pop("graph_id", None)
    if graph_id is not None:
        GRAPHS.pop(graph_id, None)
    return get_graph()


def request_data() -> dict:
    return request.get_json(silent=True) or {}


def strict_flag(data: dict) -> Optional[bool]:
    """The request's "strict" value, or None when it is not a JSON boolean."""
    value = data.get("strict", config.STRICT_EDGE_LIST)
    return value if isinstance(value, bool) else None


def graph_summary(g: Graph) -> dict:
    return {"vertices": g.vertex_count(), "edges": g.edge_count()}


# ---------------------------------------------------------------------------
# Error Handlers
# ---------------------------------------------------------------------------
@app.errorhandler(SourceNotFoundError)
def handle_source_not_found(e: SourceNotFoundError):
    return jsonify({"error": str(e)}), 404


@app.errorhandler(UnknownAlgorithmError)
def handle_unknown_algorithm(e: UnknownAlgorithmError):
    return jsonify({"error": str(e)}), 404


@app.errorhandler(MalformedLineError)
def handle_malformed_line(e: MalformedLineError):
    return jsonify({"error": str(e), "line_number": e.line_number}), 400


@app.errorhandler(GraphError)
def handle_graph_error(e: GraphError):
    return jsonify({"error": str(e)}), 400


# ---------------------------------------------------------------------------
# Main Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    g = get_graph()
    summary = graph_summary(g)
    summary["algorithms"] = [a.to_dict() for a in list_algorithms()]
    return jsonify(summary)


# ---------------------------------------------------------------------------
# API: Graph
# ---------------------------------------------------------------------------
@app.route("/api/graph", methods=["GET"])
def api_graph():
    g = get_graph()
    return jsonify({
        "vertices": {label: list(v.adjacent) for label, v in g.vertices.items()},
        "text":     str(g),
    })


@app.route("/api/graph/edge", methods=["POST"])
def api_graph_edge():
    data  = request_data()
    start = data.get("start")
    end   = data.get("end")
    if not isinstance(start, str) or not isinstance(end, str):
        return jsonify({"error": "Both 'start' and 'end' labels are required"}), 400

    g = get_graph()
    g.add_edge(start, end)
    return jsonify(graph_summary(g))


@app.route("/api/graph/import", methods=["POST"])
def api_graph_import():
    data = request_data()
    text = data.get("text", "")
    if not isinstance(text, str):
        return jsonify({"error": "'text' must be a string"}), 400

    strict = strict_flag(data)
    if strict is None:
        return jsonify({"error": "'strict' must be true or false"}), 400

    g = get_graph()
    report = g.add_edges_from_lines(text.splitlines(), strict=strict, source="<import>")
    return jsonify({"report": report.to_dict(), **graph_summary(g)})


@app.route("/api/graph/load", methods=["POST"])
def api_graph_load():
    data = request_data()
    path: Optional[str] = data.get("path") or config.EDGE_LIST_PATH
    if not path:
        return jsonify({"error": "No 'path' given and GRAPHWALK_EDGE_LIST is not set"}), 400
    strict = strict_flag(data)
    if strict is None:
        return jsonify({"error": "'strict' must be true or false"}), 400

    g = get_graph()
    report = g.add_edges_from_file(path, strict=strict)
    if not report.ok:
        raise report.error
    return jsonify({"report": report.to_dict(), **graph_summary(g)})


@app.route("/api/graph/clear", methods=["POST"])
def api_graph_clear():
    g = reset_graph()
    return jsonify(graph_summary(g))


# ---------------------------------------------------------------------------
# API: Traversal
# ---------------------------------------------------------------------------
@app.route("/api/traverse/<algo_key>", methods=["GET"])
def api_traverse(algo_key: str):
    start = request.args.get("start")
    if start is None:
        return jsonify({"error": "Query parameter 'start' is required"}), 400

    order = run_traversal(get_graph(), algo_key, start)
    return jsonify({
        "algorithm": algo_key,
        "start":     start,
        "order":     [v.label for v in order],
    })


if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    logger.info(f"Starting graphwalk on http://{config.HOST}:{config.PORT}")
    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT)
