"""Conversion of graphs and trees into plain data, JSON and edge tables."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List

import pandas as pd

from .graph import Edge, Graph
from .loader import EDGE_COLUMNS
from .tree import MinimumSpanningTree


def edge_to_dict(edge: Edge) -> Dict[str, int]:
    return {"src": edge.src, "dest": edge.dest, "weight": edge.weight}


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    return {
        "vertex_count": graph.vertex_count,
        "edges": [edge_to_dict(edge) for edge in graph.edges],
    }


def tree_to_dict(tree: MinimumSpanningTree) -> Dict[str, Any]:
    """Full structural state of `tree`: its graph, its edges and its vertices."""

    return {
        "original_graph": graph_to_dict(tree.graph),
        "mst_edges": [edge_to_dict(edge) for edge in tree.mst_edges],
        "vertices": sorted(tree.vertices),
    }


def tree_to_json(tree: MinimumSpanningTree) -> str:
    return json.dumps(tree_to_dict(tree), indent=2)


def edges_to_dataframe(edges: Iterable[Edge]) -> pd.DataFrame:
    rows: List[Dict[str, int]] = [edge_to_dict(edge) for edge in edges]
    return pd.DataFrame(rows, columns=list(EDGE_COLUMNS))


def save_tree(tree: MinimumSpanningTree, output_path: str | Path) -> None:
    """Write `tree` as JSON, or its edges as a CSV / Excel table, by suffix."""

    path = Path(output_path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        path.write_text(tree_to_json(tree) + "\n", encoding="utf-8")
        return
    if suffix == ".csv":
        edges_to_dataframe(tree.mst_edges).to_csv(path, index=False)
        return
    if suffix == ".xlsx":
        edges_to_dataframe(tree.mst_edges).to_excel(path, index=False)
        return
    raise ValueError(f"Unsupported output file format: '{suffix}'")
