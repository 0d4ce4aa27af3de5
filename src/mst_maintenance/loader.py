"""Graph loading from JSON documents and edge tables."""

from __future__ import annotations

import json
import numbers
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from .graph import Graph

EDGE_COLUMNS = ("src", "dest", "weight")


class GraphFormatError(ValueError):
    """Raised when a graph description cannot be interpreted."""


def load_graph(path: str | Path, vertex_count: Optional[int] = None) -> Graph:
    """Load a graph from a ``.json``, ``.csv`` or ``.xlsx`` file.

    `vertex_count` overrides the count stored in the file (JSON) or inferred
    from the largest vertex id (edge tables).
    """

    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        with path.open("r", encoding="utf-8") as handle:
            try:
                document = json.load(handle)
            except json.JSONDecodeError as exc:
                raise GraphFormatError(f"Invalid JSON in '{path}': {exc}") from exc
        return graph_from_dict(document, vertex_count)
    if suffix == ".csv":
        return graph_from_dataframe(pd.read_csv(path), vertex_count)
    if suffix == ".xlsx":
        return graph_from_dataframe(pd.read_excel(path, engine="openpyxl"), vertex_count)
    raise ValueError(f"Unsupported input file format: '{suffix}'")


def graph_from_dict(document: Any, vertex_count: Optional[int] = None) -> Graph:
    if not isinstance(document, Mapping):
        raise GraphFormatError("Graph document must be a JSON object")
    edges = document.get("edges")
    if not isinstance(edges, list):
        raise GraphFormatError("Graph document needs an 'edges' list")

    triples = [_edge_triple(item) for item in edges]
    if vertex_count is None:
        vertex_count = document.get("vertex_count")
    if vertex_count is None:
        vertex_count = _inferred_vertex_count(triples)
    return _build(_as_int(vertex_count, "vertex_count"), triples)


def graph_from_dataframe(dataframe: pd.DataFrame, vertex_count: Optional[int] = None) -> Graph:
    missing = [column for column in EDGE_COLUMNS if column not in dataframe.columns]
    if missing:
        raise GraphFormatError(f"Edge table is missing columns: {', '.join(missing)}")

    table = dataframe.loc[:, list(EDGE_COLUMNS)]
    if table.isna().to_numpy().any():
        raise GraphFormatError("Edge table contains empty cells")
    triples = [
        tuple(_as_int(value, column) for value, column in zip(row, EDGE_COLUMNS))
        for row in table.itertuples(index=False, name=None)
    ]
    if vertex_count is None:
        vertex_count = _inferred_vertex_count(triples)
    return _build(vertex_count, triples)


def _edge_triple(item: Any) -> tuple[int, int, int]:
    if isinstance(item, Mapping):
        try:
            values = [item[column] for column in EDGE_COLUMNS]
        except KeyError as exc:
            raise GraphFormatError(f"Edge {item!r} is missing key {exc.args[0]!r}") from exc
    elif isinstance(item, (list, tuple)) and len(item) == 3:
        values = list(item)
    else:
        raise GraphFormatError(f"Edge {item!r} must be [src, dest, weight] or an object")
    src, dest, weight = (_as_int(value, column) for value, column in zip(values, EDGE_COLUMNS))
    return src, dest, weight


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise GraphFormatError(f"'{name}' must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise GraphFormatError(f"'{name}' must be an integer, got {value!r}") from exc
    if not number.is_integer():
        raise GraphFormatError(f"'{name}' must be an integer, got {value!r}")
    return int(number)


def _inferred_vertex_count(triples: Iterable[tuple[int, int, int]]) -> int:
    return max((max(src, dest) for src, dest, _ in triples), default=-1) + 1


def _build(vertex_count: int, triples: Iterable[tuple[int, int, int]]) -> Graph:
    if vertex_count < 0:
        raise GraphFormatError("vertex_count must be non-negative")
    graph = Graph(vertex_count)
    for src, dest, weight in triples:
        graph.add_edge(src, dest, weight)
    return graph
