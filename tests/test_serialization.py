import json

import pytest

from mst_maintenance.graph import reference_graph
from mst_maintenance.loader import load_graph
from mst_maintenance.serialization import edges_to_dataframe, save_tree, tree_to_dict, tree_to_json
from mst_maintenance.tree import MinimumSpanningTree


def _tree():
    return MinimumSpanningTree.from_graph(reference_graph())


def test_tree_to_dict_layout():
    document = tree_to_dict(_tree())
    assert set(document) == {"original_graph", "mst_edges", "vertices"}
    assert document["original_graph"]["vertex_count"] == 9
    assert len(document["original_graph"]["edges"]) == 14
    assert document["mst_edges"][0] == {"src": 6, "dest": 7, "weight": 1}
    assert document["vertices"] == list(range(9))


def test_tree_to_json_is_parseable():
    assert json.loads(tree_to_json(_tree())) == tree_to_dict(_tree())


def test_edges_to_dataframe_columns():
    frame = edges_to_dataframe(_tree().mst_edges)
    assert list(frame.columns) == ["src", "dest", "weight"]
    assert frame["weight"].sum() == 37


def test_saved_edge_table_loads_back(tmp_path):
    path = tmp_path / "tree.csv"
    save_tree(_tree(), path)
    graph = load_graph(path)
    assert set(graph.edges) == set(_tree().mst_edges)


def test_save_xlsx(tmp_path):
    path = tmp_path / "tree.xlsx"
    save_tree(_tree(), path)
    assert len(load_graph(path)) == 8


def test_save_unsupported_suffix(tmp_path):
    with pytest.raises(ValueError):
        save_tree(_tree(), tmp_path / "tree.yaml")
