"""Convenience helpers for running MST maintenance end-to-end."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .graph import Graph, VertexOutOfRangeError
from .loader import GraphFormatError, load_graph
from .pipeline import MSTMaintainer, MSTMaintainerConfig, MSTMaintainerResult


def maintain_file(
    input_path: str | Path,
    output_path: str | Path | None,
    config: Optional[MSTMaintainerConfig] = None,
) -> MSTMaintainerResult | None:
    """Load the graph at `input_path`, run the rounds and write the resulting tree."""

    input_path = Path(input_path)

    try:
        graph = load_graph(input_path)
    except FileNotFoundError:
        print(f"ERROR: Input file not found at '{input_path}'.")
        return None
    except VertexOutOfRangeError as exc:
        print(f"ERROR: Invalid edge in '{input_path}': {exc}")
        return None
    except GraphFormatError as exc:
        print(f"ERROR: Malformed graph in '{input_path}': {exc}")
        return None
    except ValueError:
        print(f"ERROR: Unsupported file format for '{input_path}'. Please provide a JSON, CSV or Excel file.")
        return None

    return maintain_graph(graph, output_path, config)


def maintain_graph(
    graph: Graph,
    output_path: str | Path | None,
    config: Optional[MSTMaintainerConfig] = None,
) -> MSTMaintainerResult | None:
    maintainer = MSTMaintainer(config or MSTMaintainerConfig())
    try:
        return maintainer.run(graph, output_path)
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return None
