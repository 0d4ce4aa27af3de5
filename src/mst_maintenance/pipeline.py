"""Repeated remove / split / reconnect rounds over a minimum spanning tree."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import numpy as np

try:
    from tqdm import tqdm

    _TQDM_AVAILABLE = True
except ImportError:  # pragma: no cover - optional dependency
    _TQDM_AVAILABLE = False

from .graph import Edge, Graph
from .serialization import save_tree
from .tree import MinimumSpanningTree


@dataclass
class PerturbationStep:
    """Outcome of one remove / reconnect round."""

    round: int
    removed_edge: Optional[Edge]
    connecting_edge: Optional[Edge]
    total_weight: int

    @property
    def reconnected(self) -> bool:
        return self.removed_edge is not None and self.connecting_edge is not None


@dataclass
class MSTMaintainerStats:
    """Summary metrics for an MST maintenance run."""

    vertex_count: int
    graph_edges: int
    tree_edges: int
    initial_weight: int
    final_weight: int
    rounds_completed: int
    rounds_skipped: int
    runtime_seconds: float


@dataclass
class MSTMaintainerResult:
    """Result bundle returned by :class:`MSTMaintainer`."""

    tree: MinimumSpanningTree
    steps: List[PerturbationStep]
    stats: MSTMaintainerStats


@dataclass
class MSTMaintainerConfig:
    """Configuration parameters for :class:`MSTMaintainer`."""

    rounds: int = 1
    seed: int | None = None
    use_tqdm: bool | None = None
    verbose: bool = True

    def __post_init__(self) -> None:
        if self.rounds < 0:
            raise ValueError("rounds must be non-negative")


class MSTMaintainer:
    """Build a minimum spanning tree and keep it minimal across edge removals."""

    def __init__(
        self,
        config: MSTMaintainerConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config or MSTMaintainerConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

    def build(self, graph: Graph) -> MinimumSpanningTree:
        return MinimumSpanningTree.from_graph(graph, rng=self.rng)

    @staticmethod
    def perturb(tree: MinimumSpanningTree, round_number: int = 1) -> Tuple[MinimumSpanningTree, PerturbationStep]:
        """Run one round on a copy of `tree`.

        Returns the reconnected tree, or `tree` itself when the round had to be
        skipped: the tree is empty, the removal did not leave exactly two
        components covering the tree, or no graph edge joins them.
        """

        working = tree.copy()
        removed = working.remove_edge_in_middle_range()
        if removed is None:
            return tree, PerturbationStep(round_number, None, None, tree.total_weight)

        first, second = working.split_into_components()
        # a forest splits into more than two parts; merging two would drop the rest
        if first.vertices | second.vertices != tree.vertices:
            return tree, PerturbationStep(round_number, removed, None, tree.total_weight)

        connecting = first.find_min_edge_between(second)
        if connecting is None:
            return tree, PerturbationStep(round_number, removed, None, tree.total_weight)

        merged = first.union_with(second, connecting)
        return merged, PerturbationStep(round_number, removed, connecting, merged.total_weight)

    def run(self, graph: Graph, output_path: str | Path | None = None) -> MSTMaintainerResult:
        """Build the tree, run the configured rounds, optionally save, and return the result."""

        verbose = self.config.verbose
        overall_start_time = time.time()
        if verbose:
            print("--- MST Maintenance Started ---")
            print("\n1. Building minimum spanning tree...")

        t0 = time.time()
        tree = self.build(graph)
        initial_weight = tree.total_weight
        if verbose:
            print(
                f"   Graph has {graph.vertex_count} vertices and {len(graph)} edges; "
                f"tree has {len(tree)} edges of total weight {initial_weight}."
            )
            print(f"   Done in {time.time() - t0:.2f}s")

        t0 = time.time()
        if verbose:
            print(f"2. Running {self.config.rounds} remove/reconnect round(s)...")
        steps: List[PerturbationStep] = []
        rounds: Iterable[int] = range(1, self.config.rounds + 1)
        if self.config.rounds and self._use_tqdm:
            rounds = tqdm(rounds, total=self.config.rounds, desc="   Rounds", unit="round")
        for round_number in rounds:
            tree, step = self.perturb(tree, round_number)
            steps.append(step)
            if verbose and not self._use_tqdm:
                print(f"   {self._describe(step)}")
        skipped = sum(1 for step in steps if not step.reconnected)
        if verbose:
            print(f"   Reconnected {len(steps) - skipped} round(s), skipped {skipped}.")
            print(f"   Done in {time.time() - t0:.2f}s")

        if output_path is not None:
            t0 = time.time()
            output_str = str(output_path)
            if verbose:
                print("3. Saving resulting tree...")
            save_tree(tree, output_str)
            if verbose:
                print(f"   Results saved to '{output_str}'")
                print(f"   Done in {time.time() - t0:.2f}s")

        elapsed = time.time() - overall_start_time
        stats = MSTMaintainerStats(
            vertex_count=graph.vertex_count,
            graph_edges=len(graph),
            tree_edges=len(tree),
            initial_weight=initial_weight,
            final_weight=tree.total_weight,
            rounds_completed=len(steps) - skipped,
            rounds_skipped=skipped,
            runtime_seconds=elapsed,
        )

        if verbose:
            print("\n--- Results Summary ---")
            print(f"   - Tree edges: {stats.tree_edges}")
            print(f"   - Weight: {stats.initial_weight} -> {stats.final_weight}")
            print(f"\n--- MST Maintenance Finished in {elapsed:.2f} seconds ---")

        return MSTMaintainerResult(tree=tree, steps=steps, stats=stats)

    @property
    def _use_tqdm(self) -> bool:
        if self.config.use_tqdm is not None:
            return self.config.use_tqdm and _TQDM_AVAILABLE
        return _TQDM_AVAILABLE

    @staticmethod
    def _describe(step: PerturbationStep) -> str:
        if step.removed_edge is None:
            return f"Round {step.round}: tree is empty, nothing to remove."
        if step.connecting_edge is None:
            return f"Round {step.round}: removed {step.removed_edge}, no reconnecting edge found."
        return (
            f"Round {step.round}: removed {step.removed_edge}, "
            f"reconnected with {step.connecting_edge} (weight {step.total_weight})."
        )


__all__ = [
    "MSTMaintainer",
    "MSTMaintainerConfig",
    "MSTMaintainerResult",
    "MSTMaintainerStats",
    "PerturbationStep",
]
