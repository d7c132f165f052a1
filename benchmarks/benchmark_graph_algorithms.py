from __future__ import annotations

import random
import time

from collab_graph.graph import Graph
from graph_algorithms.config import AlgorithmConfig
from graph_algorithms.engine import GraphAlgorithmsEngine


def make_engine() -> GraphAlgorithmsEngine:
    cfg = AlgorithmConfig(
        top_k=10,
        eigenvector_max_iterations=100,
        eigenvector_tolerance=1e-6,
        betweenness_samples=0,
        betweenness_seed=42,
        visualization_enabled=False,
        visualization_dir="./output",
        visualization_max_nodes=0,
    )
    return GraphAlgorithmsEngine(cfg)


def make_edges(nodes: int, papers: int) -> list[tuple[int, int]]:
    # each paper links a small author team pairwise, like a co-authorship dataset
    edges = []
    for _ in range(papers):
        team = random.sample(range(nodes), random.randint(2, 4))
        edges.extend((team[a], team[b]) for a in range(len(team)) for b in range(a + 1, len(team)))
    return edges


def main(nodes: int = 5000, papers: int = 4000) -> None:
    random.seed(42)
    edges = make_edges(nodes, papers)

    start = time.perf_counter()
    graph = Graph.build(edges)
    build_sec = time.perf_counter() - start

    start = time.perf_counter()
    snap = make_engine().analyze(graph)
    elapsed = time.perf_counter() - start

    print(f"node_count={snap.node_count}")
    print(f"edge_count={snap.edge_count}")
    print(f"components={snap.component_count}")
    print(f"build_sec={build_sec:.4f}")
    print(f"analyze_sec={elapsed:.4f}")
    for name, ms in snap.timings_ms.items():
        print(f"{name}_ms={ms}")
    print(f"eigenvector_iterations={snap.eigenvector.iterations} converged={snap.eigenvector.converged}")


if __name__ == "__main__":
    main()
