from __future__ import annotations

import logging
import math
import random
import warnings
from collections import Counter, deque
from collections.abc import Iterable

from collab_graph.errors import NonConvergenceWarning, UnknownNodeError
from collab_graph.graph import Graph

from .models import CentralityScores, EigenvectorResult, RankedEntry, rank

logger = logging.getLogger("graph-algorithms")


def top_k(scores: CentralityScores | dict[int, float], k: int = 10) -> list[RankedEntry]:
    if isinstance(scores, CentralityScores):
        scores = scores.scores
    return rank(scores, k)


# -- degree ------------------------------------------------------------------


def degree(graph: Graph, node: int) -> int:
    return graph.degree(node)


def degree_centrality(graph: Graph) -> CentralityScores:
    return CentralityScores(name="degree", scores={node: graph.degree(node) for node in graph.nodes()})


# -- approximate betweenness -------------------------------------------------


def select_sources(graph: Graph, samples: int = 0, seed: int = 42) -> list[int]:
    """All nodes ascending, or a seeded random subset (still ascending) when samples > 0."""
    nodes = list(graph.nodes())
    if samples <= 0 or samples >= len(nodes):
        return nodes
    return sorted(random.Random(seed).sample(nodes, k=samples))


def source_pass_through(ordered_neighbors: dict[int, tuple[int, ...]], source: int) -> Counter[int]:
    """Pass-through counts for one BFS source.

    The BFS visits neighbours in ascending id order and keeps the first
    discoverer of each node as its parent, which fixes one canonical shortest
    path from the source to every reachable node. A node is credited once for
    each target whose canonical path runs through it, i.e. its number of
    strict descendants in that tree. The source and leaves get nothing.
    """
    parent: dict[int, int] = {}
    order = [source]
    seen = {source}
    q = deque([source])
    while q:
        cur = q.popleft()
        for nei in ordered_neighbors[cur]:
            if nei in seen:
                continue
            seen.add(nei)
            parent[nei] = cur
            order.append(nei)
            q.append(nei)

    below: Counter[int] = Counter()
    for node in reversed(order[1:]):
        p = parent[node]
        if p != source:
            below[p] += below[node] + 1
    return below


def betweenness(
    graph: Graph,
    sources: Iterable[int] | None = None,
) -> CentralityScores:
    """Approximate betweenness from repeated single-source BFS traversals.

    Each (source, target) pair credits the interior nodes of one canonical
    shortest path (see source_pass_through), not the fractional dependency
    of exact Brandes accounting. Scores are integer counts over ordered
    pairs; unreachable pairs contribute nothing.
    """
    ordered_neighbors = {node: tuple(sorted(graph.neighbors(node))) for node in graph.nodes()}
    source_list = list(graph.nodes()) if sources is None else sorted(set(sources))

    score: Counter[int] = Counter()
    for s in source_list:
        if s not in ordered_neighbors:
            raise UnknownNodeError(s)
        score.update(source_pass_through(ordered_neighbors, s))

    return CentralityScores(
        name="betweenness",
        scores={node: score.get(node, 0) for node in graph.nodes()},
        approximate=True,
        metadata={
            "sources": len(source_list),
            "sampled": len(source_list) < graph.node_count(),
            "rule": "canonical-bfs-path-pass-through",
        },
    )


# -- eigenvector -------------------------------------------------------------


def eigenvector_centrality(
    graph: Graph,
    max_iterations: int = 100,
    tolerance: float = 1e-6,
) -> EigenvectorResult:
    """Power iteration: x <- A x, then divide by the L2 norm.

    Stops once the L2 norm of the change between successive vectors drops
    below `tolerance`. Hitting `max_iterations` first returns the last vector
    with converged=False and a NonConvergenceWarning. Components converge
    independently, so magnitudes are not comparable across components.
    """
    nodes = list(graph.nodes())
    if not nodes:
        return EigenvectorResult(scores={}, iterations=0, converged=True, delta=0.0)

    x = {node: 1.0 for node in nodes}
    delta = math.inf
    iterations = 0
    for iterations in range(1, max(1, max_iterations) + 1):
        nxt = {node: float(sum(x[nei] for nei in graph.neighbors(node))) for node in nodes}
        norm = math.sqrt(sum(v * v for v in nxt.values()))
        if norm == 0.0:
            # edgeless graph; every score is zero and stays zero
            return EigenvectorResult(scores=nxt, iterations=iterations, converged=True, delta=0.0)

        for node in nodes:
            nxt[node] /= norm
        delta = math.sqrt(sum((nxt[node] - x[node]) ** 2 for node in nodes))
        x = nxt
        if delta < tolerance:
            return EigenvectorResult(scores=x, iterations=iterations, converged=True, delta=delta)

    message = (
        f"eigenvector centrality did not converge in {iterations} iterations "
        f"(delta={delta:.3g}, tolerance={tolerance:.3g}); returning best-effort scores"
    )
    logger.warning(message)
    warnings.warn(message, NonConvergenceWarning, stacklevel=2)
    return EigenvectorResult(scores=x, iterations=iterations, converged=False, delta=delta)
