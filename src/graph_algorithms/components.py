from __future__ import annotations

from collections import deque

from collab_graph.graph import Graph

from .models import ComponentLabeling


def find_components(graph: Graph) -> ComponentLabeling:
    """Label connected components by BFS, seeding from the lowest unvisited id.

    Ids are dense from 0 and only meaningful within this labeling.
    """
    labels: dict[int, int] = {}
    next_id = 0
    for start in graph.nodes():
        if start in labels:
            continue
        labels[start] = next_id
        q = deque([start])
        while q:
            cur = q.popleft()
            for nei in graph.neighbors(cur):
                if nei in labels:
                    continue
                labels[nei] = next_id
                q.append(nei)
        next_id += 1
    return ComponentLabeling(labels=labels, count=next_id)
