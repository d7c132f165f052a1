from __future__ import annotations

import json
import logging
import math
from pathlib import Path

from matplotlib.collections import LineCollection
from matplotlib.figure import Figure

from collab_graph.graph import Graph

from .models import ComponentLabeling

logger = logging.getLogger("graph-algorithms")

Position = tuple[float, float]


def circular_layout(
    graph: Graph,
    labeling: ComponentLabeling | None = None,
    radius: float = 10.0,
) -> dict[int, Position]:
    """Place nodes evenly on a circle, grouped by component then by id."""
    if labeling is not None:
        ordered = sorted(graph.nodes(), key=lambda node: (labeling.labels.get(node, -1), node))
    else:
        ordered = list(graph.nodes())
    n = len(ordered)
    if n == 1:
        return {ordered[0]: (0.0, 0.0)}
    return {
        node: (radius * math.cos(2.0 * math.pi * i / n), radius * math.sin(2.0 * math.pi * i / n))
        for i, node in enumerate(ordered)
    }


def edge_segments(graph: Graph, positions: dict[int, Position]) -> list[tuple[Position, Position]]:
    return [(positions[a], positions[b]) for a, b in graph.edges()]


def render_network_png(
    graph: Graph,
    out_path: str | Path,
    labeling: ComponentLabeling | None = None,
    node_scores: dict[int, float] | None = None,
    title: str = "Collaboration Network",
) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    positions = circular_layout(graph, labeling)
    fig = Figure(figsize=(10.24, 7.68), dpi=100)
    ax = fig.add_subplot()
    ax.set_title(title)
    ax.set_aspect("equal")
    ax.axis("off")

    ax.add_collection(LineCollection(edge_segments(graph, positions), colors="black", linewidths=0.2, alpha=0.5))

    nodes = list(positions)
    xs = [positions[node][0] for node in nodes]
    ys = [positions[node][1] for node in nodes]
    if labeling is not None:
        color_kwargs = {"c": [labeling.labels.get(node, 0) for node in nodes], "cmap": "tab20"}
    else:
        color_kwargs = {"color": "tab:blue"}
    if node_scores:
        peak = max(node_scores.values()) or 1.0
        sizes = [4.0 + 40.0 * node_scores.get(node, 0.0) / peak for node in nodes]
    else:
        sizes = 4.0
    ax.scatter(xs, ys, s=sizes, zorder=2, **color_kwargs)
    ax.autoscale_view()

    fig.savefig(out_path)
    logger.info("network image written path=%s nodes=%d edges=%d", out_path, graph.node_count(), graph.edge_count())
    return out_path


def write_debug_visuals(graph: Graph, out_dir: str | Path, labeling: ComponentLabeling | None = None) -> tuple[Path, Path]:
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    payload = {
        "nodes": [
            {"id": node, "degree": graph.degree(node), "component": labeling.labels.get(node) if labeling else None}
            for node in graph.nodes()
        ],
        "edges": [{"source": a, "target": b} for a, b in graph.edges()],
    }
    json_path = out / "graph.json"
    json_path.write_text(json.dumps(payload, indent=2))

    # Graphviz DOT for quick inspection.
    dot_lines = ["graph G {"]
    for node in graph.nodes():
        comp = labeling.labels.get(node) if labeling else None
        label = f"{node}\\ncomp={comp}" if comp is not None else f"{node}"
        dot_lines.append(f'  "{node}" [label="{label}"];')
    for a, b in graph.edges():
        dot_lines.append(f'  "{a}" -- "{b}";')
    dot_lines.append("}")
    dot_path = out / "graph.dot"
    dot_path.write_text("\n".join(dot_lines))
    return json_path, dot_path
