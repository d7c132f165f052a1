from __future__ import annotations

from pathlib import Path

from .models import AnalysisSnapshot, CentralityScores
from .wire_models import AnalysisReportValue


def _format_score(score: float) -> str:
    if isinstance(score, float):
        return f"{score:.6f}"
    return str(score)


def _section(header: str, scores: CentralityScores, k: int) -> list[str]:
    lines = [header]
    for entry in scores.top_k(k):
        lines.append(f"Author {entry.node}: {_format_score(entry.score)}")
    return lines


def format_console_report(snapshot: AnalysisSnapshot) -> str:
    k = snapshot.top_k
    lines = [
        f"Graph loaded with {snapshot.node_count} nodes and {snapshot.edge_count} edges.",
        f"Number of connected components: {snapshot.component_count}",
        "",
    ]
    lines += _section("Top authors by degree centrality:", snapshot.degree, k)
    lines.append("")
    lines += _section("Top authors by betweenness centrality (approximate):", snapshot.betweenness, k)
    lines.append("")
    lines += _section("Top authors by eigenvector centrality:", snapshot.eigenvector.as_centrality(), k)
    if not snapshot.eigenvector.converged:
        lines.append(
            f"(eigenvector iteration stopped at {snapshot.eigenvector.iterations} iterations without converging)"
        )
    return "\n".join(lines)


def write_json_report(snapshot: AnalysisSnapshot, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(AnalysisReportValue.from_domain(snapshot).model_dump_json(indent=2))
    return path
