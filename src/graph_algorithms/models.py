from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class RankedEntry:
    node: int
    score: float


def rank(scores: dict[int, float], k: int | None = None) -> list[RankedEntry]:
    """Score descending, ties broken by ascending node id."""
    ordered = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
    if k is not None:
        ordered = ordered[: max(0, k)]
    return [RankedEntry(node=node, score=score) for node, score in ordered]


@dataclass(slots=True)
class ComponentLabeling:
    labels: dict[int, int]
    count: int

    def component_of(self, node: int) -> int:
        return self.labels[node]

    def members(self, component_id: int) -> list[int]:
        return sorted(node for node, label in self.labels.items() if label == component_id)

    def sizes(self) -> dict[int, int]:
        out: dict[int, int] = {}
        for label in self.labels.values():
            out[label] = out.get(label, 0) + 1
        return out

    def largest(self) -> int:
        sizes = self.sizes()
        return max(sizes.values()) if sizes else 0


@dataclass(slots=True)
class CentralityScores:
    name: str
    scores: dict[int, float]
    approximate: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def top_k(self, k: int = 10) -> list[RankedEntry]:
        return rank(self.scores, k)

    def __getitem__(self, node: int) -> float:
        return self.scores[node]


@dataclass(slots=True)
class EigenvectorResult:
    scores: dict[int, float]
    iterations: int
    converged: bool
    delta: float

    def as_centrality(self) -> CentralityScores:
        return CentralityScores(
            name="eigenvector",
            scores=self.scores,
            metadata={"iterations": self.iterations, "converged": self.converged, "delta": self.delta},
        )


@dataclass(slots=True)
class AnalysisSnapshot:
    node_count: int
    edge_count: int
    component_count: int
    largest_component_size: int
    degree: CentralityScores
    betweenness: CentralityScores
    eigenvector: EigenvectorResult
    components: ComponentLabeling
    top_k: int
    parse_errors: int = 0
    timings_ms: dict[str, int] = field(default_factory=dict)
