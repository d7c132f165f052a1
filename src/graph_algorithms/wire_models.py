from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .models import AnalysisSnapshot, CentralityScores, EigenvectorResult, RankedEntry


class WireModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class RankedEntryValue(WireModel):
    node: int
    score: float

    @classmethod
    def from_domain(cls, entry: RankedEntry) -> "RankedEntryValue":
        return cls(node=entry.node, score=float(entry.score))


class CentralityValue(WireModel):
    name: str
    approximate: bool = False
    top: list[RankedEntryValue] = Field(default_factory=list)
    metadata: dict[str, float | int | bool | str] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, scores: CentralityScores, k: int) -> "CentralityValue":
        return cls(
            name=scores.name,
            approximate=scores.approximate,
            top=[RankedEntryValue.from_domain(entry) for entry in scores.top_k(k)],
            metadata=dict(scores.metadata),
        )


class EigenvectorValue(CentralityValue):
    converged: bool
    iterations: int
    delta: float

    @classmethod
    def from_result(cls, result: EigenvectorResult, k: int) -> "EigenvectorValue":
        scores = result.as_centrality()
        return cls(
            name=scores.name,
            top=[RankedEntryValue.from_domain(entry) for entry in scores.top_k(k)],
            metadata=dict(scores.metadata),
            converged=result.converged,
            iterations=result.iterations,
            delta=result.delta,
        )


class AnalysisReportValue(WireModel):
    node_count: int
    edge_count: int
    component_count: int
    largest_component_size: int
    parse_errors: int = 0
    top_k: int
    degree: CentralityValue
    betweenness: CentralityValue
    eigenvector: EigenvectorValue
    timings_ms: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, snapshot: AnalysisSnapshot) -> "AnalysisReportValue":
        k = snapshot.top_k
        return cls(
            node_count=snapshot.node_count,
            edge_count=snapshot.edge_count,
            component_count=snapshot.component_count,
            largest_component_size=snapshot.largest_component_size,
            parse_errors=snapshot.parse_errors,
            top_k=k,
            degree=CentralityValue.from_domain(snapshot.degree, k),
            betweenness=CentralityValue.from_domain(snapshot.betweenness, k),
            eigenvector=EigenvectorValue.from_result(snapshot.eigenvector, k),
            timings_ms=dict(snapshot.timings_ms),
        )
