from __future__ import annotations

from dataclasses import dataclass, field

from .errors import MalformedLineError


@dataclass(frozen=True, slots=True, order=True)
class Edge:
    source: int
    target: int

    def __post_init__(self) -> None:
        if self.source == self.target:
            raise ValueError(f"self-loop on node {self.source} is not a valid edge")
        if self.source > self.target:
            raise ValueError("edge endpoints must be canonical (source < target); use Edge.of()")

    @classmethod
    def of(cls, a: int, b: int) -> "Edge":
        return cls(a, b) if a <= b else cls(b, a)


@dataclass(slots=True)
class ParseResult:
    edges: set[Edge] = field(default_factory=set)
    nodes: set[int] = field(default_factory=set)
    errors: list[MalformedLineError] = field(default_factory=list)
    lines_read: int = 0
    duplicate_edges: int = 0
    skipped_lines: int = 0

    @property
    def ok(self) -> bool:
        return not self.errors
