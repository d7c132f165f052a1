from __future__ import annotations


class CollabGraphError(Exception):
    """Base class for collaboration graph errors."""


class MalformedLineError(CollabGraphError):
    """A dataset line that does not describe a valid edge. Recorded, never fatal."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason}: {line!r}")


class UnknownNodeError(CollabGraphError, KeyError):
    def __init__(self, node: int) -> None:
        self.node = node
        super().__init__(node)

    def __str__(self) -> str:
        return f"node {self.node!r} is not in the graph"


class EmptyGraphError(CollabGraphError):
    """No nodes survived parsing, so there is nothing to rank."""


class NonConvergenceWarning(UserWarning):
    """Eigenvector iteration hit its cap before meeting the tolerance."""
