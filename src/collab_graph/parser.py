from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import MalformedLineError
from .models import Edge, ParseResult

logger = logging.getLogger(__name__)

DEFAULT_COMMENT_PREFIXES: tuple[str, ...] = ("#",)


def _parse_node(token: str) -> int | None:
    # int() also accepts "1_000" and unicode digits; dataset ids are plain ascii integers.
    digits = token[1:] if token[:1] in "+-" else token
    if not digits or not digits.isascii() or not digits.isdigit():
        return None
    return int(token)


def parse_edge_line(line: str, line_number: int) -> Edge:
    """Parse one `<int> <int>` line into a canonical edge.

    Raises MalformedLineError for anything else, self-loops included.
    """
    tokens = line.split()
    if len(tokens) != 2:
        raise MalformedLineError(line_number, line, f"expected 2 tokens, got {len(tokens)}")

    a, b = (_parse_node(token) for token in tokens)
    if a is None or b is None:
        raise MalformedLineError(line_number, line, "node ids must be integers")
    if a == b:
        raise MalformedLineError(line_number, line, "self-loop")
    return Edge.of(a, b)


def parse_edge_lines(
    lines: Iterable[str],
    comment_prefixes: tuple[str, ...] = DEFAULT_COMMENT_PREFIXES,
) -> ParseResult:
    result = ParseResult()
    for line_number, raw in enumerate(lines, start=1):
        result.lines_read += 1
        line = raw.strip()
        if not line or line.startswith(comment_prefixes):
            result.skipped_lines += 1
            continue

        try:
            edge = parse_edge_line(line, line_number)
        except MalformedLineError as exc:
            result.errors.append(exc)
            continue

        if edge in result.edges:
            result.duplicate_edges += 1
            continue
        result.edges.add(edge)
        result.nodes.add(edge.source)
        result.nodes.add(edge.target)

    _report_errors(result)
    return result


def _report_errors(result: ParseResult) -> None:
    if not result.errors:
        return
    logger.warning(
        "skipped %d malformed line(s) out of %d read",
        len(result.errors),
        result.lines_read,
    )
    for err in result.errors:
        logger.debug("malformed %s", err)


class EdgeParser:
    """Reads `<node> <node>` collaboration edge lists."""

    def __init__(self, comment_prefixes: tuple[str, ...] = DEFAULT_COMMENT_PREFIXES) -> None:
        self.comment_prefixes = tuple(comment_prefixes)

    def parse_lines(self, lines: Iterable[str]) -> ParseResult:
        return parse_edge_lines(lines, self.comment_prefixes)

    def parse_file(self, path: str | Path) -> ParseResult:
        path = Path(path)
        logger.info("parsing edge list path=%s", path)
        # undecodable bytes become U+FFFD so the line is recorded as malformed
        with path.open("r", encoding="utf-8", errors="replace") as handle:
            return self.parse_lines(handle)
