from __future__ import annotations

import logging

import pytest

from collab_graph.errors import MalformedLineError
from collab_graph.graph import Graph
from collab_graph.models import Edge
from collab_graph.parser import EdgeParser, parse_edge_line, parse_edge_lines


def test_parses_space_and_tab_separated_lines() -> None:
    result = parse_edge_lines(["1 2", "2\t3", "  3   4  "])

    assert result.edges == {Edge(1, 2), Edge(2, 3), Edge(3, 4)}
    assert result.nodes == {1, 2, 3, 4}
    assert result.errors == []


def test_skips_blank_and_comment_lines_without_error() -> None:
    result = parse_edge_lines(["# Directed graph: ca-GrQc.txt", "", "   ", "# FromNodeId\tToNodeId", "1 2"])

    assert result.edges == {Edge(1, 2)}
    assert result.skipped_lines == 4
    assert result.ok


def test_custom_comment_prefixes() -> None:
    result = EdgeParser(comment_prefixes=("%", "#")).parse_lines(["% konect header", "1 2"])
    assert result.ok
    assert result.edges == {Edge(1, 2)}


def test_malformed_line_is_recorded_and_does_not_change_counts() -> None:
    clean = parse_edge_lines(["1 2", "2 3"])
    noisy = parse_edge_lines(["1 2", "abc def", "2 3"])

    assert len(noisy.edges) == len(clean.edges)
    assert noisy.nodes == clean.nodes
    assert len(noisy.errors) == 1
    err = noisy.errors[0]
    assert isinstance(err, MalformedLineError)
    assert err.line_number == 2
    assert err.line == "abc def"


@pytest.mark.parametrize("line", ["1", "1 2 3", "1 x", "1.5 2", "1_000 2", "- 3"])
def test_bad_shapes_are_rejected(line: str) -> None:
    with pytest.raises(MalformedLineError):
        parse_edge_line(line, 1)


def test_self_loop_is_recorded_as_malformed() -> None:
    result = parse_edge_lines(["7 7", "1 2"])

    assert result.edges == {Edge(1, 2)}
    assert 7 not in result.nodes
    assert result.errors[0].reason == "self-loop"


def test_duplicate_lines_contribute_one_edge() -> None:
    result = parse_edge_lines(["1 2", "1 2", "2 1"])

    assert result.edges == {Edge(1, 2)}
    assert result.duplicate_edges == 2


def test_errors_are_logged_in_aggregate(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="collab_graph.parser"):
        parse_edge_lines(["x", "y z", "1 2"])

    warnings = [rec for rec in caplog.records if rec.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "2 malformed" in warnings[0].getMessage()


def test_parse_file(tmp_path) -> None:
    data = tmp_path / "ca-GrQc.txt"
    data.write_text("1\t2\n2\t3\n3\t1\n4\t5\n")

    result = EdgeParser().parse_file(data)
    graph = Graph.from_parse_result(result)

    assert graph.node_count() == 5
    assert graph.edge_count() == 4


def test_round_trip_reproduces_adjacency() -> None:
    original = parse_edge_lines(["3 1", "1 2", "2 3", "1 3", "9 4"])
    graph = Graph.from_parse_result(original)

    serialized = [f"{a} {b}" for a, b in graph.edges()]
    rebuilt = Graph.from_parse_result(parse_edge_lines(reversed(serialized)))

    assert list(rebuilt.nodes()) == list(graph.nodes())
    for node in graph.nodes():
        assert rebuilt.neighbors(node) == graph.neighbors(node)


def test_undecodable_bytes_are_recorded_as_malformed(tmp_path) -> None:
    data = tmp_path / "latin.txt"
    data.write_bytes(b"1 2\n\xff\xfe 3\n2 3\n")

    result = EdgeParser().parse_file(data)

    assert result.edges == {Edge(1, 2), Edge(2, 3)}
    assert len(result.errors) == 1
    assert result.errors[0].line_number == 2
