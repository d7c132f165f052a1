from __future__ import annotations

import logging
from pathlib import Path

from collab_graph.errors import CollabGraphError
from collab_graph.graph import Graph
from collab_graph.models import ParseResult
from collab_graph.parser import EdgeParser

from .config import AlgorithmConfig, RuntimeConfig, load_algorithm_config, load_runtime_config
from .engine import GraphAlgorithmsEngine
from .models import AnalysisSnapshot
from .report import write_json_report
from .visualization import render_network_png, write_debug_visuals


class GraphAlgorithmsService:
    """One batch run: parse the dataset, analyze, report, and draw."""

    def __init__(
        self,
        algo_cfg: AlgorithmConfig | None = None,
        runtime_cfg: RuntimeConfig | None = None,
    ) -> None:
        self.algo_cfg = algo_cfg or load_algorithm_config()
        self.runtime_cfg = runtime_cfg or load_runtime_config()

        self.logger = logging.getLogger("graph-algorithms")
        self.parser = EdgeParser(self.runtime_cfg.comment_prefixes)
        self.engine = GraphAlgorithmsEngine(self.algo_cfg)
        self.last_parse: ParseResult | None = None
        self.graph: Graph | None = None

    def load_graph(self) -> Graph:
        result = self.parser.parse_file(self.runtime_cfg.dataset_path)
        self.last_parse = result
        graph = Graph.from_parse_result(result)
        self.logger.info(
            "graph built nodes=%d edges=%d duplicates=%d malformed=%d",
            graph.node_count(),
            graph.edge_count(),
            result.duplicate_edges,
            len(result.errors),
        )
        self.graph = graph
        return graph

    def visualize(self, graph: Graph, snapshot: AnalysisSnapshot) -> Path | None:
        limit = self.algo_cfg.visualization_max_nodes
        if 0 < limit < graph.node_count():
            self.logger.warning(
                "skipping network image: %d nodes exceeds visualization_max_nodes=%d",
                graph.node_count(),
                limit,
            )
            return None

        out_dir = Path(self.algo_cfg.visualization_dir)
        write_debug_visuals(graph, out_dir, snapshot.components)
        return render_network_png(
            graph,
            out_dir / "network.png",
            labeling=snapshot.components,
            node_scores=snapshot.degree.scores,
        )

    def run(self) -> AnalysisSnapshot:
        try:
            graph = self.load_graph()
            errors = len(self.last_parse.errors) if self.last_parse else 0
            snapshot = self.engine.analyze(graph, parse_errors=errors)

            if self.runtime_cfg.report_path:
                path = write_json_report(snapshot, self.runtime_cfg.report_path)
                self.logger.info("report written path=%s", path)

            if self.algo_cfg.visualization_enabled:
                self.visualize(graph, snapshot)
        except (CollabGraphError, OSError):
            raise
        except Exception:
            self.logger.exception("graph analysis run failed")
            raise
        return snapshot
