from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from collab_graph.errors import CollabGraphError

from .config import load_algorithm_config, load_runtime_config
from .report import format_console_report
from .service import GraphAlgorithmsService


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="collab-centrality",
        description="Centrality metrics for an undirected collaboration edge list.",
    )
    parser.add_argument("dataset", nargs="?", help="path to a '<node> <node>' edge list")
    parser.add_argument("--top-k", type=int, help="entries per ranking (default 10)")
    parser.add_argument("--report", help="write a JSON report to this path")
    parser.add_argument("--output-dir", help="directory for network.png and graph.dot/json")
    parser.add_argument("--no-visualization", action="store_true", help="skip drawing the network")
    parser.add_argument("--betweenness-samples", type=int, help="BFS sources to sample (0 = all)")
    parser.add_argument("--max-iterations", type=int, help="eigenvector iteration cap")
    parser.add_argument("--tolerance", type=float, help="eigenvector convergence tolerance")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="logging level (default INFO)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    algo_cfg = load_algorithm_config()
    runtime_cfg = load_runtime_config()

    algo_overrides = {
        "top_k": args.top_k,
        "visualization_dir": args.output_dir,
        "betweenness_samples": args.betweenness_samples,
        "eigenvector_max_iterations": args.max_iterations,
        "eigenvector_tolerance": args.tolerance,
    }
    algo_cfg = replace(algo_cfg, **{key: val for key, val in algo_overrides.items() if val is not None})
    if args.no_visualization:
        algo_cfg = replace(algo_cfg, visualization_enabled=False)

    runtime_overrides = {"dataset_path": args.dataset, "report_path": args.report, "log_level": args.log_level}
    runtime_cfg = replace(runtime_cfg, **{key: val for key, val in runtime_overrides.items() if val is not None})

    if runtime_cfg.log_level not in LOG_LEVELS:
        build_parser().error(f"invalid log level {runtime_cfg.log_level!r}; choose from {', '.join(LOG_LEVELS)}")

    logging.basicConfig(
        level=runtime_cfg.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger = logging.getLogger("graph-algorithms")

    if not runtime_cfg.dataset_path:
        logger.error("no dataset given; pass a path or set COLLAB_DATASET_PATH")
        return 2

    try:
        snapshot = GraphAlgorithmsService(algo_cfg, runtime_cfg).run()
    except (CollabGraphError, OSError) as exc:
        logger.error("run failed: %s", exc)
        return 1

    print(format_console_report(snapshot))
    return 0


if __name__ == "__main__":
    sys.exit(main())
