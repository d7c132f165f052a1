from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(slots=True)
class AlgorithmConfig:
    top_k: int
    eigenvector_max_iterations: int
    eigenvector_tolerance: float
    betweenness_samples: int
    betweenness_seed: int
    visualization_enabled: bool
    visualization_dir: str
    visualization_max_nodes: int


@dataclass(slots=True)
class RuntimeConfig:
    dataset_path: str
    comment_prefixes: tuple[str, ...]
    report_path: str | None
    log_level: str


def load_algorithm_config() -> AlgorithmConfig:
    return AlgorithmConfig(
        top_k=int(os.getenv("ALGO_TOP_K", "10")),
        eigenvector_max_iterations=int(os.getenv("ALGO_EIGENVECTOR_MAX_ITERATIONS", "100")),
        eigenvector_tolerance=float(os.getenv("ALGO_EIGENVECTOR_TOLERANCE", "1e-6")),
        betweenness_samples=int(os.getenv("ALGO_BETWEENNESS_SAMPLES", "0")),
        betweenness_seed=int(os.getenv("ALGO_BETWEENNESS_SEED", "42")),
        visualization_enabled=os.getenv("ALGO_VISUALIZATION_ENABLED", "true").lower() == "true",
        visualization_dir=os.getenv("ALGO_VISUALIZATION_DIR", "./output"),
        visualization_max_nodes=int(os.getenv("ALGO_VISUALIZATION_MAX_NODES", "0")),
    )


def load_runtime_config() -> RuntimeConfig:
    raw_prefixes = os.getenv("COLLAB_COMMENT_PREFIXES", "#")
    prefixes = tuple(token.strip() for token in raw_prefixes.split(",") if token.strip())
    return RuntimeConfig(
        dataset_path=os.getenv("COLLAB_DATASET_PATH", ""),
        comment_prefixes=prefixes or ("#",),
        report_path=os.getenv("COLLAB_REPORT_PATH") or None,
        log_level=os.getenv("COLLAB_LOG_LEVEL", "INFO").upper(),
    )
