from .centrality import betweenness, degree, degree_centrality, eigenvector_centrality, top_k
from .components import find_components
from .engine import GraphAlgorithmsEngine
from .service import GraphAlgorithmsService

__all__ = [
    "GraphAlgorithmsEngine",
    "GraphAlgorithmsService",
    "betweenness",
    "degree",
    "degree_centrality",
    "eigenvector_centrality",
    "find_components",
    "top_k",
]
