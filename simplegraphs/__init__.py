# simplegraphs/__init__.py
"""simplegraphs: simple graphs and digraphs with a small algorithm suite."""
from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "core": "simplegraphs.core",
    "algorithms": "simplegraphs.algorithms",
    "errors": "simplegraphs.errors",
    "utils": "simplegraphs.utils",
    "connectivity": "simplegraphs.algorithms.connectivity",
    "coloring": "simplegraphs.algorithms.coloring",
    "euler": "simplegraphs.algorithms.euler",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Stores
    "Graph": ("simplegraphs.core.graph", "Graph"),
    "DiGraph": ("simplegraphs.core.digraph", "DiGraph"),
    "simplify": ("simplegraphs.core.digraph", "simplify"),
    "EdgeType": ("simplegraphs.core.structure", "EdgeType"),
    "VertexStore": ("simplegraphs.core.structure", "VertexStore"),

    # Errors
    "GraphError": ("simplegraphs.errors", "GraphError"),
    "UnknownVertex": ("simplegraphs.errors", "UnknownVertex"),
    "UnknownEdge": ("simplegraphs.errors", "UnknownEdge"),
    "TypeMismatch": ("simplegraphs.errors", "TypeMismatch"),
    "InvalidSize": ("simplegraphs.errors", "InvalidSize"),
    "NotBipartite": ("simplegraphs.errors", "NotBipartite"),

    # Connectivity
    "components": ("simplegraphs.algorithms.connectivity", "components"),
    "num_components": ("simplegraphs.algorithms.connectivity", "num_components"),
    "is_connected": ("simplegraphs.algorithms.connectivity", "is_connected"),
    "spanning_forest": ("simplegraphs.algorithms.connectivity", "spanning_forest"),
    "shortest_path": ("simplegraphs.algorithms.connectivity", "shortest_path"),
    "distances": ("simplegraphs.algorithms.connectivity", "distances"),
    "distance": ("simplegraphs.algorithms.connectivity", "distance"),
    "all_distances": ("simplegraphs.algorithms.connectivity", "all_distances"),
    "distance_matrix": ("simplegraphs.algorithms.connectivity", "distance_matrix"),
    "diameter": ("simplegraphs.algorithms.connectivity", "diameter"),
    "is_cut_edge": ("simplegraphs.algorithms.connectivity", "is_cut_edge"),
    "cut_edges": ("simplegraphs.algorithms.connectivity", "cut_edges"),

    # Euler
    "euler_trail": ("simplegraphs.algorithms.euler", "euler_trail"),

    # Coloring
    "two_color": ("simplegraphs.algorithms.coloring", "two_color"),
    "bipartition": ("simplegraphs.algorithms.coloring", "bipartition"),
    "greedy_color": ("simplegraphs.algorithms.coloring", "greedy_color"),
    "random_greedy_color": ("simplegraphs.algorithms.coloring", "random_greedy_color"),
    "chromatic_bound": ("simplegraphs.algorithms.coloring", "chromatic_bound"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("simplegraphs")
except PackageNotFoundError:
    __version__ = "0.0.0"
