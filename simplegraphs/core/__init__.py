from .digraph import DiGraph, simplify
from .graph import Graph
from .structure import EdgeType, VertexStore

__all__ = ["Graph", "DiGraph", "simplify", "EdgeType", "VertexStore"]
