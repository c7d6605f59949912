from .coloring import (
    bipartition,
    chromatic_bound,
    greedy_color,
    random_greedy_color,
    two_color,
)
from .connectivity import (
    all_distances,
    components,
    cut_edges,
    diameter,
    distance,
    distance_matrix,
    distances,
    is_connected,
    is_cut_edge,
    num_components,
    shortest_path,
    spanning_forest,
)
from .euler import euler_trail

__all__ = [
    "all_distances",
    "bipartition",
    "chromatic_bound",
    "components",
    "cut_edges",
    "diameter",
    "distance",
    "distance_matrix",
    "distances",
    "euler_trail",
    "greedy_color",
    "is_connected",
    "is_cut_edge",
    "num_components",
    "random_greedy_color",
    "shortest_path",
    "spanning_forest",
    "two_color",
]
