from .validation import canonical_pair, coerce_vertex, is_orderable, sorted_if_possible

__all__ = ["canonical_pair", "coerce_vertex", "is_orderable", "sorted_if_possible"]
