import numbers
from collections.abc import Iterable
from typing import Any, TypeVar

from ..errors import TypeMismatch

T = TypeVar("T")


def type_name(vertex_type) -> str:
    if vertex_type is None:
        return "Any"
    if isinstance(vertex_type, tuple):
        return " | ".join(type_name(t) for t in vertex_type)
    return getattr(vertex_type, "__name__", repr(vertex_type))


def coerce_vertex(value: Any, vertex_type) -> Any:
    """Return ``value`` as a member of ``vertex_type`` or raise TypeMismatch.

    Numeric values are converted when the conversion is lossless, so ``2.0``
    becomes ``2`` in an ``int`` graph while ``2.5`` is rejected.
    """
    if vertex_type is None or isinstance(value, vertex_type):
        return value
    if (
        isinstance(value, numbers.Number)
        and isinstance(vertex_type, type)
        and issubclass(vertex_type, numbers.Number)
    ):
        try:
            converted = vertex_type(value)
        except (TypeError, ValueError, OverflowError):
            converted = None
        if converted is not None and converted == value:
            return converted
    raise TypeMismatch(
        f"cannot use {value!r} ({type(value).__name__}) as a vertex of type "
        f"{type_name(vertex_type)}"
    )


def _is_chain(items: list) -> bool:
    # sorted() succeeding does not imply a total order: sets sort under subset
    return all(a < b for a, b in zip(items, items[1:]))


def sorted_if_possible(items: Iterable[T]) -> list[T]:
    """Sort distinct ``items`` ascending; keep iteration order unless totally ordered."""
    items = list(items)
    try:
        ordered = sorted(items)
        total = _is_chain(ordered)
    except TypeError:
        return items
    return ordered if total else items


def is_orderable(items: Iterable[Any]) -> bool:
    """True iff the distinct ``items`` are totally ordered by ``<``."""
    try:
        return _is_chain(sorted(items))
    except TypeError:
        return False


def canonical_pair(u: T, w: T) -> tuple[T, T]:
    # Lesser endpoint first; incomparable endpoints keep the caller's order.
    try:
        if w < u:
            return (w, u)
    except TypeError:
        pass
    return (u, w)
