from .blowup import (
    Child,
    blow_up_to_triangle,
    all_children,
    v_join_edges,
    children_preserving_lonely_count,
)

__all__ = [
    "Child",
    "blow_up_to_triangle",
    "all_children",
    "v_join_edges",
    "children_preserving_lonely_count",
]
