from .layouts import base_layout, layout_child_from_parent
from .draw import draw_lonely_edges, draw_blow_up

__all__ = [
    "base_layout",
    "layout_child_from_parent",
    "draw_lonely_edges",
    "draw_blow_up",
]
