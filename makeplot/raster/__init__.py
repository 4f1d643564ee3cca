from .canvas import draw_hline, draw_pixel, draw_vline, fill
from .draw_lines import draw_polyline
from .draw_text import draw_text, load_font, text_size
from .surface import BitmapSurface

__all__ = [
    "BitmapSurface",
    "draw_hline",
    "draw_pixel",
    "draw_polyline",
    "draw_text",
    "draw_vline",
    "fill",
    "load_font",
    "text_size",
]
