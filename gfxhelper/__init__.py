from .vector import Vec2, offset_by_angle, offset_by_angle_xy
from .shapes import (
    PLAIN,
    BOLD,
    ITALIC,
    BOLD_ITALIC,
    Stroke,
    default_stroke,
    make_font,
)
from .core import GraphicsHelper, get_instance, set_window_size
