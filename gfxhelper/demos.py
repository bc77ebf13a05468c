# gfxhelper/demos.py
"""
Routines de démonstration utilisant la façade GraphicsHelper.
"""

import math

from PyQt5.QtCore import Qt

from .shapes import BOLD_ITALIC, Stroke, make_font
from .vector import Vec2, offset_by_angle

SNOWFLAKE_STROKE = Stroke(4, Qt.SquareCap, Qt.MiterJoin)


def circles_example(gfx, pause=1.0):
    """Ten shrinking grey circles, each with a spoke, one per frame."""
    for i in range(10, 0, -1):
        shade = i * 20
        gfx.draw_circle(gfx.center(), i * 20, (shade, shade, shade))
        tip = offset_by_angle(gfx.center(), i * math.pi / 5.0, i * 20)
        gfx.draw_line(gfx.center(), tip, 10, (255 - shade, 255 - shade, 255 - shade))
        gfx.refresh()
        gfx.delay(pause)


def draw_snowflake(gfx, depth: int, center: Vec2, length: float):
    """Queue a six-armed recursive snowflake of the given depth."""
    if depth <= 0:
        return
    for i in range(6):
        tip = offset_by_angle(center, math.pi / 3 * i, length)
        gfx.draw_line(center, tip, SNOWFLAKE_STROKE, "blue")
        draw_snowflake(gfx, depth - 1, tip, length / 3)


def snowflake_example(gfx, frames=7, pause=1.0):
    for depth in range(frames):
        gfx.clear()
        gfx.draw_text(Vec2(50, 50), "bonjour", "magenta", size=30)
        gfx.draw_text(
            Vec2(50, 90),
            "fancy text",
            "darkgray",
            font=make_font("Serif", BOLD_ITALIC, 30),
        )
        draw_snowflake(gfx, depth, gfx.center(), 200)
        gfx.refresh()
        gfx.delay(pause)
