# gfxhelper/core.py

import logging
import math
import sys
import time

from PyQt5.QtCore import Qt, QEventLoop, QTimer
from PyQt5.QtWidgets import QApplication

from .canvas import DrawCanvas
from .settings import HelperSettings, load_settings
from .shapes import (
    PLAIN,
    DEFAULT_FONT_FAMILY,
    CircleOutline,
    FilledCircle,
    Line,
    Shape,
    Stroke,
    Text,
    default_stroke,
    make_font,
)
from .utils import to_color, to_vec
from .vector import Vec2

logger = logging.getLogger(__name__)


def _as_stroke(stroke) -> Stroke:
    if isinstance(stroke, Stroke):
        return stroke
    return default_stroke(stroke)


# QTimer takes a signed 32-bit interval
MAX_DELAY_MS = 2**31 - 1


def _delay_ms(seconds) -> int:
    """Whole milliseconds to wait, clamped to [0, MAX_DELAY_MS]; NaN waits 0."""
    ms = seconds * 1000
    if math.isnan(ms) or ms <= 0:
        return 0
    if ms >= MAX_DELAY_MS:
        return MAX_DELAY_MS
    return int(ms)


class GraphicsHelper:
    """
    Une fenêtre de dessin et sa file d'objets :
    - chaque méthode draw_* ajoute un objet à la file
    - refresh() redessine la file, dans l'ordre d'ajout
    - clear()/flush() vident la file

    Example::

        gfx = get_instance()
        gfx.draw_circle(gfx.center(), 100, "blue")
        gfx.refresh()

    Points may be Vec2 or ``(x, y)`` pairs. Strokes may be a thickness
    (round cap and join) or a :class:`~gfxhelper.shapes.Stroke`. Colors
    are anything ``QColor()`` accepts.

    All calls must come from the GUI thread.
    """

    def __init__(self, settings: HelperSettings = None):
        self.settings = settings or HelperSettings()
        self.app = QApplication.instance() or QApplication(sys.argv)
        self.canvas = DrawCanvas(antialiasing=self.settings.antialiasing)
        self.canvas.setWindowTitle(self.settings.title)
        self.canvas.resize(self.settings.width, self.settings.height)
        if self.settings.visible:
            self.canvas.show()
        logger.info(
            "GraphicsHelper created (%dx%d)", self.settings.width, self.settings.height
        )

    # ------------------------------------------------------------------
    # Window
    @property
    def window(self):
        return self.canvas

    def set_window_size(self, w: int, h: int):
        self.canvas.resize(int(w), int(h))

    def center(self) -> Vec2:
        """Center of the drawing area for the current window size."""
        size = self.canvas.size()
        return Vec2(size.width() / 2, size.height() / 2)

    # ------------------------------------------------------------------
    # Queue lifecycle
    def clear(self):
        """Empty the draw queue. The screen keeps its content until refresh()."""
        self.canvas.flush()

    def flush(self):
        """Empty the draw queue and redraw immediately."""
        self.canvas.flush()
        self.canvas.repaint()

    def refresh(self):
        self.canvas.refresh()

    def delay(self, seconds: float):
        """Block the caller for ``seconds`` (millisecond precision).

        With a running QApplication the wait spins a local event loop, so
        refreshes requested before the delay reach the screen.
        """
        ms = _delay_ms(seconds)
        try:
            if QApplication.instance() is not None:
                loop = QEventLoop()
                QTimer.singleShot(ms, Qt.PreciseTimer, loop.quit)
                loop.exec_()
            else:
                time.sleep(ms / 1000)
        except InterruptedError:
            logger.debug("delay(%s) interrupted", seconds)

    # ------------------------------------------------------------------
    # Drawing
    def draw_line(self, p1, p2, stroke, color):
        line = Line(to_vec(p1), to_vec(p2), _as_stroke(stroke), to_color(color))
        self.canvas.add(line)
        return line

    def draw_circle(self, center, r, color):
        # r is the bounding-box side: shift to its top-left corner
        anchor = to_vec(center).add(Vec2(-r / 2, -r / 2))
        circle = FilledCircle(anchor, r, default_stroke(0), to_color(color))
        self.canvas.add(circle)
        return circle

    def draw_circle_outline(self, center, r, stroke, color):
        anchor = to_vec(center).add(Vec2(-r / 2, -r / 2))
        circle = CircleOutline(anchor, r, _as_stroke(stroke), to_color(color))
        self.canvas.add(circle)
        return circle

    def draw_shape(self, path, stroke, stroke_color, fill_color):
        shape = Shape(path, _as_stroke(stroke), to_color(stroke_color), to_color(fill_color))
        self.canvas.add(shape)
        return shape

    def draw_text(
        self,
        pos,
        text,
        color="black",
        size=12,
        family=DEFAULT_FONT_FAMILY,
        style=PLAIN,
        font=None,
    ):
        if font is None:
            font = make_font(family, style, size)
        item = Text(to_vec(pos), str(text), font, to_color(color))
        self.canvas.add(item)
        return item

    # ------------------------------------------------------------------
    def print_objects(self):
        """Print the entire contents of the draw queue."""
        print(list(self.canvas.get_queue()))

    def __str__(self):
        return f"GraphicsHelper@{id(self):x}: {list(self.canvas.get_queue())}"


_instance = None


def get_instance() -> GraphicsHelper:
    """Return the process-wide helper, creating it from the saved settings."""
    global _instance
    if _instance is None:
        _instance = GraphicsHelper(load_settings())
    return _instance


def set_window_size(w: int, h: int):
    get_instance().set_window_size(w, h)
