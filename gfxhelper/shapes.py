# gfxhelper/shapes.py
"""
Instructions de dessin immuables rejouées par le canevas.

Every drawable renders itself onto a painter, which is normally the
QPainter opened by :class:`gfxhelper.canvas.DrawCanvas` but can be any
object offering the same subset of methods.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields

from PyQt5.QtCore import Qt, QPointF, QRectF
from PyQt5.QtGui import QBrush, QColor, QFont, QPainterPath, QPen

from .utils import color_to_hex
from .vector import Vec2

# Font style flags, combinable with ``|``.
PLAIN = 0
BOLD = 1
ITALIC = 2
BOLD_ITALIC = BOLD | ITALIC

DEFAULT_FONT_FAMILY = "SansSerif"


@dataclass(frozen=True)
class Stroke:
    """Brush stroke: line width plus cap and join styles."""

    width: float
    cap: Qt.PenCapStyle = Qt.RoundCap
    join: Qt.PenJoinStyle = Qt.RoundJoin

    def pen(self, color: QColor) -> QPen:
        pen = QPen(color)
        pen.setWidthF(float(self.width))
        pen.setCapStyle(self.cap)
        pen.setJoinStyle(self.join)
        return pen


def default_stroke(thickness: float) -> Stroke:
    """Round-capped, round-joined stroke of the given thickness."""
    return Stroke(float(thickness), Qt.RoundCap, Qt.RoundJoin)


def make_font(family: str = DEFAULT_FONT_FAMILY, style: int = PLAIN, size: int = 12) -> QFont:
    font = QFont(family, int(size))
    font.setBold(bool(style & BOLD))
    font.setItalic(bool(style & ITALIC))
    return font


class Drawable(ABC):
    """Anything the canvas can replay onto a painter."""

    @abstractmethod
    def render(self, painter) -> None:
        """Paint this object. Must not modify the drawable."""

    def __repr__(self):
        parts = ", ".join(
            f"{f.name}={_describe(getattr(self, f.name))}" for f in fields(self)
        )
        return f"{type(self).__name__}({parts})"


def _describe(value) -> str:
    """Readable form of a field for queue dumps."""
    if isinstance(value, QColor):
        return color_to_hex(value)
    if isinstance(value, QFont):
        return f"QFont({value.family()!r}, {value.pointSize()}pt)"
    if isinstance(value, QPainterPath):
        rect = value.boundingRect()
        return (
            f"QPainterPath({value.elementCount()} elements, "
            f"bounds=({rect.x():g}, {rect.y():g}, {rect.width():g}, {rect.height():g}))"
        )
    return repr(value)


@dataclass(frozen=True, repr=False)
class Line(Drawable):
    p1: Vec2
    p2: Vec2
    stroke: Stroke
    color: QColor

    def render(self, painter):
        painter.setPen(self.stroke.pen(self.color))
        painter.drawLine(QPointF(self.p1.x, self.p1.y), QPointF(self.p2.x, self.p2.y))


@dataclass(frozen=True, repr=False)
class FilledCircle(Drawable):
    """Filled circle.

    ``center`` is the top-left corner of the bounding box and ``r`` the
    side of that box, so the circle drawn has diameter ``r``. The facade
    does the ``(-r/2, -r/2)`` shift so callers can pass a real center.
    ``stroke`` is kept for symmetry with the outline variant; a fill has
    no outline.
    """

    center: Vec2
    r: float
    stroke: Stroke
    color: QColor

    def bounds(self) -> QRectF:
        return QRectF(self.center.x, self.center.y, self.r, self.r)

    def render(self, painter):
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(self.color))
        painter.drawEllipse(self.bounds())


@dataclass(frozen=True, repr=False)
class CircleOutline(Drawable):
    """Circle outline, same bounding-box geometry as :class:`FilledCircle`."""

    center: Vec2
    r: float
    stroke: Stroke
    color: QColor

    def bounds(self) -> QRectF:
        return QRectF(self.center.x, self.center.y, self.r, self.r)

    def render(self, painter):
        painter.setPen(self.stroke.pen(self.color))
        painter.setBrush(Qt.NoBrush)
        painter.drawEllipse(self.bounds())


@dataclass(frozen=True, repr=False)
class Shape(Drawable):
    """Arbitrary path, outlined with ``stroke_color`` then filled with ``fill_color``."""

    path: QPainterPath
    stroke: Stroke
    stroke_color: QColor
    fill_color: QColor

    def render(self, painter):
        painter.setPen(self.stroke.pen(self.stroke_color))
        painter.setBrush(Qt.NoBrush)
        painter.drawPath(self.path)
        painter.fillPath(self.path, QBrush(self.fill_color))


@dataclass(frozen=True, repr=False)
class Text(Drawable):
    pos: Vec2
    text: str
    font: QFont
    color: QColor

    def render(self, painter):
        painter.setFont(self.font)
        painter.setPen(QPen(self.color))
        # baseline anchor, truncated to whole pixels
        painter.drawText(int(self.pos.x), int(self.pos.y), self.text)
