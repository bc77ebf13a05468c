# gfxhelper/utils.py
"""
Conversion de couleurs et de points, construction de chemins.
"""

from PyQt5.QtCore import QPointF
from PyQt5.QtGui import QColor, QPainterPath

from .vector import Vec2


def to_color(value) -> QColor:
    """Return ``value`` as a QColor.

    Accepts a QColor, a Qt.GlobalColor, a name ("blue"), a hex string or
    an ``(r, g, b[, a])`` tuple.
    """
    if isinstance(value, QColor):
        return value
    if isinstance(value, (tuple, list)):
        color = QColor(*(int(c) for c in value))
    else:
        color = QColor(value)
    if not color.isValid():
        raise ValueError(f"Invalid color: {value!r}")
    return color


def color_to_hex(qcolor):
    """Convertit un QColor en chaîne hex."""
    r = qcolor.red()
    g = qcolor.green()
    b = qcolor.blue()
    return f"#{r:02X}{g:02X}{b:02X}"


def to_vec(point) -> Vec2:
    """Coerce a Vec2, QPointF or ``(x, y)`` pair into a Vec2."""
    if isinstance(point, Vec2):
        return point
    if isinstance(point, QPointF):
        return Vec2(point.x(), point.y())
    x, y = point
    return Vec2(float(x), float(y))


def path_from_points(points, closed: bool = True) -> QPainterPath:
    """Build a polygonal QPainterPath through ``points``."""
    painter_path = QPainterPath()
    pts = [to_vec(p) for p in points]
    if pts:
        painter_path.moveTo(pts[0].x, pts[0].y)
        for pt in pts[1:]:
            painter_path.lineTo(pt.x, pt.y)
        if closed:
            painter_path.closeSubpath()
    return painter_path
