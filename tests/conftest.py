# tests/conftest.py

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5.QtCore import QPointF, QRectF, QSettings
from PyQt5.QtWidgets import QApplication

from gfxhelper.core import GraphicsHelper
from gfxhelper.settings import HelperSettings


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """One QApplication for the whole run, on the offscreen platform."""
    app = QApplication.instance() or QApplication([])
    yield app


class RecordingPainter:
    """
    Stands in for a QPainter and records each call as a tuple.
    Qt value objects are turned into plain numbers to keep asserts short.
    """

    def __init__(self):
        self.calls = []

    def setPen(self, pen):
        self.calls.append(("setPen", pen))

    def setBrush(self, brush):
        self.calls.append(("setBrush", brush))

    def setFont(self, font):
        self.calls.append(("setFont", font))

    def drawLine(self, p1: QPointF, p2: QPointF):
        self.calls.append(("drawLine", (p1.x(), p1.y()), (p2.x(), p2.y())))

    def drawEllipse(self, rect: QRectF):
        self.calls.append(
            ("drawEllipse", (rect.x(), rect.y(), rect.width(), rect.height()))
        )

    def drawPath(self, path):
        self.calls.append(("drawPath", path))

    def fillPath(self, path, brush):
        self.calls.append(("fillPath", path, brush))

    def drawText(self, x, y, text):
        self.calls.append(("drawText", x, y, text))

    def names(self):
        return [c[0] for c in self.calls]

    def of(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def painter():
    return RecordingPainter()


@pytest.fixture
def ini_settings(tmp_path):
    """QSettings backed by a throw-away ini file."""
    return QSettings(str(tmp_path / "gfxhelper.ini"), QSettings.IniFormat)


@pytest.fixture
def gfx():
    helper = GraphicsHelper(HelperSettings(visible=False))
    yield helper
    helper.canvas.deleteLater()
