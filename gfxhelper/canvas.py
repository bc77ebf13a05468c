# gfxhelper/canvas.py
# -*- coding: utf-8 -*-

import logging

from PyQt5.QtCore import QThread
from PyQt5.QtGui import QPainter
from PyQt5.QtWidgets import QWidget

from .shapes import Drawable

logger = logging.getLogger(__name__)


class DrawCanvas(QWidget):
    """
    Surface de dessin 2D :
    - conserve une file ordonnée de Drawable
    - la rejoue dans l'ordre d'insertion à chaque paintEvent
    - n'est jamais redessinée implicitement par add()

    The queue belongs to the GUI thread. Qt delivers paint events on that
    thread, so ``add``/``flush`` must be called there as well.
    """

    def __init__(self, parent=None, antialiasing: bool = True):
        super().__init__(parent)
        self._queue: list[Drawable] = []
        self.antialiasing = antialiasing
        logger.debug("DrawCanvas initialized")

    def _check_thread(self, operation: str):
        if QThread.currentThread() is not self.thread():
            logger.warning(
                "DrawCanvas.%s called outside the GUI thread; "
                "the queue may be painted while it changes",
                operation,
            )

    def add(self, drawable: Drawable):
        """Append a drawable. Nothing is redrawn until refresh()."""
        self._check_thread("add")
        self._queue.append(drawable)
        logger.debug("Queued %s (%d in queue)", type(drawable).__name__, len(self._queue))

    def flush(self):
        """Drop every queued drawable."""
        self._check_thread("flush")
        self._queue = []
        logger.debug("Draw queue flushed")

    def get_queue(self) -> tuple:
        return tuple(self._queue)

    def paint(self, painter):
        """Render the queue front-to-back onto ``painter``."""
        for drawable in tuple(self._queue):
            drawable.render(painter)

    def refresh(self):
        """Schedule a repaint of the whole canvas."""
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        if self.antialiasing:
            painter.setRenderHint(QPainter.Antialiasing)
        try:
            self.paint(painter)
        finally:
            painter.end()
