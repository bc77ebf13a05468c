# gfxhelper/settings.py
"""
Préférences persistantes de la fenêtre (QSettings).
"""

from dataclasses import dataclass

from PyQt5.QtCore import QSettings

ORGANIZATION = "gfxhelper"
APPLICATION = "gfxhelper"

DEFAULT_WIDTH = 720
DEFAULT_HEIGHT = 720
DEFAULT_TITLE = "GraphicsHelper"


@dataclass
class HelperSettings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    title: str = DEFAULT_TITLE
    antialiasing: bool = True
    visible: bool = True


def _qsettings(qsettings):
    return qsettings if qsettings is not None else QSettings(ORGANIZATION, APPLICATION)


def load_settings(qsettings: QSettings = None) -> HelperSettings:
    """Read the window preferences, falling back to the defaults."""
    settings = _qsettings(qsettings)
    return HelperSettings(
        width=settings.value("window/width", DEFAULT_WIDTH, type=int),
        height=settings.value("window/height", DEFAULT_HEIGHT, type=int),
        title=settings.value("window/title", DEFAULT_TITLE, type=str),
        antialiasing=settings.value("render/antialiasing", True, type=bool),
        visible=settings.value("window/visible", True, type=bool),
    )


def save_settings(prefs: HelperSettings, qsettings: QSettings = None):
    settings = _qsettings(qsettings)
    settings.setValue("window/width", prefs.width)
    settings.setValue("window/height", prefs.height)
    settings.setValue("window/title", prefs.title)
    settings.setValue("render/antialiasing", prefs.antialiasing)
    settings.setValue("window/visible", prefs.visible)
    settings.sync()
