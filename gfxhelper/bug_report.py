import sys
import os
import traceback
from datetime import datetime
from PyQt5.QtWidgets import QApplication, QMessageBox

LOG_DIR = os.path.join(os.path.expanduser("~"), "gfxhelper_logs")
LOG_FILE = os.path.join(LOG_DIR, "gfxhelper.log")


def write_report(exc_type, exc_value, exc_tb, log_file=None):
    """Append a timestamped traceback to the crash log and return its path."""
    log_file = log_file or LOG_FILE
    os.makedirs(os.path.dirname(log_file), exist_ok=True)
    with open(log_file, "a", encoding="utf-8") as f:
        f.write(f"\n=== {datetime.now().isoformat()} ===\n")
        traceback.print_exception(exc_type, exc_value, exc_tb, file=f)
    return log_file


def _excepthook(exc_type, exc_value, exc_tb):
    """Write the traceback to a log file and show a dialog if possible."""
    log_file = write_report(exc_type, exc_value, exc_tb)

    app = QApplication.instance()
    if app is not None:
        try:
            msg = QMessageBox()
            msg.setIcon(QMessageBox.Critical)
            msg.setWindowTitle("GraphicsHelper - Error")
            msg.setText(
                "An unexpected error occurred. "
                f"A report was written to:\n{log_file}"
            )
            details = "".join(
                traceback.format_exception(exc_type, exc_value, exc_tb)
            )
            msg.setDetailedText(details)
            msg.exec_()
        except Exception:
            # the report is already on disk
            pass

    sys.__excepthook__(exc_type, exc_value, exc_tb)


def install_excepthook():
    """Install global exception handler that logs uncaught exceptions."""
    sys.excepthook = _excepthook
