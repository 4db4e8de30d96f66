"""
Global exception handler for City Overview.

Logs unhandled Python exceptions and Qt messages, and shows a dialog
instead of letting the application die silently.
"""

import sys
import logging
import traceback
import os
from typing import Optional
from PySide6.QtWidgets import QApplication, QMessageBox
from PySide6.QtCore import QObject, qInstallMessageHandler, QtMsgType

logger = logging.getLogger(__name__)

_original_excepthook = sys.excepthook

SUPPRESS_DIALOGS_ENV = "CITYOVERVIEW_SUPPRESS_ERROR_DIALOGS"


def _show_error_dialog(message: str, details: str, log_file_path: Optional[str] = None):
    """Show an error dialog, or print to stderr when no Qt app is running."""
    if os.environ.get(SUPPRESS_DIALOGS_ENV) == "1":
        return

    app = QApplication.instance()
    if app is None:
        print(f"\nERROR: {message}", file=sys.stderr)
        print(f"\nDetails:\n{details}", file=sys.stderr)
        return

    msg_box = QMessageBox()
    msg_box.setIcon(QMessageBox.Icon.Critical)
    msg_box.setWindowTitle("Unexpected Error")
    msg_box.setText(f"An unexpected error occurred.\n\n{message}")
    msg_box.setDetailedText(details)
    if log_file_path:
        msg_box.setInformativeText(f"Error details have been logged to:\n{log_file_path}")
    msg_box.setStandardButtons(QMessageBox.StandardButton.Ok)
    msg_box.exec()


class GlobalExceptionHandler(QObject):
    """Routes uncaught exceptions and Qt warnings into the log."""

    def __init__(self, log_file_path: Optional[str] = None):
        super().__init__()
        self.log_file_path = log_file_path

    def install(self):
        sys.excepthook = self._handle_exception
        qInstallMessageHandler(self._qt_message_handler)
        logger.info("Global exception handler installed")

    def uninstall(self):
        sys.excepthook = _original_excepthook
        qInstallMessageHandler(None)
        logger.info("Global exception handler uninstalled")

    def _qt_message_handler(self, mode: QtMsgType, context, message: str):
        level = logging.DEBUG
        if mode == QtMsgType.QtInfoMsg:
            level = logging.INFO
        elif mode == QtMsgType.QtWarningMsg:
            level = logging.WARNING
        elif mode in (QtMsgType.QtCriticalMsg, QtMsgType.QtFatalMsg):
            level = logging.CRITICAL
        logger.log(level, f"[QT] {message}")

    def _handle_exception(self, exc_type, exc_value, exc_traceback):
        # Ignore KeyboardInterrupt so we can still exit cleanly
        if issubclass(exc_type, KeyboardInterrupt):
            _original_excepthook(exc_type, exc_value, exc_traceback)
            return

        error_msg = f"{exc_type.__name__}: {exc_value}"
        error_details = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
        logger.critical("Unhandled exception: %s\n%s", error_msg, error_details)
        _show_error_dialog(error_msg, error_details, self.log_file_path)


def install_global_exception_handler(log_file_path: Optional[str] = None) -> GlobalExceptionHandler:
    handler = GlobalExceptionHandler(log_file_path)
    handler.install()
    return handler
