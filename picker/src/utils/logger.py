"""Global logging and error handling utilities"""
import logging
import sys

from PyQt5.QtWidgets import QMessageBox

# True when running from source, False when frozen into an executable
DEBUG_MODE = not getattr(sys, 'frozen', False)

_main_window = None
_logger = logging.getLogger('HappyColors')


def set_main_window(window):
    """Set the main window used as parent for error popups"""
    global _main_window
    _main_window = window


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Report a fatal error, then raise it

    Args:
        e: The exception to handle
        user_message: Friendly message for the popup (defaults to str(e))
        title: Popup title

    From source the exception is raised untouched so the traceback is the
    first thing you see. Frozen builds log the traceback and show a popup
    over the main window before raising.
    """
    if DEBUG_MODE:
        raise e

    _logger.error(f"{title}: {e}", exc_info=e)

    message = user_message if user_message else str(e)
    if _main_window is not None:
        QMessageBox.critical(_main_window, title, message)
    else:
        _logger.error(f"No window for popup: {title} - {message}")

    raise e
