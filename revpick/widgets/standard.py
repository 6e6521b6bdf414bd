from qtpy import QtWidgets
from qtpy.QtCore import Qt

from ..interaction import Interaction
from .. import qtutils
from . import defs


class Dialog(QtWidgets.QDialog):
    """A dialog that sizes itself against its parent window"""

    def __init__(self, parent=None):
        QtWidgets.QDialog.__init__(self, parent)
        # No "?" button in the title bar on Windows.
        if hasattr(Qt, 'WindowContextHelpButtonHint'):
            self.setWindowFlags(self.windowFlags() & ~Qt.WindowContextHelpButtonHint)

    def init_size(self, parent=None, width=defs.dialog_w, height=defs.dialog_h):
        """Take the parent's width and center horizontally over it"""
        width, height = qtutils.default_size(parent, width, height)
        self.resize(width, height)
        if parent is not None:
            x = parent.x() + (parent.width() - self.width()) // 2
            self.move(x, parent.y())


def _message_box(icon, title, message, details=None, informative_text=None):
    mbox = QtWidgets.QMessageBox(qtutils.active_window())
    mbox.setIcon(icon)
    mbox.setWindowTitle(title)
    mbox.setText(message or title)
    if informative_text:
        mbox.setInformativeText(informative_text)
    if details:
        mbox.setDetailedText(details)
    mbox.exec_()


def critical(title, message=None, details=None):
    """Show an error in a message box"""
    _message_box(QtWidgets.QMessageBox.Critical, title, message, details=details)


def information(title, message=None, details=None, informative_text=None):
    """Show a notice in a message box"""
    _message_box(
        QtWidgets.QMessageBox.Information,
        title,
        message,
        details=details,
        informative_text=informative_text,
    )


def install():
    """Route Interaction messages to message boxes"""
    Interaction.critical = staticmethod(critical)
    Interaction.information = staticmethod(information)
