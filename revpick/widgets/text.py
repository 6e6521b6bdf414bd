from qtpy import QtWidgets

from .. import qtutils


class HintedLineEdit(QtWidgets.QLineEdit):
    """A line edit with a clear button that shows a hint while empty"""

    def __init__(self, hint, tooltip=None, parent=None):
        QtWidgets.QLineEdit.__init__(self, parent)
        self.setClearButtonEnabled(True)
        self.setPlaceholderText(hint)
        if tooltip:
            self.setToolTip(tooltip)

    def set_value(self, value, block=False):
        """Replace the text, keeping the cursor position where possible"""
        with qtutils.BlockSignals(*([self] if block else [])):
            position = max(0, min(self.cursorPosition(), len(value)))
            self.setText(value)
            self.setCursorPosition(position)
