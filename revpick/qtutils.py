"""Qt helpers: layouts, buttons and background list loading"""
from qtpy import QtCore
from qtpy import QtGui
from qtpy import QtWidgets
from qtpy.QtCore import Qt
from qtpy.QtCore import Signal

from .errors import LoadFailure
from .i18n import N_
from .interaction import Interaction


STRETCH = object()


def active_window():
    """Return the active window for the current application"""
    return QtWidgets.QApplication.activeWindow()


def connect_button(button, func):
    """Call func() when the button is clicked, ignoring the checked flag"""
    button.clicked.connect(lambda *_args: func(), type=Qt.QueuedConnection)


def _add_item(layout, item):
    if isinstance(item, QtWidgets.QWidget):
        layout.addWidget(item)
    elif isinstance(item, QtWidgets.QLayout):
        layout.addLayout(item)
    elif item is STRETCH:
        layout.addStretch()
    elif isinstance(item, int):
        layout.addSpacing(item)


def box(cls, margin, spacing, *items):
    """Create a QBoxLayout subclass holding widgets, layouts and spacers"""
    layout = cls()
    layout.setSpacing(spacing)
    layout.setContentsMargins(margin, margin, margin, margin)
    for item in items:
        _add_item(layout, item)
    return layout


def hbox(margin, spacing, *items):
    return box(QtWidgets.QHBoxLayout, margin, spacing, *items)


def vbox(margin, spacing, *items):
    return box(QtWidgets.QVBoxLayout, margin, spacing, *items)


def form(margin, spacing, *rows):
    """Create a QFormLayout from (label, field) pairs

    Either side of a row may be a widget or a nested layout.
    """
    layout = QtWidgets.QFormLayout()
    layout.setSpacing(spacing)
    layout.setContentsMargins(margin, margin, margin, margin)
    layout.setFieldGrowthPolicy(QtWidgets.QFormLayout.ExpandingFieldsGrow)
    for row, (label_item, field) in enumerate(rows):
        for role, item in (
            (QtWidgets.QFormLayout.LabelRole, label_item),
            (QtWidgets.QFormLayout.FieldRole, field),
        ):
            if isinstance(item, QtWidgets.QLayout):
                layout.setLayout(row, role, item)
            else:
                layout.setWidget(row, role, item)
    return layout


def label(text=None, tooltip=None, selectable=True, parent=None):
    """Create a QLabel; selectable labels also open links"""
    widget = QtWidgets.QLabel(parent)
    if selectable:
        widget.setTextInteractionFlags(Qt.TextBrowserInteraction)
        widget.setOpenExternalLinks(True)
    if text:
        widget.setText(text)
    if tooltip:
        widget.setToolTip(tooltip)
    return widget


def link(url, text, palette=None):
    """Return rich text for an unadorned link in the window text color"""
    if palette is None:
        palette = QtGui.QPalette()
    color = palette.color(QtGui.QPalette.WindowText).name()
    return (
        f'<a style="font-style: italic; text-decoration: none; color: {color};"'
        f' href="{url}">{text}</a>'
    )


def get_clipboard():
    """Return the text on the copy/paste buffer"""
    clipboard = QtWidgets.QApplication.clipboard()
    if clipboard is None:
        return ''
    return clipboard.text(QtGui.QClipboard.Clipboard)


def default_size(parent, width, height):
    """Use the parent's width when there is one"""
    if parent is not None:
        width = parent.width()
    return (width, height)


def create_button(text, default=False):
    """Create a push button that never takes keyboard focus

    Clicking a button must not move the focus away from the input
    that supplies the revision.
    """
    button = QtWidgets.QPushButton(text)
    button.setCursor(Qt.PointingHandCursor)
    button.setFocusPolicy(Qt.NoFocus)
    button.setDefault(default)
    return button


def ok_button(text):
    return create_button(text, default=True)


def close_button(text=None):
    return create_button(text or N_('Close'))


class BlockSignals:
    """Context manager that blocks signals on widgets and restores them"""

    def __init__(self, *widgets):
        self.widgets = widgets
        self.previous = []

    def __enter__(self):
        self.previous = [widget.blockSignals(True) for widget in self.widgets]
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        for widget, blocked in zip(self.widgets, self.previous):
            widget.blockSignals(blocked)


class Channel(QtCore.QObject):
    finished = Signal(object)


class LoadTask(QtCore.QRunnable):
    """Run a list query on the thread pool

    LoadFailure and OSError are logged and produce an empty list.
    `running` holds every started task until its run() returns, so that
    Python keeps the object alive while Qt executes it.

    """

    running = set()

    def __init__(self, func):
        QtCore.QRunnable.__init__(self)
        self.func = func
        self.channel = Channel()
        self.result = []
        self.error = None
        # Python owns the task; Qt must not delete it after run().
        self.setAutoDelete(False)

    def start(self, threadpool):
        self.running.add(self)
        threadpool.start(self)

    def run(self):
        try:
            self.result = self.load()
            self.channel.finished.emit(self)
        finally:
            self.running.discard(self)

    def load(self):
        try:
            return list(self.func())
        except (LoadFailure, OSError) as exc:
            self.error = exc
            Interaction.log(N_('error: %s') % exc)
            return []


class AsyncLoader(QtCore.QObject):
    """Loads a list in the background and applies it on the GUI thread

    Once dispose() has been called, results that arrive later are dropped
    and the callback is never invoked.

    """

    def __init__(self, parent=None, threadpool=None):
        super().__init__(parent)
        if threadpool is None:
            threadpool = QtCore.QThreadPool.globalInstance()
        self.threadpool = threadpool
        self.disposed = False
        self._task = None
        self._on_loaded = None

    def load(self, func, on_loaded):
        """Run func() in the background and pass its result to on_loaded()"""
        if self.disposed:
            return None
        task = LoadTask(func)
        self._task = task
        self._on_loaded = on_loaded
        task.channel.finished.connect(self._finished, type=Qt.QueuedConnection)
        task.start(self.threadpool)
        return task

    def _finished(self, task):
        if self.disposed or task is not self._task:
            return
        on_loaded = self._on_loaded
        self._task = None
        self._on_loaded = None
        on_loaded(task.result)

    def wait(self):
        """Block until the thread pool is idle"""
        self.threadpool.waitForDone()

    def dispose(self):
        """Detach from pending work.  Idempotent."""
        self.disposed = True
        self._task = None
        self._on_loaded = None
