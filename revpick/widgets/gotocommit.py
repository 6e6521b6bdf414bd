"""The "Go to commit" dialog"""
from functools import partial

from qtpy import QtCore
from qtpy import QtWidgets
from qtpy.QtCore import Qt

from ..errors import RevisionNotFound
from ..i18n import N_
from ..models import prefs
from ..models import revselect
from ..models.revselect import Source
from .. import gitcmds
from .. import qtutils
from . import defs
from . import standard
from . import text


REV_PARSE_DOCS = 'https://git-scm.com/docs/git-rev-parse#_specifying_revisions'

ENTER_KEYS = (Qt.Key_Return, Qt.Key_Enter)


def go_to_commit(context, parent=None):
    """Entry point for external callers.

    Returns (ok, oid).  `oid` is None unless a commit was chosen.
    """
    view = new_go_to_commit(context, parent=parent)
    view.start()
    return view.run()


def new_go_to_commit(context, parent=None):
    """Create a GoToCommit dialog without starting it"""
    if parent is None:
        parent = qtutils.active_window()
    return GoToCommit(context, parent=parent)


class RefComboBox(QtWidgets.QComboBox):
    """An editable list of RefEntry values matched by name"""

    def __init__(self, tooltip='', parent=None):
        super().__init__(parent)
        self.entries = []
        self.setEditable(True)
        self.setInsertPolicy(QtWidgets.QComboBox.NoInsert)
        self.setSizePolicy(
            QtWidgets.QSizePolicy.Expanding, QtWidgets.QSizePolicy.Fixed
        )
        if tooltip:
            self.setToolTip(tooltip)

    def set_entries(self, entries):
        """Replace the list contents and clear the edit text"""
        with qtutils.BlockSignals(self):
            self.clear()
            self.entries = list(entries)
            for entry in self.entries:
                self.addItem(entry.name)
            self.setCurrentIndex(-1)
            self.setEditText('')

    def entry(self, idx):
        """Return the entry at the specified index, or None"""
        if 0 <= idx < len(self.entries):
            return self.entries[idx]
        return None

    def set_placeholder(self, value):
        with qtutils.BlockSignals(self):
            self.setEditText(value)


class GoToCommit(standard.Dialog):
    """Choose a commit by expression, tag or branch"""

    def __init__(self, context, parent=None):
        standard.Dialog.__init__(self, parent=parent)
        self.context = context
        self.oid = None

        self.setWindowTitle(N_('Go to commit'))
        if parent is not None:
            self.setWindowModality(Qt.WindowModal)

        self.selector = revselect.create(partial(gitcmds.rev_parse, context))
        self.tags_loader = qtutils.AsyncLoader(parent=self)
        self.branches_loader = qtutils.AsyncLoader(parent=self)

        self.expression_label = QtWidgets.QLabel(N_('Commit expression'), self)
        self.expression = text.HintedLineEdit(
            N_('SHA-1, ref name or revision expression, e.g. HEAD~2'),
            tooltip=N_('Any revision accepted by "git rev-parse"'),
            parent=self,
        )
        self.help_link = qtutils.label(
            text=qtutils.link(REV_PARSE_DOCS, N_('Specifying revisions')),
            tooltip=REV_PARSE_DOCS,
            parent=self,
        )

        self.tags_label = QtWidgets.QLabel(N_('Tag'), self)
        self.tags = RefComboBox(tooltip=N_('Tags, newest first'), parent=self)

        self.branches_label = QtWidgets.QLabel(N_('Branch'), self)
        self.branches = RefComboBox(
            tooltip=N_('Local and remote branches'), parent=self
        )

        self.status = qtutils.label(selectable=False, parent=self)

        self.go_button = qtutils.ok_button(N_('Go'))
        self.close_button = qtutils.close_button(N_('Cancel'))

        self.expression_layout = qtutils.hbox(
            defs.no_margin, defs.spacing, self.expression, self.help_link
        )
        self.input_layout = qtutils.form(
            defs.margin,
            defs.spacing,
            (self.expression_label, self.expression_layout),
            (self.tags_label, self.tags),
            (self.branches_label, self.branches),
        )
        self.button_layout = qtutils.hbox(
            defs.no_margin,
            defs.button_spacing,
            self.close_button,
            qtutils.STRETCH,
            self.go_button,
        )
        self.main_layout = qtutils.vbox(
            defs.margin,
            defs.spacing,
            self.input_layout,
            self.status,
            qtutils.STRETCH,
            self.button_layout,
        )
        self.setLayout(self.main_layout)

        # Focus changes decide which input supplies the revision.
        self._sources = {
            self.expression: Source.EXPRESSION,
            self.tags: Source.TAG,
            self.tags.lineEdit(): Source.TAG,
            self.branches: Source.BRANCH,
            self.branches.lineEdit(): Source.BRANCH,
        }
        for widget in self._sources:
            widget.installEventFilter(self)

        self.expression.textChanged.connect(self.selector.set_expression)
        self.tags.editTextChanged.connect(self.selector.set_tag_text)
        self.branches.editTextChanged.connect(self.selector.set_branch_text)
        self.tags.activated.connect(self._tag_activated)
        self.branches.activated.connect(self._branch_activated)
        self.selector.candidate_changed.connect(self._candidate_changed)
        self.selector.confirmed.connect(self._confirmed)

        qtutils.connect_button(self.go_button, self.go)
        qtutils.connect_button(self.close_button, self.reject)

        self.init_size(parent=parent)
        self.expression.setFocus()

    def start(self):
        """Load the tag and branch lists and read the clipboard"""
        context = self.context
        self.tags.set_placeholder(N_('Loading...'))
        self.branches.set_placeholder(N_('Loading...'))
        self.tags_loader.load(partial(gitcmds.tag_refs, context), self._tags_loaded)
        self.branches_loader.load(
            partial(gitcmds.branch_refs, context), self._branches_loaded
        )
        if prefs.clipboard(context):
            self.set_expression_from_clipboard()

    def set_expression_from_clipboard(self):
        """Prefill the expression when the clipboard names a commit"""
        value = gitcmds.clipboard_revision(self.context, qtutils.get_clipboard())
        if value:
            self.expression.set_value(value)
            self.expression.selectAll()

    def run(self):
        """Show the dialog modally and return (ok, oid)"""
        self.exec_()
        return self.result_value()

    def result_value(self):
        ok = self.result() == QtWidgets.QDialog.Accepted and self.oid is not None
        if not ok:
            return (False, None)
        return (True, self.oid)

    def eventFilter(self, obj, event):
        event_type = event.type()
        if event_type == QtCore.QEvent.FocusIn:
            source = self._sources.get(obj)
            if source is not None:
                self.selector.set_focus(source)
        elif event_type == QtCore.QEvent.KeyRelease:
            if obj is self.tags or obj is self.branches:
                if event.key() in ENTER_KEYS:
                    self.go()
        return False

    def _tags_loaded(self, entries):
        self.tags.set_entries(entries)
        self.selector.set_tags(entries)
        self.selector.set_tag_text(self.tags.currentText())

    def _branches_loaded(self, entries):
        self.branches.set_entries(entries)
        self.selector.set_branches(entries)
        self.selector.set_branch_text(self.branches.currentText())

    def _tag_activated(self, idx):
        entry = self.tags.entry(idx)
        if entry is None:
            return
        self.selector.tag_list_updated(entry)
        self.go()

    def _branch_activated(self, idx):
        entry = self.branches.entry(idx)
        if entry is None:
            return
        self.selector.branch_list_updated(entry)
        self.go()

    def _candidate_changed(self, _candidate):
        self.status.setText('')

    def go(self):
        """Confirm the current selection"""
        if self.oid is not None:
            return
        self.selector.confirm()

    def _confirmed(self, candidate):
        try:
            oid = self.selector.resolve(candidate)
        except RevisionNotFound:
            if candidate:
                msg = N_('Revision not found: %s') % candidate
            else:
                msg = N_('Nothing selected')
            self.status.setText(msg)
            return
        self.oid = oid
        self.accept()

    def dispose(self):
        """Stop listening to background loads"""
        self.tags_loader.dispose()
        self.branches_loader.dispose()

    def done(self, result):
        self.dispose()
        standard.Dialog.done(self, result)
