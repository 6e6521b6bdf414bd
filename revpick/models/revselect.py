"""Tracks which input chose the revision and resolves it to a commit"""
import collections

from qtpy import QtCore
from qtpy.QtCore import Signal

from ..errors import RevisionNotFound

RefEntry = collections.namedtuple('RefEntry', 'name oid')


class Source:
    """The inputs that can supply the selected revision"""

    EXPRESSION = 'expression'
    TAG = 'tag'
    BRANCH = 'branch'

    ALL = (EXPRESSION, TAG, BRANCH)


def create(resolver):
    """Create a RevisionSelector

    :param resolver: callable mapping an expression to a commit ID or None

    """
    return RevisionSelector(resolver)


def find_ref(entries, name):
    """Return the first entry whose display name is exactly `name`"""
    for entry in entries:
        if entry.name == name:
            return entry
    return None


class RevisionSelector(QtCore.QObject):
    """Derives the candidate revision from the most recently focused input

    Only one input contributes at a time: the expression field, the
    tag list or the branch list, whichever last received focus.

    """

    candidate_changed = Signal(object)
    confirmed = Signal(object)

    def __init__(self, resolver):
        super().__init__()
        self.resolver = resolver
        self.source = Source.EXPRESSION
        self.candidate = ''
        self.expression = ''
        self.selected_tag = None
        self.selected_branch = None
        self.tags = None
        self.branches = None

    def set_focus(self, source):
        """Record the input that gained focus"""
        if source not in Source.ALL:
            raise ValueError('unknown revision source: %r' % source)
        self.source = source
        self.update_candidate()

    def set_expression(self, text):
        """The expression field's text changed"""
        self.expression = text or ''
        if self.source == Source.EXPRESSION:
            self.update_candidate()

    def set_tags(self, entries):
        """Install the loaded tag list"""
        self.tags = list(entries)
        self.update_candidate()

    def set_branches(self, entries):
        """Install the loaded branch list"""
        self.branches = list(entries)
        self.update_candidate()

    def set_tag_text(self, text):
        """Select the tag whose name matches the tag input's text"""
        if self.tags is None:
            return
        self.tag_list_updated(find_ref(self.tags, text))

    def set_branch_text(self, text):
        """Select the branch whose name matches the branch input's text"""
        if self.branches is None:
            return
        self.branch_list_updated(find_ref(self.branches, text))

    def tag_list_updated(self, entry):
        self.selected_tag = entry
        if self.source == Source.TAG:
            self.update_candidate()

    def branch_list_updated(self, entry):
        self.selected_branch = entry
        if self.source == Source.BRANCH:
            self.update_candidate()

    def update_candidate(self):
        """Recompute the candidate from the focused input"""
        source = self.source
        if source == Source.EXPRESSION:
            candidate = self.expression.strip()
        elif source == Source.TAG:
            candidate = self.selected_tag.oid if self.selected_tag else ''
        else:
            candidate = self.selected_branch.oid if self.selected_branch else ''

        if candidate != self.candidate:
            self.candidate = candidate
            self.candidate_changed.emit(candidate)

    def confirm(self):
        """Finish the selection and return the candidate as-is"""
        candidate = self.candidate
        self.confirmed.emit(candidate)
        return candidate

    def resolve(self, expression):
        """Resolve an expression to a commit ID

        Raises RevisionNotFound when the expression is empty or unknown.
        """
        if not expression or not expression.strip():
            raise RevisionNotFound(expression)
        oid = self.resolver(expression)
        if not oid:
            raise RevisionNotFound(expression)
        return oid

    def selected_revision(self):
        """Return the commit ID for the candidate, or None"""
        try:
            return self.resolve(self.candidate)
        except RevisionNotFound:
            return None
