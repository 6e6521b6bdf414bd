"""Exception classes used by revpick"""


class RevpickError(Exception):
    """The base class of all revpick exceptions"""


class RevisionNotFound(RevpickError):
    """A revision expression does not name a commit in the repository"""

    def __init__(self, expression):
        RevpickError.__init__(self, 'revision not found: %r' % expression)
        self.expression = expression


class LoadFailure(RevpickError):
    """Loading a list of refs from git failed"""

    def __init__(self, title, status, err):
        RevpickError.__init__(self, f'{title}: exit status {status}')
        self.title = title
        self.status = status
        self.err = err
