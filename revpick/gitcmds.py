"""Git queries used by the revision picker"""
from .errors import LoadFailure
from .i18n import N_
from .models import prefs
from .models.revselect import RefEntry

# %09 is expanded into a tab character by "git for-each-ref --format".
# Tabs are not allowed in refnames.
_REF_FORMAT = '%(refname)%09%(objectname)'
_TAG_FORMAT = '%(refname)%09%(objectname)%09%(*objectname)'


def rev_parse(context, expression):
    """Resolve a revision expression to a full commit ID

    Returns None when the expression does not name a commit.
    Expressions that look like command-line options are rejected.

    """
    expression = (expression or '').strip()
    if not expression or expression.startswith('-'):
        return None
    status, out, _ = context.git.rev_parse(
        expression + '^{commit}', verify=True, quiet=True
    )
    if status != 0:
        return None
    return out.strip() or None


def _for_each_ref(context, title, fmt, *refs, **kwargs):
    """Run "git for-each-ref" and return its output lines"""
    status, out, err = context.git.for_each_ref(format=fmt, *refs, **kwargs)
    if status != 0:
        raise LoadFailure(title, status, err)
    return [line for line in out.splitlines() if line]


def _strip_prefix(prefix, refname):
    return refname[len(prefix) :]


def tag_refs(context):
    """Return the repository's tags as RefEntry values, newest first

    Annotated tags are peeled so that each entry names the tagged commit.

    """
    prefix = 'refs/tags/'
    sort = prefs.tag_sort(context)
    lines = _for_each_ref(
        context, N_('Loading tags'), _TAG_FORMAT, 'refs/tags', sort=sort
    )
    result = []
    for line in lines:
        refname, oid, peeled = (line.split('\t') + ['', ''])[:3]
        if not refname.startswith(prefix):
            continue
        result.append(RefEntry(_strip_prefix(prefix, refname), peeled or oid))
    return result


def branch_refs(context, remote=None):
    """Return local branches followed by remote-tracking branches

    Symbolic "<remote>/HEAD" refs are skipped.

    """
    if remote is None:
        remote = prefs.remote_branches(context)
    query = ['refs/heads']
    if remote:
        query.append('refs/remotes')
    lines = _for_each_ref(context, N_('Loading branches'), _REF_FORMAT, *query)

    local_prefix = 'refs/heads/'
    remote_prefix = 'refs/remotes/'
    local_branches = []
    remote_branches = []
    for line in lines:
        refname, oid = (line.split('\t') + [''])[:2]
        if refname.startswith(local_prefix):
            local_branches.append(RefEntry(_strip_prefix(local_prefix, refname), oid))
        elif refname.startswith(remote_prefix) and not refname.endswith('/HEAD'):
            name = _strip_prefix(remote_prefix, refname)
            remote_branches.append(RefEntry(name, oid))
    return local_branches + remote_branches


def clipboard_revision(context, text):
    """Return the clipboard text when it names a commit, otherwise None"""
    text = (text or '').strip()
    if not text:
        return None
    if rev_parse(context, text) is None:
        return None
    return text

