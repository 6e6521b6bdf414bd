"""Typed access to revpick's git-config options"""

CLIPBOARD = 'revpick.clipboard'
REMOTE_BRANCHES = 'revpick.remotebranches'
TAG_SORT = 'revpick.tagsort'


class Defaults:
    """Read-only class for holding defaults that get overridden"""

    clipboard = True
    remote_branches = True
    tag_sort = '-creatordate'


def clipboard(context):
    """Should the expression field be prefilled from the clipboard?"""
    return context.cfg.get(CLIPBOARD, default=Defaults.clipboard) is True


def remote_branches(context):
    """Should remote-tracking branches be offered alongside local branches?"""
    return context.cfg.get(REMOTE_BRANCHES, default=Defaults.remote_branches) is True


def tag_sort(context):
    """Return the for-each-ref sort key used for the tag list"""
    value = context.cfg.get(TAG_SORT, default=Defaults.tag_sort)
    if not isinstance(value, str) or not value:
        value = Defaults.tag_sort
    return value
