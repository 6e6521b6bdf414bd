"""Provide git-revpick's version number"""
from importlib import metadata

from . import core
from ._version import VERSION


def version():
    """Returns the current version"""
    try:
        metadata_version = metadata.version('git-revpick')
    except metadata.PackageNotFoundError:
        return VERSION

    # Building from a tarball can end up reporting "0.0.0" or "0.1.dev*".
    # Use the fallback version in these scenarios.
    if not metadata_version.startswith('0.'):
        return metadata_version
    return VERSION


def builtin_version():
    """Returns the version recorded in revpick/_version.py"""
    return VERSION


def print_version(builtin=False, brief=False):
    if builtin:
        msg = builtin_version()
    else:
        msg = version()
    if not brief:
        msg = 'git-revpick version %s' % msg
    core.print_stdout(msg)
