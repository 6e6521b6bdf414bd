import os
import shutil
import stat
import tempfile

# Widget tests run without a display.
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

import pytest
from qtpy import QtCore
from qtpy import QtWidgets
from unittest.mock import Mock, patch  # noqa pylint: disable=unused-import

from revpick import core
from revpick import git
from revpick import gitcfg


# shutil.rmtree() can't remove read-only files on Windows.  This onerror
# handler, adapted from <http://stackoverflow.com/a/1889686/357338>, works
# around this by changing such files to be writable and then re-trying.
def remove_readonly(func, path, _exc_info):
    if func is os.remove and not os.access(path, os.W_OK):
        os.chmod(path, stat.S_IWRITE)
        func(path)
    else:
        raise AssertionError('Should not happen')


def touch(*paths):
    """Open and close a file to either create it or update its mtime"""
    for path in paths:
        open(path, 'a').close()


def write_file(path, content):
    """Write content to the specified file path"""
    with open(path, 'w') as f:
        f.write(content)


def run_git(*args, **kwargs):
    """Run git with the specified arguments"""
    status, out, _ = core.run_command(['git'] + list(args), **kwargs)
    assert status == 0
    return out.strip()


def commit_files(message='initial commit', date=None):
    """Commit the current state and return the new commit ID"""
    add_env = None
    if date is not None:
        add_env = {'GIT_AUTHOR_DATE': date, 'GIT_COMMITTER_DATE': date}
    run_git('commit', '--allow-empty', '-m', message, add_env=add_env)
    return run_git('rev-parse', 'HEAD')


def initialize_repo():
    """Initialize a git repository in the current directory"""
    run_git('init')
    run_git('symbolic-ref', 'HEAD', 'refs/heads/main')
    run_git('config', '--local', 'user.name', 'Your Name')
    run_git('config', '--local', 'user.email', 'you@example.com')
    run_git('config', '--local', 'commit.gpgsign', 'false')
    run_git('config', '--local', 'tag.gpgsign', 'false')
    touch('A', 'B')
    run_git('add', 'A', 'B')


@pytest.fixture
def app_context():
    """Create a repository in a temporary directory and return its context"""
    tmp_directory = tempfile.mkdtemp('-revpick-test')
    current_directory = os.getcwd()
    os.chdir(tmp_directory)

    initialize_repo()
    context = Mock()
    context.git = git.create()
    context.git.set_worktree(os.getcwd())
    context.cfg = gitcfg.create(context)

    yield context

    os.chdir(current_directory)
    shutil.rmtree(tmp_directory, onerror=remove_readonly)


@pytest.fixture(scope='session')
def qapp():
    """Return the QApplication shared by the widget tests"""
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication(['revpick-test'])
    return app


def process_events():
    """Deliver queued signals to the GUI thread"""
    for _ in range(3):
        QtCore.QCoreApplication.sendPostedEvents()
        QtCore.QCoreApplication.processEvents()


def finish_loading(*loaders):
    """Wait for background loads and deliver their results"""
    for loader in loaders:
        loader.wait()
    process_events()
