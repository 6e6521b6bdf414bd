"""Command-line argument handling and the application context"""
import os
import signal
import sys

try:
    from qtpy import QtCore
except ImportError as exc:
    sys.stderr.write(
        'git-revpick needs qtpy together with PyQt5 (or another Qt binding).\n'
        'Importing qtpy failed with: %s\n' % exc
    )
    sys.exit(1)

from qtpy import QtWidgets

from .i18n import N_
from .interaction import Interaction
from .widgets import standard
from . import core
from . import git
from . import gitcfg
from . import version


class RevpickApplication:
    """Owns the QApplication and routes messages to dialogs"""

    def __init__(self, argv):
        standard.install()
        app = QtWidgets.QApplication.instance()
        if app is None:
            app = QtWidgets.QApplication(list(argv))
        app.setApplicationName('git-revpick')
        self._app = app

    def stop(self):
        """Wait for background loads before the process exits"""
        QtCore.QThreadPool.globalInstance().waitForDone()


def add_common_arguments(parser):
    """Add the options shared by every git-revpick command"""
    parser.add_argument(
        '--version', default=False, action='store_true', help='print version number'
    )
    parser.add_argument(
        '-r',
        '--repo',
        metavar='<repo>',
        help='open the specified git repository',
    )


def process_args(args):
    """Handle --version and normalize --repo to a real directory path"""
    if args.version:
        version.print_version()
        sys.exit(core.EXIT_SUCCESS)

    repo = core.decode(args.repo or os.getcwd())
    if repo.startswith('file:'):
        repo = repo[len('file:') :]
    repo = os.path.realpath(repo)
    if not os.path.isdir(repo):
        core.error(
            N_(
                'fatal: "%s" is not a directory.  '
                'Please specify a valid --repo <path>.'
            )
            % repo,
            status=core.EXIT_USAGE,
        )
    args.repo = repo


def application_init(args):
    """Validate the arguments and build the ApplicationContext"""
    # Ctrl-C exits immediately and git never starts a pager.
    signal.signal(signal.SIGINT, signal.SIG_DFL)
    os.environ['GIT_PAGER'] = ''

    process_args(args)
    context = ApplicationContext(args)
    context.git = git.create(worktree=args.repo)
    context.cfg = gitcfg.create(context)
    context.app = RevpickApplication(sys.argv)
    if not context.git.is_valid():
        Interaction.critical(
            N_('Not a git repository'),
            message=N_('"%s" is not inside a git repository.') % args.repo,
        )
        sys.exit(core.EXIT_NOINPUT)
    return context


class ApplicationContext:
    """The repository, configuration and application used by the dialog"""

    def __init__(self, args):
        self.args = args
        self.app = None  # RevpickApplication
        self.git = None  # git.Git
        self.cfg = None  # gitcfg.GitConfig
