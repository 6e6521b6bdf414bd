"""Runs git commands against one repository"""
from functools import partial
import os
import subprocess
import time

from . import core
from .interaction import Interaction


REVPICK_TRACE = core.getenv('REVPICK_TRACE', '')
GIT = core.getenv('REVPICK_GIT', 'git')
STATUS = 0
STDOUT = 1
STDERR = 2


def dashify(value):
    return value.replace('_', '-')


def transform_kwargs(**kwargs):
    """Translate keyword arguments into git options

    None and False are skipped so that callers can pass optional values
    straight through.  True becomes a bare flag.  Other values are appended
    as "-x<value>" for single-letter names and "--name=<value>" otherwise.

    """
    args = []
    for name, value in kwargs.items():
        if value is None or value is False:
            continue
        if len(name) == 1:
            option, separator = '-' + name, ''
        else:
            option, separator = '--' + dashify(name), '='
        if value is True:
            args.append(option)
        elif isinstance(value, (str, int, float)):
            args.append(f'{option}{separator}{value}')
    return args


def _trace(command, elapsed, status, out, err):
    """Report a finished command according to REVPICK_TRACE"""
    cmdline = core.list2cmdline(command)
    if REVPICK_TRACE == 'trace':
        Interaction.log_status(status, f'trace: {elapsed:.3f}s: {cmdline}', '')
    elif REVPICK_TRACE == 'full':
        output = f" '{out}' '{err}'" if out or err else ''
        core.print_stderr(f'# {elapsed:.3f}s: {cmdline} -> {status}{output}')
    else:
        core.print_stderr(f'# {elapsed:.3f}s: {cmdline}')


class Git:
    """Runs "git <command>" in the repository found at the worktree path

    Any git subcommand is available as a method: git.for_each_ref(...)
    runs "git for-each-ref".  Results are (status, out, err) tuples.

    """

    def __init__(self, worktree=None):
        self._worktree = None
        self._git_dir = None
        self.set_worktree(worktree or os.getcwd())

    def set_worktree(self, path):
        """Locate the repository containing path and return its worktree

        Bare repositories have a git directory but no worktree.
        """
        self._worktree = None
        self._git_dir = None
        path = core.decode(path)
        if not path or not os.path.isdir(path):
            return None
        status, out, _ = self.rev_parse(absolute_git_dir=True, _cwd=path)
        if status != 0 or not out:
            return None
        self._git_dir = out
        status, out, _ = self.rev_parse(show_toplevel=True, _cwd=path)
        if status == 0 and out:
            self._worktree = out
        return self._worktree

    def worktree(self):
        return self._worktree

    def getcwd(self):
        """Return the directory that commands run in"""
        return self._worktree or self._git_dir

    def is_valid(self):
        """Was a repository found?"""
        return bool(self._git_dir)

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        git_cmd = partial(self.git, name)
        setattr(self, name, git_cmd)
        return git_cmd

    @staticmethod
    def execute(
        command,
        _add_env=None,
        _cwd=None,
        _encoding=None,
        _raw=False,
        _stdin=None,
        _stdout=subprocess.PIPE,
        _stderr=subprocess.PIPE,
    ):
        """Run command and return (status, out, err)

        Trailing newlines are removed from out unless _raw is set.
        """
        start = time.time()
        status, out, err = core.run_command(
            command,
            add_env=_add_env,
            cwd=_cwd or os.getcwd(),
            encoding=_encoding,
            stdin=_stdin,
            stdout=_stdout,
            stderr=_stderr,
        )
        if not _raw:
            out = out.rstrip('\n')
        if REVPICK_TRACE:
            _trace(command, abs(time.time() - start), status, out, err)
        return (status, out, err)

    def git(self, cmd, *args, **kwargs):
        """Run "git <cmd> <options> <args>"

        Keyword arguments with a leading underscore go to execute(),
        the rest are turned into options by transform_kwargs().
        """
        execute_kwargs = {'_cwd': self.getcwd()}
        for key in [key for key in kwargs if key.startswith('_')]:
            execute_kwargs[key] = kwargs.pop(key)
        command = [GIT, dashify(cmd)] + transform_kwargs(**kwargs) + list(args)
        try:
            return self.execute(command, **execute_kwargs)
        except OSError:
            message = (
                "error: unable to execute '%s'; set REVPICK_GIT to the path of git"
                % GIT
            )
            return (1, '', message)


def create(worktree=None):
    """Create Git instances

    >>> git = create()
    >>> status, out, err = git.version()
    >>> 'git' == out[:3].lower()
    True

    """
    return Git(worktree=worktree)
