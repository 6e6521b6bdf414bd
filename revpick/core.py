"""Subprocess, encoding and terminal helpers"""
import os
import subprocess
import sys

# /usr/include/stdlib.h
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# /usr/include/sysexits.h
EXIT_USAGE = 64
EXIT_NOINPUT = 66

ENCODING = 'utf-8'

WIN32 = sys.platform in {'win32', 'cygwin'}

# Refnames are bytes to git.  Anything that is not utf-8 is read as latin-9,
# which maps every byte, so decoding never fails.
_FALLBACK_ENCODINGS = (ENCODING, 'iso-8859-15')

# CREATE_NO_WINDOW from winbase.h
_CREATE_NO_WINDOW = 0x08000000


def decode(value, encoding=None, errors='strict'):
    """Return bytes as str, trying `encoding` before the fallbacks"""
    if value is None or isinstance(value, str) or encoding == 'bytes':
        return value
    candidates = (encoding,) + _FALLBACK_ENCODINGS if encoding else _FALLBACK_ENCODINGS
    for candidate in candidates:
        try:
            return value.decode(candidate, errors)
        except ValueError:
            continue
    return value.decode(ENCODING, errors='replace')


def list2cmdline(cmd):
    return subprocess.list2cmdline([decode(arg) for arg in cmd])


def start_command(cmd, cwd=None, add_env=None, **kwargs):
    """Start cmd with piped stdio and return the Popen object

    `add_env` values are layered on top of the current environment.
    """
    env = None
    if add_env:
        env = dict(os.environ, **add_env)
    kwargs.setdefault('stdin', subprocess.PIPE)
    kwargs.setdefault('stdout', subprocess.PIPE)
    kwargs.setdefault('stderr', subprocess.PIPE)
    if WIN32:
        # Keep a console window from flashing up for every git call.
        startupinfo = subprocess.STARTUPINFO()
        startupinfo.dwFlags = subprocess.STARTF_USESHOWWINDOW
        startupinfo.wShowWindow = subprocess.SW_HIDE
        kwargs['startupinfo'] = startupinfo
        kwargs['creationflags'] = _CREATE_NO_WINDOW
    return subprocess.Popen([decode(arg) for arg in cmd], cwd=cwd, env=env, **kwargs)


def run_command(cmd, encoding=None, **kwargs):
    """Run cmd to completion and return (exit_code, out, err) as str"""
    proc = start_command(cmd, **kwargs)
    out, err = proc.communicate()
    out = decode(out, encoding=encoding) or ''
    err = decode(err, encoding=encoding) or ''
    return (proc.returncode, out, err)


def getenv(name, default=None):
    return os.environ.get(name, default)


def print_stdout(msg, linesep='\n'):
    sys.stdout.write(msg + linesep)


def print_stderr(msg, linesep='\n'):
    sys.stderr.write(msg + linesep)


def error(msg, status=EXIT_FAILURE):
    """Report msg on stderr and exit"""
    print_stderr(msg)
    sys.exit(status)
