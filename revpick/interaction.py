import os

from . import core


def _format(title, message, *extra):
    """Lay out a titled message for the terminal"""
    lines = ['', title, '-' * len(title), message or title]
    lines.extend(text for text in extra if text)
    return '\n'.join(lines)


class Interaction:
    """Reports messages to the user

    The defaults print to the terminal.  widgets.standard.install()
    replaces critical() and information() with message boxes.

    """

    VERBOSE = bool(os.getenv('REVPICK_VERBOSE'))

    @staticmethod
    def information(title, message=None, details=None, informative_text=None):
        core.print_stdout(_format(title, message, informative_text, details))

    @staticmethod
    def critical(title, message=None, details=None):
        core.print_stderr(_format(title, message, details))

    @classmethod
    def log_status(cls, status, out, err=None):
        """Log command output followed by its exit status"""
        for text in (out, err):
            if text:
                cls.log(text)
        cls.log('exit status %s' % status)

    @classmethod
    def log(cls, message):
        if cls.VERBOSE:
            core.print_stderr(message)
