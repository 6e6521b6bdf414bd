"""Launcher and command line interface to git-revpick"""
import argparse
import sys

from . import app
from . import core


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    args = parse_args(argv)
    return args.func(args)


def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog='git-revpick',
        description='choose a commit by revision expression, tag or branch',
    )
    parser.set_defaults(func=cmd_goto)
    app.add_common_arguments(parser)
    return parser.parse_args(argv)


def cmd_goto(args):
    """Show the "Go to commit" dialog and print the chosen commit ID"""
    from .widgets.gotocommit import go_to_commit

    context = app.application_init(args)
    ok, oid = go_to_commit(context)
    context.app.stop()
    if not ok:
        return core.EXIT_FAILURE
    core.print_stdout(oid)
    return core.EXIT_SUCCESS
