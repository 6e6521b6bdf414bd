"""Run revpick as a Python module.

Usage: python -m revpick
"""
import sys

from revpick import main


def run():
    """Start the command-line interface."""
    sys.exit(main.main())


if __name__ == '__main__':
    run()
