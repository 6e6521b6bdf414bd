#!/usr/bin/env python
import os

from setuptools import setup

# fmt: off
here = os.path.dirname(os.path.abspath(__file__))
version = os.path.join(here, 'revpick', '_version.py')
scope = {}
with open(version) as f:
    exec(f.read(), scope)  # pylint: disable=exec-used
version = scope['VERSION']
# fmt: on


def main():
    """Runs setuptools.setup()"""
    setup(
        name='git-revpick',
        version=version,
        description='Choose a commit by revision expression, tag or branch',
        long_description='A "Go to commit" dialog for Git repositories',
        license='GPLv2',
        python_requires='>=3.8',
        packages=['revpick', 'revpick.models', 'revpick.widgets'],
        scripts=['bin/git-revpick'],
        install_requires=[
            'qtpy',
            'PyQt5',
        ],
        extras_require={
            'testing': [
                'pytest',
            ],
        },
        platforms='any',
    )


if __name__ == '__main__':
    main()
