#!/usr/bin/env python3

from __future__ import annotations

import sys

if sys.version_info < (3, 10):
    sys.exit('Emoji Registry needs Python 3.10+')

from pathlib import Path

from setuptools import find_packages
from setuptools import setup

REPO_DIR = Path(__file__).resolve().parent


def get_version() -> str:
    init_file = REPO_DIR / 'emojiregistry' / '__init__.py'
    for line in init_file.read_text(encoding='utf-8').splitlines():
        if line.startswith('__version__'):
            return line.split('=', 1)[1].strip().strip('\'"')
    raise ValueError('__version__ not found in %s' % init_file)


setup(
    name='emojiregistry',
    version=get_version(),
    description='Emoji registry loader for keyboards and emoji pickers',
    license='GPL-3.0-only',
    python_requires='>=3.10',
    packages=find_packages(include=['emojiregistry', 'emojiregistry.*']),
    install_requires=[
        'emoji>=2.0.0',
    ],
    extras_require={
        'gresource': ['PyGObject>=3.42.0'],
    },
    entry_points={
        'console_scripts': [
            'emojiregistry = emojiregistry.main:main',
        ],
    },
)
