# This file is part of Emoji Registry.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import TextIO

import logging
import os
import sys

ROOT_LOGGER = 'emojiregistry'


def parse_log_level(arg: str) -> int:
    '''
    Either numeric value or level name from logging module
    '''
    if arg.isdigit():
        return int(arg)
    if arg.isupper() and hasattr(logging, arg):
        return getattr(logging, arg)
    print('%s is not a valid loglevel' % repr(arg), file=sys.stderr)
    return 0


def parse_log_target(arg: str) -> str:
    '''
    [emojiregistry.]x.y  ->  emojiregistry.x.y
    .other_logger        ->  other_logger
    <None>               ->  emojiregistry
    '''
    arg = arg.lower()
    if not arg:
        return ROOT_LOGGER
    if arg.startswith('.'):
        return arg[1:]
    if arg.startswith(ROOT_LOGGER):
        return arg
    return f'{ROOT_LOGGER}.{arg}'


def parse_and_set_log_levels(arg: str) -> None:
    '''
    [=]LOGLEVEL             ->  emojiregistry=LOGLEVEL
    emojiregistry=LOGLEVEL  ->  emojiregistry=LOGLEVEL
    .other=10               ->  other=10
    .=10                    ->  <nothing>
    x.y=z=20                ->  emojiregistry.x.y=20
                                emojiregistry.z=20
    loader=10,rows=20       ->  emojiregistry.loader=10
                                emojiregistry.rows=20
    '''
    for directive in arg.split(','):
        directive = directive.strip()
        if not directive:
            continue
        if '=' not in directive:
            directive = '=' + directive
        targets, level = directive.rsplit('=', 1)
        level = parse_log_level(level.strip())
        for target in targets.split('='):
            target = parse_log_target(target.strip())
            if target:
                logging.getLogger(target).setLevel(level)
                print('Logger %s level set to %d' % (target, level),
                      file=sys.stderr)


class Colors:
    NONE = chr(27) + '[0m'
    RED = chr(27) + '[31m'
    GREEN = chr(27) + '[32m'
    BROWN = chr(27) + '[33m'
    BLUE = chr(27) + '[34m'
    CYAN = chr(27) + '[36m'
    BRIGHT_RED = chr(27) + '[31;1m'


def colorize(text: str, color: str) -> str:
    return color + text + Colors.NONE


class FancyFormatter(logging.Formatter):
    '''
    An eye-candy formatter with Colors
    '''
    colors_mapping = {
        'DEBUG': Colors.BLUE,
        'INFO': Colors.GREEN,
        'WARNING': Colors.BROWN,
        'ERROR': Colors.RED,
        'CRITICAL': Colors.BRIGHT_RED,
    }

    def __init__(self,
                 fmt: str | None = None,
                 datefmt: str | None = None,
                 use_color: bool = False) -> None:
        logging.Formatter.__init__(self, fmt, datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        record.levelname = '(%s)' % level[0]

        if self.use_color:
            c = FancyFormatter.colors_mapping.get(level, '')
            record.levelname = colorize(record.levelname, c)
            record.name = '%-25s' % colorize(record.name, Colors.CYAN)
        else:
            record.name = '%-25s|' % record.name

        return logging.Formatter.format(self, record)


def init() -> None:
    '''
    Initialize the logging system
    '''
    use_color = False
    if os.name != 'nt':
        use_color = sys.stderr.isatty()

    _stream_handler.setFormatter(
        FancyFormatter(
            '%(asctime)s %(levelname)s %(name)-35s %(message)s',
            '%x %H:%M:%S',
            use_color
        )
    )

    root_log = logging.getLogger(ROOT_LOGGER)
    root_log.setLevel(logging.WARNING)
    if _stream_handler not in root_log.handlers:
        root_log.addHandler(_stream_handler)
    root_log.propagate = False

    if os.environ.get('EMOJIREGISTRY_DEBUG', False):
        set_verbose()


def set_loglevels(loglevels_string: str) -> None:
    parse_and_set_log_levels(loglevels_string)


def set_verbose() -> None:
    parse_and_set_log_levels(f'{ROOT_LOGGER}=DEBUG')


_stream_handler: logging.StreamHandler[TextIO] = logging.StreamHandler()
