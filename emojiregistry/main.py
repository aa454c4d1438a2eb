# This file is part of Emoji Registry.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import TextIO

import argparse
import sys
from functools import partial

from emojiregistry import logging_helpers
from emojiregistry import sources
from emojiregistry.const import DEFAULT_RECENCY_THRESHOLD
from emojiregistry.exceptions import RegistryUnavailableError
from emojiregistry.index import Registry
from emojiregistry.loader import EmojiLoader
from emojiregistry.structs import Emoji
from emojiregistry.structs import LoaderOptions


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='emojiregistry',
        description='Load an emoji-test.txt registry and show the emojis '
                    'offered on a keyboard')

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('file', nargs='?',
                        help='Path to emoji-test.txt')
    source.add_argument('--resource', metavar='PATH',
                        help='GResource path of the registry')

    parser.add_argument('--bundle', metavar='FILE',
                        help='GResource bundle to register before '
                             'looking up --resource')
    parser.add_argument('--max-age', type=int,
                        default=DEFAULT_RECENCY_THRESHOLD,
                        help='Leave emojis of this major version and newer '
                             'off the keyboard (default: %(default)s)')
    parser.add_argument('--show', metavar='CHAR',
                        help='Show details of one emoji')
    parser.add_argument('-l', '--loglevel', metavar='SPEC',
                        help='Set log levels, e.g. loader=DEBUG')
    return parser


def print_summary(registry: Registry, file: TextIO) -> None:
    p = partial(print, file=file)
    for label, emojis in registry.labeled_emojis.items():
        p(f'{label}: {len(emojis)}')
    p(f'Total: {len(registry.entire_emoji_set)}')


def print_emoji(emoji: Emoji, file: TextIO) -> None:
    p = partial(print, file=file)
    p(f'{emoji.character}  {emoji.codepoints_string}')
    p(f'  name:     {emoji.name}')
    p(f'  status:   {emoji.status.value}')
    p(f'  role:     {emoji.role.name.lower()}')
    p(f'  group:    {emoji.group}')
    p(f'  subgroup: {emoji.subgroup}')
    p(f'  order:    {emoji.sequence_order}')

    base = emoji.base_form or emoji.generic_form
    if base is not None:
        p(f'  base:     {base.character}  {base.codepoints_string}')

    for variant in emoji.variant_forms:
        p(f'  variant:  {variant.character}  {variant.codepoints_string}')

    for skin_tone in emoji.skin_tone_forms:
        p(f'  tone:     {skin_tone.character}  {skin_tone.codepoints_string}')


def main(argv: list[str] | None = None) -> int:
    args = create_arg_parser().parse_args(argv)

    logging_helpers.init()
    if args.loglevel:
        logging_helpers.set_loglevels(args.loglevel)

    if args.resource is not None:
        provider = partial(sources.read_resource, args.resource, args.bundle)
    else:
        provider = partial(sources.read_file, args.file)

    loader = EmojiLoader(LoaderOptions(recency_threshold=args.max_age))
    try:
        registry = loader.load_from(provider)
    except RegistryUnavailableError as error:
        print(f'emojiregistry: {error}', file=sys.stderr)
        return 1

    if args.show is None:
        print_summary(registry, sys.stdout)
        return 0

    emoji = registry.entire_emoji_set.get_generic(args.show)
    if emoji is None:
        print(f'emojiregistry: {args.show} not found', file=sys.stderr)
        return 1

    print_emoji(emoji, sys.stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
