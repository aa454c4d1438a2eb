# This file is part of Emoji Registry.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import logging

import emoji

from emojiregistry.const import EMOJI_PRESENTATION_SELECTOR
from emojiregistry.structs import Emoji

log = logging.getLogger('emojiregistry.age')


def get_version_major(version: float | str | None) -> int | None:
    if version is None or version == '':
        return None
    try:
        return int(float(version))
    except ValueError:
        log.debug('Invalid emoji version: %r', version)
        return None


def get_codepoint_age(codepoint: int) -> int | None:
    '''
    Returns the major version that introduced a codepoint as an emoji,
    None if the emoji package does not know the codepoint
    '''
    char = chr(codepoint)
    for candidate in (char, char + chr(EMOJI_PRESENTATION_SELECTOR)):
        data = emoji.EMOJI_DATA.get(candidate)
        if data is not None:
            return get_version_major(data.get('E'))
    return None


def get_emoji_age(emoji_: Emoji) -> int | None:
    # A sequence can not be supported before its leading scalar
    return get_codepoint_age(emoji_.codepoints[0])


def get_annotated_age(emoji_: Emoji) -> int | None:
    '''
    Uses the version from the row comment (E13.1) of the registry
    '''
    return get_version_major(emoji_.emoji_version)
