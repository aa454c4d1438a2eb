# This file is part of Emoji Registry.
#
# SPDX-License-Identifier: GPL-3.0-only

# Line classification and data row decoding for emoji-test.txt

from __future__ import annotations

import re

from emojiregistry.const import GROUP_PREFIX
from emojiregistry.const import Status
from emojiregistry.const import SUBGROUP_PREFIX
from emojiregistry.structs import COMMENT_ROW
from emojiregistry.structs import DataRow
from emojiregistry.structs import DecodedRow
from emojiregistry.structs import GroupHeaderRow
from emojiregistry.structs import Row
from emojiregistry.structs import SubgroupHeaderRow

MAX_UNICODE_SCALAR = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)

HEX_RX = re.compile(r'[0-9A-Fa-f]+')

# 1F636 200D 1F32B FE0F ; fully-qualified # 😶‍🌫️ E13.1 face in clouds
#                                           ^^^^^^^^^^^^^^^^^^^^^^^^^^^
COMMENT_RX = re.compile(
    r'^\s*\S+\s+E(?P<version>\d+(?:\.\d+)?)\s+(?P<name>.*?)\s*$')


def is_unicode_scalar(codepoint: int) -> bool:
    return 0 <= codepoint <= MAX_UNICODE_SCALAR and codepoint not in SURROGATES


def decode_codepoints(column: str) -> tuple[int, ...] | None:
    codepoints: list[int] = []
    for token in column.split():
        if HEX_RX.fullmatch(token) is None:
            return None
        codepoint = int(token, 16)
        if not is_unicode_scalar(codepoint):
            return None
        codepoints.append(codepoint)

    if not codepoints:
        return None
    return tuple(codepoints)


def decode_comment(comment: str) -> tuple[str, str]:
    '''
    Returns the emoji version and the name found in the trailing comment
    of a data row, empty strings if the comment does not have that shape
    '''
    match = COMMENT_RX.match(comment)
    if match is None:
        return '', ''
    return match.group('version'), match.group('name')


def decode_data_row(line: str) -> DecodedRow | None:
    '''
    Decodes a data row of the form

        <hex> [<hex> ...] ; <status> # <comment>

    Returns None for anything that does not follow this form. Callers
    treat such lines as comments, newer registries may contain rows we
    do not understand.
    '''
    columns = line.split(';')
    if len(columns) != 2:
        return None

    codepoints_column, status_column = columns

    codepoints = decode_codepoints(codepoints_column)
    if codepoints is None:
        return None

    status_string, _, comment = status_column.partition('#')
    try:
        status = Status(status_string.strip())
    except ValueError:
        return None

    emoji_version, name = decode_comment(comment)
    return DecodedRow(codepoints=codepoints,
                      status=status,
                      emoji_version=emoji_version,
                      name=name)


def _get_header_name(line: str) -> str | None:
    # The name starts after the colon and the blank following it
    start = line.index(':') + 2
    if start > len(line):
        return None
    return line[start:].strip()


def classify_line(line: str) -> Row:
    if not line.startswith('#'):
        data = decode_data_row(line)
        if data is None:
            return COMMENT_ROW
        return DataRow(data)

    if line.startswith(GROUP_PREFIX):
        name = _get_header_name(line)
        if name is not None:
            return GroupHeaderRow(name)

    elif line.startswith(SUBGROUP_PREFIX):
        name = _get_header_name(line)
        if name is not None:
            return SubgroupHeaderRow(name)

    return COMMENT_ROW
