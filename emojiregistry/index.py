# This file is part of Emoji Registry.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import Iterator

import re
from collections import OrderedDict
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field

from emojiregistry.const import EmojiLabel
from emojiregistry.const import SKIN_TONE_MODIFIER_CODEPOINTS
from emojiregistry.structs import Emoji
from emojiregistry.structs import EmojiArena

_MODIFIERS = [chr(codepoint) for codepoint
              in sorted(SKIN_TONE_MODIFIER_CODEPOINTS)]


class EmojiIndex(Mapping[str, Emoji]):
    '''
    Every record of a registry keyed by its character
    '''

    def __init__(self, emojis: dict[str, Emoji] | None = None) -> None:
        self._emojis: dict[str, Emoji] = emojis or {}

    def __getitem__(self, key: str) -> Emoji:
        return self._emojis[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._emojis)

    def __len__(self) -> int:
        return len(self._emojis)

    def get_generic(self, character: str) -> Emoji | None:
        '''
        Looks up a character, retrying without skin tone modifiers if the
        character itself is unknown. The retry returns the variation base
        of whatever record it finds.
        '''
        emoji = self._emojis.get(character)
        if emoji is not None:
            return emoji

        for mod in _MODIFIERS:
            character = character.replace(mod, '')

        emoji = self._emojis.get(character)
        if emoji is None:
            return None
        return emoji.base_form or emoji

    def get_regex(self) -> str:
        emojis = sorted(self._emojis, key=len, reverse=True)
        return '(' + '|'.join(re.escape(u) for u in emojis) + ')'


class LabeledEmojis(Mapping[EmojiLabel, tuple[Emoji, ...]]):
    '''
    Variation base records grouped by label. Labels iterate in the order
    their group was first seen, records in registry order.
    '''

    def __init__(self,
                 labeled: OrderedDict[EmojiLabel, list[Emoji]] | None = None
                 ) -> None:

        self._labeled: OrderedDict[EmojiLabel, tuple[Emoji, ...]] = \
            OrderedDict()
        if labeled is not None:
            for label, emojis in labeled.items():
                self._labeled[label] = tuple(emojis)

    def __getitem__(self, key: EmojiLabel) -> tuple[Emoji, ...]:
        return self._labeled[key]

    def __iter__(self) -> Iterator[EmojiLabel]:
        return iter(self._labeled)

    def __len__(self) -> int:
        return len(self._labeled)

    def iter_emojis(self) -> Iterator[tuple[EmojiLabel, Emoji]]:
        for label, emojis in self._labeled.items():
            for emoji in emojis:
                yield label, emoji


@dataclass(frozen=True)
class Registry:
    arena: EmojiArena = field(default_factory=EmojiArena, compare=False)
    entire_emoji_set: EmojiIndex = field(default_factory=EmojiIndex)
    labeled_emojis: LabeledEmojis = field(default_factory=LabeledEmojis)

    @property
    def is_empty(self) -> bool:
        return not self.entire_emoji_set

    def get(self, character: str) -> Emoji | None:
        return self.entire_emoji_set.get(character)

    def __contains__(self, character: object) -> bool:
        return character in self.entire_emoji_set


EMPTY_REGISTRY = Registry()
