# This file is part of Emoji Registry.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from enum import Enum
from enum import IntEnum
from enum import unique

# Records whose age is at or above this major version are kept off the
# labeled partition. Platform support for the newest emoji lags behind the
# registry.
DEFAULT_RECENCY_THRESHOLD = 14

SKIN_TONE_MODIFIERS = {
    'light skin tone': 0x1F3FB,
    'medium-light skin tone': 0x1F3FC,
    'medium skin tone': 0x1F3FD,
    'medium-dark skin tone': 0x1F3FE,
    'dark skin tone': 0x1F3FF
}

SKIN_TONE_MODIFIER_CODEPOINTS = frozenset(SKIN_TONE_MODIFIERS.values())

EMOJI_PRESENTATION_SELECTOR = 0xFE0F

GROUP_PREFIX = '# group:'
SUBGROUP_PREFIX = '# subgroup:'


@unique
class Status(Enum):
    FULLY_QUALIFIED = 'fully-qualified'
    MINIMALLY_QUALIFIED = 'minimally-qualified'
    UNQUALIFIED = 'unqualified'
    COMPONENT = 'component'

    @property
    def is_fully_qualified(self) -> bool:
        return self == Status.FULLY_QUALIFIED

    @property
    def is_variant(self) -> bool:
        return self in (Status.MINIMALLY_QUALIFIED, Status.UNQUALIFIED)

    @property
    def is_component(self) -> bool:
        return self == Status.COMPONENT


@unique
class EmojiRole(IntEnum):
    VARIATION_BASE = 0
    MODIFIER_SEQUENCE = 1
    QUALIFICATION_VARIANT = 2
    COMPONENT = 3


@unique
class EmojiLabel(Enum):
    SMILEYS_AND_EMOTION = 'Smileys & Emotion'
    PEOPLE_AND_BODY = 'People & Body'
    ANIMALS_AND_NATURE = 'Animals & Nature'
    FOOD_AND_DRINK = 'Food & Drink'
    TRAVEL_AND_PLACES = 'Travel & Places'
    ACTIVITIES = 'Activities'
    OBJECTS = 'Objects'
    SYMBOLS = 'Symbols'
    FLAGS = 'Flags'

    @classmethod
    def from_group(cls, group: str | None) -> EmojiLabel | None:
        '''
        Returns the label for a group header name, or None for the
        Component group and any name the registry did not define
        '''
        if group is None:
            return None
        try:
            return cls(group.strip())
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value
