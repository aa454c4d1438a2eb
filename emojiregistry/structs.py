# This file is part of Emoji Registry.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from typing import Callable
from typing import Iterator

from dataclasses import dataclass
from dataclasses import field

from emojiregistry.const import DEFAULT_RECENCY_THRESHOLD
from emojiregistry.const import EmojiRole
from emojiregistry.const import SKIN_TONE_MODIFIER_CODEPOINTS
from emojiregistry.const import Status

AgeResolverT = Callable[['Emoji'], 'int | None']


def generate_unicode_sequence(codepoints: tuple[int, ...]) -> str:
    '''
    Generates a unicode sequence from a list of codepoints
    '''
    return ''.join(chr(codepoint) for codepoint in codepoints)


@dataclass(frozen=True)
class DecodedRow:
    codepoints: tuple[int, ...]
    status: Status
    emoji_version: str = ''
    name: str = ''

    @property
    def character(self) -> str:
        return generate_unicode_sequence(self.codepoints)


@dataclass(frozen=True)
class Row:
    pass


@dataclass(frozen=True)
class CommentRow(Row):
    pass


@dataclass(frozen=True)
class GroupHeaderRow(Row):
    name: str


@dataclass(frozen=True)
class SubgroupHeaderRow(Row):
    name: str


@dataclass(frozen=True)
class DataRow(Row):
    data: DecodedRow


COMMENT_ROW = CommentRow()


@dataclass
class LoaderOptions:
    recency_threshold: int = DEFAULT_RECENCY_THRESHOLD
    # None selects emojiregistry.age.get_emoji_age
    age_resolver: AgeResolverT | None = None


@dataclass
class Emoji:
    '''
    One record of the registry. Relationships to other records are stored
    as arena ids and resolved through the arena the record belongs to.
    '''

    id: int
    character: str
    codepoints: tuple[int, ...]
    status: Status
    sequence_order: int
    group: str | None = None
    subgroup: str | None = None
    emoji_version: str = ''
    name: str = ''
    base_form_id: int | None = None
    variant_form_ids: list[int] = field(default_factory=list)
    generic_form_id: int | None = None
    skin_tone_form_ids: list[int] = field(default_factory=list)
    arena: EmojiArena | None = field(default=None,
                                     repr=False,
                                     compare=False)

    @property
    def is_modifier_sequence(self) -> bool:
        return any(codepoint in SKIN_TONE_MODIFIER_CODEPOINTS
                   for codepoint in self.codepoints)

    @property
    def role(self) -> EmojiRole:
        if self.status.is_component:
            return EmojiRole.COMPONENT
        if self.status.is_variant:
            return EmojiRole.QUALIFICATION_VARIANT
        if self.is_modifier_sequence:
            return EmojiRole.MODIFIER_SEQUENCE
        return EmojiRole.VARIATION_BASE

    @property
    def codepoints_string(self) -> str:
        return ' '.join(f'{codepoint:04X}' for codepoint in self.codepoints)

    @property
    def base_form(self) -> Emoji | None:
        return self._resolve(self.base_form_id)

    @property
    def variant_forms(self) -> list[Emoji]:
        return self._resolve_all(self.variant_form_ids)

    @property
    def generic_form(self) -> Emoji | None:
        return self._resolve(self.generic_form_id)

    @property
    def skin_tone_forms(self) -> list[Emoji]:
        return self._resolve_all(self.skin_tone_form_ids)

    def get_skin_tone_form(self, modifier: int) -> Emoji | None:
        if modifier not in SKIN_TONE_MODIFIER_CODEPOINTS:
            raise ValueError(f'U+{modifier:04X} is not a skin tone modifier')

        for emoji in self.skin_tone_forms:
            if modifier in emoji.codepoints:
                return emoji
        return None

    def _resolve(self, emoji_id: int | None) -> Emoji | None:
        if emoji_id is None or self.arena is None:
            return None
        return self.arena[emoji_id]

    def _resolve_all(self, emoji_ids: list[int]) -> list[Emoji]:
        if self.arena is None:
            return []
        return [self.arena[emoji_id] for emoji_id in emoji_ids]

    def __str__(self) -> str:
        return self.character


class EmojiArena:
    '''
    Owns every record created during one load. Records are addressed by a
    dense id assigned in creation order.
    '''

    def __init__(self) -> None:
        self._emojis: list[Emoji] = []

    def create(self,
               data: DecodedRow,
               sequence_order: int,
               group: str | None,
               subgroup: str | None
               ) -> Emoji:

        emoji = Emoji(id=len(self._emojis),
                      character=data.character,
                      codepoints=data.codepoints,
                      status=data.status,
                      sequence_order=sequence_order,
                      group=group,
                      subgroup=subgroup,
                      emoji_version=data.emoji_version,
                      name=data.name,
                      arena=self)
        self._emojis.append(emoji)
        return emoji

    def link_variant(self, base: Emoji, variant: Emoji) -> None:
        assert base.status.is_fully_qualified
        assert variant.status.is_variant
        assert variant.base_form_id is None
        base.variant_form_ids.append(variant.id)
        variant.base_form_id = base.id

    def link_skin_tone(self, generic: Emoji, modified: Emoji) -> None:
        assert generic.role == EmojiRole.VARIATION_BASE
        assert modified.role == EmojiRole.MODIFIER_SEQUENCE
        assert modified.generic_form_id is None
        generic.skin_tone_form_ids.append(modified.id)
        modified.generic_form_id = generic.id

    def __getitem__(self, emoji_id: int) -> Emoji:
        return self._emojis[emoji_id]

    def __len__(self) -> int:
        return len(self._emojis)

    def __iter__(self) -> Iterator[Emoji]:
        return iter(self._emojis)
