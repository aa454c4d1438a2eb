# This file is part of Emoji Registry.
#
# SPDX-License-Identifier: GPL-3.0-only

'''
Loads an emoji-test.txt registry.

The registry lists every emoji sequence once per qualification status. The
meaning of a row depends on the rows before it:

1F575 FE0F 200D 2642 FE0F   ; fully-qualified     # 🕵️‍♂️ E4.0 man detective
1F575 200D 2642 FE0F        ; unqualified         # 🕵‍♂️ E4.0 man detective
1F575 1F3FB 200D 2642 FE0F  ; fully-qualified     # 🕵🏻‍♂️ E4.0 man detective: light skin tone
1F575 1F3FB 200D 2642       ; minimally-qualified # 🕵🏻‍♂ E4.0 man detective: light skin tone

The first row is a variation base, a fully-qualified record without skin
tone modifier. Minimally-qualified and unqualified rows that follow are
variants of the last fully-qualified record, fully-qualified rows with a
modifier are skin tone forms of the last variation base.
'''

from __future__ import annotations

from typing import Callable
from typing import Protocol

import logging
import threading
from collections import OrderedDict

from emojiregistry.age import get_emoji_age
from emojiregistry.const import EmojiLabel
from emojiregistry.exceptions import EmojiRegistryError
from emojiregistry.exceptions import LoadCancelledError
from emojiregistry.exceptions import LoadInProgressError
from emojiregistry.exceptions import RegistryUnavailableError
from emojiregistry.index import EMPTY_REGISTRY
from emojiregistry.index import EmojiIndex
from emojiregistry.index import LabeledEmojis
from emojiregistry.index import Registry
from emojiregistry.rows import classify_line
from emojiregistry.structs import AgeResolverT
from emojiregistry.structs import CommentRow
from emojiregistry.structs import DataRow
from emojiregistry.structs import DecodedRow
from emojiregistry.structs import Emoji
from emojiregistry.structs import EmojiArena
from emojiregistry.structs import GroupHeaderRow
from emojiregistry.structs import LoaderOptions
from emojiregistry.structs import SubgroupHeaderRow

log = logging.getLogger('emojiregistry.loader')

TextT = str | bytes | None
TextProviderT = Callable[[], TextT]


class Cancellable(Protocol):
    def is_cancelled(self) -> bool:
        ...


def decode_text(text: TextT) -> str:
    if text is None:
        raise RegistryUnavailableError('No registry text available')

    if isinstance(text, bytes):
        try:
            return text.decode('utf-8')
        except UnicodeDecodeError as error:
            raise RegistryUnavailableError(
                f'Registry text is not valid UTF-8: {error}') from error

    return text


class _LoadContext:
    '''
    Rolling state of a single pass over the registry
    '''

    def __init__(self,
                 recency_threshold: int,
                 age_resolver: AgeResolverT
                 ) -> None:

        self._recency_threshold = recency_threshold
        self._age_resolver = age_resolver

        self._arena = EmojiArena()
        self._entire_emoji_set: dict[str, Emoji] = {}
        self._labeled_emojis: OrderedDict[EmojiLabel, list[Emoji]] = \
            OrderedDict()

        self._group: str | None = None
        self._subgroup: str | None = None
        self._label: EmojiLabel | None = None

        # Fully-qualified and not a modifier sequence
        self._variation_base: Emoji | None = None

        # Fully-qualified, may be a modifier sequence
        self._fully_qualified: Emoji | None = None

        self._sequence_counter = 0
        self.ignored_lines = 0

    def process(self, line: str) -> None:
        row = classify_line(line)
        match row:
            case GroupHeaderRow(name=name):
                self._set_group(name)

            case SubgroupHeaderRow(name=name):
                self._subgroup = name

            case DataRow(data=data):
                self._process_data(data)

            case CommentRow():
                if line.strip() and not line.startswith('#'):
                    log.debug('Ignoring malformed row: %r', line)
                    self.ignored_lines += 1

    def _set_group(self, name: str) -> None:
        self._group = name
        self._label = EmojiLabel.from_group(name)
        if self._label is None:
            log.debug('Group without label: %s', name)
            return

        if self._label not in self._labeled_emojis:
            self._labeled_emojis[self._label] = []

    def _process_data(self, data: DecodedRow) -> None:
        if self._group is None:
            log.info('Data row before any group header: %s', data.character)

        emoji = self._arena.create(data,
                                   self._sequence_counter,
                                   self._group,
                                   self._subgroup)

        if emoji.character in self._entire_emoji_set:
            log.debug('Duplicate row replaces previous record: %s',
                      emoji.codepoints_string)
        self._entire_emoji_set[emoji.character] = emoji

        if data.status.is_fully_qualified:
            self._link_fully_qualified(emoji)

        elif data.status.is_variant:
            self._link_variant(emoji)

        self._sequence_counter += 1

    def _link_fully_qualified(self, emoji: Emoji) -> None:
        self._fully_qualified = emoji

        if emoji.is_modifier_sequence:
            if self._variation_base is None:
                log.info('Modifier sequence without variation base: %s',
                         emoji.codepoints_string)
                return
            self._arena.link_skin_tone(self._variation_base, emoji)
            return

        self._variation_base = emoji
        if self._label is None:
            return

        if self._is_recent(emoji):
            log.debug('Leaving recent emoji off the keyboard: %s',
                      emoji.codepoints_string)
            return

        self._labeled_emojis[self._label].append(emoji)

    def _link_variant(self, emoji: Emoji) -> None:
        if self._fully_qualified is None:
            log.info('%s without fully-qualified form: %s',
                     emoji.status.value, emoji.codepoints_string)
            return
        self._arena.link_variant(self._fully_qualified, emoji)

    def _is_recent(self, emoji: Emoji) -> bool:
        age = self._age_resolver(emoji)
        if age is None:
            return False
        return age >= self._recency_threshold

    def to_registry(self) -> Registry:
        return Registry(arena=self._arena,
                        entire_emoji_set=EmojiIndex(self._entire_emoji_set),
                        labeled_emojis=LabeledEmojis(self._labeled_emojis))


class EmojiLoader:
    '''
    Builds the entire emoji set and the labeled emojis for a keyboard out
    of an emoji-test.txt registry.

    A load builds a new registry and replaces the published one only when
    the pass completed, readers never see a partially built registry.
    '''

    def __init__(self, options: LoaderOptions | None = None) -> None:
        self._options = options or LoaderOptions()
        self._registry = EMPTY_REGISTRY
        self._lock = threading.Lock()

    @property
    def options(self) -> LoaderOptions:
        return self._options

    @property
    def registry(self) -> Registry:
        return self._registry

    @property
    def entire_emoji_set(self) -> EmojiIndex:
        return self._registry.entire_emoji_set

    @property
    def labeled_emojis(self) -> LabeledEmojis:
        return self._registry.labeled_emojis

    def load(self,
             text: TextT,
             cancellable: Cancellable | None = None
             ) -> Registry:

        if not self._lock.acquire(blocking=False):
            raise LoadInProgressError('A load is already in progress')

        try:
            return self._load(decode_text(text), cancellable)
        finally:
            self._lock.release()

    def load_from(self,
                  provider: TextProviderT,
                  cancellable: Cancellable | None = None
                  ) -> Registry:

        if not self._lock.acquire(blocking=False):
            raise LoadInProgressError('A load is already in progress')

        try:
            try:
                text = provider()
            except EmojiRegistryError:
                raise
            except Exception as error:
                raise RegistryUnavailableError(
                    f'Unable to get registry text: {error}') from error

            return self._load(decode_text(text), cancellable)
        finally:
            self._lock.release()

    def clear(self) -> None:
        if not self._lock.acquire(blocking=False):
            raise LoadInProgressError('A load is already in progress')

        self._registry = EMPTY_REGISTRY
        self._lock.release()

    def _load(self,
              text: str,
              cancellable: Cancellable | None
              ) -> Registry:

        age_resolver = self._options.age_resolver or get_emoji_age
        context = _LoadContext(self._options.recency_threshold, age_resolver)

        log.info('Loading emoji registry')
        # Only LF ends a line, U+2028 and friends may occur in comments
        for line in text.split('\n'):
            if cancellable is not None and cancellable.is_cancelled():
                log.info('Loading emoji registry cancelled')
                raise LoadCancelledError('Loading emoji registry cancelled')
            context.process(line.removesuffix('\r'))

        registry = context.to_registry()
        self._registry = registry

        log.info('Loaded %s emojis, %s labels, %s rows ignored',
                 len(registry.entire_emoji_set),
                 len(registry.labeled_emojis),
                 context.ignored_lines)
        return registry


def load(text: TextT,
         options: LoaderOptions | None = None
         ) -> tuple[EmojiIndex, LabeledEmojis]:

    registry = EmojiLoader(options).load(text)
    return registry.entire_emoji_set, registry.labeled_emojis
