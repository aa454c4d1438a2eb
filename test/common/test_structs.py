# This file is part of Emoji Registry.
#
# SPDX-License-Identifier: GPL-3.0-only

import unittest

from emojiregistry.const import EmojiRole
from emojiregistry.const import Status
from emojiregistry.structs import DecodedRow
from emojiregistry.structs import Emoji
from emojiregistry.structs import EmojiArena


def _create(arena: EmojiArena,
            codepoints: tuple[int, ...],
            status: Status
            ) -> Emoji:
    return arena.create(DecodedRow(codepoints=codepoints, status=status),
                        sequence_order=len(arena),
                        group='People & Body',
                        subgroup='hand-fingers-open')


class EmojiTest(unittest.TestCase):

    def setUp(self) -> None:
        self._arena = EmojiArena()
        self._waving = _create(self._arena, (0x1F44B,),
                               Status.FULLY_QUALIFIED)
        self._light = _create(self._arena, (0x1F44B, 0x1F3FB),
                              Status.FULLY_QUALIFIED)
        self._dark = _create(self._arena, (0x1F44B, 0x1F3FF),
                             Status.FULLY_QUALIFIED)
        self._arena.link_skin_tone(self._waving, self._light)
        self._arena.link_skin_tone(self._waving, self._dark)

    def test_arena_ids(self) -> None:
        self.assertEqual([emoji.id for emoji in self._arena], [0, 1, 2])
        self.assertIs(self._arena[1], self._light)
        self.assertEqual(len(self._arena), 3)

    def test_roles(self) -> None:
        self.assertEqual(self._waving.role, EmojiRole.VARIATION_BASE)
        self.assertEqual(self._light.role, EmojiRole.MODIFIER_SEQUENCE)

        component = _create(self._arena, (0x1F3FB,), Status.COMPONENT)
        self.assertEqual(component.role, EmojiRole.COMPONENT)
        self.assertTrue(component.is_modifier_sequence)

        variant = _create(self._arena, (0x263A,), Status.UNQUALIFIED)
        self.assertEqual(variant.role, EmojiRole.QUALIFICATION_VARIANT)

    def test_links(self) -> None:
        self.assertEqual(self._waving.skin_tone_form_ids, [1, 2])
        self.assertEqual(self._light.generic_form_id, 0)
        self.assertIs(self._dark.generic_form, self._waving)

    def test_get_skin_tone_form(self) -> None:
        self.assertIs(self._waving.get_skin_tone_form(0x1F3FF), self._dark)
        self.assertIsNone(self._waving.get_skin_tone_form(0x1F3FD))
        with self.assertRaises(ValueError):
            self._waving.get_skin_tone_form(0x1F600)

    def test_codepoints_string(self) -> None:
        self.assertEqual(self._light.codepoints_string, '1F44B 1F3FB')
        self.assertEqual(str(self._light), '\U0001F44B\U0001F3FB')

    def test_detached_record(self) -> None:
        emoji = Emoji(id=0,
                      character='\U0001F600',
                      codepoints=(0x1F600,),
                      status=Status.FULLY_QUALIFIED,
                      sequence_order=0,
                      variant_form_ids=[5])
        self.assertIsNone(emoji.base_form)
        self.assertEqual(emoji.variant_forms, [])


if __name__ == '__main__':
    unittest.main()
