# This file is part of Emoji Registry.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

from emojiregistry.structs import Emoji

SAMPLE_REGISTRY = '''\
# emoji-test.txt
# Date: 2021-08-26, 17:22:23 GMT
# Version: 14.0
#
# Format:
#   code points; status # emoji name

# group: Smileys & Emotion

# subgroup: face-smiling
1F600                                                  ; fully-qualified     # 😀 E1.0 grinning face
1F603                                                  ; fully-qualified     # 😃 E0.6 grinning face with big eyes

# subgroup: face-affection
263A FE0F                                              ; fully-qualified     # ☺️ E0.6 smiling face
263A                                                   ; unqualified         # ☺ E0.6 smiling face
1FAE0                                                  ; fully-qualified     # 🫠 E14.0 melting face

# Smileys & Emotion subtotal:\t\t5

# group: People & Body

# subgroup: person-role
1F575 FE0F 200D 2642 FE0F                              ; fully-qualified     # 🕵️‍♂️ E4.0 man detective
1F575 200D 2642 FE0F                                   ; unqualified         # 🕵‍♂️ E4.0 man detective
1F575 FE0F 200D 2642                                   ; unqualified         # 🕵️‍♂ E4.0 man detective
1F575 200D 2642                                        ; unqualified         # 🕵‍♂ E4.0 man detective
1F575 1F3FB 200D 2642 FE0F                             ; fully-qualified     # 🕵🏻‍♂️ E4.0 man detective: light skin tone
1F575 1F3FB 200D 2642                                  ; minimally-qualified # 🕵🏻‍♂ E4.0 man detective: light skin tone
1F575 1F3FC 200D 2642 FE0F                             ; fully-qualified     # 🕵🏼‍♂️ E4.0 man detective: medium-light skin tone
1F575 1F3FC 200D 2642                                  ; minimally-qualified # 🕵🏼‍♂ E4.0 man detective: medium-light skin tone
1F575 FE0F 200D 2640 FE0F                              ; fully-qualified     # 🕵️‍♀️ E4.0 woman detective

# group: Component

# subgroup: skin-tone
1F3FB                                                  ; component           # 🏻 E1.0 light skin tone
1F3FC                                                  ; component           # 🏼 E1.0 medium-light skin tone

# group: Smileys & Emotion

# subgroup: face-hand
1F917                                                  ; fully-qualified     # 🤗 E1.0 smiling face with open hands

#EOF
'''

AGES = {
    0x1F600: 1,
    0x1F603: 0,
    0x263A: 0,
    0x1FAE0: 14,
    0x1F575: 0,
    0x1F917: 1,
}


def sample_age(emoji: Emoji) -> int | None:
    return AGES.get(emoji.codepoints[0])


def unknown_age(_emoji: Emoji) -> int | None:
    return None
