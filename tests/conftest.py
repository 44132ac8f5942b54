"""Shared fixtures: a small synthetic property table."""

import pytest

from runsegmenter import CodePointClassifier, PropertyTable

ZWJ = "\u200D"
VS15 = "\uFE0E"
VS16 = "\uFE0F"
KEYCAP = "\u20E3"
ACUTE = "\u0301"

SEEDLING = "\U0001F331"  # emoji presentation
WOMAN = "\U0001F469"  # emoji presentation, modifier base
HEART = "\u2764"  # text presentation
PERSON_BOUNCING_BALL = "\u26F9"  # text presentation, modifier base
LIGHT_SKIN = "\U0001F3FB"  # modifier
BLACK_FLAG = "\U0001F3F4"  # tag base
RI_G = "\U0001F1EC"
RI_B = "\U0001F1E7"
TAG_G = "\U000E0067"
TAG_B = "\U000E0062"
CANCEL_TAG = "\U000E007F"


def _table() -> PropertyTable:
    scripts = {}
    categories = {}
    for char in "abcdefgxyz":
        scripts[ord(char)] = "Latin"
        categories[ord(char)] = "Ll"
    for char in "αβγ":
        scripts[ord(char)] = "Greek"
        categories[ord(char)] = "Ll"
    for char in " .+":
        scripts[ord(char)] = "Common"
        categories[ord(char)] = "Po"
    for char in "0123456789#*":
        scripts[ord(char)] = "Common"
        categories[ord(char)] = "Nd"
    for char in (ZWJ, VS15, VS16, ACUTE, KEYCAP):
        scripts[ord(char)] = "Inherited"
    categories.update({ord(ZWJ): "Cf", ord(VS15): "Mn", ord(VS16): "Mn", ord(ACUTE): "Mn", ord(KEYCAP): "Me"})
    for char in (SEEDLING, WOMAN, HEART, PERSON_BOUNCING_BALL, LIGHT_SKIN, BLACK_FLAG, RI_G, RI_B):
        scripts[ord(char)] = "Common"
        categories[ord(char)] = "So"
    for char in (TAG_G, TAG_B, CANCEL_TAG):
        scripts[ord(char)] = "Common"
        categories[ord(char)] = "Cf"

    return PropertyTable(
        scripts=scripts,
        categories=categories,
        emoji=[ord(HEART)] + [ord(c) for c in "0123456789#*"],
        emoji_presentation=[ord(c) for c in (SEEDLING, WOMAN, LIGHT_SKIN, BLACK_FLAG, RI_G, RI_B)],
        emoji_modifiers=[ord(LIGHT_SKIN)],
        emoji_modifier_bases=[ord(WOMAN), ord(PERSON_BOUNCING_BALL)],
    )


@pytest.fixture
def table() -> PropertyTable:
    return _table()


@pytest.fixture
def classifier(table) -> CodePointClassifier:
    return CodePointClassifier(table)
