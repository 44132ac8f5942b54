"""Tests for code point classification."""

import pytest

from runsegmenter import CodePointClassifier, EmojiKind, PropertyTable, Script, classify
from runsegmenter.models import CodePointFacts


@pytest.mark.parametrize(
    "code_point, script, neutral",
    [
        (ord("A"), Script.LATIN, False),
        (ord(" "), Script.COMMON, True),
        (ord("."), Script.COMMON, True),
        (0x0301, Script.INHERITED, True),  # combining acute accent
        (0x0947, Script.DEVANAGARI, True),  # vowel sign E, a mark
        (0x0915, Script.DEVANAGARI, False),
        (0x767E, Script.HAN, False),
        (0xD0A4, Script.HANGUL, False),
        (0x0646, Script.ARABIC, False),
        (0x3044, Script.HIRAGANA, False),
    ],
)
def test_script_and_neutrality(code_point, script, neutral):
    facts = classify(code_point)
    assert facts.script is script
    assert facts.neutral is neutral


@pytest.mark.parametrize(
    "code_point, kind",
    [
        (ord("a"), EmojiKind.NONE),
        (0x1F331, EmojiKind.EMOJI_DEFAULT),  # seedling
        (0x2626, EmojiKind.TEXT_DEFAULT),  # orthodox cross
        (0x1F3FB, EmojiKind.MODIFIER),
        (0x270A, EmojiKind.MODIFIER_BASE),
        (0x26F9, EmojiKind.MODIFIER_BASE),
        (0x200D, EmojiKind.ZWJ),
        (0xFE0F, EmojiKind.EMOJI_VARIATION_SELECTOR),
        (0xFE0E, EmojiKind.TEXT_VARIATION_SELECTOR),
        (0x1F1E9, EmojiKind.REGIONAL_INDICATOR),
        (0x1F3F4, EmojiKind.TAG_BASE),
        (0xE0067, EmojiKind.TAG_CHARACTER),
        (0xE007F, EmojiKind.TAG_TERMINATOR),
        (ord("7"), EmojiKind.KEYCAP_BASE),
        (ord("#"), EmojiKind.KEYCAP_BASE),
        (0x20E3, EmojiKind.COMBINING_KEYCAP),
    ],
)
def test_emoji_kind(code_point, kind):
    assert classify(code_point).emoji_kind is kind


def test_modifier_base_remembers_default_presentation():
    assert classify(0x270A).emoji_presentation is True  # raised fist
    assert classify(0x26F9).emoji_presentation is False  # person bouncing ball


@pytest.mark.parametrize("code_point", [0x0378, 0xE000, -1, 0x110000, 2**32 - 1])
def test_unknown_code_points(code_point):
    facts = classify(code_point)
    assert facts.script is Script.UNKNOWN
    assert facts.neutral is False
    assert facts.emoji_kind is EmojiKind.NONE


def test_classification_is_repeatable():
    assert classify(0x1F469) == classify(0x1F469)
    assert isinstance(classify(0x1F469), CodePointFacts)


def test_injected_table():
    table = PropertyTable(
        scripts={0x61: "Latin", 0x2603: "Common"},
        categories={0x61: "Ll", 0x2603: "So"},
        emoji=[0x2603],
    )
    classifier = CodePointClassifier(table)

    snowman = classifier.classify(0x2603)
    assert snowman.script is Script.COMMON
    assert snowman.neutral is True
    assert snowman.emoji_kind is EmojiKind.TEXT_DEFAULT
    assert snowman.emoji_capable is True

    missing = classifier.classify(0x62)
    assert missing.script is Script.UNKNOWN
    assert missing.category == "Cn"
    assert missing.emoji_kind is EmojiKind.NONE


def test_table_implies_emoji_from_presentation():
    table = PropertyTable(emoji_presentation=[0x1F600])
    assert table.is_emoji(0x1F600)
    assert table.is_extended_pictographic(0x1F600)


class TestScript:
    def test_from_long_name(self):
        assert Script.from_name("Latin") is Script.LATIN
        assert Script.from_name("Old_Italic") is Script.OLD_ITALIC
        assert Script.from_name("old italic") is Script.OLD_ITALIC

    def test_from_code(self):
        assert Script.from_name("Hani") is Script.HAN
        assert Script.from_name("Zyyy") is Script.COMMON
        assert Script.from_name("Qaai") is Script.INHERITED

    def test_unrecognized_is_unknown(self):
        assert Script.from_name("Klingon") is Script.UNKNOWN
        assert Script.from_name("") is Script.UNKNOWN

    def test_neutral(self):
        assert Script.COMMON.is_neutral
        assert Script.INHERITED.is_neutral
        assert not Script.UNKNOWN.is_neutral
        assert not Script.LATIN.is_neutral

    def test_code(self):
        assert Script.DEVANAGARI.code == "Deva"
        assert str(Script.HANGUL) == "Hangul"
