"""Tests for presentation style segmentation against a synthetic table."""

import pytest

from conftest import (
    BLACK_FLAG,
    CANCEL_TAG,
    HEART,
    KEYCAP,
    LIGHT_SKIN,
    PERSON_BOUNCING_BALL,
    RI_B,
    RI_G,
    SEEDLING,
    TAG_B,
    TAG_G,
    VS15,
    VS16,
    WOMAN,
    ZWJ,
)
from runsegmenter import EmojiSegmenter, PresentationStyle

E = PresentationStyle.EMOJI
T = PresentationStyle.TEXT


def runs(text, classifier):
    return [
        (run.start, run.end, run.presentation_style)
        for run in EmojiSegmenter(text, classifier)
    ]


class TestDefaultPresentation:
    def test_plain_text_is_one_run(self, classifier):
        assert runs("abc xyz", classifier) == [(0, 7, T)]

    def test_emoji_presentation_splits_text(self, classifier):
        text = "ab" + SEEDLING + SEEDLING + "c"
        assert runs(text, classifier) == [(0, 2, T), (2, 4, E), (4, 5, T)]

    def test_text_default_emoji_stays_text(self, classifier):
        assert runs("a" + HEART + "b", classifier) == [(0, 3, T)]

    def test_digits_without_keycap_are_text(self, classifier):
        assert runs("a12#", classifier) == [(0, 4, T)]


class TestVariationSelectors:
    def test_emoji_selector_forces_emoji(self, classifier):
        text = "a" + HEART + VS16 + "b"
        assert runs(text, classifier) == [(0, 1, T), (1, 3, E), (3, 4, T)]

    def test_text_selector_forces_text(self, classifier):
        assert runs("a" + SEEDLING + VS15, classifier) == [(0, 3, T)]

    def test_stray_selector_continues_text(self, classifier):
        assert runs("a" + VS16 + "b", classifier) == [(0, 3, T)]

    def test_stray_selector_continues_emoji(self, classifier):
        assert runs(SEEDLING + VS16 + VS16, classifier) == [(0, 3, E)]

    def test_leading_selector_is_text(self, classifier):
        assert runs(VS16 + "a", classifier) == [(0, 2, T)]


class TestSequences:
    def test_keycap_sequence(self, classifier):
        assert runs("1" + VS16 + KEYCAP, classifier) == [(0, 3, E)]
        assert runs("#" + KEYCAP + "a", classifier) == [(0, 2, E), (2, 3, T)]

    def test_modifier_sequence_of_text_default_base(self, classifier):
        text = PERSON_BOUNCING_BALL + LIGHT_SKIN
        assert runs(text, classifier) == [(0, 2, E)]

    def test_modifier_base_alone_is_emoji(self, classifier):
        assert runs(PERSON_BOUNCING_BALL, classifier) == [(0, 1, E)]
        assert runs(WOMAN, classifier) == [(0, 1, E)]

    def test_modifier_base_continues_emoji_run(self, classifier):
        text = SEEDLING + PERSON_BOUNCING_BALL + "a"
        assert runs(text, classifier) == [(0, 2, E), (2, 3, T)]

    def test_modifier_base_with_text_selector(self, classifier):
        text = SEEDLING + PERSON_BOUNCING_BALL + VS15
        assert runs(text, classifier) == [(0, 1, E), (1, 3, T)]

    def test_lone_modifier_is_emoji(self, classifier):
        assert runs("a" + LIGHT_SKIN, classifier) == [(0, 1, T), (1, 2, E)]

    def test_flag_pair(self, classifier):
        assert runs(RI_G + RI_B, classifier) == [(0, 2, E)]

    def test_unpaired_regional_indicator_is_text(self, classifier):
        assert runs(RI_G, classifier) == [(0, 1, T)]
        assert runs(RI_G + RI_B + RI_G, classifier) == [(0, 2, E), (2, 3, T)]

    def test_tag_sequence(self, classifier):
        text = BLACK_FLAG + TAG_G + TAG_B + CANCEL_TAG + BLACK_FLAG + TAG_G + CANCEL_TAG
        assert runs(text, classifier) == [(0, 7, E)]

    def test_unterminated_tag_sequence(self, classifier):
        text = BLACK_FLAG + TAG_G + TAG_B
        assert runs(text, classifier) == [(0, 1, E), (1, 3, T)]

    def test_tag_base_without_tags(self, classifier):
        assert runs(BLACK_FLAG + CANCEL_TAG, classifier) == [(0, 1, E), (1, 2, T)]

    def test_tag_sequence_on_any_emoji(self, classifier):
        text = "a" + SEEDLING + TAG_G + TAG_B + CANCEL_TAG + "b"
        assert runs(text, classifier) == [(0, 1, T), (1, 5, E), (5, 6, T)]

    def test_tag_sequence_on_text_default_emoji(self, classifier):
        assert runs(HEART + TAG_G + CANCEL_TAG, classifier) == [(0, 3, E)]


class TestZwjSequences:
    def test_joined_emoji(self, classifier):
        text = WOMAN + ZWJ + WOMAN + "ab"
        assert runs(text, classifier) == [(0, 3, E), (3, 5, T)]

    def test_text_default_element_joins_as_emoji(self, classifier):
        assert runs(WOMAN + ZWJ + HEART, classifier) == [(0, 3, E)]
        assert runs(HEART + ZWJ + HEART, classifier) == [(0, 3, E)]

    def test_elements_with_selectors_and_modifiers(self, classifier):
        text = WOMAN + LIGHT_SKIN + ZWJ + HEART + VS16 + ZWJ + WOMAN
        assert runs(text, classifier) == [(0, 7, E)]

    def test_dangling_zwj_is_text(self, classifier):
        text = WOMAN + ZWJ + WOMAN + ZWJ + ZWJ + "efg"
        assert runs(text, classifier) == [(0, 3, E), (3, 8, T)]

    def test_zwj_before_text(self, classifier):
        assert runs("a" + ZWJ + "b", classifier) == [(0, 3, T)]


def test_scan_token_reports_stray_selector(classifier):
    segmenter = EmojiSegmenter("a" + VS16, classifier)
    assert segmenter.scan_token(0) == (1, T)
    assert segmenter.scan_token(1) == (2, None)


@pytest.mark.parametrize("text", ["", "a", SEEDLING, WOMAN + ZWJ + WOMAN + "abc" + RI_G])
def test_runs_cover_input(text, classifier):
    result = runs(text, classifier)
    position = 0
    for start, end, _ in result:
        assert start == position
        assert end > start
        position = end
    assert position == len(text)
