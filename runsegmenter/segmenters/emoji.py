"""Presentation style segmentation.

The input is read as a stream of tokens. A token is either one emoji
sequence (UTS #51) or a single code point, and carries a presentation style:

* ``emoji VS16`` is Emoji, ``emoji VS15`` is Text
* ``keycap-base VS16? U+20E3`` is Emoji
* ``modifier-base modifier`` is Emoji
* ``RI RI`` is Emoji, a lone regional indicator is Text
* ``emoji tag+ cancel-tag`` is Emoji
* ``element (ZWJ element)+`` is Emoji, whatever its elements default to
* a lone modifier base is Emoji
* any other lone emoji-capable code point takes its default presentation
* a stray variation selector keeps the style of whatever precedes it
* anything else is Text

Adjacent tokens of equal style merge into one run.
"""

import logging
from typing import Optional

from ..classifier import CodePointClassifier
from ..models import EmojiKind, EmojiRun, PresentationStyle
from .base import CodePoints, Segmenter

logger = logging.getLogger(__name__)

EMOJI = PresentationStyle.EMOJI
TEXT = PresentationStyle.TEXT

VARIATION_SELECTORS = (
    EmojiKind.EMOJI_VARIATION_SELECTOR,
    EmojiKind.TEXT_VARIATION_SELECTOR,
)


class EmojiSegmenter(Segmenter[EmojiRun]):
    """Splits code points into maximal runs of one presentation style."""

    def __init__(self, text: CodePoints, classifier: Optional[CodePointClassifier] = None):
        """Initialize emoji segmenter.

        Args:
            text: A str, or any indexable sequence of int code points
            classifier: Code point classifier (default: Unicode database backed)
        """
        super().__init__(text, classifier)
        # (start, end, style) of a token scanned but not yet consumed
        self._pending: Optional[tuple[int, int, Optional[PresentationStyle]]] = None

    def _kind(self, index: int) -> EmojiKind:
        if index >= len(self.text):
            return EmojiKind.NONE
        return self.facts(index).emoji_kind

    def _capable(self, index: int) -> bool:
        return index < len(self.text) and self.facts(index).emoji_capable

    def _match_tag_sequence(self, index: int) -> Optional[int]:
        """Return the end of a tag sequence whose base emoji is at ``index``, if there is one."""
        tag = index + 1
        while self._kind(tag) is EmojiKind.TAG_CHARACTER:
            tag += 1
        if tag > index + 1 and self._kind(tag) is EmojiKind.TAG_TERMINATOR:
            return tag + 1
        return None

    def _match_keycap(self, index: int) -> Optional[int]:
        """Return the end of a keycap sequence based at ``index``, if there is one."""
        cap = index + 1
        if self._kind(cap) is EmojiKind.EMOJI_VARIATION_SELECTOR:
            cap += 1
        if self._kind(cap) is EmojiKind.COMBINING_KEYCAP:
            return cap + 1
        return None

    def _match_element(self, index: int) -> tuple[int, PresentationStyle]:
        """Match one ZWJ sequence element at an emoji-capable ``index``."""
        facts = self.facts(index)
        following = self._kind(index + 1)
        if following is EmojiKind.TAG_CHARACTER:
            end = self._match_tag_sequence(index)
            if end is not None:
                return end, EMOJI
        if following is EmojiKind.EMOJI_VARIATION_SELECTOR:
            return index + 2, EMOJI
        if following is EmojiKind.TEXT_VARIATION_SELECTOR:
            return index + 2, TEXT
        if facts.emoji_kind is EmojiKind.MODIFIER_BASE and following is EmojiKind.MODIFIER:
            return index + 2, EMOJI
        if facts.emoji_presentation or facts.emoji_kind is EmojiKind.MODIFIER_BASE:
            return index + 1, EMOJI
        return index + 1, TEXT

    def scan_token(self, index: int) -> tuple[int, Optional[PresentationStyle]]:
        """Scan the token starting at ``index``.

        Args:
            index: Position of the token's first code point

        Returns:
            Tuple of (token end, style); style is None for a stray
            variation selector, which continues the preceding run
        """
        kind = self._kind(index)

        if kind is EmojiKind.REGIONAL_INDICATOR:
            if self._kind(index + 1) is EmojiKind.REGIONAL_INDICATOR:
                return index + 2, EMOJI
            return index + 1, TEXT
        elif kind is EmojiKind.KEYCAP_BASE:
            end = self._match_keycap(index)
            if end is not None:
                return end, EMOJI
        elif kind in VARIATION_SELECTORS:
            return index + 1, None

        if not self._capable(index):
            return index + 1, TEXT

        end, style = self._match_element(index)
        joined = False
        while self._kind(end) is EmojiKind.ZWJ and self._capable(end + 1):
            end, _ = self._match_element(end + 1)
            joined = True
        if joined:
            return end, EMOJI
        return end, style

    def _take_token(self, index: int) -> tuple[int, Optional[PresentationStyle]]:
        if self._pending is not None and self._pending[0] == index:
            _, end, style = self._pending
        else:
            end, style = self.scan_token(index)
        self._pending = (index, end, style)
        return end, style

    def _next_run(self) -> EmojiRun:
        start = self.position
        length = len(self.text)

        end, style = self._take_token(start)
        if style is None:
            style = TEXT
        while end < length:
            token_end, token_style = self._take_token(end)
            if token_style is not None and token_style is not style:
                break
            end = token_end

        self.position = end
        run = EmojiRun(start=start, end=end, presentation_style=style)
        logger.debug("Emoji run %d..%d %s", run.start, run.end, run.presentation_style)
        return run
