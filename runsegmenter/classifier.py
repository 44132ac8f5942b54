"""Per-code-point classification for run segmentation.

The segmenters never look at Unicode data directly. They ask a
:class:`CodePointClassifier`, which in turn asks a :class:`UnicodeProperties`
source. The default source is :class:`UnicodeDatabase` (``unicodedataplus``);
tests inject a :class:`PropertyTable` instead.
"""

import logging
from typing import Iterable, Mapping, Optional, Protocol

import unicodedataplus as udp

from .models import CodePointFacts, EmojiKind
from .scripts import Script

logger = logging.getLogger(__name__)


MAX_CODE_POINT = 0x10FFFF

ZERO_WIDTH_JOINER = 0x200D
TEXT_VARIATION_SELECTOR = 0xFE0E  # VS15
EMOJI_VARIATION_SELECTOR = 0xFE0F  # VS16
COMBINING_ENCLOSING_KEYCAP = 0x20E3
WAVING_BLACK_FLAG = 0x1F3F4  # base of subdivision flag tag sequences
TAG_FIRST = 0xE0020
TAG_LAST = 0xE007E
CANCEL_TAG = 0xE007F
REGIONAL_INDICATOR_FIRST = 0x1F1E6
REGIONAL_INDICATOR_LAST = 0x1F1FF
KEYCAP_BASES = frozenset(map(ord, "0123456789#*"))


class UnicodeProperties(Protocol):
    """Lookup capability over the Unicode Character Database.

    Every method must accept any integer and answer without raising.
    """

    def script(self, code_point: int) -> str: ...

    def category(self, code_point: int) -> str: ...

    def is_emoji(self, code_point: int) -> bool: ...

    def is_emoji_presentation(self, code_point: int) -> bool: ...

    def is_emoji_modifier(self, code_point: int) -> bool: ...

    def is_emoji_modifier_base(self, code_point: int) -> bool: ...

    def is_extended_pictographic(self, code_point: int) -> bool: ...


def _char(code_point: int) -> Optional[str]:
    if 0 <= code_point <= MAX_CODE_POINT:
        return chr(code_point)
    return None


class UnicodeDatabase:
    """Unicode properties from the ``unicodedataplus`` distribution."""

    @property
    def unidata_version(self) -> str:
        return getattr(udp, "unidata_version", "unknown")

    def script(self, code_point: int) -> str:
        char = _char(code_point)
        if char is None:
            return Script.UNKNOWN.value
        return udp.script(char)

    def category(self, code_point: int) -> str:
        char = _char(code_point)
        if char is None:
            return "Cn"
        return udp.category(char)

    def is_emoji(self, code_point: int) -> bool:
        char = _char(code_point)
        return char is not None and bool(udp.is_emoji(char))

    def is_emoji_presentation(self, code_point: int) -> bool:
        char = _char(code_point)
        return char is not None and bool(udp.is_emoji_presentation(char))

    def is_emoji_modifier(self, code_point: int) -> bool:
        char = _char(code_point)
        return char is not None and bool(udp.is_emoji_modifier(char))

    def is_emoji_modifier_base(self, code_point: int) -> bool:
        char = _char(code_point)
        return char is not None and bool(udp.is_emoji_modifier_base(char))

    def is_extended_pictographic(self, code_point: int) -> bool:
        char = _char(code_point)
        return char is not None and bool(udp.is_extended_pictographic(char))


class PropertyTable:
    """Small in-memory property source.

    Code points missing from ``scripts`` are Unknown, missing from
    ``categories`` are unassigned (``Cn``).
    """

    def __init__(
        self,
        scripts: Optional[Mapping[int, str]] = None,
        categories: Optional[Mapping[int, str]] = None,
        emoji: Iterable[int] = (),
        emoji_presentation: Iterable[int] = (),
        emoji_modifiers: Iterable[int] = (),
        emoji_modifier_bases: Iterable[int] = (),
        extended_pictographic: Iterable[int] = (),
    ):
        self.scripts = dict(scripts or {})
        self.categories = dict(categories or {})
        self.emoji_presentation = frozenset(emoji_presentation)
        self.emoji_modifiers = frozenset(emoji_modifiers)
        self.emoji_modifier_bases = frozenset(emoji_modifier_bases)
        # Emoji_Presentation, Emoji_Modifier and Emoji_Modifier_Base imply Emoji
        self.emoji = frozenset(emoji) | self.emoji_presentation | self.emoji_modifiers | self.emoji_modifier_bases
        self.extended_pictographic = frozenset(extended_pictographic) | self.emoji

    def script(self, code_point: int) -> str:
        return self.scripts.get(code_point, Script.UNKNOWN.value)

    def category(self, code_point: int) -> str:
        return self.categories.get(code_point, "Cn")

    def is_emoji(self, code_point: int) -> bool:
        return code_point in self.emoji

    def is_emoji_presentation(self, code_point: int) -> bool:
        return code_point in self.emoji_presentation

    def is_emoji_modifier(self, code_point: int) -> bool:
        return code_point in self.emoji_modifiers

    def is_emoji_modifier_base(self, code_point: int) -> bool:
        return code_point in self.emoji_modifier_bases

    def is_extended_pictographic(self, code_point: int) -> bool:
        return code_point in self.extended_pictographic

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self.scripts)} scripts, {len(self.emoji)} emoji)"


class CodePointClassifier:
    """Maps a code point to the :class:`CodePointFacts` the segmenters use.

    Classification is pure: the same code point always yields equal facts and
    nothing is cached here. Callers that want memoization can wrap
    :meth:`classify` themselves.
    """

    def __init__(self, properties: Optional[UnicodeProperties] = None):
        """Initialize classifier.

        Args:
            properties: Unicode property source (default: UnicodeDatabase)
        """
        self.properties = properties if properties is not None else UnicodeDatabase()

    def emoji_kind(self, code_point: int) -> EmojiKind:
        """Determine the emoji role of a code point.

        Args:
            code_point: Code point value

        Returns:
            EmojiKind, checked from the most specific role to the least
        """
        if code_point == COMBINING_ENCLOSING_KEYCAP:
            return EmojiKind.COMBINING_KEYCAP
        if code_point == ZERO_WIDTH_JOINER:
            return EmojiKind.ZWJ
        if code_point == TEXT_VARIATION_SELECTOR:
            return EmojiKind.TEXT_VARIATION_SELECTOR
        if code_point == EMOJI_VARIATION_SELECTOR:
            return EmojiKind.EMOJI_VARIATION_SELECTOR
        if code_point == WAVING_BLACK_FLAG:
            return EmojiKind.TAG_BASE
        if TAG_FIRST <= code_point <= TAG_LAST:
            return EmojiKind.TAG_CHARACTER
        if code_point == CANCEL_TAG:
            return EmojiKind.TAG_TERMINATOR

        props = self.properties
        if props.is_emoji_modifier_base(code_point):
            return EmojiKind.MODIFIER_BASE
        if props.is_emoji_modifier(code_point):
            return EmojiKind.MODIFIER
        if REGIONAL_INDICATOR_FIRST <= code_point <= REGIONAL_INDICATOR_LAST:
            return EmojiKind.REGIONAL_INDICATOR
        if code_point in KEYCAP_BASES:
            return EmojiKind.KEYCAP_BASE
        if props.is_emoji_presentation(code_point):
            return EmojiKind.EMOJI_DEFAULT
        if props.is_emoji(code_point):
            return EmojiKind.TEXT_DEFAULT
        return EmojiKind.NONE

    def classify(self, code_point: int) -> CodePointFacts:
        """Classify a single code point.

        Never raises: values outside the code point range classify like
        unassigned code points.

        Args:
            code_point: Code point value

        Returns:
            CodePointFacts for the code point
        """
        props = self.properties
        script = Script.from_name(props.script(code_point))
        category = props.category(code_point)
        neutral = script.is_neutral or category.startswith("M")
        return CodePointFacts(
            code_point=code_point,
            script=script,
            category=category,
            neutral=neutral,
            emoji_kind=self.emoji_kind(code_point),
            emoji_presentation=props.is_emoji_presentation(code_point),
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(properties={self.properties!r})"


_default_classifier: Optional[CodePointClassifier] = None


def default_classifier() -> CodePointClassifier:
    """Return the shared classifier backed by the Unicode database."""
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = CodePointClassifier()
        logger.debug(
            "Using Unicode %s properties from unicodedataplus",
            _default_classifier.properties.unidata_version,
        )
    return _default_classifier


def classify(code_point: int) -> CodePointFacts:
    """Classify a code point against the Unicode database."""
    return default_classifier().classify(code_point)
