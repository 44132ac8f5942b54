"""Data models for run segmentation."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from .scripts import Script


class PresentationStyle(Enum):
    """Resolved rendering disposition of a run."""

    TEXT = "Text"
    EMOJI = "Emoji"

    def __str__(self) -> str:
        return self.value


class EmojiKind(Enum):
    """Emoji role of a single code point."""

    NONE = "None"
    EMOJI_DEFAULT = "EmojiDefault"  # Emoji_Presentation=Yes
    TEXT_DEFAULT = "TextDefault"  # Emoji=Yes, Emoji_Presentation=No
    MODIFIER = "Modifier"
    MODIFIER_BASE = "ModifierBase"
    ZWJ = "ZWJ"
    EMOJI_VARIATION_SELECTOR = "EmojiVariationSelector"  # VS16
    TEXT_VARIATION_SELECTOR = "TextVariationSelector"  # VS15
    REGIONAL_INDICATOR = "RegionalIndicator"
    TAG_BASE = "TagBase"
    TAG_CHARACTER = "TagCharacter"
    TAG_TERMINATOR = "TagTerminator"
    KEYCAP_BASE = "KeycapBase"
    COMBINING_KEYCAP = "CombiningKeycap"

    def __str__(self) -> str:
        return self.value


# Kinds that may stand as an element of an emoji sequence
EMOJI_CAPABLE_KINDS = frozenset({
    EmojiKind.EMOJI_DEFAULT,
    EmojiKind.TEXT_DEFAULT,
    EmojiKind.MODIFIER,
    EmojiKind.MODIFIER_BASE,
    EmojiKind.REGIONAL_INDICATOR,
    EmojiKind.TAG_BASE,
    EmojiKind.KEYCAP_BASE,
})


@dataclass(frozen=True)
class CodePointFacts:
    """Everything the segmenters need to know about one code point."""

    code_point: int
    script: Script
    category: str  # General_Category short alias, e.g. "Lu", "Mn"
    neutral: bool
    emoji_kind: EmojiKind
    emoji_presentation: bool = False

    @property
    def emoji_capable(self) -> bool:
        return self.emoji_kind in EMOJI_CAPABLE_KINDS


@dataclass
class Segment:
    """A run of code points sharing one script and one presentation style.

    Indices are code point offsets into the segmented sequence, half-open.
    """

    start: int = 0
    end: int = 0
    script: Script = Script.UNKNOWN
    presentation_style: PresentationStyle = PresentationStyle.TEXT

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, sequence: Sequence) -> Sequence:
        """Return the part of ``sequence`` covered by this run."""
        return sequence[self.start:self.end]

    def __str__(self) -> str:
        return f"{self.start}..{self.end} ({self.script}, {self.presentation_style})"


@dataclass
class ScriptRun:
    """Maximal span of a single resolved script."""

    start: int
    end: int
    script: Script


@dataclass
class EmojiRun:
    """Maximal span of a single presentation style."""

    start: int
    end: int
    presentation_style: PresentationStyle


@dataclass
class RunRecord:
    """One emitted run of a segmented input record."""

    text: Optional[str]
    source_id: str
    source_line_number: int
    run_order: int
    start_index: int
    end_index: int
    script: str
    presentation_style: str

    def to_row(self) -> dict:
        """Convert to an output table row."""
        row = {
            "Source_ID": self.source_id,
            "Source_Line_Number": self.source_line_number,
            "Run_Order": self.run_order,
            "Start_Index": self.start_index,
            "End_Index": self.end_index,
            "Length": self.end_index - self.start_index,
            "Script": self.script,
            "Presentation_Style": self.presentation_style,
        }
        if self.text is not None:
            row["Run_Text"] = self.text
        return row
