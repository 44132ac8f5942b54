"""Runsegmenter - Split Unicode text into script and presentation style runs."""

__version__ = "0.1.0"

from .classifier import CodePointClassifier, PropertyTable, UnicodeDatabase, classify
from .models import CodePointFacts, EmojiKind, PresentationStyle, Segment
from .scripts import Script
from .segmenters import EmojiSegmenter, RunSegmenter, ScriptSegmenter, segment_text

__all__ = [
    "CodePointClassifier",
    "PropertyTable",
    "UnicodeDatabase",
    "classify",
    "CodePointFacts",
    "EmojiKind",
    "PresentationStyle",
    "Segment",
    "Script",
    "EmojiSegmenter",
    "RunSegmenter",
    "ScriptSegmenter",
    "segment_text",
]
