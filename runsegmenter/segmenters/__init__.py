"""Segmenters."""

from .base import Segmenter, SegmenterState
from .emoji import EmojiSegmenter
from .run import RunSegmenter, segment_text
from .script import ScriptSegmenter

__all__ = [
    "Segmenter",
    "SegmenterState",
    "EmojiSegmenter",
    "RunSegmenter",
    "ScriptSegmenter",
    "segment_text",
]
