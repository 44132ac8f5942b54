"""Run segmentation by script and presentation style."""

import logging
from typing import Optional

from ..classifier import CodePointClassifier
from ..models import EmojiRun, ScriptRun, Segment
from .base import CodePoints, Segmenter
from .emoji import EmojiSegmenter
from .script import ScriptSegmenter

logger = logging.getLogger(__name__)


class RunSegmenter(Segmenter[Segment]):
    """Splits code points into runs of one script and one presentation style.

    Script runs and presentation runs are scanned independently, each only
    as far as needed, and every emitted :class:`Segment` ends at whichever
    of the two in-flight runs ends first. Emoji therefore report the script
    of the text they are embedded in, and a neutral run resolves to the
    script that follows it even across a presentation change.

    Example:
        >>> segmenter = RunSegmenter("abc\U0001F331")
        >>> [str(segment) for segment in segmenter]
        ['0..3 (Latin, Text)', '3..4 (Latin, Emoji)']
    """

    def __init__(self, text: CodePoints, classifier: Optional[CodePointClassifier] = None):
        """Initialize run segmenter.

        Args:
            text: A str, or any indexable sequence of int code points
            classifier: Code point classifier (default: Unicode database backed)
        """
        super().__init__(text, classifier)
        self.script_segmenter = ScriptSegmenter(text, self.classifier)
        self.emoji_segmenter = EmojiSegmenter(text, self.classifier)
        self.script_run: Optional[ScriptRun] = None
        self.emoji_run: Optional[EmojiRun] = None

    def _next_run(self) -> Segment:
        start = self.position
        if self.script_run is None or self.script_run.end <= start:
            self.script_run = self.script_segmenter.consume()
        if self.emoji_run is None or self.emoji_run.end <= start:
            self.emoji_run = self.emoji_segmenter.consume()

        segment = Segment(
            start=start,
            end=min(self.script_run.end, self.emoji_run.end),
            script=self.script_run.script,
            presentation_style=self.emoji_run.presentation_style,
        )
        self.position = segment.end
        logger.debug("Run %s", segment)
        return segment


def segment_text(text: CodePoints, classifier: Optional[CodePointClassifier] = None) -> list[Segment]:
    """Segment a whole sequence into runs.

    Args:
        text: A str, or any indexable sequence of int code points
        classifier: Code point classifier (default: Unicode database backed)

    Returns:
        List of Segments covering the whole input in order
    """
    return RunSegmenter(text, classifier).segments()
