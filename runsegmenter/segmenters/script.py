"""Script run segmentation."""

import logging

from ..models import EmojiKind, ScriptRun
from ..scripts import Script
from .base import Segmenter

logger = logging.getLogger(__name__)


class ScriptSegmenter(Segmenter[ScriptRun]):
    """Splits code points into maximal runs of one resolved script.

    Neutral code points (Common, Inherited, combining marks) never end a run.
    A run opens unresolved and takes the script of its first concrete code
    point, so a neutral prefix resolves forward; neutral code points after
    a concrete one stay with it. Emoji joined by a ZWJ count as neutral.
    A run that never meets a concrete script is Common.
    """

    def _next_run(self) -> ScriptRun:
        start = self.position
        length = len(self.text)
        script = None
        joining = False

        index = start
        while index < length:
            facts = self.facts(index)
            neutral = facts.neutral or (joining and facts.emoji_capable)
            if not neutral:
                if script is None:
                    script = facts.script
                elif facts.script is not script:
                    break
            joining = facts.emoji_kind is EmojiKind.ZWJ
            index += 1

        self.position = index
        run = ScriptRun(start=start, end=index, script=script or Script.COMMON)
        logger.debug("Script run %d..%d %s", run.start, run.end, run.script)
        return run
