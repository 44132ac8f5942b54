"""Base class for pull-based segmenters."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, Optional, Sequence, TypeVar, Union

from ..classifier import CodePointClassifier, default_classifier
from ..models import CodePointFacts

RunT = TypeVar("RunT")

CodePoints = Union[str, Sequence[int]]


class SegmenterState(Enum):
    IDLE = "idle"
    ACCUMULATING = "accumulating"
    EXHAUSTED = "exhausted"


class Segmenter(ABC, Generic[RunT]):
    """Base class for segmenters over a fixed code point sequence.

    A segmenter is bound to one input for its whole life. Each call to
    :meth:`consume` returns the next run, or ``None`` once the input is
    exhausted; from then on every call returns ``None``. The input is
    borrowed, not copied, and must not change while it is being segmented.
    """

    def __init__(self, text: CodePoints, classifier: Optional[CodePointClassifier] = None):
        """Initialize segmenter.

        Args:
            text: A str, or any indexable sequence of int code points
            classifier: Code point classifier (default: Unicode database backed)
        """
        self.text = text
        self.classifier = classifier if classifier is not None else default_classifier()
        self.state = SegmenterState.IDLE
        self.position = 0

    def __len__(self) -> int:
        return len(self.text)

    def code_point(self, index: int) -> int:
        """Return the code point at ``index`` as an int.

        Raises:
            TypeError: If the element is neither an int nor a single character
        """
        value = self.text[index]
        if isinstance(value, int):
            return value
        if isinstance(value, str) and len(value) == 1:
            return ord(value)
        raise TypeError(
            f"Expected a code point at index {index}, got {type(value).__name__}"
        )

    def facts(self, index: int) -> CodePointFacts:
        """Classify the code point at ``index``."""
        return self.classifier.classify(self.code_point(index))

    def consume(self) -> Optional[RunT]:
        """Return the next run, or None when the input is exhausted."""
        if self.state is SegmenterState.EXHAUSTED:
            return None
        if self.position >= len(self.text):
            self.state = SegmenterState.EXHAUSTED
            return None
        self.state = SegmenterState.ACCUMULATING
        return self._next_run()

    @abstractmethod
    def _next_run(self) -> RunT:
        """Emit the run starting at the cursor and advance past it.

        Only called with at least one unconsumed code point left.
        """
        pass

    def segments(self) -> list[RunT]:
        """Consume and return all remaining runs."""
        return list(self)

    def __iter__(self):
        return self

    def __next__(self) -> RunT:
        run = self.consume()
        if run is None:
            raise StopIteration
        return run

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(length={len(self.text)}, "
            f"position={self.position}, state={self.state.value})"
        )
