import math
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidSpanError

@dataclass(frozen=True)
class TimeSpan:
    """
    Value Object for a temporal media fragment.

    `end` is math.inf when the fragment only names a start ("play to the end").
    `raw` is the 't' value used when the span is written back into a URL.
    """
    start: float
    end: float
    raw: str

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if math.isnan(self.start) or math.isnan(self.end):
            raise InvalidSpanError(f"Span bounds must be numbers: {self.start}, {self.end}")
        if self.start < 0:
            raise InvalidSpanError(f"Start time cannot be negative: {self.start}")
        if self.end <= self.start:
            raise InvalidSpanError(f"End time ({self.end}) must be greater than start time ({self.start})")

    @property
    def is_unbounded(self) -> bool:
        return math.isinf(self.end)

    @property
    def duration(self) -> float:
        return self.end - self.start

    def contains(self, position: float) -> bool:
        return self.start <= position <= self.end

    def to_fragment(self) -> str:
        """Fragment identifier (without '#') that reproduces this span."""
        return f"t={self.raw}"

@dataclass(frozen=True)
class EmbedResult:
    """
    Outcome of binding an embedded player to the fragment of its source URL.
    """
    span: Optional[TimeSpan]
    loop: bool
