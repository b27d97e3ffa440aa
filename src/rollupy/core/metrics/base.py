"""Shared bookkeeping for the built-in metric types.

``BaseMetrics`` carries identity, equality, the survival counter and
clone-mode downsampling. Concrete types add their payload fields and
implement ``combine`` and ``calculate``. Code that consumes metrics should
depend on ``rollupy.core.ports.Metrics`` rather than this class.
"""

import copy
from dataclasses import dataclass, field
from typing import Self

from rollupy.core import time_bucket as tb
from rollupy.core.models import Precision

ID_CONNECTOR = "_"


def truncated_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero, so -5 / 2 gives -2."""
    quotient = abs(dividend) // abs(divisor)
    return -quotient if (dividend < 0) != (divisor < 0) else quotient


@dataclass(eq=False)
class BaseMetrics:
    """Identity and lifecycle fields common to every metric.

    Attributes:
        entity_id: Analyzed subject (service, instance, endpoint).
        time_bucket: Encoded bucket; its magnitude gives the precision.
        survival_time: Cache residency counter, only ever increased.

    Subclasses must be declared with ``@dataclass(eq=False)`` so the identity
    based ``__eq__`` and ``__hash__`` below are kept.
    """

    entity_id: str
    time_bucket: int
    survival_time: int = field(default=0, kw_only=True)

    @property
    def precision(self) -> Precision:
        """Precision implied by ``time_bucket``."""
        return tb.classify(self.time_bucket)

    @property
    def id(self) -> str:
        """Storage id, ``"{time_bucket}_{entity_id}"``."""
        return f"{self.time_bucket}{ID_CONNECTOR}{self.entity_id}"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.entity_id == other.entity_id  # type: ignore[attr-defined]
            and self.time_bucket == other.time_bucket  # type: ignore[attr-defined]
        )

    def __hash__(self) -> int:
        return hash((type(self), self.entity_id, self.time_bucket))

    def extend_survival_time(self, delta: int) -> None:
        """Add ``delta`` to ``survival_time``.

        Raises:
            ValueError: If ``delta`` is negative.
        """
        if delta < 0:
            raise ValueError(f"survival time delta must be >= 0, got {delta}")
        self.survival_time += delta

    def duration_in_minutes(self) -> int:
        """Minutes spanned by this metric's bucket."""
        return tb.duration_in_minutes(self.time_bucket)

    def to_hour(self) -> Self:
        """Return a copy in the hour bucket containing this minute bucket."""
        return self._downsample(tb.to_hour_bucket(self.time_bucket))

    def to_day(self) -> Self:
        """Return a copy in the day bucket containing this minute or hour bucket."""
        return self._downsample(tb.to_day_bucket(self.time_bucket))

    def to_month(self) -> Self:
        """Return a copy in the month bucket containing this bucket."""
        return self._downsample(tb.to_month_bucket(self.time_bucket))

    def _downsample(self, time_bucket: int) -> Self:
        clone = copy.deepcopy(self)
        clone.time_bucket = time_bucket
        clone.survival_time = 0
        return clone
