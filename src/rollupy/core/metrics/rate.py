"""Metric types whose final value is a ratio."""

from dataclasses import dataclass

from rollupy.core.metrics.base import BaseMetrics, truncated_div

# Percentages are stored as integers scaled by this factor (10000 == 100.00%).
PERCENT_SCALE = 10000


@dataclass(eq=False)
class CPMMetrics(BaseMetrics):
    """Calls per minute over the span of the bucket.

    The divisor comes from the bucket duration, so an hour bucket divides by
    60 and a month bucket by the minutes in that calendar month.
    """

    total: int = 0
    value: int = 0

    def accept(self, count: int = 1) -> None:
        self.total += count

    def combine(self, other: "CPMMetrics") -> None:
        self.total += other.total

    def calculate(self) -> None:
        self.value = truncated_div(self.total, self.duration_in_minutes())


@dataclass(eq=False)
class PercentMetrics(BaseMetrics):
    """Share of observations that matched a condition, scaled by PERCENT_SCALE."""

    total: int = 0
    match: int = 0
    percentage: int = 0

    def accept(self, matched: bool) -> None:
        self.total += 1
        if matched:
            self.match += 1

    def combine(self, other: "PercentMetrics") -> None:
        self.total += other.total
        self.match += other.match

    def calculate(self) -> None:
        self.percentage = self.match * PERCENT_SCALE // self.total if self.total else 0
