"""Single-value metric types: counts, sums, averages and extremes."""

from dataclasses import dataclass

from rollupy.core.metrics.base import BaseMetrics, truncated_div


@dataclass(eq=False)
class CountMetrics(BaseMetrics):
    """Number of observations in the bucket."""

    value: int = 0

    def accept(self, count: int = 1) -> None:
        self.value += count

    def combine(self, other: "CountMetrics") -> None:
        self.value += other.value

    def calculate(self) -> None:
        pass


@dataclass(eq=False)
class SumMetrics(BaseMetrics):
    """Sum of observed values in the bucket."""

    value: int = 0

    def accept(self, value: int) -> None:
        self.value += value

    def combine(self, other: "SumMetrics") -> None:
        self.value += other.value

    def calculate(self) -> None:
        pass


@dataclass(eq=False)
class LongAvgMetrics(BaseMetrics):
    """Integer average of observed values.

    ``value`` is only meaningful after ``calculate()`` and rounds toward zero.
    """

    summation: int = 0
    count: int = 0
    value: int = 0

    def accept(self, value: int, count: int = 1) -> None:
        self.summation += value
        self.count += count

    def combine(self, other: "LongAvgMetrics") -> None:
        self.summation += other.summation
        self.count += other.count

    def calculate(self) -> None:
        self.value = truncated_div(self.summation, self.count) if self.count else 0


@dataclass(eq=False)
class MaxMetrics(BaseMetrics):
    """Largest observed value, None until something is observed."""

    value: int | None = None

    def accept(self, value: int) -> None:
        if self.value is None or value > self.value:
            self.value = value

    def combine(self, other: "MaxMetrics") -> None:
        if other.value is not None:
            self.accept(other.value)

    def calculate(self) -> None:
        pass


@dataclass(eq=False)
class MinMetrics(BaseMetrics):
    """Smallest observed value, None until something is observed."""

    value: int | None = None

    def accept(self, value: int) -> None:
        if self.value is None or value < self.value:
            self.value = value

    def combine(self, other: "MinMetrics") -> None:
        if other.value is not None:
            self.accept(other.value)

    def calculate(self) -> None:
        pass
