"""Metric types that keep a bucketed distribution of observed values."""

from dataclasses import dataclass, field

from rollupy.core.metrics.base import BaseMetrics

DEFAULT_RANKS = (50, 75, 90, 95, 99)


def _merge_counts(into: dict[int, int], other: dict[int, int]) -> None:
    for key, count in other.items():
        into[key] = into.get(key, 0) + count


@dataclass(eq=False)
class HistogramMetrics(BaseMetrics):
    """Counts of observations per fixed-width bucket.

    Dataset keys are bucket lower bounds (multiples of ``step``). Values above
    ``step * max_steps`` are counted in the last bucket.
    """

    step: int = 100
    max_steps: int = 20
    dataset: dict[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if self.max_steps < 0:
            raise ValueError(f"max_steps must be >= 0, got {self.max_steps}")

    def accept(self, value: int) -> None:
        index = min(max(value, 0) // self.step, self.max_steps)
        key = index * self.step
        self.dataset[key] = self.dataset.get(key, 0) + 1

    def combine(self, other: "HistogramMetrics") -> None:
        if (other.step, other.max_steps) != (self.step, self.max_steps):
            raise ValueError(
                f"histogram layout mismatch for {self.id}: "
                f"step={self.step}/{other.step} max_steps={self.max_steps}/{other.max_steps}"
            )
        _merge_counts(self.dataset, other.dataset)

    def calculate(self) -> None:
        pass


@dataclass(eq=False)
class PercentileMetrics(BaseMetrics):
    """Percentile values computed from a bucketed distribution.

    Observations are stored as ``value // resolution``; reported percentiles
    are bucket index times ``resolution``. ``calculate`` is skipped until the
    dataset changes again.
    """

    resolution: int = 10
    ranks: tuple[int, ...] = DEFAULT_RANKS
    dataset: dict[int, int] = field(default_factory=dict)
    percentile_values: dict[int, int] = field(default_factory=dict)
    is_calculated: bool = False

    def __post_init__(self) -> None:
        if self.resolution <= 0:
            raise ValueError(f"resolution must be positive, got {self.resolution}")
        if not self.ranks or any(not 0 < rank <= 100 for rank in self.ranks):
            raise ValueError(f"ranks must be within (0, 100], got {self.ranks}")
        self.ranks = tuple(sorted(self.ranks))

    def accept(self, value: int) -> None:
        key = max(value, 0) // self.resolution
        self.dataset[key] = self.dataset.get(key, 0) + 1
        self.is_calculated = False

    def combine(self, other: "PercentileMetrics") -> None:
        if (other.resolution, other.ranks) != (self.resolution, self.ranks):
            raise ValueError(
                f"percentile layout mismatch for {self.id}: "
                f"resolution={self.resolution}/{other.resolution} "
                f"ranks={self.ranks}/{other.ranks}"
            )
        _merge_counts(self.dataset, other.dataset)
        self.is_calculated = False

    def calculate(self) -> None:
        if self.is_calculated:
            return
        total = sum(self.dataset.values())
        # round half up
        roofs = [int(total * rank / 100 + 0.5) for rank in self.ranks]

        values: dict[int, int] = {}
        count = 0
        next_rank = 0
        for key in sorted(self.dataset):
            count += self.dataset[key]
            while next_rank < len(roofs) and count >= roofs[next_rank]:
                values[self.ranks[next_rank]] = key * self.resolution
                next_rank += 1

        self.percentile_values = values
        self.is_calculated = True
