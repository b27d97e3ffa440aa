"""Rollup configuration."""

from dataclasses import dataclass, field
from datetime import UTC, tzinfo

from rollupy.core.models import Precision

DEFAULT_DOWNSAMPLINGS = (Precision.HOUR, Precision.DAY, Precision.MONTH)


@dataclass(frozen=True)
class RollupConfig:
    """Which coarser precisions to derive and how timestamps map to buckets.

    Attributes:
        downsamplings: Target precisions for rollup, coarser than MINUTE.
        tz: Timezone used when encoding timestamps as buckets.
    """

    downsamplings: tuple[Precision, ...] = DEFAULT_DOWNSAMPLINGS
    tz: tzinfo = field(default=UTC)

    def __post_init__(self) -> None:
        if Precision.MINUTE in self.downsamplings:
            raise ValueError("minute is the finest precision and cannot be a rollup target")
        if len(set(self.downsamplings)) != len(self.downsamplings):
            raise ValueError(f"duplicate downsamplings: {self.downsamplings}")
        # Keep finest-first order regardless of how they were given
        ordered = tuple(sorted(self.downsamplings, key=lambda p: p.rank))
        object.__setattr__(self, "downsamplings", ordered)

    @classmethod
    def from_string(cls, value: str, tz: tzinfo = UTC) -> "RollupConfig":
        """Build a config from a comma-separated list such as ``"Hour,Day"``.

        Raises:
            ValueError: On unknown names, duplicates or MINUTE.
        """
        names = [name for name in value.split(",") if name.strip()]
        return cls(downsamplings=tuple(Precision.parse(n) for n in names), tz=tz)
