"""Core domain models for time-bucketed metrics."""

from enum import StrEnum


class Precision(StrEnum):
    """Granularity at which a metric is aggregated.

    Members are declared finest first; ``rank`` follows that order.
    """

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"

    @property
    def rank(self) -> int:
        """Position from finest (0) to coarsest (3)."""
        return list(Precision).index(self)

    def is_coarser_than(self, other: "Precision") -> bool:
        """Return True if this precision spans more time than ``other``."""
        return self.rank > other.rank

    @classmethod
    def parse(cls, name: str) -> "Precision":
        """Parse a precision name case-insensitively (e.g. "Hour").

        Raises:
            ValueError: If the name is not a known precision.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(
                f"unknown precision {name!r}, expected one of: {valid}"
            ) from None
