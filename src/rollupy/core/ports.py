"""Port interfaces for metric entities and the buffers that merge them.

These protocols define the contracts that concrete metric types and buffer
adapters must implement. Rollup and buffering code depends only on these
interfaces, not on a particular metric class.
"""

from collections.abc import Iterable
from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Metrics(Protocol):
    """Contract every metric entity satisfies.

    A metric is identified by ``entity_id`` and ``time_bucket``. Entities with
    the same identity and concrete type are merged with ``combine``; the
    finalized value is produced by ``calculate``; coarser snapshots are derived
    with the ``to_*`` methods.
    """

    entity_id: str
    time_bucket: int
    survival_time: int

    def combine(self, other: Self) -> None:
        """Merge the accumulated state of ``other`` into this metric.

        Both metrics must share concrete type, ``entity_id`` and
        ``time_bucket``; callers guarantee this by grouping. The merge is
        associative and commutative.
        """
        ...

    def calculate(self) -> None:
        """Finalize derived values from the accumulated state.

        Calling it again without an intervening ``combine`` yields the same
        result.
        """
        ...

    def to_hour(self) -> Self:
        """Return a copy at hour precision. The source is left untouched."""
        ...

    def to_day(self) -> Self:
        """Return a copy at day precision. The source is left untouched."""
        ...

    def to_month(self) -> Self:
        """Return a copy at month precision. The source is left untouched."""
        ...

    def extend_survival_time(self, delta: int) -> None:
        """Add ``delta`` to ``survival_time``."""
        ...


@runtime_checkable
class MetricsBufferPort(Protocol):
    """Port for buffers that merge metrics by identity.

    Adapters implementing this protocol combine written metrics with any
    buffered metric of the same identity.
    Examples: InMemoryMetricsBuffer.
    """

    def write(self, metrics: Metrics) -> None:
        """Buffer a metric, merging it with an existing one of the same identity."""
        ...

    def read(self) -> Iterable[Metrics]:
        """Return the buffered metrics without removing them."""
        ...

    def drain(self, calculate: bool = True) -> list[Metrics]:
        """Remove and return all buffered metrics.

        Args:
            calculate: Call ``calculate()`` on each metric before returning it.
        """
        ...

    def __len__(self) -> int:
        """Number of distinct identities buffered."""
        ...
