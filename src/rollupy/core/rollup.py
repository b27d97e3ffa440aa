"""Downsampling of metrics into coarser-precision buffers.

The caller decides when to run a rollup; this module only derives the
coarser copies and hands them to buffers that merge them by identity.
"""

import logging
from collections.abc import Callable, Iterable, Mapping

from rollupy.core import time_bucket as tb
from rollupy.core.config import RollupConfig
from rollupy.core.exceptions import InvalidPrecisionState
from rollupy.core.models import Precision
from rollupy.core.ports import Metrics, MetricsBufferPort

logger = logging.getLogger(__name__)


def downsample(metrics: Metrics, precision: Precision) -> Metrics:
    """Return a copy of ``metrics`` at the given coarser precision.

    Args:
        metrics: Source metric; not modified.
        precision: HOUR, DAY or MONTH.

    Raises:
        InvalidPrecisionState: If ``precision`` is MINUTE or not reachable from
            the source bucket.
    """
    # @tra: Core.Rollup.Downsample
    if precision is Precision.HOUR:
        return metrics.to_hour()
    if precision is Precision.DAY:
        return metrics.to_day()
    if precision is Precision.MONTH:
        return metrics.to_month()
    raise InvalidPrecisionState(
        f"cannot downsample bucket {metrics.time_bucket} to {precision}",
        time_bucket=metrics.time_bucket,
        precision=tb.classify(metrics.time_bucket),
    )


class MetricsRollup:
    """Fan metrics out into one merging buffer per coarser precision.

    Each accepted metric is downsampled into every configured precision that
    is strictly coarser than its own. Targets at or below the source
    precision are skipped.

    Example:
        ```python
        from rollupy import InMemoryMetricsBuffer, MetricsRollup, Precision, RollupConfig

        rollup = MetricsRollup.from_config(RollupConfig(), InMemoryMetricsBuffer)
        rollup.accept_all(minute_buffer.drain())
        hourly = rollup.buffers[Precision.HOUR].drain()
        ```
    """

    def __init__(self, buffers: Mapping[Precision, MetricsBufferPort]) -> None:
        if Precision.MINUTE in buffers:
            raise ValueError("minute is the finest precision and cannot be a rollup target")
        self._buffers = dict(buffers)

    @classmethod
    def from_config(
        cls,
        config: RollupConfig,
        buffer_factory: Callable[[], MetricsBufferPort],
    ) -> "MetricsRollup":
        """Create one buffer per configured downsampling."""
        return cls({precision: buffer_factory() for precision in config.downsamplings})

    @property
    def buffers(self) -> Mapping[Precision, MetricsBufferPort]:
        return self._buffers

    def accept(self, metrics: Metrics) -> int:
        """Downsample one metric into every coarser buffer.

        Returns:
            Number of buffers written.

        Raises:
            InvalidPrecisionState: If the source bucket cannot be converted,
                including values that only classify as MONTH by fallback.
        """
        source = tb.classify(metrics.time_bucket)
        if source is Precision.MONTH:
            tb.days_in_month(metrics.time_bucket)
        written = 0
        for precision, buffer in self._buffers.items():
            if not precision.is_coarser_than(source):
                continue
            buffer.write(downsample(metrics, precision))
            written += 1
        logger.debug(
            "rolled up %s bucket %s of %s into %d buffer(s)",
            source,
            metrics.time_bucket,
            metrics.entity_id,
            written,
        )
        return written

    def accept_all(self, metrics: Iterable[Metrics]) -> int:
        """Accept each metric in turn; returns the total number of writes."""
        return sum(self.accept(m) for m in metrics)
