"""In-memory merging buffer for metrics."""

import logging
from collections.abc import Iterable

from rollupy.core.ports import Metrics

logger = logging.getLogger(__name__)

_Key = tuple[type, str, int]


class InMemoryMetricsBuffer:
    """In-memory implementation of MetricsBufferPort.

    Keeps one metric per (concrete type, entity_id, time_bucket). Writing a
    metric whose identity is already buffered combines it into the buffered
    one; otherwise the written instance itself is stored and will receive
    later merges.

    Not thread-safe: give each buffer a single owner.
    """

    def __init__(self) -> None:
        self._metrics: dict[_Key, Metrics] = {}

    @staticmethod
    def _key(metrics: Metrics) -> _Key:
        return (type(metrics), metrics.entity_id, metrics.time_bucket)

    def write(self, metrics: Metrics) -> None:
        """Buffer a metric, combining it with any buffered metric of the same identity."""
        key = self._key(metrics)
        existing = self._metrics.get(key)
        if existing is None:
            self._metrics[key] = metrics
            return
        existing.combine(metrics)
        logger.debug(
            "combined %s for %s at bucket %s",
            type(metrics).__name__,
            metrics.entity_id,
            metrics.time_bucket,
        )

    def write_all(self, metrics: Iterable[Metrics]) -> None:
        """Write each metric in turn."""
        for m in metrics:
            self.write(m)

    def read(self) -> Iterable[Metrics]:
        """Return the buffered metrics without removing them."""
        return list(self._metrics.values())

    def drain(self, calculate: bool = True) -> list[Metrics]:
        """Remove and return all buffered metrics.

        Args:
            calculate: Call ``calculate()`` on each metric before returning it.

        Raises:
            InvalidPrecisionState: If a metric cannot be calculated. Every
                buffered metric is kept.
        """
        drained = list(self._metrics.values())
        if calculate:
            for m in drained:
                m.calculate()
        self._metrics.clear()
        logger.debug("drained %d metric(s) from buffer", len(drained))
        return drained

    def __len__(self) -> int:
        return len(self._metrics)
