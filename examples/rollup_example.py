"""Roll minute-level request metrics up to hour, day and month.

Run with:
    python examples/rollup_example.py
"""

import logging
import random
import time
from datetime import tzinfo

from rollupy import (
    CPMMetrics,
    InMemoryMetricsBuffer,
    LongAvgMetrics,
    MetricsRollup,
    Precision,
    RollupConfig,
    time_bucket_of,
)

logger = logging.getLogger(__name__)


def simulate_minute(
    buffer: InMemoryMetricsBuffer, now: float, service: str, tz: tzinfo
) -> None:
    """Write partial observations for one minute, as several workers would."""
    bucket = time_bucket_of(now, Precision.MINUTE, tz=tz)
    for _ in range(3):
        calls = CPMMetrics(service, bucket)
        latency = LongAvgMetrics(service, bucket)
        for _ in range(random.randint(5, 20)):
            calls.accept()
            latency.accept(random.randint(10, 250))
        buffer.write(calls)
        buffer.write(latency)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    config = RollupConfig.from_string("Hour,Day,Month")
    minute_buffer = InMemoryMetricsBuffer()
    rollup = MetricsRollup.from_config(config, InMemoryMetricsBuffer)

    start = time.time() - 3600
    for minute in range(60):
        simulate_minute(minute_buffer, start + minute * 60, "checkout", config.tz)

    minutes = minute_buffer.drain()
    logger.info("merged %d minute metrics", len(minutes))
    rollup.accept_all(minutes)

    for precision in config.downsamplings:
        for metrics in rollup.buffers[precision].drain():
            logger.info(
                "%-5s %-14s %s %s",
                precision,
                type(metrics).__name__,
                metrics.id,
                metrics.value,
            )


if __name__ == "__main__":
    main()
