"""rollupy: time-bucketed metric entities with merge and downsampling."""

import logging

from rollupy.adapters.buffer.in_memory import InMemoryMetricsBuffer
from rollupy.core.config import RollupConfig
from rollupy.core.exceptions import InvalidPrecisionState, RollupyError
from rollupy.core.metrics import (
    BaseMetrics,
    CountMetrics,
    CPMMetrics,
    HistogramMetrics,
    LongAvgMetrics,
    MaxMetrics,
    MinMetrics,
    PercentileMetrics,
    PercentMetrics,
    SumMetrics,
)
from rollupy.core.models import Precision
from rollupy.core.ports import Metrics, MetricsBufferPort
from rollupy.core.rollup import MetricsRollup, downsample
from rollupy.core.time_bucket import (
    classify,
    duration_in_minutes,
    time_bucket_of,
    timestamp_of,
    to_day_bucket,
    to_hour_bucket,
    to_month_bucket,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BaseMetrics",
    "CPMMetrics",
    "CountMetrics",
    "HistogramMetrics",
    "InMemoryMetricsBuffer",
    "InvalidPrecisionState",
    "LongAvgMetrics",
    "MaxMetrics",
    "Metrics",
    "MetricsBufferPort",
    "MetricsRollup",
    "MinMetrics",
    "PercentMetrics",
    "PercentileMetrics",
    "Precision",
    "RollupConfig",
    "RollupyError",
    "SumMetrics",
    "classify",
    "downsample",
    "duration_in_minutes",
    "time_bucket_of",
    "timestamp_of",
    "to_day_bucket",
    "to_hour_bucket",
    "to_month_bucket",
]
