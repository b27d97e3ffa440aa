"""Built-in metric types."""

from rollupy.core.metrics.base import BaseMetrics
from rollupy.core.metrics.distribution import HistogramMetrics, PercentileMetrics
from rollupy.core.metrics.rate import CPMMetrics, PercentMetrics
from rollupy.core.metrics.scalar import (
    CountMetrics,
    LongAvgMetrics,
    MaxMetrics,
    MinMetrics,
    SumMetrics,
)

__all__ = [
    "BaseMetrics",
    "CPMMetrics",
    "CountMetrics",
    "HistogramMetrics",
    "LongAvgMetrics",
    "MaxMetrics",
    "MinMetrics",
    "PercentMetrics",
    "PercentileMetrics",
    "SumMetrics",
]
