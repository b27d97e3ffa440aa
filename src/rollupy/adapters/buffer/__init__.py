"""Buffer adapters implementing MetricsBufferPort."""

from rollupy.adapters.buffer.in_memory import InMemoryMetricsBuffer

__all__ = [
    "InMemoryMetricsBuffer",
]
