"""BDD step definitions for metric merge and rollup features."""

from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from rollupy import (
    CountMetrics,
    InMemoryMetricsBuffer,
    InvalidPrecisionState,
    MetricsRollup,
    Precision,
    RollupConfig,
)


@dataclass
class RollupScenarioContext:
    """State shared between the steps of one scenario."""

    metrics: list[CountMetrics] = field(default_factory=list)
    buffer: InMemoryMetricsBuffer = field(default_factory=InMemoryMetricsBuffer)
    rollup: MetricsRollup | None = None
    error: Exception | None = None


@pytest.fixture
def rollup_context() -> RollupScenarioContext:
    """Fresh scenario context."""
    return RollupScenarioContext()


# === Given ===


@given(parsers.parse('a count of {value:d} for "{entity_id}" at bucket {bucket:d}'))
def given_count(
    rollup_context: RollupScenarioContext, value: int, entity_id: str, bucket: int
) -> None:
    rollup_context.metrics.append(CountMetrics(entity_id, bucket, value=value))


# === When ===


@when("the metrics are written to a buffer")
def when_written(rollup_context: RollupScenarioContext) -> None:
    rollup_context.buffer.write_all(rollup_context.metrics)


@when(parsers.parse('the metrics are rolled up to "{targets}"'))
def when_rolled_up(rollup_context: RollupScenarioContext, targets: str) -> None:
    rollup_context.rollup = MetricsRollup.from_config(
        RollupConfig.from_string(targets), InMemoryMetricsBuffer
    )
    rollup_context.rollup.accept_all(rollup_context.metrics)


@when("the first metric is converted to hour")
def when_converted_to_hour(rollup_context: RollupScenarioContext) -> None:
    try:
        rollup_context.metrics[0].to_hour()
    except InvalidPrecisionState as e:
        rollup_context.error = e


# === Then ===


@then(
    parsers.re(r"the buffer holds (?P<count>\d+) metrics?"),
    converters={"count": int},
)
def then_buffer_holds(rollup_context: RollupScenarioContext, count: int) -> None:
    assert len(rollup_context.buffer) == count


@then(parsers.parse('the count for "{entity_id}" at bucket {bucket:d} is {value:d}'))
def then_count_is(
    rollup_context: RollupScenarioContext, entity_id: str, bucket: int, value: int
) -> None:
    matching = [
        m
        for m in rollup_context.buffer.read()
        if m.entity_id == entity_id and m.time_bucket == bucket
    ]
    assert len(matching) == 1
    assert matching[0].value == value


@then(
    parsers.parse(
        "the {precision} buffer holds a count of {value:d} at bucket {bucket:d}"
    )
)
def then_precision_buffer_holds(
    rollup_context: RollupScenarioContext, precision: str, value: int, bucket: int
) -> None:
    assert rollup_context.rollup is not None
    [metrics] = rollup_context.rollup.buffers[Precision.parse(precision)].read()
    assert metrics.time_bucket == bucket
    assert metrics.value == value


@then("the source metrics keep their minute buckets")
def then_sources_unchanged(rollup_context: RollupScenarioContext) -> None:
    for metrics in rollup_context.metrics:
        assert metrics.precision is Precision.MINUTE


@then("an invalid precision error is raised")
def then_invalid_precision(rollup_context: RollupScenarioContext) -> None:
    assert isinstance(rollup_context.error, InvalidPrecisionState)
