"""Tests for time bucket classification, conversion and duration."""

from datetime import datetime, timedelta, timezone

import pytest
from hypothesis import given
from hypothesis import strategies as st

from rollupy.core.exceptions import InvalidPrecisionState
from rollupy.core.models import Precision
from rollupy.core.time_bucket import (
    classify,
    days_in_month,
    duration_in_minutes,
    time_bucket_of,
    timestamp_of,
    to_day_bucket,
    to_hour_bucket,
    to_month_bucket,
)

# 2018-09-12 05:11:00 UTC
SEPT_12_0511_UTC = 1536729060.0


@pytest.mark.tier(0)
@pytest.mark.tra("Core.TimeBucket.Classify")
class TestClassify:
    """Tests for classify()."""

    @pytest.mark.core
    @pytest.mark.parametrize(
        ("time_bucket", "expected"),
        [
            (201809120511, Precision.MINUTE),
            (2018091205, Precision.HOUR),
            (20180912, Precision.DAY),
            (201809, Precision.MONTH),
        ],
    )
    def test_classifies_by_digit_count(
        self, time_bucket: int, expected: Precision
    ) -> None:
        """Bucket magnitude determines precision."""
        assert classify(time_bucket) is expected

    @pytest.mark.core
    @pytest.mark.parametrize(
        "boundary",
        [
            100000000000,
            999999999999,
            1000000000,
            9999999999,
            10000000,
            99999999,
        ],
    )
    def test_exact_boundaries_fall_through_to_month(self, boundary: int) -> None:
        """Open intervals exclude boundary values, which hit the MONTH fallback."""
        assert classify(boundary) is Precision.MONTH

    @pytest.mark.core
    def test_values_just_inside_boundaries_are_classified(self) -> None:
        """One step inside each interval is classified normally."""
        assert classify(100000000001) is Precision.MINUTE
        assert classify(999999999998) is Precision.MINUTE
        assert classify(1000000001) is Precision.HOUR
        assert classify(10000001) is Precision.DAY

    @pytest.mark.core
    @given(st.integers(min_value=100000000001, max_value=999999999998))
    def test_every_twelve_digit_value_is_minute(self, time_bucket: int) -> None:
        """Any value strictly inside the minute range is a minute bucket."""
        assert classify(time_bucket) is Precision.MINUTE


class TestConversion:
    """Tests for the to_*_bucket() conversions."""

    @pytest.mark.core
    def test_minute_to_hour(self) -> None:
        """Minute to hour drops the minute digits."""
        assert to_hour_bucket(201809120511) == 2018091205

    @pytest.mark.core
    def test_minute_to_day(self) -> None:
        """Minute to day drops hour and minute digits."""
        assert to_day_bucket(201809120511) == 20180912

    @pytest.mark.core
    def test_hour_to_day(self) -> None:
        """Hour to day drops the hour digits."""
        assert to_day_bucket(2018091205) == 20180912

    @pytest.mark.core
    @pytest.mark.parametrize(
        "time_bucket", [201809120511, 2018091205, 20180912]
    )
    def test_finer_buckets_to_month(self, time_bucket: int) -> None:
        """Minute, hour and day buckets all convert to the same month."""
        assert to_month_bucket(time_bucket) == 201809

    @pytest.mark.core
    @pytest.mark.parametrize("time_bucket", [2018091205, 20180912, 201809])
    def test_to_hour_rejects_non_minute(self, time_bucket: int) -> None:
        """Only minute buckets convert to hour."""
        with pytest.raises(InvalidPrecisionState, match="to hour precision"):
            to_hour_bucket(time_bucket)

    @pytest.mark.core
    @pytest.mark.parametrize("time_bucket", [20180912, 201809])
    def test_to_day_rejects_day_and_month(self, time_bucket: int) -> None:
        """Day and month buckets cannot convert to day."""
        with pytest.raises(InvalidPrecisionState):
            to_day_bucket(time_bucket)

    @pytest.mark.core
    def test_to_month_rejects_month(self) -> None:
        """There is no month to month conversion."""
        with pytest.raises(InvalidPrecisionState) as exc_info:
            to_month_bucket(201809)
        assert exc_info.value.time_bucket == 201809
        assert exc_info.value.precision is Precision.MONTH

    @pytest.mark.core
    def test_boundary_value_is_not_converted(self) -> None:
        """A value exactly on the minute boundary is not a minute bucket."""
        with pytest.raises(InvalidPrecisionState):
            to_hour_bucket(100000000000)

    @pytest.mark.core
    @given(st.datetimes(min_value=datetime(2000, 1, 1), max_value=datetime(2999, 12, 31)))
    def test_conversion_paths_agree(self, moment: datetime) -> None:
        """Minute to month equals minute to hour to day to month."""
        time_bucket = int(moment.strftime("%Y%m%d%H%M"))
        via_hours = to_month_bucket(to_day_bucket(to_hour_bucket(time_bucket)))
        direct = to_month_bucket(time_bucket)
        assert via_hours == direct


@pytest.mark.tier(0)
@pytest.mark.tra("Core.TimeBucket.Duration")
class TestDuration:
    """Tests for duration_in_minutes()."""

    @pytest.mark.core
    def test_minute_bucket_is_one_minute(self) -> None:
        """Minute buckets span one minute."""
        assert duration_in_minutes(201809120511) == 1

    @pytest.mark.core
    def test_hour_bucket_is_sixty_minutes(self) -> None:
        """Hour buckets span sixty minutes."""
        assert duration_in_minutes(2018091205) == 60

    @pytest.mark.core
    def test_day_bucket_is_one_day(self) -> None:
        """Day buckets span 1440 minutes."""
        assert duration_in_minutes(20180912) == 1440

    @pytest.mark.core
    def test_september_has_thirty_days(self) -> None:
        """201809 spans 30 days."""
        assert duration_in_minutes(201809) == 30 * 1440

    @pytest.mark.core
    def test_february_non_leap_year(self) -> None:
        """201802 spans 28 days."""
        assert duration_in_minutes(201802) == 28 * 1440

    @pytest.mark.core
    def test_february_leap_year(self) -> None:
        """202002 spans 29 days."""
        assert duration_in_minutes(202002) == 29 * 1440

    @pytest.mark.core
    @pytest.mark.parametrize("value", [201800, 201813, 100000000000, 0, -201809, 12345])
    def test_invalid_month_raises(self, value: int) -> None:
        """MONTH-classified values that are not YYYYMM are rejected."""
        with pytest.raises(InvalidPrecisionState, match="not a YYYYMM month"):
            duration_in_minutes(value)

    @pytest.mark.core
    def test_days_in_month_december(self) -> None:
        """December has 31 days."""
        assert days_in_month(201812) == 31


class TestTimestamps:
    """Tests for time_bucket_of() and timestamp_of()."""

    @pytest.mark.core
    @pytest.mark.parametrize(
        ("precision", "expected"),
        [
            (Precision.MINUTE, 201809120511),
            (Precision.HOUR, 2018091205),
            (Precision.DAY, 20180912),
            (Precision.MONTH, 201809),
        ],
    )
    def test_time_bucket_of_utc(self, precision: Precision, expected: int) -> None:
        """Timestamps encode to the bucket of the requested precision."""
        assert time_bucket_of(SEPT_12_0511_UTC, precision) == expected

    @pytest.mark.core
    def test_time_bucket_of_uses_timezone(self) -> None:
        """The bucket follows the wall clock of the given timezone."""
        plus_eight = timezone(timedelta(hours=8))
        assert time_bucket_of(SEPT_12_0511_UTC, Precision.HOUR, tz=plus_eight) == 2018091213

    @pytest.mark.core
    def test_timestamp_of_minute_bucket(self) -> None:
        """A minute bucket starts at its own minute."""
        assert timestamp_of(201809120511) == SEPT_12_0511_UTC

    @pytest.mark.core
    def test_timestamp_of_month_bucket(self) -> None:
        """A month bucket starts at midnight on the first."""
        assert timestamp_of(201809) == 1535760000.0

    @pytest.mark.core
    def test_timestamp_of_invalid_bucket_raises(self) -> None:
        """Digits that are not a calendar moment are rejected."""
        with pytest.raises(InvalidPrecisionState, match="not a valid"):
            timestamp_of(201813)
