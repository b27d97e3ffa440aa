"""Time bucket classification, conversion and duration.

A time bucket is a calendar moment written as decimal digits with no
separator. Its digit count is its precision:

    minute  YYYYMMDDhhmm  201809120511
    hour    YYYYMMDDhh    2018091205
    day     YYYYMMDD      20180912
    month   YYYYMM        201809

Classification only inspects magnitude, using open intervals. Values that sit
exactly on a power-of-ten boundary (e.g. 100000000000) are not minute, hour or
day buckets and fall through to MONTH like any other unmatched value; month
arithmetic then rejects them because their digits are not a YYYYMM month.
"""

import calendar
from datetime import UTC, datetime, tzinfo

from rollupy.core.exceptions import InvalidPrecisionState
from rollupy.core.models import Precision

_MINUTES_IN_HOUR = 60
_MINUTES_IN_DAY = 24 * 60

_FORMATS = {
    Precision.MINUTE: "%Y%m%d%H%M",
    Precision.HOUR: "%Y%m%d%H",
    Precision.DAY: "%Y%m%d",
    Precision.MONTH: "%Y%m",
}


def is_minute_bucket(time_bucket: int) -> bool:
    """Return True for 12-digit buckets (exclusive bounds)."""
    return 100000000000 < time_bucket < 999999999999


def is_hour_bucket(time_bucket: int) -> bool:
    """Return True for 10-digit buckets (exclusive bounds)."""
    return 1000000000 < time_bucket < 9999999999


def is_day_bucket(time_bucket: int) -> bool:
    """Return True for 8-digit buckets (exclusive bounds)."""
    return 10000000 < time_bucket < 99999999


def classify(time_bucket: int) -> Precision:
    """Classify a time bucket by magnitude.

    Args:
        time_bucket: Encoded bucket value.

    Returns:
        The bucket's precision. Anything that is not a minute, hour or day
        bucket is reported as MONTH.
    """
    # @tra: Core.TimeBucket.Classify
    if is_minute_bucket(time_bucket):
        return Precision.MINUTE
    if is_hour_bucket(time_bucket):
        return Precision.HOUR
    if is_day_bucket(time_bucket):
        return Precision.DAY
    return Precision.MONTH


def _unsupported(time_bucket: int, target: Precision) -> InvalidPrecisionState:
    precision = classify(time_bucket)
    return InvalidPrecisionState(
        f"cannot convert {precision} bucket {time_bucket} to {target} precision",
        time_bucket=time_bucket,
        precision=precision,
    )


def to_hour_bucket(time_bucket: int) -> int:
    """Convert a minute bucket to its hour bucket.

    Raises:
        InvalidPrecisionState: If ``time_bucket`` is not a minute bucket.
    """
    if is_minute_bucket(time_bucket):
        return time_bucket // 100
    raise _unsupported(time_bucket, Precision.HOUR)


def to_day_bucket(time_bucket: int) -> int:
    """Convert a minute or hour bucket to its day bucket.

    Raises:
        InvalidPrecisionState: If ``time_bucket`` is not a minute or hour bucket.
    """
    if is_minute_bucket(time_bucket):
        return time_bucket // 10000
    if is_hour_bucket(time_bucket):
        return time_bucket // 100
    raise _unsupported(time_bucket, Precision.DAY)


def to_month_bucket(time_bucket: int) -> int:
    """Convert a minute, hour or day bucket to its month bucket.

    Raises:
        InvalidPrecisionState: If ``time_bucket`` is already a month bucket or
            is not classifiable as minute, hour or day.
    """
    if is_minute_bucket(time_bucket):
        return time_bucket // 1000000
    if is_hour_bucket(time_bucket):
        return time_bucket // 10000
    if is_day_bucket(time_bucket):
        return time_bucket // 100
    raise _unsupported(time_bucket, Precision.MONTH)


def days_in_month(time_bucket: int) -> int:
    """Return the number of calendar days in a YYYYMM month bucket.

    Raises:
        InvalidPrecisionState: If the value is not a 6-digit YYYYMM month.
    """
    month = time_bucket % 100
    if time_bucket <= 0 or len(str(time_bucket)) != 6 or not 1 <= month <= 12:
        raise InvalidPrecisionState(
            f"time bucket {time_bucket} is not a YYYYMM month",
            time_bucket=time_bucket,
            precision=classify(time_bucket),
        )
    return calendar.monthrange(time_bucket // 100, month)[1]


def duration_in_minutes(time_bucket: int) -> int:
    """Return how many minutes a bucket spans.

    Minute, hour and day buckets are fixed length; month buckets depend on the
    calendar, including leap years.

    Raises:
        InvalidPrecisionState: If a MONTH-classified value is not a real month.
    """
    # @tra: Core.TimeBucket.Duration
    precision = classify(time_bucket)
    if precision is Precision.MINUTE:
        return 1
    if precision is Precision.HOUR:
        return _MINUTES_IN_HOUR
    if precision is Precision.DAY:
        return _MINUTES_IN_DAY
    return days_in_month(time_bucket) * _MINUTES_IN_DAY


def time_bucket_of(
    timestamp: float, precision: Precision, tz: tzinfo = UTC
) -> int:
    """Encode a Unix timestamp as a time bucket of the given precision.

    Args:
        timestamp: Unix timestamp in seconds.
        precision: Target precision.
        tz: Timezone whose wall clock the bucket is expressed in.

    Returns:
        Bucket value, e.g. 201809120511 for a minute bucket.
    """
    moment = datetime.fromtimestamp(timestamp, tz=tz)
    return int(moment.strftime(_FORMATS[precision]))


def timestamp_of(time_bucket: int, tz: tzinfo = UTC) -> float:
    """Return the Unix timestamp at the start of a time bucket.

    Raises:
        InvalidPrecisionState: If the digits are not a real calendar moment.
    """
    precision = classify(time_bucket)
    try:
        moment = datetime.strptime(str(time_bucket), _FORMATS[precision])
    except ValueError as e:
        raise InvalidPrecisionState(
            f"time bucket {time_bucket} is not a valid {precision} bucket: {e}",
            time_bucket=time_bucket,
            precision=precision,
        ) from e
    return moment.replace(tzinfo=tz).timestamp()
