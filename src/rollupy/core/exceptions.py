"""Errors raised by rollupy."""


class RollupyError(Exception):
    """Base class for all rollupy errors."""


class InvalidPrecisionState(RollupyError):
    """A time bucket does not support the requested precision operation.

    Raised when converting a bucket that is not at a finer precision than the
    target, or when resolving month arithmetic for a value whose digits are not
    a real calendar month.

    Attributes:
        time_bucket: The offending bucket value.
        precision: The precision the bucket was classified as.
    """

    def __init__(self, message: str, time_bucket: int, precision: object) -> None:
        super().__init__(message)
        self.time_bucket = time_bucket
        self.precision = precision
