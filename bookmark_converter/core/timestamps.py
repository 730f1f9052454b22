"""
Chromium bookmark timestamp conversion.

Chromium-family browsers store bookmark dates as the number of
microseconds since 1601-01-01 00:00:00 UTC, written as a decimal string.
"""

from datetime import datetime, timedelta, timezone

CHROME_EPOCH = datetime(1601, 1, 1, tzinfo=timezone.utc)

# Values are accumulated in steps of two centuries at most.
TWO_CENTURIES = 200 * 365 * 24 * 60 * 60 * 1000000  # microseconds

_ONE_MICROSECOND = timedelta(microseconds=1)


def decode_timestamp(microseconds: int) -> datetime:
    """
    Convert a Chromium timestamp to an aware UTC datetime.

    Args:
        microseconds: Microseconds since 1601-01-01 00:00:00 UTC

    Returns:
        The corresponding instant

    Raises:
        OverflowError: If the instant is outside the datetime range
    """
    ts = CHROME_EPOCH
    chunk = timedelta(microseconds=TWO_CENTURIES)

    while microseconds >= TWO_CENTURIES:
        ts += chunk
        microseconds -= TWO_CENTURIES

    return ts + timedelta(microseconds=microseconds)


def encode_timestamp(ts: datetime) -> int:
    """Convert an aware datetime back to Chromium microseconds."""
    return (ts - CHROME_EPOCH) // _ONE_MICROSECOND
