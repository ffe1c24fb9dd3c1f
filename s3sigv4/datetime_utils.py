# -*- coding: utf-8 -*-
"""
s3sigv4.datetime_utils
~~~~~~~~~~~~~~~~~~~~~~

UTC clock and the two timestamp formats SigV4 needs.
"""

from datetime import datetime, timezone

AMZ_DATE_FORMAT = "%Y%m%dT%H%M%SZ"


def get_utc_datetime():
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_utc(dt):
    """Normalize ``dt`` to UTC. Naive datetimes are assumed to be UTC already."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def amz_date(dt):
    """Format ``dt`` as ``YYYYMMDDTHHMMSSZ``."""
    return to_utc(dt).strftime(AMZ_DATE_FORMAT)


def date_stamp(dt):
    """Format ``dt`` as ``YYYYMMDD``."""
    return amz_date(dt)[:8]


def fixed_clock(dt):
    """Return a clock callable that always answers ``dt``."""

    def clock():
        return dt

    return clock
