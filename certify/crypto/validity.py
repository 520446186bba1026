# certify/crypto/validity.py
import datetime
from typing import NamedTuple

from certify.common.errors import RangeError

SECONDS_PER_DAY = 24 * 60 * 60


class Validity(NamedTuple):
    not_before: datetime.datetime
    not_after: datetime.datetime


def compute(days: int, now: datetime.datetime) -> Validity:
    """
    Validity window starting at now (whole seconds, UTC) and lasting
    days * 86400 seconds. Zero or negative day counts are rejected so the
    window is never empty.
    """
    if days < 1:
        raise RangeError(f"validity must be at least one day, got {days}")
    if now.tzinfo is None:
        now = now.replace(tzinfo=datetime.timezone.utc)
    start = now.astimezone(datetime.timezone.utc).replace(microsecond=0)
    try:
        expire = start + datetime.timedelta(seconds=days * SECONDS_PER_DAY)
    except OverflowError as e:
        raise RangeError(f"can't represent {days} days as a validity period") from e
    return Validity(start, expire)
