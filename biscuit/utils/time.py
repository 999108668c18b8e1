from datetime import MAXYEAR, MINYEAR, datetime, timezone

UTC = timezone.utc

MIN_DATETIME = datetime(MINYEAR, 1, 1, tzinfo=UTC)

MAX_DATETIME = datetime(MAXYEAR, 12, 31, 23, 59, 59, tzinfo=UTC)


def utcnow() -> datetime:
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """
    Returns the given datetime as an aware UTC datetime. Naive values are
    assumed to already describe UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
