import time
from datetime import datetime
from typing import AnyStr, Tuple

from biscuit.exceptions import InvalidDate, Utf8Error
from biscuit.utils import ensure_str
from biscuit.utils.time import UTC, as_utc

# formats tried in order against the Expires value, once the GMT marker has
# been removed; the first match wins
COOKIE_DATE_FORMATS: Tuple[str, ...] = (
    # Sun, 06 Nov 1994 08:49:37
    "%a, %d %b %Y %H:%M:%S",
    # Sunday, 06-Nov-94 08:49:37
    "%A, %d-%b-%y %H:%M:%S",
    # Sun, Nov 6 08:49:37 1994
    "%a, %b %d %H:%M:%S %Y",
    # Sun, 06-Nov-1994 08:49:37
    "%a, %d-%b-%Y %H:%M:%S",
)


def _strip_gmt(value: str) -> str:
    return value.split("GMT", 1)[0].strip()


def _parse_with_format(value: str, date_format: str) -> datetime:
    parsed = time.strptime(value, date_format)
    result = datetime(*parsed[:6], tzinfo=UTC)
    # time.strptime keeps the weekday it read instead of computing it
    if result.weekday() != parsed.tm_wday:
        raise ValueError(
            f"The weekday of {value!r} does not match the calendar date."
        )
    return result


def datetime_from_cookie_format(value: AnyStr) -> datetime:
    """
    Parses the value of an Expires cookie attribute into an aware UTC datetime.
    Raises InvalidDate if the value does not match any supported format, or if
    the weekday it names is not the weekday of the date.
    """
    try:
        text = ensure_str(value)
    except Utf8Error as decode_error:
        raise InvalidDate(repr(value), decode_error) from decode_error

    text = _strip_gmt(text)
    last_error = None

    for date_format in COOKIE_DATE_FORMATS:
        try:
            return _parse_with_format(text, date_format)
        except ValueError as value_error:
            last_error = value_error

    raise InvalidDate(text, last_error)


def datetime_to_cookie_format(value: datetime) -> str:
    value = as_utc(value)
    # %Y is not zero padded for years before 1000 on every platform
    return (
        value.strftime("%a, %d %b ")
        + f"{value.year:04d}"
        + value.strftime(" %H:%M:%S GMT")
    )
