from datetime import datetime, timedelta, timezone

import pytest

from biscuit.exceptions import Utf8Error
from biscuit.utils import ensure_str, truthy
from biscuit.utils.time import UTC, as_utc, utcnow


@pytest.mark.parametrize(
    "value,expected_result", [("hello", "hello"), (b"hello", "hello")]
)
def test_ensure_str(value, expected_result):
    assert ensure_str(value) == expected_result


def test_ensure_str_throws_for_invalid_value():
    with pytest.raises(ValueError):
        ensure_str(True)  # type: ignore


def test_ensure_str_throws_for_invalid_utf8():
    with pytest.raises(Utf8Error) as error_info:
        ensure_str(b"\xff\xfe")

    assert isinstance(error_info.value.inner_exception, UnicodeDecodeError)


@pytest.mark.parametrize(
    "value,default,expected_result",
    [
        ("1", False, True),
        ("true", False, True),
        ("no", True, False),
        ("", True, True),
        ("", False, False),
    ],
)
def test_truthy(value, default, expected_result):
    assert truthy(value, default) is expected_result


def test_utcnow_is_aware():
    assert utcnow().tzinfo is UTC


@pytest.mark.parametrize(
    "value,expected_result",
    [
        (datetime(2020, 1, 1, 10), datetime(2020, 1, 1, 10, tzinfo=UTC)),
        (
            datetime(2020, 1, 1, 10, tzinfo=timezone(timedelta(hours=-2))),
            datetime(2020, 1, 1, 12, tzinfo=UTC),
        ),
    ],
)
def test_as_utc(value, expected_result):
    result = as_utc(value)
    assert result == expected_result
    assert result.utcoffset() == timedelta(0)
