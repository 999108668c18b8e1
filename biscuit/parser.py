"""
This module implements the parser of Set-Cookie header values.

The grammar is lenient: unknown attributes and attributes whose value cannot
be interpreted are dropped, and only a missing name=value pair, an empty name
or an invalid Expires date make the whole parse fail. A stricter policy that
also rejects invalid Max-Age and SameSite values can be enabled per call or
through `parsing_settings`.
"""

import logging
import re
from datetime import timedelta
from typing import Optional, Union

from biscuit.cookies import MAX_AGE_LIMIT, Cookie, CookieSameSiteMode, Expiration
from biscuit.dates import datetime_from_cookie_format
from biscuit.exceptions import (
    EmptyName,
    InvalidMaxAge,
    InvalidSameSite,
    MissingPair,
)
from biscuit.settings.parsing import parsing_settings
from biscuit.strings import IndexedStr, SourceBuffer, StrView
from biscuit.utils import ensure_str

parser_logger = logging.getLogger("biscuit.parser")

_DIGITS = re.compile(r"[0-9]+")

_MAX_AGE_LIMIT_SECONDS = MAX_AGE_LIMIT // timedelta(seconds=1)


def _index(needle: StrView, source: SourceBuffer) -> IndexedStr:
    indexed = IndexedStr.from_substring(needle, source)
    assert indexed is not None, "Parsed fragments are views of the source"
    return indexed


def parse_max_age(value: str, strict: bool = False) -> Optional[timedelta]:
    """
    Parses the value of a Max-Age attribute. Negative values mean that the
    cookie expires immediately and give a zero duration; values too large to
    be represented give the maximum duration. A lone "-" counts as negative
    and also gives zero. Other non numeric values, the empty string included,
    give None, or raise InvalidMaxAge in strict mode.
    """
    if value == "-":
        return timedelta(0)

    negative = value.startswith("-")
    digits = value[1:] if negative else value

    if not _DIGITS.fullmatch(digits):
        if strict:
            raise InvalidMaxAge(value)
        parser_logger.debug("Ignoring invalid Max-Age attribute: %r", value)
        return None

    if negative:
        return timedelta(0)

    seconds = int(digits)
    if seconds >= _MAX_AGE_LIMIT_SECONDS:
        return MAX_AGE_LIMIT
    return timedelta(seconds=seconds)


def parse_same_site(value: str, strict: bool = False) -> Optional[CookieSameSiteMode]:
    mode = CookieSameSiteMode.from_value(value)
    if mode is None:
        if strict:
            raise InvalidSameSite(value)
        parser_logger.debug("Ignoring invalid SameSite attribute: %r", value)
    return mode


def parse_cookie(value: Union[str, bytes], strict: Optional[bool] = None) -> Cookie:
    """
    Parses a Set-Cookie header value, or a single name=value pair of a Cookie
    header, into a Cookie.

    When value is a str, the returned cookie keeps a reference to it and its
    raw properties return substrings of it. Bytes are decoded as UTF-8 first,
    in which case the cookie owns the decoded text and raw properties are not
    available.

    Raises MissingPair, EmptyName or InvalidDate if the string cannot be
    parsed, Utf8Error if bytes cannot be decoded, and in strict mode also
    InvalidMaxAge and InvalidSameSite.
    """
    if strict is None:
        strict = parsing_settings.strict

    if isinstance(value, str):
        source = SourceBuffer(value, borrowed=True)
    else:
        source = SourceBuffer(ensure_str(value), borrowed=False)

    attributes = StrView(source.text).split(";")

    name, found, val = attributes[0].partition("=")
    if not found:
        raise MissingPair()

    name = name.strip()
    if not name:
        raise EmptyName()

    cookie = Cookie.from_source(
        source, _index(name, source), _index(val.strip(), source)
    )

    for attribute in attributes[1:]:
        key, has_value, attribute_value = attribute.partition("=")
        key = str(key.strip())
        attribute_value = attribute_value.strip()

        if key == "Secure":
            cookie._secure = True
            continue

        if key == "HttpOnly":
            cookie._http_only = True
            continue

        if not has_value:
            if key:
                parser_logger.debug("Ignoring cookie attribute: %r", key)
            continue

        if key == "Expires":
            cookie._expires = Expiration.at(
                datetime_from_cookie_format(str(attribute_value))
            )
        elif key == "Max-Age":
            max_age = parse_max_age(str(attribute_value), strict)
            if max_age is not None:
                cookie._max_age = max_age
        elif key == "Domain":
            cookie._domain = _index(attribute_value, source)
        elif key == "Path":
            cookie._path = _index(attribute_value, source)
        elif key == "SameSite":
            same_site = parse_same_site(str(attribute_value), strict)
            if same_site is not None:
                cookie._same_site = same_site
        else:
            parser_logger.debug("Ignoring unknown cookie attribute: %r", key)

    return cookie
