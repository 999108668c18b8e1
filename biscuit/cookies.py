from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple, Union

from dateutil.relativedelta import relativedelta

from biscuit.dates import datetime_to_cookie_format
from biscuit.strings import IndexedStr, SourceBuffer
from biscuit.utils.time import MAX_DATETIME, as_utc, utcnow

if TYPE_CHECKING:
    from biscuit.builder import CookieBuilder


MAX_AGE_LIMIT = timedelta.max

TWENTY_YEARS = timedelta(days=365 * 20)


class CookieSameSiteMode(Enum):
    STRICT = "Strict"
    LAX = "Lax"
    NONE = "None"

    @classmethod
    def default(cls) -> "CookieSameSiteMode":
        return cls.NONE

    @classmethod
    def from_value(cls, value: str) -> Optional["CookieSameSiteMode"]:
        """
        Returns the mode matching the given attribute value, ignoring case, or
        None if the value is not a known mode.
        """
        lower_value = value.lower()
        for mode in cls:
            if mode.value.lower() == lower_value:
                return mode
        return None


@dataclass(frozen=True)
class Expiration:
    """
    The expiration of a cookie: either the end of the browser session
    (instant is None) or an absolute point in time.
    """

    instant: Optional[datetime] = None

    @classmethod
    def session(cls) -> "Expiration":
        return cls(None)

    @classmethod
    def at(cls, instant: datetime) -> "Expiration":
        return cls(as_utc(instant))

    @property
    def is_session(self) -> bool:
        return self.instant is None

    @property
    def is_datetime(self) -> bool:
        return self.instant is not None


ExpiresInputType = Union[None, Expiration, datetime]
MaxAgeInputType = Union[None, timedelta, int]


def _ensure_expiration(value: ExpiresInputType) -> Optional[Expiration]:
    if value is None or isinstance(value, Expiration):
        return value
    if isinstance(value, datetime):
        return Expiration.at(value)
    raise TypeError("Expected an Expiration, a datetime, or None")


def _ensure_max_age(value: MaxAgeInputType) -> Optional[timedelta]:
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        value = timedelta(seconds=value)
    if not isinstance(value, timedelta):
        raise TypeError("Expected a timedelta, a number of seconds, or None")
    if value < timedelta(0):
        raise ValueError("The max age of a cookie cannot be negative.")
    return value


def _strip_domain_dot(value: str) -> str:
    if value.startswith("."):
        return value[1:]
    return value


class Cookie:
    """
    Represents a single HTTP cookie and its attributes.

    Cookies obtained from `parse_cookie` retain the string they were parsed
    from, and describe their name, value, domain and path as offset ranges
    into it; the `*_raw` properties return those original substrings. Setting
    any of these fields replaces it with an independent string, after which
    its `*_raw` property returns None.

    Cookies created with this constructor or with a CookieBuilder have no
    source string.
    """

    def __init__(
        self,
        name: str,
        value: str,
        expires: ExpiresInputType = None,
        domain: Optional[str] = None,
        path: Optional[str] = None,
        http_only: Optional[bool] = None,
        secure: Optional[bool] = None,
        max_age: MaxAgeInputType = None,
        same_site: Optional[CookieSameSiteMode] = None,
    ):
        self._source: Optional[SourceBuffer] = None
        self._name = IndexedStr.concrete(name)
        self._value = IndexedStr.concrete(value)
        self._expires = _ensure_expiration(expires)
        self._max_age = _ensure_max_age(max_age)
        self._domain = None if domain is None else IndexedStr.concrete(domain)
        self._path = None if path is None else IndexedStr.concrete(path)
        self._http_only = http_only
        self._secure = secure
        self._same_site = same_site

    @classmethod
    def from_source(
        cls, source: Optional[SourceBuffer], name: IndexedStr, value: IndexedStr
    ) -> "Cookie":
        """
        Creates a cookie whose name and value may refer to the given source.
        Used by the parser.
        """
        cookie = cls.__new__(cls)
        cookie._source = source
        cookie._name = name
        cookie._value = value
        cookie._expires = None
        cookie._max_age = None
        cookie._domain = None
        cookie._path = None
        cookie._http_only = None
        cookie._secure = None
        cookie._same_site = None
        return cookie

    @staticmethod
    def parse(value: Union[str, bytes], strict: Optional[bool] = None) -> "Cookie":
        from biscuit.parser import parse_cookie

        return parse_cookie(value, strict=strict)

    @staticmethod
    def builder(name: str, value: str) -> "CookieBuilder":
        from biscuit.builder import CookieBuilder

        return CookieBuilder(name, value)

    @property
    def source(self) -> Optional[str]:
        """
        Returns the string this cookie was parsed from, if any.
        """
        if self._source is None:
            return None
        return self._source.text

    @property
    def name(self) -> str:
        return self._name.resolve(self._source)

    @name.setter
    def name(self, value: str):
        self.set_name(value)

    @property
    def name_raw(self) -> Optional[str]:
        return self._name.resolve_if_borrowed(self._source)

    @property
    def value(self) -> str:
        return self._value.resolve(self._source)

    @value.setter
    def value(self, value: str):
        self.set_value(value)

    @property
    def value_raw(self) -> Optional[str]:
        return self._value.resolve_if_borrowed(self._source)

    @property
    def name_value(self) -> Tuple[str, str]:
        return self.name, self.value

    @property
    def domain(self) -> Optional[str]:
        """
        Returns the domain of this cookie, without its leading dot if any.
        """
        if self._domain is None:
            return None
        return _strip_domain_dot(self._domain.resolve(self._source))

    @domain.setter
    def domain(self, value: Optional[str]):
        if value is None:
            self.unset_domain()
        else:
            self.set_domain(value)

    @property
    def domain_raw(self) -> Optional[str]:
        """
        Returns the domain exactly as it appeared in the source string, leading
        dot included.
        """
        if self._domain is None:
            return None
        return self._domain.resolve_if_borrowed(self._source)

    @property
    def path(self) -> Optional[str]:
        if self._path is None:
            return None
        return self._path.resolve(self._source)

    @path.setter
    def path(self, value: Optional[str]):
        if value is None:
            self.unset_path()
        else:
            self.set_path(value)

    @property
    def path_raw(self) -> Optional[str]:
        if self._path is None:
            return None
        return self._path.resolve_if_borrowed(self._source)

    @property
    def expires(self) -> Optional[Expiration]:
        return self._expires

    @expires.setter
    def expires(self, value: ExpiresInputType):
        self.set_expires(value)

    @property
    def max_age(self) -> Optional[timedelta]:
        return self._max_age

    @max_age.setter
    def max_age(self, value: MaxAgeInputType):
        self.set_max_age(value)

    @property
    def secure(self) -> Optional[bool]:
        return self._secure

    @secure.setter
    def secure(self, value: Optional[bool]):
        self.set_secure(value)

    @property
    def http_only(self) -> Optional[bool]:
        return self._http_only

    @http_only.setter
    def http_only(self, value: Optional[bool]):
        self.set_http_only(value)

    @property
    def same_site(self) -> Optional[CookieSameSiteMode]:
        return self._same_site

    @same_site.setter
    def same_site(self, value: Optional[CookieSameSiteMode]):
        self.set_same_site(value)

    def set_name(self, name: str) -> "Cookie":
        self._name = IndexedStr.concrete(name)
        return self

    def set_value(self, value: str) -> "Cookie":
        self._value = IndexedStr.concrete(value)
        return self

    def set_expires(self, value: ExpiresInputType) -> "Cookie":
        self._expires = _ensure_expiration(value)
        return self

    def unset_expires(self) -> "Cookie":
        self._expires = None
        return self

    def set_max_age(self, value: MaxAgeInputType) -> "Cookie":
        self._max_age = _ensure_max_age(value)
        return self

    def unset_max_age(self) -> "Cookie":
        self._max_age = None
        return self

    def set_domain(self, value: str) -> "Cookie":
        self._domain = IndexedStr.concrete(value)
        return self

    def unset_domain(self) -> "Cookie":
        self._domain = None
        return self

    def set_path(self, value: str) -> "Cookie":
        self._path = IndexedStr.concrete(value)
        return self

    def unset_path(self) -> "Cookie":
        self._path = None
        return self

    def set_secure(self, value: Optional[bool] = True) -> "Cookie":
        self._secure = value
        return self

    def unset_secure(self) -> "Cookie":
        self._secure = None
        return self

    def set_http_only(self, value: Optional[bool] = True) -> "Cookie":
        self._http_only = value
        return self

    def unset_http_only(self) -> "Cookie":
        self._http_only = None
        return self

    def set_same_site(
        self, value: Optional[CookieSameSiteMode] = CookieSameSiteMode.default()
    ) -> "Cookie":
        if value is not None and not isinstance(value, CookieSameSiteMode):
            raise TypeError("Expected a CookieSameSiteMode or None")
        self._same_site = value
        return self

    def unset_same_site(self) -> "Cookie":
        self._same_site = None
        return self

    def make_permanent(self) -> "Cookie":
        """
        Makes this cookie last twenty years: sets its max age and its
        expiration accordingly.
        """
        self.set_max_age(TWENTY_YEARS)
        try:
            expires = utcnow() + relativedelta(years=20)
        except (ValueError, OverflowError):
            expires = MAX_DATETIME
        self.set_expires(Expiration.at(expires))
        return self

    def make_removal(self) -> "Cookie":
        """
        Turns this cookie into one that instructs clients to delete it: empty
        value, zero max age and an expiration one year in the past.
        """
        self.set_value("")
        self.set_max_age(timedelta(0))
        self.set_expires(Expiration.at(utcnow() - relativedelta(years=1)))
        return self

    def into_owned(self) -> "Cookie":
        """
        Returns a copy of this cookie that does not depend on the string it was
        parsed from: every field holds an independent string.
        """
        source = self._source
        cookie = Cookie.from_source(
            source.to_owned() if source is not None else None,
            self._name.to_owned(source),
            self._value.to_owned(source),
        )
        cookie._copy_attributes(self)
        if self._domain is not None:
            cookie._domain = self._domain.to_owned(source)
        if self._path is not None:
            cookie._path = self._path.to_owned(source)
        return cookie

    def clone(self) -> "Cookie":
        cookie = Cookie.from_source(self._source, self._name, self._value)
        cookie._copy_attributes(self)
        return cookie

    def _copy_attributes(self, other: "Cookie") -> None:
        self._expires = other._expires
        self._max_age = other._max_age
        self._domain = other._domain
        self._path = other._path
        self._http_only = other._http_only
        self._secure = other._secure
        self._same_site = other._same_site

    def __str__(self):
        return write_cookie(self)

    def __eq__(self, other):
        if isinstance(other, Cookie):
            return (
                other.name == self.name
                and other.value == self.value
                and other.expires == self.expires
                and other.max_age == self.max_age
                and other.domain == self.domain
                and other.path == self.path
                and other.secure == self.secure
                and other.http_only == self.http_only
                and other.same_site == self.same_site
            )
        return NotImplemented

    __hash__ = None  # type: ignore

    def __repr__(self):
        return f"<Cookie {self.name}: {self.value}>"


def write_cookie(cookie: Cookie) -> str:
    """
    Returns the canonical Set-Cookie representation of a cookie: attributes
    are always written in the same order, and only when set.
    """
    parts = [cookie.name + "=" + cookie.value]
    expires = cookie.expires
    if expires is not None and expires.instant is not None:
        parts.append("Expires=" + datetime_to_cookie_format(expires.instant))
    if cookie.max_age is not None:
        parts.append("Max-Age=" + str(cookie.max_age // timedelta(seconds=1)))
    if cookie._domain is not None:
        parts.append("Domain=" + cookie._domain.resolve(cookie._source))
    if cookie.path is not None:
        parts.append("Path=" + cookie.path)
    if cookie.secure:
        parts.append("Secure")
    if cookie.http_only:
        parts.append("HttpOnly")
    if cookie.same_site is not None:
        parts.append("SameSite=" + cookie.same_site.value)
    return "; ".join(parts)


def write_cookie_for_response(cookie: Cookie) -> bytes:
    return write_cookie(cookie).encode()
