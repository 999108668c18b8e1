from datetime import datetime, timedelta
from typing import Union

from biscuit.cookies import Cookie, CookieSameSiteMode, Expiration


class CookieBuilder:
    """
    Builds a Cookie with a fluent interface:

        cookie = (
            CookieBuilder("session", "abc")
            .path("/")
            .secure(True)
            .same_site(CookieSameSiteMode.LAX)
            .build()
        )
    """

    __slots__ = ("_cookie",)

    def __init__(self, name: str, value: str):
        self._cookie = Cookie(name, value)

    @classmethod
    def from_cookie(cls, cookie: Cookie) -> "CookieBuilder":
        builder = cls.__new__(cls)
        builder._cookie = cookie
        return builder

    def expires(self, expires: Union[Expiration, datetime]) -> "CookieBuilder":
        self._cookie.set_expires(expires)
        return self

    def max_age(self, max_age: Union[timedelta, int]) -> "CookieBuilder":
        self._cookie.set_max_age(max_age)
        return self

    def domain(self, domain: str) -> "CookieBuilder":
        self._cookie.set_domain(domain)
        return self

    def path(self, path: str) -> "CookieBuilder":
        self._cookie.set_path(path)
        return self

    def secure(self, secure: bool = True) -> "CookieBuilder":
        self._cookie.set_secure(secure)
        return self

    def http_only(self, http_only: bool = True) -> "CookieBuilder":
        self._cookie.set_http_only(http_only)
        return self

    def same_site(self, same_site: CookieSameSiteMode) -> "CookieBuilder":
        self._cookie.set_same_site(same_site)
        return self

    def permanent(self) -> "CookieBuilder":
        self._cookie.make_permanent()
        return self

    def removal(self) -> "CookieBuilder":
        self._cookie.make_removal()
        return self

    def build(self) -> Cookie:
        return self._cookie
