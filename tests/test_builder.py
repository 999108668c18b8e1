from datetime import datetime, timedelta, timezone

from biscuit import Cookie, CookieBuilder, CookieSameSiteMode, Expiration, parse_cookie

UTC = timezone.utc


def test_build_cookie():
    cookie = (
        CookieBuilder("sessionId", "abc123")
        .expires(datetime(2025, 10, 21, 7, 28, tzinfo=UTC))
        .max_age(timedelta(hours=1))
        .domain("example.com")
        .path("/")
        .secure(True)
        .http_only(True)
        .same_site(CookieSameSiteMode.STRICT)
        .build()
    )

    assert isinstance(cookie, Cookie)
    assert cookie.source is None
    assert str(cookie) == (
        "sessionId=abc123; Expires=Tue, 21 Oct 2025 07:28:00 GMT; Max-Age=3600; "
        "Domain=example.com; Path=/; Secure; HttpOnly; SameSite=Strict"
    )


def test_build_minimal_cookie():
    cookie = Cookie.builder("Foo", "Power").build()

    assert cookie.name_value == ("Foo", "Power")
    assert cookie.same_site is None
    assert str(cookie) == "Foo=Power"


def test_build_cookie_fields_are_concrete():
    cookie = Cookie.builder("Foo", "Power").domain(".example.com").path("/").build()

    assert cookie.domain == "example.com"
    assert cookie.domain_raw is None
    assert cookie.path_raw is None
    assert cookie.name_raw is None


def test_build_with_flags_set_to_false():
    cookie = Cookie.builder("Foo", "Power").secure(False).http_only(False).build()

    assert cookie.secure is False
    assert cookie.http_only is False
    assert str(cookie) == "Foo=Power"


def test_build_session_cookie():
    cookie = Cookie.builder("Foo", "Power").expires(Expiration.session()).build()

    assert cookie.expires.is_session
    assert str(cookie) == "Foo=Power"


def test_build_permanent_and_removal_cookies():
    permanent = Cookie.builder("Foo", "Power").permanent().build()
    removal = Cookie.builder("Foo", "Power").removal().build()

    assert permanent.max_age == timedelta(days=365 * 20)
    assert removal.value == ""
    assert removal.max_age == timedelta(0)


def test_builder_from_parsed_cookie():
    parsed = parse_cookie("Foo=Power; Path=/; Domain=example.com")

    cookie = CookieBuilder.from_cookie(parsed).path("/account").max_age(10).build()

    assert cookie is parsed
    assert cookie.path == "/account"
    assert cookie.path_raw is None
    assert cookie.domain_raw == "example.com"
    assert str(cookie) == "Foo=Power; Max-Age=10; Domain=example.com; Path=/account"
