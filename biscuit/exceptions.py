class CookieError(Exception):
    def __init__(self, message: str):
        super().__init__(message)


class CookieParseError(CookieError, ValueError):
    """
    Base class for errors that make a cookie string impossible to parse.
    """


class MissingPair(CookieParseError):
    def __init__(self):
        super().__init__("Missing '=' between the cookie name and value")


class EmptyName(CookieParseError):
    def __init__(self):
        super().__init__("A cookie name is required")


class InvalidMaxAge(CookieParseError):
    def __init__(self, value: str = ""):
        super().__init__(f"Invalid Max-Age attribute: {value!r}")
        self.value = value


class InvalidSameSite(CookieParseError):
    def __init__(self, value: str = ""):
        super().__init__(f"Invalid SameSite attribute: {value!r}")
        self.value = value


class InvalidDate(CookieParseError):
    def __init__(self, value: str = "", inner_exception=None):
        super().__init__(f"Invalid Expires date: {value!r}")
        self.value = value
        self.inner_exception = inner_exception


class Utf8Error(CookieParseError):
    def __init__(self, inner_exception=None):
        super().__init__("The cookie string is not valid UTF-8")
        self.inner_exception = inner_exception


class InvalidOperation(Exception):
    def __init__(self, message: str, inner_exception=None):
        super().__init__(message)
        self.inner_exception = inner_exception
