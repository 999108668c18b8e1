from biscuit.env import is_strict_parsing


class ParsingSettings:
    """
    Controls how cookie attributes that cannot be interpreted are handled.

    In lenient mode (the default) a malformed Max-Age or an unknown SameSite
    value is dropped and the rest of the cookie is kept. In strict mode the
    same input raises InvalidMaxAge or InvalidSameSite. The initial mode is
    read from the `BISCUIT_STRICT_COOKIES` environment variable.
    """

    def __init__(self) -> None:
        self._strict = is_strict_parsing()

    @property
    def strict(self) -> bool:
        return self._strict

    def use_strict(self, value: bool = True) -> None:
        self._strict = value

    def use_lenient(self) -> None:
        self._strict = False


parsing_settings = ParsingSettings()
