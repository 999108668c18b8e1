import os

from biscuit.utils import truthy


def is_strict_parsing() -> bool:
    """
    Returns a value indicating whether cookies should be parsed in strict mode
    by default. This method checks if a `BISCUIT_STRICT_COOKIES` environment
    variable is set to "1" or "true".
    """
    return truthy(os.environ.get("BISCUIT_STRICT_COOKIES", ""))
