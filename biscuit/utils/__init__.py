from typing import AnyStr

from biscuit.exceptions import Utf8Error
from biscuit.settings.encodings import encodings_settings


def ensure_str(value: AnyStr) -> str:
    """
    Returns the given value as str, decoding bytes as UTF-8. Bytes that cannot
    be decoded are handed to the configured decoder; if that fails too, a
    Utf8Error is raised.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bytes):
        try:
            return value.decode("utf8")
        except UnicodeDecodeError as decode_error:
            try:
                return encodings_settings.decode(value, decode_error)
            except UnicodeDecodeError as final_error:
                raise Utf8Error(final_error) from final_error
    raise ValueError("Expected bytes or str")


def truthy(value: str, default: bool = False) -> bool:
    if not value:
        return default
    return value.upper() in {"1", "TRUE"}
