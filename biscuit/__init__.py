"""
Root module of the library. This module re-exports the most commonly used
types to reduce the verbosity of the imports statements.
"""

__version__ = "0.1.0"

from .builder import CookieBuilder as CookieBuilder
from .cookies import Cookie as Cookie
from .cookies import CookieSameSiteMode as CookieSameSiteMode
from .cookies import Expiration as Expiration
from .cookies import write_cookie as write_cookie
from .cookies import write_cookie_for_response as write_cookie_for_response
from .dates import datetime_from_cookie_format as datetime_from_cookie_format
from .dates import datetime_to_cookie_format as datetime_to_cookie_format
from .exceptions import CookieError as CookieError
from .exceptions import CookieParseError as CookieParseError
from .exceptions import EmptyName as EmptyName
from .exceptions import InvalidDate as InvalidDate
from .exceptions import InvalidMaxAge as InvalidMaxAge
from .exceptions import InvalidSameSite as InvalidSameSite
from .exceptions import MissingPair as MissingPair
from .exceptions import Utf8Error as Utf8Error
from .parser import parse_cookie as parse_cookie
from .strings import IndexedStr as IndexedStr
from .strings import SourceBuffer as SourceBuffer
from .strings import StrView as StrView
