"""
This module defines the string types used to represent the text fields of a
parsed cookie without copying them out of the original cookie string.

A parsed cookie retains the string it was parsed from (its source buffer) and
describes its name, value, domain and path as offset ranges into it. Offsets
are resolved against the source only when a field is read, and a field is
replaced by an independent ("concrete") string as soon as it is modified.
"""

from typing import List, Optional, Tuple, Union

from biscuit.exceptions import InvalidOperation


class StrView:
    """
    A read-only view over a slice of a source string. Views remember the exact
    string object they were cut from, so that their position can be
    described later as an offset range into that same object.
    """

    __slots__ = ("_source", "_start", "_end")

    def __init__(self, source: str, start: int = 0, end: Optional[int] = None):
        if end is None:
            end = len(source)
        if not 0 <= start <= end <= len(source):
            raise ValueError("The view range must be inside the source string.")
        self._source = source
        self._start = start
        self._end = end

    @property
    def source(self) -> str:
        return self._source

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    def __str__(self) -> str:
        return self._source[self._start : self._end]

    def __len__(self) -> int:
        return self._end - self._start

    def __bool__(self) -> bool:
        return self._end > self._start

    def __eq__(self, other):
        if isinstance(other, StrView):
            return str(other) == str(self)
        if isinstance(other, str):
            return other == str(self)
        return NotImplemented

    def __hash__(self):
        return hash(str(self))

    def __repr__(self):
        return f"<StrView {str(self)!r} [{self._start}:{self._end}]>"

    def _sub(self, start: int, end: int) -> "StrView":
        return StrView(self._source, self._start + start, self._start + end)

    def find(self, sub: str) -> int:
        index = self._source.find(sub, self._start, self._end)
        if index == -1:
            return -1
        return index - self._start

    def strip(self) -> "StrView":
        text = str(self)
        left = len(text) - len(text.lstrip())
        right = len(text.rstrip())
        if right < left:
            return self._sub(left, left)
        return self._sub(left, right)

    def partition(self, sep: str) -> Tuple["StrView", bool, "StrView"]:
        """
        Splits the view at the first occurrence of sep. Returns the part before
        the separator, a value indicating whether the separator was found, and
        the part after it (empty if not found).
        """
        index = self.find(sep)
        if index == -1:
            return self, False, self._sub(len(self), len(self))
        return self._sub(0, index), True, self._sub(index + len(sep), len(self))

    def split(self, sep: str) -> List["StrView"]:
        parts = []
        rest = self
        while True:
            head, found, rest = rest.partition(sep)
            parts.append(head)
            if not found:
                return parts


class SourceBuffer:
    """
    The text a cookie was parsed from.

    A buffer is borrowed when its text is the very string object the caller
    passed to the parser; it is owned when the library produced the text
    itself, for example by decoding bytes or by detaching a cookie with
    `Cookie.into_owned`.
    """

    __slots__ = ("_text", "_borrowed")

    def __init__(self, text: str, borrowed: bool = True):
        self._text = text
        self._borrowed = borrowed

    @property
    def text(self) -> str:
        return self._text

    @property
    def borrowed(self) -> bool:
        return self._borrowed

    def __len__(self) -> int:
        return len(self._text)

    def to_owned(self) -> "SourceBuffer":
        # str is immutable: an owned clone shares the characters and only
        # drops the borrowed flag
        return SourceBuffer(self._text, borrowed=False)

    def __repr__(self):
        kind = "borrowed" if self._borrowed else "owned"
        return f"<SourceBuffer {kind} {self._text!r}>"


class IndexedStr:
    """
    A cookie string field, either an offset range into a source buffer that is
    not stored in this object, or a concrete string.

    An offset value must only be resolved with the buffer its range was
    computed from. The Cookie class is the only owner of such buffers.
    """

    __slots__ = ("_start", "_end", "_value")

    def __init__(
        self,
        value: Optional[str] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
    ):
        if value is None and (start is None or end is None):
            raise ValueError("Either a value or an offset range is required.")
        if value is not None and start is not None:
            raise ValueError("A value and an offset range are mutually exclusive.")
        self._value = value
        self._start = start
        self._end = end

    @classmethod
    def concrete(cls, value: str) -> "IndexedStr":
        if not isinstance(value, str):
            raise TypeError("Expected a str value")
        return cls(value=value)

    @classmethod
    def offset(cls, start: int, end: int) -> "IndexedStr":
        if start < 0 or end < start:
            raise ValueError("Invalid offset range.")
        return cls(start=start, end=end)

    @classmethod
    def from_substring(
        cls, needle: Union[StrView, str], haystack: Union[SourceBuffer, str]
    ) -> Optional["IndexedStr"]:
        """
        Returns an offset value describing the position of needle inside
        haystack. The needle must be the haystack string object itself, or a
        view cut from it; otherwise None is returned. Textual equality is not
        enough: a str equal to a slice of the haystack is not applicable.
        """
        if isinstance(haystack, SourceBuffer):
            haystack = haystack.text
        if needle is haystack:
            return cls.offset(0, len(haystack))
        if not isinstance(needle, StrView):
            return None
        if needle.source is not haystack:
            return None
        if needle.end > len(haystack):
            return None
        return cls.offset(needle.start, needle.end)

    @property
    def is_offset(self) -> bool:
        return self._value is None

    @property
    def is_concrete(self) -> bool:
        return self._value is not None

    @property
    def range(self) -> Optional[Tuple[int, int]]:
        if self._value is not None:
            return None
        return self._start, self._end

    def resolve(self, source: Optional[SourceBuffer]) -> str:
        if self._value is not None:
            return self._value
        if source is None:
            raise InvalidOperation(
                "A source buffer is required to resolve an offset string."
            )
        if self._end > len(source):
            raise InvalidOperation("The offset range is outside the source buffer.")
        return source.text[self._start : self._end]

    def resolve_if_borrowed(self, source: Optional[SourceBuffer]) -> Optional[str]:
        if self._value is not None or source is None or not source.borrowed:
            return None
        return self.resolve(source)

    def to_owned(self, source: Optional[SourceBuffer] = None) -> "IndexedStr":
        return IndexedStr.concrete(self.resolve(source))

    def __eq__(self, other):
        if isinstance(other, IndexedStr):
            return (
                other._value == self._value
                and other._start == self._start
                and other._end == self._end
            )
        return NotImplemented

    def __hash__(self):
        return hash((self._value, self._start, self._end))

    def __repr__(self):
        if self._value is not None:
            return f"<IndexedStr concrete {self._value!r}>"
        return f"<IndexedStr offset [{self._start}:{self._end}]>"
