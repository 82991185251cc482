"""An immutable string reference with trimming, prefix and splitting helpers."""

from __future__ import annotations

from typing import Union

from violetkit.optional import Optional

_ASCII_WHITESPACE = " \t\n\r\v\f"

StrLike = Union[str, "StringRef"]


def _text_of(value: object) -> str:
    if isinstance(value, StringRef):
        return value._text
    if isinstance(value, str):
        return value
    raise TypeError(f"expected a str or StringRef, got {type(value).__name__}")


class StringRef:
    """A read-only view of a string.

    Whitespace trimming only considers ASCII whitespace: space, tab, newline,
    carriage return, vertical tab and form feed.
    """

    __slots__ = ("_text",)

    def __init__(self, data: StrLike = "") -> None:
        if data is None:
            raise TypeError("StringRef cannot be created from None")
        self._text = _text_of(data)

    def __len__(self) -> int:
        return len(self._text)

    def __getitem__(self, index: int) -> str:
        if not isinstance(index, int):
            raise TypeError(f"index must be an int, got {type(index).__name__}")
        if not 0 <= index < len(self._text):
            raise IndexError(f"invalid index {index} for length {len(self._text)}")
        return self._text[index]

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (StringRef, str)):
            return self._text == _text_of(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"StringRef({self._text!r})"

    def is_empty(self) -> bool:
        """Return True if the string has no characters."""
        return not self._text

    def starts_with(self, prefix: StrLike) -> bool:
        """Return True if the string begins with ``prefix``."""
        return self._text.startswith(_text_of(prefix))

    def first(self) -> Optional[str]:
        """Return the first character, or an empty optional."""
        return Optional(self._text[0]) if self._text else Optional()

    def last(self) -> Optional[str]:
        """Return the last character, or an empty optional."""
        return Optional(self._text[-1]) if self._text else Optional()

    def trim_start(self) -> StringRef:
        """Return the string without leading ASCII whitespace."""
        return StringRef(self._text.lstrip(_ASCII_WHITESPACE))

    def trim_end(self) -> StringRef:
        """Return the string without trailing ASCII whitespace."""
        return StringRef(self._text.rstrip(_ASCII_WHITESPACE))

    def trim(self) -> StringRef:
        """Return the string without surrounding ASCII whitespace."""
        return StringRef(self._text.strip(_ASCII_WHITESPACE))

    def strip_prefix(self, prefix: StrLike) -> Optional[StringRef]:
        """Return the rest after ``prefix``, or an empty optional if absent."""
        prefix_text = _text_of(prefix)
        if not self._text.startswith(prefix_text):
            return Optional()
        return Optional(StringRef(self._text[len(prefix_text):]))

    def as_bytes(self) -> bytes:
        """Return the UTF-8 encoding of the string."""
        return self._text.encode("utf-8")

    def split(self, delim: StrLike) -> list[StringRef]:
        """Split on ``delim``; an empty delimiter yields the whole string."""
        delim_text = _text_of(delim)
        if not delim_text:
            return [StringRef(self._text)]
        return [StringRef(part) for part in self._text.split(delim_text)]