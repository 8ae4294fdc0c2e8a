"""A mutable character string with ASCII case changes and number parsing."""

from __future__ import annotations

from typing import Iterable, TextIO, Union

from mystd.errors import LibraryError

_RANGE_CODE = 1
_FORMAT_CODE = 2

_UPPER_SHIFT = ord("A") - ord("a")

StringLike = Union["String", str]


def _chars(value: StringLike | None) -> list[str]:
    if value is None:
        return []
    if isinstance(value, String):
        return list(value._chars)
    if isinstance(value, str):
        return list(value)
    raise TypeError(f"cannot make a String from {type(value).__name__}")


class String:
    """A mutable sequence of characters."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: StringLike | None = "") -> None:
        self._chars: list[str] = _chars(value)

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self):
        return iter(self._chars)

    def __getitem__(self, index: int) -> str:
        return self._chars[index]

    def __setitem__(self, index: int, value: str) -> None:
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError("a String item must be a single character")
        self._chars[index] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, String):
            return self._chars == other._chars
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __add__(self, other: StringLike) -> String:
        result = String(self)
        result += other
        return result

    def __radd__(self, other: str) -> String:
        if not isinstance(other, str):
            return NotImplemented
        return String(other) + self

    def __iadd__(self, other: StringLike) -> String:
        self._chars.extend(_chars(other))
        return self

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"String({str(self)!r})"

    def _shift_case(self, begin: int | None, end: int | None, low: str, high: str, shift: int) -> None:
        if begin is None and end is None:
            begin, end = 0, len(self._chars)
        else:
            begin = 0 if begin is None else begin
            end = len(self._chars) if end is None else end
            if end <= begin or end > len(self._chars) or begin < 0:
                return
        self._chars[begin:end] = [
            chr(ord(char) + shift) if low <= char <= high else char
            for char in self._chars[begin:end]
        ]

    def upper(self, begin: int | None = None, end: int | None = None) -> None:
        """Turn ASCII letters in ``[begin, end)`` (default: everything) upper case.

        An empty or out-of-bounds range leaves the string unchanged.
        """
        self._shift_case(begin, end, "a", "z", _UPPER_SHIFT)

    def lower(self, begin: int | None = None, end: int | None = None) -> None:
        """Turn ASCII letters in ``[begin, end)`` (default: everything) lower case.

        An empty or out-of-bounds range leaves the string unchanged.
        """
        self._shift_case(begin, end, "A", "Z", -_UPPER_SHIFT)

    def substr(self, begin: int, end: int) -> String:
        """Return the characters in ``[begin, end)``, with ``end`` clamped to the length."""
        if begin > end:
            raise LibraryError("invalid range for substr", _FORMAT_CODE)
        end = min(end, len(self._chars))
        begin = min(begin, end)
        return String("".join(self._chars[begin:end]))

    def _split_sign(self) -> tuple[int, Iterable[str]]:
        if not self._chars:
            raise LibraryError("index past the end of the string", _RANGE_CODE)
        if self._chars[0] == "-":
            return -1, self._chars[1:]
        return 1, self._chars

    def to_int(self) -> int:
        """Parse an optionally negative run of decimal digits."""
        sign, digits = self._split_sign()
        answer = 0
        for char in digits:
            if not "0" <= char <= "9":
                raise LibraryError("invalid number format for to_int", _FORMAT_CODE)
            answer = answer * 10 + ord(char) - ord("0")
        return answer * sign

    def to_float(self) -> float:
        """Parse an optionally negative decimal number with at most one point."""
        sign, chars = self._split_sign()
        whole: list[str] = []
        fraction: list[str] = []
        target = whole
        for char in chars:
            if "0" <= char <= "9":
                target.append(char)
            elif char == "." and target is whole:
                target = fraction
            else:
                raise LibraryError("invalid number format for to_float", _FORMAT_CODE)
        number = float(f"{''.join(whole) or '0'}.{''.join(fraction) or '0'}")
        return number * sign


def read_word(stream: TextIO) -> String:
    """Read one word from a text stream.

    Leading spaces and newlines are skipped. The word ends at a space, which
    is consumed but not kept, or at a newline, which is kept. At end of
    stream the result may be empty.
    """
    word = String()
    while char := stream.read(1):
        if char not in (" ", "\n"):
            word += char
            break
    else:
        return word
    while char := stream.read(1):
        if char == " ":
            return word
        word += char
        if char == "\n":
            return word
    return word