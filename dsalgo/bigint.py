"""Arbitrary-length non-negative integers stored as decimal digits."""

from __future__ import annotations

from itertools import zip_longest

_DIGITS = "0123456789"


class BigInteger:
    """A non-negative decimal integer kept as its digits, least significant first."""

    __slots__ = ("_digits",)

    def __init__(self, text: str = "") -> None:
        if any(ch not in _DIGITS for ch in text):
            raise ValueError(f"not a decimal number: {text!r}")
        self._digits = tuple(int(ch) for ch in reversed(text))

    @classmethod
    def _from_digits(cls, digits: list[int]) -> BigInteger:
        number = cls()
        number._digits = tuple(digits)
        return number

    def __add__(self, other: object) -> BigInteger:
        if not isinstance(other, BigInteger):
            return NotImplemented
        digits = []
        carry = 0
        for a, b in zip_longest(self._digits, other._digits, fillvalue=0):
            carry, digit = divmod(a + b + carry, 10)
            digits.append(digit)
        if carry:
            digits.append(carry)
        return BigInteger._from_digits(digits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInteger):
            return NotImplemented
        return self._digits == other._digits

    def __hash__(self) -> int:
        return hash(self._digits)

    def __str__(self) -> str:
        return "".join(str(d) for d in reversed(self._digits))

    def __repr__(self) -> str:
        return f"BigInteger({str(self)!r})"