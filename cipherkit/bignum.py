"""Arbitrary-size non-negative integers with decimal text input and output."""

from __future__ import annotations

import math
from functools import total_ordering
from typing import Union

NaturalLike = Union["Natural", int, str]


def _coerce(value: NaturalLike) -> int:
    """Turn an accepted input into a non-negative Python integer."""
    if isinstance(value, Natural):
        return value._value
    if isinstance(value, bool):
        raise TypeError("booleans are not natural numbers")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"{value} is negative")
        return value
    if isinstance(value, str):
        digits = value.strip()
        if not digits or not (digits.isascii() and digits.isdigit()):
            raise ValueError(f"{value!r} is not a decimal natural number")
        return int(digits)
    raise TypeError(f"cannot make a natural number from {type(value).__name__}")


@total_ordering
class Natural:
    """An immutable non-negative integer of any size."""

    __slots__ = ("_value",)

    def __init__(self, value: NaturalLike = 0) -> None:
        self._value = _coerce(value)

    @staticmethod
    def _operand(other: object) -> int | None:
        if isinstance(other, Natural):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            if other < 0:
                raise ValueError(f"{other} is negative")
            return other
        return None

    def __add__(self, other: object) -> Natural:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return Natural(self._value + value)

    __radd__ = __add__

    def __sub__(self, other: object) -> Natural:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        if value > self._value:
            raise ValueError("subtraction would give a negative result")
        return Natural(self._value - value)

    def __rsub__(self, other: object) -> Natural:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return Natural(value) - self

    def __mul__(self, other: object) -> Natural:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return Natural(self._value * value)

    __rmul__ = __mul__

    def __floordiv__(self, other: object) -> Natural:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        if value == 0:
            raise ZeroDivisionError("division by zero")
        return Natural(self._value // value)

    def __rfloordiv__(self, other: object) -> Natural:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return Natural(value) // self

    def __mod__(self, other: object) -> Natural:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        if value == 0:
            raise ZeroDivisionError("modulo by zero")
        return Natural(self._value % value)

    def __rmod__(self, other: object) -> Natural:
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return Natural(value) % self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Natural):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Natural):
            return self._value < other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"Natural({self._value})"

    def sqrt(self) -> Natural:
        """Return the integer square root, rounded down."""
        return Natural(math.isqrt(self._value))


def isqrt(value: NaturalLike) -> Natural:
    """Return the integer square root of ``value``, rounded down."""
    return Natural(value).sqrt()