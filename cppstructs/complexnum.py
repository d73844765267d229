"""Complex numbers with ordering by magnitude and a bracketed text form."""

from __future__ import annotations

import math
import re
from typing import Union

_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

Number = Union[int, float]


def _leading_number(text: str) -> tuple[float, str]:
    """Read a number at the start of ``text``; return it and the remainder.

    When no number is found the value is 0.0 and nothing further is read.
    """
    match = _NUMBER.match(text)
    if match is None:
        return 0.0, ""
    return float(match.group(1)), text[match.end():]


class Complex:
    """An immutable complex number with a real and an imaginary part."""

    __slots__ = ("_re", "_im")

    def __init__(self, real: Number = 0.0, imag: Number = 0.0) -> None:
        self._re = float(real)
        self._im = float(imag)

    @property
    def real(self) -> float:
        return self._re

    @property
    def imag(self) -> float:
        return self._im

    @staticmethod
    def _coerce(value: object) -> Complex | None:
        if isinstance(value, Complex):
            return value
        if isinstance(value, (int, float)):
            return Complex(value)
        return None

    def __add__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self._re + rhs._re, self._im + rhs._im)

    def __radd__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self._re - rhs._re, self._im - rhs._im)

    def __rsub__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(
            self._re * rhs._re - self._im * rhs._im,
            self._re * rhs._im + self._im * rhs._re,
        )

    def __rmul__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: object) -> Complex:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        denominator = rhs._re * rhs._re + rhs._im * rhs._im
        if denominator == 0:
            raise ZeroDivisionError("Invalid arguments. Cannot divide with 0!")
        return Complex(
            (self._re * rhs._re + self._im * rhs._im) / denominator,
            (self._im * rhs._re - self._re * rhs._im) / denominator,
        )

    def __rtruediv__(self, other: object) -> Complex:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __neg__(self) -> Complex:
        return Complex(-self._re, -self._im)

    def __pos__(self) -> Complex:
        return self

    def __abs__(self) -> float:
        return math.sqrt(self._re * self._re + self._im * self._im)

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._re == rhs._re and self._im == rhs._im

    def __hash__(self) -> int:
        return hash(complex(self._re, self._im))

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return abs(self) < abs(rhs)

    def __complex__(self) -> complex:
        return complex(self._re, self._im)

    def __str__(self) -> str:
        return f"({self._re:g},{self._im:g})"

    def __repr__(self) -> str:
        return f"Complex({self._re!r}, {self._im!r})"

    @classmethod
    def parse(cls, text: str) -> Complex:
        """Read ``(real,imag)``, ``(real)`` or ``real`` from the first line of ``text``."""
        line = text.split("\n", 1)[0].replace("(", "").replace(")", "")
        real, rest = _leading_number(line)
        imag = 0.0
        if rest.startswith(","):
            imag, _ = _leading_number(rest[1:])
        return cls(real, imag)


def imaginary(value: Number) -> Complex:
    """Return the purely imaginary number ``value``·i."""
    return Complex(0.0, float(value))