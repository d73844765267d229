"""A dense two-dimensional matrix with row and column editing."""

from __future__ import annotations

import math
import re
from typing import Any, Iterable, Iterator, Optional

_NUMBER_PATTERN = re.compile(
    r"[+-]?\d+(?:\.\d*)?(?:[eE][+-]?\d+)?$|[+-]?\.\d+(?:[eE][+-]?\d+)?$"
)


def _parse_number(word: str) -> Optional[Any]:
    """Return the number spelled by ``word``, or None if it is not one."""
    if not _NUMBER_PATTERN.match(word):
        return None
    try:
        return int(word)
    except ValueError:
        return float(word)


class Matrix:
    """A row-major matrix whose new elements default to zero."""

    def __init__(self, rows: int = 0, cols: Optional[int] = None) -> None:
        if cols is None:
            cols = rows
        if rows < 0 or cols < 0:
            raise ValueError("Matrix dimensions must not be negative")
        self._rows = rows
        self._cols = cols
        self._data: list[Any] = [0] * (rows * cols)

    @classmethod
    def square(cls, dim: int) -> Matrix:
        """Return a ``dim`` by ``dim`` matrix of zeros."""
        return cls(dim, dim)

    @classmethod
    def from_list(cls, values: Iterable[Any]) -> Matrix:
        """Build a square matrix row by row; the length must be a perfect square."""
        items = list(values)
        dim = math.isqrt(len(items))
        if dim * dim != len(items):
            raise ValueError("List size is not a perfect square!")
        matrix = cls(dim, dim)
        matrix._data = items
        return matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def _offset(self, index: tuple[int, int]) -> int:
        row, col = index
        if 0 <= row < self._rows and 0 <= col < self._cols:
            return row * self._cols + col
        raise IndexError("Wrong dimensions!")

    def __getitem__(self, index: tuple[int, int]) -> Any:
        return self._data[self._offset(index)]

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        self._data[self._offset(index)] = value

    def _row(self, row: int) -> list[Any]:
        start = row * self._cols
        return self._data[start:start + self._cols]

    def _from_rows(self, rows: list[list[Any]], cols: int) -> None:
        self._rows = len(rows)
        self._cols = cols
        self._data = [value for row in rows for value in row]

    def _same_shape(self, other: Matrix) -> None:
        if self._rows != other._rows or self._cols != other._cols:
            raise ValueError("Wrong dimensions!")

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._cols != other._rows:
            raise ValueError("Wrong dimensions!")
        result = Matrix(self._rows, other._cols)
        columns = [other._data[j::other._cols] for j in range(other._cols)] if other._cols else []
        result._data = [
            sum((a * b for a, b in zip(self._row(i), column)), 0)
            for i in range(self._rows)
            for column in columns
        ]
        return result

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other)
        result = Matrix(self._rows, self._cols)
        result._data = [a + b for a, b in zip(self._data, other._data)]
        return result

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._same_shape(other)
        result = Matrix(self._rows, self._cols)
        result._data = [a - b for a, b in zip(self._data, other._data)]
        return result

    def _take(self, other: Matrix) -> Matrix:
        self._rows, self._cols, self._data = other._rows, other._cols, other._data
        return self

    def __imul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._take(self * other)

    def __iadd__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._take(self + other)

    def __isub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._take(self - other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and self._data == other._data
        )

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Matrix:
        """Return an independent matrix with the same elements."""
        clone = Matrix(self._rows, self._cols)
        clone._data = list(self._data)
        return clone

    def reset(self) -> None:
        """Empty the matrix, leaving zero rows and zero columns."""
        self._rows = 0
        self._cols = 0
        self._data = []

    def _rows_list(self) -> list[list[Any]]:
        return [self._row(i) for i in range(self._rows)]

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self._rows:
            raise IndexError("Wrong dimensions!")

    def _check_col(self, col: int) -> None:
        if not 0 <= col < self._cols:
            raise IndexError("Wrong dimensions!")

    def insert_row(self, row: int) -> None:
        """Insert a row of zeros before ``row``."""
        self._check_row(row)
        rows = self._rows_list()
        rows.insert(row, [0] * self._cols)
        self._from_rows(rows, self._cols)

    def append_row(self, row: int) -> None:
        """Insert a row of zeros after ``row``."""
        self._check_row(row)
        rows = self._rows_list()
        rows.insert(row + 1, [0] * self._cols)
        self._from_rows(rows, self._cols)

    def remove_row(self, row: int) -> None:
        """Delete ``row``."""
        self._check_row(row)
        rows = self._rows_list()
        del rows[row]
        self._from_rows(rows, self._cols)

    def insert_column(self, col: int) -> None:
        """Insert a column of zeros to the left of ``col``."""
        self._check_col(col)
        rows = [values[:col] + [0] + values[col:] for values in self._rows_list()]
        self._from_rows(rows, self._cols + 1)

    def append_column(self, col: int) -> None:
        """Insert a column of zeros to the right of ``col``."""
        self._check_col(col)
        rows = [values[:col + 1] + [0] + values[col + 1:] for values in self._rows_list()]
        self._from_rows(rows, self._cols + 1)

    def remove_column(self, col: int) -> None:
        """Delete column ``col``."""
        self._check_col(col)
        rows = [values[:col] + values[col + 1:] for values in self._rows_list()]
        self._from_rows(rows, self._cols - 1)

    def __iter__(self) -> Iterator[Any]:
        """Yield the elements in row-major order."""
        return iter(self._data)

    def __str__(self) -> str:
        lines = []
        for i, values in enumerate(self._rows_list()):
            prefix = "[ " if i == 0 else "  "
            suffix = " ]" if i == self._rows - 1 else ""
            lines.append(prefix + " ".join(str(v) for v in values) + suffix)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Matrix({self._rows}, {self._cols}, {self._data!r})"

    @classmethod
    def parse(cls, text: str) -> Matrix:
        """Read rows of whitespace-separated numbers, ignoring square brackets.

        Each line is one row; reading a row stops at the first word that is
        not a number. The first row fixes the number of columns.
        """
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        parsed: list[list[Any]] = []
        for line in lines:
            cleaned = line.replace("[", "").replace("]", "")
            values = []
            for word in cleaned.split():
                value = _parse_number(word)
                if value is None:
                    break
                values.append(value)
            parsed.append(values)
        cols = len(parsed[0]) if parsed else 0
        if any(len(values) < cols for values in parsed):
            raise ValueError("Rows have fewer elements than the first row")
        matrix = cls(len(parsed), cols)
        matrix._from_rows([values[:cols] for values in parsed], cols)
        return matrix


def identity(dim: int) -> Matrix:
    """Return the ``dim`` by ``dim`` identity matrix."""
    matrix = Matrix(dim, dim)
    for i in range(dim):
        matrix[i, i] = 1
    return matrix