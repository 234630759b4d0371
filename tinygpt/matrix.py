"""Dense row-major matrices of floats."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


class MatrixShapeError(ValueError):
    """Raised when matrix dimensions do not fit an operation."""


@dataclass
class Matrix:
    """A ``rows`` x ``columns`` matrix stored row by row in ``data``.

    When ``data`` is omitted or empty the matrix is filled with zeros.
    """

    rows: int
    columns: int
    data: list[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows < 0 or self.columns < 0:
            raise MatrixShapeError(
                f"negative matrix dimensions: {self.rows}x{self.columns}"
            )
        size = self.rows * self.columns
        if not self.data:
            self.data = [0.0] * size
            return
        self.data = [float(value) for value in self.data]
        if len(self.data) != size:
            raise MatrixShapeError(
                f"{len(self.data)} values given for a {self.rows}x{self.columns} matrix"
            )

    def _offset(self, key: tuple[int, int]) -> int:
        row, column = key
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise IndexError(
                f"index ({row}, {column}) outside a {self.rows}x{self.columns} matrix"
            )
        return row * self.columns + column

    def _row_values(self) -> Iterator[list[float]]:
        width = self.columns
        for start in range(0, self.rows * width, width or 1):
            yield self.data[start:start + width]

    def __getitem__(self, key: tuple[int, int]) -> float:
        return self.data[self._offset(key)]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        self.data[self._offset(key)] = float(value)

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.columns != other.rows:
            raise MatrixShapeError(f"size mismatch: {self.columns}x{other.rows}")
        other_columns = [
            other.data[column::other.columns] for column in range(other.columns)
        ]
        if self.rows and not self.columns:
            product = [0.0] * (self.rows * other.columns)
        else:
            product = [
                sum((a * b for a, b in zip(row, column)), 0.0)
                for row in self._row_values()
                for column in other_columns
            ]
        return Matrix(self.rows, other.columns, product)

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.rows != other.rows or self.columns != other.columns:
            raise MatrixShapeError(
                f"mismatched matrix dimensions: {self.rows}vs{other.rows}, "
                f"{self.columns}vs{other.columns}"
            )
        return Matrix(
            self.rows, self.columns, [a + b for a, b in zip(self.data, other.data)]
        )

    def scaled(self, scalar: float) -> Matrix:
        """Return a new matrix with every entry multiplied by ``scalar``."""
        return Matrix(self.rows, self.columns, [scalar * v for v in self.data])

    def transpose(self) -> Matrix:
        """Return a new matrix with rows and columns swapped."""
        data = [value for column in zip(*self._row_values()) for value in column]
        return Matrix(self.columns, self.rows, data)

    def argmax_row(self, row: int) -> int:
        """Column index of the largest value in ``row``; the first one wins ties."""
        if not 0 <= row < self.rows:
            raise IndexError(f"row {row} outside a matrix of {self.rows} rows")
        if not self.columns:
            raise ValueError("argmax of an empty row")
        start = row * self.columns
        values = self.data[start:start + self.columns]
        return max(range(len(values)), key=values.__getitem__)

    def format(self) -> str:
        """Render the matrix as text, one line per row, three decimals per entry."""
        return "".join(
            "".join(f"{value:8.3f} " for value in row) + "\n"
            for row in self._row_values()
        )