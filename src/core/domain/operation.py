"""Operation — Перечень операций matrix calculator

Операции сгруппированы по требуемым входам:
- Binary (нужна вторая матрица): ADD, SUBTRACT, MULTIPLY
- Positional (нужна позиция row/col): MINOR, MINOR_MATRIX, COFACTOR, SIGNED_MINOR_MATRIX
- Unary: DISPLAY, COFACTOR_MATRIX, ADJUGATE, TRANSPOSE, INVERSE, DETERMINANT
"""

from enum import Enum


class MatrixOperation(str, Enum):
    """Операция над матрицей."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DISPLAY = "display"
    MINOR = "minor"
    MINOR_MATRIX = "minor_matrix"
    COFACTOR = "cofactor"
    SIGNED_MINOR_MATRIX = "signed_minor_matrix"
    COFACTOR_MATRIX = "cofactor_matrix"
    ADJUGATE = "adjugate"
    TRANSPOSE = "transpose"
    INVERSE = "inverse"
    DETERMINANT = "determinant"

    @property
    def requires_other(self) -> bool:
        """Нужна ли вторая матрица."""
        return self in _BINARY_OPERATIONS

    @property
    def requires_position(self) -> bool:
        """Нужна ли позиция (row, col)."""
        return self in _POSITIONAL_OPERATIONS

    @property
    def returns_scalar(self) -> bool:
        """Результат является скаляром, а не матрицей."""
        return self in _SCALAR_OPERATIONS


_BINARY_OPERATIONS = frozenset(
    {MatrixOperation.ADD, MatrixOperation.SUBTRACT, MatrixOperation.MULTIPLY}
)

_POSITIONAL_OPERATIONS = frozenset(
    {
        MatrixOperation.MINOR,
        MatrixOperation.MINOR_MATRIX,
        MatrixOperation.COFACTOR,
        MatrixOperation.SIGNED_MINOR_MATRIX,
    }
)

_SCALAR_OPERATIONS = frozenset(
    {MatrixOperation.MINOR, MatrixOperation.COFACTOR, MatrixOperation.DETERMINANT}
)
