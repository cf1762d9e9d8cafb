"""
Matrix — Модели квадратной матрицы и позиции

Immutable Pydantic модели входных данных matrix calculator:
- SquareMatrix: квадратная матрица со стороной 1–10
- MatrixPosition: позиция (row, col), 0-based
- MatrixRequest: операция + операнды

Ошибки формы матрицы (NonSquareMatrixError) пробрасываются из конструктора
как есть, без оборачивания в pydantic ValidationError. Ошибки диапазонов
(сторона вне [1, 10], NaN/Inf, отсутствующий операнд) дают ValidationError.
"""

from typing import Optional

from pydantic import BaseModel, Field, FiniteFloat, field_validator, model_validator

from src.core.domain.operation import MatrixOperation
from src.core.math.numerical_safeguards import (
    MATRIX_SIZE_MAX,
    MATRIX_SIZE_MIN,
    validate_matrix_size,
    validate_square_matrix,
)


# =============================================================================
# SQUARE MATRIX
# =============================================================================


class SquareMatrix(BaseModel):
    """
    Квадратная матрица n×n, MATRIX_SIZE_MIN <= n <= MATRIX_SIZE_MAX.

    Immutable модель (frozen=True): строки хранятся как tuple.
    Для передачи в engine используйте rows напрямую или to_lists().
    """

    rows: tuple[tuple[FiniteFloat, ...], ...] = Field(
        ..., description="Строки матрицы (row-major)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_rows(cls, data):
        """Bare 2-D последовательность (формат JSON контракта) → {"rows": ...}."""
        if isinstance(data, (list, tuple)):
            return {"rows": data}
        return data

    @field_validator("rows")
    @classmethod
    def validate_square(
        cls, v: tuple[tuple[float, ...], ...]
    ) -> tuple[tuple[float, ...], ...]:
        """
        Проверка квадратности и допустимой стороны.

        NonSquareMatrixError не является ValueError и поэтому
        не перехватывается pydantic.
        """
        size = validate_square_matrix(v)
        validate_matrix_size(size, MATRIX_SIZE_MIN, MATRIX_SIZE_MAX)
        return v

    @classmethod
    def from_rows(cls, rows) -> "SquareMatrix":
        """Конструктор из произвольной последовательности строк."""
        return cls(rows=rows)

    @property
    def size(self) -> int:
        """Сторона матрицы n."""
        return len(self.rows)

    def to_lists(self) -> list[list[float]]:
        """Новая изменяемая копия матрицы."""
        return [list(row) for row in self.rows]


# =============================================================================
# POSITION
# =============================================================================


class MatrixPosition(BaseModel):
    """Позиция (row, col) в матрице, 0-based."""

    row: int = Field(..., ge=0, le=MATRIX_SIZE_MAX - 1, description="Строка")
    col: int = Field(..., ge=0, le=MATRIX_SIZE_MAX - 1, description="Столбец")

    model_config = {"frozen": True}


# =============================================================================
# REQUEST
# =============================================================================


class MatrixRequest(BaseModel):
    """
    Запрос к matrix calculator.

    - other обязателен для add/subtract/multiply
    - position обязательна для minor/minor_matrix/cofactor/signed_minor_matrix
    """

    operation: MatrixOperation = Field(..., description="Операция")
    matrix: SquareMatrix = Field(..., description="Основная матрица")
    other: Optional[SquareMatrix] = Field(
        None, validate_default=True, description="Вторая матрица (binary операции)"
    )
    position: Optional[MatrixPosition] = Field(
        None, validate_default=True, description="Позиция (positional операции)"
    )

    model_config = {"frozen": True}

    @field_validator("other")
    @classmethod
    def validate_other_present(cls, v: Optional[SquareMatrix], info) -> Optional[SquareMatrix]:
        """Вторая матрица обязательна для binary операций."""
        operation = info.data.get("operation")
        if operation is None:
            return v

        if operation.requires_other and v is None:
            raise ValueError(f"Operation '{operation.value}' requires a second matrix")

        return v

    @field_validator("position")
    @classmethod
    def validate_position_present(
        cls, v: Optional[MatrixPosition], info
    ) -> Optional[MatrixPosition]:
        """Позиция обязательна для positional операций."""
        operation = info.data.get("operation")
        if operation is None:
            return v

        if operation.requires_position and v is None:
            raise ValueError(f"Operation '{operation.value}' requires a position")

        return v
