"""
Numerical Safeguards — Matrix Validation & Float Comparisons

Модуль обеспечивает проверку входных данных для matrix engine:
- Валидация формы матрицы (непустая, прямоугольная, квадратная)
- Валидация позиции (row, col) внутри матрицы
- NaN/Inf детекция для элементов матрицы
- Epsilon-сравнения float и матриц (для тестов и вызывающего кода)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Валидация никогда не мутирует входную матрицу
2. NaN/Inf в матрице никогда не попадают в вычисления (ValueError)
3. Сам engine НЕ использует толерантности: determinant == 0 проверяется точно
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, Sequence

from src.core.math.errors import (
    InvalidPositionError,
    MatrixShapeError,
    NonSquareMatrixError,
)

# =============================================================================
# ГРАНИЦЫ РАЗМЕРА МАТРИЦЫ
# =============================================================================

# Минимальная сторона квадратной матрицы
MATRIX_SIZE_MIN: Final[int] = 1

# Максимальная сторона квадратной матрицы
# Cofactor expansion экспоненциален по n, выше 10 не поддерживается
MATRIX_SIZE_MAX: Final[int] = 10


# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для is_close / matrices_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения элементов матриц
# Например: multiply(M, inverse(M)) ≈ I
EPS_MATRIX_COMPARE_ABS: Final[float] = 1e-9


# =============================================================================
# NaN/Inf ДЕТЕКЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ВАЛИДАЦИЯ ФОРМЫ
# =============================================================================


def matrix_shape(matrix: Sequence[Sequence[float]]) -> tuple[int, int]:
    """
    Определение формы прямоугольной матрицы с валидацией.

    Args:
        matrix: Матрица как последовательность строк

    Returns:
        (rows, cols)

    Raises:
        MatrixShapeError: если матрица пустая или строки разной длины
        ValueError: если элемент NaN/Inf

    Examples:
        >>> matrix_shape([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        (2, 3)
        >>> matrix_shape([[1.0], [2.0, 3.0]])  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        MatrixShapeError: ...
    """
    rows = len(matrix)
    if rows == 0:
        raise MatrixShapeError("Matrix must have at least one row")

    cols = len(matrix[0])
    if cols == 0:
        raise MatrixShapeError("Matrix must have at least one column")

    for i, row in enumerate(matrix):
        if len(row) != cols:
            raise MatrixShapeError(
                f"Matrix rows must have equal length: row 0 has {cols}, "
                f"row {i} has {len(row)}"
            )
        for j, value in enumerate(row):
            if not is_valid_float(value):
                raise ValueError(f"Matrix contains NaN/Inf at [{i}][{j}]: {value}")

    return rows, cols


def validate_square_matrix(matrix: Sequence[Sequence[float]]) -> int:
    """
    Проверка, что матрица квадратная.

    Args:
        matrix: Матрица как последовательность строк

    Returns:
        Сторона матрицы n

    Raises:
        NonSquareMatrixError: если матрица пустая, строки разной длины
            или rows != cols
        ValueError: если элемент NaN/Inf
    """
    try:
        rows, cols = matrix_shape(matrix)
    except MatrixShapeError as e:
        raise NonSquareMatrixError(f"Matrix must be square: {e}") from e

    if rows != cols:
        raise NonSquareMatrixError(
            f"Matrix must be square, got {rows}x{cols}"
        )

    return rows


def validate_position(size: int, row: int, col: int) -> None:
    """
    Проверка позиции (row, col) внутри матрицы size×size.

    Raises:
        InvalidPositionError: если 0 <= row, col < size нарушено
    """
    if not (0 <= row < size and 0 <= col < size):
        raise InvalidPositionError(
            f"Position ({row}, {col}) out of range for {size}x{size} matrix"
        )


def validate_matrix_size(
    size: int,
    min_size: int = MATRIX_SIZE_MIN,
    max_size: int = MATRIX_SIZE_MAX,
) -> int:
    """
    Проверка стороны матрицы в допустимом диапазоне [min_size, max_size].

    Args:
        size: Сторона матрицы
        min_size: Минимум (default: MATRIX_SIZE_MIN)
        max_size: Максимум (default: MATRIX_SIZE_MAX)

    Returns:
        size если в диапазоне

    Raises:
        ValueError: если size вне [min_size, max_size]
    """
    if min_size > max_size:
        raise ValueError(f"min_size ({min_size}) must be <= max_size ({max_size})")

    if size < min_size or size > max_size:
        raise ValueError(
            f"Matrix size must be in [{min_size}, {max_size}], got {size}"
        )

    return size


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_MATRIX_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-12)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def matrices_close(
    a: Sequence[Sequence[float]],
    b: Sequence[Sequence[float]],
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_MATRIX_COMPARE_ABS,
) -> bool:
    """
    Поэлементное сравнение двух матриц с толерантностью.

    Матрицы разной формы никогда не равны (без exception).

    Examples:
        >>> matrices_close([[1.0, 0.0]], [[1.0, 1e-12]])
        True
        >>> matrices_close([[1.0]], [[1.0, 0.0]])
        False
    """
    if len(a) != len(b):
        return False

    for row_a, row_b in zip(a, b):
        if len(row_a) != len(row_b):
            return False
        for x, y in zip(row_a, row_b):
            if not is_close(x, y, rel_tol=rel_tol, abs_tol=abs_tol):
                return False

    return True
