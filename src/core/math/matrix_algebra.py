"""
Matrix Algebra — Square Matrix Engine

Чистые функции над небольшими квадратными матрицами (сторона 1–10):
- Minor matrix / signed minor matrix по позиции
- Determinant через рекурсивное разложение Лапласа по первой строке
- Minor, cofactor, cofactor matrix, adjugate
- Inverse через adjugate / determinant
- Transpose, add, subtract, multiply

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входные матрицы никогда не мутируются, результат всегда новый list[list[float]]
2. Singular: determinant == 0 проверяется ТОЧНО (без epsilon)
3. Без memoization и pivoting: сложность determinant ~ O(n!)
4. Нет состояния между вызовами, функции безопасны для вызова из разных потоков

ФОРМУЛЫ:
    det(M) = M[0][0]                                   (n = 1)
    det(M) = a·d − b·c                                 (n = 2)
    det(M) = Σ_j M[0][j] · (−1)^j · det(minor(M, 0, j))  (n ≥ 3)

    cofactor(M, i, j) = (−1)^(i+j) · det(minor(M, i, j))
    adjugate(M)[i][j] = cofactor(M, j, i)
    inverse(M)        = adjugate(M) / det(M)
"""

from typing import Sequence

from src.core.math.errors import (
    DimensionMismatchError,
    MatrixShapeError,
    SingularMatrixError,
)
from src.core.math.numerical_safeguards import (
    matrix_shape,
    validate_position,
    validate_square_matrix,
)

Matrix = list[list[float]]
MatrixLike = Sequence[Sequence[float]]


# =============================================================================
# ВНУТРЕННИЕ ПРИМИТИВЫ (без валидации)
# =============================================================================


def _sign(row: int, col: int) -> float:
    """(−1)^(row+col)"""
    return 1.0 if (row + col) % 2 == 0 else -1.0


def _remove_row_col(matrix: MatrixLike, row: int, col: int, signed: bool = False) -> Matrix:
    # Сохраняет относительный порядок оставшихся строк/столбцов.
    # signed=True: элемент умножается на (−1)^(i+j) по ИСХОДНЫМ координатам.
    result: Matrix = []
    for i, source_row in enumerate(matrix):
        if i == row:
            continue
        new_row = []
        for j, value in enumerate(source_row):
            if j == col:
                continue
            new_row.append(_sign(i, j) * value if signed else float(value))
        result.append(new_row)
    return result


def _determinant(matrix: MatrixLike) -> float:
    n = len(matrix)
    if n == 0:
        # Пустой minor матрицы 1×1
        return 1.0
    if n == 1:
        return float(matrix[0][0])
    if n == 2:
        return matrix[0][0] * matrix[1][1] - matrix[0][1] * matrix[1][0]

    det = 0.0
    for j in range(n):
        det += matrix[0][j] * _cofactor(matrix, 0, j)
    return det


def _cofactor(matrix: MatrixLike, row: int, col: int) -> float:
    return _sign(row, col) * _determinant(_remove_row_col(matrix, row, col))


def _cofactor_matrix(matrix: MatrixLike) -> Matrix:
    n = len(matrix)
    return [[_cofactor(matrix, i, j) for j in range(n)] for i in range(n)]


def _transpose(matrix: MatrixLike) -> Matrix:
    n = len(matrix)
    return [[float(matrix[j][i]) for j in range(n)] for i in range(n)]


def _require_minor_defined(matrix: MatrixLike, row: int, col: int) -> None:
    n = validate_square_matrix(matrix)
    if n < 2:
        raise MatrixShapeError(
            f"Minor is not defined for a {n}x{n} matrix (size must be >= 2)"
        )
    validate_position(n, row, col)


# =============================================================================
# MINOR MATRICES
# =============================================================================


def minor_matrix(matrix: MatrixLike, row: int, col: int) -> Matrix:
    """
    Minor matrix: удаление строки row и столбца col.

    Args:
        matrix: Квадратная матрица n×n, n >= 2
        row: Удаляемая строка (0-based)
        col: Удаляемый столбец (0-based)

    Returns:
        Новая матрица (n−1)×(n−1) с сохранённым порядком строк/столбцов

    Raises:
        NonSquareMatrixError: если матрица не квадратная
        MatrixShapeError: если n == 1
        InvalidPositionError: если позиция вне матрицы

    Examples:
        >>> minor_matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]], 1, 1)
        [[1.0, 3.0], [7.0, 9.0]]
    """
    _require_minor_defined(matrix, row, col)
    return _remove_row_col(matrix, row, col)


def signed_minor_matrix(matrix: MatrixLike, row: int, col: int) -> Matrix:
    """
    Signed minor matrix: minor matrix с элементами, умноженными на (−1)^(i+j).

    Знак берётся по ИСХОДНЫМ координатам (i, j) элемента в matrix,
    а не по его координатам в результирующей матрице.

    ВАЖНО: это НЕ cofactor matrix и НЕ матрица cofactors от minor.

    Examples:
        >>> signed_minor_matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]], 0, 0)
        [[5.0, -6.0], [-8.0, 9.0]]
    """
    _require_minor_defined(matrix, row, col)
    return _remove_row_col(matrix, row, col, signed=True)


# =============================================================================
# DETERMINANT / MINOR / COFACTOR
# =============================================================================


def determinant(matrix: MatrixLike) -> float:
    """
    Determinant через рекурсивное разложение Лапласа по первой строке.

    Стандартная IEEE double арифметика, без округлений: для вырожденной
    матрицы результат может быть как точным 0.0, так и близким к нулю.

    Raises:
        NonSquareMatrixError: если матрица не квадратная

    Examples:
        >>> determinant([[1, 2], [3, 4]])
        -2.0
        >>> determinant([[2, 0, 0], [0, 2, 0], [0, 0, 2]])
        8.0
    """
    validate_square_matrix(matrix)
    return float(_determinant(matrix))


def minor(matrix: MatrixLike, row: int, col: int) -> float:
    """
    Minor: determinant минорной матрицы на позиции (row, col).

    Examples:
        >>> minor([[1, 2], [3, 4]], 0, 0)
        4.0
    """
    return float(_determinant(minor_matrix(matrix, row, col)))


def cofactor(matrix: MatrixLike, row: int, col: int) -> float:
    """
    Cofactor: (−1)^(row+col) · minor(matrix, row, col).

    Требует сторону матрицы >= 2.

    Examples:
        >>> cofactor([[1, 2], [3, 4]], 0, 1)
        -3.0
    """
    return _sign(row, col) * minor(matrix, row, col)


def cofactor_matrix(matrix: MatrixLike) -> Matrix:
    """
    Матрица cofactors: результат[i][j] = cofactor(matrix, i, j).

    Для матрицы 1×1 возвращает [[1.0]] (determinant пустого minor = 1),
    что делает adjugate и inverse определёнными для n = 1.
    """
    validate_square_matrix(matrix)
    return _cofactor_matrix(matrix)


def adjugate(matrix: MatrixLike) -> Matrix:
    """
    Adjugate: транспонированная матрица cofactors.

    adjugate(M)[i][j] = cofactor(M, j, i)
    """
    validate_square_matrix(matrix)
    return _transpose(_cofactor_matrix(matrix))


# =============================================================================
# INVERSE / TRANSPOSE
# =============================================================================


def inverse(matrix: MatrixLike) -> Matrix:
    """
    Обратная матрица через adjugate.

    Сначала каждый cofactor делится на determinant, затем результат
    транспонируется, итог равен adjugate(M) / det(M).

    Raises:
        NonSquareMatrixError: если матрица не квадратная
        SingularMatrixError: если determinant == 0 (точное сравнение)

    Examples:
        >>> inverse([[4, 7], [2, 6]])
        [[0.6, -0.7], [-0.2, 0.4]]
    """
    validate_square_matrix(matrix)
    det = _determinant(matrix)

    if det == 0:
        raise SingularMatrixError("Matrix is singular and cannot have an inverse.")

    scaled = [[value / det for value in row] for row in _cofactor_matrix(matrix)]
    return _transpose(scaled)


def transpose(matrix: MatrixLike) -> Matrix:
    """
    Транспонирование квадратной матрицы: результат[i][j] = matrix[j][i].

    Raises:
        NonSquareMatrixError: если матрица не квадратная
    """
    validate_square_matrix(matrix)
    return _transpose(matrix)


def identity_matrix(size: int) -> Matrix:
    """Единичная матрица size×size."""
    if size < 1:
        raise MatrixShapeError(f"Identity size must be >= 1, got {size}")
    return [[1.0 if i == j else 0.0 for j in range(size)] for i in range(size)]


# =============================================================================
# ADD / SUBTRACT / MULTIPLY
# =============================================================================


def _require_same_shape(a: MatrixLike, b: MatrixLike, operation: str) -> tuple[int, int]:
    shape_a = matrix_shape(a)
    shape_b = matrix_shape(b)
    if shape_a != shape_b:
        raise DimensionMismatchError(
            f"Matrices must have the same dimensions for {operation}: "
            f"{shape_a[0]}x{shape_a[1]} vs {shape_b[0]}x{shape_b[1]}"
        )
    return shape_a


def add(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Поэлементное сложение.

    Raises:
        DimensionMismatchError: если различается число строк или столбцов
    """
    rows, cols = _require_same_shape(a, b, "addition")
    return [[float(a[i][j] + b[i][j]) for j in range(cols)] for i in range(rows)]


def subtract(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Поэлементное вычитание a − b.

    Raises:
        DimensionMismatchError: если различается число строк или столбцов
    """
    rows, cols = _require_same_shape(a, b, "subtraction")
    return [[float(a[i][j] - b[i][j]) for j in range(cols)] for i in range(rows)]


def multiply(a: MatrixLike, b: MatrixLike) -> Matrix:
    """
    Матричное произведение a · b.

    Результат имеет форму rows(a) × cols(b).

    Raises:
        DimensionMismatchError: если cols(a) != rows(b)

    Examples:
        >>> multiply([[1, 0], [0, 1]], [[5, 6], [7, 8]])
        [[5.0, 6.0], [7.0, 8.0]]
    """
    rows_a, cols_a = matrix_shape(a)
    rows_b, cols_b = matrix_shape(b)

    if cols_a != rows_b:
        raise DimensionMismatchError(
            "Number of columns in the first matrix must be equal to the number "
            f"of rows in the second matrix: {cols_a} != {rows_b}"
        )

    result: Matrix = [[0.0] * cols_b for _ in range(rows_a)]
    for i in range(rows_a):
        for j in range(cols_b):
            total = 0.0
            for k in range(cols_a):
                total += a[i][k] * b[k][j]
            result[i][j] = total
    return result
