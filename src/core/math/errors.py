"""
Matrix Algebra Errors

Иерархия исключений для операций над матрицами.

Все ошибки детерминированы: это нарушения математических предусловий,
а не transient faults, поэтому retry/recovery внутри engine не выполняется.
Ошибка всегда пробрасывается вызывающему коду синхронно.

ИЕРАРХИЯ:
    MatrixAlgebraError
    ├── MatrixShapeError
    │   ├── NonSquareMatrixError
    │   └── DimensionMismatchError
    ├── InvalidPositionError (также IndexError)
    └── SingularMatrixError (также ArithmeticError)
"""


class MatrixAlgebraError(Exception):
    """Базовое исключение для всех ошибок matrix engine."""

    pass


class MatrixShapeError(MatrixAlgebraError):
    """
    Недопустимая форма матрицы для операции.

    Примеры: пустая матрица, строки разной длины, minor от матрицы 1×1.
    """

    pass


class NonSquareMatrixError(MatrixShapeError):
    """
    Матрица не квадратная (rows != cols) или строки разной длины.

    Поднимается при конструировании SquareMatrix и во всех операциях,
    определённых только для квадратных матриц.
    """

    pass


class DimensionMismatchError(MatrixShapeError):
    """
    Несовместимые размерности операндов.

    - add/subtract: различается число строк или столбцов
    - multiply: cols(A) != rows(B)
    """

    pass


class InvalidPositionError(MatrixAlgebraError, IndexError):
    """Позиция (row, col) вне границ матрицы."""

    pass


class SingularMatrixError(MatrixAlgebraError, ArithmeticError):
    """
    Матрица вырожденная (determinant == 0), обратной не существует.

    Проверка точная (без epsilon): близкие к вырожденным матрицы
    не детектируются и инвертируются с большой погрешностью.
    """

    pass
