"""Formatting — текстовое представление результатов matrix calculator.

Матрица: fixed-point с precision знаками, значения через separator,
строки через перевод строки. Скаляр: стандартное представление float.
"""

from typing import Final, Sequence

DEFAULT_PRECISION: Final[int] = 2
DEFAULT_COLUMN_SEPARATOR: Final[str] = "\t"


def format_matrix(
    matrix: Sequence[Sequence[float]],
    precision: int = DEFAULT_PRECISION,
    separator: str = DEFAULT_COLUMN_SEPARATOR,
) -> str:
    """
    Форматирование матрицы построчно.

    Examples:
        >>> format_matrix([[1, 2.5], [-3, 0.125]])
        '1.00\\t2.50\\n-3.00\\t0.12'
    """
    if precision < 0:
        raise ValueError(f"precision must be non-negative, got {precision}")

    return "\n".join(
        separator.join(f"{value:.{precision}f}" for value in row) for row in matrix
    )


def format_scalar(value: float) -> str:
    """
    Форматирование скаляра (determinant, minor, cofactor).

    Examples:
        >>> format_scalar(-2)
        '-2.0'
    """
    return repr(float(value))
