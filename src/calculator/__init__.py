"""Calculator — диспетчер операций и форматирование результатов.

- MatrixCalculator: операция → matrix engine → OperationResult
- format_matrix / format_scalar: текстовый вывод (2 знака, значения через tab)
"""

from .formatting import format_matrix, format_scalar
from .matrix_calculator import CalculatorConfig, MatrixCalculator, OperationResult

__all__ = [
    "MatrixCalculator",
    "CalculatorConfig",
    "OperationResult",
    "format_matrix",
    "format_scalar",
]
