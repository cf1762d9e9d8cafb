"""
Contract Validation Module

Модуль для валидации JSON контрактов matrix calculator.
"""

from .validators import (
    ContractValidator,
    MatrixRequestValidator,
    OperationResultValidator,
    SchemaLoader,
    validate_matrix_request,
    validate_operation_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixRequestValidator",
    "OperationResultValidator",
    # Functions
    "validate_matrix_request",
    "validate_operation_result",
]
