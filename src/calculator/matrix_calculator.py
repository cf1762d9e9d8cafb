"""Matrix Calculator — диспетчер операций над matrix engine.

Принимает операцию и операнды, вызывает соответствующую функцию
matrix engine и возвращает OperationResult (матрица или скаляр + признак успеха).

Политика ошибок:
- execute(): перехватывает только SingularMatrixError (дружелюбное сообщение),
  остальные ошибки пробрасываются вызывающему коду
- handle_request(): граница с внешним кодом (dict payload), любая ошибка
  валидации или MatrixAlgebraError превращается в неуспешный OperationResult,
  то есть фатальна для запроса, но не для процесса

Stateless: экземпляр хранит только immutable конфигурацию.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from jsonschema import ValidationError as ContractValidationError
from pydantic import ValidationError as ModelValidationError

from src.calculator.formatting import (
    DEFAULT_COLUMN_SEPARATOR,
    DEFAULT_PRECISION,
    format_matrix,
    format_scalar,
)
from src.core.contracts import validate_matrix_request
from src.core.domain import MatrixOperation, MatrixRequest
from src.core.math import (
    MATRIX_SIZE_MAX,
    MATRIX_SIZE_MIN,
    Matrix,
    MatrixAlgebraError,
    SingularMatrixError,
    add,
    adjugate,
    cofactor,
    cofactor_matrix,
    determinant,
    inverse,
    minor,
    minor_matrix,
    multiply,
    signed_minor_matrix,
    subtract,
    transpose,
    validate_matrix_size,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация matrix calculator.

    - min_size/max_size: допустимая сторона входных матриц; может только
      сузить [MATRIX_SIZE_MIN, MATRIX_SIZE_MAX], который проверяет SquareMatrix
    - precision/column_separator: формат вывода матриц
    - singular_message: сообщение для вырожденной матрицы при inverse
    """

    min_size: int = MATRIX_SIZE_MIN
    max_size: int = MATRIX_SIZE_MAX
    precision: int = DEFAULT_PRECISION
    column_separator: str = DEFAULT_COLUMN_SEPARATOR
    singular_message: str = "Matrix is singular and cannot have an inverse."

    def __post_init__(self):
        validate_matrix_size(self.min_size, MATRIX_SIZE_MIN, MATRIX_SIZE_MAX)
        validate_matrix_size(self.max_size, self.min_size, MATRIX_SIZE_MAX)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class OperationResult:
    """Результат операции matrix calculator."""

    success: bool
    operation: Optional[MatrixOperation]

    # Ровно одно из matrix/scalar заполнено при success=True
    matrix: Optional[Matrix] = None
    scalar: Optional[float] = None

    # Диагностика
    error_kind: Optional[str] = None
    message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в dict по контракту operation_result.

        scalar передаётся как есть: при переполнении (например, determinant
        от элементов ~1e308) это float("inf"), который json.dumps пишет как Infinity.
        """
        return {
            "success": self.success,
            "operation": self.operation.value if self.operation is not None else None,
            "matrix": [list(row) for row in self.matrix] if self.matrix is not None else None,
            "scalar": self.scalar,
            "error_kind": self.error_kind,
            "message": self.message,
        }

    def render(
        self,
        precision: int = DEFAULT_PRECISION,
        separator: str = DEFAULT_COLUMN_SEPARATOR,
    ) -> str:
        """Текст для пользователя: матрица, скаляр или сообщение об ошибке."""
        if not self.success:
            return self.message
        if self.matrix is not None:
            return format_matrix(self.matrix, precision=precision, separator=separator)
        return format_scalar(self.scalar)


# =============================================================================
# CALCULATOR
# =============================================================================


class MatrixCalculator:
    """Matrix calculator: операция → matrix engine → OperationResult.

    Порядок обработки handle_request:
    1. JSON contract (matrix_request)
    2. Pydantic модель MatrixRequest (квадратность, сторона, операнды)
    3. Проверка стороны по config
    4. Вызов matrix engine
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or CalculatorConfig()

    def execute(self, request: MatrixRequest) -> OperationResult:
        """Выполнение операции.

        Args:
            request: валидированный запрос

        Returns:
            OperationResult; для вырожденной матрицы при inverse:
            success=False с config.singular_message

        Raises:
            MatrixAlgebraError: любые ошибки engine, кроме SingularMatrixError
            ValueError: сторона матрицы вне [config.min_size, config.max_size]
        """
        operation = request.operation
        self._check_size(request)

        logger.debug(
            "Executing %s on %dx%d matrix", operation.value, request.matrix.size, request.matrix.size
        )

        try:
            value = self._dispatch(request)
        except SingularMatrixError:
            logger.warning("Singular matrix rejected by %s", operation.value)
            return OperationResult(
                success=False,
                operation=operation,
                error_kind=SingularMatrixError.__name__,
                message=self.config.singular_message,
            )

        if operation.returns_scalar:
            return OperationResult(
                success=True,
                operation=operation,
                scalar=value,
                message=f"{operation.value}: {format_scalar(value)}",
            )

        return OperationResult(
            success=True,
            operation=operation,
            matrix=value,
            message=f"{operation.value} result",
        )

    def handle_request(self, payload: Dict[str, Any]) -> OperationResult:
        """Обработка dict payload от внешнего кода.

        Ошибки не пробрасываются: каждая превращается в OperationResult
        с success=False, error_kind = имя класса исключения.
        """
        operation = self._peek_operation(payload)

        try:
            validate_matrix_request(payload)
            request = MatrixRequest.model_validate(payload)
            return self.execute(request)
        except ContractValidationError as e:
            return self._rejected(operation, "ContractValidationError", e.message)
        except ModelValidationError as e:
            return self._rejected(operation, "ModelValidationError", str(e))
        except (MatrixAlgebraError, ValueError) as e:
            return self._rejected(operation, type(e).__name__, str(e))

    def render(self, result: OperationResult) -> str:
        """Текст результата с форматом из config."""
        return result.render(
            precision=self.config.precision,
            separator=self.config.column_separator,
        )

    def _check_size(self, request: MatrixRequest) -> None:
        validate_matrix_size(request.matrix.size, self.config.min_size, self.config.max_size)
        if request.other is not None:
            validate_matrix_size(request.other.size, self.config.min_size, self.config.max_size)

    def _dispatch(self, request: MatrixRequest):
        operation = request.operation
        matrix = request.matrix.rows

        if operation.requires_other:
            other = request.other.rows
            if operation == MatrixOperation.ADD:
                return add(matrix, other)
            if operation == MatrixOperation.SUBTRACT:
                return subtract(matrix, other)
            return multiply(matrix, other)

        if operation.requires_position:
            row, col = request.position.row, request.position.col
            if operation == MatrixOperation.MINOR:
                return minor(matrix, row, col)
            if operation == MatrixOperation.MINOR_MATRIX:
                return minor_matrix(matrix, row, col)
            if operation == MatrixOperation.COFACTOR:
                return cofactor(matrix, row, col)
            return signed_minor_matrix(matrix, row, col)

        if operation == MatrixOperation.DISPLAY:
            return request.matrix.to_lists()
        if operation == MatrixOperation.COFACTOR_MATRIX:
            return cofactor_matrix(matrix)
        if operation == MatrixOperation.ADJUGATE:
            return adjugate(matrix)
        if operation == MatrixOperation.TRANSPOSE:
            return transpose(matrix)
        if operation == MatrixOperation.INVERSE:
            return inverse(matrix)
        return determinant(matrix)

    @staticmethod
    def _peek_operation(payload: Dict[str, Any]) -> Optional[MatrixOperation]:
        try:
            return MatrixOperation(payload.get("operation"))
        except (AttributeError, ValueError):
            return None

    @staticmethod
    def _rejected(
        operation: Optional[MatrixOperation], error_kind: str, message: str
    ) -> OperationResult:
        logger.warning("Request rejected: %s: %s", error_kind, message)
        return OperationResult(
            success=False,
            operation=operation,
            error_kind=error_kind,
            message=message,
        )
