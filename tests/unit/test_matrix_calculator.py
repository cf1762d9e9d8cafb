"""Тесты для Matrix Calculator — диспетчер операций

Покрытие:
- Dispatch всех операций в matrix engine
- Singular: execute() возвращает неуспешный результат с сообщением
- Прочие ошибки: execute() пробрасывает, handle_request() превращает в результат
- Конфигурация (границы стороны только сужают [1, 10], формат вывода)
- Переполнение determinant → inf в результате
- Форматирование матриц и скаляров
- Логирование предупреждений
"""

import logging
import math

import pytest

from src.calculator import (
    CalculatorConfig,
    MatrixCalculator,
    OperationResult,
    format_matrix,
    format_scalar,
)
from src.core.domain import MatrixOperation, MatrixPosition, MatrixRequest, SquareMatrix
from src.core.math.errors import (
    DimensionMismatchError,
    InvalidPositionError,
    MatrixShapeError,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def calculator():
    """Calculator с конфигурацией по умолчанию."""
    return MatrixCalculator()


@pytest.fixture
def m3():
    """Матрица 3×3 1..9."""
    return SquareMatrix(rows=[[1, 2, 3], [4, 5, 6], [7, 8, 9]])


def _request(operation, rows, other=None, position=None):
    return MatrixRequest(
        operation=operation,
        matrix=SquareMatrix(rows=rows),
        other=SquareMatrix(rows=other) if other is not None else None,
        position=MatrixPosition(row=position[0], col=position[1]) if position else None,
    )


# =============================================================================
# DISPATCH
# =============================================================================


class TestExecuteDispatch:
    """Тесты dispatch операций."""

    def test_add(self, calculator):
        """add → матрица."""
        result = calculator.execute(_request("add", [[1, 2], [3, 4]], other=[[1, 1], [1, 1]]))
        assert result.success
        assert result.matrix == [[2, 3], [4, 5]]
        assert result.scalar is None
        assert result.error_kind is None

    def test_subtract(self, calculator):
        """subtract → матрица."""
        result = calculator.execute(_request("subtract", [[1, 2], [3, 4]], other=[[1, 1], [1, 1]]))
        assert result.matrix == [[0, 1], [2, 3]]

    def test_multiply(self, calculator):
        """multiply с единичной матрицей."""
        result = calculator.execute(
            _request("multiply", [[1, 0], [0, 1]], other=[[5, 6], [7, 8]])
        )
        assert result.matrix == [[5, 6], [7, 8]]

    def test_display(self, calculator):
        """display возвращает исходную матрицу."""
        result = calculator.execute(_request("display", [[1.5, 2], [3, 4]]))
        assert result.matrix == [[1.5, 2.0], [3.0, 4.0]]

    def test_minor(self, calculator, m3):
        """minor → скаляр."""
        request = MatrixRequest(
            operation="minor", matrix=m3, position=MatrixPosition(row=1, col=1)
        )
        result = calculator.execute(request)
        assert result.scalar == -12
        assert result.matrix is None

    def test_minor_matrix(self, calculator, m3):
        """minor_matrix → матрица."""
        request = MatrixRequest(
            operation="minor_matrix", matrix=m3, position=MatrixPosition(row=1, col=1)
        )
        assert calculator.execute(request).matrix == [[1, 3], [7, 9]]

    def test_cofactor(self, calculator, m3):
        """cofactor → скаляр со знаком."""
        request = MatrixRequest(
            operation="cofactor", matrix=m3, position=MatrixPosition(row=0, col=1)
        )
        assert calculator.execute(request).scalar == 6

    def test_signed_minor_matrix(self, calculator, m3):
        """signed_minor_matrix → матрица со знаками по исходным координатам."""
        request = MatrixRequest(
            operation="signed_minor_matrix", matrix=m3, position=MatrixPosition(row=0, col=0)
        )
        assert calculator.execute(request).matrix == [[5, -6], [-8, 9]]

    def test_cofactor_matrix_and_adjugate(self, calculator):
        """cofactor_matrix и adjugate."""
        rows = [[1, 2], [3, 4]]
        assert calculator.execute(_request("cofactor_matrix", rows)).matrix == [[4, -3], [-2, 1]]
        assert calculator.execute(_request("adjugate", rows)).matrix == [[4, -2], [-3, 1]]

    def test_transpose(self, calculator):
        """transpose."""
        assert calculator.execute(_request("transpose", [[1, 2], [3, 4]])).matrix == [[1, 3], [2, 4]]

    def test_inverse(self, calculator):
        """inverse невырожденной матрицы."""
        result = calculator.execute(_request("inverse", [[2, 0], [0, 2]]))
        assert result.success
        assert result.matrix == [[0.5, 0], [0, 0.5]]

    def test_determinant(self, calculator):
        """determinant → скаляр."""
        result = calculator.execute(_request("determinant", [[1, 2], [3, 4]]))
        assert result.scalar == -2
        assert result.message == "determinant: -2.0"

    def test_all_operations_dispatched(self, calculator):
        """Каждая операция возвращает успешный результат на валидном входе."""
        rows = [[2, 1, 0], [1, 3, 1], [0, 1, 4]]
        for operation in MatrixOperation:
            request = _request(
                operation,
                rows,
                other=rows if operation.requires_other else None,
                position=(0, 0) if operation.requires_position else None,
            )
            result = calculator.execute(request)
            assert result.success, operation
            assert result.operation is operation
            assert (result.scalar is not None) == operation.returns_scalar


# =============================================================================
# ERRORS
# =============================================================================


class TestExecuteErrors:
    """Тесты политики ошибок execute()."""

    def test_singular_returns_failed_result(self, calculator):
        """SingularMatrixError → success=False с сообщением."""
        result = calculator.execute(_request("inverse", [[1, 2], [2, 4]]))
        assert not result.success
        assert result.error_kind == "SingularMatrixError"
        assert result.message == "Matrix is singular and cannot have an inverse."
        assert result.matrix is None

    def test_singular_logs_warning(self, calculator, caplog):
        """Singular логируется как WARNING."""
        with caplog.at_level(logging.WARNING, logger="src.calculator.matrix_calculator"):
            calculator.execute(_request("inverse", [[0.0]]))
        assert "Singular matrix" in caplog.text

    def test_dimension_mismatch_propagates(self, calculator):
        """DimensionMismatchError пробрасывается из execute()."""
        with pytest.raises(DimensionMismatchError):
            calculator.execute(_request("add", [[1, 2], [3, 4]], other=[[1]]))

    def test_position_out_of_matrix_propagates(self, calculator):
        """Позиция вне матрицы пробрасывается из execute()."""
        with pytest.raises(InvalidPositionError):
            calculator.execute(_request("minor", [[1, 2], [3, 4]], position=(5, 0)))

    def test_minor_of_one_by_one_propagates(self, calculator):
        """Minor от 1×1 пробрасывается из execute()."""
        with pytest.raises(MatrixShapeError):
            calculator.execute(_request("cofactor", [[1.0]], position=(0, 0)))

    def test_config_size_limit(self):
        """Сторона больше config.max_size → ValueError."""
        calculator = MatrixCalculator(CalculatorConfig(max_size=2))
        with pytest.raises(ValueError, match="Matrix size"):
            calculator.execute(_request("transpose", [[1, 2, 3], [4, 5, 6], [7, 8, 9]]))


# =============================================================================
# CONFIG
# =============================================================================


class TestCalculatorConfig:
    """Тесты границ CalculatorConfig: только сужение [1, 10]."""

    def test_defaults(self):
        """По умолчанию весь допустимый диапазон."""
        config = CalculatorConfig()
        assert (config.min_size, config.max_size) == (1, 10)

    def test_narrowing_allowed(self):
        """Сужение диапазона допустимо."""
        config = CalculatorConfig(min_size=2, max_size=4)
        assert (config.min_size, config.max_size) == (2, 4)

    @pytest.mark.parametrize(
        "min_size,max_size",
        [
            (1, 11),   # шире MATRIX_SIZE_MAX
            (0, 10),   # ниже MATRIX_SIZE_MIN
            (5, 3),    # min > max
        ],
    )
    def test_widening_or_inverted_rejected(self, min_size, max_size):
        """Расширение или перевёрнутый диапазон → ValueError при создании."""
        with pytest.raises(ValueError, match="Matrix size"):
            CalculatorConfig(min_size=min_size, max_size=max_size)


# =============================================================================
# HANDLE REQUEST
# =============================================================================


class TestHandleRequest:
    """Тесты handle_request(): ошибки фатальны для запроса, не для процесса."""

    def test_success(self, calculator):
        """Валидный payload."""
        result = calculator.handle_request(
            {"operation": "minor_matrix", "matrix": [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
             "position": {"row": 1, "col": 1}}
        )
        assert result.success
        assert result.matrix == [[1, 3], [7, 9]]

    def test_singular(self, calculator):
        """Singular → неуспешный результат."""
        result = calculator.handle_request({"operation": "inverse", "matrix": [[1, 2], [2, 4]]})
        assert result.error_kind == "SingularMatrixError"

    def test_contract_violation(self, calculator):
        """Нарушение JSON контракта."""
        result = calculator.handle_request({"operation": "add", "matrix": [[1]]})
        assert not result.success
        assert result.error_kind == "ContractValidationError"
        assert result.operation is MatrixOperation.ADD

    def test_unknown_operation(self, calculator):
        """Неизвестная операция."""
        result = calculator.handle_request({"operation": "exit", "matrix": [[1]]})
        assert result.error_kind == "ContractValidationError"
        assert result.operation is None

    def test_non_square(self, calculator):
        """Не квадратная матрица."""
        result = calculator.handle_request({"operation": "determinant", "matrix": [[1, 2]]})
        assert result.error_kind == "NonSquareMatrixError"

    def test_dimension_mismatch(self, calculator):
        """Несовпадение размерностей."""
        result = calculator.handle_request(
            {"operation": "multiply", "matrix": [[1, 2], [3, 4]], "other": [[1]]}
        )
        assert result.error_kind == "DimensionMismatchError"
        assert "columns" in result.message

    def test_invalid_position(self, calculator):
        """Позиция вне матрицы."""
        result = calculator.handle_request(
            {"operation": "cofactor", "matrix": [[1, 2], [3, 4]], "position": {"row": 2, "col": 0}}
        )
        assert result.error_kind == "InvalidPositionError"

    def test_config_size_limit(self):
        """Сторона больше config.max_size."""
        calculator = MatrixCalculator(CalculatorConfig(max_size=1))
        result = calculator.handle_request({"operation": "transpose", "matrix": [[1, 2], [3, 4]]})
        assert result.error_kind == "ValueError"

    def test_rejection_logged(self, calculator, caplog):
        """Отклонённый запрос логируется."""
        with caplog.at_level(logging.WARNING, logger="src.calculator.matrix_calculator"):
            calculator.handle_request({"operation": "determinant", "matrix": [[1, 2]]})
        assert "Request rejected: NonSquareMatrixError" in caplog.text

    def test_determinant_overflow_is_inf(self, calculator):
        """Переполнение determinant даёт inf, а не ошибку; to_dict() передаёт его как есть."""
        result = calculator.handle_request(
            {"operation": "determinant", "matrix": [[1e308, 0], [0, 1e308]]}
        )
        assert result.success
        assert math.isinf(result.scalar)
        assert result.to_dict()["scalar"] == math.inf


# =============================================================================
# FORMATTING
# =============================================================================


class TestFormatting:
    """Тесты форматирования."""

    def test_format_matrix_default(self):
        """Два знака, tab между значениями, newline между строками."""
        assert format_matrix([[1, 2.5], [-3, 0.333]]) == "1.00\t2.50\n-3.00\t0.33"

    def test_format_matrix_custom(self):
        """Кастомные precision и separator."""
        assert format_matrix([[1, 2]], precision=0, separator=" ") == "1 2"

    def test_format_matrix_negative_precision(self):
        """precision < 0 → ValueError."""
        with pytest.raises(ValueError):
            format_matrix([[1]], precision=-1)

    def test_format_scalar(self):
        """Скаляр как float."""
        assert format_scalar(8) == "8.0"
        assert format_scalar(-0.5) == "-0.5"

    def test_render_matrix_result(self, calculator):
        """render() матрицы."""
        result = calculator.execute(_request("inverse", [[2, 0], [0, 2]]))
        assert calculator.render(result) == "0.50\t-0.00\n-0.00\t0.50"

    def test_render_scalar_and_failure(self):
        """render() скаляра и ошибки."""
        ok = OperationResult(success=True, operation=MatrixOperation.DETERMINANT, scalar=-2.0)
        failed = OperationResult(
            success=False, operation=MatrixOperation.INVERSE,
            error_kind="SingularMatrixError", message="singular",
        )
        assert ok.render() == "-2.0"
        assert failed.render() == "singular"

    def test_render_uses_config(self):
        """render() учитывает config."""
        calculator = MatrixCalculator(CalculatorConfig(precision=1, column_separator=","))
        result = calculator.execute(_request("display", [[1, 2], [3, 4]]))
        assert calculator.render(result) == "1.0,2.0\n3.0,4.0"
