"""
Core math modules для matrix calculator

Математические примитивы над квадратными матрицами и валидация входных данных.
"""

# Errors
from src.core.math.errors import (
    DimensionMismatchError,
    InvalidPositionError,
    MatrixAlgebraError,
    MatrixShapeError,
    NonSquareMatrixError,
    SingularMatrixError,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Constants
    EPS_FLOAT_COMPARE_REL,
    EPS_MATRIX_COMPARE_ABS,
    MATRIX_SIZE_MAX,
    MATRIX_SIZE_MIN,
    # Validation
    is_valid_float,
    matrix_shape,
    validate_matrix_size,
    validate_position,
    validate_square_matrix,
    # Epsilon comparisons
    is_close,
    matrices_close,
)

# Matrix Algebra
from src.core.math.matrix_algebra import (
    Matrix,
    MatrixLike,
    add,
    adjugate,
    cofactor,
    cofactor_matrix,
    determinant,
    identity_matrix,
    inverse,
    minor,
    minor_matrix,
    multiply,
    signed_minor_matrix,
    subtract,
    transpose,
)

__all__ = [
    # Errors
    "MatrixAlgebraError",
    "MatrixShapeError",
    "NonSquareMatrixError",
    "DimensionMismatchError",
    "InvalidPositionError",
    "SingularMatrixError",
    # Numerical Safeguards — Constants
    "EPS_FLOAT_COMPARE_REL",
    "EPS_MATRIX_COMPARE_ABS",
    "MATRIX_SIZE_MAX",
    "MATRIX_SIZE_MIN",
    # Numerical Safeguards — Validation
    "is_valid_float",
    "matrix_shape",
    "validate_matrix_size",
    "validate_position",
    "validate_square_matrix",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
    "matrices_close",
    # Matrix Algebra — Types
    "Matrix",
    "MatrixLike",
    # Matrix Algebra — Functions
    "add",
    "adjugate",
    "cofactor",
    "cofactor_matrix",
    "determinant",
    "identity_matrix",
    "inverse",
    "minor",
    "minor_matrix",
    "multiply",
    "signed_minor_matrix",
    "subtract",
    "transpose",
]
