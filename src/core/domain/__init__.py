"""
Domain models and value objects.

Contains immutable matrix calculator inputs: SquareMatrix, MatrixPosition,
MatrixRequest and the MatrixOperation enum.
"""

from src.core.domain.matrix import MatrixPosition, MatrixRequest, SquareMatrix
from src.core.domain.operation import MatrixOperation

__all__ = [
    # Operation enum
    "MatrixOperation",
    # Matrix models
    "SquareMatrix",
    "MatrixPosition",
    "MatrixRequest",
]
