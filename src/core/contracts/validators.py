"""
Contracts — проверка JSON payload на границе calculator

matrix_request.json описывает входной запрос, operation_result.json описывает
результат. Квадратность в JSON Schema не выражается, её проверяет SquareMatrix.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Читает *.json из schema_dir, проверяет их по meta-schema и кэширует."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: нет файла name.json
            ValueError: файл не является корректной Draft 2020-12 схемой
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._cache[name] = schema
        return schema


_LOADER = SchemaLoader()


# =============================================================================
# VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка dict по одной схеме; подкласс задаёт schema_name."""

    schema_name: str = ""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        self.schema = (loader or _LOADER).load_schema(self.schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """Raises jsonschema.ValidationError на первом нарушении."""
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """Все нарушения в виде "<path>: <message>", отсортированные по path."""
        errors = sorted(self._validator.iter_errors(data), key=lambda e: e.json_path)
        return [f"{e.json_path}: {e.message}" for e in errors]


class MatrixRequestValidator(ContractValidator):
    schema_name = "matrix_request"


class OperationResultValidator(ContractValidator):
    schema_name = "operation_result"


def validate_matrix_request(data: Dict[str, Any]) -> None:
    MatrixRequestValidator().validate(data)


def validate_operation_result(data: Dict[str, Any]) -> None:
    OperationResultValidator().validate(data)
