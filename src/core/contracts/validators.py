"""
JSON Schema Contract Validators

Модуль для валидации fraction string контрактов HalfInteger.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- fraction.json (одна каноническая fraction string)
- fraction_vector.json (вектор fraction strings)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from referencing import Registry, Resource


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'fraction')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema

    def registry(self) -> Registry:
        """
        Registry всех схем каталога по их $id.

        Нужен для разрешения $ref между файлами (fraction_vector → fraction).
        """
        resources = []
        for schema_path in sorted(self._schema_dir.glob("*.json")):
            schema = self.load_schema(schema_path.stem)
            resources.append((schema["$id"], Resource.from_contents(schema)))
        return Registry().with_resources(resources)


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(
            self.schema, registry=_SCHEMA_LOADER.registry()
        )

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class FractionValidator(ContractValidator):
    """Валидатор одной канонической fraction string."""

    def __init__(self):
        super().__init__("fraction")


class FractionVectorValidator(ContractValidator):
    """Валидатор вектора fraction strings."""

    def __init__(self):
        super().__init__("fraction_vector")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_fraction(data: str) -> None:
    """
    Валидация fraction string.

    Raises:
        ValidationError: Если строка не в канонической форме
    """
    FractionValidator().validate(data)


def validate_fraction_vector(data: list[str]) -> None:
    """
    Валидация вектора fraction strings.

    Raises:
        ValidationError: Если данные не массив или элемент неканоничен
    """
    FractionVectorValidator().validate(data)
