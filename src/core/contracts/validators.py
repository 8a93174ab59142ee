"""
JSON Schema Contract Validators

Валидация входных JSON данных радиальных виджетов до передачи в
функции src.core.math. Использует библиотеку jsonschema (Draft 2020-12).

Схемы (src/core/contracts/schema/):
- interval.json: пара чисел [min, max]
- coordinate.json: пара чисел [x, y]
- radial_widget.json: параметры радиального виджета
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

logger = logging.getLogger(__name__)

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются как package data рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'interval')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

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


class IntervalValidator(ContractValidator):
    def __init__(self):
        super().__init__("interval")


class CoordinateValidator(ContractValidator):
    def __init__(self):
        super().__init__("coordinate")


class RadialWidgetValidator(ContractValidator):
    """
    Валидатор параметров радиального виджета.

    Порядок границ interval схемой не проверяется.
    """

    def __init__(self):
        super().__init__("radial_widget")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_interval(data: Any) -> None:
    """
    Валидация интервала [min, max].

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    IntervalValidator().validate(data)


def validate_coordinate(data: Any) -> None:
    """
    Валидация координат [x, y].

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CoordinateValidator().validate(data)


def validate_radial_widget(data: Dict[str, Any]) -> None:
    """
    Валидация параметров радиального виджета.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RadialWidgetValidator().validate(data)
