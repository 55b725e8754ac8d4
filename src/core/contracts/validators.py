"""
JSON Schema Contract Validators

Контракты запроса и результата конверсии, которыми ядро обменивается с
внешним слоем (CLI --json). Схемы поставляются внутри пакета
(src/core/contracts/schema/*.json) и читаются через importlib.resources,
поэтому работают и из установленного wheel.

Схемы:
- conversion_request.json
- conversion_result.json
"""

import json
from functools import lru_cache
from importlib.resources import files
from typing import Any, Dict, List

from jsonschema import Draft202012Validator, SchemaError
from pydantic import BaseModel

SCHEMA_PACKAGE = __package__
SCHEMA_SUBDIR = "schema"

REQUEST_SCHEMA = "conversion_request"
RESULT_SCHEMA = "conversion_result"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Чтение и meta-валидация схемы из ресурсов пакета.

    Результат кэшируется: каждая схема читается один раз за процесс.

    Args:
        schema_name: Имя схемы без расширения (например, 'conversion_request')

    Raises:
        FileNotFoundError: Если схема не поставляется с пакетом
        ValueError: Если файл не является валидной JSON Schema
    """
    resource = files(SCHEMA_PACKAGE).joinpath(SCHEMA_SUBDIR).joinpath(f"{schema_name}.json")
    if not resource.is_file():
        raise FileNotFoundError(f"Schema not found in package {SCHEMA_PACKAGE}: {schema_name}.json")

    schema = json.loads(resource.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e
    return schema


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор одного контракта.

    Основная точка входа: validate_model(model), проверяющая JSON
    представление Pydantic модели (так же, как оно уйдёт в stdout).
    """

    schema_name: str = ""

    def __init__(self):
        self.validator = Draft202012Validator(load_schema(self.schema_name))

    def validate_model(self, model: BaseModel) -> Dict[str, Any]:
        """
        Валидация Pydantic модели через её JSON представление.

        Returns:
            Провалидированный payload model.model_dump(mode="json")

        Raises:
            ValidationError: Если JSON представление не соответствует схеме
        """
        payload = model.model_dump(mode="json")
        self.validate(payload)
        return payload

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """
        Сообщения об ошибках вида "width: -1 is less than the minimum of 0",
        отсортированные по пути поля. Пустой список для валидных данных.
        """
        errors = sorted(self.validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
        return [
            f"{'.'.join(str(p) for p in error.absolute_path) or '<root>'}: {error.message}"
            for error in errors
        ]


class ConversionRequestValidator(ContractValidator):
    schema_name = REQUEST_SCHEMA


class ConversionResultValidator(ContractValidator):
    schema_name = RESULT_SCHEMA


def validate_conversion_request(data: Dict[str, Any]) -> None:
    """Валидация сырого conversion_request payload."""
    ConversionRequestValidator().validate(data)


def validate_conversion_result(data: Dict[str, Any]) -> None:
    """Валидация сырого conversion_result payload."""
    ConversionResultValidator().validate(data)
