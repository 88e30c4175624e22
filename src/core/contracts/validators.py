"""
Big Integer Contract

Контракт сериализованного BigInteger: {"sign": -1|0|1, "limbs": [...]},
limbs по основанию 10^9, младший первым.

Проверка в два шага:
1. JSON Schema big_integer.json (типы, диапазоны limbs, согласованность
   sign == 0 ⇔ limbs пуст) — через jsonschema
2. Инварианты, которые схема не выражает: старший limb ненулевой

Сериализация и восстановление идут через BigIntegerState, поэтому
dump() и load() дают данные, прошедшие оба шага.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Final

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

from src.core.domain.big_integer_state import BigIntegerState
from src.core.math.big_integer import BigInteger

logger = logging.getLogger(__name__)

# Каталог схем, поставляемых вместе с пакетом
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

BIG_INTEGER_SCHEMA: Final[str] = "big_integer"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema.

    Args:
        schema_name: Имя схемы без расширения
        schema_dir: Каталог схем (default: SCHEMA_DIR)

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-валидацию Draft 2020-12
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e
    return schema


# =============================================================================
# BIG INTEGER VALIDATOR
# =============================================================================


class BigIntegerValidator:
    """
    Валидатор сериализованного BigInteger.

    Схема проверяет форму данных, validator — ещё и каноничность limbs,
    чтобы один и тот же BigInteger имел единственное представление.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema = Draft202012Validator(load_schema(BIG_INTEGER_SCHEMA, schema_dir))

    def errors(self, data: Any) -> list[str]:
        """
        Все нарушения контракта в виде сообщений.

        Проверка каноничности выполняется только для данных,
        прошедших схему.
        """
        messages = [error.message for error in self._schema.iter_errors(data)]
        if messages:
            return messages

        limbs = data["limbs"]
        if limbs and limbs[-1] == 0:
            messages.append(
                f"most significant limb must be non-zero (limbs[{len(limbs) - 1}] == 0)"
            )
        return messages

    def is_valid(self, data: Any) -> bool:
        return not self.errors(data)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Первое (наиболее релевантное) нарушение
        """
        error = best_match(self._schema.iter_errors(data))
        if error is None:
            messages = self.errors(data)
            if messages:
                error = ValidationError(messages[0])
        if error is not None:
            logger.debug("big_integer contract rejected data: %s", error.message)
            raise error

    def dump(self, value: BigInteger) -> dict[str, Any]:
        """Сериализация BigInteger в данные контракта."""
        data = BigIntegerState.from_big_integer(value).to_contract()
        self.validate(data)
        return data

    def load(self, data: Any) -> BigInteger:
        """
        Восстановление BigInteger из данных контракта.

        Raises:
            ValidationError: Если данные нарушают контракт
        """
        self.validate(data)
        return BigIntegerState.model_validate(data).to_big_integer()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_integer(data: Any) -> None:
    """
    Валидация сериализованного BigInteger.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    BigIntegerValidator().validate(data)
