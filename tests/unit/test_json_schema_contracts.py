"""
Tests for Big Integer Contract

Проверяет:
- Загрузку и meta-валидацию схемы
- Нарушения required полей, типов и constraints (enum/minimum/maximum/if-then-else)
- Каноничность limbs (ненулевой старший limb)
- dump()/load() через Pydantic модель BigIntegerState
"""

import json
from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    BIG_INTEGER_SCHEMA,
    BigIntegerValidator,
    load_schema,
    validate_big_integer,
)
from src.core.domain import BigIntegerState
from src.core.math import BigInteger


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_big_integer():
    """Валидный снимок -1_000_000_007."""
    return {"sign": -1, "limbs": [7, 1]}


@pytest.fixture
def validator():
    return BigIntegerValidator()


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestLoadSchema:
    """Тесты загрузки схем"""

    def test_schema_is_valid_draft_2020_12(self):
        Draft202012Validator.check_schema(load_schema(BIG_INTEGER_SCHEMA))

    def test_schema_cached(self):
        assert load_schema(BIG_INTEGER_SCHEMA) is load_schema(BIG_INTEGER_SCHEMA)

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            BigIntegerValidator(tmp_path / "absent")

    def test_invalid_schema_rejected(self, tmp_path: Path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            load_schema("broken", tmp_path)


# =============================================================================
# BIG INTEGER CONTRACT
# =============================================================================


class TestBigIntegerContract:
    """Тесты контракта big_integer"""

    def test_valid(self, validator, valid_big_integer):
        validate_big_integer(valid_big_integer)
        assert validator.is_valid(valid_big_integer)
        assert validator.errors(valid_big_integer) == []

    def test_zero_valid(self):
        validate_big_integer({"sign": 0, "limbs": []})

    def test_missing_required(self):
        with pytest.raises(ValidationError):
            validate_big_integer({"sign": 1})

    def test_additional_property(self, valid_big_integer):
        with pytest.raises(ValidationError):
            validate_big_integer({**valid_big_integer, "base": 10})

    def test_sign_enum(self):
        with pytest.raises(ValidationError):
            validate_big_integer({"sign": 2, "limbs": [1]})

    def test_limb_bounds(self):
        with pytest.raises(ValidationError):
            validate_big_integer({"sign": 1, "limbs": [1_000_000_000]})
        with pytest.raises(ValidationError):
            validate_big_integer({"sign": 1, "limbs": [-1]})

    def test_limb_type(self):
        with pytest.raises(ValidationError):
            validate_big_integer({"sign": 1, "limbs": ["7"]})

    def test_zero_sign_requires_empty_limbs(self):
        with pytest.raises(ValidationError):
            validate_big_integer({"sign": 0, "limbs": [1]})

    def test_non_zero_sign_requires_limbs(self):
        with pytest.raises(ValidationError):
            validate_big_integer({"sign": 1, "limbs": []})

    @pytest.mark.parametrize("limbs", [[0], [5, 0], [1, 2, 0]])
    def test_most_significant_zero_limb_rejected(self, validator, limbs):
        data = {"sign": 1, "limbs": limbs}
        with pytest.raises(ValidationError, match="most significant limb"):
            validator.validate(data)
        assert not validator.is_valid(data)

    def test_inner_zero_limb_allowed(self, validator):
        assert validator.is_valid({"sign": 1, "limbs": [0, 0, 1]})

    def test_errors_reports_all_schema_violations(self, validator):
        messages = validator.errors({"sign": 5, "limbs": [-1, 1_000_000_000]})
        assert len(messages) >= 3
        assert all(isinstance(message, str) for message in messages)

    def test_errors_reports_canonical_form(self, validator):
        assert validator.errors({"sign": -1, "limbs": [3, 0]}) == [
            "most significant limb must be non-zero (limbs[1] == 0)"
        ]


# =============================================================================
# DUMP / LOAD
# =============================================================================


class TestDumpLoad:
    """Сериализация через BigIntegerState"""

    @pytest.mark.parametrize("text", ["0", "-1", "999999999", "-123456789012345678901234567890"])
    def test_dump_matches_contract(self, validator, text: str):
        data = validator.dump(BigInteger.from_string(text))
        validate_big_integer(data)
        assert data == BigIntegerState.from_big_integer(BigInteger.from_string(text)).to_contract()

    def test_dump_layout(self, validator):
        assert validator.dump(BigInteger(-1_000_000_007)) == {"sign": -1, "limbs": [7, 1]}
        assert validator.dump(BigInteger(0)) == {"sign": 0, "limbs": []}

    def test_load_restores_value(self, validator, valid_big_integer):
        assert validator.load(valid_big_integer) == -1_000_000_007

    def test_load_survives_json(self, validator):
        value = BigInteger.from_string("-98765432109876543210")
        restored = validator.load(json.loads(json.dumps(validator.dump(value))))
        assert restored == value

    def test_load_rejects_non_canonical(self, validator):
        with pytest.raises(ValidationError):
            validator.load({"sign": 1, "limbs": [1, 0]})
