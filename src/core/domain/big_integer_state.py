"""
BigIntegerState — сериализуемый снимок значения BigInteger

Immutable Pydantic модель: знак и limbs младшим первым.
Соответствует контракту big_integer.json (src/core/contracts/schema).

Инварианты модели совпадают с инвариантами BigInteger:
- каждый limb в [0, RADIX)
- старшего нулевого limb нет
- sign == 0 тогда и только тогда, когда limbs пуст
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.math.big_integer import BigInteger
from src.core.math.limbs import RADIX


# =============================================================================
# BIG INTEGER STATE MODEL
# =============================================================================


class BigIntegerState(BaseModel):
    """
    Снимок значения BigInteger.

    Immutable модель (frozen=True). Восстановление значения —
    to_big_integer(), снятие снимка — from_big_integer().
    """

    sign: int = Field(..., ge=-1, le=1, description="Знак: -1, 0 или +1")
    limbs: list[int] = Field(
        default_factory=list, description="Limbs по основанию 10^9, младший первым"
    )

    model_config = {"frozen": True}

    @field_validator("limbs")
    @classmethod
    def validate_limbs(cls, v: list[int]) -> list[int]:
        """Каждый limb в [0, RADIX), старший limb ненулевой."""
        for position, limb in enumerate(v):
            if limb < 0 or limb >= RADIX:
                raise ValueError(f"limb at position {position} must be in [0, {RADIX}), got {limb}")
        if v and v[-1] == 0:
            raise ValueError("most significant limb must be non-zero")
        return v

    @model_validator(mode="after")
    def validate_sign_matches_limbs(self) -> "BigIntegerState":
        """sign == 0 ⇔ limbs пуст."""
        if (self.sign == 0) != (not self.limbs):
            raise ValueError(f"sign {self.sign} inconsistent with {len(self.limbs)} limbs")
        return self

    @classmethod
    def from_big_integer(cls, value: BigInteger) -> "BigIntegerState":
        """Снимок значения."""
        return cls(sign=value.sign(), limbs=list(value.limbs))

    def to_big_integer(self) -> BigInteger:
        """Восстановление значения из снимка."""
        return BigInteger.from_limbs(self.limbs, negative=self.sign < 0)

    def to_contract(self) -> dict[str, Any]:
        """Данные для валидации по контракту big_integer."""
        return self.model_dump()
