"""
Narrowing — безопасное сужение к фиксированной разрядности

Преобразование модуля в limbs к знаковому 64-битному целому с проверкой
переполнения, а также проверка области беззнакового 32-битного делителя
для операции взятия остатка.
"""

from typing import Final

from src.core.math.errors import InvalidArgumentError, Int64OverflowError
from src.core.math.limbs import RADIX, compare_magnitudes, limbs_from_int

# =============================================================================
# ГРАНИЦЫ НАТИВНЫХ ТИПОВ
# =============================================================================

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1
UINT32_MAX: Final[int] = 2**32 - 1

_INT64_MAX_LIMBS: Final[list[int]] = limbs_from_int(INT64_MAX)
_INT64_MIN_ABS_LIMBS: Final[list[int]] = limbs_from_int(INT64_MIN)


# =============================================================================
# INT64
# =============================================================================


def fits_int64(limbs: list[int], negative: bool) -> bool:
    """Проверка попадания значения в [INT64_MIN, INT64_MAX] по limbs."""
    bound = _INT64_MIN_ABS_LIMBS if negative else _INT64_MAX_LIMBS
    return compare_magnitudes(limbs, bound) <= 0


def narrow_to_int64(limbs: list[int], sign: int) -> int:
    """
    Сужение значения к знаковому 64-битному целому.

    Накапливает Σ limb_i × power. Множитель power перестаёт расти, как
    только следующее умножение на RADIX вышло бы за INT64_MAX: после
    проверки диапазона оставшиеся limbs гарантированно нулевые.

    Args:
        limbs: Модуль (младший limb первым)
        sign: -1, 0 или +1

    Returns:
        Значение в [INT64_MIN, INT64_MAX]

    Raises:
        Int64OverflowError: Если значение вне диапазона int64
    """
    if not fits_int64(limbs, sign < 0):
        raise Int64OverflowError("int64_t overflow")

    result = 0
    power = 1
    for limb in limbs:
        result += limb * power
        if power * RADIX <= INT64_MAX:
            power *= RADIX

    return result * sign


# =============================================================================
# UINT32
# =============================================================================


def validate_uint32(value: int, name: str) -> None:
    """
    Валидация беззнакового 32-битного аргумента.

    Raises:
        InvalidArgumentError: Если value вне [0, UINT32_MAX]
    """
    if value < 0 or value > UINT32_MAX:
        raise InvalidArgumentError(f"{name} must be in [0, {UINT32_MAX}], got {value}")
