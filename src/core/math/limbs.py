"""
Limbs — примитивы хранения модуля числа

Модуль числа хранится как список limbs по основанию RADIX = 10^9,
младший limb первым. Все функции работают с неотрицательными модулями
и не знают о знаке.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый limb лежит в [0, RADIX)
2. Канонический ноль — пустой список
3. После любой мутации старшие нулевые limbs удаляются (trim_zeros)
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание внутреннего представления (один limb = 9 десятичных цифр)
RADIX: Final[int] = 1_000_000_000


# =============================================================================
# MAGNITUDE STORE
# =============================================================================


def limbs_from_int(value: int) -> list[int]:
    """
    Разложение модуля целого числа на limbs.

    Знак отбрасывается: берётся abs(value), затем повторно
    value mod RADIX → очередной limb, value //= RADIX.

    Examples:
        >>> limbs_from_int(0)
        []
        >>> limbs_from_int(-1_000_000_007)
        [7, 1]
    """
    magnitude = abs(value)
    limbs: list[int] = []
    while magnitude != 0:
        magnitude, limb = divmod(magnitude, RADIX)
        limbs.append(limb)
    return limbs


def trim_zeros(limbs: list[int]) -> list[int]:
    """
    Удаление старших нулевых limbs (in place).

    Returns:
        Тот же список (для удобства цепочек)
    """
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


def shift_limbs(limbs: list[int], positions: int) -> list[int]:
    """Сдвиг влево на positions limbs (умножение на RADIX^positions)."""
    if not limbs:
        return []
    return [0] * positions + limbs


# =============================================================================
# COMPARATOR
# =============================================================================


def compare_magnitudes(lhs: list[int], rhs: list[int]) -> int:
    """
    Сравнение модулей.

    Более короткий список меньше; при равной длине limbs сравниваются
    от старшего к младшему, первое расхождение решает.

    Returns:
        -1 если |lhs| < |rhs|
         0 если |lhs| == |rhs|
        +1 если |lhs| > |rhs|
    """
    if len(lhs) != len(rhs):
        return -1 if len(lhs) < len(rhs) else 1

    for i in range(len(lhs) - 1, -1, -1):
        if lhs[i] != rhs[i]:
            return -1 if lhs[i] < rhs[i] else 1

    return 0


# =============================================================================
# MULTIPLY-BY-SHORT
# =============================================================================


def multiply_by_short(limbs: list[int], factor: int) -> list[int]:
    """
    Умножение модуля на один limb с переносом.

    Args:
        limbs: Модуль (младший limb первым)
        factor: Множитель в [0, RADIX] (основание системы счисления
            при разборе строки тоже проходит через эту функцию)

    Returns:
        Новый список limbs без старших нулей
    """
    result: list[int] = []
    carry = 0
    i = 0
    while i < len(limbs) or carry != 0:
        digit = carry
        if i < len(limbs):
            digit += limbs[i] * factor
        result.append(digit % RADIX)
        carry = digit // RADIX
        i += 1
    return trim_zeros(result)


# =============================================================================
# LONG DIVISION
# =============================================================================


def guess_quotient_digit(dividend: list[int], divisor: list[int]) -> int:
    """
    Подбор очередной цифры частного при делении "уголком".

    Бинарный поиск по [0, RADIX) единственного d такого, что
    d × divisor <= dividend < (d + 1) × divisor. Предикат монотонен,
    сравнения выполняются над модулями произвольной длины.

    Args:
        dividend: Текущий "хвост" делимого
        divisor: Ненулевой делитель

    Returns:
        Цифра частного в [0, RADIX)
    """
    lower = 0
    upper = RADIX
    while lower + 1 < upper:
        middle = (lower + upper) // 2
        if compare_magnitudes(multiply_by_short(divisor, middle), dividend) > 0:
            upper = middle
        else:
            lower = middle
    return lower
