"""
Base Conversion — таблицы цифр и валидация оснований

Вспомогательные функции для разбора и форматирования BigInteger
в системах счисления с основанием от 2 до 36.

Цифры выше 9 — латинские буквы: при разборе регистр не важен,
при форматировании используются строчные.
"""

import logging
from typing import Final

from src.core.math.errors import InvalidBaseError, InvalidDigitError

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = 36

# Алфавит цифр (индекс = значение цифры)
DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"

# Префиксы оснований (в прямом порядке)
BASE_PREFIXES: Final[dict[int, str]] = {8: "0", 16: "0x"}


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_base(base: int) -> None:
    """
    Проверка основания системы счисления.

    Raises:
        InvalidBaseError: Если base вне [MIN_BASE, MAX_BASE]
    """
    if base < MIN_BASE or base > MAX_BASE:
        logger.debug("Rejected base %s", base)
        raise InvalidBaseError(base)


def char_to_digit(char: str) -> int:
    """
    Значение символа-цифры.

    Returns:
        Значение в [0, 36) или -1 если символ не цифра ни в одной системе
    """
    if len(char) != 1 or not char.isascii():
        return -1
    return DIGITS.find(char.lower())


def digit_to_char(digit: int) -> str:
    """Символ для значения цифры в [0, 36)."""
    return DIGITS[digit]


def validate_digits(text: str, base: int) -> None:
    """
    Проверка, что каждый символ — допустимая цифра в base.

    Единственное исключение — ведущий '-'.

    Raises:
        InvalidDigitError: С индексом первого недопустимого символа
    """
    for index, char in enumerate(text):
        if index == 0 and char == "-":
            continue
        digit = char_to_digit(char)
        if digit == -1 or digit >= base:
            logger.debug("Invalid digit %r at %d for base %d", char, index, base)
            raise InvalidDigitError(index, char, base)


def reversed_base_prefix(base: int) -> str:
    """
    Префикс основания в обратном порядке символов.

    Используется форматтером, который собирает строку от младших
    разрядов и разворачивает её в конце.

    Examples:
        >>> reversed_base_prefix(16)
        'x0'
        >>> reversed_base_prefix(10)
        ''
    """
    return BASE_PREFIXES.get(base, "")[::-1]
