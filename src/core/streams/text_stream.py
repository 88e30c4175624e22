"""
Text Stream — форматирование и разбор BigInteger в текстовых потоках

Режим потока задаётся StreamFormat: основание (DEC/OCT/HEX) и флаг
show_base. Поведение повторяет форматирование нативных целых:
- show_base + HEX/OCT: знак, затем префикс, затем модуль ("-0xff", "-0377")
- без show_base: знак и модуль в основании режима ("-ff")
- DEC: префикса нет никогда

Разбор читает одну лексему, разделённую пробельными символами,
отделяет ведущий '-' в множитель знака, снимает префикс "0x"/"0X" (HEX)
или "0" (OCT) только если он действительно присутствует, разбирает
остаток в основании режима и применяет знак умножением.
"""

import logging
from enum import Enum
from typing import TextIO

from pydantic import BaseModel, Field

from src.core.math.big_integer import BigInteger

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class NumericBase(int, Enum):
    """Основание режима потока."""

    DEC = 10
    OCT = 8
    HEX = 16


# =============================================================================
# STREAM FORMAT
# =============================================================================


class StreamFormat(BaseModel):
    """
    Режим текстового потока.

    Immutable модель (frozen=True): смена режима создаёт новый экземпляр
    через model_copy(update=...).
    """

    base: NumericBase = Field(NumericBase.DEC, description="Основание (DEC/OCT/HEX)")
    show_base: bool = Field(False, description="Выводить префикс основания")

    model_config = {"frozen": True}

    @property
    def prefix(self) -> str:
        """Литеральный префикс основания ("" для DEC)."""
        if self.base is NumericBase.HEX:
            return "0x"
        if self.base is NumericBase.OCT:
            return "0"
        return ""


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_for_stream(value: BigInteger, fmt: StreamFormat | None = None) -> str:
    """
    Строковое представление value в режиме fmt.

    Examples:
        >>> format_for_stream(BigInteger(-255), StreamFormat(base=NumericBase.HEX, show_base=True))
        '-0xff'
    """
    fmt = fmt or StreamFormat()
    return value.to_string(int(fmt.base), show_base=fmt.show_base)


def write_big_integer(stream: TextIO, value: BigInteger, fmt: StreamFormat | None = None) -> None:
    """Запись value в поток в режиме fmt."""
    stream.write(format_for_stream(value, fmt))


# =============================================================================
# РАЗБОР
# =============================================================================


def read_token(stream: TextIO) -> str:
    """
    Чтение одной лексемы, разделённой пробельными символами.

    Ведущие пробельные символы пропускаются; первый пробельный символ
    после лексемы поглощается.

    Raises:
        EOFError: Если поток закончился до начала лексемы
    """
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    if not char:
        raise EOFError("no token available in stream")

    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


def _strip_prefix(digits: str, fmt: StreamFormat) -> str:
    if fmt.base is NumericBase.HEX and digits[:2].lower() == "0x":
        return digits[2:]
    if fmt.base is NumericBase.OCT and len(digits) > 1 and digits.startswith("0"):
        return digits[1:]
    if fmt.base is not NumericBase.DEC:
        logger.debug("Token %r has no %s prefix, parsing as is", digits, fmt.base.name)
    return digits


def parse_token(token: str, fmt: StreamFormat | None = None) -> BigInteger:
    """
    Разбор лексемы в режиме fmt.

    Args:
        token: Лексема вида "-0xff", "0377", "ff", "-123"
        fmt: Режим потока (default: DEC)

    Raises:
        InvalidDigitError: Если остаток лексемы содержит недопустимые символы
            (индекс отсчитывается от начала остатка)
    """
    fmt = fmt or StreamFormat()

    sign = 1
    digits = token
    if digits.startswith("-"):
        sign = -1
        digits = digits[1:]

    result = BigInteger.from_string(_strip_prefix(digits, fmt), int(fmt.base))
    result *= sign
    return result


def read_big_integer(stream: TextIO, fmt: StreamFormat | None = None) -> BigInteger:
    """Чтение и разбор следующей лексемы потока."""
    return parse_token(read_token(stream), fmt)
