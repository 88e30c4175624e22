"""
Errors — типизированные ошибки длинной арифметики

Каждая ошибка наследует BigIntegerError и ближайшее встроенное исключение,
поэтому вызывающий код может ловить как доменный тип, так и стандартный
(ValueError / ZeroDivisionError / OverflowError).

Ошибки выбрасываются синхронно в точке вызова и никогда не
перехватываются внутри модуля.
"""


class BigIntegerError(Exception):
    """Базовая ошибка операций над BigInteger."""


class InvalidArgumentError(BigIntegerError, ValueError):
    """Аргумент вне допустимой области определения операции."""


class InvalidBaseError(InvalidArgumentError):
    """
    Основание системы счисления вне диапазона [2, 36].

    Attributes:
        base: Переданное основание
    """

    def __init__(self, base: int):
        self.base = base
        super().__init__(f"Invalid base: {base} (expected 2 <= base <= 36)")


class InvalidDigitError(InvalidArgumentError):
    """
    Символ строки не является цифрой в заданном основании.

    Attributes:
        index: Позиция первого недопустимого символа
        char: Сам символ
        base: Основание, в котором выполнялся разбор
    """

    def __init__(self, index: int, char: str, base: int):
        self.index = index
        self.char = char
        self.base = base
        super().__init__(
            f"Invalid symbol {char!r} at index {index} for base {base}"
        )


class DivisionByZeroError(BigIntegerError, ZeroDivisionError):
    """Деление или взятие остатка по нулевому делителю."""


class Int64OverflowError(BigIntegerError, OverflowError):
    """Значение не помещается в знаковое 64-битное целое."""
