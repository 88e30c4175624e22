"""
BigInteger — знаковое целое произвольной точности

Представление sign-magnitude: флаг знака + список limbs по основанию
RADIX = 10^9 (младший limb первым).

Возможности:
- Конструирование из int и из строки в основании 2..36
- Сложение, вычитание, умножение "в столбик", деление "уголком" с остатком
- Остаток по беззнаковому 32-битному модулю
- Инкремент/декремент, полный порядок, сужение к int64

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Канонический ноль — пустой список limbs, знак неотрицательный
2. Старших нулевых limbs нет (remove_zeroes после каждой мутации)
3. Копия значения никогда не разделяет список limbs с оригиналом
4. Составные операторы (+=, -=, *=, /=) сначала вычисляют новый результат,
   затем заменяют состояние получателя

Знаковые комбинации операндов сводятся к случаю неотрицательных
операндов через отрицание: a * b при a < 0 вычисляется как -((-a) * b).
"""

from typing import Union

from src.core.math.base_conversion import (
    char_to_digit,
    digit_to_char,
    reversed_base_prefix,
    validate_base,
    validate_digits,
)
from src.core.math.errors import DivisionByZeroError, InvalidArgumentError
from src.core.math.limbs import (
    RADIX,
    compare_magnitudes,
    guess_quotient_digit,
    limbs_from_int,
    multiply_by_short,
    shift_limbs,
    trim_zeros,
)
from src.core.math.narrowing import narrow_to_int64, validate_uint32

IntLike = Union["BigInteger", int]

# Коды format(), соответствующие основаниям
_FORMAT_BASES = {"": 10, "d": 10, "x": 16, "X": 16, "o": 8, "b": 2}


class BigInteger:
    """
    Знаковое целое произвольной точности.

    Значение изменяемо только через составные операторы и методы
    increment/decrement/negate, поэтому экземпляры не хешируемы.

    Examples:
        >>> BigInteger(123) + 456
        BigInteger(579)
        >>> BigInteger.from_string("ff", 16).to_string(16, show_base=True)
        '0xff'
    """

    __slots__ = ("_limbs", "_negative")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: IntLike = 0):
        if isinstance(value, BigInteger):
            self._limbs: list[int] = list(value._limbs)
            self._negative: bool = value._negative
        elif isinstance(value, int):
            self._negative = value < 0
            self._limbs = limbs_from_int(value)
        else:
            raise TypeError(
                f"BigInteger() argument must be int or BigInteger, not {type(value).__name__}"
            )

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def _from_magnitude(cls, limbs: list[int], negative: bool = False) -> "BigInteger":
        """Сборка из уже корректных limbs (без копирования)."""
        result = cls()
        result._limbs = limbs
        result._negative = negative
        result.remove_zeroes()
        return result

    @classmethod
    def from_limbs(cls, limbs: list[int], negative: bool = False) -> "BigInteger":
        """
        Сборка значения из внешнего списка limbs.

        Args:
            limbs: Limbs младшим первым, каждый в [0, RADIX)
            negative: Флаг знака (игнорируется для нуля)

        Raises:
            InvalidArgumentError: Если какой-либо limb вне [0, RADIX)
        """
        for position, limb in enumerate(limbs):
            if not 0 <= limb < RADIX:
                raise InvalidArgumentError(
                    f"limb at position {position} must be in [0, {RADIX}), got {limb}"
                )
        return cls._from_magnitude(list(limbs), negative)

    @classmethod
    def from_string(cls, text: str, base: int = 10) -> "BigInteger":
        """
        Разбор строки в заданном основании.

        Сначала проверяются основание и все символы, затем значение
        вычисляется от младшего (правого) символа с накоплением степени
        основания.

        Args:
            text: Цифры основания base с необязательным ведущим '-'
            base: Основание в [2, 36]

        Returns:
            Разобранное значение

        Raises:
            InvalidBaseError: Если base вне [2, 36]
            InvalidDigitError: С индексом первого недопустимого символа
        """
        validate_base(base)
        validate_digits(text, base)

        negative = text.startswith("-")
        digits = text[1:] if negative else text

        result = cls()
        base_power = [1]
        for char in reversed(digits):
            result += cls._from_magnitude(multiply_by_short(base_power, char_to_digit(char)))
            base_power = multiply_by_short(base_power, base)

        return -result if negative else result

    # =========================================================================
    # MAGNITUDE STORE
    # =========================================================================

    def sign(self) -> int:
        """0 для нуля, иначе -1 или +1."""
        if not self._limbs:
            return 0
        return -1 if self._negative else 1

    def digit_at(self, position: int) -> int:
        """Limb в позиции position (0 — младший)."""
        return self._limbs[position]

    def signed_digit_at(self, position: int) -> int:
        """Limb, умноженный на знак значения."""
        return self.sign() * self.digit_at(position)

    def number_of_digits(self) -> int:
        """Количество limbs (0 для нуля)."""
        return len(self._limbs)

    def leading_digit(self) -> int:
        """
        Старший limb.

        Raises:
            IndexError: Для нулевого значения (limbs пуст)
        """
        if not self._limbs:
            raise IndexError("leading_digit() of zero value")
        return self._limbs[-1]

    @property
    def limbs(self) -> tuple[int, ...]:
        """Копия limbs (младший первым) только для чтения."""
        return tuple(self._limbs)

    def remove_zeroes(self) -> None:
        """Удаление старших нулевых limbs и нормализация знака нуля."""
        trim_zeros(self._limbs)
        if not self._limbs:
            self._negative = False

    def negate(self) -> None:
        """Смена знака на месте."""
        self._negative = not self._negative
        self.remove_zeroes()

    def abs_inplace(self) -> None:
        """Модуль на месте."""
        self._negative = False

    def _assign(self, other: "BigInteger") -> "BigInteger":
        self._limbs = list(other._limbs)
        self._negative = other._negative
        return self

    # =========================================================================
    # COMPARATOR
    # =========================================================================

    def _compare(self, other: "BigInteger") -> int:
        """
        Полный порядок: сначала знак, затем модуль с учётом знака.

        Для отрицательных значений больший модуль означает меньшее значение.
        """
        if self.sign() != other.sign():
            return -1 if self.sign() < other.sign() else 1
        return compare_magnitudes(self._limbs, other._limbs) * self.sign()

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.sign() == rhs.sign() and compare_magnitudes(self._limbs, rhs._limbs) == 0

    def __lt__(self, other: IntLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) < 0

    def __le__(self, other: IntLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) <= 0

    def __gt__(self, other: IntLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) > 0

    def __ge__(self, other: IntLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._compare(rhs) >= 0

    def __bool__(self) -> bool:
        return bool(self._limbs)

    # =========================================================================
    # ARITHMETIC CORE
    # =========================================================================

    def _add(self, rhs: "BigInteger") -> "BigInteger":
        """
        Сложение со знаковым переносом.

        Левый операнд приводится к большему по модулю; при отрицательном
        левом операнде a + b = -((-a) + (-b)). После этого левый операнд
        неотрицателен и не меньше правого по модулю, и правый входит
        в сумму через signed_digit_at.
        """
        if compare_magnitudes(self._limbs, rhs._limbs) == -1:
            return rhs._add(self)
        if self._negative:
            return -((-self)._add(-rhs))

        limbs: list[int] = []
        carry = 0
        i = 0
        while i < len(self._limbs) or carry != 0:
            digit = carry
            if i < len(self._limbs):
                digit += self._limbs[i]
            if i < len(rhs._limbs):
                digit += rhs.signed_digit_at(i)
            limb = digit % RADIX
            limbs.append(limb)
            carry = (digit - limb) // RADIX
            i += 1

        return BigInteger._from_magnitude(limbs)

    def _sub(self, rhs: "BigInteger") -> "BigInteger":
        if self._negative:
            return -((-self)._add(rhs))
        return self._add(-rhs)

    def _mul(self, rhs: "BigInteger") -> "BigInteger":
        """
        Умножение "в столбик": O(n·m) по числу limbs.

        Для каждого limb правого операнда левый умножается на этот limb,
        сдвигается на его позицию и прибавляется к сумме.
        """
        if self._negative:
            return -((-self)._mul(rhs))
        if rhs._negative:
            return -(self._mul(-rhs))

        result = BigInteger()
        for position, digit in enumerate(rhs._limbs):
            partial = shift_limbs(multiply_by_short(self._limbs, digit), position)
            result = result._add(BigInteger._from_magnitude(partial))

        result.remove_zeroes()
        return result

    def _divmod(self, rhs: "BigInteger") -> tuple["BigInteger", "BigInteger"]:
        """
        Деление "уголком" с остатком, усечение к нулю.

        Limbs делимого обрабатываются от старшего к младшему: очередной
        limb дописывается младшим в "хвост" делимого, цифра частного
        подбирается бинарным поиском, затем d × divisor вычитается из хвоста.
        Цифры частного копятся в обратном порядке и разворачиваются в конце.
        Финальный хвост — остаток.

        Returns:
            (частное, остаток); знак остатка совпадает со знаком делимого

        Raises:
            DivisionByZeroError: Если делитель равен нулю
        """
        if rhs.sign() == 0:
            raise DivisionByZeroError("division by zero")
        if self._negative:
            quotient, remainder = (-self)._divmod(rhs)
            return -quotient, -remainder
        if rhs._negative:
            quotient, remainder = self._divmod(-rhs)
            return -quotient, remainder

        reversed_quotient: list[int] = []
        trailing_dividend = BigInteger()
        for position in range(len(self._limbs) - 1, -1, -1):
            trailing_dividend._limbs.insert(0, self._limbs[position])
            trailing_dividend.remove_zeroes()

            digit = guess_quotient_digit(trailing_dividend._limbs, rhs._limbs)
            reversed_quotient.append(digit)
            trailing_dividend = trailing_dividend._sub(
                BigInteger._from_magnitude(multiply_by_short(rhs._limbs, digit))
            )

        reversed_quotient.reverse()
        return BigInteger._from_magnitude(reversed_quotient), trailing_dividend

    def divmod_truncated(self, other: IntLike) -> tuple["BigInteger", "BigInteger"]:
        """
        Частное и остаток при делении с усечением к нулю.

        Выполняется self == q * other + r, где |r| < |other|
        и знак r совпадает со знаком self.

        Raises:
            DivisionByZeroError: Если other равен нулю
        """
        return self._divmod(_require(other))

    def __add__(self, other: IntLike) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._add(rhs)

    def __radd__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._add(self)

    def __sub__(self, other: IntLike) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._sub(rhs)

    def __rsub__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._sub(self)

    def __mul__(self, other: IntLike) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._mul(rhs)

    def __rmul__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._mul(self)

    def __truediv__(self, other: IntLike) -> "BigInteger":
        """Деление с усечением к нулю (не деление с округлением вниз)."""
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._divmod(rhs)[0]

    def __rtruediv__(self, other: int) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._divmod(self)[0]

    def __iadd__(self, other: IntLike) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._assign(self._add(rhs))

    def __isub__(self, other: IntLike) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._assign(self._sub(rhs))

    def __imul__(self, other: IntLike) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._assign(self._mul(rhs))

    def __itruediv__(self, other: IntLike) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self._assign(self._divmod(rhs)[0])

    def __mod__(self, modulus: int) -> int:
        """
        Остаток по беззнаковому 32-битному модулю.

        ((a - (a / b) * b) + b) % b: истинный остаток деления,
        отрицательный остаток переносится в [0, b).

        Raises:
            InvalidArgumentError: Если modulus вне [0, 2^32)
            DivisionByZeroError: Если modulus == 0
        """
        if not isinstance(modulus, int):
            return NotImplemented
        validate_uint32(modulus, "modulus")
        if modulus == 0:
            raise DivisionByZeroError("modulo by zero")

        remainder = self - (self / modulus) * modulus
        return (remainder.to_int64() + modulus) % modulus

    def __neg__(self) -> "BigInteger":
        result = BigInteger(self)
        result.negate()
        return result

    def __pos__(self) -> "BigInteger":
        return BigInteger(self)

    def __abs__(self) -> "BigInteger":
        result = BigInteger(self)
        result.abs_inplace()
        return result

    # =========================================================================
    # INCREMENT / DECREMENT
    # =========================================================================

    def increment(self) -> "BigInteger":
        """Префиксный инкремент: self += 1, возвращает self."""
        self += 1
        return self

    def decrement(self) -> "BigInteger":
        """Префиксный декремент: self -= 1, возвращает self."""
        self -= 1
        return self

    def post_increment(self) -> "BigInteger":
        """Постфиксный инкремент: возвращает копию значения до изменения."""
        previous = BigInteger(self)
        self += 1
        return previous

    def post_decrement(self) -> "BigInteger":
        """Постфиксный декремент: возвращает копию значения до изменения."""
        previous = BigInteger(self)
        self -= 1
        return previous

    # =========================================================================
    # NARROWING CONVERSION
    # =========================================================================

    def to_int64(self) -> int:
        """
        Сужение к знаковому 64-битному целому.

        Raises:
            Int64OverflowError: Если значение вне [INT64_MIN, INT64_MAX]
        """
        return narrow_to_int64(self._limbs, self.sign())

    def __int__(self) -> int:
        return self.to_int64()

    # =========================================================================
    # FORMATTER
    # =========================================================================

    def to_string(self, base: int = 10, show_base: bool = False) -> str:
        """
        Строковое представление в основании base.

        Цифры получаются от младшей: digit = value - (value / base) * base,
        затем value /= base. Строка собирается в обратном порядке вместе
        с префиксом основания и знаком, затем разворачивается.

        Args:
            base: Основание в [2, 36]
            show_base: Добавить префикс "0" (8) или "0x" (16)

        Raises:
            InvalidBaseError: Если base вне [2, 36]

        Examples:
            >>> BigInteger(-255).to_string(16, show_base=True)
            '-0xff'
        """
        validate_base(base)

        reversed_result = ["0"] if self.sign() == 0 else []
        temp = abs(self)
        while temp.sign() != 0:
            quotient = temp / base
            digit = (temp - quotient * base).to_int64()
            reversed_result.append(digit_to_char(digit))
            temp = quotient

        if show_base:
            reversed_result.append(reversed_base_prefix(base))
        if self.sign() < 0:
            reversed_result.append("-")

        return "".join(reversed_result)[::-1]

    def __str__(self) -> str:
        return self.to_string(10)

    def __repr__(self) -> str:
        return f"BigInteger({self.to_string(10)})"

    def __format__(self, format_spec: str) -> str:
        """
        Поддержка format(): коды '', 'd', 'x', 'X', 'o', 'b' и флаг '#'.

        Знак предшествует префиксу основания: format(BigInteger(-255), '#x')
        даёт '-0xff'.
        """
        show_base = format_spec.startswith("#")
        code = format_spec[1:] if show_base else format_spec
        if code not in _FORMAT_BASES:
            raise ValueError(f"Unknown format code {format_spec!r} for BigInteger")

        text = self.to_string(_FORMAT_BASES[code], show_base=show_base)
        return text.upper() if code == "X" else text

    def __copy__(self) -> "BigInteger":
        return BigInteger(self)

    def __deepcopy__(self, memo: dict) -> "BigInteger":
        return BigInteger(self)


# =============================================================================
# ПРИВЕДЕНИЕ ОПЕРАНДОВ
# =============================================================================


def _coerce(value: object) -> BigInteger | None:
    """BigInteger или int → BigInteger; иначе None (NotImplemented)."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int):
        return BigInteger(value)
    return None


def _require(value: object) -> BigInteger:
    rhs = _coerce(value)
    if rhs is None:
        raise TypeError(f"unsupported operand type: {type(value).__name__}")
    return rhs
