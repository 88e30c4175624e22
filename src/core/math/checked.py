"""
Checked — операции BigInteger с результатом вместо исключения

Каждая функция возвращает Outcome: либо значение, либо типизированный
Failure (INVALID_BASE, INVALID_DIGIT с индексом, DIVISION_BY_ZERO,
OVERFLOW). Цепочки операций строятся через Outcome.then(): первая
ошибка проходит до конца цепочки без вызова следующих шагов.

Исключения остаются основным интерфейсом BigInteger; этот модуль —
слой для кода, который предпочитает явную передачу результата.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from src.core.math.big_integer import BigInteger, IntLike
from src.core.math.errors import (
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidBaseError,
    InvalidDigitError,
    Int64OverflowError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


# =============================================================================
# FAILURE
# =============================================================================


class FailureKind(str, Enum):
    """Тип ошибки операции."""

    INVALID_BASE = "invalid_base"
    INVALID_DIGIT = "invalid_digit"
    INVALID_ARGUMENT = "invalid_argument"
    DIVISION_BY_ZERO = "division_by_zero"
    OVERFLOW = "overflow"


@dataclass(frozen=True)
class Failure:
    """Типизированная ошибка."""

    kind: FailureKind
    message: str

    # Только для INVALID_DIGIT: позиция недопустимого символа
    index: Optional[int] = None

    @classmethod
    def from_exception(cls, error: Exception) -> "Failure":
        """Перевод исключения BigInteger в Failure."""
        if isinstance(error, InvalidBaseError):
            return cls(FailureKind.INVALID_BASE, str(error))
        if isinstance(error, InvalidDigitError):
            return cls(FailureKind.INVALID_DIGIT, str(error), index=error.index)
        if isinstance(error, InvalidArgumentError):
            return cls(FailureKind.INVALID_ARGUMENT, str(error))
        if isinstance(error, DivisionByZeroError):
            return cls(FailureKind.DIVISION_BY_ZERO, str(error))
        if isinstance(error, Int64OverflowError):
            return cls(FailureKind.OVERFLOW, str(error))
        raise TypeError(f"Unsupported error type: {type(error).__name__}")


# =============================================================================
# OUTCOME
# =============================================================================


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Результат операции: value при успехе, failure при ошибке."""

    value: Optional[T] = None
    failure: Optional[Failure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def unwrap(self) -> T:
        """
        Значение успешного результата.

        Raises:
            ValueError: Если результат содержит ошибку
        """
        if self.failure is not None:
            raise ValueError(f"unwrap() on failed outcome: {self.failure.message}")
        return self.value  # type: ignore[return-value]

    def then(self, step: Callable[[T], "Outcome[U]"]) -> "Outcome[U]":
        """Следующий шаг цепочки; ошибка передаётся дальше без вызова step."""
        if self.failure is not None:
            return Outcome(failure=self.failure)
        return step(self.value)  # type: ignore[arg-type]


def _run(operation: Callable[[], Any]) -> Outcome[Any]:
    try:
        return Outcome(value=operation())
    except (InvalidArgumentError, DivisionByZeroError, Int64OverflowError) as error:
        failure = Failure.from_exception(error)
        logger.debug("Checked operation failed: %s (%s)", failure.kind.value, failure.message)
        return Outcome(failure=failure)


# =============================================================================
# CHECKED OPERATIONS
# =============================================================================


def checked_from_string(text: str, base: int = 10) -> Outcome[BigInteger]:
    """BigInteger.from_string с результатом вместо исключения."""
    return _run(lambda: BigInteger.from_string(text, base))


def checked_to_string(value: BigInteger, base: int = 10, show_base: bool = False) -> Outcome[str]:
    """BigInteger.to_string с результатом вместо исключения."""
    return _run(lambda: value.to_string(base, show_base))


def checked_divide(lhs: IntLike, rhs: IntLike) -> Outcome[BigInteger]:
    """Деление с усечением к нулю."""
    return _run(lambda: BigInteger(lhs) / rhs)


def checked_divmod(lhs: IntLike, rhs: IntLike) -> Outcome[tuple[BigInteger, BigInteger]]:
    """Частное и остаток (усечение к нулю)."""
    return _run(lambda: BigInteger(lhs).divmod_truncated(rhs))


def checked_modulo(value: IntLike, modulus: int) -> Outcome[int]:
    """Остаток по беззнаковому 32-битному модулю."""
    return _run(lambda: BigInteger(value) % modulus)


def checked_to_int64(value: BigInteger) -> Outcome[int]:
    """Сужение к int64."""
    return _run(value.to_int64)
