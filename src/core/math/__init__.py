"""
Core math modules для big-num-arithmetic

Длинная арифметика: представление limbs, BigInteger, преобразование
оснований, сужение к фиксированной разрядности, checked-операции.
"""

# Limbs (Magnitude Store, Comparator, Long Division)
from src.core.math.limbs import (
    RADIX,
    compare_magnitudes,
    guess_quotient_digit,
    limbs_from_int,
    multiply_by_short,
    shift_limbs,
    trim_zeros,
)

# Errors
from src.core.math.errors import (
    BigIntegerError,
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidBaseError,
    InvalidDigitError,
    Int64OverflowError,
)

# Base Conversion
from src.core.math.base_conversion import (
    BASE_PREFIXES,
    MAX_BASE,
    MIN_BASE,
    char_to_digit,
    digit_to_char,
    validate_base,
)

# Narrowing
from src.core.math.narrowing import (
    INT64_MAX,
    INT64_MIN,
    UINT32_MAX,
    fits_int64,
    narrow_to_int64,
)

# BigInteger
from src.core.math.big_integer import BigInteger

# Checked operations
from src.core.math.checked import (
    Failure,
    FailureKind,
    Outcome,
    checked_divide,
    checked_divmod,
    checked_from_string,
    checked_modulo,
    checked_to_int64,
    checked_to_string,
)

__all__ = [
    # Limbs — Constants
    "RADIX",
    # Limbs — Functions
    "compare_magnitudes",
    "guess_quotient_digit",
    "limbs_from_int",
    "multiply_by_short",
    "shift_limbs",
    "trim_zeros",
    # Errors
    "BigIntegerError",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "InvalidBaseError",
    "InvalidDigitError",
    "Int64OverflowError",
    # Base Conversion
    "BASE_PREFIXES",
    "MAX_BASE",
    "MIN_BASE",
    "char_to_digit",
    "digit_to_char",
    "validate_base",
    # Narrowing
    "INT64_MAX",
    "INT64_MIN",
    "UINT32_MAX",
    "fits_int64",
    "narrow_to_int64",
    # BigInteger
    "BigInteger",
    # Checked — Types
    "Failure",
    "FailureKind",
    "Outcome",
    # Checked — Functions
    "checked_divide",
    "checked_divmod",
    "checked_from_string",
    "checked_modulo",
    "checked_to_int64",
    "checked_to_string",
]
