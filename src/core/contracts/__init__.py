"""
Contract Validation Module

Контракт сериализованных значений BigInteger (JSON Schema + инварианты).
"""

from .validators import (
    BIG_INTEGER_SCHEMA,
    SCHEMA_DIR,
    BigIntegerValidator,
    load_schema,
    validate_big_integer,
)

__all__ = [
    # Constants
    "BIG_INTEGER_SCHEMA",
    "SCHEMA_DIR",
    # Classes
    "BigIntegerValidator",
    # Functions
    "load_schema",
    "validate_big_integer",
]
