"""
Domain models and value objects.

Contains the serializable BigInteger snapshot model.
"""

from src.core.domain.big_integer_state import BigIntegerState

__all__ = [
    "BigIntegerState",
]
