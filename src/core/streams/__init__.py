"""
Text stream I/O для BigInteger.
"""

from .text_stream import (
    NumericBase,
    StreamFormat,
    format_for_stream,
    parse_token,
    read_big_integer,
    read_token,
    write_big_integer,
)

__all__ = [
    # Types
    "NumericBase",
    "StreamFormat",
    # Functions
    "format_for_stream",
    "parse_token",
    "read_big_integer",
    "read_token",
    "write_big_integer",
]
